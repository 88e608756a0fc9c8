"""Mermaid-style diagram language front end: tokenizer, formatter, diagnostics."""

from __future__ import annotations

from mermaidlang.diagnostics import Diagnostic, map_diagnostic
from mermaidlang.format import pretty_print
from mermaidlang.lexer import next_token, tokenize, tokenize_line
from mermaidlang.statements import split_statements
from mermaidlang.tokens import ScanState, Token, TokenKind

__version__ = "0.1.0"

__all__ = [
    "Diagnostic",
    "ScanState",
    "Token",
    "TokenKind",
    "map_diagnostic",
    "next_token",
    "pretty_print",
    "split_statements",
    "tokenize",
    "tokenize_line",
]
