"""Minimal LSP server: diagnostics, formatting, and semantic highlighting."""

from __future__ import annotations

import argparse

from lsprotocol.types import (
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_OPEN,
    TEXT_DOCUMENT_FORMATTING,
    TEXT_DOCUMENT_SEMANTIC_TOKENS_FULL,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidOpenTextDocumentParams,
    DocumentFormattingParams,
    Position,
    PublishDiagnosticsParams,
    Range,
    SemanticTokens,
    SemanticTokensLegend,
    SemanticTokensParams,
    SemanticTokenTypes,
    TextDocumentSyncKind,
    TextEdit,
)
from pygls.lsp.server import LanguageServer
from pygls.workspace import TextDocument

from mermaidlang import diagnostics
from mermaidlang.cli import parse_command_arg
from mermaidlang.diagnostics import offset_to_position
from mermaidlang.errors import ParseServiceError
from mermaidlang.format import pretty_print
from mermaidlang.lexer import tokenize
from mermaidlang.service import ParseService, lint
from mermaidlang.tokens import TokenKind

# Highlight kinds mapped onto standard LSP semantic token types
_SEMANTIC_TYPES = {
    TokenKind.COMMENT: SemanticTokenTypes.Comment,
    TokenKind.STRING: SemanticTokenTypes.String,
    TokenKind.PUNCTUATION: SemanticTokenTypes.Operator,
    TokenKind.OPERATOR: SemanticTokenTypes.Operator,
    TokenKind.KEYWORD: SemanticTokenTypes.Keyword,
    TokenKind.VARIABLE_NAME: SemanticTokenTypes.Variable,
    TokenKind.NUMBER: SemanticTokenTypes.Number,
}
TOKEN_TYPES = list(dict.fromkeys(t.value for t in _SEMANTIC_TYPES.values()))


class MermaidLanguageServer(LanguageServer):
    parse_service: ParseService | None = None


server = MermaidLanguageServer(
    "mermaidlang-lsp", "0.1.0", text_document_sync_kind=TextDocumentSyncKind.Full
)


def _position(doc: TextDocument, lines: list[str], offset: int) -> Position:
    """Convert a character offset to a position in the client's column units."""
    line, col = offset_to_position(doc.source, offset)
    character = doc.position_codec.client_num_units(lines[line][:col])
    return Position(line=line, character=character)


def _range(doc: TextDocument, start: int, end: int) -> Range:
    lines = doc.source.split("\n")
    return Range(start=_position(doc, lines, start), end=_position(doc, lines, end))


def _to_lsp(diag: diagnostics.Diagnostic, doc: TextDocument) -> Diagnostic:
    return Diagnostic(
        range=_range(doc, diag.start, diag.end),
        message=diag.message,
        severity=DiagnosticSeverity.Error,
        source="mermaidlang",
    )


def _validate(ls: LanguageServer, uri: str, service: ParseService | None) -> None:
    """Run the external parser over the document and publish diagnostics."""
    doc = ls.workspace.get_text_document(uri)
    lsp_diagnostics: list[Diagnostic] = []

    if service is not None:
        try:
            diag = lint(doc.source, service)
        except ParseServiceError as exc:
            lsp_diagnostics.append(
                Diagnostic(
                    range=_range(doc, 0, 0),
                    message=exc.message,
                    severity=DiagnosticSeverity.Warning,
                    source="mermaidlang",
                )
            )
        else:
            if diag is not None:
                lsp_diagnostics.append(_to_lsp(diag, doc))

    ls.text_document_publish_diagnostics(
        PublishDiagnosticsParams(uri=uri, diagnostics=lsp_diagnostics)
    )


def _format_edits(doc: TextDocument) -> list[TextEdit]:
    source = doc.source
    formatted = pretty_print(source)
    if formatted == source:
        return []
    return [TextEdit(range=_range(doc, 0, len(source)), new_text=formatted)]


def _semantic_data(doc: TextDocument) -> list[int]:
    """Encode highlighted tokens as LSP relative semantic token data."""
    codec = doc.position_codec
    data: list[int] = []
    prev_line = 0
    prev_col = 0
    for line_idx, tokens in enumerate(tokenize(doc.source)):
        col = 0
        for tok in tokens:
            width = codec.client_num_units(tok.text)
            if tok.kind is not TokenKind.NONE:
                delta_line = line_idx - prev_line
                delta_col = col - prev_col if delta_line == 0 else col
                token_type = TOKEN_TYPES.index(_SEMANTIC_TYPES[tok.kind].value)
                data.extend([delta_line, delta_col, width, token_type, 0])
                prev_line, prev_col = line_idx, col
            col += width
    return data


@server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: MermaidLanguageServer, params: DidOpenTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri, ls.parse_service)


@server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: MermaidLanguageServer, params: DidChangeTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri, ls.parse_service)


@server.feature(TEXT_DOCUMENT_FORMATTING)
def formatting(ls: MermaidLanguageServer, params: DocumentFormattingParams) -> list[TextEdit]:
    doc = ls.workspace.get_text_document(params.text_document.uri)
    return _format_edits(doc)


@server.feature(
    TEXT_DOCUMENT_SEMANTIC_TOKENS_FULL,
    SemanticTokensLegend(token_types=TOKEN_TYPES, token_modifiers=[]),
)
def semantic_tokens(ls: MermaidLanguageServer, params: SemanticTokensParams) -> SemanticTokens:
    doc = ls.workspace.get_text_document(params.text_document.uri)
    return SemanticTokens(data=_semantic_data(doc))


def main(argv: list[str] | None = None) -> None:
    p = argparse.ArgumentParser(prog="mermaidlang-lsp")
    p.add_argument("--parser", metavar="CMD", help="Parser command line")
    p.add_argument("--parser-timeout", type=float, default=5.0, metavar="SECS")
    args = p.parse_args(argv)

    command: list[str] | None = None
    if args.parser:
        try:
            command = parse_command_arg(args.parser)
        except argparse.ArgumentTypeError as exc:
            p.error(str(exc))
    server.parse_service = ParseService.discover(command, args.parser_timeout)
    server.start_io()
