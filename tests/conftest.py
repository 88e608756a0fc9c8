"""Shared test fixtures and helpers."""

from __future__ import annotations

import stat
from pathlib import Path

import pytest

from mermaidlang.lexer import tokenize_line
from mermaidlang.tokens import Token, TokenKind


@pytest.fixture
def lex():
    """Return a helper that tokenizes one line with a fresh scan state."""

    def _lex(line: str) -> list[Token]:
        return tokenize_line(line)

    return _lex


@pytest.fixture
def make_parser(tmp_path: Path):
    """Return a helper that writes an executable shell-script parser."""

    def _make(body: str, name: str = "parser") -> Path:
        path = tmp_path / "bin" / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(f"#!/bin/sh\n{body}\n")
        path.chmod(path.stat().st_mode | stat.S_IEXEC)
        return path

    return _make


def assert_kinds(tokens: list[Token], expected: list[TokenKind]) -> None:
    """Assert that the token kinds match the expected list."""
    actual = [t.kind for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_texts(tokens: list[Token], expected: list[str]) -> None:
    """Assert that the token texts match the expected list."""
    actual = [t.text for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def pairs(tokens: list[Token]) -> list[tuple[str, str]]:
    """Return (kind value, text) pairs for compact comparisons."""
    return [(t.kind.value, t.text) for t in tokens]
