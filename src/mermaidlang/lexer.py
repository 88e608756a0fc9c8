"""Line tokenizer for syntax highlighting.

The host drives ``next_token`` one token at a time over a ``LineStream``,
threading a caller-owned ``ScanState`` between calls. The helpers below do
the same for whole lines and documents.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from mermaidlang.stream import LineStream
from mermaidlang.tokens import ARROWS, KEYWORDS, ScanState, Token, TokenKind, start_state

_WORD_RE = re.compile(r"[A-Za-z_]\w*", re.ASCII)
_NUMBER_RE = re.compile(r"\d+", re.ASCII)


def next_token(stream: LineStream, state: ScanState) -> Token:
    """Consume one token at the stream position and classify it."""
    stream.start = stream.pos
    kind = _classify(stream, state)
    # A colon at end of line leaves no message text to consume
    if stream.eol():
        state.in_string = False
    return Token(stream.current(), kind)


def _classify(stream: LineStream, state: ScanState) -> TokenKind:
    if stream.eat_whitespace():
        return TokenKind.NONE

    if stream.match("%%") is not None:
        stream.skip_to_end()
        return TokenKind.COMMENT

    # Message text: everything after the colon is opaque prose
    if state.in_string:
        stream.skip_to_end()
        state.in_string = False
        return TokenKind.STRING

    if stream.peek() == ":":
        stream.advance()
        state.in_string = True
        return TokenKind.PUNCTUATION

    for arrow in ARROWS:
        if stream.match(arrow) is not None:
            return TokenKind.OPERATOR

    word = stream.match(_WORD_RE)
    if word is not None:
        return TokenKind.KEYWORD if word in KEYWORDS else TokenKind.VARIABLE_NAME

    if stream.match(_NUMBER_RE) is not None:
        return TokenKind.NUMBER

    stream.advance()
    return TokenKind.NONE


def tokenize_line(line: str, state: ScanState | None = None) -> list[Token]:
    """Tokenize a full line. The concatenated token texts equal ``line``."""
    if state is None:
        state = start_state()
    stream = LineStream(line)
    tokens: list[Token] = []
    while not stream.eol():
        tokens.append(next_token(stream, state))
    return tokens


def tokenize_lines(lines: Iterable[str]) -> list[list[Token]]:
    """Tokenize consecutive lines sharing one scan state."""
    state = start_state()
    return [tokenize_line(line, state) for line in lines]


def tokenize(source: str) -> list[list[Token]]:
    """Convenience function: tokenize a document into per-line token lists."""
    return tokenize_lines(source.split("\n"))
