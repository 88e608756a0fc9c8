"""Top-level statement splitting for single-line diagram text."""

from __future__ import annotations

from enum import Enum, auto

_QUOTES = frozenset("\"'`")

# Bracket kind index: 0 = (), 1 = [], 2 = {}
_OPENERS = {"(": 0, "[": 1, "{": 2}
_CLOSERS = {")": 0, "]": 1, "}": 2}


class _State(Enum):
    TOP = auto()
    QUOTED = auto()
    ESCAPED = auto()  # inside a quote, right after a backslash


class StatementSplitter:
    """Split text on a delimiter that is outside quotes and brackets."""

    def __init__(self, text: str, delimiter: str = ";") -> None:
        self._text = text
        self._delimiter = delimiter
        self._state = _State.TOP
        self._quote = ""
        self._depths = [0, 0, 0]
        self._buffer: list[str] = []
        self._statements: list[str] = []

    def split(self) -> list[str]:
        """Scan the full text and return the trimmed, non-empty statements."""
        for ch in self._text:
            if self._state == _State.TOP:
                self._scan_top(ch)
            elif self._state == _State.QUOTED:
                self._scan_quoted(ch)
            else:
                self._buffer.append(ch)
                self._state = _State.QUOTED
        # An unterminated quote swallows the rest of the input
        self._flush()
        return self._statements

    def _scan_top(self, ch: str) -> None:
        if ch in _QUOTES:
            self._quote = ch
            self._state = _State.QUOTED
            self._buffer.append(ch)
            return

        if ch in _OPENERS:
            self._depths[_OPENERS[ch]] += 1
        elif ch in _CLOSERS:
            idx = _CLOSERS[ch]
            # Unmatched closers are plain text
            if self._depths[idx] > 0:
                self._depths[idx] -= 1
        elif ch == self._delimiter and not any(self._depths):
            self._flush()
            return

        self._buffer.append(ch)

    def _scan_quoted(self, ch: str) -> None:
        self._buffer.append(ch)
        if ch == "\\":
            self._state = _State.ESCAPED
        elif ch == self._quote:
            self._quote = ""
            self._state = _State.TOP

    def _flush(self) -> None:
        statement = "".join(self._buffer).strip()
        if statement:
            self._statements.append(statement)
        self._buffer = []


def split_statements(text: str, delimiter: str = ";") -> list[str]:
    """Convenience function: split text into top-level statements."""
    return StatementSplitter(text, delimiter).split()
