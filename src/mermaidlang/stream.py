"""Cursor over a single line of source text."""

from __future__ import annotations

import re


class LineStream:
    """Scan position within one immutable line.

    ``start`` marks the beginning of the token being read and ``pos`` the
    next unread character; ``current()`` is the text between them.
    """

    def __init__(self, line: str) -> None:
        self.string = line
        self.pos = 0
        self.start = 0

    def eol(self) -> bool:
        return self.pos >= len(self.string)

    def peek(self) -> str:
        """Return the next character without consuming it, or "" at end of line."""
        if self.pos < len(self.string):
            return self.string[self.pos]
        return ""

    def advance(self) -> str:
        """Consume and return one character, or "" at end of line."""
        if self.pos < len(self.string):
            ch = self.string[self.pos]
            self.pos += 1
            return ch
        return ""

    def eat_whitespace(self) -> bool:
        """Consume a whitespace run. Return True if anything was consumed."""
        before = self.pos
        while self.pos < len(self.string) and self.string[self.pos].isspace():
            self.pos += 1
        return self.pos > before

    def match(self, pattern: str | re.Pattern[str]) -> str | None:
        """Consume a literal or an anchored pattern at the cursor.

        Returns the matched text, or None (and consumes nothing) on failure.
        """
        if isinstance(pattern, str):
            if self.string.startswith(pattern, self.pos):
                self.pos += len(pattern)
                return pattern
            return None
        m = pattern.match(self.string, self.pos)
        if m is None or m.end() == self.pos:
            return None
        self.pos = m.end()
        return m.group()

    def skip_to_end(self) -> None:
        self.pos = len(self.string)

    def current(self) -> str:
        return self.string[self.start : self.pos]
