"""Map free-text parser errors onto source ranges."""

from __future__ import annotations

import re
from dataclasses import dataclass

_LINE_RE = re.compile(r"line\s+(\d+)", re.IGNORECASE)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """An error marker over the half-open offset range [start, end)."""

    start: int
    end: int
    message: str
    severity: str = "error"


def map_diagnostic(error_message: str, document_text: str) -> Diagnostic:
    """Locate the range an external parser error refers to.

    A ``line <N>`` reference (1-based) selects that line; anything else
    selects the whole document.
    """
    length = len(document_text)
    m = _LINE_RE.search(error_message)
    if m is None:
        return Diagnostic(0, length, error_message)

    line_num = int(m.group(1))
    lines = document_text.split("\n")

    offset = 0
    for line in lines[: max(0, line_num - 1)]:
        offset += len(line) + 1

    if 1 <= line_num <= len(lines) and lines[line_num - 1]:
        width = len(lines[line_num - 1])
    else:
        width = 1

    start = min(offset, length)
    end = min(offset + width, length)
    return Diagnostic(start, end, error_message)


def offset_to_position(text: str, offset: int) -> tuple[int, int]:
    """Convert a character offset to a 0-based (line, column) pair."""
    offset = max(0, min(offset, len(text)))
    line = text.count("\n", 0, offset)
    line_start = text.rfind("\n", 0, offset) + 1
    return line, offset - line_start
