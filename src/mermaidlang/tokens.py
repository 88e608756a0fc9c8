"""Token kinds, data structures, and the fixed word and arrow tables."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenKind(Enum):
    COMMENT = "comment"  # %% to end of line
    STRING = "string"  # message text after a colon
    PUNCTUATION = "punctuation"  # :
    OPERATOR = "operator"  # message arrows
    KEYWORD = "keyword"
    VARIABLE_NAME = "variableName"
    NUMBER = "number"
    NONE = "none"  # whitespace or an unrecognized character


@dataclass(frozen=True, slots=True)
class Token:
    """A classified slice of one source line."""

    text: str
    kind: TokenKind


@dataclass(slots=True)
class ScanState:
    """State carried between token requests within one line."""

    in_string: bool = False


def start_state() -> ScanState:
    """Return a fresh scan state for a new tokenization session."""
    return ScanState()


# Longer arrows first: "-->>" must not lex as "-->" then ">"
ARROWS: tuple[str, ...] = ("-->>", "->>", "-->", "->", "--x", "-x", "--)", "-)")

KEYWORDS = frozenset(
    {
        "sequenceDiagram",
        "participant",
        "actor",
        "activate",
        "deactivate",
        "Note",
        "loop",
        "alt",
        "else",
        "opt",
        "par",
        "and",
        "critical",
        "break",
        "rect",
        "end",
        "autonumber",
        "over",
        "title",
        # Position words
        "right",
        "left",
        "of",
    }
)
