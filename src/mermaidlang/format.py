"""Pretty-printer for compact, semicolon-delimited diagram text."""

from __future__ import annotations

import re

from mermaidlang.statements import split_statements

_DIAGRAM_HEADER_RE = re.compile(
    r"^\s*(?:sequenceDiagram|graph|flowchart|classDiagram|stateDiagram(?:-v2)?"
    r"|erDiagram|journey|gantt|pie|mindmap|timeline|gitGraph|requirementDiagram"
    r"|quadrantChart|C4\w*|architecture-beta|packet-beta|block-beta"
    r"|xychart-beta|sankey-beta)\b",
    re.IGNORECASE,
)
_SEQUENCE_HEADER_RE = re.compile(r"^\s*sequenceDiagram\b", re.IGNORECASE)

INDENT = "  "


def has_diagram_header(text: str) -> bool:
    """Return True if text opens with a known diagram type keyword."""
    return _DIAGRAM_HEADER_RE.match(text) is not None


def pretty_print(text: str) -> str:
    """Expand single-line ``a; b; c`` diagram text into one statement per line.

    Input that is already multi-line, has no delimiter, or does not start with
    a diagram header is returned unchanged. The result always contains a
    newline when it differs from the input, so a second pass is a no-op.
    Sequence diagrams get their body statements indented.
    """
    if ";" not in text or "\n" in text:
        return text
    if not has_diagram_header(text):
        return text

    statements = split_statements(text)
    if len(statements) <= 1:
        return text

    if _SEQUENCE_HEADER_RE.match(statements[0]):
        head, *body = statements
        return "\n".join([head, *(INDENT + s for s in body)])

    return "\n".join(statements)
