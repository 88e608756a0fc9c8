"""--debug token dump to stderr."""

from __future__ import annotations

import sys
from typing import TextIO

from mermaidlang.tokens import Token


def dump_tokens(lines: list[list[Token]], *, file: TextIO = sys.stderr) -> None:
    """Print one row per source line listing its tokens to *file*."""
    width = len(str(len(lines)))
    for num, tokens in enumerate(lines, start=1):
        parts = " ".join(f"{tok.kind.value}({tok.text!r})" for tok in tokens)
        file.write(f"{num:>{width}} | {parts}\n")
