"""Error types with formatted source context."""

from __future__ import annotations

from mermaidlang.diagnostics import Diagnostic, map_diagnostic, offset_to_position


class DiagramParseError(Exception):
    """Raised when the external parser rejects a diagram."""

    def __init__(self, message: str, source: str) -> None:
        self.message = message
        self.source = source
        super().__init__(message)

    @property
    def diagnostic(self) -> Diagnostic:
        return map_diagnostic(self.message, self.source)

    def format(self, filename: str = "input.mmd") -> str:
        diag = self.diagnostic
        line_idx, col_idx = offset_to_position(self.source, diag.start)
        lines = self.source.split("\n")

        source_line = lines[line_idx].rstrip("\r") if line_idx < len(lines) else ""

        # Underline the range when on one line, otherwise to end of line
        end_line, end_col = offset_to_position(self.source, diag.end)
        if end_line == line_idx:
            underline_len = max(1, end_col - col_idx)
        else:
            underline_len = max(1, len(source_line) - col_idx)

        pad = " " * col_idx
        carets = "^" * underline_len

        line_num = str(line_idx + 1)
        gutter_width = len(line_num) + 1

        blank_gutter = " " * gutter_width + "|"
        line_gutter = f"{line_num:>{gutter_width - 1}} |"

        # Parser messages are often multi-line; the first line is the summary
        summary = self.message.strip().split("\n", 1)[0]

        return (
            f"error: {summary}\n"
            f"{' ' * gutter_width}--> {filename}:{line_idx + 1}:{col_idx + 1}\n"
            f"{blank_gutter}\n"
            f"{line_gutter} {source_line}\n"
            f"{blank_gutter} {pad}{carets}"
        )


class ParseServiceError(Exception):
    """Raised when the external parse command cannot be run."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def format(self) -> str:
        return f"error: {self.message}"
