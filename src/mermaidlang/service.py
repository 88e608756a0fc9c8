"""External parse command invocation (text on stdin, exit status out)."""

from __future__ import annotations

import shutil
import subprocess
from dataclasses import dataclass

from mermaidlang.diagnostics import Diagnostic
from mermaidlang.errors import DiagramParseError, ParseServiceError

DEFAULT_COMMAND = "mermaidlang-parse"


@dataclass(frozen=True)
class ParseService:
    """Validates diagram text by running an external parser command.

    The command reads the diagram on stdin and exits 0 when it parses.
    On failure its stderr (or stdout) is the error message.
    """

    command: tuple[str, ...]
    timeout: float = 5.0

    @classmethod
    def discover(
        cls, command: list[str] | None = None, timeout: float = 5.0
    ) -> ParseService | None:
        """Build a service from an explicit command, else look for the default on $PATH."""
        if command:
            return cls(tuple(command), timeout)
        on_path = shutil.which(DEFAULT_COMMAND)
        if on_path is not None:
            return cls((on_path,), timeout)
        return None

    def parse(self, source: str) -> None:
        """Raise DiagramParseError if the parser rejects ``source``."""
        name = self.command[0]
        try:
            result = subprocess.run(
                list(self.command),
                input=source,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                timeout=self.timeout,
            )
        except FileNotFoundError:
            raise ParseServiceError(f"parser '{name}' not found") from None
        except PermissionError:
            raise ParseServiceError(f"parser '{name}' is not executable") from None
        except subprocess.TimeoutExpired:
            raise ParseServiceError(
                f"parser '{name}' timed out after {self.timeout}s"
            ) from None
        except OSError as exc:
            raise ParseServiceError(
                f"parser '{name}' could not be run: {exc.strerror or exc}"
            ) from None

        if result.returncode != 0:
            message = result.stderr.strip() or result.stdout.strip()
            if not message:
                message = f"parser exited with status {result.returncode}"
            raise DiagramParseError(message, source)


def lint(source: str, service: ParseService) -> Diagnostic | None:
    """Return the diagnostic for ``source``, or None if it parses.

    Blank documents are not sent to the parser.
    """
    if not source.strip():
        return None
    try:
        service.parse(source)
    except DiagramParseError as exc:
        return exc.diagnostic
    return None
