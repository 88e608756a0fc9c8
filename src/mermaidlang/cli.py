"""Command-line interface for mermaidlang."""

from __future__ import annotations

import argparse
import shlex
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from mermaidlang.errors import DiagramParseError, ParseServiceError


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path
    output_file: Path | None
    check: bool
    parser_command: list[str] | None
    parser_timeout: float
    debug: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="mermaidlang",
        description="Format and check Mermaid-style diagram text",
    )
    p.add_argument("input", help="Input diagram file")
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    p.add_argument(
        "--check",
        action="store_true",
        help="Validate the diagram with the external parser",
    )
    p.add_argument(
        "--parser",
        metavar="CMD",
        help="Parser command line (default: mermaidlang-parse on $PATH)",
    )
    p.add_argument(
        "--parser-timeout",
        type=float,
        default=None,
        metavar="SECS",
        help="Parser timeout in seconds (default: 5.0)",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover mermaidlang.toml)",
    )
    p.add_argument("--debug", action="store_true", help="Dump tokens to stderr")
    return p


def parse_command_arg(s: str) -> list[str]:
    """Split a shell-style command line into argv."""
    try:
        argv = shlex.split(s)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid parser command: {exc}") from None
    if not argv:
        raise argparse.ArgumentTypeError("parser command is empty")
    return argv


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else input_dir / "mermaidlang.toml"

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: config file < CLI flags.
    """
    input_file = Path(args.input)
    input_dir = input_file.parent
    if not input_dir.parts:
        input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, input_dir)
    cfg_parser = config.get("parser")
    if not isinstance(cfg_parser, dict):
        cfg_parser = {}

    # Parser command: config < CLI
    parser_command: list[str] | None = None
    cfg_command = cfg_parser.get("command")
    if isinstance(cfg_command, str):
        parser_command = parse_command_arg(cfg_command)
    elif isinstance(cfg_command, list) and cfg_command:
        parser_command = [str(part) for part in cfg_command]
    if args.parser is not None:
        parser_command = parse_command_arg(args.parser)

    # Parser timeout: config < CLI
    parser_timeout = 5.0
    cfg_timeout = cfg_parser.get("timeout")
    if isinstance(cfg_timeout, (int, float)):
        parser_timeout = float(cfg_timeout)
    if args.parser_timeout is not None:
        parser_timeout = args.parser_timeout

    output_file = Path(args.output) if args.output else None

    return CliOptions(
        input_file=input_file,
        output_file=output_file,
        check=args.check,
        parser_command=parser_command,
        parser_timeout=parser_timeout,
        debug=args.debug,
    )


def format_file(options: CliOptions) -> str:
    """Read and pretty-print a diagram file, checking it when requested."""
    from mermaidlang.debug import dump_tokens
    from mermaidlang.format import pretty_print
    from mermaidlang.lexer import tokenize
    from mermaidlang.service import ParseService

    source = options.input_file.read_text(encoding="utf-8")

    # A final newline alone does not make a file multi-line
    newline = "\n" if source.endswith("\n") else ""
    text = pretty_print(source.removesuffix("\n")) + newline

    if options.debug:
        dump_tokens(tokenize(text), file=sys.stderr)

    # Check the file as written so reported lines match it on disk
    if options.check and source.strip():
        service = ParseService.discover(options.parser_command, options.parser_timeout)
        if service is None:
            raise ParseServiceError("no parser configured and mermaidlang-parse not found")
        service.parse(source)

    return text


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except argparse.ArgumentTypeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    try:
        text = format_file(options)
    except DiagramParseError as exc:
        print(exc.format(str(options.input_file)), file=sys.stderr)
        return 1
    except ParseServiceError as exc:
        print(exc.format(), file=sys.stderr)
        return 2
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if options.output_file:
        options.output_file.write_text(text, encoding="utf-8")
    else:
        sys.stdout.write(text)

    return 0
