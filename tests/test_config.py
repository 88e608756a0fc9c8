"""Tests for TOML config file loading."""

from __future__ import annotations

from pathlib import Path

from mermaidlang.cli import build_parser, load_config, resolve_options


def _options(tmp_path: Path, *argv: str):
    doc = tmp_path / "flow.mmd"
    doc.write_text("")
    ns = build_parser().parse_args([str(doc), *argv])
    return resolve_options(ns)


class TestLoadConfig:
    def test_missing_config_returns_empty(self, tmp_path: Path) -> None:
        assert load_config(None, tmp_path) == {}

    def test_explicit_path(self, tmp_path: Path) -> None:
        cfg = tmp_path / "custom.toml"
        cfg.write_text("[parser]\ntimeout = 2.0\n")
        assert load_config(cfg, tmp_path) == {"parser": {"timeout": 2.0}}

    def test_auto_discover_mermaidlang_toml(self, tmp_path: Path) -> None:
        cfg = tmp_path / "mermaidlang.toml"
        cfg.write_text('[parser]\ncommand = ["mmdc-parse"]\n')
        assert load_config(None, tmp_path)["parser"] == {"command": ["mmdc-parse"]}


class TestConfigMerge:
    def test_defaults(self, tmp_path: Path) -> None:
        opts = _options(tmp_path)
        assert opts.parser_command is None
        assert opts.parser_timeout == 5.0
        assert opts.check is False

    def test_command_list(self, tmp_path: Path) -> None:
        (tmp_path / "mermaidlang.toml").write_text(
            '[parser]\ncommand = ["node", "parse.js", "--strict"]\n'
        )
        assert _options(tmp_path).parser_command == ["node", "parse.js", "--strict"]

    def test_command_string(self, tmp_path: Path) -> None:
        (tmp_path / "mermaidlang.toml").write_text("[parser]\ncommand = \"node 'my parse.js'\"\n")
        assert _options(tmp_path).parser_command == ["node", "my parse.js"]

    def test_cli_overrides_config_command(self, tmp_path: Path) -> None:
        (tmp_path / "mermaidlang.toml").write_text('[parser]\ncommand = ["node"]\n')
        opts = _options(tmp_path, "--parser", "mmdc-parse -q")
        assert opts.parser_command == ["mmdc-parse", "-q"]

    def test_config_timeout(self, tmp_path: Path) -> None:
        (tmp_path / "mermaidlang.toml").write_text("[parser]\ntimeout = 15\n")
        assert _options(tmp_path).parser_timeout == 15.0

    def test_cli_timeout_overrides_config(self, tmp_path: Path) -> None:
        (tmp_path / "mermaidlang.toml").write_text("[parser]\ntimeout = 15.0\n")
        assert _options(tmp_path, "--parser-timeout", "3").parser_timeout == 3.0

    def test_malformed_section_ignored(self, tmp_path: Path) -> None:
        (tmp_path / "mermaidlang.toml").write_text('parser = "oops"\n')
        assert _options(tmp_path).parser_command is None

    def test_explicit_config_flag(self, tmp_path: Path) -> None:
        cfg = tmp_path / "alt.toml"
        cfg.write_text('[parser]\ncommand = ["alt-parse"]\n')
        opts = _options(tmp_path, "--config", str(cfg))
        assert opts.parser_command == ["alt-parse"]
