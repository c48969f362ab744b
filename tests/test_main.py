"""Tests for the umbrella flagparse CLI."""

from pathlib import Path

from typer.testing import CliRunner

from flagparse.main import app

runner = CliRunner()


def _write_schema(tmp_path: Path) -> Path:
    path = tmp_path / "flagparse.toml"
    path.write_text('[flags.verbose]\nlong = "--verbose"\nshort = "-v"\n', encoding="utf-8")
    return path


class TestUmbrella:
    def test_help_lists_commands(self) -> None:
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "check" in result.output
        assert "schema" in result.output

    def test_check_subcommand(self, tmp_path: Path) -> None:
        schema = _write_schema(tmp_path)
        result = runner.invoke(app, ["check", "--schema", str(schema), "--", "-v"])
        assert result.exit_code == 0
        assert "OK" in result.output

    def test_schema_subcommand(self, tmp_path: Path) -> None:
        schema = _write_schema(tmp_path)
        result = runner.invoke(app, ["schema", "list", "--schema", str(schema)])
        assert result.exit_code == 0
        assert "--verbose/-v" in result.output

    def test_check_help_keeps_examples(self) -> None:
        result = runner.invoke(app, ["check", "--help"])
        assert result.exit_code == 0
        assert "Examples" in result.output
