"""Tests for the shared CLI helpers in flagparse.cli."""

import json
from pathlib import Path

import pytest
import typer

from flagparse.cli import error_exit, get_schema, json_print

# ---------------------------------------------------------------------------
# error_exit()
# ---------------------------------------------------------------------------


class TestErrorExit:
    def test_plain_stderr_and_exit(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(typer.Exit) as exc_info:
            error_exit("something broke")
        assert exc_info.value.exit_code == 1
        captured = capsys.readouterr()
        assert "something broke" in captured.err
        assert captured.out == ""

    def test_custom_exit_code(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(typer.Exit) as exc_info:
            error_exit("fatal", code=2)
        assert exc_info.value.exit_code == 2

    def test_json_mode_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(typer.Exit):
            error_exit("bad input", json_mode=True)
        captured = capsys.readouterr()
        assert json.loads(captured.out) == {"error": "bad input"}
        assert captured.err == ""


# ---------------------------------------------------------------------------
# json_print()
# ---------------------------------------------------------------------------


class TestJsonPrint:
    def test_dict_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        json_print({"success": True, "errors": []})
        data = json.loads(capsys.readouterr().out)
        assert data == {"success": True, "errors": []}

    def test_pretty_printed(self, capsys: pytest.CaptureFixture[str]) -> None:
        json_print({"a": 1})
        assert "\n" in capsys.readouterr().out


# ---------------------------------------------------------------------------
# get_schema()
# ---------------------------------------------------------------------------


class TestGetSchema:
    def test_loads_schema(self, tmp_path: Path) -> None:
        (tmp_path / "flagparse.toml").write_text(
            '[flags.v]\nlong = "--verbose"\n', encoding="utf-8"
        )
        schema = get_schema(tmp_path)
        assert schema.keys == ["v"]

    def test_missing_schema_exits(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with pytest.raises(typer.Exit) as exc_info:
            get_schema(tmp_path)
        assert exc_info.value.exit_code == 1
        assert "not found" in capsys.readouterr().err

    def test_missing_schema_json(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with pytest.raises(typer.Exit):
            get_schema(tmp_path, json_mode=True)
        data = json.loads(capsys.readouterr().out)
        assert "not found" in data["error"]
