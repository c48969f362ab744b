"""Shared CLI utilities for flagparse commands.

Provides the common ``--schema`` option, schema-loading helper, and the
standard error / JSON output helpers used by every subcommand.

Usage in a command::

    import typer
    from flagparse.cli import SchemaOption, get_schema, error_exit, json_print

    app = typer.Typer()

    @app.command()
    def main(schema: Path | None = SchemaOption) -> None:
        loaded = get_schema(schema)
        ...
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, NoReturn

import typer
from rich.console import Console

from flagparse.config import Schema, load_schema
from flagparse.errors import SchemaError

# Re-usable Typer option for --schema
SchemaOption: Path | None = typer.Option(
    None,
    "--schema",
    "-s",
    help="Path to flagparse.toml (default: search upward from the current directory).",
)

_err_console = Console(stderr=True)


def error_exit(msg: str, *, json_mode: bool = False, code: int = 1) -> NoReturn:
    """Print *msg* as an error and ``raise typer.Exit(code)``."""
    if json_mode:
        print(json.dumps({"error": msg}, indent=2))
    else:
        _err_console.print(f"[red bold]error:[/red bold] {msg}")
    raise typer.Exit(code=code)


def json_print(data: dict[str, Any] | list[Any]) -> None:
    """Print *data* as pretty-printed JSON to stdout."""
    print(json.dumps(data, indent=2))


def get_schema(path: Path | None = None, *, json_mode: bool = False) -> Schema:
    """Load the schema, turning schema problems into a clean CLI error."""
    try:
        return load_schema(path)
    except SchemaError as exc:
        error_exit(str(exc), json_mode=json_mode)
