"""flagparse schema: Programmatic editor for flagparse.toml.

Uses tomlkit for format-preserving round-trip editing (comments,
ordering, and whitespace are retained).

Usage::

    flagparse schema list
    flagparse schema add output --long=--output --short=-o --value path --required
    flagparse schema remove output
"""

import contextlib
import os
from pathlib import Path

import tomlkit
import typer

from flagparse.config import (
    SCHEMA_FILENAME,
    Schema,
    _find_root,
    definition_from_table,
    parse_schema,
)
from flagparse.errors import SchemaError

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _schema_path(path: Path | None) -> Path:
    """Resolve the schema file: explicit file, directory, or upward search."""
    if path is not None and path.suffix == ".toml":
        return path
    try:
        return _find_root(path) / SCHEMA_FILENAME
    except SchemaError as exc:
        typer.secho(f"Error: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from None


def _load_toml(path: Path) -> tomlkit.TOMLDocument:
    """Load the schema as a tomlkit document, preserving formatting."""
    if not path.exists():
        typer.secho(f"Error: {path} not found.", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    return tomlkit.parse(path.read_text(encoding="utf-8"))


def _save_toml(doc: tomlkit.TOMLDocument, path: Path) -> None:
    """Write the document back atomically, preserving formatting."""
    tmp_path = path.with_suffix(path.suffix + ".tmp")
    try:
        tmp_path.write_text(tomlkit.dumps(doc), encoding="utf-8")
        os.replace(tmp_path, path)
    except BaseException:
        with contextlib.suppress(OSError):
            tmp_path.unlink()
        raise


def _validated(doc: tomlkit.TOMLDocument, path: Path) -> Schema:
    """Check every table in *doc*, exiting with an error on a malformed schema."""
    try:
        return parse_schema(doc.unwrap(), root=path.parent, path=path)
    except SchemaError as exc:
        typer.secho(f"Error: {path}: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from None


def _flags_table(doc: tomlkit.TOMLDocument) -> dict:
    flags = doc.get("flags")
    if flags is None:
        flags = tomlkit.table(is_super_table=True)
        doc["flags"] = flags
    return flags


# ---------------------------------------------------------------------------
# Typer app
# ---------------------------------------------------------------------------

app = typer.Typer(
    help="Read and edit flagparse.toml programmatically.",
    rich_markup_mode="rich",
    epilog="""\
[bold]Examples:[/bold]
  flagparse schema list                                 Show declared flags
  flagparse schema add verbose --long=--verbose -S-v    Add a switch
  flagparse schema add out --long=--output --value path  Add a flag with a value
  flagparse schema remove verbose                       Drop a flag

[dim]Edits keep comments and key order of the existing file.[/dim]""",
)

SchemaPathOption: Path | None = typer.Option(
    None, "--schema", "-s", help="Schema file or directory (default: search upward)."
)


@app.command("list")
def list_flags(schema: Path | None = SchemaPathOption) -> None:
    """List all flags declared in the schema."""
    path = _schema_path(schema)
    loaded = _validated(_load_toml(path), path)
    if not loaded.definitions:
        typer.echo("No flags defined.")
        return
    for key, flag in loaded.definitions.items():
        extra = f" <{flag.value.name}>" if flag.value is not None else ""
        marker = "*" if flag.required else " "
        typer.echo(f"  {marker} {key}: {flag.label}{extra}")
    typer.secho("\n  * = required", dim=True)


@app.command("add")
def add_flag(
    key: str = typer.Argument(..., help="Table key for the flag (e.g. 'output')."),
    long: str = typer.Option("", "--long", "-L", help="Long spelling, e.g. --output."),
    short: str = typer.Option("", "--short", "-S", help="Short spelling, e.g. -o."),
    description: str = typer.Option("", "--description", "-d", help="Flag description."),
    value: str | None = typer.Option(
        None, "--value", help="Value display name; makes the flag take a value."
    ),
    default: str | None = typer.Option(
        None, "--default", help="Default payload; a non-empty default makes the value optional."
    ),
    required: bool = typer.Option(False, "--required", help="Flag must always be given."),
    schema: Path | None = SchemaPathOption,
) -> None:
    """Add a flag table to the schema (idempotent on the key)."""
    path = _schema_path(schema)
    doc = _load_toml(path) if path.exists() else tomlkit.document()
    existing = _validated(doc, path)
    flags = _flags_table(doc)

    if key in flags:
        typer.secho(f"Flag '{key}' already exists (no changes made).", fg=typer.colors.YELLOW)
        return

    table = tomlkit.table()
    if long:
        table["long"] = long
    if short:
        table["short"] = short
    if description:
        table["description"] = description
    if value is not None:
        table["value"] = value
    if default is not None:
        table["default"] = default
    if required:
        table["required"] = True

    try:
        candidate = definition_from_table(key, table.unwrap())
    except SchemaError as exc:
        typer.secho(f"Error: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from None

    for other_key, other in existing.definitions.items():
        clash = set(other.spellings) & set(candidate.spellings)
        if clash:
            typer.secho(
                f"Error: spelling {sorted(clash)[0]!r} already used by flags.{other_key}",
                fg=typer.colors.RED,
                err=True,
            )
            raise typer.Exit(code=1)

    flags[key] = table
    _save_toml(doc, path)
    typer.echo(f"Added flag '{key}' ({candidate.label}) to {path}")


@app.command("remove")
def remove_flag(
    key: str = typer.Argument(..., help="Table key of the flag to remove."),
    schema: Path | None = SchemaPathOption,
) -> None:
    """Remove a flag table from the schema."""
    path = _schema_path(schema)
    doc = _load_toml(path)
    flags = doc.get("flags", {})
    if key not in flags:
        typer.secho(f"Error: Flag '{key}' not found.", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    del flags[key]
    _save_toml(doc, path)
    typer.echo(f"Removed flag '{key}' from {path}")
