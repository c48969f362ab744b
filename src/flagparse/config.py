"""Flag schema loader for flagparse.

Reads ``flagparse.toml`` and turns its ``[flags.<key>]`` tables into
:class:`~flagparse.flags.FlagDefinition` objects, so a program's flags can be
declared in one file instead of in code.

Schema layout::

    [program]
    name = "tool"

    [flags.output]
    long = "--output"
    short = "-o"
    description = "Where to write results."
    value = "path"      # value display name; omit for a plain switch
    default = ""        # empty => value needed, non-empty => optional
    required = true

Usage::

    from flagparse.config import load_schema

    schema = load_schema()              # walks up from cwd
    args = schema.build_parser()
    ok = args.parse(sys.argv)
"""

from __future__ import annotations

import sys
import warnings
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    try:
        import tomllib  # type: ignore[import]
    except ModuleNotFoundError:
        import tomli as tomllib  # type: ignore[import,no-redef]

from flagparse.errors import FlagparseError, SchemaError
from flagparse.flags import FlagDefinition, ValueSpec
from flagparse.parser import ArgParse

SCHEMA_FILENAME = "flagparse.toml"

# Keys understood inside a [flags.<key>] table.
FLAG_KEYS = {"long", "short", "description", "value", "default", "needed", "required"}


@dataclass
class Schema:
    """Parsed schema file."""

    # Directory holding the schema file
    root: Path
    path: Path
    program: str = ""
    # Table key -> definition, in file order
    definitions: Dict[str, FlagDefinition] = field(default_factory=dict)

    @property
    def keys(self) -> List[str]:
        return list(self.definitions)

    def build_parser(self) -> ArgParse:
        """Return a fresh parser with every schema flag registered."""
        return ArgParse(self.definitions.values())


def _find_root(start: Optional[Path] = None) -> Path:
    """Walk up from *start* (or cwd) to find flagparse.toml."""
    if start is not None:
        return start
    candidate = Path.cwd().resolve()
    while candidate != candidate.parent:
        if (candidate / SCHEMA_FILENAME).exists():
            return candidate
        candidate = candidate.parent
    raise SchemaError(
        f"Could not find {SCHEMA_FILENAME} in any parent of the current directory. "
        "Pass --schema or run from a directory that contains one."
    )


def _as_str(key: str, table: Dict[str, Any], name: str) -> str:
    raw = table.get(name, "")
    if not isinstance(raw, str):
        raise SchemaError(f"flags.{key}.{name} must be a string, got {type(raw).__name__}")
    return raw


def definition_from_table(key: str, table: Dict[str, Any]) -> FlagDefinition:
    """Build a FlagDefinition from one ``[flags.<key>]`` table."""
    if not isinstance(table, dict):
        raise SchemaError(f"flags.{key} must be a table")

    unknown = sorted(set(table) - FLAG_KEYS)
    if unknown:
        warnings.warn(f"flags.{key}: ignoring unknown keys {unknown}", stacklevel=2)

    value_spec = None
    if "value" in table or "default" in table or "needed" in table:
        needed = table.get("needed")
        if needed is not None and not isinstance(needed, bool):
            raise SchemaError(f"flags.{key}.needed must be a boolean")
        value_spec = ValueSpec(
            default=_as_str(key, table, "default"),
            name=_as_str(key, table, "value") or "value",
            needed=needed,
        )

    required = table.get("required", False)
    if not isinstance(required, bool):
        raise SchemaError(f"flags.{key}.required must be a boolean")

    try:
        return FlagDefinition(
            long_name=_as_str(key, table, "long"),
            short_name=_as_str(key, table, "short"),
            description=_as_str(key, table, "description"),
            value=value_spec,
            required=required,
        )
    except FlagparseError as exc:
        raise SchemaError(f"flags.{key}: {exc}") from exc


def parse_schema(raw: Dict[str, Any], root: Path, path: Path) -> Schema:
    """Turn an already-decoded TOML mapping into a :class:`Schema`."""
    program = raw.get("program", {})
    if not isinstance(program, dict):
        raise SchemaError("[program] must be a table")
    flags = raw.get("flags", {})
    if not isinstance(flags, dict):
        raise SchemaError("[flags] must be a table of flag tables")

    schema = Schema(root=root, path=path, program=str(program.get("name", "")))
    seen: Dict[str, str] = {}
    for key, table in flags.items():
        definition = definition_from_table(key, table)
        for spelling in definition.spellings:
            if spelling in seen:
                raise SchemaError(
                    f"flags.{key}: spelling {spelling!r} already used by flags.{seen[spelling]}"
                )
            seen[spelling] = key
        schema.definitions[key] = definition
    return schema


def load_schema(path: Optional[Path] = None) -> Schema:
    """Load a flag schema.

    Args:
        path: Schema file, or a directory containing ``flagparse.toml``.
              Auto-detected from the current directory if ``None``.
    """
    if path is not None and (path.is_file() or path.suffix == ".toml"):
        toml_path = path
        root = path.parent
    else:
        root = _find_root(path)
        toml_path = root / SCHEMA_FILENAME
    if not toml_path.exists():
        raise SchemaError(f"Schema not found: {toml_path}")

    try:
        with open(toml_path, "rb") as f:
            raw = tomllib.load(f)
    except tomllib.TOMLDecodeError as exc:
        raise SchemaError(f"{toml_path}: {exc}") from exc

    return parse_schema(raw, root=root, path=toml_path)
