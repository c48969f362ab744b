"""flagparse: small, deterministic command-line flag parser.

Declare flags with long and/or short spellings and an optional value, parse
an argument vector, then query results by either spelling.  Problems are
collected as structured errors instead of aborting the parse.
"""

from flagparse.errors import (
    DefinitionConflictError,
    ErrorKind,
    FlagNotFoundError,
    FlagparseError,
    InvalidDefinitionError,
    ParseError,
    ParseFailedError,
    SchemaError,
)
from flagparse.flags import FlagDefinition, FlagResult, FlagValue, ValueSpec
from flagparse.parser import ArgParse, ParseOutcome
from flagparse.registry import FlagRegistry

__version__ = "0.1.0"

__all__ = [
    "ArgParse",
    "DefinitionConflictError",
    "ErrorKind",
    "FlagDefinition",
    "FlagNotFoundError",
    "FlagRegistry",
    "FlagResult",
    "FlagValue",
    "FlagparseError",
    "InvalidDefinitionError",
    "ParseError",
    "ParseFailedError",
    "ParseOutcome",
    "SchemaError",
    "ValueSpec",
]
