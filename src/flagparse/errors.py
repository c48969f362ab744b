"""errors.py – Error records and exceptions for flagparse.

Parse problems are *records*, not exceptions: :class:`ParseError` entries are
accumulated in order during a parse so that one call surfaces every problem.
Exceptions are reserved for caller-side misuse (bad definitions, lookups of
undeclared spellings) and for callers that explicitly ask to raise.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass


class ErrorKind(str, enum.Enum):
    """Kinds of problems the registry and parser can report."""

    UNKNOWN_FLAG = "unknown_flag"
    MISSING_REQUIRED_VALUE = "missing_required_value"
    REQUIRED_FLAG_NOT_SET = "required_flag_not_set"
    DEFINITION_CONFLICT = "definition_conflict"


@dataclass(frozen=True)
class ParseError:
    """One problem found while registering or parsing.

    ``token`` is the offending argv token (empty for checks that run after the
    scan), ``flag`` the display label of the flag involved (empty when the
    token matched nothing).
    """

    kind: ErrorKind
    token: str = ""
    flag: str = ""
    message: str = ""

    def to_dict(self) -> dict[str, str]:
        """Serialize to a plain dict for JSON output."""
        return {
            "kind": self.kind.value,
            "token": self.token,
            "flag": self.flag,
            "message": self.message,
        }

    def __str__(self) -> str:
        return self.message or f"{self.kind.value}: {self.token or self.flag}"


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class FlagparseError(Exception):
    """Base class for every exception raised by flagparse."""


class InvalidDefinitionError(FlagparseError, ValueError):
    """A flag definition is unusable (e.g. it has no spelling at all)."""


class DefinitionConflictError(FlagparseError):
    """Two definitions claim the same long or short spelling."""

    def __init__(self, spelling: str, existing: str, incoming: str) -> None:
        self.spelling = spelling
        self.error = ParseError(
            ErrorKind.DEFINITION_CONFLICT,
            token=spelling,
            flag=incoming,
            message=f"flag spelling {spelling!r} of {incoming} is already used by {existing}",
        )
        super().__init__(self.error.message)


class FlagNotFoundError(FlagparseError, KeyError):
    """Lookup of a spelling that was never registered."""

    def __init__(self, spelling: str) -> None:
        self.spelling = spelling
        super().__init__(spelling)

    def __str__(self) -> str:
        return f"no flag registered for spelling {self.spelling!r}"


class ParseFailedError(FlagparseError):
    """Raised by :meth:`ParseOutcome.raise_for_errors` when a parse failed."""

    def __init__(self, errors: list[ParseError]) -> None:
        self.errors = list(errors)
        lines = "\n".join(f"  {err}" for err in self.errors)
        super().__init__(f"{len(self.errors)} argument error(s):\n{lines}")


class SchemaError(FlagparseError):
    """A flag schema file is missing or malformed."""
