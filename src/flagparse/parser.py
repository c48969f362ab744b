"""parser.py – Argument-vector parser.

:class:`ArgParse` owns a :class:`~flagparse.registry.FlagRegistry` and scans
an argument vector against it, one token at a time and without backtracking:

* a registered long spelling, bare or as ``--long=value``;
* a registered short spelling, always bare (its value can only come from the
  next token);
* anything else is either an unknown flag (it starts with ``-``) or a
  positional token.

A flag that takes a value consumes the next token unless that token is itself
a registered flag.  Problems are recorded as :class:`ParseError` entries and
scanning continues, so one call reports everything that is wrong.

Usage::

    args = ArgParse()
    args.add(FlagDefinition("--output", "-o", "Output file.", ValueSpec.required("path")))
    if not args.parse(sys.argv):
        for err in args.errors:
            print(err)
    path = args["-o"].value.text
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from flagparse.errors import ErrorKind, ParseError, ParseFailedError
from flagparse.flags import FlagDefinition, FlagResult
from flagparse.registry import FlagRegistry

SHORT_PREFIX = "-"
END_OF_FLAGS = "--"


@dataclass
class ParseOutcome:
    """Everything one :meth:`ArgParse.parse` call produced."""

    results: list[FlagResult] = field(default_factory=list)
    errors: list[ParseError] = field(default_factory=list)
    positionals: list[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return not self.errors

    @property
    def non_required_errors(self) -> list[ParseError]:
        """Errors other than missing required flags."""
        return [e for e in self.errors if e.kind is not ErrorKind.REQUIRED_FLAG_NOT_SET]

    def errors_of(self, kind: ErrorKind) -> list[ParseError]:
        return [e for e in self.errors if e.kind is kind]

    def raise_for_errors(self) -> None:
        """Raise :class:`ParseFailedError` if any error was recorded."""
        if self.errors:
            raise ParseFailedError(self.errors)

    def to_dict(self) -> dict[str, object]:
        """Serialize to a plain dict for JSON output."""
        return {
            "success": self.success,
            "flags": [r.to_dict() for r in self.results],
            "errors": [e.to_dict() for e in self.errors],
            "positionals": list(self.positionals),
        }


class ArgParse:
    """Flag registry plus the parser that fills its results."""

    def __init__(self, definitions: Iterable[FlagDefinition] = ()) -> None:
        self.registry = FlagRegistry(definitions)
        self.outcome = ParseOutcome(results=self.registry.results())

    # -- registration / lookup ------------------------------------------------

    def add(self, definition: FlagDefinition) -> FlagResult:
        """Register a flag; see :meth:`FlagRegistry.add`."""
        result = self.registry.add(definition)
        self.outcome.results.append(result)
        return result

    def lookup(self, spelling: str) -> FlagResult:
        return self.registry.lookup(spelling)

    def __getitem__(self, spelling: str) -> FlagResult:
        return self.registry.lookup(spelling)

    def __contains__(self, spelling: object) -> bool:
        return spelling in self.registry

    @property
    def errors(self) -> list[ParseError]:
        return self.outcome.errors

    @property
    def positionals(self) -> list[str]:
        return self.outcome.positionals

    # -- parsing --------------------------------------------------------------

    def parse_args(self, argc: int, argv: Sequence[str]) -> bool:
        """Classic ``(argc, argv)`` form: only the first *argc* entries are read."""
        return self.parse(argv[: max(argc, 0)])

    def parse(self, argv: Sequence[str]) -> bool:
        """Parse *argv* (``argv[0]`` is the program name and is skipped).

        Results from any earlier call are reset first.  Returns ``True`` when
        no error was recorded.
        """
        self.registry.reset()
        outcome = ParseOutcome(results=self.registry.results())
        self.outcome = outcome

        tokens = list(argv[1:])
        i = 0
        while i < len(tokens):
            token = tokens[i]
            i += 1

            if token == END_OF_FLAGS:
                outcome.positionals.extend(tokens[i:])
                break

            match = self._match(token)
            if match is None:
                if _looks_like_flag(token):
                    outcome.errors.append(
                        ParseError(
                            ErrorKind.UNKNOWN_FLAG,
                            token=token,
                            message=f"unknown flag {token!r}",
                        )
                    )
                else:
                    outcome.positionals.append(token)
                continue

            result, inline = match
            result.is_set = True
            if inline is not None:
                result.capture(inline)
                continue

            spec = result.definition.value
            if spec is None:
                continue

            if i < len(tokens) and self._match(tokens[i]) is None:
                result.capture(tokens[i])
                i += 1
            elif spec.is_value_needed:
                outcome.errors.append(
                    ParseError(
                        ErrorKind.MISSING_REQUIRED_VALUE,
                        token=token,
                        flag=result.definition.label,
                        message=f"flag {token} expects a <{spec.name}> value",
                    )
                )

        for result in outcome.results:
            if result.definition.required and not result.is_set:
                outcome.errors.append(
                    ParseError(
                        ErrorKind.REQUIRED_FLAG_NOT_SET,
                        flag=result.definition.label,
                        message=f"required flag {result.definition.label} was not given",
                    )
                )

        return outcome.success

    def _match(self, token: str) -> tuple[FlagResult, str | None] | None:
        """Resolve *token* to ``(result, inline_value)`` or ``None``."""
        result = self.registry.find_long(token) or self.registry.find_short(token)
        if result is not None:
            return result, None
        if "=" in token:
            name, _, inline = token.partition("=")
            result = self.registry.find_long(name)
            if result is not None:
                return result, inline
        return None


def _looks_like_flag(token: str) -> bool:
    return token.startswith(SHORT_PREFIX) and token != SHORT_PREFIX
