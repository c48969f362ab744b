"""flags.py – Flag definition model and per-flag result records.

A :class:`FlagDefinition` describes one *logical* flag: a long spelling, a
short spelling, or both, plus an optional :class:`ValueSpec`.  Definitions
are frozen once built.

A :class:`FlagResult` holds what the parser found for that logical flag.
Exactly one result exists per definition; the registry hands out the same
object for either spelling, so a flag set via ``-o`` can be read via
``--output``.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from flagparse.errors import InvalidDefinitionError


@dataclass(frozen=True)
class ValueSpec:
    """Describes the value a flag takes.

    ``default`` doubles as the value's default payload.  When ``needed`` is
    not given it is derived from it: an empty default makes the value
    mandatory, a non-empty default makes it optional.
    """

    default: str = ""
    name: str = "value"
    needed: bool | None = None

    def __post_init__(self) -> None:
        if self.needed is None:
            object.__setattr__(self, "needed", not self.default)

    @property
    def is_value_needed(self) -> bool:
        return bool(self.needed)

    @classmethod
    def required(cls, name: str = "value") -> ValueSpec:
        """A value that must follow the flag whenever it is given."""
        return cls(default="", name=name, needed=True)

    @classmethod
    def optional(cls, default: str = "", name: str = "value") -> ValueSpec:
        """A value that may be absent without error."""
        return cls(default=default, name=name, needed=False)


@dataclass(frozen=True)
class FlagDefinition:
    """An immutable flag declaration."""

    long_name: str = ""
    short_name: str = ""
    description: str = ""
    value: ValueSpec | None = None
    required: bool = False

    def __post_init__(self) -> None:
        if not self.long_name and not self.short_name:
            raise InvalidDefinitionError("a flag needs a long name, a short name, or both")
        if self.long_name and self.long_name == self.short_name:
            raise InvalidDefinitionError(
                f"long and short spelling of a flag must differ: {self.long_name!r}"
            )

    @property
    def spellings(self) -> tuple[str, ...]:
        """Non-empty spellings, long first."""
        return tuple(s for s in (self.long_name, self.short_name) if s)

    @property
    def takes_value(self) -> bool:
        return self.value is not None

    @property
    def label(self) -> str:
        """Human-readable label, e.g. ``--output/-o``."""
        return "/".join(self.spellings)


@dataclass
class FlagValue:
    """Captured value text for one flag occurrence."""

    text: str = ""
    is_value_needed: bool = False


@dataclass(eq=False)
class FlagResult:
    """Mutable parse result for one logical flag.

    Compared by identity: two results are only ever "the same" when they are
    the same object, which is what alias lookups rely on.
    """

    definition: FlagDefinition = field(repr=False)
    is_set: bool = False
    has_value: bool = False
    value: FlagValue = field(default_factory=FlagValue)

    def __post_init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        """Zero the record in place, keeping its identity."""
        self.is_set = False
        self.has_value = False
        spec = self.definition.value
        self.value.text = ""
        self.value.is_value_needed = spec.is_value_needed if spec is not None else False

    def capture(self, text: str) -> None:
        self.has_value = True
        self.value.text = text

    def value_or_default(self) -> str:
        """Return the captured value, falling back to the ValueSpec default."""
        if self.has_value:
            return self.value.text
        spec = self.definition.value
        return spec.default if spec is not None else ""

    def to_dict(self) -> dict[str, object]:
        """Serialize to a plain dict for JSON output."""
        return {
            "flag": self.definition.label,
            "is_set": self.is_set,
            "has_value": self.has_value,
            "value": self.value.text if self.has_value else None,
            "is_value_needed": self.value.is_value_needed,
        }
