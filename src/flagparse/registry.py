"""registry.py – Flag registry with shared per-flag results.

Definitions and results live in two parallel lists (one slot per logical
flag).  A spelling index maps every long and short spelling to its slot, so
both spellings of a flag resolve to the one result object stored there.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from flagparse.errors import DefinitionConflictError, FlagNotFoundError
from flagparse.flags import FlagDefinition, FlagResult


class FlagRegistry:
    """Ordered set of flag definitions, indexable by any spelling."""

    def __init__(self, definitions: Iterable[FlagDefinition] = ()) -> None:
        self._definitions: list[FlagDefinition] = []
        self._results: list[FlagResult] = []
        self._index: dict[str, int] = {}
        for definition in definitions:
            self.add(definition)

    def add(self, definition: FlagDefinition) -> FlagResult:
        """Register *definition* and return its shared result record.

        Raises :class:`DefinitionConflictError` if any of its spellings is
        already taken; the registry is left untouched in that case.
        """
        for spelling in definition.spellings:
            slot = self._index.get(spelling)
            if slot is not None:
                raise DefinitionConflictError(
                    spelling, self._definitions[slot].label, definition.label
                )

        slot = len(self._definitions)
        result = FlagResult(definition)
        self._definitions.append(definition)
        self._results.append(result)
        for spelling in definition.spellings:
            self._index[spelling] = slot
        return result

    def lookup(self, spelling: str) -> FlagResult:
        """Return the shared result for *spelling* (long or short)."""
        try:
            return self._results[self._index[spelling]]
        except KeyError:
            raise FlagNotFoundError(spelling) from None

    def definition(self, spelling: str) -> FlagDefinition:
        """Return the definition registered under *spelling*."""
        try:
            return self._definitions[self._index[spelling]]
        except KeyError:
            raise FlagNotFoundError(spelling) from None

    def find_long(self, spelling: str) -> FlagResult | None:
        """Return the result if *spelling* is a registered long spelling."""
        slot = self._index.get(spelling)
        if slot is None or self._definitions[slot].long_name != spelling:
            return None
        return self._results[slot]

    def find_short(self, spelling: str) -> FlagResult | None:
        """Return the result if *spelling* is a registered short spelling."""
        slot = self._index.get(spelling)
        if slot is None or self._definitions[slot].short_name != spelling:
            return None
        return self._results[slot]

    def definitions(self) -> list[FlagDefinition]:
        return list(self._definitions)

    def results(self) -> list[FlagResult]:
        return list(self._results)

    def reset(self) -> None:
        """Zero every result in place."""
        for result in self._results:
            result.reset()

    def __getitem__(self, spelling: str) -> FlagResult:
        return self.lookup(spelling)

    def __contains__(self, spelling: object) -> bool:
        return spelling in self._index

    def __len__(self) -> int:
        return len(self._definitions)

    def __iter__(self) -> Iterator[FlagResult]:
        return iter(self._results)
