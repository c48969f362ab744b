"""Tests for the flag definition model and result records."""

import dataclasses

import pytest

from flagparse.errors import InvalidDefinitionError
from flagparse.flags import FlagDefinition, FlagResult, ValueSpec


class TestValueSpec:
    def test_empty_default_means_needed(self) -> None:
        assert ValueSpec("", "value").is_value_needed is True

    def test_non_empty_default_means_optional(self) -> None:
        assert ValueSpec("w", "value").is_value_needed is False

    def test_explicit_needed_wins(self) -> None:
        assert ValueSpec("", needed=False).is_value_needed is False
        assert ValueSpec("x", needed=True).is_value_needed is True

    def test_required_constructor(self) -> None:
        spec = ValueSpec.required("path")
        assert spec.name == "path"
        assert spec.is_value_needed

    def test_optional_constructor(self) -> None:
        spec = ValueSpec.optional()
        assert spec.default == ""
        assert not spec.is_value_needed

    def test_frozen(self) -> None:
        spec = ValueSpec("w")
        with pytest.raises(dataclasses.FrozenInstanceError):
            spec.default = "x"  # type: ignore[misc]


class TestFlagDefinition:
    def test_needs_a_spelling(self) -> None:
        with pytest.raises(InvalidDefinitionError):
            FlagDefinition("", "", "nothing")

    def test_invalid_definition_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            FlagDefinition()

    def test_spellings_must_differ(self) -> None:
        with pytest.raises(InvalidDefinitionError):
            FlagDefinition("-a", "-a")

    def test_spellings_long_first(self) -> None:
        assert FlagDefinition("--all", "-a").spellings == ("--all", "-a")

    def test_short_only(self) -> None:
        flag = FlagDefinition(short_name="-a")
        assert flag.spellings == ("-a",)
        assert flag.label == "-a"

    def test_label(self) -> None:
        assert FlagDefinition("--all", "-a").label == "--all/-a"

    def test_takes_value(self) -> None:
        assert not FlagDefinition("--a").takes_value
        assert FlagDefinition("--a", value=ValueSpec()).takes_value

    def test_frozen(self) -> None:
        flag = FlagDefinition("--a")
        with pytest.raises(dataclasses.FrozenInstanceError):
            flag.long_name = "--b"  # type: ignore[misc]


class TestFlagResult:
    def test_starts_zeroed(self) -> None:
        result = FlagResult(FlagDefinition("--a", value=ValueSpec("")))
        assert result.is_set is False
        assert result.has_value is False
        assert result.value.text == ""
        assert result.value.is_value_needed is True

    def test_mirrors_optional_value(self) -> None:
        result = FlagResult(FlagDefinition("--a", value=ValueSpec("w")))
        assert result.value.is_value_needed is False

    def test_switch_has_no_needed_value(self) -> None:
        assert FlagResult(FlagDefinition("--a")).value.is_value_needed is False

    def test_reset_keeps_value_object(self) -> None:
        result = FlagResult(FlagDefinition("--a", value=ValueSpec("")))
        value = result.value
        result.is_set = True
        result.capture("x")
        result.reset()
        assert result.value is value
        assert not result.is_set
        assert not result.has_value
        assert value.text == ""

    def test_value_or_default(self) -> None:
        result = FlagResult(FlagDefinition("--a", value=ValueSpec("w")))
        assert result.value_or_default() == "w"
        result.capture("z")
        assert result.value_or_default() == "z"

    def test_value_or_default_for_switch(self) -> None:
        assert FlagResult(FlagDefinition("--a")).value_or_default() == ""

    def test_identity_equality(self) -> None:
        definition = FlagDefinition("--a")
        assert FlagResult(definition) != FlagResult(definition)
