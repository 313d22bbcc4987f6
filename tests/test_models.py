"""Tests for domain models (core/models.py)."""

from __future__ import annotations

import pytest

from flagparse.core.models import OptionKind, ParseResult
from flagparse.exceptions import UnknownOptionError


# ---------------------------------------------------------------------------
# OptionKind
# ---------------------------------------------------------------------------

class TestOptionKind:
    def test_values(self) -> None:
        assert [kind.value for kind in OptionKind] == [
            "boolean",
            "integer",
            "number",
            "string",
        ]

    def test_lookup_by_value(self) -> None:
        assert OptionKind("number") is OptionKind.NUMBER

    def test_unknown_value_raises(self) -> None:
        with pytest.raises(ValueError):
            OptionKind("float")

    def test_only_boolean_takes_no_value(self) -> None:
        assert not OptionKind.BOOLEAN.requires_value
        assert OptionKind.INTEGER.requires_value
        assert OptionKind.NUMBER.requires_value
        assert OptionKind.STRING.requires_value


# ---------------------------------------------------------------------------
# ParseResult
# ---------------------------------------------------------------------------

class TestParseResult:
    def test_error_defaults_to_none(self) -> None:
        result = ParseResult(args=("a",), options={"x": 1})
        assert result.error is None
        assert result.ok

    def test_not_ok_with_error(self) -> None:
        result = ParseResult(args=(), options={}, error=UnknownOptionError("x"))
        assert not result.ok

    def test_frozen(self) -> None:
        result = ParseResult(args=(), options={})
        with pytest.raises(AttributeError):
            result.args = ("b",)  # type: ignore[misc]

    def test_equality(self) -> None:
        assert ParseResult(args=("a",), options={"x": 1}) == ParseResult(
            args=("a",), options={"x": 1}
        )
