"""Domain models for flagparse.

Value objects shared by the parser, the coercion rules and the CLI.
Results are **frozen** dataclasses built fresh for every call; nothing
here holds state between calls.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from flagparse.exceptions import FlagParseError


# ---------------------------------------------------------------------------
# Option kinds
# ---------------------------------------------------------------------------

class OptionKind(str, Enum):
    """Closed set of value kinds an option can declare."""

    BOOLEAN = "boolean"
    INTEGER = "integer"
    NUMBER = "number"
    STRING = "string"

    @property
    def requires_value(self) -> bool:
        """Whether the option consumes the following token as its value."""
        return self is not OptionKind.BOOLEAN


OptionValue = Union[bool, int, float, str]
"""A resolved option value; its shape follows the declared kind."""

OptionSchema = Mapping[str, Union[OptionKind, str]]
"""Bare option name (no leading dashes) → declared kind."""

DefaultsMap = Mapping[str, OptionValue]
"""Option name → value used when the option is absent from the tokens."""


# ---------------------------------------------------------------------------
# Parse result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ParseResult:
    """Outcome of a single :func:`~flagparse.core.parser.parse_options` call.

    Exactly one outcome is meaningful: either :attr:`error` is ``None``
    and the other fields reflect a full parse, or :attr:`error` is set,
    :attr:`options` equals the supplied defaults and :attr:`args` holds
    only the positional tokens seen before the failing token.
    """

    args: tuple[str, ...]
    """Positional tokens in encounter order."""

    options: dict[str, OptionValue]
    """Defaults overlaid with parsed values (last occurrence wins)."""

    error: FlagParseError | None = field(default=None)
    """The terminal error, or ``None`` on success."""

    @property
    def ok(self) -> bool:
        return self.error is None
