"""Custom exception hierarchy for flagparse.

Every failure the parser can report is a subclass of
:class:`FlagParseError`.  :func:`~flagparse.core.parser.parse_options`
never lets one escape: it is captured into
:attr:`~flagparse.core.models.ParseResult.error`.  Everywhere else they
propagate up to ``cli()``, the only place that renders them.

Hierarchy
---------
FlagParseError
├── UnknownOptionError
├── MissingValueError
├── InvalidValueError
├── SchemaError
├── ConfigFileError
└── DependencyError
"""

from __future__ import annotations

from flagparse.core.models import OptionKind


class FlagParseError(Exception):
    """Base exception for all flagparse errors.

    Callers distinguish parse failures by message text; the subclasses
    exist so the CLI can attach hints and tests can be precise.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Token scanning --------------------------------------------------------

class UnknownOptionError(FlagParseError):
    """Raised when a ``--name`` token matches no schema entry."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown flag/switch '{name}'")
        self.name: str = name


class MissingValueError(FlagParseError):
    """Raised when the tokens end while an option awaits its value."""

    def __init__(self, name: str, kind: OptionKind) -> None:
        super().__init__(f"Flag --{name} requires {kind.value} value.")
        self.name: str = name
        self.kind: OptionKind = kind


class InvalidValueError(FlagParseError):
    """Raised when a value token fails its kind's coercion rule."""

    def __init__(self, name: str, kind: OptionKind) -> None:
        super().__init__(f"Flag --{name} requires {kind.value} value.")
        self.name: str = name
        self.kind: OptionKind = kind


# --- Schema / configuration ------------------------------------------------

class SchemaError(FlagParseError):
    """Raised when a schema entry or default is malformed."""


class ConfigFileError(FlagParseError):
    """Raised when a schema file cannot be read or has the wrong shape."""


# --- Environment -----------------------------------------------------------

class DependencyError(FlagParseError):
    """Raised when an optional runtime dependency is not available."""
