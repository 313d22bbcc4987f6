"""Core layer — the pure option parser and its value rules.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli``.
* All functions must be fully typed and deterministic.
"""

from flagparse.core.models import (
    DefaultsMap,
    OptionKind,
    OptionSchema,
    OptionValue,
    ParseResult,
)
from flagparse.core.coercion import coerce_default, coerce_value
from flagparse.core.parser import normalize_schema, parse_options

__all__: list[str] = [
    "DefaultsMap",
    "OptionKind",
    "OptionSchema",
    "OptionValue",
    "ParseResult",
    "coerce_default",
    "coerce_value",
    "normalize_schema",
    "parse_options",
]
