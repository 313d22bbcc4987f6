"""Single-pass long-option parser.

:func:`parse_options` is the whole algorithmic surface of the package:
a pure, total function from ``(tokens, schema, defaults)`` to a
:class:`~flagparse.core.models.ParseResult`.

Guarantees
----------
* One left-to-right scan, no backtracking.
* Never raises; every failure lands in ``ParseResult.error``.
* Never mutates the caller's schema or defaults.
* On failure the options are the defaults, untouched by anything parsed
  before the failing token.
"""

from __future__ import annotations

from collections.abc import Iterable

from flagparse.core.coercion import coerce_value
from flagparse.core.models import (
    DefaultsMap,
    OptionKind,
    OptionSchema,
    OptionValue,
    ParseResult,
)
from flagparse.exceptions import (
    FlagParseError,
    MissingValueError,
    SchemaError,
    UnknownOptionError,
)

OPTION_PREFIX: str = "--"
NEGATION_PREFIX: str = "no-"


# ---------------------------------------------------------------------------
# Schema helpers
# ---------------------------------------------------------------------------

def normalize_schema(schema: OptionSchema) -> dict[str, OptionKind]:
    """Return a fresh ``name → OptionKind`` dict, accepting kind strings.

    Raises
    ------
    SchemaError
        If a kind is not one of ``boolean``, ``integer``, ``number``,
        ``string``.
    """
    normalized: dict[str, OptionKind] = {}
    for name, kind in schema.items():
        try:
            normalized[name] = OptionKind(kind)
        except ValueError:
            raise SchemaError(
                f"Unknown option kind '{kind}' for '{name}'",
                hint="Use one of: boolean, integer, number, string.",
            ) from None
    return normalized


def _resolve_kind(name: str, schema: dict[str, OptionKind]) -> OptionKind:
    """Look *name* up directly, then as a negated boolean."""
    kind = schema.get(name)
    if kind is not None:
        return kind
    if name.startswith(NEGATION_PREFIX):
        negated = schema.get(name[len(NEGATION_PREFIX):])
        if negated is OptionKind.BOOLEAN:
            return negated
    raise UnknownOptionError(name)


def _flag_value(name: str) -> tuple[str, bool]:
    # The prefix is stripped even for schema names that start with it.
    if name.startswith(NEGATION_PREFIX):
        return name[len(NEGATION_PREFIX):], False
    return name, True


# ---------------------------------------------------------------------------
# Scan
# ---------------------------------------------------------------------------

def _scan(
    tokens: Iterable[str],
    schema: dict[str, OptionKind],
    positional: list[str],
) -> list[tuple[str, OptionValue]]:
    """Classify *tokens*, appending positionals as they are met.

    Returns the resolved ``(name, value)`` pairs in encounter order.
    Raises on the first failure, leaving *positional* holding the
    tokens seen before it.
    """
    resolved: list[tuple[str, OptionValue]] = []
    pending: tuple[str, OptionKind] | None = None

    for token in tokens:
        if pending is not None:
            name, kind = pending
            resolved.append((name, coerce_value(name, kind, token)))
            pending = None
        elif token.startswith(OPTION_PREFIX):
            name = token[len(OPTION_PREFIX):]
            kind = _resolve_kind(name, schema)
            if kind.requires_value:
                pending = (name, kind)
            else:
                resolved.append(_flag_value(name))
        else:
            positional.append(token)

    if pending is not None:
        raise MissingValueError(*pending)
    return resolved


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def parse_options(
    tokens: Iterable[str],
    schema: OptionSchema,
    defaults: DefaultsMap | None = None,
) -> ParseResult:
    """Split *tokens* into positional arguments and typed options.

    Parameters
    ----------
    tokens:
        Argv-like strings, without the program name.  Any iterable is
        accepted and consumed once.
    schema:
        Bare option name → :class:`OptionKind` (or its string value).
        ``--no-<name>`` is accepted for boolean ``<name>`` entries.
    defaults:
        Values for options absent from *tokens*.

    Returns
    -------
    ParseResult
        ``error`` is ``None`` on success.  Otherwise ``options`` equals
        *defaults* and ``args`` holds the positionals met before the
        failing token.
    """
    options: dict[str, OptionValue] = dict(defaults or {})
    positional: list[str] = []

    try:
        resolved = _scan(tokens, normalize_schema(schema), positional)
    except FlagParseError as exc:
        return ParseResult(args=tuple(positional), options=options, error=exc)
    except Exception as exc:  # noqa: BLE001
        error = FlagParseError(str(exc))
        error.__cause__ = exc
        return ParseResult(args=tuple(positional), options=options, error=error)

    for name, value in resolved:
        options[name] = value
    return ParseResult(args=tuple(positional), options=options)
