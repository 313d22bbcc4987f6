"""Pure value-coercion rules for value-taking options.

Every function in this module is a **pure** transformation — no I/O,
no side effects, fully deterministic.

Rules
-----
* ``string``  — the raw token, verbatim.
* ``integer`` — parsed as a float; must be finite and integral.
* ``number``  — parsed as a float; anything but NaN, infinities included.
* ``boolean`` — never consumes a token.
"""

from __future__ import annotations

import math

from flagparse.core.models import OptionKind, OptionValue
from flagparse.exceptions import InvalidValueError

_TRUE_WORDS: frozenset[str] = frozenset({"true", "1", "yes", "on"})
_FALSE_WORDS: frozenset[str] = frozenset({"false", "0", "no", "off"})


def _parse_float(raw: str) -> float | None:
    """Return ``float(raw)`` or ``None`` when *raw* is not numeric text."""
    try:
        return float(raw)
    except ValueError:
        return None


def coerce_integer(name: str, raw: str) -> int:
    # Plain digit strings go through int() to stay exact beyond 2**53.
    try:
        return int(raw)
    except ValueError:
        pass
    parsed = _parse_float(raw)
    if parsed is None or not math.isfinite(parsed) or not parsed.is_integer():
        raise InvalidValueError(name, OptionKind.INTEGER)
    return int(parsed)


def coerce_number(name: str, raw: str) -> float:
    parsed = _parse_float(raw)
    if parsed is None or math.isnan(parsed):
        raise InvalidValueError(name, OptionKind.NUMBER)
    return parsed


def coerce_value(name: str, kind: OptionKind, raw: str) -> OptionValue:
    """Convert the value token *raw* for option *name* according to *kind*.

    Raises
    ------
    InvalidValueError
        If *raw* does not satisfy the kind's rule.
    ValueError
        If *kind* is :attr:`OptionKind.BOOLEAN`, which takes no value.
    """
    if kind is OptionKind.STRING:
        return raw
    if kind is OptionKind.INTEGER:
        return coerce_integer(name, raw)
    if kind is OptionKind.NUMBER:
        return coerce_number(name, raw)
    raise ValueError(f"Option kind '{kind.value}' does not take a value.")


def coerce_default(name: str, kind: OptionKind, raw: str) -> OptionValue:
    """Convert a textual default (e.g. from ``--default``) to *kind*.

    Unlike :func:`coerce_value` this also accepts booleans, spelled as
    ``true/false``, ``1/0``, ``yes/no`` or ``on/off`` in any case.
    """
    if kind is not OptionKind.BOOLEAN:
        return coerce_value(name, kind, raw)

    word = raw.strip().lower()
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    raise InvalidValueError(name, kind)
