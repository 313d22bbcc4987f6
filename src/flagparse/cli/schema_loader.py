"""Build an option schema and defaults from CLI specs and schema files.

Sources, lowest precedence first:

1. ``--schema-file PATH`` — JSON ``{"options": {...}, "defaults": {...}}``
2. ``--option NAME:KIND`` entries
3. ``--default NAME=VALUE`` entries

Textual defaults are coerced with the declared kind so the resulting
defaults map always matches the schema.
"""

from __future__ import annotations

import json
import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from flagparse.core.coercion import coerce_default
from flagparse.core.models import OptionKind, OptionValue
from flagparse.core.parser import OPTION_PREFIX, normalize_schema
from flagparse.exceptions import ConfigFileError, InvalidValueError, SchemaError


@dataclass(frozen=True, slots=True)
class SchemaSpec:
    """A resolved schema plus the defaults that go with it."""

    options: dict[str, OptionKind]
    defaults: dict[str, OptionValue]


# ---------------------------------------------------------------------------
# Single-entry parsers
# ---------------------------------------------------------------------------

def parse_option_spec(spec: str) -> tuple[str, OptionKind]:
    """Parse ``NAME:KIND`` into a ``(name, kind)`` pair."""
    name, sep, kind = spec.partition(":")
    name = name.strip()
    if not sep or not name:
        raise SchemaError(
            f"Invalid option spec '{spec}'",
            hint="Expected NAME:KIND, e.g. count:integer",
        )
    if name.startswith("-"):
        raise SchemaError(
            f"Invalid option spec '{spec}'",
            hint=f"Declare the bare name without the {OPTION_PREFIX} prefix.",
        )
    return name, normalize_schema({name: kind.strip()})[name]


def parse_default_spec(spec: str) -> tuple[str, str]:
    """Split ``NAME=VALUE`` at the first ``=``; the value may be empty."""
    name, sep, value = spec.partition("=")
    name = name.strip()
    if not sep or not name:
        raise SchemaError(
            f"Invalid default spec '{spec}'",
            hint="Expected NAME=VALUE, e.g. count=3",
        )
    return name, value


# ---------------------------------------------------------------------------
# Schema file
# ---------------------------------------------------------------------------

def _require_mapping(value: Any, label: str, path: Path) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigFileError(f"'{label}' in {path} must be a JSON object.")
    return value


def _typed_default(name: str, kind: OptionKind, value: Any) -> OptionValue:
    """Accept values that already match *kind*; coerce strings."""
    if isinstance(value, str):
        return coerce_default(name, kind, value)
    if kind is OptionKind.BOOLEAN and isinstance(value, bool):
        return value
    if kind is OptionKind.INTEGER and isinstance(value, int) and not isinstance(value, bool):
        return value
    if kind is OptionKind.NUMBER and isinstance(value, (int, float)) and not isinstance(value, bool):
        if math.isnan(value):
            raise InvalidValueError(name, kind)
        return float(value)
    raise InvalidValueError(name, kind)


def load_schema_file(path: Path) -> SchemaSpec:
    """Read a JSON schema file.

    Raises
    ------
    ConfigFileError
        If the file cannot be read, is not valid JSON, or has the wrong
        shape.
    SchemaError
        If a declared kind is unknown or a default names an undeclared
        option.
    """
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigFileError(f"Cannot read schema file {path}: {exc.strerror}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigFileError(
            f"Schema file {path} is not valid JSON: {exc.msg} (line {exc.lineno})",
        ) from exc

    if not isinstance(raw, dict):
        raise ConfigFileError(f"Schema file {path} must contain a JSON object.")

    options = normalize_schema(_require_mapping(raw.get("options"), "options", path))
    defaults: dict[str, OptionValue] = {}
    for name, value in _require_mapping(raw.get("defaults"), "defaults", path).items():
        defaults[name] = _typed_default(name, _declared_kind(name, options), value)
    return SchemaSpec(options=options, defaults=defaults)


# ---------------------------------------------------------------------------
# Composite builder
# ---------------------------------------------------------------------------

def _declared_kind(name: str, options: Mapping[str, OptionKind]) -> OptionKind:
    kind = options.get(name)
    if kind is None:
        raise SchemaError(
            f"Default given for undeclared option '{name}'",
            hint=f"Declare it first with --option {name}:KIND",
        )
    return kind


def build_schema(
    option_specs: Sequence[str] = (),
    default_specs: Sequence[str] = (),
    schema_file: Path | None = None,
) -> SchemaSpec:
    """Merge the schema file (if any) with command-line specs."""
    base = load_schema_file(schema_file) if schema_file is not None else None
    options: dict[str, OptionKind] = dict(base.options) if base else {}
    defaults: dict[str, OptionValue] = dict(base.defaults) if base else {}

    for spec in option_specs:
        name, kind = parse_option_spec(spec)
        options[name] = kind

    for spec in default_specs:
        name, raw = parse_default_spec(spec)
        defaults[name] = coerce_default(name, _declared_kind(name, options), raw)

    # Kinds may have been redeclared after the file defaults were read.
    typed = {
        name: _typed_default(name, _declared_kind(name, options), value)
        for name, value in defaults.items()
    }
    return SchemaSpec(options=options, defaults=typed)
