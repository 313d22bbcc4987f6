"""Presentation of a :class:`~flagparse.core.models.ParseResult`.

Two outputs:

* a Rich table on stderr (plain-text fallback when Rich is missing);
* a JSON document on stdout for scripting (``--json``).

All display-related logic lives here — no parsing, no validation.
"""

from __future__ import annotations

import json
import math
import sys
from typing import Any

from flagparse.cli.console import console
from flagparse.core.models import OptionKind, OptionValue, ParseResult


# ---------------------------------------------------------------------------
# Presentation helpers (pure transforms — no I/O themselves)
# ---------------------------------------------------------------------------

def format_value(value: OptionValue) -> str:
    """Render a value the way a user would type it back."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
    return str(value)


def _json_value(value: OptionValue) -> Any:
    # JSON has no infinity literal.
    if isinstance(value, float) and math.isinf(value):
        return format_value(value)
    return value


def result_to_dict(result: ParseResult) -> dict[str, Any]:
    """Convert *result* into a JSON-serialisable dict."""
    error: dict[str, Any] | None = None
    if result.error is not None:
        error = {"message": str(result.error), "hint": result.error.hint}
    return {
        "args": list(result.args),
        "options": {name: _json_value(value) for name, value in result.options.items()},
        "error": error,
    }


def _rows(
    result: ParseResult,
    schema: dict[str, OptionKind],
) -> list[tuple[str, str, str]]:
    """Return ``(option, kind, value)`` rows sorted by option name."""
    rows: list[tuple[str, str, str]] = []
    for name in sorted(result.options):
        kind = schema.get(name)
        rows.append((name, kind.value if kind else "?", format_value(result.options[name])))
    return rows


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------

def print_json(result: ParseResult) -> None:
    """Write *result* as a single JSON document to stdout."""
    print(json.dumps(result_to_dict(result), indent=2, allow_nan=False))


def _print_plain_table(rows: list[tuple[str, str, str]], args: tuple[str, ...]) -> None:
    """Render the result without Rich."""
    print("\nParsed options", file=sys.stderr)
    print("=" * 56, file=sys.stderr)
    print(f"{'Option':<20} {'Kind':<10} {'Value':<24}", file=sys.stderr)
    print("-" * 56, file=sys.stderr)
    for name, kind, value in rows:
        print(f"{name:<20} {kind:<10} {value:<24}", file=sys.stderr)
    print(f"\nArguments: {' '.join(args) if args else '(none)'}", file=sys.stderr)
    print(file=sys.stderr)


def print_result(result: ParseResult, schema: dict[str, OptionKind]) -> None:
    """Display the resolved options table and positional arguments."""
    rows = _rows(result, schema)

    try:
        from rich.markup import escape
        from rich.table import Table
    except ModuleNotFoundError:
        _print_plain_table(rows, result.args)
        return

    table = Table(
        title="Parsed options",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Option", style="bold", min_width=12)
    table.add_column("Kind", min_width=8)
    table.add_column("Value", justify="right", min_width=10)

    for name, kind, value in rows:
        table.add_row(escape(name), kind, escape(value))

    console.print()
    console.print(table)
    if result.args:
        joined = escape(" ".join(result.args))
        console.print(f"[bold cyan]Arguments:[/bold cyan] {joined}")
    else:
        console.print("[bold cyan]Arguments:[/bold cyan] [dim](none)[/dim]")
    console.print()
