"""CLI console helpers with optional Rich support.

Rich is imported lazily so ``--help``, ``--version`` and ``--json``
keep working when it is not installed.
"""

from __future__ import annotations

import re
import sys
from typing import Any

from flagparse.exceptions import DependencyError

_MARKUP_TAG = re.compile(r"\[/?[a-z][a-z ]*\]")


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``DependencyError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise DependencyError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console() -> Any:
    """Create a Rich console instance targeting stderr."""
    console_class = _load_rich_console_class()
    return console_class(stderr=True)


def strip_markup(text: str) -> str:
    """Drop ``[style]...[/style]`` tags for plain-text output."""
    return _MARKUP_TAG.sub("", text)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with Rich fallback."""

    def print(self, *objects: object) -> None:
        """Render with Rich when available, else plain stderr print."""
        try:
            rich_console = get_rich_console()
        except DependencyError:
            plain = [strip_markup(obj) if isinstance(obj, str) else obj for obj in objects]
            print(*plain, file=sys.stderr)
            return
        rich_console.print(*objects)

    def labeled(self, label: str, text: str) -> None:
        """Print a markup *label* followed by *text* shown literally.

        *text* may hold user input, so it is escaped for Rich and left
        untouched by the plain fallback.
        """
        try:
            rich_console = get_rich_console()
        except DependencyError:
            print(strip_markup(label), text, file=sys.stderr)
            return
        from rich.markup import escape

        rich_console.print(label, escape(text))


console = _ConsoleProxy()
