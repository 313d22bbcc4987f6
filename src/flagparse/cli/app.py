"""CLI application entry point for flagparse.

``flagparse`` parses a token list against a schema given on the command
line (or in a JSON schema file) and shows the outcome.  It exists to try
schemas out and to expose the parser to shell scripts via ``--json``.

This module is the **sole error boundary** for the executable.  It
catches :class:`~flagparse.exceptions.FlagParseError`,
``KeyboardInterrupt`` and any unexpected ``Exception``, rendering
user-friendly messages and returning well-defined exit codes.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from flagparse.cli import exit_codes
from flagparse.cli.console import console
from flagparse.cli.render import print_json, print_result
from flagparse.cli.schema_loader import build_schema
from flagparse.core.parser import parse_options
from flagparse.exceptions import FlagParseError
from flagparse.version import __version__

TOKENS_SEPARATOR: str = "--"


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Only the arguments before the first ``--`` are handled here; the
    rest is the token list handed to :func:`parse_options`.
    """
    parser = argparse.ArgumentParser(
        prog="flagparse",
        description="Parse a token list against a typed option schema.",
        epilog="Tokens to parse follow a literal '--', e.g. "
        "flagparse -o count:integer -- --count 3 input.txt",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-o",
        "--option",
        dest="options",
        action="append",
        default=[],
        metavar="NAME:KIND",
        help="Declare an option; KIND is boolean, integer, number or string.",
    )
    parser.add_argument(
        "-d",
        "--default",
        dest="defaults",
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="Default value for a declared option.",
    )
    parser.add_argument(
        "-s",
        "--schema-file",
        type=Path,
        default=None,
        metavar="PATH",
        help="JSON file with 'options' and 'defaults' objects.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON on stdout.",
    )
    return parser


def _split_argv(argv: Sequence[str]) -> tuple[list[str], list[str]]:
    """Split *argv* at the first ``--`` into (own args, tokens)."""
    items = list(argv)
    if TOKENS_SEPARATOR not in items:
        return items, []
    index = items.index(TOKENS_SEPARATOR)
    return items[:index], items[index + 1:]


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: Sequence[str] | None = None) -> int:
    """Run the flagparse CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.

    Raises
    ------
    FlagParseError
        For schema, config and (outside ``--json`` mode) parse errors;
        :func:`cli` renders them.
    """
    own_args, tokens = _split_argv(sys.argv[1:] if argv is None else argv)
    args = _build_parser().parse_args(own_args)

    spec = build_schema(args.options, args.defaults, args.schema_file)
    result = parse_options(tokens, spec.options, spec.defaults)

    if args.json:
        print_json(result)
        return exit_codes.SUCCESS if result.ok else exit_codes.GENERAL_ERROR

    if result.error is not None:
        raise result.error

    print_result(result, spec.options)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except FlagParseError as exc:
        console.labeled("[bold red]Error:[/bold red]", str(exc))
        if exc.hint:
            console.labeled("[yellow]Hint:[/yellow]", exc.hint)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.labeled(
            "[bold red]Unexpected error.[/bold red] Please report this issue.\n ",
            f"{type(exc).__name__}: {exc}",
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
