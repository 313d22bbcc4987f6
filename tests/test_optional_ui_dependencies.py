"""Regression tests for the optional Rich dependency.

Bootstrap commands and JSON output must work without Rich, and the
error boundary must fall back to plain stderr text.
"""

from __future__ import annotations

import json
import sys

import pytest

from flagparse.cli import exit_codes
from flagparse.cli.app import cli, main
from flagparse.cli.console import get_rich_console, strip_markup
from flagparse.exceptions import DependencyError


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)
    monkeypatch.setitem(sys.modules, "rich.markup", None)
    monkeypatch.setitem(sys.modules, "rich.table", None)


def test_help_works_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--help"])
    assert exc_info.value.code == 0


def test_json_works_without_rich(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    code = main(["--json", "-o", "n:integer", "--", "--n", "2"])
    assert code == exit_codes.SUCCESS
    assert json.loads(capsys.readouterr().out)["options"] == {"n": 2}


def test_table_falls_back_to_plain_text(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    assert main(["-o", "label:string", "--", "--label", "Hi", "The", "fox"]) == 0
    err = capsys.readouterr().err
    assert "label" in err
    assert "Arguments: The fox" in err


def test_error_boundary_strips_markup_without_rich(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)
    monkeypatch.setattr(sys, "argv", ["flagparse", "--", "--bad"])

    with pytest.raises(SystemExit) as exc_info:
        cli()
    assert exc_info.value.code == exit_codes.GENERAL_ERROR
    assert "Error: Unknown flag/switch 'bad'" in capsys.readouterr().err


def test_get_rich_console_raises_dependency_error(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(DependencyError, match="rich is not installed"):
        get_rich_console()


def test_strip_markup() -> None:
    assert strip_markup("[bold red]Error:[/bold red] x") == "Error: x"


def test_plain_error_keeps_bracketed_option_names(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)
    monkeypatch.setattr(sys, "argv", ["flagparse", "--", "--[bold]x"])

    with pytest.raises(SystemExit):
        cli()
    assert "Error: Unknown flag/switch '[bold]x'" in capsys.readouterr().err
