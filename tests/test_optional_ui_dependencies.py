"""Regression tests for the optional Rich dependency.

These tests verify that help, command output and diagnostics keep
working with plain ``print`` when Rich cannot be imported.
"""

from __future__ import annotations

import sys
from collections.abc import Callable
from typing import Any

import pytest

from display_manager.cli import exit_codes
from display_manager.cli.app import main
from display_manager.cli.console import strip_markup
from display_manager.core.models import DisplayDescriptor


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)
    monkeypatch.setitem(sys.modules, "rich.logging", None)
    monkeypatch.setitem(sys.modules, "rich.markup", None)
    monkeypatch.setitem(sys.modules, "rich.table", None)


def test_help_works_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--help"])
    assert exc_info.value.code == 0


def test_version_works_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])
    assert exc_info.value.code == 0


def test_list_works_without_rich(
    monkeypatch: pytest.MonkeyPatch,
    cli_env: Callable[..., Any],
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)
    cli_env(DisplayDescriptor(id=1, width=1920, height=1080, x=0, y=0))

    assert main(["list"]) == exit_codes.SUCCESS
    assert capsys.readouterr().out.splitlines() == [
        "Current displays:",
        "  Display 1: 1920x1080 at (0, 0)",
    ]


def test_layout_names_keep_brackets_without_rich(
    monkeypatch: pytest.MonkeyPatch,
    cli_env: Callable[..., Any],
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)
    cli_env(DisplayDescriptor(id=1, width=1920, height=1080, x=0, y=0))

    main(["save", "[bold]"])

    assert capsys.readouterr().out.strip() == "Saved '[bold]'"


def test_doctor_works_without_rich(
    monkeypatch: pytest.MonkeyPatch,
    cli_env: Callable[..., Any],
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    code = main(["doctor"])

    assert code in (exit_codes.SUCCESS, exit_codes.GENERAL_ERROR)
    out = capsys.readouterr().out
    assert "display-manager doctor" in out
    assert "[green]" not in out


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("[bold red]Error:[/bold red] boom", "Error: boom"),
        ("[yellow]Hint:[/] retry", "Hint: retry"),
        ("plain text", "plain text"),
    ],
)
def test_strip_markup(text: str, expected: str) -> None:
    assert strip_markup(text) == expected
