"""``display-manager doctor`` — environment diagnostics command.

Gathers system information and renders a Rich table summarising
whether the runtime environment can enumerate and reposition displays.

This module lives in the CLI layer — it may import from ``infra``
and ``core``, and it renders via Rich.  No business logic resides
here; it purely collects and displays diagnostic data.
"""

from __future__ import annotations

import platform
import sys

from display_manager.cli import exit_codes
from display_manager.cli.console import console, strip_markup
from display_manager.core.models import LoadStatus
from display_manager.core.protocols import DisplayProvider
from display_manager.exceptions import DisplayManagerError
from display_manager.infra.json_store import JsonLayoutStore
from display_manager.infra.quartz_provider import load_quartz
from display_manager.settings import Settings
from display_manager.version import __version__

_OK = "[green]OK[/green]"
_WARN = "[yellow]WARN[/yellow]"
_FAIL = "[red]FAIL[/red]"


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the display-manager version row."""
    return "display-manager", __version__, _OK


def _python_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    ok = sys.version_info[:2] >= (3, 10)
    status = _OK if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _os_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the OS row.

    Only macOS has a display backend.
    """
    system_raw = platform.system()
    system_display = {
        "Windows": "Windows",
        "Linux": "Linux",
        "Darwin": "macOS",
    }.get(system_raw, system_raw)
    value = f"{system_display} {platform.release()} ({platform.machine()})"
    status = _OK if system_raw == "Darwin" else "[red]FAIL (macOS required)[/red]"
    return "OS", value, status


def _quartz_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Quartz bindings row."""
    try:
        load_quartz()
    except DisplayManagerError:
        return "Quartz", "NOT INSTALLED", _FAIL
    return "Quartz", "available", _OK


def _layout_file_check(settings: Settings) -> tuple[str, str, str]:
    """Return (label, value, status) for the layout file row."""
    snapshot = JsonLayoutStore(settings.config_path).load()
    if snapshot.status is LoadStatus.LOADED:
        count = len(snapshot.config.layouts)
        return "Layout file", f"{count} layout(s) in {settings.config_path}", _OK
    if snapshot.status is LoadStatus.MISSING:
        return "Layout file", f"not created yet ({settings.config_path})", _OK
    return "Layout file", f"unreadable: {snapshot.error}", _WARN


def _displays_check(settings: Settings, provider: DisplayProvider) -> tuple[str, str, str]:
    """Return (label, value, status) for the live displays row."""
    try:
        displays = provider.list_displays(settings.max_displays)
    except DisplayManagerError:
        return "Displays", "unavailable", _FAIL
    if not displays:
        return "Displays", "none detected", _WARN
    return "Displays", f"{len(displays)} active", _OK


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    return strip_markup(status)


def _print_plain_doctor_table(checks: list[tuple[str, str, str]]) -> None:
    """Render doctor output without Rich."""
    print("\ndisplay-manager doctor")
    print("=" * 72)
    print(f"{'Component':<16} {'Value':<40} {'Status':<8}")
    print("-" * 72)
    for label, value, status in checks:
        print(f"{label:<16} {value:<40} {_status_plain(status):<8}")
    print()


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor(settings: Settings, provider: DisplayProvider) -> int:
    """Execute all diagnostic checks and render a summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when no check fails,
        :data:`exit_codes.GENERAL_ERROR` otherwise.
    """
    checks = [
        _version_check(),
        _python_version_check(),
        _os_check(),
        _quartz_check(),
        _layout_file_check(settings),
        _displays_check(settings, provider),
    ]
    has_failure = any("FAIL" in status for _, _, status in checks)

    rich_available = True
    try:
        from rich.markup import escape
        from rich.table import Table
    except ModuleNotFoundError:
        rich_available = False

    if rich_available:
        table = Table(
            title="display-manager doctor",
            show_header=True,
            header_style="bold cyan",
            border_style="dim",
        )
        table.add_column("Component", style="bold", min_width=12)
        table.add_column("Value", min_width=20)
        table.add_column("Status", justify="center", min_width=8)

        for label, value, status in checks:
            table.add_row(label, escape(value), status)

        console.print()
        console.print(table)
        console.print()
    else:
        _print_plain_doctor_table(checks)

    if has_failure:
        console.print("[bold red]Some checks failed.[/bold red]")
        return exit_codes.GENERAL_ERROR

    console.print("[bold green]All checks passed.[/bold green]")
    return exit_codes.SUCCESS
