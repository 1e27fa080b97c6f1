"""CLI application entry point and command routing for display-manager.

This module is the **sole error boundary** for the entire application.
It catches :class:`~display_manager.exceptions.DisplayManagerError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to
  :class:`~display_manager.core.layout_service.LayoutService` and the
  infrastructure adapters.
* ``print()`` is forbidden outside the console helpers; the console
  proxy is used exclusively.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import dataclasses
import sys
from collections.abc import Callable
from pathlib import Path

from display_manager.cli import exit_codes
from display_manager.cli.console import configure_logging, console, err_console
from display_manager.core.layout_service import LayoutService
from display_manager.core.models import ApplyOutcome, RemoveOutcome
from display_manager.core.protocols import DisplayProvider
from display_manager.exceptions import DisplayManagerError
from display_manager.settings import Settings, load_settings
from display_manager.version import __version__

PROG: str = "display-manager"

_COMMANDS_HELP = """\
Commands:
  list          Show current displays
  layouts       List saved layouts
  save <name>   Save current layout
  apply <name>  Apply saved layout
  delete <name> Delete a layout
  doctor        Check the environment
"""

_NAMED_COMMANDS: frozenset[str] = frozenset({"save", "apply", "delete"})


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Only options are declared.  The command and its name are the leftover
    words from :meth:`~argparse.ArgumentParser.parse_known_args` and are
    dispatched by hand.  Unrecognised words never become an argparse
    error.
    """
    parser = argparse.ArgumentParser(
        prog=PROG,
        usage="%(prog)s [options] <command> [name]",
        description="Save and restore multi-monitor display layouts.",
        epilog=_COMMANDS_HELP,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every display lookup and configuration request.",
    )
    parser.add_argument(
        "-c",
        "--config",
        metavar="PATH",
        default=None,
        help="Layout file to use instead of ~/.display-manager.json.",
    )
    return parser


# ---------------------------------------------------------------------------
# Wiring
# ---------------------------------------------------------------------------

def _build_provider() -> DisplayProvider:
    """Return the display backend for this platform."""
    from display_manager.infra.quartz_provider import QuartzDisplayProvider

    return QuartzDisplayProvider()


def _build_service(settings: Settings) -> LayoutService:
    from display_manager.infra.json_store import JsonLayoutStore

    return LayoutService(
        JsonLayoutStore(settings.config_path),
        _build_provider(),
        max_displays=settings.max_displays,
    )


# ---------------------------------------------------------------------------
# Command handlers
# ---------------------------------------------------------------------------

def _handle_list(settings: Settings, name: str | None) -> int:
    displays = _build_service(settings).list_displays()
    console.print("Current displays:")
    for display in displays:
        console.print(
            f"  Display {display.id}: {display.width}x{display.height} "
            f"at ({display.x}, {display.y})",
            markup=False,
        )
    return exit_codes.SUCCESS


def _handle_layouts(settings: Settings, name: str | None) -> int:
    names = _build_service(settings).layout_names()
    if not names:
        console.print(f"No layouts saved. Use: {PROG} save <name>")
    else:
        console.print(f"Saved layouts: {', '.join(names)}", markup=False)
    return exit_codes.SUCCESS


def _handle_save(settings: Settings, name: str) -> int:
    result = _build_service(settings).save_layout(name)
    if not result.persisted:
        console.print(f"Failed to save '{name}'", markup=False)
        return exit_codes.GENERAL_ERROR
    console.print(f"Saved '{name}'", markup=False)
    return exit_codes.SUCCESS


def _handle_apply(settings: Settings, name: str) -> int:
    result = _build_service(settings).apply_layout(name)

    if result.outcome is ApplyOutcome.APPLIED:
        console.print(f"Applied '{name}'", markup=False)
        return exit_codes.SUCCESS
    if result.outcome is ApplyOutcome.LAYOUT_NOT_FOUND:
        console.print(
            f"Layout '{name}' not found. Available: {', '.join(result.available)}",
            markup=False,
        )
    elif result.outcome is ApplyOutcome.BEGIN_FAILED:
        console.print("Failed to begin configuration")
    else:
        console.print("Failed to apply")
    return exit_codes.GENERAL_ERROR


def _handle_delete(settings: Settings, name: str) -> int:
    outcome = _build_service(settings).delete_layout(name)
    if outcome is RemoveOutcome.REMOVED:
        console.print(f"Deleted '{name}'", markup=False)
        return exit_codes.SUCCESS
    if outcome is RemoveOutcome.WRITE_FAILED:
        console.print(f"Failed to delete '{name}'", markup=False)
        return exit_codes.GENERAL_ERROR
    console.print(f"Layout '{name}' not found", markup=False)
    return exit_codes.GENERAL_ERROR


def _handle_doctor(settings: Settings, name: str | None) -> int:
    """Dispatch the ``doctor`` diagnostics command."""
    from display_manager.cli.doctor import run_doctor

    return run_doctor(settings, _build_provider())


_HANDLERS: dict[str, Callable[..., int]] = {
    "list": _handle_list,
    "layouts": _handle_layouts,
    "save": _handle_save,
    "apply": _handle_apply,
    "delete": _handle_delete,
    "doctor": _handle_doctor,
}


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the display-manager CLI.

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
    """
    parser = _build_parser()
    args, words = parser.parse_known_args(argv)
    configure_logging(args.verbose)

    if not words:
        parser.print_help()
        return exit_codes.SUCCESS

    command = words[0]
    # Words after the layout name are ignored.
    name = words[1] if len(words) > 1 else None
    handler = _HANDLERS.get(command)
    if handler is None:
        console.print(f"Unknown command: {command}", markup=False)
        return exit_codes.GENERAL_ERROR

    if command in _NAMED_COMMANDS and name is None:
        console.print(f"Usage: {command} <name>")
        return exit_codes.SUCCESS

    settings = load_settings()
    if args.config:
        settings = dataclasses.replace(settings, config_path=Path(args.config).expanduser())

    return handler(settings, name)


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
    except DisplayManagerError as exc:
        err_console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            err_console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        err_console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        err_console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
