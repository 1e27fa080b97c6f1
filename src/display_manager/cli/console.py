"""CLI console and logging helpers with optional Rich support.

This module intentionally avoids module-level imports of Rich so that
bootstrap paths (``--help``, ``--version``) and plain command output
remain functional even when Rich is not installed.
"""

from __future__ import annotations

import logging
import re
import sys
from typing import Any

from display_manager.exceptions import EnvironmentError

# Rich style tags such as ``[bold red]`` / ``[/bold red]`` / ``[/]``.
_STYLE_TAG_RE = re.compile(r"\[/?[a-z #]*\]")


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console(*, stderr: bool = False) -> Any:
	"""Create a Rich console instance targeting stdout or stderr."""
	console_class = _load_rich_console_class()
	return console_class(stderr=stderr)


def strip_markup(text: str) -> str:
	"""Remove Rich style tags for plain-text output."""
	return _STYLE_TAG_RE.sub("", text)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback.

	Pass ``markup=False`` for lines containing user data (layout names)
	so that square brackets in them are printed verbatim.
	"""

	def __init__(self, *, stderr: bool = False) -> None:
		self._stderr = stderr

	def print(self, *objects: object, markup: bool = True) -> None:
		"""Render with Rich when available, else plain print."""
		try:
			rich_console = get_rich_console(stderr=self._stderr)
		except EnvironmentError:
			stream = sys.stderr if self._stderr else sys.stdout
			if markup:
				objects = tuple(strip_markup(str(obj)) for obj in objects)
			print(*objects, file=stream)
			return
		rich_console.print(*objects, markup=markup, highlight=False, soft_wrap=True)


console = _ConsoleProxy()
"""Command results (stdout)."""

err_console = _ConsoleProxy(stderr=True)
"""Errors, warnings, and diagnostics (stderr)."""


def configure_logging(verbose: bool = False) -> None:
	"""Route ``display_manager`` log records to stderr.

	WARNING and above are shown by default; *verbose* enables DEBUG.
	Uses ``rich.logging.RichHandler`` when Rich is installed.
	"""
	handler: logging.Handler
	try:
		from rich.logging import RichHandler
	except ModuleNotFoundError:
		handler = logging.StreamHandler(sys.stderr)
		handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
	else:
		handler = RichHandler(
			console=get_rich_console(stderr=True),
			show_time=False,
			show_path=False,
		)

	logger = logging.getLogger("display_manager")
	for existing in list(logger.handlers):
		logger.removeHandler(existing)
	logger.addHandler(handler)
	logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
