"""Runtime settings resolved from the environment.

Settings are an immutable snapshot taken once per invocation.  The CLI
may override individual values (e.g. ``--config``) with
:func:`dataclasses.replace`.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from display_manager.exceptions import SettingsError

CONFIG_FILENAME: str = ".display-manager.json"
"""Name of the layout file inside the user's home directory."""

DEFAULT_MAX_DISPLAYS: int = 10
"""How many active displays are requested from the OS by default."""

CONFIG_ENV_VAR: str = "DISPLAY_MANAGER_CONFIG"
MAX_DISPLAYS_ENV_VAR: str = "DISPLAY_MANAGER_MAX_DISPLAYS"


@dataclass(frozen=True, slots=True)
class Settings:
    """Resolved configuration for a single CLI invocation."""

    config_path: Path
    """Location of the JSON layout file."""

    max_displays: int = DEFAULT_MAX_DISPLAYS
    """Upper bound on the number of displays enumerated."""


def default_config_path() -> Path:
    """Return ``<home>/.display-manager.json``."""
    return Path.home() / CONFIG_FILENAME


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build :class:`Settings` from *environ* (defaults to ``os.environ``).

    Raises
    ------
    SettingsError
        When ``DISPLAY_MANAGER_MAX_DISPLAYS`` is not a positive integer.
    """
    env = os.environ if environ is None else environ

    raw_path = env.get(CONFIG_ENV_VAR, "").strip()
    config_path = Path(raw_path).expanduser() if raw_path else default_config_path()

    raw_max = env.get(MAX_DISPLAYS_ENV_VAR, "").strip()
    max_displays = DEFAULT_MAX_DISPLAYS
    if raw_max:
        try:
            max_displays = int(raw_max)
        except ValueError:
            max_displays = 0
        if max_displays < 1:
            raise SettingsError(
                f"Invalid {MAX_DISPLAYS_ENV_VAR} value: {raw_max!r}",
                hint="Use a positive integer, or unset the variable to use "
                f"the default of {DEFAULT_MAX_DISPLAYS}.",
            )

    return Settings(config_path=config_path, max_displays=max_displays)
