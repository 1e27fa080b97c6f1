"""Infrastructure layer — external system integration.

This layer wraps all interaction with the layout file and the macOS
display subsystem.  Every raw platform failure is caught here and either
logged as a soft failure or re-raised as a
:class:`~display_manager.exceptions.DisplayManagerError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from display_manager.infra.json_store import JsonLayoutStore
from display_manager.infra.quartz_provider import (
    QuartzDisplayProvider,
    QuartzDisplayTransaction,
    load_quartz,
)

__all__: list[str] = [
    "JsonLayoutStore",
    "QuartzDisplayProvider",
    "QuartzDisplayTransaction",
    "load_quartz",
]
