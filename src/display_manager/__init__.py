"""display-manager — save and restore multi-monitor arrangements.

Named layouts are stored as JSON in the user's home directory and
re-applied through the operating system's display configuration API.
"""

from display_manager.version import __version__

__all__: list[str] = ["__version__"]
