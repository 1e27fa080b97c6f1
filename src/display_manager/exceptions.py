"""Custom exception hierarchy for display-manager.

All exceptions that cross layer boundaries must inherit from
:class:`DisplayManagerError`.  Raw platform exceptions (e.g. from the
Quartz bindings) must NEVER propagate beyond the infrastructure layer —
they must be caught and re-raised as a typed subclass defined here.

Hierarchy
---------
DisplayManagerError
├── EnvironmentError
├── SettingsError
└── DisplayConfigurationError
    ├── ConfigurationBeginError
    └── ConfigurationCommitError
"""

from __future__ import annotations


class DisplayManagerError(Exception):
    """Base exception for all display-manager errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Environment / settings ------------------------------------------------

class EnvironmentError(DisplayManagerError):
    """Raised when a required runtime dependency or platform is not available."""


class SettingsError(DisplayManagerError):
    """Raised when a configuration value cannot be used."""


# --- Display configuration transactions ------------------------------------

class DisplayConfigurationError(DisplayManagerError):
    """Base class for failures of an OS display configuration transaction."""


class ConfigurationBeginError(DisplayConfigurationError):
    """Raised when the OS refuses to open a configuration transaction."""


class ConfigurationCommitError(DisplayConfigurationError):
    """Raised when the OS fails to commit a configuration transaction."""
