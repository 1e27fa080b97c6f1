"""CoreGraphics backed implementation of :class:`~display_manager.core.protocols.DisplayProvider`.

This module is the **only** place in the codebase that imports the pyobjc
``Quartz`` bindings.  Non-zero ``CGError`` codes are either logged (for
read-only enumeration and individual origin requests) or re-raised as
typed :class:`~display_manager.exceptions.DisplayConfigurationError`
subclasses — nothing raw escapes the infrastructure boundary.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

from display_manager.core.models import DisplayDescriptor
from display_manager.exceptions import (
    ConfigurationBeginError,
    ConfigurationCommitError,
    EnvironmentError,
)

logger = logging.getLogger(__name__)

_CG_SUCCESS: int = 0
"""``kCGErrorSuccess``."""


def load_quartz() -> Any:
    """Import and return the ``Quartz`` module or raise ``EnvironmentError``."""
    try:
        import Quartz
    except ModuleNotFoundError as exc:
        if sys.platform != "darwin":
            raise EnvironmentError(
                f"Display configuration is only supported on macOS (running on {sys.platform}).",
            ) from exc
        raise EnvironmentError(
            "The Quartz bindings are not installed.",
            hint="Install with: pip install pyobjc-framework-Quartz",
        ) from exc
    return Quartz


class QuartzDisplayTransaction:
    """An open ``CGDisplayConfigRef``.

    Satisfies :class:`~display_manager.core.protocols.DisplayTransaction`
    structurally.
    """

    def __init__(self, quartz: Any, config_ref: Any) -> None:
        self._quartz = quartz
        self._ref = config_ref

    def set_origin(self, display_id: int, x: int, y: int) -> None:
        err = self._quartz.CGConfigureDisplayOrigin(self._ref, display_id, x, y)
        if err != _CG_SUCCESS:
            logger.warning(
                "CGConfigureDisplayOrigin(%d, %d, %d) failed with CGError %d",
                display_id,
                x,
                y,
                err,
            )

    def commit(self) -> None:
        err = self._quartz.CGCompleteDisplayConfiguration(
            self._ref,
            self._quartz.kCGConfigurePermanently,
        )
        if err != _CG_SUCCESS:
            raise ConfigurationCommitError(
                f"CGCompleteDisplayConfiguration failed with CGError {err}",
            )

    def cancel(self) -> None:
        err = self._quartz.CGCancelDisplayConfiguration(self._ref)
        if err != _CG_SUCCESS:
            logger.warning("CGCancelDisplayConfiguration failed with CGError %d", err)


class QuartzDisplayProvider:
    """Concrete :class:`DisplayProvider` backed by macOS CoreGraphics.

    Usage::

        provider = QuartzDisplayProvider()
        displays = provider.list_displays(10)

    *quartz* may be supplied to bypass the lazy import; by default the
    bindings are loaded on first use.
    """

    def __init__(self, quartz: Any | None = None) -> None:
        self._quartz = quartz

    @property
    def quartz(self) -> Any:
        if self._quartz is None:
            self._quartz = load_quartz()
        return self._quartz

    # ------------------------------------------------------------------
    # Protocol methods
    # ------------------------------------------------------------------

    def list_displays(self, max_displays: int) -> list[DisplayDescriptor]:
        """Return the active displays reported by ``CGGetActiveDisplayList``.

        A failing call is logged and whatever ids it did report are used.
        """
        quartz = self.quartz
        err, ids, count = quartz.CGGetActiveDisplayList(max_displays, None, None)
        if err != _CG_SUCCESS:
            logger.warning("CGGetActiveDisplayList failed with CGError %d", err)

        displays: list[DisplayDescriptor] = []
        for display_id in list(ids or ())[: int(count or 0)]:
            bounds = quartz.CGDisplayBounds(display_id)
            displays.append(
                DisplayDescriptor(
                    id=int(display_id),
                    width=int(bounds.size.width),
                    height=int(bounds.size.height),
                    x=int(bounds.origin.x),
                    y=int(bounds.origin.y),
                )
            )
        logger.debug("Found %d active display(s)", len(displays))
        return displays

    def begin_configuration(self) -> QuartzDisplayTransaction:
        quartz = self.quartz
        err, config_ref = quartz.CGBeginDisplayConfiguration(None)
        if err != _CG_SUCCESS or config_ref is None:
            raise ConfigurationBeginError(
                f"CGBeginDisplayConfiguration failed with CGError {err}",
            )
        return QuartzDisplayTransaction(quartz, config_ref)
