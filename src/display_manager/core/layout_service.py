"""Core layout service: capture, list, delete and apply named layouts.

The service is wired with a :class:`~display_manager.core.protocols.LayoutRepository`
and a :class:`~display_manager.core.protocols.DisplayProvider` at
construction time.  It is responsible for:

* Capturing the live arrangement under a name.
* Resolving a saved layout against the live displays.
* Driving the configuration transaction and reporting its outcome.

Guarantees
----------
* Pure orchestration — no ``print()``, no filesystem access.
* Transaction begin/commit failures are reported as
  :class:`~display_manager.core.models.ApplyOutcome` values, not raised.
"""

from __future__ import annotations

import logging

from display_manager.core.matching import plan_moves
from display_manager.core.models import (
    ApplyOutcome,
    ApplyResult,
    DisplayDescriptor,
    RemoveOutcome,
    SaveResult,
)
from display_manager.core.protocols import DisplayProvider, LayoutRepository
from display_manager.exceptions import ConfigurationBeginError, ConfigurationCommitError
from display_manager.settings import DEFAULT_MAX_DISPLAYS

logger = logging.getLogger(__name__)


class LayoutService:
    """Stateless service over a layout store and a display backend.

    Parameters
    ----------
    store:
        Any object satisfying the :class:`LayoutRepository` protocol.
    provider:
        Any object satisfying the :class:`DisplayProvider` protocol.
    max_displays:
        Cap passed to every display enumeration.
    """

    def __init__(
        self,
        store: LayoutRepository,
        provider: DisplayProvider,
        *,
        max_displays: int = DEFAULT_MAX_DISPLAYS,
    ) -> None:
        self._store: LayoutRepository = store
        self._provider: DisplayProvider = provider
        self._max_displays: int = max_displays

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_displays(self) -> list[DisplayDescriptor]:
        return self._provider.list_displays(self._max_displays)

    def layout_names(self) -> list[str]:
        """Return stored layout names, sorted."""
        return sorted(self._store.load().config.layouts)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def save_layout(self, name: str) -> SaveResult:
        """Store the current live arrangement under *name*, replacing any previous one."""
        displays = tuple(self.list_displays())
        persisted = self._store.set_layout(name, displays)
        return SaveResult(name=name, displays=displays, persisted=persisted)

    def delete_layout(self, name: str) -> RemoveOutcome:
        """Remove *name* from the store."""
        return self._store.remove_layout(name)

    def apply_layout(self, name: str) -> ApplyResult:
        """Reposition live displays to match the layout saved as *name*.

        Flow:
        1. Look the layout up; report the known names if it is missing.
        2. Enumerate live displays.
        3. Begin a configuration transaction.
        4. Request an origin change for every resolvable descriptor.
        5. Commit permanently.

        If populating the transaction raises, it is cancelled before the
        exception propagates.
        """
        config = self._store.load().config
        saved = config.layouts.get(name)
        if saved is None:
            return ApplyResult(
                outcome=ApplyOutcome.LAYOUT_NOT_FOUND,
                name=name,
                available=tuple(config.layouts),
            )

        live = self.list_displays()

        try:
            transaction = self._provider.begin_configuration()
        except ConfigurationBeginError as exc:
            logger.debug("Could not begin display configuration: %s", exc)
            return ApplyResult(outcome=ApplyOutcome.BEGIN_FAILED, name=name)

        moves = plan_moves(saved, live)
        skipped = len(saved) - len(moves)
        if skipped:
            logger.debug("%d saved display(s) in %r matched no live display", skipped, name)

        try:
            for move in moves:
                logger.debug(
                    "Moving display %d to (%d, %d), matched by %s",
                    move.display_id,
                    move.x,
                    move.y,
                    move.matched_by.value,
                )
                transaction.set_origin(move.display_id, move.x, move.y)
        except BaseException:
            transaction.cancel()
            raise

        try:
            transaction.commit()
        except ConfigurationCommitError as exc:
            logger.debug("Could not commit display configuration: %s", exc)
            return ApplyResult(outcome=ApplyOutcome.COMMIT_FAILED, name=name, moves=moves)

        return ApplyResult(outcome=ApplyOutcome.APPLIED, name=name, moves=moves)
