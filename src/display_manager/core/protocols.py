"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — so the layout logic can be exercised without a real
display subsystem or filesystem.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from display_manager.core.models import DisplayDescriptor, RemoveOutcome, StoreSnapshot


class DisplayTransaction(Protocol):
    """An open OS display configuration batch.

    Origin requests are buffered until :meth:`commit`; nothing changes on
    screen before then.
    """

    def set_origin(self, display_id: int, x: int, y: int) -> None:
        """Request that *display_id* be moved to ``(x, y)``."""
        ...  # pragma: no cover

    def commit(self) -> None:
        """Apply every buffered request permanently.

        Raises
        ------
        ConfigurationCommitError
            When the OS rejects the batch.
        """
        ...  # pragma: no cover

    def cancel(self) -> None:
        """Discard every buffered request."""
        ...  # pragma: no cover


class DisplayProvider(Protocol):
    """Contract for display subsystem backends.

    Any object that implements these methods with the correct signatures
    satisfies this protocol structurally (no explicit inheritance
    required).
    """

    def list_displays(self, max_displays: int) -> list[DisplayDescriptor]:
        """Return up to *max_displays* active displays, in OS order.

        Enumeration failures are logged and yield an empty or partial
        list; this method does not raise for them.
        """
        ...  # pragma: no cover

    def begin_configuration(self) -> DisplayTransaction:
        """Open a configuration transaction.

        Raises
        ------
        ConfigurationBeginError
            When the OS refuses to start one.
        """
        ...  # pragma: no cover


class LayoutRepository(Protocol):
    """Contract for layout persistence backends."""

    def load(self) -> StoreSnapshot:
        """Read every stored layout.  Never raises."""
        ...  # pragma: no cover

    def set_layout(self, name: str, displays: Sequence[DisplayDescriptor]) -> bool:
        """Insert or overwrite *name*; return whether it was written."""
        ...  # pragma: no cover

    def remove_layout(self, name: str) -> RemoveOutcome:
        """Remove *name*; report whether it existed and was written out."""
        ...  # pragma: no cover
