"""Core / service layer — pure layout logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No filesystem or display API access.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from display_manager.core.layout_service import LayoutService
from display_manager.core.matching import plan_moves, resolve_display
from display_manager.core.models import (
    ApplyOutcome,
    ApplyResult,
    DisplayDescriptor,
    DisplayMove,
    LayoutConfig,
    LoadStatus,
    MatchKind,
    RemoveOutcome,
    SaveResult,
    StoreSnapshot,
)
from display_manager.core.protocols import DisplayProvider, DisplayTransaction, LayoutRepository

__all__: list[str] = [
    "ApplyOutcome",
    "ApplyResult",
    "DisplayDescriptor",
    "DisplayMove",
    "DisplayProvider",
    "DisplayTransaction",
    "LayoutConfig",
    "LayoutRepository",
    "LayoutService",
    "LoadStatus",
    "MatchKind",
    "RemoveOutcome",
    "SaveResult",
    "StoreSnapshot",
    "plan_moves",
    "resolve_display",
]
