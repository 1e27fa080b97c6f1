"""Domain models for display-manager.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  The one exception is :class:`LayoutConfig`,
whose mapping is mutated in place during a single load-mutate-save
cycle and then discarded.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


# ---------------------------------------------------------------------------
# Display geometry
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class DisplayDescriptor:
    """One monitor's identity and geometry at a point in time."""

    id: int
    """OS-assigned display id (unsigned 32-bit).  Not stable across reboots."""

    width: int
    """Width in points."""

    height: int
    """Height in points."""

    x: int
    """Horizontal origin in the global display space."""

    y: int
    """Vertical origin in the global display space."""


Layout = tuple[DisplayDescriptor, ...]
"""An ordered snapshot of every display present when it was saved."""


# ---------------------------------------------------------------------------
# Layout store
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class LayoutConfig:
    """The full contents of the layout file: name → layout, insertion ordered."""

    layouts: dict[str, Layout] = field(default_factory=dict)


class LoadStatus(enum.Enum):
    """Why a :class:`StoreSnapshot` holds the config it holds."""

    LOADED = "loaded"
    MISSING = "missing"
    UNREADABLE = "unreadable"


@dataclass(frozen=True, slots=True)
class StoreSnapshot:
    """Result of reading the layout file.

    ``config`` is always usable; ``status`` distinguishes an empty store
    that is genuinely empty from one that could not be read.
    """

    config: LayoutConfig
    status: LoadStatus
    error: str | None = None


class RemoveOutcome(enum.Enum):
    """Result of removing a layout from the store."""

    REMOVED = "removed"
    NOT_FOUND = "not_found"
    WRITE_FAILED = "write_failed"
    """The layout existed but the updated file could not be written."""

    @property
    def existed(self) -> bool:
        return self is not RemoveOutcome.NOT_FOUND


# ---------------------------------------------------------------------------
# Applying layouts
# ---------------------------------------------------------------------------

class MatchKind(enum.Enum):
    """How a saved descriptor was resolved to a live display."""

    ID = "id"
    GEOMETRY = "geometry"


@dataclass(frozen=True, slots=True)
class DisplayMove:
    """A single origin change requested inside a configuration transaction."""

    display_id: int
    """Live display that is moved."""

    x: int
    y: int

    saved_id: int
    """Id recorded in the layout for the descriptor that produced this move."""

    matched_by: MatchKind


class ApplyOutcome(enum.Enum):
    APPLIED = "applied"
    LAYOUT_NOT_FOUND = "layout_not_found"
    BEGIN_FAILED = "begin_failed"
    COMMIT_FAILED = "commit_failed"


@dataclass(frozen=True, slots=True)
class ApplyResult:
    """What happened when a layout was applied."""

    outcome: ApplyOutcome
    name: str
    moves: tuple[DisplayMove, ...] = ()
    available: tuple[str, ...] = ()
    """Known layout names, in store order; set for ``LAYOUT_NOT_FOUND``."""

    @property
    def ok(self) -> bool:
        return self.outcome is ApplyOutcome.APPLIED


@dataclass(frozen=True, slots=True)
class SaveResult:
    """Descriptors captured by a save, and whether they reached the disk."""

    name: str
    displays: Layout
    persisted: bool
