"""Resolve saved display descriptors to live displays.

Display ids are reassigned when monitors are reconnected or the machine
reboots, so a saved id alone is not enough to find the same physical
monitor again.  Resolution therefore happens in two tiers:

1. exact id match;
2. the first live display with the same ``(width, height)``.

The geometry tier can pick the wrong monitor when two displays share a
resolution.  That trade-off is accepted.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from display_manager.core.models import DisplayDescriptor, DisplayMove, MatchKind


def resolve_display(
    saved: DisplayDescriptor,
    live: Sequence[DisplayDescriptor],
) -> tuple[DisplayDescriptor, MatchKind] | None:
    """Return the live display *saved* refers to, and how it was found.

    Returns ``None`` when neither tier matches.
    """
    for display in live:
        if display.id == saved.id:
            return display, MatchKind.ID
    for display in live:
        if display.width == saved.width and display.height == saved.height:
            return display, MatchKind.GEOMETRY
    return None


def plan_moves(
    saved: Iterable[DisplayDescriptor],
    live: Sequence[DisplayDescriptor],
) -> tuple[DisplayMove, ...]:
    """Build one :class:`DisplayMove` per resolvable saved descriptor.

    Unresolvable descriptors are skipped.  Saved order is preserved, and
    two descriptors resolving to the same live display both produce a move.
    """
    moves: list[DisplayMove] = []
    for descriptor in saved:
        match = resolve_display(descriptor, live)
        if match is None:
            continue
        display, kind = match
        moves.append(
            DisplayMove(
                display_id=display.id,
                x=descriptor.x,
                y=descriptor.y,
                saved_id=descriptor.id,
                matched_by=kind,
            )
        )
    return tuple(moves)
