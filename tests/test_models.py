"""Tests for domain models (core/models.py).

Value objects are frozen dataclasses — these tests verify immutability,
equality semantics, and the small amount of derived behaviour.
"""

from __future__ import annotations

import pytest

from display_manager.core.models import (
    ApplyOutcome,
    ApplyResult,
    DisplayDescriptor,
    DisplayMove,
    LayoutConfig,
    LoadStatus,
    MatchKind,
    RemoveOutcome,
    StoreSnapshot,
)


def _make_display(**overrides: object) -> DisplayDescriptor:
    """Factory with sensible defaults for concise tests."""
    defaults: dict[str, object] = {
        "id": 1,
        "width": 1920,
        "height": 1080,
        "x": 0,
        "y": 0,
    }
    defaults.update(overrides)
    return DisplayDescriptor(**defaults)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# DisplayDescriptor
# ---------------------------------------------------------------------------

class TestDisplayDescriptor:
    def test_fields_accessible(self) -> None:
        d = _make_display(x=-1920, y=120)
        assert (d.id, d.width, d.height, d.x, d.y) == (1, 1920, 1080, -1920, 120)

    def test_frozen(self) -> None:
        d = _make_display()
        with pytest.raises(AttributeError):
            d.x = 10  # type: ignore[misc]

    def test_equality(self) -> None:
        assert _make_display() == _make_display()

    def test_inequality(self) -> None:
        assert _make_display(id=1) != _make_display(id=2)

    def test_hashable(self) -> None:
        assert len({_make_display(), _make_display()}) == 1


# ---------------------------------------------------------------------------
# LayoutConfig / StoreSnapshot
# ---------------------------------------------------------------------------

class TestLayoutConfig:
    def test_defaults_to_empty(self) -> None:
        assert LayoutConfig().layouts == {}

    def test_instances_do_not_share_state(self) -> None:
        a = LayoutConfig()
        a.layouts["home"] = ()
        assert LayoutConfig().layouts == {}

    def test_snapshot_error_defaults_to_none(self) -> None:
        snapshot = StoreSnapshot(config=LayoutConfig(), status=LoadStatus.MISSING)
        assert snapshot.error is None

    @pytest.mark.parametrize(
        ("outcome", "existed"),
        [
            (RemoveOutcome.REMOVED, True),
            (RemoveOutcome.WRITE_FAILED, True),
            (RemoveOutcome.NOT_FOUND, False),
        ],
    )
    def test_remove_outcome_existed(self, outcome: RemoveOutcome, existed: bool) -> None:
        assert outcome.existed is existed


# ---------------------------------------------------------------------------
# ApplyResult
# ---------------------------------------------------------------------------

class TestApplyResult:
    @pytest.mark.parametrize(
        ("outcome", "ok"),
        [
            (ApplyOutcome.APPLIED, True),
            (ApplyOutcome.LAYOUT_NOT_FOUND, False),
            (ApplyOutcome.BEGIN_FAILED, False),
            (ApplyOutcome.COMMIT_FAILED, False),
        ],
    )
    def test_ok(self, outcome: ApplyOutcome, ok: bool) -> None:
        assert ApplyResult(outcome=outcome, name="home").ok is ok

    def test_defaults(self) -> None:
        result = ApplyResult(outcome=ApplyOutcome.APPLIED, name="home")
        assert result.moves == ()
        assert result.available == ()

    def test_move_is_frozen(self) -> None:
        move = DisplayMove(display_id=1, x=0, y=0, saved_id=1, matched_by=MatchKind.ID)
        with pytest.raises(AttributeError):
            move.x = 5  # type: ignore[misc]
