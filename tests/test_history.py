from __future__ import annotations

import pytest

from core.history import History
from core.models import Feature


def _snap(*ids: str) -> list[Feature]:
    return [Feature.model_validate({"id": i, "enabled": True}) for i in ids]


def _ids(features: list[Feature]) -> list[str]:
    return [f.id for f in features]


def test_empty_history_is_rejected() -> None:
    with pytest.raises(ValueError):
        History([])


def test_new_history_points_at_last_snapshot() -> None:
    h = History([_snap("a"), _snap("a", "b")])
    assert h.index == 1
    assert _ids(h.current) == ["a", "b"]
    assert h.can_undo is True
    assert h.can_redo is False


def test_undo_redo_move_cursor_and_clamp() -> None:
    h = History([_snap("a")])
    h.push(_snap("a", "b"))

    assert h.undo() is True
    assert _ids(h.current) == ["a"]
    assert h.undo() is False
    assert h.index == 0

    assert h.redo() is True
    assert _ids(h.current) == ["a", "b"]
    assert h.redo() is False


def test_push_from_the_past_drops_redo_tail() -> None:
    h = History([_snap("a")])
    h.push(_snap("b"))
    h.push(_snap("c"))
    h.undo()
    h.undo()

    h.push(_snap("d"))

    assert len(h) == 2
    assert [_ids(s) for s in h.snapshots] == [["a"], ["d"]]
    assert h.can_redo is False


def test_reset_replaces_log_with_seed() -> None:
    h = History([_snap("a"), _snap("b"), _snap("c")], index=1)
    h.reset(_snap("seed"))
    assert h.summary() == {"index": 0, "size": 1, "can_undo": False, "can_redo": False}
    assert _ids(h.current) == ["seed"]


def test_out_of_range_index_is_clamped() -> None:
    assert History([_snap("a"), _snap("b")], index=9).index == 1
    assert History([_snap("a"), _snap("b")], index=-3).index == 0


def test_current_is_a_copy() -> None:
    h = History([_snap("a")])
    h.current.append(_snap("x")[0])
    assert _ids(h.current) == ["a"]


def test_push_past_max_size_drops_oldest_and_keeps_cursor_at_end() -> None:
    h = History([_snap("a")])
    for name in ("b", "c", "d"):
        h.push(_snap(name), max_size=3)

    assert [_ids(s) for s in h.snapshots] == [["b"], ["c"], ["d"]]
    assert h.index == 2
    assert h.undo() and h.undo()
    assert h.undo() is False
    assert _ids(h.current) == ["b"]


def test_push_from_the_past_under_max_size_keeps_everything_before_cursor() -> None:
    h = History([_snap("a"), _snap("b"), _snap("c")], index=0)
    h.push(_snap("d"), max_size=3)
    assert [_ids(s) for s in h.snapshots] == [["a"], ["d"]]
