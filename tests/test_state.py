from __future__ import annotations

import json

import pytest

from core import db, state
from core.catalog import default_features
from core.models import FeatureStatus
from core.portability import ImportStateError


@pytest.fixture(autouse=True)
def _db(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("FLAGDASH_DB_PATH", str(tmp_path / "state.sqlite3"))


def _status(feature_id: str) -> FeatureStatus:
    return next(f.status for f in state.computed_features() if f.id == feature_id)


def test_fresh_state_is_catalog() -> None:
    history = state.load_history()
    assert len(history) == 1
    assert [f.id for f in history.current] == [f.id for f in default_features()]


def test_toggle_pushes_and_recomputes() -> None:
    history = state.toggle("user-auth")
    assert history.summary() == {"index": 1, "size": 2, "can_undo": True, "can_redo": False}
    assert _status("user-auth") is FeatureStatus.DISABLED_MANUAL
    assert _status("video-upload") is FeatureStatus.DISABLED_DEPENDENCY


def test_toggle_unknown_feature_raises_and_pushes_nothing() -> None:
    with pytest.raises(state.UnknownFeatureError):
        state.toggle("no-such-feature")
    assert len(state.load_history()) == 1


def test_undo_redo_persist_across_loads() -> None:
    state.toggle("user-auth")
    _, moved = state.undo()
    assert moved is True
    assert _status("user-auth") is FeatureStatus.ACTIVE

    _, moved = state.undo()
    assert moved is False

    history, moved = state.redo()
    assert moved is True
    assert history.index == 1
    assert _status("user-auth") is FeatureStatus.DISABLED_MANUAL


def test_reset_discards_history() -> None:
    state.toggle("user-auth")
    state.toggle("video-upload")
    history = state.reset()
    assert history.summary() == {"index": 0, "size": 1, "can_undo": False, "can_redo": False}
    assert _status("user-auth") is FeatureStatus.ACTIVE


def test_sync_pushes_catalog_snapshot() -> None:
    state.toggle("email-notifications")
    assert _status("email-notifications") is FeatureStatus.ACTIVE

    history = state.sync_with_catalog()

    assert len(history) == 3
    assert _status("email-notifications") is FeatureStatus.DISABLED_MANUAL


def test_import_replaces_current_snapshot() -> None:
    payload = json.dumps(
        [
            {"id": "a", "enabled": True, "backend": {"routes": []}},
            {"id": "b", "enabled": True, "backend": {"routes": []}, "dependencies": {"requires": ["a", "z"]}},
        ]
    )
    state.import_state(payload)
    computed = {f.id: f for f in state.computed_features()}
    assert set(computed) == {"a", "b"}
    assert computed["b"].blocked_by == ["z"]


def test_bad_import_leaves_history_unchanged() -> None:
    with pytest.raises(ImportStateError):
        state.import_state("[1, 2")
    assert len(state.load_history()) == 1


def test_export_current_is_plain_json() -> None:
    state.toggle("user-auth")
    exported = json.loads(state.export_current())
    auth = next(row for row in exported if row["id"] == "user-auth")
    assert auth["enabled"] is False
    assert "status" not in auth


def test_history_is_capped_by_configured_limit(monkeypatch) -> None:
    monkeypatch.setenv("FLAGDASH_HISTORY_LIMIT", "3")
    for _ in range(5):
        state.toggle("email-notifications")

    history = state.load_history()
    assert history.summary() == {"index": 2, "size": 3, "can_undo": True, "can_redo": False}
    assert _status("email-notifications") is FeatureStatus.ACTIVE


def test_invalid_history_limit_falls_back_to_default(monkeypatch) -> None:
    monkeypatch.setenv("FLAGDASH_HISTORY_LIMIT", "lots")
    state.toggle("user-auth")
    assert len(state.load_history()) == 2


def test_reset_recovers_from_unreadable_store() -> None:
    with db.get_conn() as conn:
        conn.execute("INSERT INTO history_snapshots(position, features_json, ts) VALUES (0, '{nope', 0)")

    history = state.reset()

    assert history.summary() == {"index": 0, "size": 1, "can_undo": False, "can_redo": False}
    assert db.load_history() is not None
    assert _status("user-auth") is FeatureStatus.ACTIVE
