from __future__ import annotations

import json

from fastapi.testclient import TestClient

from core.app import create_app


def _set_env(monkeypatch, db_path: str) -> None:
    monkeypatch.setenv("FLAGDASH_DB_PATH", db_path)
    monkeypatch.setenv("FLAGDASH_PANEL_STATE_PORTABILITY", "1")
    monkeypatch.setenv("FLAGDASH_PANEL_ADMIN_DASHBOARD", "1")
    monkeypatch.setenv("FLAGDASH_ADMIN_API_KEY", "admin-secret")


def _auth() -> dict[str, str]:
    return {"Authorization": "Bearer admin-secret"}


def test_state_portability_requires_auth(monkeypatch, tmp_path) -> None:
    _set_env(monkeypatch, str(tmp_path / "auth.sqlite3"))
    client = TestClient(create_app())
    assert client.get("/admin/state/export").status_code == 401
    assert client.post("/admin/state/import", json={"state": "[]"}).status_code == 401
    assert client.post("/admin/state/sync").status_code == 401


def test_export_then_import_edited_state(monkeypatch, tmp_path) -> None:
    _set_env(monkeypatch, str(tmp_path / "rt.sqlite3"))
    client = TestClient(create_app())

    exported = client.get("/admin/state/export", headers=_auth())
    assert exported.status_code == 200
    assert exported.json()["count"] == 12
    rows = json.loads(exported.json()["state"])

    for row in rows:
        if row["id"] == "ai-generation":
            row["enabled"] = False
    imported = client.post("/admin/state/import", headers=_auth(), json={"state": json.dumps(rows)})
    assert imported.status_code == 200
    assert imported.json()["history"]["size"] == 2

    card = client.get("/admin/features/prompt-optimizer", headers=_auth()).json()["feature"]
    assert card["status"] == "disabled-dependency"
    assert card["blockedBy"] == ["ai-generation"]


def test_import_rejects_invalid_json(monkeypatch, tmp_path) -> None:
    _set_env(monkeypatch, str(tmp_path / "bad.sqlite3"))
    client = TestClient(create_app())

    resp = client.post("/admin/state/import", headers=_auth(), json={"state": "{not json"})
    assert resp.status_code == 400

    missing = client.post(
        "/admin/state/import",
        headers=_auth(),
        json={"state": json.dumps([{"id": "a", "enabled": True}])},
    )
    assert missing.status_code == 400
    assert "backend" in missing.json()["detail"]

    assert client.get("/admin/history", headers=_auth()).json()["history"]["size"] == 1


def test_import_body_is_strict(monkeypatch, tmp_path) -> None:
    _set_env(monkeypatch, str(tmp_path / "strict.sqlite3"))
    client = TestClient(create_app())
    resp = client.post("/admin/state/import", headers=_auth(), json={"state": "[]", "extra": 1})
    assert resp.status_code == 422


def test_sync_pulls_catalog_back_in(monkeypatch, tmp_path) -> None:
    _set_env(monkeypatch, str(tmp_path / "sync.sqlite3"))
    client = TestClient(create_app())
    client.post("/admin/features/user-auth/toggle", headers=_auth())

    synced = client.post("/admin/state/sync", headers=_auth())
    assert synced.status_code == 200
    assert synced.json()["history"] == {"index": 2, "size": 3, "can_undo": True, "can_redo": False}
    assert client.get("/admin/stats", headers=_auth()).json()["stats"]["manual"] == 1


def test_imported_deep_chain_still_renders(monkeypatch, tmp_path) -> None:
    _set_env(monkeypatch, str(tmp_path / "deep.sqlite3"))
    client = TestClient(create_app())
    rows = [{"id": "n0", "enabled": True, "backend": {}}] + [
        {"id": f"n{i}", "enabled": True, "backend": {}, "dependencies": {"requires": [f"n{i - 1}"]}}
        for i in range(1, 2500)
    ]

    imported = client.post("/admin/state/import", headers=_auth(), json={"state": json.dumps(rows)})
    assert imported.status_code == 200

    listed = client.get("/admin/features", headers=_auth())
    assert listed.status_code == 200
    assert listed.json()["stats"] == {"active": 2500, "manual": 0, "blocked": 0, "total": 2500}
