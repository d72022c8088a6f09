from __future__ import annotations

import json

from fastapi.testclient import TestClient

from core.app import create_app


def _set_env(monkeypatch, db_path: str) -> None:
    monkeypatch.setenv("FLAGDASH_DB_PATH", db_path)
    monkeypatch.setenv("FLAGDASH_PANEL_DEPENDENCY_GRAPH", "1")
    monkeypatch.setenv("FLAGDASH_PANEL_STATE_PORTABILITY", "1")
    monkeypatch.setenv("FLAGDASH_ADMIN_API_KEY", "admin-secret")


def _auth() -> dict[str, str]:
    return {"Authorization": "Bearer admin-secret"}


def test_graph_requires_auth(monkeypatch, tmp_path) -> None:
    _set_env(monkeypatch, str(tmp_path / "auth.sqlite3"))
    assert TestClient(create_app()).get("/admin/graph").status_code == 401


def test_graph_for_catalog(monkeypatch, tmp_path) -> None:
    _set_env(monkeypatch, str(tmp_path / "catalog.sqlite3"))
    body = TestClient(create_app()).get("/admin/graph", headers=_auth()).json()
    assert len(body["nodes"]) == 12
    assert {"source": "video-management", "target": "video-upload"} in body["links"]
    email = next(n for n in body["nodes"] if n["id"] == "email-notifications")
    assert email == {"id": "email-notifications", "status": "disabled-manual", "color": "#f87171"}


def test_graph_with_cycle_and_dangling_dependency(monkeypatch, tmp_path) -> None:
    _set_env(monkeypatch, str(tmp_path / "cycle.sqlite3"))
    client = TestClient(create_app())
    rows = [
        {"id": "a", "enabled": True, "backend": {"routes": []}, "dependencies": {"requires": ["b"]}},
        {"id": "b", "enabled": True, "backend": {"routes": []}, "dependencies": {"requires": ["a", "ghost"]}},
    ]
    client.post("/admin/state/import", headers=_auth(), json={"state": json.dumps(rows)})

    body = client.get("/admin/graph", headers=_auth()).json()
    assert {n["status"] for n in body["nodes"]} == {"disabled-dependency"}
    assert body["links"] == [{"source": "a", "target": "b"}, {"source": "b", "target": "a"}]
