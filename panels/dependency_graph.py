"""FLAGDASH FILE PURPOSE
Purpose: dependency graph data (status-colored nodes, requires links) for the admin graph view.
Hot path: no (admin read-only).
Feature flags: FLAGDASH_PANEL_DEPENDENCY_GRAPH.
Failure mode: unauthorized => 401. Links to unknown ids are omitted, not errors.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Header

from core import state
from core.auth import require_admin_bearer
from core.config import admin_api_key
from core.models import parse_features
from core.resolver import resolve
from core.views import dependency_graph

router = APIRouter(prefix="/admin/graph", tags=["dependency-graph"])


@router.get("")
async def graph(authorization: str | None = Header(default=None)) -> dict[str, Any]:
    require_admin_bearer(authorization)
    return {"ok": True, **dependency_graph(state.computed_features())}


def selftests() -> dict[str, Any]:
    fixture = parse_features(
        [
            {"id": "a", "enabled": True, "dependencies": {"requires": ["b"]}},
            {"id": "b", "enabled": True, "dependencies": {"requires": ["a", "ghost"]}},
        ]
    )
    out = dependency_graph(resolve(fixture))
    if out["links"] != [{"source": "a", "target": "b"}, {"source": "b", "target": "a"}]:
        return {"ok": False, "message": f"unexpected links {out['links']}"}
    if any(n["status"] != "disabled-dependency" for n in out["nodes"]):
        return {"ok": False, "message": "cycle members must be blocked"}
    return {"ok": True, "message": "dependency_graph selftest ok"}


def security_checks() -> dict[str, Any]:
    if admin_api_key() is None:
        return {"ok": False, "message": "FLAGDASH_ADMIN_API_KEY missing; graph will be unauthorized"}
    return {"ok": True}


def load_profile() -> dict[str, Any]:
    return {"hint": "graph"}


PANEL = {
    "key": "dependency_graph",
    "router": router,
    "enabled_env": "FLAGDASH_PANEL_DEPENDENCY_GRAPH",
    "selftests": selftests,
    "security_checks": security_checks,
    "load_profile": load_profile,
}
