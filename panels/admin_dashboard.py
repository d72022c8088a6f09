"""FLAGDASH FILE PURPOSE
Purpose: admin dashboard (feature cards, stats, manual toggles, undo/redo/reset).
Hot path: no (admin control-plane only).
Feature flags: FLAGDASH_PANEL_ADMIN_DASHBOARD.
Failure mode:
  - unauthorized => 401
  - unknown feature id => 404
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Header, HTTPException, Query

from core import state
from core.auth import require_admin_bearer
from core.config import admin_api_key
from core.history import History
from core.models import ComputedFeature, parse_features
from core.resolver import resolve
from core.views import dependents_map, feature_card, filter_features, status_counts

router = APIRouter(prefix="/admin", tags=["admin-dashboard"])


def _find(computed: list[ComputedFeature], feature_id: str) -> ComputedFeature:
    for f in computed:
        if f.id == feature_id:
            return f
    raise HTTPException(status_code=404, detail=f"unknown feature: {feature_id}")


def _history_response(history: History, **extra: Any) -> dict[str, Any]:
    computed = resolve(history.current)
    return {"ok": True, **extra, "history": history.summary(), "stats": status_counts(computed)}


@router.get("/features")
async def admin_features(
    q: str = Query(default="", max_length=200),
    authorization: str | None = Header(default=None),
) -> dict[str, Any]:
    require_admin_bearer(authorization)
    history = state.load_history()
    computed = resolve(history.current)
    dependents = dependents_map(computed)
    shown = filter_features(computed, q)
    return {
        "ok": True,
        "query": q,
        "features": [feature_card(f, dependents.get(f.id, [])) for f in shown],
        "stats": status_counts(computed),
        "history": history.summary(),
    }


@router.get("/features/{feature_id}")
async def admin_feature_detail(
    feature_id: str,
    authorization: str | None = Header(default=None),
) -> dict[str, Any]:
    require_admin_bearer(authorization)
    computed = state.computed_features()
    feature = _find(computed, feature_id)
    dependents = dependents_map(computed).get(feature_id, [])
    return {"ok": True, "feature": feature_card(feature, dependents)}


@router.post("/features/{feature_id}/toggle")
async def admin_feature_toggle(
    feature_id: str,
    authorization: str | None = Header(default=None),
) -> dict[str, Any]:
    require_admin_bearer(authorization)
    try:
        history = state.toggle(feature_id)
    except state.UnknownFeatureError as e:
        raise HTTPException(status_code=404, detail=f"unknown feature: {feature_id}") from e
    computed = resolve(history.current)
    feature = _find(computed, feature_id)
    return {
        "ok": True,
        "feature": feature_card(feature, dependents_map(computed).get(feature_id, [])),
        "history": history.summary(),
        "stats": status_counts(computed),
    }


@router.get("/stats")
async def admin_stats(authorization: str | None = Header(default=None)) -> dict[str, Any]:
    require_admin_bearer(authorization)
    return {"ok": True, "stats": status_counts(state.computed_features())}


@router.get("/history")
async def admin_history(authorization: str | None = Header(default=None)) -> dict[str, Any]:
    require_admin_bearer(authorization)
    return {"ok": True, "history": state.load_history().summary()}


@router.post("/history/undo")
async def admin_history_undo(authorization: str | None = Header(default=None)) -> dict[str, Any]:
    require_admin_bearer(authorization)
    history, moved = state.undo()
    return _history_response(history, moved=moved)


@router.post("/history/redo")
async def admin_history_redo(authorization: str | None = Header(default=None)) -> dict[str, Any]:
    require_admin_bearer(authorization)
    history, moved = state.redo()
    return _history_response(history, moved=moved)


@router.post("/history/reset")
async def admin_history_reset(authorization: str | None = Header(default=None)) -> dict[str, Any]:
    require_admin_bearer(authorization)
    return _history_response(state.reset())


def selftests() -> dict[str, Any]:
    # deterministic; no DB
    fixture = parse_features(
        [
            {"id": "A", "enabled": True},
            {"id": "B", "enabled": True, "dependencies": {"requires": ["A"]}},
            {"id": "C", "enabled": False},
            {"id": "D", "enabled": True, "dependencies": {"requires": ["C"]}},
        ]
    )
    counts = status_counts(resolve(fixture))
    if counts != {"active": 2, "manual": 1, "blocked": 1, "total": 4}:
        return {"ok": False, "message": f"unexpected stats {counts}"}
    return {"ok": True, "message": "admin_dashboard selftest ok"}


def security_checks() -> dict[str, Any]:
    if admin_api_key() is None:
        return {"ok": False, "message": "FLAGDASH_ADMIN_API_KEY missing; admin endpoints will be unauthorized"}
    return {"ok": True}


def load_profile() -> dict[str, Any]:
    return {"hint": "admin-dashboard"}


PANEL = {
    "key": "admin_dashboard",
    "router": router,
    "enabled_env": "FLAGDASH_PANEL_ADMIN_DASHBOARD",
    "selftests": selftests,
    "security_checks": security_checks,
    "load_profile": load_profile,
}
