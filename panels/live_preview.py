"""FLAGDASH FILE PURPOSE
Purpose: live preview of end-user availability per feature (public, read-only).
Hot path: yes (end-user surface polls this).
Feature flags: FLAGDASH_PANEL_LIVE_PREVIEW.
Failure mode: unknown feature id => 404.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException

from core import state
from core.models import parse_features
from core.resolver import resolve
from core.views import availability

router = APIRouter(prefix="/preview", tags=["live-preview"])


@router.get("")
async def preview_all() -> dict[str, Any]:
    computed = state.computed_features()
    return {"ok": True, "features": [{"name": f.name, **availability(f)} for f in computed]}


@router.get("/{feature_id}")
async def preview_one(feature_id: str) -> dict[str, Any]:
    for f in state.computed_features():
        if f.id == feature_id:
            return {"ok": True, "name": f.name, **availability(f)}
    raise HTTPException(status_code=404, detail=f"unknown feature: {feature_id}")


def selftests() -> dict[str, Any]:
    fixture = parse_features(
        [
            {"id": "auth", "enabled": False},
            {"id": "upload", "enabled": True, "dependencies": {"requires": ["auth"]}},
        ]
    )
    auth, upload = resolve(fixture)
    if availability(auth)["reason"] != "manual":
        return {"ok": False, "message": "manual disablement not reported"}
    if availability(upload)["blocker"] != "auth":
        return {"ok": False, "message": "blocking dependency not reported"}
    return {"ok": True, "message": "live_preview selftest ok"}


def security_checks() -> dict[str, Any]:
    # public by design; exposes status only, never config
    return {"ok": True}


def load_profile() -> dict[str, Any]:
    return {"hint": "public-read"}


PANEL = {
    "key": "live_preview",
    "router": router,
    "enabled_env": "FLAGDASH_PANEL_LIVE_PREVIEW",
    "selftests": selftests,
    "security_checks": security_checks,
    "load_profile": load_profile,
}
