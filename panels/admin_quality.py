"""FLAGDASH FILE PURPOSE
Purpose: quality admin endpoints (regression runner).
Hot path: no (admin control-plane only).
Feature flags: FLAGDASH_PANEL_ADMIN_QUALITY.
Failure mode: report failure details; does not crash server.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Header

from core.auth import require_admin_bearer
from core.config import admin_api_key
from core.quality import run_regression

router = APIRouter(prefix="/admin/quality", tags=["quality"])


@router.post("/regression/run")
async def regression_run(authorization: str | None = Header(default=None)) -> dict[str, Any]:
    require_admin_bearer(authorization)
    return run_regression()


def selftests() -> dict[str, Any]:
    # must not call run_regression() (it would recurse into this selftest)
    return {"ok": True, "message": "admin_quality selftests ok"}


def security_checks() -> dict[str, Any]:
    if admin_api_key() is None:
        return {"ok": False, "message": "FLAGDASH_ADMIN_API_KEY missing; admin endpoints will be unauthorized"}
    return {"ok": True}


def load_profile() -> dict[str, Any]:
    return {"hint": "admin-only"}


PANEL = {
    "key": "admin_quality",
    "router": router,
    "enabled_env": "FLAGDASH_PANEL_ADMIN_QUALITY",
    "selftests": selftests,
    "security_checks": security_checks,
    "load_profile": load_profile,
}
