"""FLAGDASH FILE PURPOSE
Purpose: export/import the current feature snapshot as JSON, and sync with the code catalog.
Hot path: no (explicit admin actions only).
Feature flags: FLAGDASH_PANEL_STATE_PORTABILITY.
Failure mode:
  - unauthorized => 401
  - invalid import payload => 400 (history unchanged)
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Header, HTTPException
from pydantic import BaseModel, ConfigDict, Field

from core import state
from core.auth import require_admin_bearer
from core.catalog import default_features
from core.config import admin_api_key
from core.logging import logger
from core.portability import ImportStateError, export_state, parse_state

router = APIRouter(prefix="/admin/state", tags=["state-portability"])


class ImportRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", strict=True)

    state: str = Field(min_length=1, max_length=1_000_000)


@router.get("/export")
async def state_export(authorization: str | None = Header(default=None)) -> dict[str, Any]:
    require_admin_bearer(authorization)
    features = state.current_features()
    return {"ok": True, "count": len(features), "state": export_state(features)}


@router.post("/import")
async def state_import(
    body: ImportRequest,
    authorization: str | None = Header(default=None),
) -> dict[str, Any]:
    require_admin_bearer(authorization)
    try:
        history = state.import_state(body.state)
    except ImportStateError as e:
        logger.warning("STATE_IMPORT_REJECTED err=%s", e)
        raise HTTPException(status_code=400, detail=str(e)) from e
    return {"ok": True, "count": len(history.current), "history": history.summary()}


@router.post("/sync")
async def state_sync(authorization: str | None = Header(default=None)) -> dict[str, Any]:
    require_admin_bearer(authorization)
    history = state.sync_with_catalog()
    return {"ok": True, "count": len(history.current), "history": history.summary()}


def selftests() -> dict[str, Any]:
    catalog = default_features()
    restored = parse_state(export_state(catalog))
    if [f.id for f in restored] != [f.id for f in catalog]:
        return {"ok": False, "message": "catalog export did not re-import cleanly"}
    try:
        parse_state('{"id": "not-a-list"}')
    except ImportStateError:
        return {"ok": True, "message": "state_portability selftest ok"}
    return {"ok": False, "message": "non-list state was accepted"}


def security_checks() -> dict[str, Any]:
    if admin_api_key() is None:
        return {"ok": False, "message": "FLAGDASH_ADMIN_API_KEY missing; import/export will be unauthorized"}
    return {"ok": True}


def load_profile() -> dict[str, Any]:
    return {"hint": "state-portability"}


PANEL = {
    "key": "state_portability",
    "router": router,
    "enabled_env": "FLAGDASH_PANEL_STATE_PORTABILITY",
    "selftests": selftests,
    "security_checks": security_checks,
    "load_profile": load_profile,
}
