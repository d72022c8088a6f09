"""FLAGDASH FILE PURPOSE
Purpose: admin bearer check shared by admin panels.
Hot path: yes (every admin request).
Feature flags: none.
Failure mode: missing/unset key => 401 (admin surface closed by default).
"""

from __future__ import annotations

from fastapi import HTTPException

from core.config import admin_api_key


def _authorized(auth_header: str | None) -> bool:
    configured = admin_api_key()
    if not configured or not isinstance(auth_header, str):
        return False
    prefix = "Bearer "
    if not auth_header.startswith(prefix):
        return False
    token = auth_header[len(prefix) :].strip()
    return token == configured


def require_admin_bearer(authorization: str | None) -> None:
    if not _authorized(authorization):
        raise HTTPException(status_code=401, detail="unauthorized")
