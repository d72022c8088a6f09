"""FLAGDASH FILE PURPOSE
Purpose: create FastAPI app and mount enabled panels.
Hot path: no (startup only).
Feature flags: FLAGDASH_PANEL_*.
Failure mode: start with core routes even if no panels enabled.
"""

from __future__ import annotations

from fastapi import FastAPI

from core.panel_loader import load_panels


def create_app() -> FastAPI:
    app = FastAPI(title="flagdash")

    @app.get("/")
    async def root() -> dict[str, bool]:
        return {"ok": True}

    load_panels(app)
    return app
