"""FLAGDASH FILE PURPOSE
Purpose: discover and mount one-file panel modules from `panels/`.
Hot path: no (startup only).
Feature flags: FLAGDASH_PANEL_* (default on).
Failure mode: invalid panel => skipped (debug logs only when FLAGDASH_DEBUG=1).
"""

from __future__ import annotations

import importlib
import pkgutil
import re
from typing import Any

from fastapi import FastAPI

from core.config import env_flag, is_debug
from core.logging import logger
from core.registry import PanelSpec, set_discovered, set_enabled

_ENV_RE = re.compile(r"^FLAGDASH_PANEL_[A-Z0-9_]+$")

REQUIRED = {"key", "router", "enabled_env", "selftests", "security_checks", "load_profile"}


def _validate(panel: Any) -> dict[str, Any] | None:
    if not isinstance(panel, dict):
        return None
    if not REQUIRED.issubset(panel.keys()):
        return None
    if not isinstance(panel.get("key"), str) or not panel["key"]:
        return None
    env = panel.get("enabled_env")
    if not isinstance(env, str) or not _ENV_RE.match(env):
        return None
    return panel


def load_panels(app: FastAPI) -> None:
    import panels  # package

    discovered: dict[str, PanelSpec] = {}
    enabled: dict[str, PanelSpec] = {}

    for mod in pkgutil.iter_modules(panels.__path__):
        if mod.ispkg or mod.name.startswith("_"):
            continue
        m = importlib.import_module(f"panels.{mod.name}")
        d = _validate(getattr(m, "PANEL", None))
        if d is None:
            if is_debug():
                logger.warning("PANEL_INVALID module=%s", mod.name)
            continue

        spec = PanelSpec(
            key=d["key"],
            enabled_env=d["enabled_env"],
            router=d["router"],
            selftests=d["selftests"],
            security_checks=d["security_checks"],
            load_profile=d["load_profile"],
        )
        discovered[spec.key] = spec

        if env_flag(spec.enabled_env, "1"):
            app.include_router(spec.router)
            enabled[spec.key] = spec

    set_discovered(discovered)
    set_enabled(enabled)

    if is_debug():
        logger.info("PANELS_DISCOVERED keys=%s", sorted(discovered.keys()))
        logger.info("PANELS_ENABLED keys=%s", sorted(enabled.keys()))
