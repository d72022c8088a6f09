"""FLAGDASH FILE PURPOSE
Purpose: panel registry (discovered/enabled HTTP panels and their metadata).
Hot path: low (read-only lookups).
Feature flags: FLAGDASH_PANEL_*.
Failure mode: registry empty => app has only core routes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable


@dataclass(frozen=True)
class PanelSpec:
    key: str
    enabled_env: str
    router: Any
    selftests: Callable[[], Any]
    security_checks: Callable[[], Any]
    load_profile: Callable[[], Any]


_DISCOVERED: dict[str, PanelSpec] = {}
_ENABLED: dict[str, PanelSpec] = {}


def set_discovered(specs: dict[str, PanelSpec]) -> None:
    global _DISCOVERED
    _DISCOVERED = dict(specs)


def set_enabled(specs: dict[str, PanelSpec]) -> None:
    global _ENABLED
    _ENABLED = dict(specs)


def discovered_panels() -> dict[str, PanelSpec]:
    return dict(_DISCOVERED)


def enabled_panels() -> dict[str, PanelSpec]:
    return dict(_ENABLED)
