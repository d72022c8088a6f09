"""FLAGDASH FILE PURPOSE
Purpose: read-only projections of resolved features for dashboard, graph and preview.
Hot path: yes (every panel response).
Feature flags: none.
Failure mode: pure functions; never recompute status, only read it.
"""

from __future__ import annotations

from typing import Any, Sequence

from core.models import ComputedFeature, Feature, FeatureStatus, feature_to_wire

STATUS_COLORS = {
    FeatureStatus.ACTIVE: "#22d3ee",
    FeatureStatus.DISABLED_MANUAL: "#f87171",
    FeatureStatus.DISABLED_DEPENDENCY: "#fb923c",
}
DEFAULT_COLOR = "#9ca3af"

MANUAL_MESSAGE = "Feature is currently disabled by administrator."


def status_counts(features: Sequence[ComputedFeature]) -> dict[str, int]:
    counts = {"active": 0, "manual": 0, "blocked": 0, "total": len(features)}
    for f in features:
        if f.status is FeatureStatus.ACTIVE:
            counts["active"] += 1
        elif f.status is FeatureStatus.DISABLED_MANUAL:
            counts["manual"] += 1
        else:
            counts["blocked"] += 1
    return counts


def dependents_map(features: Sequence[Feature]) -> dict[str, list[str]]:
    out: dict[str, list[str]] = {}
    for f in features:
        for dep_id in f.requires:
            out.setdefault(dep_id, []).append(f.id)
    return out


def filter_features(features: Sequence[Feature], term: str | None) -> list[Feature]:
    needle = (term or "").strip().lower()
    if not needle:
        return list(features)
    return [
        f
        for f in features
        if needle in f.name.lower() or needle in f.description.lower() or needle in f.id.lower()
    ]


def feature_card(feature: ComputedFeature, dependents: Sequence[str] = ()) -> dict[str, Any]:
    card = feature_to_wire(feature)
    card["dependents"] = list(dependents)
    return card


def dependency_graph(features: Sequence[ComputedFeature]) -> dict[str, Any]:
    present = {f.id for f in features}
    nodes = [
        {"id": f.id, "status": f.status.value, "color": STATUS_COLORS.get(f.status, DEFAULT_COLOR)}
        for f in features
    ]
    links = [
        {"source": f.id, "target": dep_id}
        for f in features
        for dep_id in f.requires
        if dep_id in present
    ]
    return {"nodes": nodes, "links": links}


def availability(feature: ComputedFeature) -> dict[str, Any]:
    if feature.status is FeatureStatus.ACTIVE:
        return {"id": feature.id, "available": True, "reason": None, "blocker": None, "message": None}
    if feature.status is FeatureStatus.DISABLED_MANUAL:
        return {
            "id": feature.id,
            "available": False,
            "reason": "manual",
            "blocker": None,
            "message": MANUAL_MESSAGE,
        }
    blocker = feature.blocked_by[0] if feature.blocked_by else None
    return {
        "id": feature.id,
        "available": False,
        "reason": "dependency",
        "blocker": blocker,
        "message": f"Unavailable: Dependency {blocker} is offline.",
    }
