"""FLAGDASH FILE PURPOSE
Purpose: feature status resolution (manual flag + transitive "requires" graph).
Hot path: yes (runs once per state read or change).
Feature flags: none.
Failure mode: never raises for cycles or dangling ids; those resolve to
  disabled-dependency. Only a missing collection (None) is rejected.

Every feature ends up in exactly one status:
  - disabled-manual: its own `enabled` flag is off (checked first, always wins)
  - disabled-dependency: enabled, but at least one direct dependency is not active
  - active: enabled and every direct dependency is active

`blocked_by` lists the direct dependency ids that are not active, never the
deeper transitive cause.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from core.models import ComputedFeature, Feature, FeatureStatus, feature_to_wire

CIRCULAR_DEPENDENCY = "circular-dependency"
MISSING_FEATURE = "missing-feature-id"

_ACTIVE = FeatureStatus.ACTIVE
_MANUAL = FeatureStatus.DISABLED_MANUAL
_BLOCKED = FeatureStatus.DISABLED_DEPENDENCY


@dataclass(frozen=True)
class Resolution:
    status: FeatureStatus
    blocked_by: tuple[str, ...] = ()


@dataclass
class _Frame:
    fid: str
    requires: list[str]
    pos: int = 0
    blockers: list[str] = field(default_factory=list)

    def record(self, dep_id: str, res: Resolution) -> None:
        if res.status is not _ACTIVE:
            self.blockers.append(dep_id)


def resolve(features: Iterable[Feature]) -> list[ComputedFeature]:
    if features is None:
        raise TypeError("resolve() requires a feature collection, got None")

    records = list(features)
    lookup = {f.id: f for f in records}
    resolutions = resolve_statuses(lookup)

    out: list[ComputedFeature] = []
    for feature in records:
        res = resolutions[feature.id]
        data = feature_to_wire(feature)
        data["status"] = res.status
        data["blockedBy"] = list(res.blocked_by)
        out.append(ComputedFeature.model_validate(data))
    return out


def resolve_statuses(lookup: dict[str, Feature]) -> dict[str, Resolution]:
    """Resolve every id in `lookup`.

    Depth-first, post-order, on an explicit stack: the ids on the stack are
    the current resolution path, so sibling dependencies never see each
    other's visits and chain depth is not bounded by the interpreter.
    Finished resolutions are cached for the duration of this call: a
    dependency found on the path is always part of an enabled cycle and
    therefore never active, so a node's status and direct blockers do not
    depend on the path it was reached through. The revisit marker itself is
    never cached.
    """
    memo: dict[str, Resolution] = {}
    for fid in lookup:
        if fid not in memo:
            _resolve_from(fid, lookup, memo)
    return memo


def _resolve_from(root: str, lookup: dict[str, Feature], memo: dict[str, Resolution]) -> None:
    stack: list[_Frame] = []
    on_path: set[str] = set()

    def enter(fid: str) -> Resolution | None:
        # a finished resolution, or None once a frame has been pushed for fid
        if fid in on_path:
            return Resolution(_BLOCKED, (CIRCULAR_DEPENDENCY,))
        cached = memo.get(fid)
        if cached is not None:
            return cached
        feature = lookup.get(fid)
        if feature is None:
            res = Resolution(_BLOCKED, (MISSING_FEATURE,))
        elif not feature.enabled:
            res = Resolution(_MANUAL)
        else:
            stack.append(_Frame(fid, list(feature.requires)))
            on_path.add(fid)
            return None
        memo[fid] = res
        return res

    enter(root)
    while stack:
        frame = stack[-1]
        if frame.pos < len(frame.requires):
            dep_id = frame.requires[frame.pos]
            frame.pos += 1
            res = enter(dep_id)
            if res is not None:
                frame.record(dep_id, res)
            continue

        stack.pop()
        on_path.discard(frame.fid)
        res = Resolution(_BLOCKED, tuple(frame.blockers)) if frame.blockers else Resolution(_ACTIVE)
        memo[frame.fid] = res
        if stack:
            parent = stack[-1]
            parent.record(parent.requires[parent.pos - 1], res)
