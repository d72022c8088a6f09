"""FLAGDASH FILE PURPOSE
Purpose: JSON export/import of a plain feature snapshot (hand-off to and from AI tooling).
Hot path: no (explicit admin actions only).
Feature flags: none.
Failure mode: bad input => ImportStateError; nothing is applied.
"""

from __future__ import annotations

import json
from typing import Any, Sequence

from pydantic import ValidationError

from core.models import Feature, features_to_wire

# computed fields are never persisted; strip them if a computed dump is pasted back
_DERIVED_KEYS = ("status", "blockedBy", "blocked_by")


class ImportStateError(ValueError):
    pass


def export_state(features: Sequence[Feature]) -> str:
    return json.dumps(features_to_wire(features), indent=2)


def parse_state(text: str) -> list[Feature]:
    if not isinstance(text, str) or not text.strip():
        raise ImportStateError("state is empty")
    try:
        parsed: Any = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ImportStateError("state is not valid JSON") from exc
    if not isinstance(parsed, list) or not parsed:
        raise ImportStateError("state must be a non-empty JSON array of features")

    out: list[Feature] = []
    for i, row in enumerate(parsed):
        if not isinstance(row, dict):
            raise ImportStateError(f"entry {i} is not an object")
        if not row.get("id") or "backend" not in row:
            raise ImportStateError(f"entry {i} missing required feature fields (id, backend)")
        clean = {k: v for k, v in row.items() if k not in _DERIVED_KEYS}
        try:
            out.append(Feature.model_validate(clean))
        except ValidationError as exc:
            raise ImportStateError(f"entry {i} invalid: {exc.error_count()} validation error(s)") from exc
    return out
