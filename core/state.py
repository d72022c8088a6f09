"""FLAGDASH FILE PURPOSE
Purpose: current feature state (history load/mutate/save) feeding the resolver.
Hot path: yes (every panel request reads state through here).
Feature flags: none.
Failure mode:
  - unreadable stored history => warning + reseed from catalog
  - unknown feature id on toggle => UnknownFeatureError
  - bad import payload => ImportStateError (nothing pushed)
"""

from __future__ import annotations

from core import db
from core.catalog import default_features
from core.config import history_limit
from core.history import History
from core.logging import logger
from core.models import ComputedFeature, Feature
from core.portability import export_state, parse_state
from core.resolver import resolve


class UnknownFeatureError(LookupError):
    pass


def load_history() -> History:
    try:
        stored = db.load_history()
    except ValueError as e:
        logger.warning("STATE_HISTORY_UNREADABLE err=%s", e)
        stored = None
    if stored is None:
        return History([default_features()])
    return stored


def _commit(history: History, action: str) -> History:
    db.save_history(history)
    logger.info("STATE_%s index=%s size=%s", action, history.index, len(history))
    return history


def current_features() -> list[Feature]:
    return load_history().current


def computed_features() -> list[ComputedFeature]:
    return resolve(current_features())


def toggle(feature_id: str) -> History:
    history = load_history()
    current = history.current
    if not any(f.id == feature_id for f in current):
        raise UnknownFeatureError(feature_id)
    history.push(
        [
            f.model_copy(update={"enabled": not f.enabled}) if f.id == feature_id else f
            for f in current
        ],
        history_limit(),
    )
    logger.info("STATE_TOGGLE feature=%s", feature_id)
    return _commit(history, "PUSH")


def undo() -> tuple[History, bool]:
    history = load_history()
    moved = history.undo()
    if moved:
        _commit(history, "UNDO")
    return history, moved


def redo() -> tuple[History, bool]:
    history = load_history()
    moved = history.redo()
    if moved:
        _commit(history, "REDO")
    return history, moved


def reset() -> History:
    history = load_history()
    history.reset(default_features())
    return _commit(history, "RESET")


def sync_with_catalog() -> History:
    history = load_history()
    history.push(default_features(), history_limit())
    return _commit(history, "SYNC")


def import_state(text: str) -> History:
    features = parse_state(text)
    history = load_history()
    history.push(features, history_limit())
    return _commit(history, "IMPORT")


def export_current() -> str:
    return export_state(current_features())
