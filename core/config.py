"""FLAGDASH FILE PURPOSE
Purpose: environment configuration helpers (safe defaults).
Hot path: yes (read-only env lookups; lightweight).
Feature flags: FLAGDASH_DEBUG, FLAGDASH_PANEL_*, FLAGDASH_HISTORY_LIMIT.
Failure mode: safe defaults when unset.
"""

from __future__ import annotations

import os

DEFAULT_DB_PATH = "ops/flagdash.sqlite3"


def env_flag(name: str, default: str = "0") -> bool:
    v = (os.getenv(name) or default).strip().lower()
    return v in ("1", "true", "yes", "on")


def is_debug() -> bool:
    return env_flag("FLAGDASH_DEBUG", "0")


def db_path() -> str:
    return os.getenv("FLAGDASH_DB_PATH", DEFAULT_DB_PATH)


def admin_api_key() -> str | None:
    key = (os.getenv("FLAGDASH_ADMIN_API_KEY") or "").strip()
    return key or None


DEFAULT_HISTORY_LIMIT = 100


def history_limit() -> int:
    raw = (os.getenv("FLAGDASH_HISTORY_LIMIT") or "").strip()
    try:
        value = int(raw) if raw else DEFAULT_HISTORY_LIMIT
    except ValueError:
        return DEFAULT_HISTORY_LIMIT
    return max(1, value)
