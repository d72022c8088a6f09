"""FLAGDASH FILE PURPOSE
Purpose: SQLite store for the feature-snapshot history and its cursor.
Hot path: no (one load per request, one save per admin action).
Feature flags: none.
Failure mode: deterministic exceptions; unreadable rows raise ValueError and
  the caller decides whether to reseed.
"""

from __future__ import annotations

import json
import sqlite3
import time
from pathlib import Path

from core.config import db_path
from core.history import History
from core.models import features_to_wire, parse_features


def init_schema(conn: sqlite3.Connection) -> None:
    conn.execute(
        """
        CREATE TABLE IF NOT EXISTS history_snapshots (
            position INTEGER PRIMARY KEY,
            features_json TEXT NOT NULL,
            ts INTEGER NOT NULL
        )
        """
    )
    conn.execute(
        """
        CREATE TABLE IF NOT EXISTS history_cursor (
            id INTEGER PRIMARY KEY CHECK (id = 1),
            position INTEGER NOT NULL,
            ts INTEGER NOT NULL
        )
        """
    )
    conn.commit()


def get_conn(path: str | None = None) -> sqlite3.Connection:
    path = path or db_path()
    if path != ":memory:":
        Path(path).parent.mkdir(parents=True, exist_ok=True)

    conn = sqlite3.connect(path)
    conn.row_factory = sqlite3.Row
    init_schema(conn)
    return conn


def save_history(history: History) -> None:
    now_ts = int(time.time())
    rows = [
        (pos, json.dumps(features_to_wire(snapshot), sort_keys=True, separators=(",", ":")), now_ts)
        for pos, snapshot in enumerate(history.snapshots)
    ]
    with get_conn() as conn:
        conn.execute("DELETE FROM history_snapshots")
        conn.executemany(
            "INSERT INTO history_snapshots(position, features_json, ts) VALUES (?, ?, ?)",
            rows,
        )
        conn.execute(
            """
            INSERT INTO history_cursor(id, position, ts) VALUES (1, ?, ?)
            ON CONFLICT(id) DO UPDATE SET position = excluded.position, ts = excluded.ts
            """,
            (history.index, now_ts),
        )


def load_history() -> History | None:
    """Return the stored history, or None when nothing has been saved yet."""
    with get_conn() as conn:
        rows = conn.execute(
            "SELECT position, features_json FROM history_snapshots ORDER BY position ASC"
        ).fetchall()
        cursor = conn.execute("SELECT position FROM history_cursor WHERE id = 1").fetchone()

    if not rows:
        return None

    snapshots = []
    for row in rows:
        try:
            parsed = json.loads(str(row["features_json"]))
        except json.JSONDecodeError as e:
            raise ValueError(f"history snapshot {row['position']} is not valid JSON") from e
        if not isinstance(parsed, list):
            raise ValueError(f"history snapshot {row['position']} must be a list")
        snapshots.append(parse_features(parsed))

    index = int(cursor["position"]) if cursor is not None else None
    return History(snapshots, index)

