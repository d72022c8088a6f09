"""FLAGDASH FILE PURPOSE
Purpose: undo/redo log of full feature snapshots with a movable cursor.
Hot path: no (one push or cursor move per admin action).
Feature flags: none.
Failure mode: cursor moves are clamped; an empty log is rejected at construction;
  pushes past the size cap drop the oldest snapshots.
"""

from __future__ import annotations

from typing import Any, Sequence

from core.models import Feature


class History:
    """Snapshot log. Pushing from a past cursor position drops the redo tail."""

    def __init__(self, snapshots: Sequence[Sequence[Feature]], index: int | None = None) -> None:
        if not snapshots:
            raise ValueError("history needs at least one snapshot")
        self._snapshots: list[list[Feature]] = [list(s) for s in snapshots]
        last = len(self._snapshots) - 1
        self._index = last if index is None else max(0, min(int(index), last))

    @property
    def index(self) -> int:
        return self._index

    @property
    def snapshots(self) -> list[list[Feature]]:
        return [list(s) for s in self._snapshots]

    @property
    def current(self) -> list[Feature]:
        return list(self._snapshots[self._index])

    @property
    def can_undo(self) -> bool:
        return self._index > 0

    @property
    def can_redo(self) -> bool:
        return self._index < len(self._snapshots) - 1

    def __len__(self) -> int:
        return len(self._snapshots)

    def push(self, snapshot: Sequence[Feature], max_size: int | None = None) -> None:
        """Append after the cursor; with `max_size`, drop the oldest snapshots beyond it."""
        del self._snapshots[self._index + 1 :]
        self._snapshots.append(list(snapshot))
        if max_size is not None and len(self._snapshots) > max_size:
            del self._snapshots[: len(self._snapshots) - max(1, max_size)]
        self._index = len(self._snapshots) - 1

    def undo(self) -> bool:
        if not self.can_undo:
            return False
        self._index -= 1
        return True

    def redo(self) -> bool:
        if not self.can_redo:
            return False
        self._index += 1
        return True

    def reset(self, seed: Sequence[Feature]) -> None:
        self._snapshots = [list(seed)]
        self._index = 0

    def summary(self) -> dict[str, Any]:
        return {
            "index": self._index,
            "size": len(self._snapshots),
            "can_undo": self.can_undo,
            "can_redo": self.can_redo,
        }
