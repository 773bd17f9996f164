"""In-memory task checkpoint and rollback manager."""

from __future__ import annotations

import itertools
from datetime import UTC, datetime
from typing import Any

from planner.task_models import Task
from planner.task_store import TaskStore


class RollbackManager:
    """Creates and restores value copies of selected store slots."""

    def __init__(self, store: TaskStore) -> None:
        self.store = store
        self._checkpoints: dict[str, dict[int, Task]] = {}
        self._sequence = itertools.count(1)

    def create_checkpoint(self, indices: list[int]) -> str:
        """Capture copies of the tasks at ``indices``."""
        stamp = datetime.now(UTC).strftime("%Y%m%dT%H%M%S%fZ")
        checkpoint_id = f"{stamp}-{next(self._sequence)}"
        self._checkpoints[checkpoint_id] = {index: self.store.get(index) for index in indices}
        return checkpoint_id

    def rollback(self, checkpoint_id: str) -> dict[str, Any]:
        """Restore every task captured by a checkpoint and forget it."""
        saved = self._checkpoints.pop(checkpoint_id, None)
        if saved is None:
            return {"success": False, "reason": f"Checkpoint not found: {checkpoint_id}"}
        for index, task in saved.items():
            self.store.replace(index, task)
        return {"success": True, "restored_tasks": len(saved), "checkpoint_id": checkpoint_id}

    def discard(self, checkpoint_id: str) -> bool:
        """Drop a checkpoint after its mutation has been committed."""
        return self._checkpoints.pop(checkpoint_id, None) is not None

    @property
    def pending(self) -> int:
        return len(self._checkpoints)
