"""Schedule error taxonomy."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from planner.task_models import CycleEdge


class ScheduleError(Exception):
    """Base class for recoverable schedule errors."""


class TaskValidationError(ScheduleError, ValueError):
    """Caller-supplied task fields are out of the allowed range."""


class TaskNotFoundError(ScheduleError, LookupError):
    """No task matches the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Task not found: {name!r}")
        self.name = name


class TaskIndexError(ScheduleError, IndexError):
    """Task index outside the populated part of the store."""

    def __init__(self, index: int, task_count: int) -> None:
        super().__init__(f"Task index {index} out of range for {task_count} task(s).")
        self.index = index
        self.task_count = task_count


class CycleError(ScheduleError):
    """A mutation would close a dependency cycle."""

    def __init__(self, edge: CycleEdge) -> None:
        super().__init__(
            f"Circular dependency detected: task {edge.source + 1} -> task {edge.target + 1}"
        )
        self.edge = edge
