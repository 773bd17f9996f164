"""Fixed-capacity, index-addressed task collection."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from planner.errors import TaskIndexError, TaskValidationError
from planner.task_models import Task, parse_task

DEFAULT_CAPACITY = 10
# Graph searches recurse once per task on a chain.
MAX_CAPACITY = 100


class TaskStore:
    """Owns the schedule's tasks; other components refer to them by position only.

    Tasks are handed out and taken in as copies, so a caller holding a task
    can never mutate the store behind its back.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if not 1 <= capacity <= MAX_CAPACITY:
            raise ValueError(f"Store capacity must be in 1..{MAX_CAPACITY}.")
        self.capacity = capacity
        self._tasks: list[Task] = []

    def __len__(self) -> int:
        return len(self._tasks)

    def create_batch(self, specs: Iterable[Task | Mapping[str, Any]]) -> None:
        """Replace every task with freshly specified ones.

        All specs are validated before the store is touched. Cycle checking is
        the caller's job (see ``EditTransaction.create``).
        """
        tasks = [parse_task(spec) for spec in specs]
        if len(tasks) > self.capacity:
            raise TaskValidationError(
                f"Cannot create {len(tasks)} tasks; capacity is {self.capacity}."
            )
        for task in tasks:
            self.validate_task(task, task_count=len(tasks))
        self._tasks = tasks

    def validate_task(self, task: Task, task_count: int | None = None) -> None:
        """Check dependency references against the number of tasks in play."""
        count = len(self._tasks) if task_count is None else task_count
        if len(task.dependencies) > count:
            raise TaskValidationError(
                f"Task {task.name!r} lists {len(task.dependencies)} dependencies; "
                f"at most {count} allowed."
            )
        for dep in task.dependencies:
            if not 0 <= dep < count:
                raise TaskValidationError(
                    f"Task {task.name!r} depends on task {dep + 1}, "
                    f"which is outside 1..{count}."
                )

    def find_by_name(self, name: str) -> int | None:
        """Return the index of the first task named exactly ``name``."""
        for index, task in enumerate(self._tasks):
            if task.name == name:
                return index
        return None

    def get(self, index: int) -> Task:
        self._check_index(index)
        return self._tasks[index].model_copy(deep=True)

    def replace(self, index: int, task: Task) -> None:
        self._check_index(index)
        self._tasks[index] = task.model_copy(deep=True)

    def dependencies_of(self, index: int) -> tuple[int, ...]:
        """Dependency indices of one task, without copying the task."""
        return tuple(self._tasks[index].dependencies)

    def tasks(self) -> tuple[Task, ...]:
        """Read-only snapshot of all tasks in position order."""
        return tuple(task.model_copy(deep=True) for task in self._tasks)

    def clear(self) -> None:
        self._tasks = []

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._tasks):
            raise TaskIndexError(index, len(self._tasks))
