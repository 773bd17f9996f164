"""Longest dependency chain search ("critical path" by hop count)."""

from __future__ import annotations

import logging

from planner.errors import TaskIndexError
from planner.task_store import TaskStore

logger = logging.getLogger("gantt.planner.path")


class PathAnalyzer:
    """Finds the longest simple chain of dependency edges from one task.

    Length is counted in tasks, not months. Dependencies are explored in list
    order and the first chain to reach a given length is kept, so a later
    chain must be strictly longer to replace it.
    """

    def longest_chain(self, store: TaskStore, start: int) -> list[int]:
        task_count = len(store)
        if not 0 <= start < task_count:
            raise TaskIndexError(start, task_count)

        on_path = [False] * task_count
        path: list[int] = []
        best: list[int] = []

        def explore(current: int) -> None:
            nonlocal best
            # Guards against looping if the graph is cyclic at call time.
            if on_path[current]:
                return
            on_path[current] = True
            path.append(current)
            if len(path) > len(best):
                best = list(path)

            for dep in store.dependencies_of(current):
                if 0 <= dep < task_count:
                    explore(dep)

            path.pop()
            on_path[current] = False

        explore(start)
        logger.debug("Longest chain from %d: %s", start, best)
        return best


def longest_chain(store: TaskStore, start: int) -> list[int]:
    return PathAnalyzer().longest_chain(store, start)
