"""Cycle detection over the task dependency graph.

Edges run from a task to each task it depends on. The search is a
three-colour depth-first traversal: a node is unvisited, on the current
recursion path, or fully explored. Reaching a node that is still on the
path means the edge just followed closes a cycle.
"""

from __future__ import annotations

import logging

from planner.task_models import CycleCheck, CycleEdge
from planner.task_store import TaskStore

logger = logging.getLogger("gantt.planner.cycles")

NO_CYCLE = CycleCheck(found=False)


class CycleDetector:
    """Finds the first dependency cycle in a store, if any."""

    def detect(self, store: TaskStore) -> CycleCheck:
        """Search every task as a root and report the first closing edge."""
        task_count = len(store)
        visited = [False] * task_count
        on_path = [False] * task_count
        path: list[int] = []

        def visit(current: int) -> CycleCheck | None:
            visited[current] = True
            on_path[current] = True
            path.append(current)

            for dep in store.dependencies_of(current):
                if not 0 <= dep < task_count:
                    continue
                if not visited[dep]:
                    found = visit(dep)
                    if found is not None:
                        return found
                elif on_path[dep]:
                    cycle = tuple(path[path.index(dep):])
                    return CycleCheck(found=True, edge=CycleEdge(current, dep), path=cycle)
                # Visited but off the path: cross edge into an explored subtree.

            on_path[current] = False
            path.pop()
            return None

        for root in range(task_count):
            if visited[root]:
                continue
            found = visit(root)
            if found is not None:
                logger.debug(
                    "Cycle closed by edge %d -> %d via %s",
                    found.edge.source,
                    found.edge.target,
                    list(found.path),
                )
                return found
        return NO_CYCLE


def detect_cycle(store: TaskStore) -> CycleCheck:
    """Convenience wrapper around ``CycleDetector().detect``."""
    return CycleDetector().detect(store)
