"""Schedule engine: the interface the CLI drives."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from core.event_bus import EventBus
from executor.edit_transaction import EditTransaction
from governance.audit_logger import AuditLogger
from planner.critical_path import PathAnalyzer
from planner.demo_dataset import demo_specs
from planner.dependency_graph import CycleDetector
from planner.errors import CycleError, TaskNotFoundError
from planner.task_models import CycleCheck, CycleEdge, Task, TaskUpdate, parse_update
from planner.task_store import DEFAULT_CAPACITY, TaskStore

logger = logging.getLogger("gantt.engine")


@dataclass
class CreateResult:
    """Outcome of replacing the whole schedule."""

    committed_count: int
    edge: CycleEdge | None = None
    cycle_path: tuple[int, ...] = ()

    @property
    def committed(self) -> bool:
        return self.edge is None


@dataclass
class EditResult:
    """Outcome of an in-place edit of one task."""

    success: bool
    index: int
    edge: CycleEdge | None = None
    cycle_path: tuple[int, ...] = ()


class ScheduleEngine:
    """Owns one task store and routes every mutation through a transaction."""

    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        event_bus: EventBus | None = None,
        audit_logger: AuditLogger | None = None,
    ) -> None:
        self.store = TaskStore(capacity=capacity)
        self.detector = CycleDetector()
        self.analyzer = PathAnalyzer()
        self.transaction = EditTransaction(
            self.store,
            detector=self.detector,
            event_bus=event_bus,
            audit_logger=audit_logger,
        )

    @property
    def task_count(self) -> int:
        return len(self.store)

    def create_from_specs(self, specs: Iterable[Task | Mapping[str, Any]]) -> CreateResult:
        """Replace the schedule; on a cycle the schedule ends up empty."""
        result = self.transaction.create(specs)
        return CreateResult(
            committed_count=result.task_count,
            edge=result.edge,
            cycle_path=result.check.path,
        )

    def load_demo(self) -> CreateResult:
        return self.create_from_specs(demo_specs())

    def find(self, name: str) -> int:
        index = self.store.find_by_name(name)
        if index is None:
            raise TaskNotFoundError(name)
        return index

    def edit_by_name(self, name: str, fields: TaskUpdate | Mapping[str, Any]) -> EditResult:
        """Edit the first task called ``name``; cyclic edits are rolled back.

        Raises TaskNotFoundError for an unknown name and TaskValidationError
        for bad fields; in both cases the store is untouched.
        """
        index = self.find(name)
        update = parse_update(fields)
        candidate = update.apply_to(self.store.get(index))
        self.store.validate_task(candidate)

        result = self.transaction.apply(index, lambda _current: candidate)
        if not result.committed:
            logger.info("Edit of %r rejected: circular dependency", name)
        return EditResult(
            success=result.committed,
            index=index,
            edge=result.edge,
            cycle_path=result.check.path,
        )

    def detect_cycle(self) -> CycleCheck:
        return self.detector.detect(self.store)

    def require_acyclic(self) -> None:
        """Raise CycleError if the current graph has a cycle."""
        check = self.detect_cycle()
        if check.found and check.edge is not None:
            raise CycleError(check.edge)

    def longest_chain_from(self, start: int) -> list[int]:
        """Longest dependency chain from a 0-based task index."""
        return self.analyzer.longest_chain(self.store, start)

    def chain_names(self, chain: Iterable[int]) -> list[str]:
        tasks = self.store.tasks()
        return [tasks[index].name for index in chain]

    def snapshot(self) -> tuple[Task, ...]:
        return self.store.tasks()
