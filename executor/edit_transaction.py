"""Speculative task mutation gated on the cycle detector's verdict."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from core.event_bus import (
    CREATE_CANCELLED,
    CREATE_COMMITTED,
    EDIT_COMMITTED,
    EDIT_ROLLED_BACK,
    EventBus,
)
from executor.rollback_manager import RollbackManager
from governance.audit_logger import AuditLogger
from planner.dependency_graph import CycleDetector
from planner.task_models import CycleCheck, CycleEdge, Task
from planner.task_store import TaskStore

logger = logging.getLogger("gantt.executor")

Mutation = Callable[[Task], Task]


@dataclass
class TransactionResult:
    """Terminal state of one create/edit transaction."""

    committed: bool
    check: CycleCheck = field(default_factory=lambda: CycleCheck(found=False))
    task_count: int = 0

    @property
    def edge(self) -> CycleEdge | None:
        return self.check.edge


class EditTransaction:
    """Applies a mutation, checks the whole graph, then commits or rolls back.

    The store is never left cyclic: an edit that closes a cycle is reverted
    from its checkpoint before ``apply`` returns, and a creation that
    contains one leaves the store empty.
    """

    def __init__(
        self,
        store: TaskStore,
        detector: CycleDetector | None = None,
        event_bus: EventBus | None = None,
        audit_logger: AuditLogger | None = None,
    ) -> None:
        self.store = store
        self.detector = detector or CycleDetector()
        self.event_bus = event_bus
        self.audit_logger = audit_logger
        self.rollback_manager = RollbackManager(store)

    def apply(self, index: int, mutation: Mutation) -> TransactionResult:
        """Replace the task at ``index`` with ``mutation(current)`` if it stays acyclic."""
        before = self.store.get(index)
        checkpoint_id = self.rollback_manager.create_checkpoint([index])
        try:
            self.store.replace(index, mutation(before))
            check = self.detector.detect(self.store)
        except Exception:
            self.rollback_manager.rollback(checkpoint_id)
            raise

        after = self.store.get(index)
        if check.found:
            self.rollback_manager.rollback(checkpoint_id)
            logger.info("Edit of task %d rolled back: cycle via %s", index, check.edge)
            self._record("edit", before.name, after.model_dump(), "rolled_back", check)
            self._emit(EDIT_ROLLED_BACK, {"index": index, "edge": check.edge})
            return TransactionResult(committed=False, check=check, task_count=len(self.store))

        self.rollback_manager.discard(checkpoint_id)
        logger.info("Edit of task %d committed", index)
        self._record("edit", before.name, after.model_dump(), "committed", check)
        self._emit(EDIT_COMMITTED, {"index": index, "task": after})
        return TransactionResult(committed=True, check=check, task_count=len(self.store))

    def create(self, specs: Iterable[Task | Mapping[str, Any]]) -> TransactionResult:
        """Build a whole new task set; discard all of it if it contains a cycle."""
        specs = list(specs)
        # Validation errors surface here, before the previous set is replaced.
        self.store.create_batch(specs)
        check = self.detector.detect(self.store)
        fields = {"tasks": [task.model_dump() for task in self.store.tasks()]}

        if check.found:
            self.store.clear()
            logger.info("Creation cancelled: cycle via %s", check.edge)
            self._record("create", "*", fields, "cancelled", check)
            self._emit(CREATE_CANCELLED, {"edge": check.edge})
            return TransactionResult(committed=False, check=check, task_count=0)

        logger.info("Created %d task(s)", len(self.store))
        self._record("create", "*", fields, "committed", check)
        self._emit(CREATE_COMMITTED, {"task_count": len(self.store)})
        return TransactionResult(committed=True, check=check, task_count=len(self.store))

    def _record(
        self,
        action: str,
        task: str,
        fields: dict[str, Any],
        outcome: str,
        check: CycleCheck,
    ) -> None:
        if self.audit_logger is None:
            return
        reason = ""
        if check.edge is not None:
            reason = f"cycle edge {check.edge.source + 1} -> {check.edge.target + 1}"
        self.audit_logger.log(action=action, task=task, fields=fields, outcome=outcome, reason=reason)

    def _emit(self, event_name: str, payload: dict[str, Any]) -> None:
        if self.event_bus is not None:
            self.event_bus.emit(event_name, payload)
