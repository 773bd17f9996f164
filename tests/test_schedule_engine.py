"""ScheduleEngine scenario tests on the demo schedule."""

from __future__ import annotations

import pytest

from core.schedule_engine import ScheduleEngine
from planner.errors import CycleError, TaskIndexError, TaskNotFoundError, TaskValidationError
from planner.task_models import CycleEdge, TaskUpdate


def demo_engine() -> ScheduleEngine:
    engine = ScheduleEngine()
    result = engine.load_demo()
    assert result.committed
    assert result.committed_count == 10
    return engine


def test_demo_dependencies_and_no_cycle() -> None:
    engine = demo_engine()
    assert engine.snapshot()[2].name == "Interior_design"
    assert engine.snapshot()[2].dependencies == [0, 1]
    assert engine.detect_cycle().found is False


def test_edit_research_to_depend_on_interior_design_fails() -> None:
    engine = demo_engine()
    before = engine.snapshot()[0]

    result = engine.edit_by_name("Research", {"dependencies": [2]})

    assert result.success is False
    assert result.index == 0
    assert result.edge == CycleEdge(2, 0)
    assert result.cycle_path == (0, 2)
    assert engine.snapshot()[0] == before
    assert engine.detect_cycle().found is False


def test_full_field_edit_succeeds() -> None:
    engine = demo_engine()
    result = engine.edit_by_name(
        "Design_Development",
        TaskUpdate(name="Design_Dev", start_month=4, end_month=9, dependencies=[1]),
    )
    assert result.success is True
    task = engine.snapshot()[4]
    assert (task.name, task.start_month, task.end_month, task.dependencies) == (
        "Design_Dev",
        4,
        9,
        [1],
    )


def test_edit_unknown_name_raises_not_found() -> None:
    engine = demo_engine()
    with pytest.raises(TaskNotFoundError):
        engine.edit_by_name("Nope", {"start_month": 2})


def test_invalid_edit_leaves_store_unchanged() -> None:
    engine = demo_engine()
    before = engine.snapshot()
    with pytest.raises(TaskValidationError):
        engine.edit_by_name("Research", {"start_month": 6})
    with pytest.raises(TaskValidationError):
        engine.edit_by_name("Research", {"dependencies": [10]})
    with pytest.raises(TaskValidationError):
        engine.edit_by_name("Research", {"start_month": "soon"})
    assert engine.snapshot() == before


def test_empty_creation() -> None:
    engine = demo_engine()
    result = engine.create_from_specs([])
    assert result.committed_count == 0
    assert result.committed is True
    assert engine.task_count == 0
    assert engine.detect_cycle().found is False


def test_cyclic_creation_reports_edge_and_empties() -> None:
    engine = demo_engine()
    result = engine.create_from_specs(
        [
            {"name": "A", "start_month": 1, "end_month": 1, "dependencies": [0]},
        ]
    )
    assert result.committed is False
    assert result.edge == CycleEdge(0, 0)
    assert engine.task_count == 0


def test_longest_chain_from_and_names() -> None:
    engine = demo_engine()
    chain = engine.longest_chain_from(9)
    assert len(chain) == 7
    assert engine.chain_names(chain) == [
        "Final_Inspection",
        "Construction_phase",
        "Permits_Approvals",
        "Fixture_Selection",
        "Site_Analysis",
        "Interior_design",
        "Research",
    ]
    with pytest.raises(TaskIndexError):
        engine.longest_chain_from(10)


def test_require_acyclic_raises_cycle_error() -> None:
    engine = demo_engine()
    engine.require_acyclic()
    # Bypass the transaction to simulate a corrupted store.
    task = engine.store.get(0)
    engine.store.replace(0, task.model_copy(update={"dependencies": [0]}))
    with pytest.raises(CycleError) as excinfo:
        engine.require_acyclic()
    assert excinfo.value.edge == CycleEdge(0, 0)


def test_capacity_is_configurable() -> None:
    engine = ScheduleEngine(capacity=3)
    with pytest.raises(TaskValidationError):
        engine.load_demo()


def test_misspelled_edit_field_is_rejected() -> None:
    engine = demo_engine()
    before = engine.snapshot()
    with pytest.raises(TaskValidationError):
        engine.edit_by_name("Research", {"dependecies": [2]})
    assert engine.snapshot() == before


def test_unknown_spec_key_is_rejected_on_create() -> None:
    engine = demo_engine()
    with pytest.raises(TaskValidationError):
        engine.create_from_specs(
            [{"name": "A", "start_month": 1, "end_month": 2, "depends": [0]}]
        )
    assert engine.task_count == 10
