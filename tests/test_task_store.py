"""TaskStore and task model validation tests."""

from __future__ import annotations

import pytest

from planner.demo_dataset import demo_specs
from planner.errors import TaskIndexError, TaskValidationError
from planner.task_models import Task, TaskUpdate, parse_task
from planner.task_store import MAX_CAPACITY, TaskStore


def build_store() -> TaskStore:
    store = TaskStore()
    store.create_batch(demo_specs())
    return store


def test_create_batch_and_lookup() -> None:
    store = build_store()
    assert len(store) == 10
    assert store.find_by_name("Interior_design") == 2
    assert store.get(2).dependencies == [0, 1]
    assert store.find_by_name("interior_design") is None


def test_find_by_name_first_match_wins() -> None:
    store = TaskStore()
    store.create_batch(
        [
            {"name": "Dup", "start_month": 1, "end_month": 2},
            {"name": "Dup", "start_month": 3, "end_month": 4},
        ]
    )
    assert store.find_by_name("Dup") == 0


def test_get_returns_copy() -> None:
    store = build_store()
    task = store.get(2)
    task.dependencies.append(9)
    assert store.get(2).dependencies == [0, 1]


def test_replace_and_index_errors() -> None:
    store = build_store()
    store.replace(4, Task(name="Design", start_month=5, end_month=6))
    assert store.get(4).name == "Design"

    with pytest.raises(TaskIndexError):
        store.get(10)
    with pytest.raises(TaskIndexError):
        store.replace(-1, Task(name="X", start_month=1, end_month=1))


@pytest.mark.parametrize(
    "fields",
    [
        {"name": "A", "start_month": 0, "end_month": 3},
        {"name": "A", "start_month": 1, "end_month": 13},
        {"name": "A", "start_month": 5, "end_month": 4},
        {"name": "Has space", "start_month": 1, "end_month": 2},
        {"name": "", "start_month": 1, "end_month": 2},
    ],
)
def test_invalid_task_fields_raise_validation_error(fields: dict) -> None:
    with pytest.raises(TaskValidationError):
        parse_task(fields)


def test_create_batch_rejects_out_of_range_dependency_without_mutating() -> None:
    store = build_store()
    with pytest.raises(TaskValidationError):
        store.create_batch(
            [
                {"name": "A", "start_month": 1, "end_month": 2, "dependencies": [1]},
            ]
        )
    assert len(store) == 10


def test_create_batch_rejects_over_capacity() -> None:
    store = TaskStore(capacity=2)
    specs = [{"name": f"T{i}", "start_month": 1, "end_month": 1} for i in range(3)]
    with pytest.raises(TaskValidationError):
        store.create_batch(specs)
    assert len(store) == 0


def test_too_many_dependencies_rejected() -> None:
    store = build_store()
    task = Task(name="Busy", start_month=1, end_month=2, dependencies=list(range(10)) + [0])
    with pytest.raises(TaskValidationError):
        store.validate_task(task)


def test_task_update_keeps_unset_fields() -> None:
    task = Task(name="Research", start_month=1, end_month=3, dependencies=[])
    updated = TaskUpdate(dependencies=[2]).apply_to(task)
    assert updated.name == "Research"
    assert updated.start_month == 1
    assert updated.dependencies == [2]

    with pytest.raises(TaskValidationError):
        TaskUpdate(start_month=5).apply_to(task)


def test_capacity_bounds_rejected() -> None:
    with pytest.raises(ValueError):
        TaskStore(capacity=0)
    with pytest.raises(ValueError):
        TaskStore(capacity=MAX_CAPACITY + 1)
