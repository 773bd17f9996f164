"""Longest dependency chain tests."""

from __future__ import annotations

import pytest

from planner.critical_path import PathAnalyzer, longest_chain
from planner.demo_dataset import demo_specs
from planner.errors import TaskIndexError
from planner.task_models import Task
from planner.task_store import TaskStore


def demo_store() -> TaskStore:
    store = TaskStore()
    store.create_batch(demo_specs())
    return store


def store_with(deps: list[list[int]]) -> TaskStore:
    store = TaskStore()
    store.create_batch(
        [
            {"name": f"T{i}", "start_month": 1, "end_month": 2, "dependencies": d}
            for i, d in enumerate(deps)
        ]
    )
    return store


def test_final_inspection_chain_on_demo() -> None:
    chain = longest_chain(demo_store(), 9)
    assert chain == [9, 7, 6, 5, 3, 2, 0]


def test_task_without_dependencies_is_single_node_chain() -> None:
    assert longest_chain(demo_store(), 4) == [4]


def test_tie_keeps_first_discovered_chain() -> None:
    # 2 -> 0 and 2 -> 1 have equal length; list order decides.
    assert longest_chain(store_with([[], [], [1, 0]]), 2) == [2, 1]


def test_longer_later_branch_replaces_best() -> None:
    store = store_with([[], [0], [3, 1], []])
    assert longest_chain(store, 2) == [2, 1, 0]


def test_node_may_appear_in_sibling_branches() -> None:
    # Both branches pass through 0; the longer one is kept.
    store = store_with([[], [0], [0, 1]])
    assert longest_chain(store, 2) == [2, 1, 0]


def test_consecutive_pairs_are_dependency_edges() -> None:
    store = demo_store()
    tasks = store.tasks()
    for start in range(len(store)):
        chain = longest_chain(store, start)
        assert chain[0] == start
        for a, b in zip(chain, chain[1:]):
            assert b in tasks[a].dependencies


def test_cyclic_graph_does_not_loop_forever() -> None:
    store = store_with([[], []])
    store.replace(0, Task(name="T0", start_month=1, end_month=1, dependencies=[1]))
    store.replace(1, Task(name="T1", start_month=1, end_month=1, dependencies=[0]))
    assert PathAnalyzer().longest_chain(store, 0) == [0, 1]


def test_out_of_range_dependencies_ignored() -> None:
    store = store_with([[], []])
    store.replace(1, Task(name="T1", start_month=1, end_month=1, dependencies=[5, 0]))
    assert longest_chain(store, 1) == [1, 0]


@pytest.mark.parametrize("start", [-1, 10, 99])
def test_invalid_start_raises(start: int) -> None:
    with pytest.raises(TaskIndexError):
        longest_chain(demo_store(), start)
