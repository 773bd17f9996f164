"""Typer command handlers."""

from __future__ import annotations

import json
from pathlib import Path

import typer

from core.orchestrator import Orchestrator, RuntimeBundle
from core.policy_runtime import configure_logging
from core.schedule_engine import ScheduleEngine
from planner.demo_dataset import demo_specs
from planner.errors import ScheduleError
from planner.spec_loader import load_task_specs
from planner.task_models import CycleEdge
from ui.cli import prompts
from ui.render.gantt import render_gantt

BANNER = """\
  ________  ________  ________  ________  ________  ________
 |  ______||  ______||  ______||  ______||  ______||  ______|
 | |_____  | |_____  | |_____  | |_____  | |_____  | |_____
 |_____  | |_____  | |_____  | |_____  | |_____  | |_____  |
  ______| | ______| | ______| | ______| | ______| | ______| |
 |________||________||________||________||________||________|
"""

MENU = 'Options: "create" | "edit" | "test" | "quit"'


def build_runtime(config_path: Path | None = None, verbose: bool = False) -> RuntimeBundle:
    """Build the runtime; relative config paths resolve next to the config file."""
    root = config_path.resolve().parent if config_path is not None else None
    bundle = Orchestrator(root=root, config_path=config_path).build()
    configure_logging(bundle.config, verbose=verbose)
    return bundle


def format_edge(names: list[str], edge: CycleEdge) -> str:
    """Human readable cycle edge using 1-based task numbers."""

    def label(index: int) -> str:
        return names[index] if 0 <= index < len(names) else "?"

    return (
        f"Circular dependency detected: {label(edge.source)} ({edge.source + 1}) -> "
        f"{label(edge.target)} ({edge.target + 1})"
    )


def describe_edge(engine: ScheduleEngine, edge: CycleEdge) -> str:
    return format_edge([task.name for task in engine.snapshot()], edge)


def _load_schedule(bundle: RuntimeBundle, file: Path | None) -> ScheduleEngine:
    """Populate the engine from a schedule file, or the demo set when none is given."""
    engine = bundle.engine
    try:
        specs = demo_specs() if file is None else load_task_specs(file)
        result = engine.create_from_specs(specs)
    except (ScheduleError, OSError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    if result.edge is not None:
        # A cancelled creation empties the store, so names come from the specs.
        typer.echo(format_edge([str(spec["name"]) for spec in specs], result.edge), err=True)
        typer.echo("Error: circular dependency found, schedule not loaded.", err=True)
        raise typer.Exit(code=1)
    return engine


def chart(bundle: RuntimeBundle, file: Path | None = None) -> None:
    """Render the Gantt chart."""
    engine = _load_schedule(bundle, file)
    typer.echo(render_gantt(engine.snapshot()))


def cycles(bundle: RuntimeBundle, file: Path | None = None) -> None:
    """Report whether the dependency graph has a cycle."""
    engine = _load_schedule(bundle, file)
    check = engine.detect_cycle()
    if check.found and check.edge is not None:
        typer.echo(describe_edge(engine, check.edge))
        raise typer.Exit(code=1)
    typer.echo("No circular dependencies found.")


def critical_path(bundle: RuntimeBundle, start: int, file: Path | None = None) -> None:
    """Print the longest dependency chain from a 1-based task number."""
    engine = _load_schedule(bundle, file)
    try:
        chain = engine.longest_chain_from(start - 1)
    except ScheduleError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    typer.echo(f"Critical Path: {' -> '.join(engine.chain_names(chain))}")


def config_show(bundle: RuntimeBundle) -> None:
    """Show effective runtime config."""
    typer.echo(json.dumps(bundle.config, indent=2, default=str))


def interactive(bundle: RuntimeBundle) -> None:
    """Run the create / edit / test menu until the user quits."""
    engine = bundle.engine
    typer.echo(BANNER)
    typer.echo("Welcome to the Gantt Generator!")
    typer.echo('Type "test" to load an example or "create" to build your own:')

    while True:
        choice = prompts.prompt_word(">").lower()
        if choice == "create":
            _create_interactive(bundle)
            break
        if choice == "test":
            engine.load_demo()
            _show_chart(bundle)
            break
        typer.echo('Invalid input. Type "test" or "create".')

    while True:
        typer.echo("")
        typer.echo(MENU)
        choice = prompts.prompt_word(">").lower()
        if choice == "quit":
            break
        if choice == "create":
            _create_interactive(bundle)
        elif choice in {"edit", "test"} and engine.task_count == 0:
            typer.echo("No tasks exist yet: create or load test tasks first.")
        elif choice == "edit":
            _edit_interactive(bundle)
            _show_chart(bundle)
        elif choice == "test":
            _test_interactive(engine)
        else:
            typer.echo("Invalid option. Try again.")


def _show_chart(bundle: RuntimeBundle) -> None:
    if bundle.config.get("ui", {}).get("clear_screen", False):
        typer.clear()
    typer.echo(render_gantt(bundle.engine.snapshot()))


def _create_interactive(bundle: RuntimeBundle) -> None:
    engine = bundle.engine
    capacity = engine.store.capacity
    count = prompts.prompt_int_in_range(
        f"How many tasks would you like to add? (1-{capacity})", 1, capacity
    )
    specs = [prompts.prompt_task_fields(count, label=f"Task {i + 1}") for i in range(count)]

    try:
        result = engine.create_from_specs(specs)
    except ScheduleError as exc:
        typer.echo(f"Error: {exc}")
        return

    if result.edge is not None:
        typer.echo(format_edge([str(spec["name"]) for spec in specs], result.edge))
        typer.echo("Error: circular dependency found, creation cancelled.")
        return
    typer.echo("Tasks created successfully.")
    _show_chart(bundle)


def _edit_interactive(bundle: RuntimeBundle) -> None:
    engine = bundle.engine
    name = prompts.prompt_word("Enter the task name to edit (must match exactly)")
    if engine.store.find_by_name(name) is None:
        typer.echo("Task not found: check spelling and underscores.")
        return

    fields = prompts.prompt_task_fields(engine.task_count, label="New task")
    try:
        result = engine.edit_by_name(name, fields)
    except ScheduleError as exc:
        typer.echo(f"Error: {exc}")
        return

    if result.success:
        typer.echo("Task updated successfully.")
        return
    if result.edge is not None:
        # The store already holds the restored task; show the rejected name.
        names = [task.name for task in engine.snapshot()]
        names[result.index] = str(fields["name"])
        typer.echo(format_edge(names, result.edge))
    typer.echo("Error: a circular dependency was created, reverting changes.")


def _test_interactive(engine: ScheduleEngine) -> None:
    start = prompts.prompt_int_in_range(
        "Enter starting task number for critical path test", 1, engine.task_count
    )
    chain = engine.longest_chain_from(start - 1)
    typer.echo(f"Critical Path: {' -> '.join(engine.chain_names(chain))}")

    check = engine.detect_cycle()
    if check.found and check.edge is not None:
        typer.echo(describe_edge(engine, check.edge))
        typer.echo("!!! Circular Dependency Found !!!")
    else:
        typer.echo("No circular dependencies found. Critical path is valid.")
