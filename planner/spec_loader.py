"""Load task specs from a YAML schedule file.

Expected layout::

    tasks:
      - name: Research
        start_month: 1
        end_month: 3
      - name: Interior_design
        start_month: 3
        end_month: 6
        depends_on: [Research]

``depends_on`` names earlier or later tasks of the same file; they are
resolved to positions here so the store only ever sees indices.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from planner.errors import TaskValidationError

TASK_KEYS = frozenset({"name", "start_month", "end_month", "depends_on"})


def load_task_specs(path: Path) -> list[dict[str, Any]]:
    """Read a schedule file and return specs with index-based dependencies."""
    try:
        with path.open("r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh) or {}
    except (yaml.YAMLError, UnicodeDecodeError) as exc:
        raise TaskValidationError(f"Cannot parse schedule file {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TaskValidationError(f"Schedule file must contain a mapping: {path}")
    raw_tasks = data.get("tasks", [])
    if not isinstance(raw_tasks, list):
        raise TaskValidationError(f"'tasks' must be a list in {path}")
    return resolve_dependencies(raw_tasks)


def resolve_dependencies(raw_tasks: list[Any]) -> list[dict[str, Any]]:
    positions: dict[str, int] = {}
    for index, item in enumerate(raw_tasks):
        if not isinstance(item, dict):
            raise TaskValidationError(f"Task entry {index + 1} must be a mapping.")
        unknown = sorted(str(key) for key in item if key not in TASK_KEYS)
        if unknown:
            raise TaskValidationError(
                f"Task entry {index + 1} has unknown key(s): {', '.join(unknown)}"
            )
        name = str(item.get("name", ""))
        positions.setdefault(name, index)

    specs: list[dict[str, Any]] = []
    for item in raw_tasks:
        depends_on = item.get("depends_on", []) or []
        if isinstance(depends_on, str):
            depends_on = [depends_on]
        dependencies: list[int] = []
        for dep_name in depends_on:
            if str(dep_name) not in positions:
                raise TaskValidationError(
                    f"Task {item.get('name')!r} depends on unknown task {dep_name!r}."
                )
            dependencies.append(positions[str(dep_name)])
        specs.append(
            {
                "name": item.get("name"),
                "start_month": item.get("start_month"),
                "end_month": item.get("end_month"),
                "dependencies": dependencies,
            }
        )
    return specs
