"""Fixed-width Gantt table rendering."""

from __future__ import annotations

import calendar
from collections.abc import Sequence

from planner.task_models import MONTHS_PER_YEAR, Task

NAME_WIDTH = 18
CELL_WIDTH = 11
MARK = "XXX"

MONTH_NAMES = tuple(calendar.month_name[m] for m in range(1, MONTHS_PER_YEAR + 1))


def _header() -> str:
    months = "|".join(f"{name:^{CELL_WIDTH}}" for name in MONTH_NAMES)
    return f"{'':{NAME_WIDTH + 2}}|{months}| Dependencies"


def _row(task: Task) -> str:
    cells = "".join(
        f"{MARK if task.occupies(month) else '':^{CELL_WIDTH}}|"
        for month in range(1, MONTHS_PER_YEAR + 1)
    )
    deps = " ".join(str(dep + 1) for dep in task.dependencies)
    return f" {task.name:<{NAME_WIDTH}} |{cells} {deps}".rstrip()


def render_gantt(tasks: Sequence[Task]) -> str:
    """Render tasks as a 12-month table; dependency numbers are 1-based."""
    header = _header()
    rule = "-" * len(header)
    lines = ["_" * len(header), header, rule]
    for task in tasks:
        lines.append(_row(task))
        lines.append(rule)
    return "\n".join(lines)
