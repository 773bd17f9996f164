"""Ready-made ten task renovation schedule used by the demo and tests."""

from __future__ import annotations

from typing import Any

DEMO_TASKS: tuple[dict[str, Any], ...] = (
    {"name": "Research", "start_month": 1, "end_month": 3, "dependencies": []},
    {"name": "Budget_Planning", "start_month": 2, "end_month": 5, "dependencies": []},
    {"name": "Interior_design", "start_month": 3, "end_month": 6, "dependencies": [0, 1]},
    {"name": "Site_Analysis", "start_month": 4, "end_month": 7, "dependencies": [2]},
    {"name": "Design_Development", "start_month": 5, "end_month": 8, "dependencies": []},
    {"name": "Fixture_Selection", "start_month": 6, "end_month": 9, "dependencies": [3]},
    {"name": "Permits_Approvals", "start_month": 7, "end_month": 10, "dependencies": [5]},
    {"name": "Construction_phase", "start_month": 8, "end_month": 11, "dependencies": [6]},
    {"name": "Interior_Finishing", "start_month": 9, "end_month": 12, "dependencies": []},
    {"name": "Final_Inspection", "start_month": 10, "end_month": 12, "dependencies": [7, 8]},
)


def demo_specs() -> list[dict[str, Any]]:
    """Fresh copies of the demo task specs."""
    return [{**spec, "dependencies": list(spec["dependencies"])} for spec in DEMO_TASKS]
