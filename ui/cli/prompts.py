"""Validated console prompts for the interactive menu."""

from __future__ import annotations

from typing import Any

import typer

from planner.task_models import MAX_NAME_LENGTH, MONTHS_PER_YEAR


def prompt_word(text: str) -> str:
    """Prompt until a non-empty answer is given and return its first token."""
    while True:
        answer = str(typer.prompt(text, default="", show_default=False)).strip()
        if answer:
            return answer.split()[0][:MAX_NAME_LENGTH]


def prompt_int_in_range(text: str, minimum: int, maximum: int) -> int:
    """Prompt for an integer, re-asking until it falls in ``[minimum, maximum]``."""
    while True:
        value = typer.prompt(text, type=int)
        if minimum <= value <= maximum:
            return value
        typer.echo(f"Please enter a value between {minimum} and {maximum}.")


def prompt_task_fields(task_count: int, label: str = "Task") -> dict[str, Any]:
    """Ask for name, month span and 1-based dependency numbers of one task."""
    name = prompt_word(f"{label} name (use _ for spaces)")
    start = prompt_int_in_range(f"Start month (1-{MONTHS_PER_YEAR})", 1, MONTHS_PER_YEAR)
    while True:
        end = prompt_int_in_range(f"End month (1-{MONTHS_PER_YEAR})", 1, MONTHS_PER_YEAR)
        if end >= start:
            break
        typer.echo("End month cannot be before start month.")

    count = prompt_int_in_range("How many dependencies?", 0, task_count)
    dependencies = [
        prompt_int_in_range(f"Enter dependent task number (1-{task_count})", 1, task_count) - 1
        for _ in range(count)
    ]
    return {
        "name": name,
        "start_month": start,
        "end_month": end,
        "dependencies": dependencies,
    }
