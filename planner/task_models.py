"""Task records and graph analysis result types."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from planner.errors import TaskValidationError

MONTHS_PER_YEAR = 12
MAX_NAME_LENGTH = 24


class Task(BaseModel):
    """One schedule item spanning whole calendar months."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(min_length=1, max_length=MAX_NAME_LENGTH)
    start_month: int = Field(ge=1, le=MONTHS_PER_YEAR)
    end_month: int = Field(ge=1, le=MONTHS_PER_YEAR)
    # 0-based positions of predecessor tasks in the owning store.
    dependencies: list[int] = Field(default_factory=list)

    @field_validator("name")
    @classmethod
    def _single_token(cls, value: str) -> str:
        if any(ch.isspace() for ch in value):
            raise ValueError("task name must not contain whitespace (use _ for spaces)")
        return value

    @model_validator(mode="after")
    def _ordered_span(self) -> Task:
        if self.end_month < self.start_month:
            raise ValueError("end month cannot be before start month")
        return self

    def occupies(self, month: int) -> bool:
        return self.start_month <= month <= self.end_month


class TaskUpdate(BaseModel):
    """Field changes for an in-place edit; unset fields keep their value."""

    model_config = ConfigDict(extra="forbid")

    name: str | None = None
    start_month: int | None = None
    end_month: int | None = None
    dependencies: list[int] | None = None

    def apply_to(self, task: Task) -> Task:
        """Return a validated copy of ``task`` with these changes applied."""
        merged = task.model_dump()
        merged.update(self.model_dump(exclude_none=True))
        return parse_task(merged)


def parse_task(data: Task | Mapping[str, Any]) -> Task:
    """Build a validated task, translating pydantic errors to TaskValidationError."""
    if isinstance(data, Task):
        return data.model_copy(deep=True)
    try:
        return Task.model_validate(dict(data))
    except ValidationError as exc:
        messages = "; ".join(_format_error(err) for err in exc.errors())
        raise TaskValidationError(f"Invalid task {data.get('name', '?')!r}: {messages}") from exc


def parse_update(data: TaskUpdate | Mapping[str, Any]) -> TaskUpdate:
    if isinstance(data, TaskUpdate):
        return data
    try:
        return TaskUpdate.model_validate(dict(data))
    except ValidationError as exc:
        messages = "; ".join(_format_error(err) for err in exc.errors())
        raise TaskValidationError(f"Invalid task update: {messages}") from exc


def _format_error(err: Mapping[str, Any]) -> str:
    location = ".".join(str(part) for part in err.get("loc", ()))
    message = str(err.get("msg", "invalid value"))
    return f"{location}: {message}" if location else message


@dataclass(frozen=True)
class CycleEdge:
    """Dependency edge ``source -> target`` that closes a cycle."""

    source: int
    target: int


@dataclass(frozen=True)
class CycleCheck:
    """Outcome of a whole-graph cycle search."""

    found: bool
    edge: CycleEdge | None = None
    # Tasks on the cycle, starting at the edge target.
    path: tuple[int, ...] = field(default_factory=tuple)
