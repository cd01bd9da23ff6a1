"""Task and view-model data models."""

from __future__ import annotations

import uuid
from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Task(BaseModel):
    """Task record as supplied by the shared store.

    Attributes:
        id: Opaque unique identifier
        title: Short single-line title
        description: Short single-line description
        due_date: ISO-8601 timestamp with fractional seconds and an offset.
            Kept as the raw string; it may not parse. Null stays None and
            other JSON scalars are kept as their string form.
        priority: Intended range 1-4 (1=most urgent). Out-of-range values
            are accepted here and degraded by the presenter.
        is_complete: Completion flag
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    title: str
    description: str = ""
    due_date: str | None = Field(default=None, alias="dueDate")
    priority: int = 4
    is_complete: bool = Field(default=False, alias="isComplete")

    @field_validator("due_date", mode="before")
    @classmethod
    def keep_raw_due_date(cls, v: object) -> str | None:
        """Accept any scalar so a bad due date degrades one row, not the list."""
        if v is None or isinstance(v, str):
            return v
        return str(v)


class PriorityColor(str, Enum):
    """The four fixed priority colors, in priority order."""

    URGENT = "#FF645E"
    HIGH = "#FF8F24"
    NORMAL = "#4A8CFC"
    FALLBACK = "#525252"


class Shown(BaseModel):
    """A due-time label that should be displayed.

    ``parse_failed`` marks the ``"F"`` sentinel emitted for a due date that
    could not be parsed.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["shown"] = "shown"
    label: str
    parse_failed: bool = False


class Hidden(BaseModel):
    """No due-time label should be displayed."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["hidden"] = "hidden"


DueTime = Annotated[Union[Shown, Hidden], Field(discriminator="kind")]


class TaskViewModel(BaseModel):
    """Render-ready view of a single task row."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    description: str
    priority_color: PriorityColor
    due_time: DueTime

    @property
    def due_time_label(self) -> str | None:
        """Label to display, or None when the time is hidden."""
        if isinstance(self.due_time, Shown):
            return self.due_time.label
        return None


class TodayView(BaseModel):
    """Header progress plus the ordered task rows."""

    model_config = ConfigDict(frozen=True)

    title: str = "Today"
    completed: int = 0
    total: int = 0
    progress: float = Field(default=0.0, ge=0.0, le=1.0)
    rows: list[TaskViewModel] = Field(default_factory=list)
