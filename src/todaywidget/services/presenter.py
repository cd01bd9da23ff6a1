"""Task presenter: turns task records into render-ready view models.

Everything here is a pure function of its arguments. The widget host decides
when to render; each render passes fresh tasks and the current instant, and
nothing is cached between calls.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import datetime, tzinfo

from todaywidget.models.task import Task, TaskViewModel, TodayView
from todaywidget.services.due_time import resolve_due_time
from todaywidget.services.priority import resolve_priority_color

TODAY_TITLE = "Today"


def present_task(task: Task, now: datetime, tz: tzinfo | None = None) -> TaskViewModel:
    """Build the view model for a single task row."""
    return TaskViewModel(
        id=task.id,
        title=task.title,
        description=task.description,
        priority_color=resolve_priority_color(task.priority),
        due_time=resolve_due_time(task.due_date, now, tz),
    )


def completion_progress(tasks: Sequence[Task]) -> float:
    """Fraction of completed tasks, 0.0 for an empty list."""
    if not tasks:
        return 0.0
    completed = sum(1 for t in tasks if t.is_complete)
    return completed / len(tasks)


def build_today_view(
    tasks: Iterable[Task], now: datetime, tz: tzinfo | None = None
) -> TodayView:
    """Build the header progress and the ordered rows for the today list."""
    tasks = list(tasks)
    return TodayView(
        title=TODAY_TITLE,
        completed=sum(1 for t in tasks if t.is_complete),
        total=len(tasks),
        progress=completion_progress(tasks),
        rows=[present_task(task, now, tz) for task in tasks],
    )


class TaskPresenter:
    """Presenter bound to a display timezone.

    Holds no per-call state; ``present`` and ``present_all`` can be called
    from anywhere, in any order.
    """

    def __init__(self, tz: tzinfo | None = None):
        self.tz = tz

    def present(self, task: Task, now: datetime) -> TaskViewModel:
        return present_task(task, now, self.tz)

    def present_all(self, tasks: Iterable[Task], now: datetime) -> list[TaskViewModel]:
        return [present_task(task, now, self.tz) for task in tasks]

    def today_view(self, tasks: Iterable[Task], now: datetime) -> TodayView:
        return build_today_view(tasks, now, self.tz)
