"""Services for the today widget.

The presentation rules (priority colors, due-time visibility and view-model
assembly) are pure functions; the store and config services handle the
widget's file-backed edges.
"""

from .due_time import resolve_due_time
from .presenter import TaskPresenter, build_today_view, completion_progress, present_task
from .priority import PRIORITY_PALETTE, resolve_priority_color

__all__ = [
    "PRIORITY_PALETTE",
    "TaskPresenter",
    "build_today_view",
    "completion_progress",
    "present_task",
    "resolve_due_time",
    "resolve_priority_color",
]
