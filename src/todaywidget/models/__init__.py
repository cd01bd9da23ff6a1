"""Today widget domain models.

This package contains Pydantic models for the task records supplied by the
shared store and the render-ready view models derived from them.
"""

from .config_models import AppConfig, DisplayConfig, StoreConfig
from .task import (
    DueTime,
    Hidden,
    PriorityColor,
    Shown,
    Task,
    TaskViewModel,
    TodayView,
)

__all__ = [
    # Task models
    "Task",
    "TaskViewModel",
    "TodayView",
    "PriorityColor",
    # Due-time result
    "DueTime",
    "Shown",
    "Hidden",
    # Config models
    "AppConfig",
    "DisplayConfig",
    "StoreConfig",
]
