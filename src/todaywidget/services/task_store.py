"""Read access to the shared task store.

The app that owns the tasks writes today's list to a JSON file; the widget
only ever reads it. The file holds either a bare list of task objects or an
object with a ``"tasks"`` list:

    {"tasks": [{"title": "...", "dueDate": "2024-08-09T18:00:00.000Z", ...}]}
"""

from __future__ import annotations

import json
import logging
from json import JSONDecodeError
from pathlib import Path

from platformdirs import user_data_dir
from pydantic import TypeAdapter, ValidationError

from todaywidget.models.task import Task

logger = logging.getLogger(__name__)

_TASK_LIST = TypeAdapter(list[Task])


class TaskStoreError(Exception):
    """The store file exists but cannot be read as a task list."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Cannot read task store '{path}': {reason}")
        self.path = path
        self.reason = reason


def default_store_path() -> Path:
    """Default location of the shared tasks file."""
    return Path(user_data_dir("todaywidget")) / "tasks.json"


class TaskStore:
    """JSON file backed task store."""

    def __init__(self, path: str | Path | None = None):
        self.path = Path(path).expanduser() if path else default_store_path()

    def today_tasks(self) -> list[Task]:
        """Return today's tasks in file order.

        A missing file means the owning app has not written anything yet and
        yields an empty list.
        """
        if not self.path.exists():
            logger.warning("task store not found: %s", self.path)
            return []

        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except JSONDecodeError as e:
            raise TaskStoreError(self.path, f"invalid JSON ({e.msg} at line {e.lineno})") from e
        except UnicodeDecodeError as e:
            raise TaskStoreError(self.path, f"invalid JSON (not UTF-8 at byte {e.start})") from e
        except OSError as e:
            raise TaskStoreError(self.path, e.strerror or str(e)) from e

        if isinstance(data, dict):
            data = data.get("tasks", [])
        if not isinstance(data, list):
            raise TaskStoreError(self.path, "expected a list of tasks")

        try:
            tasks = _TASK_LIST.validate_python(data)
        except ValidationError as e:
            raise TaskStoreError(
                self.path, f"{e.error_count()} invalid task field(s)"
            ) from e

        logger.debug("loaded %d task(s) from %s", len(tasks), self.path)
        return tasks
