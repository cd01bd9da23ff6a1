"""Shared test fixtures and configuration.

Provides infrastructure to isolate tests from the real config, data and log
directories.
"""

from __future__ import annotations

import json
import logging
from unittest.mock import patch

import pytest

from todaywidget.models import Task


# ---------------------------------------------------------------------------
# Filesystem isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolate_logger(tmp_path):
    """Send the widget log file to tmp_path and reset the logger singleton."""
    import todaywidget.utils.logger as logger_mod

    logger_mod._logger = None
    logging.getLogger("todaywidget").handlers.clear()
    logging.getLogger("todaywidget").propagate = True
    with patch("todaywidget.utils.logger.user_log_dir", return_value=str(tmp_path / "logs")):
        yield
    logger_mod._logger = None
    logging.getLogger("todaywidget").handlers.clear()
    logging.getLogger("todaywidget").propagate = True


@pytest.fixture()
def tmp_config(tmp_path):
    """Provide a real ConfigService backed by a temporary directory.

    Also clears the lru_cache so each test gets a fresh service instance.
    """
    from todaywidget.services.config_service import ConfigService, get_config_service

    get_config_service.cache_clear()
    with patch(
        "todaywidget.services.config_service.user_config_dir",
        return_value=str(tmp_path / "config"),
    ):
        svc = ConfigService()
        _ = svc.config
        yield svc
    get_config_service.cache_clear()


# ---------------------------------------------------------------------------
# Sample data
# ---------------------------------------------------------------------------


@pytest.fixture()
def sample_records() -> list[dict]:
    """Task records as the owning app writes them to the store."""
    return [
        {
            "id": "task-1",
            "title": "Ship release",
            "description": "Tag and publish",
            "dueDate": "2024-08-09T18:00:00.000Z",
            "priority": 1,
            "isComplete": False,
        },
        {
            "id": "task-2",
            "title": "Pay rent",
            "description": "Before midnight",
            "dueDate": "2024-08-09T00:00:00.000Z",
            "priority": 2,
            "isComplete": True,
        },
        {
            "id": "task-3",
            "title": "Call plumber",
            "description": "Kitchen sink",
            "dueDate": "not-a-date",
            "priority": 7,
            "isComplete": False,
        },
    ]


@pytest.fixture()
def sample_tasks(sample_records) -> list[Task]:
    return [Task.model_validate(r) for r in sample_records]


@pytest.fixture()
def store_file(tmp_path, sample_records):
    """A store file holding the sample records."""
    path = tmp_path / "tasks.json"
    path.write_text(json.dumps({"tasks": sample_records}), encoding="utf-8")
    return path
