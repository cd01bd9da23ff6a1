"""Widget log file under platformdirs user_log_dir.

The presenter and the store log through ``logging.getLogger(__name__)``;
those ``todaywidget.*`` loggers propagate into the handler installed here
the first time a command runs. ``TODAYWIDGET_LOG_LEVEL`` raises the
threshold, e.g. to keep per-row parse failures out of the file.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path

from platformdirs import user_log_dir

_APP_NAME = "todaywidget"
_LOG_FILE = "todaywidget.log"
_LEVEL_ENV = "TODAYWIDGET_LOG_LEVEL"
_MAX_BYTES = 1024 * 1024  # 1 MB; one line per render plus row diagnostics
_BACKUP_COUNT = 2

_logger: logging.Logger | None = None


def get_log_path() -> Path:
    """Location of the widget log file."""
    return Path(user_log_dir(_APP_NAME)) / _LOG_FILE


def _level_from_env() -> int:
    name = os.environ.get(_LEVEL_ENV, "DEBUG").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.DEBUG


def get_logger() -> logging.Logger:
    """Return the widget's root logger, installing the file handler once."""
    global _logger
    if _logger is not None:
        return _logger

    log_path = get_log_path()
    log_path.parent.mkdir(parents=True, exist_ok=True)

    handler = logging.handlers.RotatingFileHandler(
        log_path,
        maxBytes=_MAX_BYTES,
        backupCount=_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    )

    logger = logging.getLogger(_APP_NAME)
    logger.setLevel(_level_from_env())
    if not logger.handlers:
        logger.addHandler(handler)
    logger.propagate = False

    _logger = logger
    return _logger
