"""TaskFlow logging.

Every module logs through a child of the ``taskflow`` logger
(``taskflow.persistence``, ``taskflow.commands`` ...). Only the parent owns a
handler: a rotating file in the platform log directory, so nothing ever
reaches the terminal. ``TASKFLOW_LOG_LEVEL`` sets the threshold.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path

from platformdirs import user_log_dir

APP_LOGGER_NAME = "taskflow"
LOG_FILE_NAME = "taskflow.log"
LOG_LEVEL_ENV = "TASKFLOW_LOG_LEVEL"
DEFAULT_LEVEL = logging.INFO

_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
_BACKUP_COUNT = 3

_logger: logging.Logger | None = None


def _level_from_env() -> int:
    name = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    level = logging.getLevelName(name) if name else DEFAULT_LEVEL
    return level if isinstance(level, int) else DEFAULT_LEVEL


def _configure() -> logging.Logger:
    log_dir = Path(user_log_dir(APP_LOGGER_NAME))
    log_dir.mkdir(parents=True, exist_ok=True)

    handler = logging.handlers.RotatingFileHandler(
        log_dir / LOG_FILE_NAME,
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

    logger = logging.getLogger(APP_LOGGER_NAME)
    logger.setLevel(_level_from_env())
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the application logger, or its child *name*.

    The file handler is attached on the first call.
    """
    global _logger
    if _logger is None:
        _logger = _configure()
    return _logger.getChild(name) if name else _logger
