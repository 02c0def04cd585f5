"""Shared test fixtures and configuration.

Provides infrastructure to isolate tests from real filesystem state: the
platform config, data and log directories all point into *tmp_path*.
"""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest

from taskflow.adapters import InMemoryStore
from taskflow.models import Priority, Task
from taskflow.services import TaskPersistence


# ---------------------------------------------------------------------------
# Filesystem isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path, monkeypatch):
    """Redirect platformdirs lookups and reset cached singletons."""
    import taskflow.utils.logger as logger_mod
    from taskflow.commands import tasks as task_commands
    from taskflow.services.config_service import get_config_service
    from taskflow.utils.ui.console import get_console

    monkeypatch.delenv("TASKFLOW_DATA_FILE", raising=False)
    monkeypatch.delenv("TASKFLOW_LOG_LEVEL", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)
    get_config_service.cache_clear()
    logger_mod._logger = None
    get_console.cache_clear()
    task_commands.set_data_file(None)

    tmpdir = str(tmp_path)
    with patch("taskflow.utils.logger.user_log_dir", return_value=tmpdir):
        with patch("taskflow.services.config_service.user_config_dir", return_value=tmpdir):
            with patch("taskflow.services.config_service.user_data_dir", return_value=tmpdir):
                yield tmp_path

    app_logger = logging.getLogger("taskflow")
    for handler in list(app_logger.handlers):
        handler.close()
        app_logger.removeHandler(handler)
    logger_mod._logger = None
    get_config_service.cache_clear()
    get_console.cache_clear()
    task_commands.set_data_file(None)


# ---------------------------------------------------------------------------
# Task helpers
# ---------------------------------------------------------------------------


def _make_task(
    task_id: str,
    text: str = "Task",
    *,
    completed: bool = False,
    priority: Priority | str = Priority.MEDIUM,
) -> Task:
    """Build a Task with a fixed timestamp."""
    return Task(
        id=task_id,
        text=text,
        completed=completed,
        priority=priority,
        created_at="2024-06-01T10:00:00+00:00",
    )


@pytest.fixture()
def make_task():
    """Factory fixture for tasks with a fixed timestamp."""
    return _make_task


@pytest.fixture()
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture()
def persistence(store) -> TaskPersistence:
    return TaskPersistence(store)
