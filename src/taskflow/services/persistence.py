"""Persistence adapter - task list to and from a key-value store.

The whole task list is kept as one JSON array under a single entry. Failures
in either direction are logged and swallowed so the application keeps
working in memory: a corrupt or unreadable entry loads as an empty list and
a failed write simply does not persist.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from pydantic import TypeAdapter

from taskflow.models import PersistenceReadError, PersistenceWriteError, Task
from taskflow.models.config_models import DEFAULT_STORAGE_KEY
from taskflow.repositories import KeyValueStore
from taskflow.services.config_service import get_config_service
from taskflow.utils.logger import get_logger

_TASK_LIST = TypeAdapter(list[Task])


class TaskPersistence:
    """Load and save the task list through an injected KeyValueStore."""

    def __init__(self, store: KeyValueStore, key: str = DEFAULT_STORAGE_KEY):
        self.store = store
        self.key = key

    def load_tasks(self) -> list[Task]:
        """Read the stored task list.

        Returns:
            The stored tasks, or an empty list when the entry is absent,
            unreadable, not valid JSON, or not shaped like a task list
        """
        try:
            raw = self.store.get(self.key)
            if raw is None:
                return []
            return _TASK_LIST.validate_json(raw)
        except Exception as e:
            error = PersistenceReadError(f"Failed to load tasks from '{self.key}': {e}")
            get_logger("persistence").error("%s", error)
            return []

    def save_tasks(self, tasks: Sequence[Task]) -> None:
        """Write *tasks* to the store, replacing the previous list.

        Errors are logged, never raised.
        """
        try:
            payload = _TASK_LIST.dump_json(list(tasks), by_alias=True).decode("utf-8")
            self.store.set(self.key, payload)
        except Exception as e:
            error = PersistenceWriteError(f"Failed to save tasks to '{self.key}': {e}")
            get_logger("persistence").error("%s", error)
            return
        get_logger("persistence").debug("saved %d task(s) to '%s'", len(tasks), self.key)


def get_task_persistence(data_file: str | Path | None = None) -> TaskPersistence:
    """Build the persistence adapter for the current configuration.

    Args:
        data_file: Store file to use instead of the configured one
    """
    config_service = get_config_service()
    return TaskPersistence(
        config_service.get_store(data_file), key=config_service.config.storage.key
    )


def load_tasks() -> list[Task]:
    """Load the task list from the configured store."""
    return get_task_persistence().load_tasks()


def save_tasks(tasks: Sequence[Task]) -> None:
    """Save the task list to the configured store."""
    get_task_persistence().save_tasks(tasks)
