"""TaskFlow domain models.

Pydantic models for the task record and the application configuration,
plus the package exception hierarchy.
"""

from .config_models import AppConfig, OutputConfig, StorageConfig
from .exceptions import (
    AmbiguousTaskIdError,
    PersistenceError,
    PersistenceReadError,
    PersistenceWriteError,
    TaskFlowError,
    TaskNotFoundError,
    ValidationError,
)
from .task import FilterMode, Priority, Task, TaskCounts

__all__ = [
    # Task models
    "Task",
    "TaskCounts",
    "Priority",
    "FilterMode",
    # Config models
    "AppConfig",
    "StorageConfig",
    "OutputConfig",
    # Errors
    "TaskFlowError",
    "ValidationError",
    "PersistenceError",
    "PersistenceReadError",
    "PersistenceWriteError",
    "TaskNotFoundError",
    "AmbiguousTaskIdError",
]
