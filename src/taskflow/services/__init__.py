"""Services module for TaskFlow - Business logic layer."""

from .persistence import TaskPersistence, get_task_persistence, load_tasks, save_tasks
from .task_factory import create_task
from .task_operations import (
    add_task,
    clear_completed,
    count_tasks,
    delete_task,
    filter_tasks,
    find_task,
    sort_by_priority,
    toggle_task,
)

__all__ = [
    # Factory
    "create_task",
    # List operations
    "add_task",
    "delete_task",
    "toggle_task",
    "filter_tasks",
    "clear_completed",
    "count_tasks",
    "sort_by_priority",
    "find_task",
    # Persistence
    "TaskPersistence",
    "get_task_persistence",
    "load_tasks",
    "save_tasks",
]
