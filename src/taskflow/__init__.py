"""TaskFlow - a prioritized to-do list.

The public API is a handful of pure functions over lists of ``Task`` records
plus ``load_tasks`` / ``save_tasks`` for persistence.
"""

__version__ = "1.0.0"

from .models import Priority, Task, TaskCounts, ValidationError
from .services import (
    add_task,
    clear_completed,
    count_tasks,
    create_task,
    delete_task,
    filter_tasks,
    load_tasks,
    save_tasks,
    sort_by_priority,
    toggle_task,
)
from .utils.id_utils import generate_id

__all__ = [
    "__version__",
    "Task",
    "TaskCounts",
    "Priority",
    "ValidationError",
    "generate_id",
    "create_task",
    "add_task",
    "delete_task",
    "toggle_task",
    "filter_tasks",
    "clear_completed",
    "count_tasks",
    "sort_by_priority",
    "load_tasks",
    "save_tasks",
]
