"""Task identifier utilities.

Provides id generation, short id display, and id/prefix resolution.
"""

from __future__ import annotations

import re
import uuid
from collections.abc import Sequence

from taskflow.models import AmbiguousTaskIdError, Task, TaskNotFoundError

# Relaxed UUID pattern (any version)
UUID_RELAXED_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$", re.IGNORECASE
)


def generate_id() -> str:
    """Return a new random task identifier (UUID4 string)."""
    return str(uuid.uuid4())


def is_valid_uuid(value: str) -> bool:
    """Check if a string is a valid UUID.

    Args:
        value: String to validate

    Returns:
        True if value is a valid UUID
    """
    if not isinstance(value, str):
        return False
    return UUID_RELAXED_PATTERN.match(value) is not None


def shorten_id(task_id: str, length: int = 8) -> str:
    """Get the display prefix of a task id."""
    return task_id[:length]


def resolve_task_id(tasks: Sequence[Task], id_or_prefix: str) -> str:
    """Resolve a full task id or a unique prefix to a full task id.

    An exact match always wins, even if the value is also a prefix of
    other ids.

    Args:
        tasks: Tasks to search
        id_or_prefix: Full id or leading characters of one

    Returns:
        The full task id

    Raises:
        TaskNotFoundError: If no task matches
        AmbiguousTaskIdError: If more than one task starts with the prefix
    """
    value = id_or_prefix.strip()
    if not value:
        raise TaskNotFoundError("Task ID cannot be empty")

    for task in tasks:
        if task.id == value:
            return task.id

    matches = [task.id for task in tasks if task.id.lower().startswith(value.lower())]
    if not matches:
        raise TaskNotFoundError(f"No task found with ID or prefix '{value}'")
    if len(matches) > 1:
        raise AmbiguousTaskIdError(value, matches)
    return matches[0]
