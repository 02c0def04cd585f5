"""Task factory - validated construction of new Task records."""

from __future__ import annotations

from datetime import UTC, datetime

from taskflow.models import Priority, Task, ValidationError
from taskflow.utils.id_utils import generate_id


def _resolve_priority(priority: Priority | str | None) -> Priority:
    if priority is None:
        return Priority.MEDIUM
    if isinstance(priority, Priority):
        return priority
    if isinstance(priority, str):
        try:
            return Priority(priority)
        except ValueError:
            pass
    allowed = ", ".join(p.value for p in Priority)
    raise ValidationError(f"Invalid priority {priority!r}; expected one of: {allowed}")


def create_task(text: str | None, priority: Priority | str | None = None) -> Task:
    """Build a new, not yet completed task.

    Args:
        text: Task description; surrounding whitespace is stripped
        priority: "low", "medium" or "high" (default "medium")

    Returns:
        A Task with a fresh id and the current UTC time as ``created_at``

    Raises:
        ValidationError: If text is missing, not a string, or blank, or if
            priority is not a recognized level
    """
    if not isinstance(text, str):
        raise ValidationError("Task text is required")
    cleaned = text.strip()
    if not cleaned:
        raise ValidationError("Task text cannot be empty")

    return Task(
        id=generate_id(),
        text=cleaned,
        completed=False,
        priority=_resolve_priority(priority),
        created_at=datetime.now(UTC).isoformat(),
    )
