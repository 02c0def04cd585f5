"""Task data models."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class Priority(StrEnum):
    """Priority level of a task."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def rank(self) -> int:
        """Numeric rank, higher means more urgent."""
        return _PRIORITY_RANK[self]


_PRIORITY_RANK = {
    Priority.LOW: 1,
    Priority.MEDIUM: 2,
    Priority.HIGH: 3,
}


class FilterMode(StrEnum):
    """Named views over a task list."""

    ALL = "all"
    ACTIVE = "active"
    COMPLETED = "completed"


class Task(BaseModel):
    """Task model representing a single to-do item.

    Instances are frozen; state changes produce a new Task via
    ``model_copy(update=...)``.

    Attributes:
        id: Unique identifier for the task
        text: Trimmed, non-empty description
        completed: Whether the task is done
        priority: Priority level (low, medium, high)
        created_at: ISO-8601 creation timestamp, stored as ``createdAt``
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    text: str
    completed: bool = False
    priority: Priority = Priority.MEDIUM
    created_at: str = Field(alias="createdAt")


class TaskCounts(BaseModel):
    """Summary counts for a task list."""

    total: int = 0
    active: int = 0
    completed: int = 0
