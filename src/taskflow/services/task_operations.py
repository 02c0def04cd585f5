"""Task list operations.

Every function takes a sequence of tasks and returns a new list; the input
sequence and the (frozen) Task objects in it are never modified. The one
exception is ``filter_tasks`` for the "all" view, which hands back the
input itself.
"""

from __future__ import annotations

from collections.abc import Sequence

from taskflow.models import FilterMode, Task, TaskCounts


def add_task(tasks: Sequence[Task], task: Task) -> list[Task]:
    """Return a new list with *task* appended."""
    return [*tasks, task]


def delete_task(tasks: Sequence[Task], task_id: str) -> list[Task]:
    """Return a new list without the task whose id is *task_id*."""
    return [task for task in tasks if task.id != task_id]


def toggle_task(tasks: Sequence[Task], task_id: str) -> list[Task]:
    """Return a new list with the completed flag of *task_id* flipped."""
    return [
        task.model_copy(update={"completed": not task.completed})
        if task.id == task_id
        else task
        for task in tasks
    ]


def filter_tasks(tasks: Sequence[Task], mode: str) -> Sequence[Task]:
    """Return the tasks visible under *mode*.

    "active" and "completed" build a new list. Any other mode, including
    "all", returns *tasks* unchanged (the same object).
    """
    if mode == FilterMode.ACTIVE:
        return [task for task in tasks if not task.completed]
    if mode == FilterMode.COMPLETED:
        return [task for task in tasks if task.completed]
    return tasks


def clear_completed(tasks: Sequence[Task]) -> list[Task]:
    """Return a new list holding only the tasks that are not completed."""
    return [task for task in tasks if not task.completed]


def count_tasks(tasks: Sequence[Task]) -> TaskCounts:
    """Count total, active and completed tasks."""
    total = len(tasks)
    completed = sum(1 for task in tasks if task.completed)
    return TaskCounts(total=total, active=total - completed, completed=completed)


def sort_by_priority(tasks: Sequence[Task]) -> list[Task]:
    """Return a new list ordered high > medium > low.

    ``sorted`` is stable, so tasks sharing a priority keep their order.
    """
    return sorted(tasks, key=lambda task: -task.priority.rank)


def find_task(tasks: Sequence[Task], task_id: str) -> Task | None:
    """Return the task with id *task_id*, or None."""
    for task in tasks:
        if task.id == task_id:
            return task
    return None
