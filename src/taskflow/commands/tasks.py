"""Task management commands.

Each command loads the stored list once, applies a single list operation,
and writes the result back when the list changed.
"""

from pathlib import Path

import typer
from rich.markup import escape

from taskflow.models import FilterMode, Priority
from taskflow.services import (
    add_task,
    clear_completed,
    count_tasks,
    create_task,
    delete_task,
    filter_tasks,
    find_task,
    get_task_persistence,
    sort_by_priority,
    toggle_task,
)
from taskflow.services.config_service import get_config_service
from taskflow.utils.id_utils import resolve_task_id, shorten_id
from taskflow.utils.ui.formatters import (
    format_info,
    format_output,
    format_success,
    format_warning,
)

from .decorators import command_wrapper

app = typer.Typer(help="Task management commands")

_data_file: Path | None = None


def set_data_file(path: Path | None) -> None:
    """Override the store file for the commands that follow."""
    global _data_file
    _data_file = path


def _default_output() -> str:
    return get_config_service().config.output.format


@app.command("add")
@command_wrapper
def add(
    text: str = typer.Argument(..., help="Task description"),
    priority: Priority = typer.Option(
        Priority.MEDIUM, "--priority", "-p", help="Priority level"
    ),
    output: str | None = typer.Option(None, "--output", "-o", help="Output format"),
) -> None:
    """Add a new task."""
    persistence = get_task_persistence(_data_file)
    task = create_task(text, priority)
    persistence.save_tasks(add_task(persistence.load_tasks(), task))

    output = output or _default_output()
    if output == "table":
        format_success(f"Added [cyan]{shorten_id(task.id)}[/cyan] {escape(task.text)}")
    else:
        format_output(task.model_dump(mode="json", by_alias=True), output)


@app.command("list")
@command_wrapper
def list_tasks(
    mode: FilterMode = typer.Option(
        FilterMode.ALL, "--filter", "-f", help="Which tasks to show"
    ),
    by_priority: bool = typer.Option(
        False, "--sort-priority", help="Order by priority (high first)"
    ),
    output: str | None = typer.Option(None, "--output", "-o", help="Output format"),
) -> None:
    """List tasks."""
    tasks = filter_tasks(get_task_persistence(_data_file).load_tasks(), mode)
    if by_priority:
        tasks = sort_by_priority(tasks)

    format_output(
        [task.model_dump(mode="json", by_alias=True) for task in tasks],
        output or _default_output(),
    )


@app.command("toggle")
@command_wrapper
def toggle(
    task_id: str = typer.Argument(..., help="Task ID or unique prefix"),
) -> None:
    """Mark a task done, or back to active if it is already done."""
    persistence = get_task_persistence(_data_file)
    tasks = persistence.load_tasks()
    resolved_id = resolve_task_id(tasks, task_id)

    updated = toggle_task(tasks, resolved_id)
    persistence.save_tasks(updated)

    task = find_task(updated, resolved_id)
    state = "completed" if task.completed else "active"
    format_success(f"{escape(task.text)} is now {state}")


@app.command("delete")
@command_wrapper
def delete(
    task_id: str = typer.Argument(..., help="Task ID or unique prefix"),
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation"),
) -> None:
    """Delete a task."""
    persistence = get_task_persistence(_data_file)
    tasks = persistence.load_tasks()
    resolved_id = resolve_task_id(tasks, task_id)
    task = find_task(tasks, resolved_id)

    if not force:
        confirm = typer.confirm(f"Delete task '{task.text}'?")
        if not confirm:
            format_info("Cancelled")
            raise typer.Exit(0)

    persistence.save_tasks(delete_task(tasks, resolved_id))
    format_success(f"Deleted: {escape(task.text)}")


@app.command("clear")
@command_wrapper
def clear() -> None:
    """Remove every completed task."""
    persistence = get_task_persistence(_data_file)
    tasks = persistence.load_tasks()
    remaining = clear_completed(tasks)

    removed = len(tasks) - len(remaining)
    if not removed:
        format_warning("No completed tasks to clear")
        return

    persistence.save_tasks(remaining)
    format_success(f"Cleared {removed} completed task(s)")


@app.command("stats")
@command_wrapper
def stats(
    output: str | None = typer.Option(None, "--output", "-o", help="Output format"),
) -> None:
    """Show total, active and completed counts."""
    counts = count_tasks(get_task_persistence(_data_file).load_tasks())
    format_output(counts.model_dump(), output or _default_output())
