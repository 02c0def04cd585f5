"""Output formatters for different formats."""

import json
from typing import Any

import yaml
from rich.markup import escape
from rich.table import Table

from taskflow.utils.id_utils import shorten_id
from taskflow.utils.ui.console import get_console

PRIORITY_STYLES = {
    "high": "bold red",
    "medium": "yellow",
    "low": "dim",
}


def format_output(data: Any, output_format: str = "table") -> None:
    """Format and display output based on format."""
    if output_format == "json":
        print(json.dumps(data, indent=2, default=str, ensure_ascii=False))
    elif output_format == "yaml":
        print(yaml.dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True))
    elif output_format == "quiet":
        format_quiet(data)
    else:
        format_table(data)


def format_table(data: Any) -> None:
    """Format data as a table."""
    if isinstance(data, list):
        format_tasks_table(data)
    elif isinstance(data, dict):
        format_single_item(data)
    else:
        get_console().print(data)


def format_tasks_table(tasks: list[dict]) -> None:
    """Format a list of serialized tasks as a table."""
    if not tasks:
        get_console().print("[yellow]No tasks found[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Done", justify="center")
    table.add_column("Priority")
    table.add_column("Task")

    for task in tasks:
        priority = str(task.get("priority", ""))
        style = PRIORITY_STYLES.get(priority, "")
        table.add_row(
            shorten_id(str(task.get("id", ""))),
            "✓" if task.get("completed") else "✗",
            f"[{style}]{priority}[/{style}]" if style else priority,
            escape(str(task.get("text", ""))),
        )

    get_console().print(table)


def format_single_item(item: dict) -> None:
    """Format a single item as key-value pairs."""
    table = Table(show_header=False, box=None)
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="white")

    for key, value in item.items():
        formatted_key = key.replace("_", " ").title()
        if isinstance(value, bool):
            formatted_value = "✓" if value else "✗"
        elif value is None:
            formatted_value = "-"
        else:
            formatted_value = str(value)
        table.add_row(formatted_key, formatted_value)

    get_console().print(table)


def format_quiet(data: Any) -> None:
    """Format output in quiet mode (IDs only)."""
    if isinstance(data, list):
        for item in data:
            if isinstance(item, dict) and "id" in item:
                print(item["id"])
    elif isinstance(data, dict) and "id" in data:
        print(data["id"])


def format_error(message: str) -> None:
    """Format and display an error message."""
    get_console().print(f"[bold red]Error:[/bold red] {message}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    get_console().print(f"[bold green]Success:[/bold green] {message}")


def format_warning(message: str) -> None:
    """Format and display a warning message."""
    get_console().print(f"[bold yellow]Warning:[/bold yellow] {message}")


def format_info(message: str) -> None:
    """Format and display an info message."""
    get_console().print(f"[bold blue]Info:[/bold blue] {message}")
