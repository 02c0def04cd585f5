"""Main entry point for the TaskFlow CLI."""

from pathlib import Path

import typer

from taskflow import __version__
from taskflow.commands import config, tasks
from taskflow.services.config_service import get_config_service
from taskflow.utils.typer_helpers import SuggestingGroup
from taskflow.utils.ui.console import get_console, set_color_enabled

app = typer.Typer(
    name="taskflow",
    cls=SuggestingGroup,
    help="A small task list for the terminal",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    data_file: Path | None = typer.Option(
        None,
        "--data-file",
        envvar="TASKFLOW_DATA_FILE",
        help="JSON file holding the task list (overrides configuration)",
    ),
) -> None:
    """Manage a prioritized to-do list stored on this machine."""
    tasks.set_data_file(data_file)
    set_color_enabled(get_config_service().config.output.color)


# Task commands live at the top level: taskflow add/list/toggle/...
app.add_typer(tasks.app)
app.add_typer(config.app, name="config", help="Configuration management")


@app.command()
def version() -> None:
    """Show version information."""
    get_console().print(f"[bold]TaskFlow[/bold] version [cyan]{__version__}[/cyan]")


def main() -> None:
    """Run the CLI."""
    app()


if __name__ == "__main__":
    main()
