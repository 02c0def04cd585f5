"""Configuration management commands."""

import typer
from pydantic import ValidationError as PydanticValidationError

from taskflow.services.config_service import get_config_service
from taskflow.utils.exit_codes import ERROR_INVALID_ARGS, ERROR_NOT_FOUND
from taskflow.utils.ui.console import get_console
from taskflow.utils.ui.formatters import format_output, format_success

from .decorators import AppError, command_wrapper

app = typer.Typer(help="Configuration management commands")

@app.command("view")
@command_wrapper
def view_config(
    output: str = typer.Option("table", "--output", "-o", help="Output format"),
) -> None:
    """View current configuration."""
    config_service = get_config_service()
    config_dict = config_service.config.model_dump()
    config_dict["data_file"] = str(config_service.get_data_file())
    config_dict["config_file"] = str(config_service.config_path)
    format_output(config_dict, output)


@app.command("get")
@command_wrapper
def get_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., storage.key)"),
) -> None:
    """Get a configuration value."""
    value = get_config_service().get(key)
    if value is None:
        raise AppError(f"Configuration key '{key}' not found", ERROR_NOT_FOUND)
    get_console().print(value)


@app.command("set")
@command_wrapper
def set_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., output.format)"),
    value: str = typer.Argument(..., help="Configuration value"),
) -> None:
    """Set a configuration value."""
    parsed_value: str | bool = value
    if value.lower() in ("true", "false"):
        parsed_value = value.lower() == "true"

    try:
        get_config_service().set(key, parsed_value)
    except PydanticValidationError as e:
        raise AppError(f"Invalid value for '{key}': {value}", ERROR_INVALID_ARGS) from e
    format_success(f"Configuration '{key}' set to '{parsed_value}'")


@app.command("reset")
@command_wrapper
def reset_config(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Reset configuration to defaults."""
    if not yes and not typer.confirm("Reset configuration to defaults?"):
        raise typer.Exit(0)
    get_config_service().reset_config()
    format_success("Configuration reset to defaults")
