"""Decorators for command functions."""

import functools
import time
import traceback
from collections.abc import Callable

import typer

from taskflow.models import AmbiguousTaskIdError, TaskNotFoundError, ValidationError
from taskflow.utils.exit_codes import (
    ERROR_GENERAL,
    ERROR_INVALID_ARGS,
    ERROR_NOT_FOUND,
    get_exit_code_name,
)
from taskflow.utils.logger import get_logger
from taskflow.utils.ui.formatters import format_error


class AppError(Exception):
    """Custom application error with exit code."""

    def __init__(self, message: str, exit_code: int = ERROR_GENERAL):
        super().__init__(message)
        self.exit_code = exit_code


def _exit_code_for(error: Exception) -> int:
    if isinstance(error, AppError):
        return error.exit_code
    if isinstance(error, ValidationError):
        return ERROR_INVALID_ARGS
    if isinstance(error, (TaskNotFoundError, AmbiguousTaskIdError)):
        return ERROR_NOT_FOUND
    return ERROR_GENERAL


def command_wrapper(func: Callable) -> Callable:
    """Wrap a command with lifecycle logging and error-to-exit-code mapping."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger("commands")
        cmd = func.__name__
        start = time.monotonic()
        logger.info("command started: %s", cmd)
        try:
            result = func(*args, **kwargs)
            elapsed = time.monotonic() - start
            logger.info("command completed: %s (%.3fs)", cmd, elapsed)
            return result

        except (AppError, ValidationError, TaskNotFoundError, AmbiguousTaskIdError) as e:
            elapsed = time.monotonic() - start
            code = _exit_code_for(e)
            logger.error(
                "command failed: %s (%.3fs) [%s] - %s",
                cmd,
                elapsed,
                get_exit_code_name(code),
                str(e),
            )
            format_error(str(e))
            raise typer.Exit(code=code) from e

        except typer.Exit:
            # Re-raise Typer's own exits (like --help or explicit Exit(0))
            raise

        except Exception as e:
            elapsed = time.monotonic() - start
            logger.error(
                "command failed: %s (%.3fs) - %s\n%s",
                cmd,
                elapsed,
                str(e),
                traceback.format_exc(),
            )
            format_error(f"An unexpected error occurred: {str(e)}")
            raise typer.Exit(code=ERROR_GENERAL) from e

    return wrapper
