"""Console utilities for TaskFlow."""

import os
from functools import lru_cache

from rich.console import Console


@lru_cache(maxsize=1)
def get_console() -> Console:
    """Get the shared Rich Console used for all terminal output."""
    return Console()


def set_color_enabled(enabled: bool) -> None:
    """Apply the ``output.color`` setting; NO_COLOR in the environment always wins."""
    get_console().no_color = not enabled or bool(os.environ.get("NO_COLOR"))
