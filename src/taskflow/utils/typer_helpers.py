"""Typer helper utilities."""

from difflib import get_close_matches

import typer
from typer.core import TyperGroup

from taskflow.utils.exit_codes import ERROR_INVALID_ARGS
from taskflow.utils.ui.console import get_console
from taskflow.utils.ui.formatters import format_error


def command_candidates(commands: dict) -> dict[str, str]:
    """Map every typeable command name to the full path that runs it.

    Top-level commands map to themselves. A subcommand of a group is keyed
    by its own name ("view") and maps to the grouped path ("config view"),
    so a user who forgets the group still gets a hint.
    """
    candidates: dict[str, str] = {}
    for name, command in commands.items():
        candidates.setdefault(name, name)
        for sub_name in getattr(command, "commands", None) or {}:
            candidates.setdefault(sub_name, f"{name} {sub_name}")
    return candidates


def suggest_commands(attempted: str, commands: dict, limit: int = 3) -> list[str]:
    """Return up to *limit* command paths close to *attempted*, best first."""
    candidates = command_candidates(commands)
    matches = get_close_matches(attempted, list(candidates), n=limit, cutoff=0.6)
    suggestions: list[str] = []
    for match in matches:
        path = candidates[match]
        if path not in suggestions:
            suggestions.append(path)
    return suggestions


class SuggestingGroup(TyperGroup):
    """Root command group that answers unknown commands with close matches.

    Task commands sit at the top level and settings live under ``config``,
    so suggestions cover both: ``taskflow veiw`` points at ``config view``.
    """

    def resolve_command(self, ctx, args):
        try:
            return super().resolve_command(ctx, args)
        except Exception as e:
            if not args:
                raise
            attempted = args[0]
            suggestions = suggest_commands(attempted, self.commands)
            if not suggestions:
                raise

            prog = ctx.info_name or "taskflow"
            console = get_console()
            format_error(f"Unknown command '{attempted}'")
            console.print()
            console.print("[yellow]Did you mean:[/yellow]")
            for suggestion in suggestions:
                console.print(f"    {prog} {suggestion}")
            console.print(f"\nRun '{prog} --help' to see every command.")
            raise typer.Exit(ERROR_INVALID_ARGS) from e
