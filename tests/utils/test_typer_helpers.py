"""Unit tests for command suggestions (typer_helpers.py)."""

from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest
import typer
from typer.testing import CliRunner

from taskflow.main import app
from taskflow.utils.typer_helpers import (
    SuggestingGroup,
    command_candidates,
    suggest_commands,
)

COMMANDS = {
    "add": SimpleNamespace(),
    "list": SimpleNamespace(),
    "delete": SimpleNamespace(),
    "config": SimpleNamespace(commands={"view": None, "get": None, "reset": None}),
}


def test_candidates_include_group_subcommands():
    candidates = command_candidates(COMMANDS)

    assert candidates["add"] == "add"
    assert candidates["view"] == "config view"
    assert candidates["config"] == "config"


def test_suggests_top_level_command():
    assert suggest_commands("lst", COMMANDS)[0] == "list"


def test_suggests_grouped_subcommand():
    assert suggest_commands("vew", COMMANDS) == ["config view"]


def test_no_suggestion_for_gibberish():
    assert suggest_commands("zzzzzz", COMMANDS) == []


def _group(commands: dict) -> SuggestingGroup:
    group = SuggestingGroup(name="taskflow")
    group.commands = commands
    return group


def test_valid_command_passes_through():
    ctx = MagicMock()
    ctx.info_name = "taskflow"

    with patch.object(
        SuggestingGroup.__bases__[0],
        "resolve_command",
        return_value=("add", MagicMock(), ["add"]),
    ):
        assert _group({}).resolve_command(ctx, ["add"])[0] == "add"


def test_typo_prints_suggestion_and_exits_with_invalid_args():
    ctx = MagicMock()
    ctx.info_name = "taskflow"
    mock_console = MagicMock()

    with patch.object(
        SuggestingGroup.__bases__[0],
        "resolve_command",
        side_effect=Exception("No such command"),
    ):
        with patch("taskflow.utils.typer_helpers.get_console", return_value=mock_console):
            with patch("taskflow.utils.typer_helpers.format_error") as mock_error:
                with pytest.raises(typer.Exit) as exc_info:
                    _group(COMMANDS).resolve_command(ctx, ["lst"])

    assert exc_info.value.exit_code == 2
    mock_error.assert_called_once_with("Unknown command 'lst'")
    printed = " ".join(str(call) for call in mock_console.print.call_args_list)
    assert "taskflow list" in printed


def test_no_close_match_reraises():
    ctx = MagicMock()
    ctx.info_name = "taskflow"

    with patch.object(
        SuggestingGroup.__bases__[0],
        "resolve_command",
        side_effect=ValueError("No such command"),
    ):
        with pytest.raises(ValueError, match="No such command"):
            _group(COMMANDS).resolve_command(ctx, ["zzzzzz"])


def test_cli_points_at_config_subcommand():
    result = CliRunner().invoke(app, ["vew"])

    assert result.exit_code == 2
    assert "config view" in result.output
