"""Tests for connectfour/cli/main.py using typer's CliRunner."""

import json

from typer.testing import CliRunner

from connectfour.cli.main import app, apply_overrides
from connectfour.core.config import Settings

runner = CliRunner()

# Player 1 stacks column 0, player 2 stacks column 1.
VERTICAL_WIN = "0\n1\n0\n1\n0\n1\n0\n"


def test_config_prints_settings_json() -> None:
    result = runner.invoke(app, ["config"])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["game"]["width"] == 6
    assert data["players"]["player1_color"] == "red"


def test_play_until_win_then_stop() -> None:
    result = runner.invoke(app, ["play", "--no-prompt"], input=VERTICAL_WIN + "n\n")
    assert result.exit_code == 0, result.output
    assert "Player 1 won!" in result.output
    assert "Restart Game?" in result.output


def test_play_restart_keeps_colors_and_quit() -> None:
    result = runner.invoke(app, ["play", "--no-prompt"], input=VERTICAL_WIN + "y\nq\n")
    assert result.exit_code == 0, result.output
    assert result.output.count("Player 1 (red) vs Player 2 (blue)") == 2
    assert "Game quit." in result.output


def test_play_prompts_for_colors_first() -> None:
    result = runner.invoke(app, ["play"], input="green\nyellow\nq\n")
    assert result.exit_code == 0, result.output
    assert "Player 1 (green) vs Player 2 (yellow)" in result.output


def test_play_asks_again_after_identical_colors() -> None:
    result = runner.invoke(app, ["play"], input="red\nred\nred\nblue\nq\n")
    assert result.exit_code == 0, result.output
    assert "different colors" in result.output
    assert "Player 1 (red) vs Player 2 (blue)" in result.output


def test_play_identical_colors_without_prompt_fails() -> None:
    result = runner.invoke(
        app, ["play", "--no-prompt", "--player1-color", "red", "--player2-color", "red"]
    )
    assert result.exit_code == 1
    assert "different colors" in result.output


def test_play_reports_invalid_column_and_continues() -> None:
    result = runner.invoke(app, ["play", "--no-prompt"], input="10\n0\nq\n")
    assert result.exit_code == 0, result.output
    assert "Invalid column 10" in result.output
    assert "Player 2 to move" in result.output


def test_play_ignores_full_column() -> None:
    # 3 rows: column 0 fills after three drops, the fourth is ignored.
    result = runner.invoke(
        app, ["play", "--no-prompt", "--width", "4", "--height", "3"], input="0\n0\n0\n0\nq\n"
    )
    assert result.exit_code == 0, result.output
    assert "Game quit." in result.output
    # Initial board plus one redraw per placed piece: the fourth drop placed nothing.
    assert result.output.count("  0  1  2  3") == 4
    last_grid = [line for line in result.output.splitlines() if line.startswith("|")][-3:]
    assert [row.split("|")[1].split()[0] for row in last_grid] == ["X", "O", "X"]
    moves = [line for line in result.output.splitlines() if line.endswith("to move")]
    assert moves[-1] == "Player 2 to move"
    # Player 2 is asked again after the ignored drop.
    assert result.output.count("Player 2, column") == 3


def test_play_custom_board_size() -> None:
    result = runner.invoke(app, ["play", "--no-prompt", "--width", "7", "--height", "6"], input="q\n")
    assert result.exit_code == 0, result.output
    assert "  0  1  2  3  4  5  6" in result.output


def test_apply_overrides_leaves_unset_values() -> None:
    settings = Settings()
    updated = apply_overrides(settings, width=8, player2_color="green")
    assert updated.game.width == 8
    assert updated.game.height == settings.game.height
    assert updated.players.player1_color == "red"
    assert updated.players.player2_color == "green"
    assert settings.game.width == 6
