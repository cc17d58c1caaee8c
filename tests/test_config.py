"""Unit tests for connectfour/core/config.py"""

import pytest
from pydantic import ValidationError

from connectfour.core.config import GameSettings, Settings, get_settings, reset_settings


def test_defaults_match_classic_setup() -> None:
    settings = Settings()
    assert (settings.game.width, settings.game.height) == (6, 7)
    assert settings.game.win_length == 4
    assert settings.players.player1_name == "Player 1"
    assert settings.players.player1_color == "red"
    assert settings.players.player2_name == "Player 2"
    assert settings.players.player2_color == "blue"
    assert settings.log_level == "WARNING"


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GAME_WIDTH", "7")
    monkeypatch.setenv("GAME_HEIGHT", "6")
    monkeypatch.setenv("PLAYERS_PLAYER2_COLOR", "yellow")
    monkeypatch.setenv("UI_EMPTY_SYMBOL", "o")

    settings = Settings()

    assert (settings.game.width, settings.game.height) == (7, 6)
    assert settings.players.player2_color == "yellow"
    assert settings.ui.empty_symbol == "o"


def test_dimensions_must_be_positive() -> None:
    with pytest.raises(ValidationError):
        GameSettings(width=0)


def test_get_settings_is_cached_until_reset(monkeypatch: pytest.MonkeyPatch) -> None:
    first = get_settings()
    assert get_settings() is first

    monkeypatch.setenv("GAME_WIDTH", "9")
    assert get_settings().game.width == first.game.width

    reset_settings()
    assert get_settings().game.width == 9
