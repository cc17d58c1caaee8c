"""
Configuration management using pydantic-settings.

Loads settings from environment variables and .env file.
Provides type-safe access with validation.
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# ─────────────────────────────────────────────────────────────
# NESTED SETTINGS
# ─────────────────────────────────────────────────────────────


class GameSettings(BaseSettings):
    """Board configuration."""

    model_config = SettingsConfigDict(env_prefix="GAME_")

    width: int = Field(default=6, ge=1, description="Number of columns")
    height: int = Field(default=7, ge=1, description="Number of rows")
    win_length: int = Field(default=4, ge=2, description="Pieces in a row needed to win")


class PlayerSettings(BaseSettings):
    """Player names and colors."""

    model_config = SettingsConfigDict(env_prefix="PLAYERS_")

    player1_name: str = "Player 1"
    player1_color: str = "red"
    player2_name: str = "Player 2"
    player2_color: str = "blue"


class UISettings(BaseSettings):
    """Terminal and dashboard presentation."""

    model_config = SettingsConfigDict(env_prefix="UI_")

    empty_symbol: str = "."
    player_symbols: tuple[str, str] = ("X", "O")
    cell_size_px: int = Field(default=50, ge=10, le=200)

    @field_validator("player_symbols")
    @classmethod
    def _symbols_differ(cls, value: tuple[str, str]) -> tuple[str, str]:
        if value[0] == value[1] or not all(value):
            raise ValueError("player symbols must be two different, non-empty strings")
        return value


# ─────────────────────────────────────────────────────────────
# MAIN SETTINGS
# ─────────────────────────────────────────────────────────────


class Settings(BaseSettings):
    """
    Main application settings.

    Loads from .env file and environment variables.
    Environment variables take precedence over .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore unknown env vars
    )

    game: GameSettings = Field(default_factory=GameSettings)
    players: PlayerSettings = Field(default_factory=PlayerSettings)
    ui: UISettings = Field(default_factory=UISettings)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"


# ─────────────────────────────────────────────────────────────
# SINGLETON ACCESS
# ─────────────────────────────────────────────────────────────

_settings: Settings | None = None


def get_settings() -> Settings:
    """Get application settings (singleton)."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings singleton (for testing)."""
    global _settings
    _settings = None
