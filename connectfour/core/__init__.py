"""Core infrastructure for the Connect Four game."""

from .bus import EventBus, get_event_bus, reset_event_bus
from .config import (
    GameSettings,
    PlayerSettings,
    Settings,
    UISettings,
    get_settings,
    reset_settings,
)
from .events import Event, EventType
from .exceptions import (
    GameAlreadyFinished,
    GameError,
    InvalidColumn,
    InvalidConfiguration,
)
from .types import (
    Board,
    DropOutcome,
    DropResult,
    GameSetup,
    GameState,
    Player,
    Position,
)


__all__ = [
    # Config
    "get_settings",
    "reset_settings",
    "Settings",
    "GameSettings",
    "PlayerSettings",
    "UISettings",
    # Types
    "Player",
    "Position",
    "Board",
    "GameState",
    "GameSetup",
    "DropOutcome",
    "DropResult",
    # Errors
    "GameError",
    "InvalidConfiguration",
    "InvalidColumn",
    "GameAlreadyFinished",
    # Events
    "Event",
    "EventType",
    "EventBus",
    "get_event_bus",
    "reset_event_bus",
]
