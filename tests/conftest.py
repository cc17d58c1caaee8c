"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures shared by the engine, session, display and CLI tests.
"""

from typing import Generator

import pytest

from connectfour.core.bus import EventBus, reset_event_bus
from connectfour.core.config import reset_settings
from connectfour.core.types import DropResult, GameState, Player
from connectfour.game.engine import GameEngine


@pytest.fixture(autouse=True)
def fresh_singletons() -> Generator[None, None, None]:
    """Every test starts with a new global event bus and re-read settings."""
    reset_event_bus()
    reset_settings()
    yield
    reset_event_bus()
    reset_settings()


@pytest.fixture
def bus() -> EventBus:
    return EventBus()


@pytest.fixture
def engine(bus: EventBus) -> GameEngine:
    return GameEngine(bus=bus)


@pytest.fixture
def state(engine: GameEngine) -> GameState:
    """Default 6 wide x 7 high board, red vs blue."""
    return engine.configure(6, 7, "red", "blue")


def force_drop(engine: GameEngine, state: GameState, column: int, player: Player) -> DropResult:
    """Drop a piece for ``player`` regardless of whose turn it is."""
    state.current_player = player
    return engine.drop_piece(state, column)


def column_is_contiguous(state: GameState, column: int) -> bool:
    """Occupied cells in ``column`` form one run starting at the bottom row."""
    occupied = state.board.occupancy()[::-1, column]
    seen_empty = False
    for cell in occupied:
        if not cell:
            seen_empty = True
        elif seen_empty:
            return False
    return True
