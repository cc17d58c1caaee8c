"""Unit tests for connectfour/session"""

import pytest

from connectfour.core.bus import EventBus
from connectfour.core.config import Settings
from connectfour.core.events import Event, EventType
from connectfour.core.exceptions import InvalidColumn, InvalidConfiguration
from connectfour.core.types import DropOutcome, GameSetup, GameState, Player
from connectfour.game.engine import GameEngine
from connectfour.session import (
    DisplaySurface,
    FixedSetupProvider,
    GameSession,
    InputSource,
    SettingsSetupProvider,
    SetupProvider,
    setup_from_settings,
)

SETUP = GameSetup(width=6, height=7, player1=Player("Ann", "red"), player2=Player("Bo", "blue"))


class ScriptedInput(InputSource):
    """Plays a fixed list of columns, then quits."""

    def __init__(self, columns: list[int]):
        self.columns = list(columns)

    def next_column(self, state: GameState) -> int | None:
        return self.columns.pop(0) if self.columns else None


class RecordingDisplay(DisplaySurface):
    def __init__(self) -> None:
        self.events: list[Event] = []
        self.attached = False

    def attach(self, bus: EventBus) -> None:
        self.attached = True
        bus.subscribe(EventType.PIECE_PLACED, self.events.append)

    def detach(self, bus: EventBus) -> None:
        self.attached = False
        bus.unsubscribe(EventType.PIECE_PLACED, self.events.append)


class CountingProvider(SetupProvider):
    """Returns a new setup every time, with colors that change per call."""

    def __init__(self) -> None:
        self.calls: list[bool] = []

    def get_setup(self, first_start: bool) -> GameSetup | None:
        self.calls.append(first_start)
        n = len(self.calls)
        return GameSetup(6, 7, Player("Player 1", f"red{n}"), Player("Player 2", f"blue{n}"))


def test_start_configures_from_provider(engine: GameEngine) -> None:
    session = GameSession(engine, FixedSetupProvider(SETUP))
    state = session.start()
    assert state.player1 == SETUP.player1
    assert state.player2 == SETUP.player2
    assert session.state is state
    assert session.games_started == 1


def test_start_with_identical_colors_fails(engine: GameEngine) -> None:
    setup = GameSetup(6, 7, Player("Ann", "red"), Player("Bo", "red"))
    session = GameSession(engine, FixedSetupProvider(setup))
    with pytest.raises(InvalidConfiguration):
        session.start()
    assert session.state is None
    assert session.games_started == 0


def test_restart_keeps_players_when_provider_has_nothing_new(engine: GameEngine, bus: EventBus) -> None:
    session = GameSession(engine, FixedSetupProvider(SETUP))
    first = session.start()
    session.drop(0)

    second = session.restart()

    assert second is not first
    assert second.player1 == first.player1
    assert second.board.occupancy().sum() == 0
    assert bus.get_event_log()[-1].type == EventType.GAME_RESET
    assert session.games_started == 2


def test_restart_before_start_starts(engine: GameEngine) -> None:
    provider = CountingProvider()
    session = GameSession(engine, provider)
    session.restart()
    assert provider.calls == [True]


def test_restart_uses_new_setup_when_provider_supplies_one(engine: GameEngine) -> None:
    provider = CountingProvider()
    session = GameSession(engine, provider)
    session.start()
    state = session.restart()
    assert provider.calls == [True, False]
    assert state.player1.color == "red2"


def test_run_plays_until_win(engine: GameEngine) -> None:
    session = GameSession(engine, FixedSetupProvider(SETUP), ScriptedInput([0, 1, 0, 1, 0, 1, 0, 5]))
    session.start()
    result = session.run()
    assert result.outcome == DropOutcome.WIN
    assert result.player == SETUP.player1


def test_run_returns_none_when_input_quits(engine: GameEngine) -> None:
    session = GameSession(engine, FixedSetupProvider(SETUP), ScriptedInput([0, 1]))
    session.start()
    assert session.run() is None
    assert session.state.moves_played == 2


def test_play_turn_surfaces_invalid_column(engine: GameEngine) -> None:
    session = GameSession(engine, FixedSetupProvider(SETUP), ScriptedInput([10]))
    session.start()
    with pytest.raises(InvalidColumn):
        session.play_turn()


def test_play_turn_requires_started_game(engine: GameEngine) -> None:
    session = GameSession(engine, FixedSetupProvider(SETUP), ScriptedInput([0]))
    with pytest.raises(RuntimeError):
        session.play_turn()


def test_display_is_attached_and_detached(engine: GameEngine) -> None:
    display = RecordingDisplay()
    session = GameSession(engine, FixedSetupProvider(SETUP), display=display)
    assert display.attached

    session.start()
    session.drop(3)
    assert [e.data["column"] for e in display.events] == [3]

    session.close()
    session.drop(3)
    assert not display.attached
    assert len(display.events) == 1


def test_settings_provider_builds_setup_from_settings() -> None:
    settings = Settings()
    setup = setup_from_settings(settings)
    assert (setup.width, setup.height) == (6, 7)
    assert setup.player1 == Player("Player 1", "red")
    assert setup.player2 == Player("Player 2", "blue")


def test_settings_provider_keeps_players_on_restart() -> None:
    settings = Settings()
    provider = SettingsSetupProvider(settings)
    assert provider.get_setup(first_start=True) is not None
    assert provider.get_setup(first_start=False) is None
