"""Game session: ties a setup provider, the engine, an input source and a display together."""

import logging

from ..core.bus import EventBus
from ..core.exceptions import InvalidConfiguration
from ..core.types import DropResult, GameSetup, GameState
from ..game.engine import GameEngine
from .interface import DisplaySurface, InputSource, SetupProvider


logger = logging.getLogger(__name__)


class GameSession:
    """Runs consecutive games for one set of collaborators.

    The first start always asks the setup provider for players. A restart
    asks again, but keeps the previous players when the provider has
    nothing new to offer.
    """

    def __init__(
        self,
        engine: GameEngine,
        setup_provider: SetupProvider,
        input_source: InputSource | None = None,
        display: DisplaySurface | None = None,
    ):
        self.engine = engine
        self.setup_provider = setup_provider
        self.input_source = input_source
        self.display = display
        self.games_started = 0
        self._state: GameState | None = None

        if self.display is not None:
            self.display.attach(self.bus)

    @property
    def bus(self) -> EventBus:
        return self.engine.bus

    @property
    def state(self) -> GameState | None:
        return self._state

    def start(self) -> GameState:
        """Configure the first game from the setup provider.

        Raises:
            InvalidConfiguration: The provider's setup was rejected
        """
        setup = self.setup_provider.get_setup(first_start=True)
        if setup is None:
            raise InvalidConfiguration("Setup provider gave no setup for the first game")
        return self._configure(setup)

    def restart(self) -> GameState:
        """Start another game, keeping the players unless the provider offers new ones."""
        if self.games_started == 0:
            return self.start()

        setup = self.setup_provider.get_setup(first_start=False)
        if setup is not None:
            return self._configure(setup)

        self._state = self.engine.reset()
        self.games_started += 1
        return self._state

    def _configure(self, setup: GameSetup) -> GameState:
        self._state = self.engine.configure(
            setup.width,
            setup.height,
            setup.player1.color,
            setup.player2.color,
            player1_name=setup.player1.name,
            player2_name=setup.player2.name,
        )
        self.games_started += 1
        return self._state

    def drop(self, column: int) -> DropResult:
        """Play ``column`` for the current player of the active game."""
        if self._state is None:
            raise RuntimeError("No game in progress. Call start() first.")
        return self.engine.drop_piece(self._state, column)

    def play_turn(self) -> DropResult | None:
        """Read one column from the input source and play it.

        Returns:
            The drop result, or None if the player quit
        """
        if self.input_source is None:
            raise RuntimeError("Session has no input source")
        if self._state is None:
            raise RuntimeError("No game in progress. Call start() first.")

        column = self.input_source.next_column(self._state)
        if column is None:
            logger.info("Input source quit")
            return None
        return self.drop(column)

    def run(self) -> DropResult | None:
        """Play turns until the game ends or the player quits.

        Returns:
            The final drop result, or None if the player quit first
        """
        while True:
            result = self.play_turn()
            if result is None or result.is_game_over:
                return result

    def close(self) -> None:
        if self.display is not None:
            self.display.detach(self.bus)
