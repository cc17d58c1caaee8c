"""Abstract interfaces for the engine's collaborators."""

from abc import ABC, abstractmethod

from ..core.bus import EventBus
from ..core.types import GameSetup, GameState


class SetupProvider(ABC):
    """Supplies board dimensions and the two players.

    Implementations decide whether a restart asks for colors again.
    """

    @abstractmethod
    def get_setup(self, first_start: bool) -> GameSetup | None:
        """Produce a setup for the next game.

        Args:
            first_start: True before the first game of the session

        Returns:
            New setup, or None to keep the previous players (restart only)
        """
        pass


class InputSource(ABC):
    """Reports the column a player chose."""

    @abstractmethod
    def next_column(self, state: GameState) -> int | None:
        """Wait for the next column choice.

        Args:
            state: Current game state

        Returns:
            Column index, or None if the player quit
        """
        pass


class DisplaySurface(ABC):
    """Turns engine events into visible updates."""

    @abstractmethod
    def attach(self, bus: EventBus) -> None:
        """Subscribe to the events this surface renders."""
        pass

    @abstractmethod
    def detach(self, bus: EventBus) -> None:
        """Stop receiving events."""
        pass
