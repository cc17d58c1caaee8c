"""Setup providers that do not need a user."""

from ..core.config import Settings, get_settings
from ..core.types import GameSetup, Player
from .interface import SetupProvider


def setup_from_settings(settings: Settings) -> GameSetup:
    """Build a GameSetup from configured board size and players."""
    return GameSetup(
        width=settings.game.width,
        height=settings.game.height,
        player1=Player(name=settings.players.player1_name, color=settings.players.player1_color),
        player2=Player(name=settings.players.player2_name, color=settings.players.player2_color),
    )


class SettingsSetupProvider(SetupProvider):
    """Answers from application settings; restarts keep the same players."""

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()

    def get_setup(self, first_start: bool) -> GameSetup | None:
        if not first_start:
            return None
        return setup_from_settings(self.settings)


class FixedSetupProvider(SetupProvider):
    """Always answers with the same setup on first start."""

    def __init__(self, setup: GameSetup):
        self.setup = setup

    def get_setup(self, first_start: bool) -> GameSetup | None:
        return self.setup if first_start else None
