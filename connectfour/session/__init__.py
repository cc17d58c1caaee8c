"""Game session and the engine's collaborator interfaces."""

from .interface import DisplaySurface, InputSource, SetupProvider
from .providers import FixedSetupProvider, SettingsSetupProvider, setup_from_settings
from .session import GameSession


__all__ = [
    "DisplaySurface",
    "FixedSetupProvider",
    "GameSession",
    "InputSource",
    "SettingsSetupProvider",
    "SetupProvider",
    "setup_from_settings",
]
