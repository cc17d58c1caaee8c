"""Errors raised by the game engine.

Every error is raised before any state is touched, so the caller can report it and carry on.
"""


class GameError(Exception):
    """Base class for rule violations."""


class InvalidConfiguration(GameError):
    """Setup rejected: identical colors, non-positive dimensions, or nothing to reset from."""


class InvalidColumn(GameError):
    """Column index outside the board."""

    def __init__(self, column: int, width: int):
        self.column = column
        self.width = width
        super().__init__(f"Invalid column {column}: expected 0-{width - 1}")


class GameAlreadyFinished(GameError):
    """Move attempted after a win or draw."""
