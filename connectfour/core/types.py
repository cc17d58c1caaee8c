"""
Shared data types for the Connect Four game.

These types are the contracts between modules.
The engine, session and presentation layers all communicate using these structures.
"""

from dataclasses import dataclass, field
from enum import Enum, auto

import numpy as np


# ─────────────────────────────────────────────────────────────
# PLAYER & POSITION
# ─────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Player:
    """A participant: display name plus the color token that identifies their pieces."""

    name: str
    color: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Position:
    """Grid position (0-indexed)."""

    row: int  # 0 = top
    col: int  # 0 = left

    def as_tuple(self) -> tuple[int, int]:
        return (self.row, self.col)


# ─────────────────────────────────────────────────────────────
# BOARD REPRESENTATION
# ─────────────────────────────────────────────────────────────


@dataclass
class Board:
    """
    Rectangular grid of cells.

    The grid is a 2D list where:
    - grid[0] is the top row
    - grid[height - 1] is the bottom row (first pieces land here)
    - grid[row][col] holds the occupying Player, or None when empty
    """

    width: int
    height: int
    grid: list[list[Player | None]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.grid:
            self.grid = [[None] * self.width for _ in range(self.height)]

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def cell(self, row: int, col: int) -> Player | None:
        return self.grid[row][col]

    def landing_row(self, column: int) -> int | None:
        """Lowest empty row in ``column``, or None if the column is full."""
        for row in range(self.height - 1, -1, -1):
            if self.grid[row][column] is None:
                return row
        return None

    def occupancy(self) -> np.ndarray:
        """Boolean mask of occupied cells, shape (height, width)."""
        return np.array(
            [[cell is not None for cell in row] for row in self.grid], dtype=bool
        ).reshape(self.height, self.width)

    def is_full(self) -> bool:
        return bool(self.occupancy().all())

    def column_heights(self) -> list[int]:
        """Number of pieces stacked in each column."""
        return [int(n) for n in self.occupancy().sum(axis=0)]

    def copy(self) -> "Board":
        return Board(
            width=self.width,
            height=self.height,
            grid=[[cell for cell in row] for row in self.grid],
        )


# ─────────────────────────────────────────────────────────────
# GAME STATE & RESULTS
# ─────────────────────────────────────────────────────────────


@dataclass
class GameState:
    """Everything one game needs: board, both players, whose turn it is, and whether it is over."""

    board: Board
    player1: Player
    player2: Player
    current_player: Player
    finished: bool = False
    winner: Player | None = None
    winning_positions: list[Position] = field(default_factory=list)
    moves_played: int = 0

    @property
    def players(self) -> tuple[Player, Player]:
        return (self.player1, self.player2)

    def other_player(self, player: Player) -> Player:
        return self.player2 if player == self.player1 else self.player1

    def legal_columns(self) -> list[int]:
        """Columns that can still take a piece (empty once the game is over)."""
        if self.finished:
            return []
        return [col for col in range(self.board.width) if self.board.grid[0][col] is None]


class DropOutcome(Enum):
    """What happened after a drop request."""

    CONTINUE = auto()  # Piece placed, turn passes
    WIN = auto()  # Piece placed, mover has four in a row
    DRAW = auto()  # Piece placed, board full with no line
    COLUMN_FULL = auto()  # Nothing placed, column has no room


@dataclass
class DropResult:
    """Structured answer to a drop request, consumed by the presentation layer."""

    outcome: DropOutcome
    column: int
    player: Player
    position: Position | None = None  # None when the column was full
    next_player: Player | None = None  # Set for CONTINUE
    winning_positions: list[Position] = field(default_factory=list)

    @property
    def placed(self) -> bool:
        return self.position is not None

    @property
    def is_game_over(self) -> bool:
        return self.outcome in (DropOutcome.WIN, DropOutcome.DRAW)

    @property
    def message(self) -> str:
        """End-of-game announcement, empty while play continues."""
        if self.outcome == DropOutcome.WIN:
            return f"{self.player.name} won!"
        if self.outcome == DropOutcome.DRAW:
            return "Tie!"
        return ""


@dataclass(frozen=True)
class GameSetup:
    """What a configuration provider hands to the engine."""

    width: int
    height: int
    player1: Player
    player2: Player
