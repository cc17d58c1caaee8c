"""Connect Four rules for a board of any size."""


from ..core.exceptions import InvalidColumn
from ..core.types import Board, Player, Position


# Forward directions only. Scanning every cell as a line start in these four
# covers every line exactly once; the reverse directions would double count.
DIRECTIONS: tuple[tuple[int, int], ...] = (
    (0, 1),   # Horizontal (right)
    (1, 0),   # Vertical (down)
    (1, 1),   # Diagonal down-right
    (1, -1),  # Diagonal down-left
)


class Connect4Rules:
    """Connect Four rules.

    Win condition: ``win_length`` in a row (horizontal, vertical, or diagonal)
    """

    def __init__(self, win_length: int = 4):
        """Initialize rules.

        Args:
            win_length: Number in a row to win (4 default)
        """
        self.win_length = win_length

    def validate_column(self, board: Board, column: int) -> None:
        """Raise InvalidColumn unless ``column`` addresses a board column."""
        if not 0 <= column < board.width:
            raise InvalidColumn(column, board.width)

    def get_landing_row(self, board: Board, column: int) -> int | None:
        """Get the row where a piece would land in given column.

        Args:
            board: Current board
            column: Column to drop piece in

        Returns:
            Row index where piece lands, or None if column is full
        """
        self.validate_column(board, column)
        return board.landing_row(column)

    def find_winning_line(self, board: Board, player: Player) -> list[Position]:
        """Find a line of ``win_length`` cells all held by ``player``.

        Every cell is tried as the start of a line in each forward direction.
        The first complete line found is returned.

        Args:
            board: Current board
            player: Player whose pieces are examined

        Returns:
            Positions of the winning line, or empty list if there is none
        """
        for row in range(board.height):
            for col in range(board.width):
                for dr, dc in DIRECTIONS:
                    positions = self._check_direction(board, row, col, dr, dc, player)
                    if positions:
                        return positions

        return []

    def check_win(self, board: Board, player: Player) -> bool:
        return bool(self.find_winning_line(board, player))

    def _check_direction(
        self,
        board: Board,
        start_row: int,
        start_col: int,
        dr: int,
        dc: int,
        player: Player
    ) -> list[Position]:
        """Check for win_length in a row in given direction.

        Returns:
            List of winning positions, or empty list if no win
        """
        positions = []

        for i in range(self.win_length):
            row = start_row + i * dr
            col = start_col + i * dc

            if not board.in_bounds(row, col):
                return []

            if board.grid[row][col] != player:
                return []

            positions.append(Position(row=row, col=col))

        return positions

    def is_draw(self, board: Board) -> bool:
        """Board completely filled. Only meaningful once a win has been ruled out."""
        return board.is_full()
