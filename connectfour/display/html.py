"""HTML board markup for the dashboard."""

from html import escape

from ..core.types import GameState


def board_html(state: GameState, cell_size_px: int = 50) -> str:
    """Render the board as an HTML table.

    Each piece is a circle filled with its player's color; cells of the
    winning line get a highlighted background.
    """
    winning = {p.as_tuple() for p in state.winning_positions}
    piece_px = int(cell_size_px * 0.8)

    rows = []
    for row_idx, row in enumerate(state.board.grid):
        cells = []
        for col_idx, cell in enumerate(row):
            background = "#90EE90" if (row_idx, col_idx) in winning else "#f0f0f0"
            content = ""
            if cell is not None:
                content = (
                    f"<div class='piece' title='{escape(cell.name)}' style='"
                    f"width:{piece_px}px;height:{piece_px}px;border-radius:50%;margin:auto;"
                    f"background-color:{escape(cell.color)};'></div>"
                )
            cells.append(
                f"<td id='{row_idx}-{col_idx}' style='width:{cell_size_px}px;height:{cell_size_px}px;"
                f"background:{background};border:1px solid #999;'>{content}</td>"
            )
        rows.append("<tr>" + "".join(cells) + "</tr>")

    return "<table id='board' style='border-collapse:collapse;margin:auto;'>" + "".join(rows) + "</table>"
