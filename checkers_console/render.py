from __future__ import annotations

from checkers_core.board import Board
from checkers_core.notation import FIRST_COLUMN

from .schemas import ConsoleConfig


def column_header(size: int) -> str:
    letters = " ".join(chr(ord(FIRST_COLUMN) + col) for col in range(size))
    return f"  {letters}"


def render_board(board: Board, config: ConsoleConfig) -> str:
    lines = [column_header(board.boardSize)]
    for row in range(board.boardSize):
        cells = []
        for col in range(board.boardSize):
            if board.is_dark_square(row, col):
                cells.append(config.glyph_for(board.grid[row][col]))
            else:
                cells.append(config.light_symbol)
        lines.append(f"{row + 1} " + " ".join(cells))
    return "\n".join(lines)
