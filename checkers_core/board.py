from __future__ import annotations

import logging
from typing import Optional

from .move import Coordinate, Move
from .pieces import Cell

logger = logging.getLogger(__name__)

BOARD_SIZE = 8
STARTING_ROWS = 3

BoardState = tuple[tuple[str, ...], ...]


class Board:
    def __init__(self) -> None:
        self.boardSize = BOARD_SIZE
        self.grid: list[list[Cell]] = [
            [Cell.EMPTY for _ in range(BOARD_SIZE)] for _ in range(BOARD_SIZE)
        ]
        self.initialize()

    @classmethod
    def empty(cls) -> "Board":
        board = cls.__new__(cls)
        board.boardSize = BOARD_SIZE
        board.grid = [[Cell.EMPTY for _ in range(BOARD_SIZE)] for _ in range(BOARD_SIZE)]
        return board

    def initialize(self) -> None:
        for row in range(self.boardSize):
            for col in range(self.boardSize):
                self.grid[row][col] = Cell.EMPTY

        for row in range(self.boardSize):
            for col in range(self.boardSize):
                if not self.is_dark_square(row, col):
                    continue
                if row < STARTING_ROWS:
                    self.grid[row][col] = Cell.PLAYER_A
                elif row >= self.boardSize - STARTING_ROWS:
                    self.grid[row][col] = Cell.PLAYER_B

    # queries ------------------------------------------------------------

    def getPiece(self, row: int, col: int) -> Optional[Cell]:
        if self.is_within_bounds(row, col):
            return self.grid[row][col]
        return None

    def count_pieces(self) -> dict[Cell, int]:
        counts = {Cell.PLAYER_A: 0, Cell.PLAYER_B: 0}
        for row in self.grid:
            for cell in row:
                if cell in counts:
                    counts[cell] += 1
        return counts

    def is_within_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.boardSize and 0 <= col < self.boardSize

    @staticmethod
    def is_dark_square(row: int, col: int) -> bool:
        return (row + col) % 2 == 1

    def is_game_over(self) -> bool:
        return 0 in self.count_pieces().values()

    # mutation -----------------------------------------------------------

    def apply_move(self, origin: Coordinate, destination: Coordinate, marker: Cell) -> bool:
        """Validate and play a step or a single capture jump for ``marker``.

        Returns False, leaving the grid untouched, for anything that is not a
        legal move. Malformed coordinates are rejected rather than raised.
        """
        try:
            move = Move(origin=tuple(origin), destination=tuple(destination), marker=marker)
            (start_row, start_col), (end_row, end_col) = move.origin, move.destination
            reason = self._rejection_reason(move)
        except (TypeError, ValueError):
            logger.debug("Rejected malformed coordinates %r -> %r", origin, destination)
            return False

        if reason is not None:
            logger.debug("Rejected %s: %s", move, reason)
            return False

        if move.is_capture:
            mid_row, mid_col = move.midpoint
            self.grid[mid_row][mid_col] = Cell.EMPTY
            logger.info("Captured piece at %d,%d", mid_row, mid_col)

        self.grid[start_row][start_col] = Cell.EMPTY
        self.grid[end_row][end_col] = marker
        return True

    def place(self, row: int, col: int, cell: Cell) -> None:
        if not self.is_within_bounds(row, col):
            raise ValueError(f"Square {row},{col} is off the board.")
        if not cell.is_empty and not self.is_dark_square(row, col):
            raise ValueError(f"Square {row},{col} is a light square.")
        self.grid[row][col] = cell

    def clear(self) -> None:
        for row in self.grid:
            for col in range(self.boardSize):
                row[col] = Cell.EMPTY

    def to_state(self) -> BoardState:
        return tuple(tuple(cell.value for cell in row) for row in self.grid)

    # helpers ------------------------------------------------------------

    def _rejection_reason(self, move: Move) -> Optional[str]:
        start_row, start_col = move.origin
        end_row, end_col = move.destination

        if not self.is_within_bounds(start_row, start_col) or not self.is_within_bounds(end_row, end_col):
            return "square off the board"
        if not isinstance(move.marker, Cell) or move.marker.is_empty:
            return "no piece to move"
        if self.grid[start_row][start_col] is not move.marker:
            return "origin does not hold the mover's piece"
        if not self.grid[end_row][end_col].is_empty:
            return "destination is occupied"
        if move.is_step:
            return None
        if move.is_capture:
            mid_row, mid_col = move.midpoint
            middle = self.grid[mid_row][mid_col]
            if middle.is_empty or middle is move.marker:
                return "no opponent piece to jump"
            return None
        return "not a diagonal step or jump"
