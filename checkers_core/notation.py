"""Text notation for squares and moves, e.g. ``"B2 C3"``.

Columns are letters ``A``-``H`` and rows are digits ``1``-``8``. A square
decodes to a zero-based ``(row, col)`` coordinate.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from .board import BOARD_SIZE
from .move import Coordinate

FIRST_COLUMN = "A"
SEPARATOR = " "


class CoordinateModel(BaseModel):
    row: int = Field(..., ge=0, le=BOARD_SIZE - 1)
    col: int = Field(..., ge=0, le=BOARD_SIZE - 1)

    def as_tuple(self) -> Coordinate:
        return (self.row, self.col)


class MoveRequest(BaseModel):
    origin: CoordinateModel
    destination: CoordinateModel


def parse_square(token: str) -> Coordinate:
    if len(token) != 2:
        raise ValueError(f"Square '{token}' must be a column letter followed by a row digit.")
    letter, digit = token
    if not ("0" <= digit <= "9"):
        raise ValueError(f"Row '{digit}' is not a digit.")
    col = ord(letter) - ord(FIRST_COLUMN)
    row = int(digit) - 1
    return CoordinateModel(row=row, col=col).as_tuple()


def parse_move(text: str) -> MoveRequest:
    parts = text.split(SEPARATOR)
    if len(parts) != 2:
        raise ValueError(f"Expected two squares separated by a space, got {text!r}.")
    origin, destination = (parse_square(part) for part in parts)
    return MoveRequest(
        origin=CoordinateModel(row=origin[0], col=origin[1]),
        destination=CoordinateModel(row=destination[0], col=destination[1]),
    )


def format_square(coord: Coordinate) -> str:
    row, col = coord
    return f"{chr(ord(FIRST_COLUMN) + col)}{row + 1}"
