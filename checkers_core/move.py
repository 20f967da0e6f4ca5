from __future__ import annotations

from dataclasses import dataclass

from .pieces import Cell

Coordinate = tuple[int, int]


@dataclass(frozen=True, slots=True)
class Move:
    origin: Coordinate
    destination: Coordinate
    marker: Cell

    @property
    def row_delta(self) -> int:
        return self.destination[0] - self.origin[0]

    @property
    def col_delta(self) -> int:
        return self.destination[1] - self.origin[1]

    @property
    def is_step(self) -> bool:
        return abs(self.row_delta) == 1 and abs(self.col_delta) == 1

    @property
    def is_capture(self) -> bool:
        return abs(self.row_delta) == 2 and abs(self.col_delta) == 2

    @property
    def midpoint(self) -> Coordinate:
        return (
            (self.origin[0] + self.destination[0]) // 2,
            (self.origin[1] + self.destination[1]) // 2,
        )

    def __str__(self) -> str:
        connector = " x " if self.is_capture else " - "
        return connector.join(f"{row},{col}" for row, col in (self.origin, self.destination))
