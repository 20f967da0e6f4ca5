from __future__ import annotations

from enum import Enum


class Cell(Enum):
    EMPTY = "empty"
    PLAYER_A = "player_a"
    PLAYER_B = "player_b"

    @property
    def is_empty(self) -> bool:
        return self is Cell.EMPTY


class Player(Enum):
    A = "A"
    B = "B"

    @property
    def marker(self) -> Cell:
        return Cell.PLAYER_A if self is Player.A else Cell.PLAYER_B

    @property
    def opponent(self) -> "Player":
        return Player.B if self is Player.A else Player.A

    @classmethod
    def from_marker(cls, marker: Cell) -> "Player":
        for player in cls:
            if player.marker is marker:
                return player
        raise ValueError(f"No player owns marker {marker!r}.")
