"""Core checkers engine package."""

from .board import BOARD_SIZE, Board
from .game import Game, MoveRecord, TurnOutcome, TurnStatus
from .move import Coordinate, Move
from .notation import format_square, parse_move, parse_square
from .pieces import Cell, Player

__all__ = [
    "BOARD_SIZE",
    "Board",
    "Game",
    "MoveRecord",
    "TurnOutcome",
    "TurnStatus",
    "Move",
    "Coordinate",
    "Cell",
    "Player",
    "format_square",
    "parse_move",
    "parse_square",
]
