from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .board import Board
from .move import Coordinate, Move
from .notation import format_square, parse_move
from .pieces import Player

logger = logging.getLogger(__name__)


class TurnStatus(str, Enum):
    APPLIED = "applied"
    INVALID = "invalid"
    GAME_OVER = "game_over"


@dataclass(frozen=True, slots=True)
class TurnOutcome:
    status: TurnStatus
    player: Player
    move: Optional[Move] = None
    reason: Optional[str] = None

    @property
    def accepted(self) -> bool:
        return self.status is not TurnStatus.INVALID

    @property
    def winner(self) -> Optional[Player]:
        return self.player if self.status is TurnStatus.GAME_OVER else None


@dataclass
class MoveRecord:
    player: Player
    move: Move
    captured: Optional[Coordinate]


class Game:
    """Turn controller: owns the board, the two players and whose turn it is."""

    def __init__(self) -> None:
        self.board = Board()
        self.current_player = Player.A
        self.winner: Optional[Player] = None
        self.move_history: list[MoveRecord] = []

    def reset(self) -> None:
        self.board = Board()
        self.current_player = Player.A
        self.winner = None
        self.move_history.clear()

    def switch_turn(self) -> None:
        self.current_player = self.current_player.opponent

    def is_game_over(self) -> bool:
        return self.board.is_game_over()

    def process_turn(self, raw_move: str) -> TurnOutcome:
        player = self.current_player
        if self.winner is not None:
            return TurnOutcome(TurnStatus.INVALID, player, reason="game is already over")

        try:
            request = parse_move(raw_move)
        except ValueError as exc:
            logger.debug("Could not parse %r: %s", raw_move, exc)
            return TurnOutcome(TurnStatus.INVALID, player, reason=f"unreadable move {raw_move!r}")

        move = Move(
            origin=request.origin.as_tuple(),
            destination=request.destination.as_tuple(),
            marker=player.marker,
        )
        if not self.board.apply_move(move.origin, move.destination, move.marker):
            return TurnOutcome(TurnStatus.INVALID, player, move=move, reason="illegal move")

        self.move_history.append(
            MoveRecord(
                player=player,
                move=move,
                captured=move.midpoint if move.is_capture else None,
            )
        )
        logger.info(
            "Player %s moved %s to %s",
            player.value,
            format_square(move.origin),
            format_square(move.destination),
        )

        if self.is_game_over():
            self.winner = player
            counts = self.board.count_pieces()
            logger.info(
                "Game over, player %s wins after %d moves with %d pieces left",
                player.value,
                len(self.move_history),
                counts[player.marker],
            )
            return TurnOutcome(TurnStatus.GAME_OVER, player, move=move)

        self.switch_turn()
        return TurnOutcome(TurnStatus.APPLIED, player, move=move)
