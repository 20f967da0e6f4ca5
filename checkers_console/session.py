from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

from checkers_core.game import Game, TurnStatus
from checkers_core.pieces import Player

from .render import render_board
from .schemas import ConsoleConfig

logger = logging.getLogger(__name__)

CLEAR_SCREEN = "\033[2J\033[H"
MOVE_EXAMPLE = "B2 C3"


class ConsoleSession:
    """Prompt, read, apply and redraw until one side runs out of pieces."""

    def __init__(
        self,
        game: Optional[Game] = None,
        config: Optional[ConsoleConfig] = None,
        *,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ) -> None:
        self.game = game if game is not None else Game()
        self.config = config if config is not None else ConsoleConfig()
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    # public API ---------------------------------------------------------

    def run(self) -> Optional[Player]:
        logger.info("Starting console game")
        while True:
            self._draw()
            symbol = self.config.symbol_for(self.game.current_player)
            self._write(f"{symbol}'s turn. Enter your move (e.g., {MOVE_EXAMPLE}): ")
            line = self._read_line()
            if line is None:
                logger.info("Input closed before the game finished")
                return None

            outcome = self.game.process_turn(line)
            if outcome.status is TurnStatus.GAME_OVER:
                self._draw()
                self._write(f"{symbol} wins!\n")
                return outcome.winner
            if outcome.status is TurnStatus.INVALID:
                logger.debug("Invalid move from player %s: %s", outcome.player.value, outcome.reason)
                self._write("Invalid move! Press Enter to try again.\n")
                if self._read_line() is None:
                    logger.info("Input closed before the game finished")
                    return None

    # helpers ------------------------------------------------------------

    def _draw(self) -> None:
        if self.config.clear_screen:
            self._write(CLEAR_SCREEN)
        self._write(render_board(self.game.board, self.config) + "\n")

    def _read_line(self) -> Optional[str]:
        line = self.stdin.readline()
        if line == "":
            return None
        return line.rstrip("\r\n")

    def _write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()
