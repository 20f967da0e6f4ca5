from __future__ import annotations

import sys
import unittest
from pathlib import Path


ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))


from checkers_core.board import Board  # noqa: E402
from checkers_core.game import Game, TurnStatus  # noqa: E402
from checkers_core.pieces import Cell, Player  # noqa: E402


def _endgame() -> Game:
    game = Game()
    board = Board.empty()
    board.place(2, 1, Cell.PLAYER_A)
    board.place(3, 2, Cell.PLAYER_B)
    game.board = board
    return game


class TurnAlternationTests(unittest.TestCase):
    def test_player_a_moves_first(self) -> None:
        self.assertIs(Game().current_player, Player.A)

    def test_step_then_out_of_range_move(self) -> None:
        game = Game()
        outcome = game.process_turn("B3 C4")
        self.assertIs(outcome.status, TurnStatus.APPLIED)
        self.assertIs(outcome.player, Player.A)
        self.assertEqual(outcome.move.origin, (2, 1))
        self.assertEqual(outcome.move.destination, (3, 2))
        self.assertIs(game.board.getPiece(3, 2), Cell.PLAYER_A)
        self.assertIs(game.current_player, Player.B)

        before = game.board.to_state()
        outcome = game.process_turn("Z9 A1")
        self.assertIs(outcome.status, TurnStatus.INVALID)
        self.assertFalse(outcome.accepted)
        self.assertIs(game.current_player, Player.B)
        self.assertEqual(game.board.to_state(), before)

    def test_moving_opponents_piece_keeps_turn(self) -> None:
        game = Game()
        outcome = game.process_turn("A6 B5")
        self.assertIs(outcome.status, TurnStatus.INVALID)
        self.assertIsNotNone(outcome.move)
        self.assertIs(game.current_player, Player.A)
        self.assertEqual(game.move_history, [])

    def test_players_alternate(self) -> None:
        game = Game()
        self.assertIs(game.process_turn("B3 C4").status, TurnStatus.APPLIED)
        self.assertIs(game.process_turn("A6 B5").status, TurnStatus.APPLIED)
        self.assertIs(game.current_player, Player.A)
        self.assertEqual([record.player for record in game.move_history], [Player.A, Player.B])

    def test_capture_is_recorded(self) -> None:
        game = Game()
        game.process_turn("B3 C4")
        game.process_turn("E6 D5")
        outcome = game.process_turn("C4 D5")
        self.assertIs(outcome.status, TurnStatus.INVALID)
        self.assertIs(game.current_player, Player.A)

        outcome = game.process_turn("C4 E6")
        self.assertIs(outcome.status, TurnStatus.APPLIED)
        self.assertTrue(outcome.move.is_capture)
        self.assertIs(game.board.getPiece(4, 3), Cell.EMPTY)
        self.assertIs(game.board.getPiece(5, 4), Cell.PLAYER_A)
        self.assertEqual(game.move_history[-1].captured, (4, 3))
        self.assertEqual(game.board.count_pieces()[Cell.PLAYER_B], 11)


class GameOverTests(unittest.TestCase):
    def test_winning_capture_ends_game(self) -> None:
        game = _endgame()
        with self.assertLogs("checkers_core.game", level="INFO") as logs:
            outcome = game.process_turn("B3 D5")
        self.assertIn("player A wins after 1 moves with 1 pieces left", logs.output[-1])
        self.assertIs(outcome.status, TurnStatus.GAME_OVER)
        self.assertIs(outcome.winner, Player.A)
        self.assertIs(game.winner, Player.A)
        self.assertIs(game.current_player, Player.A)
        self.assertTrue(game.is_game_over())

    def test_moves_after_game_over_are_rejected(self) -> None:
        game = _endgame()
        game.process_turn("B3 D5")
        before = game.board.to_state()
        outcome = game.process_turn("D5 E6")
        self.assertIs(outcome.status, TurnStatus.INVALID)
        self.assertEqual(game.board.to_state(), before)

    def test_applied_outcome_has_no_winner(self) -> None:
        outcome = Game().process_turn("B3 C4")
        self.assertIsNone(outcome.winner)

    def test_reset_starts_a_fresh_game(self) -> None:
        game = _endgame()
        game.process_turn("B3 D5")
        game.reset()
        self.assertIs(game.current_player, Player.A)
        self.assertIsNone(game.winner)
        self.assertEqual(game.move_history, [])
        self.assertEqual(game.board.to_state(), Board().to_state())


if __name__ == "__main__":
    unittest.main()
