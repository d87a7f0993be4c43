from __future__ import annotations

import sys
import unittest
from pathlib import Path


BACKEND_DIR = Path(__file__).resolve().parents[1]
if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))


from checkers.board import BOARD_SIZE, Board, is_dark_square  # noqa: E402
from checkers.pieces import Color, Square  # noqa: E402
from checkers.state import GameState  # noqa: E402


class OpeningLayoutTests(unittest.TestCase):
    def test_initial_layout_places_men_on_dark_squares(self) -> None:
        board = Board.start()
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                square = board.getPiece(row, col)
                if not is_dark_square(row, col) or 3 <= row <= 4:
                    self.assertIs(square, Square.EMPTY, (row, col))
                elif row <= 2:
                    self.assertIs(square, Square.BLACK_MAN, (row, col))
                else:
                    self.assertIs(square, Square.RED_MAN, (row, col))

    def test_initial_state_defaults(self) -> None:
        state = GameState.initial()
        self.assertIs(state.current_player, Color.RED)
        self.assertIsNone(state.selected_square)
        self.assertEqual((state.red_score, state.black_score), (0, 0))
        self.assertEqual(state.board.count_pieces(), {Color.RED: 12, Color.BLACK: 12})

    def test_states_compare_by_content(self) -> None:
        self.assertEqual(GameState.initial(), GameState.initial())
        self.assertNotEqual(GameState.initial(), GameState.initial().replace(red_score=1))


class BoardTests(unittest.TestCase):
    def test_out_of_bounds_reads_as_empty(self) -> None:
        board = Board.start()
        self.assertIs(board.getPiece(-1, 0), Square.EMPTY)
        self.assertIs(board.getPiece(0, 8), Square.EMPTY)

    def test_with_squares_returns_new_board(self) -> None:
        board = Board.start()
        changed = board.with_squares([((5, 0), Square.EMPTY), ((4, 1), Square.RED_MAN)])
        self.assertIs(board.getPiece(5, 0), Square.RED_MAN)
        self.assertIs(changed.getPiece(5, 0), Square.EMPTY)
        self.assertIs(changed.getPiece(4, 1), Square.RED_MAN)

    def test_from_pieces_holds_only_given_pieces(self) -> None:
        board = Board.from_pieces({(3, 3): Square.RED_KING, (2, 4): Square.BLACK_MAN})
        self.assertEqual(
            board.getAllPieces(),
            [((2, 4), Square.BLACK_MAN), ((3, 3), Square.RED_KING)],
        )


class SquareTests(unittest.TestCase):
    def test_owner_and_rank_come_from_the_tag(self) -> None:
        self.assertIsNone(Square.EMPTY.owner)
        self.assertIs(Square.RED_KING.owner, Color.RED)
        self.assertIs(Square.BLACK_MAN.owner, Color.BLACK)
        self.assertTrue(Square.BLACK_KING.is_king)
        self.assertFalse(Square.RED_MAN.is_king)

    def test_promote_only_affects_men(self) -> None:
        self.assertIs(Square.RED_MAN.promote(), Square.RED_KING)
        self.assertIs(Square.BLACK_MAN.promote(), Square.BLACK_KING)
        self.assertIs(Square.RED_KING.promote(), Square.RED_KING)
        self.assertIs(Square.EMPTY.promote(), Square.EMPTY)

    def test_opponent(self) -> None:
        self.assertIs(Color.RED.opponent, Color.BLACK)
        self.assertIs(Color.BLACK.opponent, Color.RED)


if __name__ == "__main__":
    unittest.main()
