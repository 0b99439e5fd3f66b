import unittest

from squares.game.board import PLAYER_CODES, RED, YELLOW, Board
from squares.players.heuristics import evaluate_board

R = PLAYER_CODES[RED]
Y = PLAYER_CODES[YELLOW]


class EvaluateBoardTests(unittest.TestCase):
    def test_empty_board_scores_zero(self):
        board = Board(4)
        self.assertEqual(evaluate_board(board, RED), 0)
        self.assertEqual(evaluate_board(board, YELLOW), 0)

    def test_counts_owned_cells_difference(self):
        board = Board.from_rows([
            [R, R, 3],
            [Y, 0, R],
            [5, Y, R],
        ])
        self.assertEqual(evaluate_board(board, RED), 2)
        self.assertEqual(evaluate_board(board, YELLOW), -2)

    def test_drawn_board_scores_zero(self):
        board = Board.from_rows([[R, Y], [Y, R]])
        self.assertEqual(evaluate_board(board, RED), 0)

    def test_is_pure_and_antisymmetric(self):
        board = Board.from_rows([[R, 0], [R, Y]])
        before = [list(row) for row in board.cells]

        first = evaluate_board(board, RED)
        second = evaluate_board(board, RED)

        self.assertEqual(first, second)
        self.assertEqual(first, -evaluate_board(board, YELLOW))
        self.assertEqual(board.cells, before)


if __name__ == "__main__":
    unittest.main()
