import unittest

from squares.game.board import (
    BOTTOM,
    DRAW,
    LEFT,
    NEUTRAL,
    PLAYER_CODES,
    RED,
    RIGHT,
    TOP,
    YELLOW,
    Board,
    Move,
)

R = PLAYER_CODES[RED]
Y = PLAYER_CODES[YELLOW]


class BoardTests(unittest.TestCase):
    def test_empty_board_lists_every_side(self):
        board = Board(3)
        moves = board.valid_moves()
        self.assertEqual(len(moves), 3 * 3 * 4)
        self.assertEqual(len(set(moves)), len(moves))
        self.assertEqual(board.winner(), NEUTRAL)

    def test_move_draws_shared_side_on_neighbour(self):
        board = Board(3)
        claimed = board.move(1, 1, TOP, R)

        self.assertEqual(claimed, [])
        self.assertEqual(board.cells[1][1], 1 << TOP)
        self.assertEqual(board.cells[0][1], 1 << BOTTOM)
        self.assertFalse(board.is_legal_move(Move(0, 1, BOTTOM)))

    def test_fourth_side_claims_cell(self):
        board = Board(2)
        board.move(0, 0, TOP, Y)
        board.move(0, 0, LEFT, Y)
        board.move(0, 0, BOTTOM, Y)
        claimed = board.move(0, 0, RIGHT, R)

        self.assertEqual(claimed, [(0, 0)])
        self.assertEqual(board.cells[0][0], R)
        self.assertEqual(board.owned_count(RED), 1)
        self.assertNotIn(Move(0, 0, TOP), board.valid_moves())

    def test_one_edge_can_close_two_cells(self):
        board = Board.from_rows([
            [0b1101, 0b0111],
            [0, 0],
        ])
        claimed = board.apply_move(Move(0, 0, RIGHT), Y)

        self.assertEqual(sorted(claimed), [(0, 0), (0, 1)])
        self.assertEqual(board.owned_count(YELLOW), 2)

    def test_illegal_moves_raise(self):
        board = Board(2)
        board.move(0, 0, TOP, R)
        with self.assertRaises(ValueError):
            board.move(0, 0, TOP, Y)
        with self.assertRaises(ValueError):
            board.move(2, 0, TOP, Y)
        with self.assertRaises(ValueError):
            board.move(0, 1, TOP, 7)

    def test_copy_does_not_alias(self):
        board = Board(2)
        clone = board.copy()
        clone.move(0, 0, TOP, R)

        self.assertEqual(board.cells[0][0], 0)
        self.assertEqual(clone.cells[0][0], 1 << TOP)
        self.assertEqual(len(clone), 2)

    def test_winner_by_majority_or_draw(self):
        self.assertEqual(Board.from_rows([[R, R], [R, Y]]).winner(), RED)
        self.assertEqual(Board.from_rows([[Y, R], [Y, Y]]).winner(), YELLOW)
        self.assertEqual(Board.from_rows([[R, Y], [Y, R]]).winner(), DRAW)
        self.assertEqual(Board.from_rows([[R, Y], [Y, 3]]).winner(), NEUTRAL)

    def test_rejects_bad_shapes(self):
        with self.assertRaises(ValueError):
            Board(1)
        with self.assertRaises(ValueError):
            Board.from_rows([[0, 0], [0]])

    def test_display_marks_owners(self):
        board = Board.from_rows([[R, 0], [0, Y]])
        text = board.display()
        self.assertIn("Score: Red 1 - 1 Yellow", text)
        self.assertIn("   0| R |", text)
        self.assertIn("   1    | Y |", text)
        self.assertIn("+---+---+", text)
        self.assertIn("+   +---+", text)

    def test_display_walls_come_from_either_cell(self):
        board = Board(2)
        board.move(0, 0, RIGHT, R)
        board.move(1, 1, TOP, Y)
        lines = board.display(last_move=Move(1, 1, TOP)).splitlines()

        self.assertIn("   0    |", lines)
        self.assertIn("    +   +---+", lines)
        self.assertIn("   1" + " " * 6 + "*", lines)

    def test_notation(self):
        self.assertEqual(Move(2, 3, LEFT).to_notation(), "2,3L")
        self.assertEqual(Move(2, 3, LEFT).as_tuple(), (2, 3, LEFT))


if __name__ == "__main__":
    unittest.main()
