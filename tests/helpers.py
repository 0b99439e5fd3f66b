from squares.game.board import BOTTOM, LEFT, RIGHT, TOP, Board


def bordered_board(size: int) -> Board:
    """Board with only the outer border drawn; every inner edge still open."""
    board = Board(size)
    for r in range(size):
        for c in range(size):
            value = 0
            if r == 0:
                value |= 1 << TOP
            if r == size - 1:
                value |= 1 << BOTTOM
            if c == 0:
                value |= 1 << LEFT
            if c == size - 1:
                value |= 1 << RIGHT
            board.cells[r][c] = value
    return board


class FakeClock:
    def __init__(self, now: float = 0.0):
        self.now = now

    def __call__(self) -> float:
        return self.now
