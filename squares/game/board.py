"""
Squares board representation and core logic.

Coordinate system:
  - Rows: 0 at top to N-1 at bottom
  - Cols: 0 (left) to N-1 (right)
  - 4 sides per cell: T (top), R (right), B (bottom), L (left)

Cell values:
  - >= 0: unclaimed, bitmask of drawn sides (bit 1 << side)
  - -1:   claimed by Red
  - -2:   claimed by Yellow

Drawing a side also draws the matching side of the neighbouring cell.
A cell whose four sides are drawn is claimed by the player who drew the
last one.

    +---+---+       +---+---+
    | R   Y |  -->  | R | Y |
    +   +---+       +---+---+
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

Position = Tuple[int, int]

# --- Constants ---

RED = 'R'
YELLOW = 'Y'
NEUTRAL = ' '
DRAW = 'D'

COLORS = (RED, YELLOW)

PLAYER_CODES: Dict[str, int] = {RED: -1, YELLOW: -2}
CODE_COLORS: Dict[int, str] = {v: k for k, v in PLAYER_CODES.items()}

TOP = 0
RIGHT = 1
BOTTOM = 2
LEFT = 3

SIDES = (TOP, RIGHT, BOTTOM, LEFT)
FULL = 0b1111

SIDE_NAMES: Dict[int, str] = {TOP: 'T', RIGHT: 'R', BOTTOM: 'B', LEFT: 'L'}
NAME_TO_SIDE: Dict[str, int] = {v: k for k, v in SIDE_NAMES.items()}

# (row_delta, col_delta, side on the neighbour) for each side
NEIGHBOR_SIDES: Dict[int, Tuple[int, int, int]] = {
    TOP: (-1, 0, BOTTOM),
    RIGHT: (0, 1, LEFT),
    BOTTOM: (1, 0, TOP),
    LEFT: (0, -1, RIGHT),
}

MIN_SIZE = 2


def opponent(color: str) -> str:
    return YELLOW if color == RED else RED


def player_code(color: str) -> int:
    return PLAYER_CODES[color]


# --- Move ---

@dataclass(frozen=True)
class Move:
    row: int
    col: int
    side: int

    @property
    def position(self) -> Position:
        return (self.row, self.col)

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.row, self.col, self.side)

    def to_notation(self) -> str:
        return f"{self.row},{self.col}{SIDE_NAMES[self.side]}"

    def __repr__(self):
        return self.to_notation()


# --- Board ---

class Board:
    def __init__(self, size: int = 5):
        if size < MIN_SIZE:
            raise ValueError(f"Board size must be at least {MIN_SIZE}.")
        self.size = size
        self.cells: List[List[int]] = [[0] * size for _ in range(size)]

    def __len__(self) -> int:
        return self.size

    @classmethod
    def from_rows(cls, rows: List[List[int]]) -> 'Board':
        """Build a board from explicit cell values (used by tests and tooling)."""
        size = len(rows)
        if any(len(row) != size for row in rows):
            raise ValueError("Board must be square.")
        b = cls(size)
        b.cells = [list(row) for row in rows]
        return b

    def copy(self) -> 'Board':
        b = Board.__new__(Board)
        b.size = self.size
        b.cells = [list(row) for row in self.cells]
        return b

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def owned_count(self, color: str) -> int:
        code = PLAYER_CODES[color]
        return sum(1 for row in self.cells for v in row if v == code)

    # --- Move validation ---

    def is_legal_move(self, move: Move) -> bool:
        if not self.in_bounds(move.row, move.col):
            return False
        if move.side not in SIDE_NAMES:
            return False
        value = self.cells[move.row][move.col]
        if value < 0:
            return False
        return not value & (1 << move.side)

    def valid_moves(self) -> List[Move]:
        """Every undrawn side of every unclaimed cell.

        A side shared by two cells shows up once per cell; both entries draw
        the same edge.
        """
        moves = []
        for r, row in enumerate(self.cells):
            for c, value in enumerate(row):
                if value < 0:
                    continue
                for side in SIDES:
                    if not value & (1 << side):
                        moves.append(Move(r, c, side))
        return moves

    # --- Apply move ---

    def move(self, row: int, col: int, side: int, code: int) -> List[Position]:
        """Draw a side for the given player code, mutating the board.

        Returns the positions claimed by this move.
        """
        if code not in CODE_COLORS:
            raise ValueError(f"Unknown player code: {code}")

        m = Move(row, col, side)
        if not self.is_legal_move(m):
            raise ValueError(f"Illegal move: {m.to_notation()}")

        claimed = []
        if self._draw(row, col, side, code):
            claimed.append((row, col))

        dr, dc, other_side = NEIGHBOR_SIDES[side]
        nr, nc = row + dr, col + dc
        if self.in_bounds(nr, nc) and self.cells[nr][nc] >= 0:
            if self._draw(nr, nc, other_side, code):
                claimed.append((nr, nc))

        return claimed

    def apply_move(self, move: Move, code: int) -> List[Position]:
        return self.move(move.row, move.col, move.side, code)

    def _draw(self, row: int, col: int, side: int, code: int) -> bool:
        value = self.cells[row][col] | (1 << side)
        if value == FULL:
            self.cells[row][col] = code
            return True
        self.cells[row][col] = value
        return False

    # --- Game end ---

    def winner(self) -> str:
        red = yellow = 0
        for row in self.cells:
            for v in row:
                if v >= 0:
                    return NEUTRAL
                if v == PLAYER_CODES[RED]:
                    red += 1
                else:
                    yellow += 1

        if red > yellow:
            return RED
        if yellow > red:
            return YELLOW
        return DRAW

    # --- Display ---

    def display(self, last_move: Optional[Move] = None) -> str:
        """
        Render the board with row/column indices. Claimed cells show the
        owner's letter, a drawn edge shows as --- or |.

              0   1   2
            +---+---+   +
          0 | R | Y
            +---+---+   +
          1 |           |
            +   +   +---+
        """
        lines = [""]
        lines.append(f"  Score: Red {self.owned_count(RED)} - {self.owned_count(YELLOW)} Yellow")
        lines.append("")
        lines.append("     " + "".join(f"{c:<4d}" for c in range(self.size)).rstrip())

        for r in range(self.size):
            lines.append("    " + self._horizontal_edges(r))

            row_str = f"  {r:>2d}"
            for c in range(self.size):
                left = self._side_drawn(r, c, LEFT) or (c > 0 and self._side_drawn(r, c - 1, RIGHT))
                row_str += "|" if left else " "
                value = self.cells[r][c]
                mark = CODE_COLORS.get(value, " ")
                if last_move is not None and last_move.position == (r, c) and value >= 0:
                    mark = "*"
                row_str += f" {mark} "
            row_str += "|" if self._side_drawn(r, self.size - 1, RIGHT) else " "
            lines.append(row_str.rstrip())

        lines.append("    " + self._horizontal_edges(self.size))
        lines.append("")
        return '\n'.join(lines)

    def _side_drawn(self, row: int, col: int, side: int) -> bool:
        value = self.cells[row][col]
        return value < 0 or bool(value & (1 << side))

    def _horizontal_edges(self, row: int) -> str:
        """Edge line above ``row``; ``row == size`` is the bottom border."""
        parts = []
        for c in range(self.size):
            drawn = (
                (row < self.size and self._side_drawn(row, c, TOP))
                or (row > 0 and self._side_drawn(row - 1, c, BOTTOM))
            )
            parts.append("+---" if drawn else "+   ")
        return ("".join(parts) + "+").rstrip()
