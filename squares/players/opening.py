"""Random non-corner opening moves for large boards."""

import random
from typing import List, Optional

from ..game.board import Board, Move
from .sampling import random_choice
from .types import AgentConfig, AgentSession


def is_corner_move(move: Move, size: int) -> bool:
    return move.row in (0, size - 1) and move.col in (0, size - 1)


def filter_corner_moves(moves: List[Move], size: int) -> List[Move]:
    return [move for move in moves if not is_corner_move(move, size)]


def opening_active(session: AgentSession, config: AgentConfig) -> bool:
    return (
        session.board_size >= config.opening_min_board_size
        and session.opening_moves_played < session.opening_moves
    )


def choose_opening_move(board: Board, session: AgentSession, rng: random.Random) -> Optional[Move]:
    session.opening_moves_played += 1

    legal_moves = board.valid_moves()
    candidates = filter_corner_moves(legal_moves, board.size)
    if not candidates:
        # only corners left
        candidates = legal_moves
    return random_choice(candidates, rng)
