"""Sampled minimax search with alpha-beta pruning."""

from math import inf
import logging
import random
import time
from typing import Dict, List, Optional

from ..game.board import NEUTRAL, Board, Move, opponent, player_code
from .heuristics import evaluate_board
from .sampling import random_subset
from .types import MODE_SEARCH, AgentConfig, SearchResult

logger = logging.getLogger(__name__)


def simulate_move(board: Board, move: Move, color: str) -> Board:
    child = board.copy()
    child.apply_move(move, player_code(color))
    return child


def minimax(
    board: Board,
    depth: int,
    alpha: float,
    beta: float,
    maximizing: bool,
    color: str,
    rng: random.Random,
    config: AgentConfig,
    stats: Dict[str, int],
) -> float:
    """Score ``board`` for ``color``, who maximizes.

    Each node looks at a random sample of at most ``config.search_sample_size``
    legal moves. A node without legal moves is scored as a leaf.
    """
    stats["nodes"] += 1

    if depth == 0 or board.winner() != NEUTRAL:
        return evaluate_board(board, color)

    legal_moves = board.valid_moves()
    if not legal_moves:
        return evaluate_board(board, color)

    sampled = random_subset(legal_moves, config.search_sample_size, rng)

    if maximizing:
        best_value = -inf
        for move in sampled:
            child = simulate_move(board, move, color)
            value = minimax(child, depth - 1, alpha, beta, False, color, rng, config, stats)

            best_value = max(best_value, value)
            alpha = max(alpha, value)
            if beta <= alpha:
                break

        return best_value

    best_value = inf
    for move in sampled:
        child = simulate_move(board, move, opponent(color))
        value = minimax(child, depth - 1, alpha, beta, True, color, rng, config, stats)

        best_value = min(best_value, value)
        beta = min(beta, value)
        if beta <= alpha:
            break

    return best_value


def find_best_move(
    board: Board,
    color: str,
    depth: int,
    sample_size: int,
    rng: random.Random,
    config: Optional[AgentConfig] = None,
) -> SearchResult:
    """Search a random sample of root moves and keep the best-scoring one.

    Every root move is followed by a full-width window search with the
    opponent to move. Ties keep the first candidate seen.
    """
    resolved_config = config or AgentConfig()
    stats = {"nodes": 0}
    start = time.perf_counter()

    candidates: List[Move] = random_subset(board.valid_moves(), sample_size, rng)

    best_move = None
    best_score = -inf
    for move in candidates:
        child = simulate_move(board, move, color)
        score = minimax(child, depth, -inf, inf, False, color, rng, resolved_config, stats)
        if score > best_score:
            best_score = score
            best_move = move

    elapsed_ms = (time.perf_counter() - start) * 1000.0
    logger.debug(
        "searched %d root moves at depth %d: best=%s score=%s nodes=%d (%.1fms)",
        len(candidates), depth, best_move, best_score, stats["nodes"], elapsed_ms,
    )
    return SearchResult(
        move=best_move,
        score=best_score if best_move is not None else None,
        nodes=stats["nodes"],
        elapsed_ms=elapsed_ms,
        depth=depth,
        mode=MODE_SEARCH,
    )
