"""Public interface for choosing bot moves."""

import logging
import random
import time
from typing import Callable, Dict, Optional, Protocol

from ..game.board import Board, Move
from .minimax import find_best_move
from .opening import choose_opening_move, opening_active
from .sampling import random_choice
from .timing import sample_size_for_board, select_depth
from .types import (
    MODE_EMERGENCY,
    MODE_OPENING,
    AgentConfig,
    AgentSession,
    SearchResult,
)

logger = logging.getLogger(__name__)


class Player(Protocol):
    """What the host turn loop needs from a move-selection component."""

    def init(self, color: str, board: Board, total_time_ms: float) -> None:
        ...

    def compute(self, board: Board, time_left_ms: float) -> Optional[Move]:
        ...


class StrategoMax:
    """Sampled alpha-beta agent with a clock-driven depth and a random opening."""

    name = "strategomax"

    def __init__(self, config: Optional[AgentConfig] = None, rng: Optional[random.Random] = None):
        self.config = config or AgentConfig()
        self.rng = rng or random.Random(self.config.seed)
        self.session = AgentSession()

    def init(self, color: str, board: Board, total_time_ms: float) -> None:
        self.session = AgentSession(
            color=color,
            board_size=len(board),
            base_sample_size=sample_size_for_board(len(board)),
            max_depth=self.config.default_depth,
            total_time_ms=total_time_ms,
            opening_moves=self.config.opening_moves,
            opening_moves_played=0,
        )

    def compute(self, board: Board, time_left_ms: float) -> Optional[Move]:
        return self.compute_with_info(board, time_left_ms).move

    def compute_with_info(self, board: Board, time_left_ms: float) -> SearchResult:
        session = self.session

        if opening_active(session, self.config):
            start = time.perf_counter()
            move = choose_opening_move(board, session, self.rng)
            logger.debug(
                "%s opening move %d/%d: %s",
                session.color, session.opening_moves_played, session.opening_moves, move,
            )
            return _random_result(move, start, MODE_OPENING)

        depth = select_depth(time_left_ms, session.total_time_ms, session.max_depth)
        if depth != session.max_depth:
            logger.debug(
                "%s depth %d -> %d (%.0fms of %.0fms left)",
                session.color, session.max_depth, depth, time_left_ms, session.total_time_ms,
            )
        session.max_depth = depth

        if depth == 0:
            start = time.perf_counter()
            move = random_choice(board.valid_moves(), self.rng)
            logger.debug("%s emergency random move: %s", session.color, move)
            return _random_result(move, start, MODE_EMERGENCY)

        return find_best_move(
            board,
            session.color,
            depth,
            session.base_sample_size,
            self.rng,
            config=self.config,
        )


class RandomPlayer:
    """Uniformly random legal moves. Baseline opponent."""

    name = "random"

    def __init__(self, config: Optional[AgentConfig] = None, rng: Optional[random.Random] = None):
        self.config = config or AgentConfig()
        self.rng = rng or random.Random(self.config.seed)
        self.color = None

    def init(self, color: str, board: Board, total_time_ms: float) -> None:
        self.color = color

    def compute(self, board: Board, time_left_ms: float) -> Optional[Move]:
        return self.compute_with_info(board, time_left_ms).move

    def compute_with_info(self, board: Board, time_left_ms: float) -> SearchResult:
        start = time.perf_counter()
        return _random_result(random_choice(board.valid_moves(), self.rng), start, MODE_EMERGENCY)


def _random_result(move: Optional[Move], start: float, mode: str) -> SearchResult:
    return SearchResult(
        move=move,
        score=None,
        nodes=0,
        elapsed_ms=(time.perf_counter() - start) * 1000.0,
        depth=0,
        mode=mode,
    )


PLAYER_FACTORIES: Dict[str, Callable[..., Player]] = {
    StrategoMax.name: StrategoMax,
    RandomPlayer.name: RandomPlayer,
}


def create_player(name: str, config: Optional[AgentConfig] = None) -> Player:
    try:
        factory = PLAYER_FACTORIES[name]
    except KeyError:
        raise ValueError(f"Unknown player '{name}'.") from None
    return factory(config=config)


def choose_move(board: Board, color: str, time_left_ms: float, total_time_ms: float,
                config: Optional[AgentConfig] = None) -> Optional[Move]:
    """One-shot helper: fresh agent, single decision."""
    agent = StrategoMax(config=config)
    agent.init(color, board, total_time_ms)
    return agent.compute(board, time_left_ms)
