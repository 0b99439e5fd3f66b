"""Types used by bot players."""

from dataclasses import dataclass
from typing import Dict, Optional

from ..game.board import RED, Move

DEFAULT_DEPTH = 6
SEARCH_SAMPLE_SIZE = 10
OPENING_MOVES = 10
OPENING_MIN_BOARD_SIZE = 11

MODE_OPENING = "opening"
MODE_EMERGENCY = "emergency"
MODE_SEARCH = "search"


@dataclass(frozen=True)
class AgentConfig:
    default_depth: int = DEFAULT_DEPTH
    search_sample_size: int = SEARCH_SAMPLE_SIZE
    opening_moves: int = OPENING_MOVES
    opening_min_board_size: int = OPENING_MIN_BOARD_SIZE
    seed: Optional[int] = None


@dataclass
class AgentSession:
    """Per-game agent state.

    Created by ``init``. During play only ``max_depth`` (depth controller)
    and ``opening_moves_played`` (opening policy) change.
    """

    color: str = RED
    board_size: int = 0
    base_sample_size: int = 0
    max_depth: int = DEFAULT_DEPTH
    total_time_ms: float = 0.0
    opening_moves: int = OPENING_MOVES
    opening_moves_played: int = 0


@dataclass(frozen=True)
class SearchResult:
    move: Optional[Move]
    score: Optional[float]
    nodes: int
    elapsed_ms: float
    depth: int
    mode: str = MODE_SEARCH

    def as_dict(self) -> Dict[str, object]:
        if self.move is None:
            notation = None
        else:
            notation = self.move.to_notation()

        return {
            "notation": notation,
            "score": self.score,
            "nodes": self.nodes,
            "elapsed_ms": round(self.elapsed_ms, 3),
            "depth": self.depth,
            "mode": self.mode,
        }
