"""Bot player implementations for Squares."""

from .agent import PLAYER_FACTORIES, Player, RandomPlayer, StrategoMax, choose_move, create_player
from .types import AgentConfig, AgentSession, SearchResult

__all__ = [
    "AgentConfig",
    "AgentSession",
    "PLAYER_FACTORIES",
    "Player",
    "RandomPlayer",
    "SearchResult",
    "StrategoMax",
    "choose_move",
    "create_player",
]
