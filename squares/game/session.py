"""Shared game session state used by the CLI: board, clocks, turn order and players."""

import logging
import time
from collections.abc import Mapping
from dataclasses import asdict, replace
from typing import Callable, Dict, List, Optional

from ..players.agent import Player, create_player
from ..players.types import AgentConfig
from ..players.validator import validate_move, validate_payload_move
from .board import COLORS, NEUTRAL, RED, YELLOW, Board, opponent, player_code
from .config import CONTROLLER_AI, CONTROLLER_HUMAN, MODE_HVA, GameConfig, merge_config

logger = logging.getLogger(__name__)

RUNNING = {"game_over": False, "winner": None, "game_over_reason": None, "timeout_player": None}


class GameSession:
    def __init__(
        self,
        config: Optional[GameConfig] = None,
        players: Optional[Dict[str, Player]] = None,
        clock: Optional[Callable[[], float]] = None,
    ):
        self.config = config or GameConfig()
        self._clock = clock or (lambda: time.perf_counter() * 1000.0)
        self._custom_players = players or {}
        self.reset()

    @property
    def controllers(self) -> Dict[str, str]:
        return self.config.controllers()

    @property
    def current_controller(self) -> str:
        return self.controllers[self.current_player]

    def _build_players(self) -> Dict[str, Player]:
        players: Dict[str, Player] = {}
        for index, color in enumerate(COLORS):
            if self.controllers[color] != CONTROLLER_AI:
                continue
            if color in self._custom_players:
                players[color] = self._custom_players[color]
                continue
            seed = None if self.config.seed is None else self.config.seed + index
            players[color] = create_player(self.config.player_name(color), AgentConfig(seed=seed))
        return players

    def _status(self) -> dict:
        for color in COLORS:
            if self.time_left_ms[color] <= 0:
                return {
                    "game_over": True,
                    "winner": opponent(color),
                    "game_over_reason": "timeout",
                    "timeout_player": color,
                }

        winner = self.board.winner()
        if winner == NEUTRAL:
            return dict(RUNNING)
        return {"game_over": True, "winner": winner, "game_over_reason": "board", "timeout_player": None}

    def _tick_clock(self):
        now = self._clock()
        if not self._status()["game_over"]:
            color = self.current_player
            self.time_left_ms[color] = max(0.0, self.time_left_ms[color] - max(0.0, now - self.last_clock_update_ms))
            if self.time_left_ms[color] <= 0:
                logger.warning("%s ran out of time", color)
        self.last_clock_update_ms = now

    def _before_turn_action(self) -> Optional[str]:
        self._tick_clock()
        if self._status()["game_over"]:
            return "Game is over"
        return None

    def configure(self, payload: Optional[Mapping]) -> dict:
        try:
            self.config = merge_config(self.config, dict(payload or {}))
        except (TypeError, ValueError) as exc:
            return {"error": str(exc)}

        self.reset()
        return {"ok": True, "config": asdict(self.config)}

    def status(self) -> dict:
        self._tick_clock()
        return self._status()

    def _apply_move(self, move, source: str, search: Optional[dict] = None, agent_session=None) -> dict:
        player = self.current_player
        entry = {
            "move": move,
            "snapshot": self.board.copy(),
            "clock_snapshot": dict(self.time_left_ms),
            "agent_session": agent_session,
            "player": player,
            "source": source,
            "search": search,
        }
        entry["claimed"] = self.board.apply_move(move, player_code(player))
        self.move_history.append(entry)

        self.current_player = opponent(player)
        self.last_clock_update_ms = self._clock()

        return {
            "ok": True,
            "player": player,
            "notation": move.to_notation(),
            "claimed": entry["claimed"],
            "source": source,
            "search": search,
        }

    def apply_human_move(self, payload: Optional[Mapping]) -> dict:
        error = self._before_turn_action()
        if error:
            return {"error": error}

        if self.current_controller != CONTROLLER_HUMAN:
            return {"error": "It is an AI-controlled turn."}

        move, error = validate_payload_move(self.board, payload)
        if error:
            return {"error": error}

        return self._apply_move(move, source=CONTROLLER_HUMAN)

    def apply_agent_move(self) -> dict:
        error = self._before_turn_action()
        if error:
            return {"error": error}

        if self.current_controller != CONTROLLER_AI:
            return {"error": "It is a human-controlled turn."}

        color = self.current_player
        agent = self.players[color]
        # per-game agent state before this turn, restored by undo
        agent_session = getattr(agent, "session", None)
        if agent_session is not None:
            agent_session = replace(agent_session)

        compute_with_info = getattr(agent, "compute_with_info", None)
        if compute_with_info is not None:
            result = compute_with_info(self.board.copy(), self.time_left_ms[color])
            move, search = result.move, result.as_dict()
        else:
            move, search = agent.compute(self.board.copy(), self.time_left_ms[color]), None

        self._tick_clock()
        if self._status()["game_over"]:
            return {"error": "Game is over"}

        if move is None:
            logger.warning("%s agent produced no move", color)
            return {"error": "Agent produced no move"}

        ok, error = validate_move(self.board, move)
        if not ok:
            logger.warning("%s agent produced invalid move %s: %s", color, move, error)
            return {"error": f"Agent produced invalid move: {error}"}

        return self._apply_move(move, source=CONTROLLER_AI, search=search, agent_session=agent_session)

    def undo(self) -> dict:
        """Take back the last move.

        Against an AI this rewinds to the human's previous turn, so the AI's
        reply goes too.
        """
        if not self.move_history:
            return {"error": "Nothing to undo"}

        self._pop_move()
        if self.config.mode == MODE_HVA:
            while self.move_history and self.current_controller != CONTROLLER_HUMAN:
                self._pop_move()

        self.last_clock_update_ms = self._clock()
        return {"ok": True}

    def _pop_move(self):
        entry = self.move_history.pop()
        self.board = entry["snapshot"]
        self.current_player = entry["player"]
        self.time_left_ms = dict(entry["clock_snapshot"])
        if entry["agent_session"] is not None:
            self.players[entry["player"]].session = entry["agent_session"]

    def reset(self) -> dict:
        self.board = Board(self.config.board_size)
        self.current_player = RED
        self.move_history: List[dict] = []
        self.time_left_ms = {color: float(self.config.total_time_ms) for color in COLORS}

        self.players = self._build_players()
        for color, agent in self.players.items():
            agent.init(color, self.board.copy(), self.config.total_time_ms)

        self.last_clock_update_ms = self._clock()
        return {"ok": True}

    def state_json(self) -> dict:
        status = self.status()

        legal_moves = []
        if not status["game_over"] and self.current_controller == CONTROLLER_HUMAN:
            legal_moves = [
                {"row": m.row, "col": m.col, "side": m.side, "notation": m.to_notation()}
                for m in self.board.valid_moves()
            ]

        history = [
            {
                "notation": entry["move"].to_notation(),
                "player": entry["player"],
                "claimed": entry["claimed"],
                "source": entry["source"],
                "search": entry["search"],
            }
            for entry in self.move_history
        ]

        return dict(
            status,
            cells=[list(row) for row in self.board.cells],
            current_player=self.current_player,
            current_controller=self.current_controller,
            legal_moves=legal_moves,
            history=history,
            owned={RED: self.board.owned_count(RED), YELLOW: self.board.owned_count(YELLOW)},
            time_left_ms=dict(self.time_left_ms),
        )
