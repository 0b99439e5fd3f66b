"""Configuration helpers for game mode and controller wiring."""

from dataclasses import dataclass, replace
from typing import Dict, Optional

from .board import MIN_SIZE, RED, YELLOW

MODE_HVH = "hvh"
MODE_HVA = "hva"
MODE_AVA = "ava"

CONTROLLER_HUMAN = "human"
CONTROLLER_AI = "ai"

VALID_MODES = {MODE_HVH, MODE_HVA, MODE_AVA}
VALID_PLAYERS = {"strategomax", "random"}

MAX_SIZE = 20


@dataclass(frozen=True)
class GameConfig:
    mode: str = MODE_AVA
    human_side: str = RED
    board_size: int = 5
    total_time_ms: int = 60 * 1000
    red_player: str = "strategomax"
    yellow_player: str = "random"
    seed: Optional[int] = None

    def controllers(self) -> Dict[str, str]:
        if self.mode == MODE_HVH:
            return {RED: CONTROLLER_HUMAN, YELLOW: CONTROLLER_HUMAN}
        if self.mode == MODE_AVA:
            return {RED: CONTROLLER_AI, YELLOW: CONTROLLER_AI}

        ai_side = YELLOW if self.human_side == RED else RED
        return {
            self.human_side: CONTROLLER_HUMAN,
            ai_side: CONTROLLER_AI,
        }

    def player_name(self, color: str) -> str:
        return self.red_player if color == RED else self.yellow_player


def normalize_mode(value: object) -> str:
    mode = str(value).strip().lower()
    if mode not in VALID_MODES:
        raise ValueError(f"Unsupported mode '{value}'.")
    return mode


def normalize_side(value: object) -> str:
    side = str(value).strip().lower()
    if side in ("red", "r"):
        return RED
    if side in ("yellow", "y"):
        return YELLOW
    raise ValueError(f"Unsupported side '{value}'.")


def normalize_board_size(value: object) -> int:
    try:
        size = int(value)
    except (TypeError, ValueError) as exc:
        raise ValueError("board_size must be an integer.") from exc

    if size < MIN_SIZE or size > MAX_SIZE:
        raise ValueError(f"board_size must be between {MIN_SIZE} and {MAX_SIZE}.")
    return size


def normalize_player(value: object) -> str:
    name = str(value).strip().lower()
    if name not in VALID_PLAYERS:
        raise ValueError(f"Unsupported player '{value}'.")
    return name


def normalize_positive_int(value: object, name: str) -> int:
    try:
        v = int(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{name} must be an integer.") from exc
    if v <= 0:
        raise ValueError(f"{name} must be positive.")
    return v


def normalize_seed(value: object) -> Optional[int]:
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ValueError("seed must be an integer.") from exc


def merge_config(current: GameConfig, payload: Optional[dict]) -> GameConfig:
    if payload is None:
        return current

    changes = {}
    if "mode" in payload:
        changes["mode"] = normalize_mode(payload["mode"])
    if "human_side" in payload:
        changes["human_side"] = normalize_side(payload["human_side"])
    if "board_size" in payload:
        changes["board_size"] = normalize_board_size(payload["board_size"])
    if "total_time_ms" in payload:
        changes["total_time_ms"] = normalize_positive_int(payload["total_time_ms"], "total_time_ms")
    if "red_player" in payload:
        changes["red_player"] = normalize_player(payload["red_player"])
    if "yellow_player" in payload:
        changes["yellow_player"] = normalize_player(payload["yellow_player"])
    if "seed" in payload:
        changes["seed"] = normalize_seed(payload["seed"])

    return replace(current, **changes)
