"""Move validation helpers shared by humans and bot players."""

from collections.abc import Mapping
from typing import Optional, Tuple

from ..game.board import NAME_TO_SIDE, Board, Move


def parse_side(value: object) -> int:
    text = str(value).strip().upper()
    if text in NAME_TO_SIDE:
        return NAME_TO_SIDE[text]
    side = int(text)
    if side not in NAME_TO_SIDE.values():
        raise ValueError(f"Unknown side '{value}'.")
    return side


def build_move_from_payload(payload: Optional[Mapping]) -> Tuple[Optional[Move], Optional[str]]:
    if not isinstance(payload, Mapping):
        return None, "Move payload must be an object."

    missing = [key for key in ("row", "col", "side") if key not in payload]
    if missing:
        return None, f"Move payload is missing {', '.join(missing)}."

    try:
        row = int(payload["row"])
        col = int(payload["col"])
        side = parse_side(payload["side"])
    except (TypeError, ValueError):
        return None, "Malformed move payload."

    return Move(row=row, col=col, side=side), None


def validate_move(board: Board, move: Optional[Move]) -> Tuple[bool, Optional[str]]:
    if move is None:
        return False, "Move is missing."
    if not board.in_bounds(move.row, move.col):
        return False, "Move is off the board."
    if not board.is_legal_move(move):
        return False, "Illegal move."
    return True, None


def validate_payload_move(board: Board, payload: Optional[Mapping]) -> Tuple[Optional[Move], Optional[str]]:
    move, error = build_move_from_payload(payload)
    if error:
        return None, error

    ok, error = validate_move(board, move)
    if not ok:
        return None, error

    return move, None
