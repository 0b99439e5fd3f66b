"""Heuristic evaluation for minimax search."""

from ..game.board import PLAYER_CODES, Board, opponent


def material_advantage(board: Board, color: str) -> int:
    mine = PLAYER_CODES[color]
    theirs = PLAYER_CODES[opponent(color)]

    score = 0
    for row in board.cells:
        for cell in row:
            if cell == mine:
                score += 1
            elif cell == theirs:
                score -= 1
    return score


def evaluate_board(board: Board, color: str) -> int:
    return material_advantage(board, color)
