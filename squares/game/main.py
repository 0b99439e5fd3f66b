#!/usr/bin/env python3
"""CLI entry point for Squares."""

import argparse
import logging
from collections import Counter
from dataclasses import replace
from typing import List, Optional

from .board import DRAW, RED, YELLOW
from .cli import Game
from .config import (
    MAX_SIZE,
    MODE_AVA,
    MODE_HVA,
    MODE_HVH,
    VALID_PLAYERS,
    GameConfig,
    normalize_board_size,
    normalize_side,
)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play Squares in the terminal.")
    parser.add_argument(
        "--mode",
        default=MODE_HVA,
        choices=[MODE_HVH, MODE_HVA, MODE_AVA],
        help="Game mode: hvh (human-human), hva (human-ai), ava (ai-ai).",
    )
    parser.add_argument(
        "--human-side",
        default="red",
        choices=["red", "yellow"],
        help="Human side for hva mode.",
    )
    parser.add_argument("--size", type=int, default=5, help=f"Board size (2-{MAX_SIZE}).")
    parser.add_argument(
        "--time",
        type=float,
        default=60.0,
        help="Total clock per player for the whole game, in seconds.",
    )
    parser.add_argument("--red", default="strategomax", choices=sorted(VALID_PLAYERS), help="AI for Red.")
    parser.add_argument("--yellow", default="random", choices=sorted(VALID_PLAYERS), help="AI for Yellow.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the AI players.")
    parser.add_argument(
        "--games",
        type=int,
        default=1,
        help="With --mode ava, number of games to play; prints a tally.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for agent and session diagnostics.",
    )
    return parser


def _run_match(config: GameConfig, games: int) -> Counter:
    tally = Counter()
    for index in range(games):
        seed = None if config.seed is None else config.seed + 2 * index
        game_config = replace(config, seed=seed)
        winner = Game(config=game_config, quiet=True).play()
        tally[winner] += 1
        print(f"  game {index + 1}/{games}: {winner or 'none'}")
    return tally


def main(argv: Optional[List[str]] = None):
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        size = normalize_board_size(args.size)
    except ValueError as exc:
        parser.error(str(exc))
    if args.time <= 0:
        parser.error("--time must be positive")
    if args.games < 1:
        parser.error("--games must be >= 1")

    config = GameConfig(
        mode=args.mode,
        human_side=normalize_side(args.human_side),
        board_size=size,
        total_time_ms=int(args.time * 1000),
        red_player=args.red,
        yellow_player=args.yellow,
        seed=args.seed,
    )

    if args.mode == MODE_AVA and args.games > 1:
        tally = _run_match(config, args.games)
        print(
            f"  {args.red} (Red) {tally[RED]} - {tally[YELLOW]} {args.yellow} (Yellow), "
            f"draws {tally[DRAW]}"
        )
        return

    Game(config=config).play()


if __name__ == "__main__":
    main()
