#!/usr/bin/env python3
"""
Run the Squares game.

  python run.py                     → human (Red) vs StrategoMax on 5x5
  python run.py --mode ava          → StrategoMax vs random, watch it play
  python run.py --mode ava --games 20 --size 6 → match tally
"""
import sys

if __name__ == '__main__':
    from squares.game.main import main
    main(sys.argv[1:])
