import unittest

from squares.game.board import RED, YELLOW
from squares.game.cli import parse_move_text
from squares.game.config import (
    CONTROLLER_AI,
    CONTROLLER_HUMAN,
    MODE_AVA,
    MODE_HVA,
    GameConfig,
    merge_config,
    normalize_board_size,
    normalize_side,
)
from squares.players.validator import build_move_from_payload, parse_side


class GameConfigTests(unittest.TestCase):
    def test_controllers_per_mode(self):
        self.assertEqual(
            GameConfig(mode=MODE_HVA, human_side=YELLOW).controllers(),
            {YELLOW: CONTROLLER_HUMAN, RED: CONTROLLER_AI},
        )
        self.assertEqual(
            GameConfig(mode=MODE_AVA).controllers(),
            {RED: CONTROLLER_AI, YELLOW: CONTROLLER_AI},
        )

    def test_merge_config_normalizes(self):
        merged = merge_config(
            GameConfig(),
            {"mode": " HVA ", "human_side": "yellow", "board_size": "6", "total_time_ms": 2000, "seed": "4"},
        )
        self.assertEqual(merged.mode, MODE_HVA)
        self.assertEqual(merged.human_side, YELLOW)
        self.assertEqual(merged.board_size, 6)
        self.assertEqual(merged.total_time_ms, 2000)
        self.assertEqual(merged.seed, 4)
        self.assertIs(merge_config(merged, None), merged)

    def test_merge_config_rejects_bad_values(self):
        bad = [
            {"mode": "solo"},
            {"human_side": "green"},
            {"board_size": 1},
            {"board_size": "big"},
            {"total_time_ms": 0},
            {"red_player": "oracle"},
            {"seed": "x"},
        ]
        for payload in bad:
            with self.subTest(payload=payload):
                with self.assertRaises(ValueError):
                    merge_config(GameConfig(), payload)

    def test_normalizers(self):
        self.assertEqual(normalize_side("R"), RED)
        self.assertEqual(normalize_board_size(20), 20)
        with self.assertRaises(ValueError):
            normalize_board_size(21)


class MoveParsingTests(unittest.TestCase):
    def test_parse_move_text(self):
        self.assertEqual(parse_move_text("2 3 t"), {"row": "2", "col": "3", "side": "t"})
        self.assertEqual(parse_move_text("2,3,b"), {"row": "2", "col": "3", "side": "b"})
        self.assertEqual(parse_move_text("2,3l"), {"row": "2", "col": "3", "side": "l"})
        self.assertIsNone(parse_move_text("a 3 t"))
        self.assertIsNone(parse_move_text("2"))

    def test_parse_side(self):
        self.assertEqual(parse_side("t"), 0)
        self.assertEqual(parse_side("R"), 1)
        self.assertEqual(parse_side(2), 2)
        with self.assertRaises(ValueError):
            parse_side(4)

    def test_build_move_from_payload(self):
        move, error = build_move_from_payload({"row": "1", "col": 2, "side": "l"})
        self.assertIsNone(error)
        self.assertEqual(move.as_tuple(), (1, 2, 3))

        move, error = build_move_from_payload(["1", "2", "l"])
        self.assertIsNone(move)
        self.assertIsNotNone(error)


if __name__ == "__main__":
    unittest.main()
