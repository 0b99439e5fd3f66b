import random
import unittest

from squares.game.board import Board
from squares.players.sampling import random_choice, random_subset


class RandomSubsetTests(unittest.TestCase):
    def test_size_is_min_of_request_and_population(self):
        rng = random.Random(7)
        items = list(range(25))
        for size in (0, 1, 10, 25, 40):
            subset = random_subset(items, size, rng)
            self.assertEqual(len(subset), min(size, len(items)))
            self.assertEqual(len(set(subset)), len(subset))
            self.assertTrue(set(subset) <= set(items))

    def test_does_not_mutate_input(self):
        moves = Board(3).valid_moves()
        before = list(moves)
        random_subset(moves, 5, random.Random(1))
        self.assertEqual(moves, before)

    def test_same_seed_same_sample(self):
        items = list(range(50))
        self.assertEqual(
            random_subset(items, 10, random.Random(42)),
            random_subset(items, 10, random.Random(42)),
        )

    def test_every_item_can_be_picked(self):
        rng = random.Random(3)
        items = list(range(12))
        seen = set()
        for _ in range(200):
            seen.update(random_subset(items, 3, rng))
        self.assertEqual(seen, set(items))

    def test_empty_input(self):
        self.assertEqual(random_subset([], 10, random.Random(0)), [])
        self.assertIsNone(random_choice([], random.Random(0)))


if __name__ == "__main__":
    unittest.main()
