# twisty_sim/tests/test_scramble.py
import random
import unittest

from twisty_sim.logic.adjacency import policy_for
from twisty_sim.logic.moves import PuzzleVariant, base_face, moves_for
from twisty_sim.logic.scramble import MAX_ATTEMPTS, generate_moves, generate_scramble


class StuckRandom:
    """Siempre sortea el mismo movimiento y cuenta los sorteos."""

    def __init__(self, move):
        self.move = move
        self.calls = 0

    def choice(self, seq):
        self.calls += 1
        return self.move


class TestGenerateScramble(unittest.TestCase):
    def test_exact_length_for_all_variants(self):
        for variant in PuzzleVariant:
            for n in (0, 1, 2, 20, 70, 80):
                seq = generate_scramble(variant, n, seed=n)
                self.assertEqual(len(seq.split()), n, (variant, n))

    def test_zero_moves_is_empty_string(self):
        self.assertEqual(generate_scramble(PuzzleVariant.CUBE_3X3X3, 0), "")

    def test_negative_raises(self):
        with self.assertRaises(ValueError):
            generate_scramble(PuzzleVariant.CUBE_3X3X3, -1)

    def test_seed_is_reproducible(self):
        a = generate_scramble(PuzzleVariant.MEGAMINX, 70, seed=42)
        b = generate_scramble(PuzzleVariant.MEGAMINX, 70, seed=42)
        self.assertEqual(a, b)

    def test_cube_scramble_of_20(self):
        vocab = set(moves_for(PuzzleVariant.CUBE_3X3X3))
        rng = random.Random(1234)
        for _ in range(10):
            moves = generate_moves(PuzzleVariant.CUBE_3X3X3, 20, rng=rng)
            self.assertEqual(len(moves), 20)
            self.assertTrue(set(moves) <= vocab)
            for prev, nxt in zip(moves, moves[1:]):
                self.assertNotEqual(prev, nxt)
                self.assertNotEqual(base_face(prev), base_face(nxt))

    def test_megaminx_rotation_not_repeated(self):
        rng = random.Random(99)
        for _ in range(200):
            moves = generate_moves(PuzzleVariant.MEGAMINX, 70, rng=rng)
            self.assertEqual(len(moves), 70)
            for prev, nxt in zip(moves, moves[1:]):
                if prev.startswith("y"):
                    self.assertFalse(nxt.startswith("y"), (prev, nxt))
                if prev.startswith("z"):
                    self.assertFalse(nxt.startswith("z"), (prev, nxt))

    def test_adjacency_violations_are_rare(self):
        # La restricción no es absoluta (tope de reintentos): se verifica su cota
        rng = random.Random(2024)
        for variant in PuzzleVariant:
            policy = policy_for(variant)
            pairs = 0
            violations = 0
            for _ in range(200):
                moves = generate_moves(variant, 40, rng=rng)
                for prev, nxt in zip(moves, moves[1:]):
                    pairs += 1
                    if not policy.is_allowed(prev, nxt):
                        violations += 1
            self.assertLess(violations / pairs, 0.01, variant)


class TestRetryCap(unittest.TestCase):
    def test_cap_exhaustion_accepts_last_candidate(self):
        rng = StuckRandom("R")
        moves = generate_moves(PuzzleVariant.CUBE_3X3X3, 5, rng=rng)

        self.assertEqual(moves, ["R"] * 5)
        # primer movimiento: 1 sorteo; los demás agotan el tope
        self.assertEqual(rng.calls, 1 + 4 * MAX_ATTEMPTS)


if __name__ == "__main__":
    unittest.main()
