import unittest

from tetris_piece import TETROMINOS, PIECES, Piece, rotate_cw, COLS
from tetris_rng import PieceRandom


class RotationTests(unittest.TestCase):
    def test_rotates_clockwise(self):
        self.assertEqual(rotate_cw([[0, 1, 0], [1, 1, 1]]), [[1, 0], [1, 1], [1, 0]])
        self.assertEqual(rotate_cw([[1, 1, 1, 1]]), [[1], [1], [1], [1]])

    def test_four_rotations_are_identity(self):
        for t in PIECES:
            shape = [list(r) for r in TETROMINOS[t].shape]
            s = shape
            for _ in range(4):
                s = rotate_cw(s)
            self.assertEqual(s, shape, t)

    def test_does_not_mutate_input(self):
        shape = [[1, 0, 0], [1, 1, 1]]
        rotate_cw(shape)
        self.assertEqual(shape, [[1, 0, 0], [1, 1, 1]])


class SpawnTests(unittest.TestCase):
    def test_catalog_has_seven_variants(self):
        self.assertEqual(sorted(TETROMINOS), sorted("IOTSZJL"))
        for v in TETROMINOS.values():
            self.assertEqual(sum(map(sum, v.shape)), 4)

    def test_spawn_is_centered_at_top(self):
        self.assertEqual((Piece.spawn("O").x, Piece.spawn("O").y), (4, 0))
        self.assertEqual(Piece.spawn("I").x, COLS // 2 - 2)
        self.assertEqual(Piece.spawn("T").x, COLS // 2 - 1)

    def test_spawn_copies_template(self):
        p = Piece.spawn("L")
        p.shape[0][0] = 1
        self.assertEqual(TETROMINOS["L"].shape[0][0], 0)
        self.assertEqual(p.color, TETROMINOS["L"].color)

    def test_unknown_variant(self):
        with self.assertRaises(KeyError):
            Piece.spawn("X")


class RandomTests(unittest.TestCase):
    def test_seeded_sequence_repeats(self):
        r1, r2 = PieceRandom(7), PieceRandom(7)
        self.assertEqual([r1.next_piece() for _ in range(50)], [r2.next_piece() for _ in range(50)])

    def test_seed_is_logged(self):
        with self.assertLogs("tetris_rng", level="INFO") as logs:
            PieceRandom(42)
        self.assertIn("42", logs.output[0])

    def test_draws_every_variant(self):
        r = PieceRandom(1)
        self.assertEqual(set(r.next_piece() for _ in range(500)), set(PIECES))


if __name__ == "__main__":
    unittest.main()
