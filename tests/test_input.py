import unittest

import pygame

from tetris_input import KEY_NAMES, handle_key
from tetris_rng import PieceRandom
from tetris_state import new_game


class InputTests(unittest.TestCase):
    def test_arrow_keys_are_named(self):
        self.assertEqual(KEY_NAMES[pygame.K_LEFT], "Left")
        self.assertEqual(KEY_NAMES[pygame.K_RIGHT], "Right")
        self.assertEqual(KEY_NAMES[pygame.K_UP], "Up")
        self.assertEqual(KEY_NAMES[pygame.K_DOWN], "Down")
        self.assertNotIn(pygame.K_SPACE, KEY_NAMES)

    def test_directional_keys(self):
        s = new_game(PieceRandom(11))
        x, y = s.current.x, s.current.y
        self.assertTrue(handle_key(s, "Left"))
        self.assertEqual(s.current.x, x - 1)
        self.assertTrue(handle_key(s, "Right"))
        self.assertEqual(s.current.x, x)
        self.assertTrue(handle_key(s, "Down"))
        self.assertEqual(s.current.y, y + 1)

    def test_unknown_key_ignored(self):
        s = new_game(PieceRandom(11))
        before = (s.current.x, s.current.y, s.current.shape)
        self.assertFalse(handle_key(s, "Space"))
        self.assertEqual((s.current.x, s.current.y, s.current.shape), before)

    def test_no_input_after_game_over(self):
        s = new_game(PieceRandom(11))
        s.game_over = True
        for key in ("Left", "Right", "Up", "Down"):
            self.assertFalse(handle_key(s, key))


if __name__ == "__main__":
    unittest.main()
