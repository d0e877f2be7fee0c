"""Next-piece randomizer"""
import logging
import random
from typing import Optional
from tetris_piece import PIECES

logger = logging.getLogger(__name__)

class PieceRandom:
    """Uniform draw over the seven variants, with replacement.

    Repeats are allowed and there is no bag or drought protection. Pass a
    seed for a reproducible sequence.
    """
    PIECES = PIECES

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)
        logger.info("piece randomizer seed: %s", seed)

    def next_piece(self) -> str:
        return self._rng.choice(self.PIECES)
