"""Piece catalog, color pairs, rotation"""
from dataclasses import dataclass
from typing import List, Dict, Tuple

COLS, ROWS = 10, 20

Shape = List[List[int]]

@dataclass(frozen=True)
class ColorPair:
    base: str
    highlight: str

@dataclass(frozen=True)
class Variant:
    name: str
    shape: Tuple[Tuple[int, ...], ...]
    color: ColorPair

def _variant(name, shape, base, highlight):
    return Variant(name, tuple(tuple(r) for r in shape), ColorPair(base, highlight))

TETROMINOS: Dict[str, Variant] = {
    "I": _variant("I", [[1,1,1,1]], "#00f0f0", "#a0ffff"),
    "O": _variant("O", [[1,1],[1,1]], "#f0f000", "#ffffa0"),
    "T": _variant("T", [[0,1,0],[1,1,1]], "#a000f0", "#e0a0ff"),
    "S": _variant("S", [[0,1,1],[1,1,0]], "#00f000", "#a0ffa0"),
    "Z": _variant("Z", [[1,1,0],[0,1,1]], "#f00000", "#ffa0a0"),
    "J": _variant("J", [[1,0,0],[1,1,1]], "#0000f0", "#a0a0ff"),
    "L": _variant("L", [[0,0,1],[1,1,1]], "#f0a000", "#ffd0a0"),
}
PIECES = ["I","O","T","S","Z","J","L"]

def rotate_cw(m): return [list(r) for r in zip(*m[::-1])]

@dataclass
class Piece:
    t: str
    shape: Shape
    color: ColorPair
    x: int
    y: int
    @staticmethod
    def spawn(t: str, cols: int = COLS) -> "Piece":
        v = TETROMINOS[t]
        s = [list(r) for r in v.shape]
        w = len(s[0])
        return Piece(t, s, v.color, cols//2 - w//2, 0)

    def cells(self):
        """Absolute (x, y) board coordinates of every filled cell."""
        return [(self.x+c, self.y+r)
                for r,row in enumerate(self.shape)
                for c,v in enumerate(row) if v]
