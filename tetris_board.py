"""Board helpers: cells, validity, lock, line clear, scoring"""
import logging
from dataclasses import dataclass
from typing import List, Union
from tetris_piece import ColorPair, Piece, Shape, COLS, ROWS

logger = logging.getLogger(__name__)

class Empty:
    __slots__ = ()
    def __repr__(self): return "EMPTY"

EMPTY = Empty()

@dataclass(frozen=True)
class Occupied:
    color: ColorPair

Cell = Union[Empty, Occupied]
Board = List[List[Cell]]

SCORE_TABLE = {1: 100, 2: 300, 3: 500, 4: 800}

def new_board(rows: int = ROWS, cols: int = COLS) -> Board:
    return [[EMPTY] * cols for _ in range(rows)]

def is_occupied(cell: Cell) -> bool:
    return isinstance(cell, Occupied)

def is_valid(board: Board, shape: Shape, x: int, y: int) -> bool:
    rows, cols = len(board), len(board[0])
    for r,row in enumerate(shape):
        for c,v in enumerate(row):
            if not v: continue
            bx,by = x+c, y+r
            if bx<0 or bx>=cols or by>=rows: return False
            if by>=0 and is_occupied(board[by][bx]): return False
    return True

def lock(board: Board, piece: Piece) -> None:
    """Write the piece's color into the board. Cells above row 0 are dropped."""
    dropped = 0
    for bx,by in piece.cells():
        if by>=0: board[by][bx] = Occupied(piece.color)
        else: dropped += 1
    if dropped:
        logger.debug("locked %s at (%d,%d) with %d cells above the board",
                     piece.t, piece.x, piece.y, dropped)

def clear_lines(board: Board) -> int:
    rows, cols = len(board), len(board[0])
    c=0; y=rows-1
    while y>=0:
        if all(is_occupied(cell) for cell in board[y]):
            del board[y]; board.insert(0,[EMPTY]*cols); c+=1
        else: y-=1
    if c: logger.debug("cleared %d line(s)", c)
    return c

def line_score(cleared: int) -> int:
    return SCORE_TABLE.get(cleared, 0)
