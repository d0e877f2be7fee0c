"""Window geometry: board area, side panel, next preview, restart button"""
from dataclasses import dataclass
from typing import Tuple
from tetris_config import CONFIG

COLS, ROWS = 10, 20

MARGIN = 16
PANEL_W = 200
BUTTON = (160, 44)

@dataclass
class Dims:
    cell: int
    board_w: int
    board_h: int
    total_w: int
    total_h: int
    board_x: int
    board_y: int
    panel_x: int
    panel_y: int
    panel_w: int
    preview: int
    preview_x: int
    preview_y: int
    button: Tuple[int, int, int, int]

def compute_dims(cols: int = COLS, rows: int = ROWS) -> Dims:
    cell = int(CONFIG["CELL_SIZE"])
    board_w, board_h = cols * cell, rows * cell
    panel_x = MARGIN + board_w + MARGIN
    # next-piece box fits the widest variant (4 cells)
    preview = cell * 4
    bw, bh = BUTTON
    return Dims(
        cell=cell, board_w=board_w, board_h=board_h,
        total_w=panel_x + PANEL_W + MARGIN,
        total_h=MARGIN + board_h + MARGIN,
        board_x=MARGIN, board_y=MARGIN,
        panel_x=panel_x, panel_y=MARGIN, panel_w=PANEL_W,
        preview=preview,
        preview_x=panel_x + (PANEL_W - preview) // 2,
        preview_y=MARGIN + 120,
        button=(MARGIN + (board_w - bw) // 2, MARGIN + board_h // 2 + 28, bw, bh),
    )
