"""
Rendering for the neon Tetris board.

- Pre-render gradient block Surfaces per color pair & size and blit them.
- Pre-render the static background (grid + panel frame) once per Dims.
- Cache HUD text surfaces; re-render only when values change.
- Every drawing call is skipped when no screen Surface is available.
"""
from __future__ import annotations
import logging
import pygame
from dataclasses import dataclass
from typing import Dict, Tuple, Optional
from tetris_layout import Dims, COLS, ROWS
from tetris_board import Occupied
from tetris_piece import ColorPair, TETROMINOS

logger = logging.getLogger(__name__)

BG = pygame.Color("#1a1a2e")
GRID = pygame.Color("#0f3460")
PANEL = pygame.Color("#16213e")
PANEL_EDGE = pygame.Color("#0f3460")
TEXT = pygame.Color("#e0e0ff")
DIM_TEXT = pygame.Color("#9090c0")
ACCENT = pygame.Color("#e94560")


def make_block(color: ColorPair, size: int) -> pygame.Surface:
    """Square with a diagonal highlight-to-base gradient and a highlight border."""
    s = pygame.Surface((size, size))
    hi, base = pygame.Color(color.highlight), pygame.Color(color.base)
    span = max(1, 2*size - 2)
    for i in range(2*size - 1):
        x0, x1 = max(0, i-size+1), min(i, size-1)
        pygame.draw.line(s, hi.lerp(base, i/span), (x0, i-x0), (x1, i-x1))
    if size > 4:
        pygame.draw.rect(s, hi, (1, 1, size-2, size-2), 2)
    return s


def preview_block_size(shape, cell: int) -> int:
    scale = 0.8 if len(shape) > 2 or len(shape[0]) > 2 else 1.0
    return int(cell * scale)


@dataclass
class HudCache:
    score: int = -1
    title: Optional[pygame.Surface] = None
    score_s: Optional[pygame.Surface] = None
    next_label: Optional[pygame.Surface] = None
    controls: Optional[list] = None


class Renderer:
    """Draws the board, active piece, next preview, score and game-over overlay."""
    def __init__(self, screen: Optional[pygame.Surface], dims: Dims,
                 font: Optional[pygame.font.Font] = None,
                 big_font: Optional[pygame.font.Font] = None):
        self.screen = screen
        self.dims = dims
        self.font = font
        self.big_font = big_font or font
        self.hud = HudCache()
        self.game_over_visible = False
        self.dirty = False
        self._blocks: Dict[Tuple[ColorPair, int], pygame.Surface] = {}
        if screen is None:
            logger.error("no drawing surface for the board; rendering is disabled")
        if font is None:
            logger.warning("no font available; text will not be drawn")
        self.pv_x, self.pv_y = dims.preview_x, dims.preview_y
        self.restart_rect = pygame.Rect(dims.button)
        self.bg = self._make_static() if screen is not None else None

    # ---------- Static background (grid + panel) ----------
    def _make_static(self) -> pygame.Surface:
        d = self.dims
        bg = pygame.Surface((d.total_w, d.total_h))
        bg.fill(BG)
        pygame.draw.rect(bg, (0, 0, 0), (d.board_x, d.board_y, d.board_w, d.board_h))
        for x in range(1, COLS):
            X = d.board_x + x*d.cell
            pygame.draw.line(bg, GRID, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(1, ROWS):
            Y = d.board_y + y*d.cell
            pygame.draw.line(bg, GRID, (d.board_x, Y), (d.board_x + d.board_w, Y))
        panel_rect = pygame.Rect(d.panel_x, d.panel_y, d.panel_w, d.board_h)
        pygame.draw.rect(bg, PANEL, panel_rect)
        pygame.draw.rect(bg, PANEL_EDGE, panel_rect, 1)
        frame = pygame.Rect(self.pv_x, self.pv_y, d.preview, d.preview)
        pygame.draw.rect(bg, (0, 0, 0), frame)
        pygame.draw.rect(bg, PANEL_EDGE, frame, 1)
        return bg

    def block(self, color: ColorPair, size: int) -> pygame.Surface:
        key = (color, size)
        if key not in self._blocks:
            self._blocks[key] = make_block(color, size)
        return self._blocks[key]

    # ---------- Collaborator signals ----------
    def show_score(self, score: int):
        if score == self.hud.score: return
        self.hud.score = score
        if self.font:
            self.hud.score_s = self.font.render(f"Score: {score}", True, TEXT)

    def show_game_over(self, visible: bool):
        self.game_over_visible = visible

    def restart_hit(self, pos) -> bool:
        return self.game_over_visible and self.restart_rect.collidepoint(pos)

    def pop_dirty(self) -> bool:
        d, self.dirty = self.dirty, False
        return d

    # ---------- Frame ----------
    def draw(self, state):
        if self.screen is None: return
        d = self.dims
        screen = self.screen
        screen.blit(self.bg, (0, 0))
        for y, row in enumerate(state.board):
            for x, cell in enumerate(row):
                if isinstance(cell, Occupied):
                    screen.blit(self.block(cell.color, d.cell), (d.board_x + x*d.cell, d.board_y + y*d.cell))
        p = state.current
        if p is not None:
            surf = self.block(p.color, d.cell)
            for bx, by in p.cells():
                if by >= 0:
                    screen.blit(surf, (d.board_x + bx*d.cell, d.board_y + by*d.cell))
        if state.next_type:
            self._draw_next(state.next_type)
        self._draw_hud()
        if self.game_over_visible:
            self._draw_game_over()
        self.dirty = True

    def _draw_next(self, t: str):
        v = TETROMINOS[t]
        size = preview_block_size(v.shape, self.dims.cell)
        w, h = len(v.shape[0]) * size, len(v.shape) * size
        sx = self.pv_x + (self.dims.preview - w) // 2
        sy = self.pv_y + (self.dims.preview - h) // 2
        surf = self.block(v.color, size)
        for y, row in enumerate(v.shape):
            for x, val in enumerate(row):
                if val:
                    self.screen.blit(surf, (sx + x*size, sy + y*size))

    def _draw_hud(self):
        if not self.font: return
        d = self.dims
        f = self.font
        if self.hud.title is None:
            self.hud.title = f.render("NEON TETRIS", True, ACCENT)
            self.hud.next_label = f.render("Next:", True, TEXT)
            self.hud.controls = [
                f.render("Controls:", True, TEXT),
                f.render("←/→ Move", True, DIM_TEXT),
                f.render("↑ Rotate", True, DIM_TEXT),
                f.render("↓ Soft drop", True, DIM_TEXT),
                f.render("R Restart", True, DIM_TEXT),
            ]
        screen = self.screen
        screen.blit(self.hud.title, (d.panel_x + 12, d.panel_y + 12))
        if self.hud.score_s: screen.blit(self.hud.score_s, (d.panel_x + 12, d.panel_y + 48))
        screen.blit(self.hud.next_label, (d.panel_x + 12, d.panel_y + 92))
        y = self.pv_y + d.preview + 30
        for surf in self.hud.controls:
            screen.blit(surf, (d.panel_x + 12, y)); y += 22

    def _draw_game_over(self):
        d = self.dims
        shade = pygame.Surface((d.board_w, d.board_h), pygame.SRCALPHA)
        shade.fill((0, 0, 0, 180))
        self.screen.blit(shade, (d.board_x, d.board_y))
        pygame.draw.rect(self.screen, ACCENT, self.restart_rect, border_radius=6)
        if not (self.font and self.big_font): return
        msg = self.big_font.render("GAME OVER", True, TEXT)
        self.screen.blit(msg, msg.get_rect(center=(d.board_x + d.board_w // 2, d.board_y + d.board_h // 2)))
        label = self.font.render("Restart", True, TEXT)
        self.screen.blit(label, label.get_rect(center=self.restart_rect.center))
