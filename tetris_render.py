"""
Rendering helpers: draw an engine Snapshot onto a pygame Surface.

- Pre-render block cell Surfaces per color (normal + ghost outline) and blit them.
- Pre-render the static background (grid + panel frame) once per Dims.
- Cache HUD text surfaces; re-render only when values change.

Nothing here touches the engine; it only reads snapshots.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, Optional, Tuple
from tetris_engine import Snapshot
from tetris_layout import Dims
from tetris_piece import SHAPES

TEXT = (200, 210, 240)
DIM_TEXT = (165, 175, 215)


@dataclass
class HudCache:
    level: int = -1
    lines: int = -1
    title: Optional[pygame.Surface] = None
    level_s: Optional[pygame.Surface] = None
    lines_s: Optional[pygame.Surface] = None
    controls: Optional[list] = None


class RenderAssets:
    """Holds all pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, font: pygame.font.Font, colors: Dict[str, Tuple[int,int,int]]):
        self.dims = dims
        self.font = font
        self.colors = colors
        self._make_static()
        self._make_cells()
        self.hud = HudCache()

    # ---------- Static background (grid + panel) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill((10,13,34))
        grid_col = (40,50,90)
        for x in range(d.cols+1):
            X = d.board_x + x*d.cell
            pygame.draw.line(self.bg, grid_col, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(d.rows+1):
            Y = d.board_y + y*d.cell
            pygame.draw.line(self.bg, grid_col, (d.board_x, Y), (d.board_x + d.board_w, Y))
        panel_rect = pygame.Rect(d.panel_x, d.panel_y, d.panel_w, d.board_h)
        pygame.draw.rect(self.bg, (21,25,53), panel_rect)
        pygame.draw.rect(self.bg, (50,60,100), panel_rect, 1)
        self.pv_cell = max(10, int(d.cell*0.5))

    # ---------- Small cell sprites (solid + ghost outline) ----------
    def _make_cells(self):
        self.cell_surf: Dict[str, pygame.Surface] = {}
        self.ghost_surf: Dict[str, pygame.Surface] = {}
        self.mini_surf: Dict[str, pygame.Surface] = {}
        c = self.dims.cell
        for t, col in self.colors.items():
            s = pygame.Surface((c-2, c-2))
            s.fill(col)
            self.cell_surf[t] = s
            g = pygame.Surface((c-8, c-8), pygame.SRCALPHA)
            pygame.draw.rect(g, col, (0,0,c-8,c-8), 2)
            self.ghost_surf[t] = g
            m = pygame.Surface((self.pv_cell-2, self.pv_cell-2))
            m.fill(col)
            self.mini_surf[t] = m

    # ---------- Per-cell helpers ----------
    def draw_cell(self, screen: pygame.Surface, t: str, row: int, col: int):
        if row < 0:
            return
        rx = self.dims.board_x + col*self.dims.cell + 1
        ry = self.dims.board_y + row*self.dims.cell + 1
        screen.blit(self.cell_surf[t], (rx, ry))

    def draw_ghost_cell(self, screen: pygame.Surface, t: str, row: int, col: int):
        if row < 0:
            return
        rx = self.dims.board_x + col*self.dims.cell + 4
        ry = self.dims.board_y + row*self.dims.cell + 4
        screen.blit(self.ghost_surf[t], (rx, ry))

    def draw_mini(self, screen: pygame.Surface, t: str, x: int, y: int):
        for r, line in enumerate(SHAPES[t]):
            for c, v in enumerate(line):
                if v:
                    screen.blit(self.mini_surf[t], (x + c*self.pv_cell + 1, y + r*self.pv_cell + 1))

    # ---------- Frame ----------
    def draw(self, screen: pygame.Surface, snap: Snapshot, big_font: pygame.font.Font):
        screen.blit(self.bg, (0, 0))
        for r, line in enumerate(snap.board):
            for c, t in enumerate(line):
                if t:
                    self.draw_cell(screen, t, r, c)
        p = snap.piece
        for r, c in p.cells(snap.ghost_row):
            self.draw_ghost_cell(screen, p.kind, r, c)
        for r, c in p.cells():
            self.draw_cell(screen, p.kind, r, c)
        self.draw_panel_hud(screen, snap)

        d = self.dims
        center = (d.board_x + d.board_w // 2, d.board_y + d.board_h // 2)
        if snap.game_over:
            msg = big_font.render("GAME OVER (R to Restart)", True, (255, 220, 220))
            screen.blit(msg, msg.get_rect(center=center))
        elif snap.paused:
            msg = big_font.render("PAUSED (P to Resume)", True, (220, 240, 255))
            screen.blit(msg, msg.get_rect(center=center))

    # ---------- HUD / Panel ----------
    def draw_panel_hud(self, screen: pygame.Surface, snap: Snapshot):
        d = self.dims
        f = self.font
        x = d.panel_x + 12
        if self.hud.title is None:
            self.hud.title = f.render("Tetris", True, (197,202,233))
        if snap.level != self.hud.level:
            self.hud.level = snap.level
            self.hud.level_s = f.render(f"Level: {snap.level}", True, TEXT)
        if snap.lines != self.hud.lines:
            self.hud.lines = snap.lines
            self.hud.lines_s = f.render(f"Lines: {snap.lines}", True, TEXT)
        screen.blit(self.hud.title, (x, d.panel_y + 12))
        screen.blit(self.hud.level_s, (x, d.panel_y + 40))
        screen.blit(self.hud.lines_s, (x, d.panel_y + 64))

        hold_col = DIM_TEXT if snap.hold_locked else TEXT
        screen.blit(f.render("Hold:", True, hold_col), (x, d.panel_y + 96))
        if snap.held:
            self.draw_mini(screen, snap.held, x + 60, d.panel_y + 96)

        screen.blit(f.render("Next:", True, TEXT), (x, d.panel_y + 96 + self.pv_cell*3))
        y = d.panel_y + 96 + self.pv_cell*4
        for t in snap.preview:
            self.draw_mini(screen, t, x + 60, y)
            y += self.pv_cell * 3

        if not self.hud.controls:
            self.hud.controls = [
                f.render("Controls:", True, TEXT),
                f.render("←/→ Move  ↓ Soft drop", True, DIM_TEXT),
                f.render("↑ Rotate  Space Hard", True, DIM_TEXT),
                f.render("C/Shift Hold", True, DIM_TEXT),
                f.render("P/Esc Pause • R Restart", True, DIM_TEXT),
            ]
        y = d.panel_y + d.board_h - 20 * len(self.hud.controls) - 8
        for surf in self.hud.controls:
            screen.blit(surf, (x, y)); y += 20
