import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame

from tetris_engine import Engine, Intent
from tetris_layout import compute_dims
from tetris_render import RenderAssets


def test_draws_snapshot_without_display():
    pygame.font.init()
    font = pygame.font.Font(None, 22)
    engine = Engine({"RNG_SEED": 5})
    engine.apply(Intent.HOLD)
    snap = engine.tick(0)

    dims = compute_dims(10, 20, 16)
    render = RenderAssets(dims, font, snap.colors)
    screen = pygame.Surface((dims.total_w, dims.total_h))
    render.draw(screen, snap, font)

    # ghost outline is drawn in the bottom rows of the board
    row, col = snap.piece.cells(snap.ghost_row)[0]
    x = dims.board_x + col * dims.cell + 4
    y = dims.board_y + row * dims.cell + 4
    assert screen.get_at((x, y))[:3] == snap.colors[snap.piece.kind]
