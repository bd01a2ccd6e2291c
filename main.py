import logging
import sys

import pygame

from tetris_config import CONFIG
from tetris_engine import Engine
from tetris_input import InputMapper
from tetris_layout import compute_dims
from tetris_render import RenderAssets

logging.basicConfig(level=logging.INFO)
log = logging.getLogger(__name__)


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except TypeError:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def main():
    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, pygame.KEYUP])

    engine = Engine()
    dims = compute_dims(CONFIG["COLS"], CONFIG["ROWS"])
    screen = recreate_window(dims)
    pygame.display.set_caption("Tetris")
    font = pygame.font.SysFont(None, 22)
    big_font = pygame.font.SysFont(None, 42)

    snap = engine.snapshot()
    render = RenderAssets(dims, font, snap.colors)
    controls = InputMapper()
    clock = pygame.time.Clock()
    log.info("started %dx%d board", dims.cols, dims.rows)

    while True:
        dt = clock.tick(CONFIG["TARGET_FPS"])

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            for intent in controls.on_event(e):
                engine.apply(intent)

        keys = pygame.key.get_pressed()
        for intent in controls.on_frame(dt, keys[pygame.K_LEFT], keys[pygame.K_RIGHT], keys[pygame.K_DOWN]):
            engine.apply(intent)

        snap = engine.tick(pygame.time.get_ticks())
        render.draw(screen, snap, big_font)
        pygame.display.flip()


if __name__ == '__main__':
    main()
