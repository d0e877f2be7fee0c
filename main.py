import argparse
import logging
import sys

import pygame
from tetris_config import CONFIG
from tetris_input import KEY_NAMES
from tetris_layout import compute_dims
from tetris_loop import FrameScheduler, GameLoop
from tetris_render import Renderer
from tetris_rng import PieceRandom

logger = logging.getLogger("tetris")


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Neon Tetris")
    p.add_argument("--seed", type=int, default=CONFIG["SEED"],
                   help="seed for the next-piece randomizer")
    p.add_argument("--cell-size", type=int, default=CONFIG["CELL_SIZE"],
                   help="block size in pixels")
    p.add_argument("--log-level", default=CONFIG["LOG_LEVEL"],
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p.parse_args(argv)


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except (TypeError, pygame.error):
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def load_fonts():
    try:
        return pygame.font.SysFont(None, 24), pygame.font.SysFont(None, 48)
    except pygame.error as e:
        logger.warning("font init failed: %s", e)
        return None, None


def pump_events(loop, renderer) -> bool:
    """Feed queued pygame events to the loop. Returns False on quit.

    Without an initialised display there is no event queue; the loop keeps
    running on gravity alone.
    """
    if not pygame.display.get_init():
        return True
    for e in pygame.event.get():
        if e.type == pygame.QUIT:
            return False
        if e.type == pygame.KEYDOWN:
            if e.key == pygame.K_r:
                logger.info("restart requested")
                loop.restart(); continue
            name = KEY_NAMES.get(e.key)
            if name: loop.handle_key(name)
        if e.type == pygame.MOUSEBUTTONDOWN and e.button == 1:
            if renderer.restart_hit(e.pos):
                logger.info("restart requested")
                loop.restart()
    return True


def main(argv=None):
    args = parse_args(argv)
    CONFIG.update(SEED=args.seed, CELL_SIZE=args.cell_size, LOG_LEVEL=args.log_level)
    logging.basicConfig(level=CONFIG["LOG_LEVEL"],
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    pygame.init()
    if pygame.display.get_init():
        pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, pygame.MOUSEBUTTONDOWN])
    else:
        logger.error("video system unavailable; running without window or input")

    dims = compute_dims()
    try:
        screen = recreate_window(dims)
        pygame.display.set_caption("Neon Tetris")
    except pygame.error as e:
        logger.error("could not open a window: %s", e)
        screen = None
    font, big_font = load_fonts()

    renderer = Renderer(screen, dims, font, big_font)
    scheduler = FrameScheduler()
    loop = GameLoop(scheduler, PieceRandom(CONFIG["SEED"]), renderer)
    loop.start()
    clock = pygame.time.Clock()

    while True:
        clock.tick(CONFIG["FPS"])

        if not pump_events(loop, renderer):
            pygame.quit(); sys.exit()

        scheduler.run(pygame.time.get_ticks())

        if screen is not None and renderer.pop_dirty():
            pygame.display.flip()


if __name__ == '__main__':
    main()
