from __future__ import annotations
import logging
import time
from pathlib import Path
import pygame

from engine.api.config import EngineConfig
from engine.api.frame_data import FrameData
from engine.app.context import Context
from engine.app.loader import GAMES_DIR, load_game_manifest, load_game_module
from engine.input.keymap import KeyMapper

log = logging.getLogger(__name__)


def run_game(
    game_id: str,
    screen_size: tuple[int, int],
    fps: int = 60,
    debug: bool = False,
    games_dir: Path = GAMES_DIR,
):
    # load game before touching the display so a bad id fails cleanly
    game_root = games_dir / game_id
    manifest = load_game_manifest(game_root)
    module = load_game_module(game_root)
    game = module.get_game()

    pygame.init()
    pygame.display.set_caption(manifest.get("title", game_id))
    screen = pygame.display.set_mode(screen_size)
    clock = pygame.time.Clock()

    cfg = EngineConfig(screen_size=screen_size, fps=fps, debug=debug)
    ctx = Context(
        screen=screen,
        clock=clock,
        cfg=cfg,
        keymap=KeyMapper(),
        screen_size=screen_size,
    )

    running = True
    try:
        game.on_load(ctx, manifest)
        log.info("started %s at %dx%d", game_id, *screen_size)

        while running:
            dt = clock.tick(fps)
            keys = []
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
                else:
                    key = ctx.keymap.map_event(event)
                    if key is not None:
                        keys.append(key)
                    game.on_event(event)

            if not running:
                break

            frame_data = FrameData(timestamp=time.time(), keys=keys)
            game.on_update(dt, frame_data)
            game.on_draw(screen)
            pygame.display.flip()

    finally:
        game.on_unload()
        pygame.quit()
        log.info("stopped %s", game_id)
