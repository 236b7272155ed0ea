from __future__ import annotations

import logging
import random

import pygame

from . import config
from .clock import FrameClock
from .input import handle_input
from .logic import new_state, tick
from .render import draw_state
from .state import DEFAULT_KEYS

logger = logging.getLogger(__name__)


def wants_quit(events) -> bool:
    for event in events:
        if event.type == pygame.QUIT:
            return True
        if event.type == pygame.KEYDOWN and event.key in (pygame.K_ESCAPE, pygame.K_q):
            return True
    return False


def main(seed: int | None = None) -> None:
    pygame.init()
    screen = pygame.display.set_mode((config.WIDTH, config.HEIGHT))
    pygame.display.set_caption("Snake")
    clock = FrameClock(config.FPS)
    rng = random.Random(seed)

    state = new_state()
    keys = DEFAULT_KEYS
    logger.info("starting %dx%d game, seed=%s", config.GRID_WIDTH, config.GRID_HEIGHT, seed)

    try:
        for now in clock.frames():
            events = pygame.event.get()
            if wants_quit(events):
                clock.stop()
                continue

            keys = handle_input(keys, events)
            state = tick(state, keys, now, rng)
            draw_state(screen, state)
    finally:
        pygame.quit()
        logger.info("game closed, snake length %d", len(state.snake))
