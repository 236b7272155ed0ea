from __future__ import annotations

from collections.abc import Callable, Iterator

import pygame

from . import config


class FrameClock:
    """Frame-rate limited source of millisecond timestamps."""

    def __init__(
        self,
        fps: int = config.FPS,
        time_source: Callable[[], int] | None = None,
        limiter: pygame.time.Clock | None = None,
    ):
        self.fps = fps
        self.time_source = time_source or pygame.time.get_ticks
        self.limiter = limiter or pygame.time.Clock()
        self.running = False

    def now(self) -> int:
        return self.time_source()

    def frames(self) -> Iterator[int]:
        self.running = True
        while self.running:
            yield self.now()
            self.limiter.tick(self.fps)

    def stop(self) -> None:
        self.running = False
