from __future__ import annotations

import pygame

from .state import KeyState

KEY_DIRECTIONS = {
    pygame.K_UP: "up",
    pygame.K_DOWN: "down",
    pygame.K_LEFT: "left",
    pygame.K_RIGHT: "right",
}


def key_down(keys: KeyState, key: int) -> KeyState:
    """Latch the pressed direction, clearing every other one."""
    direction = KEY_DIRECTIONS.get(key)
    if direction is None or getattr(keys, direction) == 1:
        return keys
    cleared = KeyState(left=0, right=0, up=0, down=0)
    return cleared._replace(**{direction: 1})


def key_up(keys: KeyState, key: int) -> KeyState:
    # Releasing a key keeps the latched direction.
    return keys


def handle_input(keys: KeyState, events) -> KeyState:
    for event in events:
        if event.type == pygame.KEYDOWN:
            keys = key_down(keys, event.key)
        elif event.type == pygame.KEYUP:
            keys = key_up(keys, event.key)
    return keys


def movement(keys: KeyState) -> tuple[int, int]:
    """Return (horizontal, vertical) intent; vertical is positive for up."""
    return keys.right - keys.left, keys.up - keys.down
