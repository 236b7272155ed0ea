from __future__ import annotations

import pygame

from . import config
from .logic import is_food_by_index, is_snake_by_index, to_cell
from .state import State


def background_colour(index: int) -> pygame.Color:
    return pygame.Color(config.BACKGROUND_ODD if index % 2 else config.BACKGROUND_EVEN)


def cell_colour(state: State, index: int) -> pygame.Color:
    if is_snake_by_index(state, index):
        return pygame.Color(config.SNAKE_COLOUR)
    if is_food_by_index(state, index):
        return pygame.Color(config.FOOD_COLOUR)
    return background_colour(index)


def cell_rect(index: int) -> pygame.Rect:
    x, y = to_cell(index)
    return pygame.Rect(x * config.SQUARE_SIZE, y * config.SQUARE_SIZE, config.SQUARE_SIZE, config.SQUARE_SIZE)


def draw_state(screen: pygame.Surface, state: State) -> None:
    for index in range(config.GRID_WIDTH * config.GRID_HEIGHT):
        pygame.draw.rect(screen, cell_colour(state, index), cell_rect(index))

    pygame.display.flip()
