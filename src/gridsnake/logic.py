from __future__ import annotations

import logging
import random

from . import config
from .input import movement
from .state import Cell, KeyState, State, add_vectors

logger = logging.getLogger(__name__)


def new_state(snake=config.INITIAL_SNAKE, food: Cell = config.INITIAL_FOOD) -> State:
    return State(snake=tuple(snake), food=food, last_update=0)


def should_step(state: State, now: float, frame_step: float = config.FRAME_STEP_MS) -> bool:
    return now - state.last_update > frame_step


def wrap(value: int, size: int) -> int:
    if value >= size:
        return 0
    if value < 0:
        return size - 1
    return value


def next_head(
    head: Cell,
    horizontal: int,
    vertical: int,
    width: int = config.GRID_WIDTH,
    height: int = config.GRID_HEIGHT,
) -> Cell:
    # Screen y grows downwards, so "up" subtracts.
    x, y = add_vectors(head, (horizontal, -vertical))
    return (wrap(x, width), wrap(y, height))


def random_cell(rng=random, width: int = config.GRID_WIDTH, height: int = config.GRID_HEIGHT) -> Cell:
    return (rng.randrange(width), rng.randrange(height))


def step(
    state: State,
    horizontal: int,
    vertical: int,
    now: float,
    rng=random,
    width: int = config.GRID_WIDTH,
    height: int = config.GRID_HEIGHT,
) -> State:
    """Advance the snake one cell and stamp the update time.

    Equal horizontal and vertical values, such as right plus up, cancel out
    and leave the snake where it is. Food may respawn anywhere on the grid,
    including under the snake, and the snake is free to run over itself.
    """
    if horizontal - vertical == 0:
        return state._replace(last_update=now)

    head = next_head(state.snake[-1], horizontal, vertical, width, height)
    if head != state.food:
        return state._replace(snake=state.snake[1:] + (head,), last_update=now)

    food = random_cell(rng, width, height)
    logger.debug("food eaten at %s, length %d, new food at %s", head, len(state.snake) + 1, food)
    return state._replace(snake=state.snake + (head,), food=food, last_update=now)


def tick(state: State, keys: KeyState, now: float, rng=random) -> State:
    if not should_step(state, now):
        return state
    horizontal, vertical = movement(keys)
    return step(state, horizontal, vertical, now, rng)


# --- Membership queries ---
def to_cell(index: int, width: int = config.GRID_WIDTH) -> Cell:
    return (index % width, index // width)


def is_snake(state: State, cell: Cell) -> bool:
    return cell in state.snake


def is_food(state: State, cell: Cell) -> bool:
    return cell == state.food


def is_snake_by_index(state: State, index: int) -> bool:
    return is_snake(state, to_cell(index))


def is_food_by_index(state: State, index: int) -> bool:
    return is_food(state, to_cell(index))
