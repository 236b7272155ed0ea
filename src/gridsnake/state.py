from __future__ import annotations

from collections import namedtuple

Cell = tuple[int, int]

State = namedtuple("State", ["snake", "food", "last_update"])
# snake: tuple[(x, y)], head is the last element, tail the first.
# food: (x, y)
# last_update: ms timestamp of the last step attempt

KeyState = namedtuple("KeyState", ["left", "right", "up", "down"])
# Each flag is 0 or 1; at most one is set at a time.

# The snake starts out heading right.
DEFAULT_KEYS = KeyState(left=0, right=1, up=0, down=0)


def add_vectors(a: Cell, b: Cell) -> Cell:
    return (a[0] + b[0], a[1] + b[1])
