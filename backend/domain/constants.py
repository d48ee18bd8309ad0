"""
Game constants for Corny.
"""

from enum import Enum
from typing import Tuple


class Direction(Enum):
    """A move on the board. The value is the protocol token."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def delta(self) -> Tuple[int, int]:
        return _DELTAS[self]

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]


# Up => y + 1, origin is the bottom-left corner
_DELTAS = {
    Direction.UP: (0, 1),
    Direction.DOWN: (0, -1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

UP = Direction.UP
DOWN = Direction.DOWN
LEFT = Direction.LEFT
RIGHT = Direction.RIGHT

# Candidate order used whenever all four moves are enumerated
DIRECTIONS = (UP, DOWN, LEFT, RIGHT)
VALID_MOVES = {d.value for d in DIRECTIONS}

# Corny likes left when nothing better comes up
DEFAULT_MOVE = LEFT

API_VERSION = "1"
