"""
Board coordinates and single-step movement.
"""

from dataclasses import dataclass
from typing import Any, List, Mapping

from .constants import DIRECTIONS, Direction
from .errors import GameStateError


@dataclass(frozen=True)
class Coord:
    """
    A cell on the board, (0, 0) being the bottom left corner.

    Coordinates are not bounds-checked: stepping off the board gives
    negative or too-large components and it is up to the caller to
    decide what that means.
    """
    x: int
    y: int

    def step(self, direction: Direction) -> "Coord":
        dx, dy = direction.delta
        return Coord(self.x + dx, self.y + dy)

    def neighbors(self) -> List["Coord"]:
        """The four orthogonal neighbours, in DIRECTIONS order."""
        return [self.step(direction) for direction in DIRECTIONS]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Coord":
        try:
            x, y = data["x"], data["y"]
        except (KeyError, TypeError):
            raise GameStateError(f"Coordinate needs 'x' and 'y': {data!r}")
        if not isinstance(x, int) or not isinstance(y, int):
            raise GameStateError(f"Coordinate components must be integers: {data!r}")
        return cls(x, y)


def step(coord: Coord, direction: Direction) -> Coord:
    """Return the cell one move away from coord in the given direction."""
    return coord.step(direction)
