"""
Board entity - the grid and everything on it for one turn.
"""

from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Tuple

from .coord import Coord
from .errors import GameStateError
from .snake import Battlesnake


def _list_field(data: Mapping[str, Any], key: str) -> List[Any]:
    value = data.get(key) or []
    if not isinstance(value, (list, tuple)):
        raise GameStateError(f"Board '{key}' must be a list: {value!r}")
    return list(value)


@dataclass(frozen=True)
class Board:
    """
    Attributes:
        width, height: board dimensions
        food: cells holding food
        hazards: hazard cells (not consulted by the safety checks)
        snakes: every snake still in the game, "me" included
    """
    width: int = 0
    height: int = 0
    food: Tuple[Coord, ...] = ()
    hazards: Tuple[Coord, ...] = ()
    snakes: Tuple[Battlesnake, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Board":
        try:
            width, height = data["width"], data["height"]
        except (KeyError, TypeError):
            raise GameStateError(f"Board needs 'width' and 'height': {data!r}")
        if not isinstance(width, int) or not isinstance(height, int):
            raise GameStateError(f"Board dimensions must be integers: {width!r}x{height!r}")

        return cls(
            width=width,
            height=height,
            food=tuple(Coord.from_dict(c) for c in _list_field(data, "food")),
            hazards=tuple(Coord.from_dict(c) for c in _list_field(data, "hazards")),
            snakes=tuple(Battlesnake.from_dict(s) for s in _list_field(data, "snakes")),
        )

    def render(self, me: Optional[Battlesnake] = None) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        F = food
        H = hazard
        Y = my head, y = my body
        0,1,2... = opponent heads (in board order), S = opponent body
        Rows are printed top to bottom so (0,0) ends up bottom left.
        """
        grid = [['.' for _ in range(self.width)] for _ in range(self.height)]

        def place(coord: Coord, mark: str):
            if 0 <= coord.x < self.width and 0 <= coord.y < self.height:
                grid[coord.y][coord.x] = mark

        for cell in self.hazards:
            place(cell, 'H')
        for cell in self.food:
            place(cell, 'F')

        opponent_index = 0
        for snake in self.snakes:
            mine = me is not None and snake.id == me.id
            for segment in snake.body:
                place(segment, 'y' if mine else 'S')
            if mine:
                place(snake.head, 'Y')
            else:
                place(snake.head, str(opponent_index % 10))
                opponent_index += 1

        result = []
        for y in range(self.height - 1, -1, -1):
            result.append(f"{y:2d} {' '.join(grid[y])}")
        result.append("   " + " ".join(str(i % 10) for i in range(self.width)))
        return "\n".join(result)
