"""
Heuristic player - the fallback once no move is provably safe.
"""

from typing import Optional

from domain.constants import LEFT, Direction
from domain.game_state import GameState
from .base import Player


class FixedDirectionPlayer(Player):
    """
    Always proposes the same direction.

    Stands in for a real food-seeking heuristic: swap in another Player
    without touching the selector once one exists.
    """

    name = "fixed_direction"

    def __init__(self, direction: Direction = LEFT):
        self.direction = direction

    def get_move(self, game_state: GameState) -> Optional[Direction]:
        return self.direction

    def __repr__(self):
        return f"<FixedDirectionPlayer direction={self.direction.value}>"
