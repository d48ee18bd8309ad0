"""
Random player implementation - picks a random safe move.
"""

import random
from typing import List, Optional

from domain.constants import DIRECTIONS, Direction
from domain.game_state import GameState
from move_safety import is_valid_move
from .base import Player


def safe_moves(game_state: GameState) -> List[Direction]:
    """Every direction whose destination passes is_valid_move, in DIRECTIONS order."""
    me = game_state.you
    board = game_state.board
    return [
        direction
        for direction in DIRECTIONS
        if is_valid_move(me.head.step(direction), board, me)
    ]


class RandomSafePlayer(Player):
    """
    Rolls a die over the moves that avoid walls, bodies and bigger heads.

    The random source is injected so games can be replayed; anything with
    a random.Random style choice() will do.
    """

    name = "random_safe"

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()

    def get_move(self, game_state: GameState) -> Optional[Direction]:
        valid_moves = safe_moves(game_state)

        # Nothing safe: let the next strategy decide
        if not valid_moves:
            return None

        return self.rng.choice(valid_moves)
