"""
Move selector - asks each strategy in turn and falls back to a default.
"""

import logging
import random
from typing import Optional, Sequence

from domain.constants import DEFAULT_MOVE, LEFT, Direction
from domain.game_state import GameState
from players import FixedDirectionPlayer, Player, RandomSafePlayer


logger = logging.getLogger(__name__)


class MoveSelector:
    """
    Chains players from most to least careful.

    The first player that proposes a move wins; if every player passes,
    the default direction is used so a move is always produced.
    """

    def __init__(self, players: Sequence[Player], default: Direction = DEFAULT_MOVE):
        self.players = list(players)
        self.default = default

    def choose(self, game_state: GameState) -> Direction:
        for tier, player in enumerate(self.players):
            direction = player.get_move(game_state)
            if direction is not None:
                logger.debug(
                    f"{game_state.game.id} turn {game_state.turn}: "
                    f"{player.name} (tier {tier}) chose {direction.value}"
                )
                return direction

        logger.debug(
            f"{game_state.game.id} turn {game_state.turn}: "
            f"no player proposed a move, defaulting to {self.default.value}"
        )
        return self.default


def build_move_selector(rng: Optional[random.Random] = None) -> MoveSelector:
    """
    The standard chain: a random safe move, then left, then left again.

    Args:
        rng: random source for the safe-move roll, fresh when omitted
    """
    return MoveSelector(
        [RandomSafePlayer(rng), FixedDirectionPlayer(LEFT)],
        default=DEFAULT_MOVE,
    )
