"""
Base player interface for the decision engine.
"""

from typing import Optional

from domain.constants import Direction
from domain.game_state import GameState


class Player:
    """
    Base class/interface for move strategies.

    Each player proposes a move for the snake in game_state.you, or
    returns None when it has nothing to offer so the next strategy in
    line can have a go.
    """

    #: Short name used in logs
    name = "player"

    def get_move(self, game_state: GameState) -> Optional[Direction]:
        """
        Propose a move given the current game state.

        Args:
            game_state: Current state of the game

        Returns:
            A Direction, or None for "no proposal"
        """
        raise NotImplementedError

    def __repr__(self):
        return f"<{type(self).__name__}>"
