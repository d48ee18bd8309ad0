"""
Battlesnake callbacks over domain values.

The HTTP layer parses requests and hands the resulting GameState to these
functions; they log and, for move, run the selector.
"""

import logging
from typing import Dict

from config import Settings
from domain.constants import API_VERSION
from domain.game_state import GameState
from move_selector import MoveSelector


logger = logging.getLogger(__name__)


def get_info(settings: Settings) -> Dict[str, str]:
    """Appearance and API version, see docs.battlesnake.com/references/personalization"""
    logger.info("INFO")

    return {
        "apiversion": API_VERSION,
        "author": settings.author,
        "color": settings.color,
        "head": settings.head,
        "tail": settings.tail,
        "version": settings.version,
    }


def start(game_state: GameState) -> None:
    logger.info(f"{game_state.game.id} START")


def end(game_state: GameState) -> None:
    logger.info(f"{game_state.game.id} END")


def get_move(game_state: GameState, selector: MoveSelector) -> str:
    """Pick a move for game_state.you and return its protocol token."""
    direction = selector.choose(game_state).value

    logger.info(f"{game_state.game.id} MOVE {direction}")

    return direction
