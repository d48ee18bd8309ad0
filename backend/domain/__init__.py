"""
Domain entities for the Corny decision engine.

This module contains the per-turn game values that are independent of
infrastructure concerns (HTTP, JSON, configuration).
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, DIRECTIONS, VALID_MOVES, DEFAULT_MOVE, API_VERSION, Direction,
)
from .errors import GameStateError
from .coord import Coord, step
from .snake import Battlesnake
from .board import Board
from .game_state import Game, GameState

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'DIRECTIONS', 'VALID_MOVES', 'DEFAULT_MOVE', 'API_VERSION',
    'Direction',
    'GameStateError',
    'Coord', 'step',
    'Battlesnake',
    'Board',
    'Game',
    'GameState',
]
