"""
Player implementations for Corny.

This module contains the move strategy abstraction and the strategies
the move selector chains together.
"""

from .base import Player
from .random_player import RandomSafePlayer, safe_moves
from .heuristic_player import FixedDirectionPlayer

__all__ = [
    'Player',
    'RandomSafePlayer',
    'FixedDirectionPlayer',
    'safe_moves',
]
