"""
Safety checks for a candidate destination cell.

is_occupied   - a snake is on the cell right now
is_threatened - an equal or bigger opponent could move its head onto the cell
is_valid_move - walls, then occupancy, then threats
"""

from typing import Iterable

from domain.board import Board
from domain.coord import Coord
from domain.snake import Battlesnake


def hits_wall(spot: Coord, board: Board) -> bool:
    """
    Wall check as it has always been played.

    NOTE: the far walls are compared cross-wired (y against width, x
    against height) and only on equality, while row 0 and column 0 are
    treated as walls. On square boards the first point makes no
    difference; tests pin the behaviour on a non-square board.
    """
    if spot.y == 0 or spot.x == 0:
        return True
    if spot.y == board.width or spot.x == board.height:
        return True
    return False


def is_occupied(spot: Coord, snakes: Iterable[Battlesnake]) -> bool:
    """
    True if any snake's head or body segment is on spot.

    Our own body counts, and tails are treated as staying put even though
    they usually move away next turn.
    """
    for snake in snakes:
        if spot in snake.segments:
            return True
    return False


def is_threatened(spot: Coord, snakes: Iterable[Battlesnake], me: Battlesnake) -> bool:
    """
    True if an opponent at least as long as me has its head next to spot.

    A head-to-head is lost by the shorter snake and both die on a tie, so
    we stay out of reach of anything not strictly shorter. Lengths are the
    reported ones, not the body size.
    """
    for snake in snakes:
        if snake.id == me.id or snake.length < me.length:
            continue
        if spot in snake.head.neighbors():
            return True
    return False


def is_valid_move(spot: Coord, board: Board, me: Battlesnake) -> bool:
    """Can me safely put its head on spot next turn?"""
    if hits_wall(spot, board):
        return False
    if is_occupied(spot, board.snakes):
        return False
    if is_threatened(spot, board.snakes, me):
        return False
    return True
