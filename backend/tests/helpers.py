"""
Builders for the game values used across the test suite.
"""

from typing import Iterable, Optional, Sequence, Tuple

from domain.board import Board
from domain.coord import Coord
from domain.game_state import Game, GameState
from domain.snake import Battlesnake


def make_snake(
    snake_id: str = "me",
    body: Sequence[Tuple[int, int]] = ((5, 5), (5, 4), (5, 3)),
    length: Optional[int] = None,
    head: Optional[Tuple[int, int]] = None,
    name: Optional[str] = None,
    health: int = 90,
) -> Battlesnake:
    """A snake whose head is body[0] and whose length is len(body) unless told otherwise."""
    segments = tuple(Coord(x, y) for x, y in body)
    return Battlesnake(
        id=snake_id,
        name=name or snake_id.title(),
        health=health,
        body=segments,
        head=Coord(*head) if head is not None else segments[0],
        length=length if length is not None else len(segments),
    )


def make_state(
    me: Battlesnake,
    others: Iterable[Battlesnake] = (),
    width: int = 11,
    height: int = 11,
    food: Iterable[Tuple[int, int]] = (),
    hazards: Iterable[Tuple[int, int]] = (),
    turn: int = 3,
    game_id: str = "game-1",
) -> GameState:
    board = Board(
        width=width,
        height=height,
        food=tuple(Coord(x, y) for x, y in food),
        hazards=tuple(Coord(x, y) for x, y in hazards),
        snakes=tuple(others) + (me,),
    )
    return GameState(game=Game(id=game_id), turn=turn, board=board, you=me)


def snake_payload(snake_id: str, body: Sequence[Tuple[int, int]], length: Optional[int] = None) -> dict:
    segments = [{"x": x, "y": y} for x, y in body]
    return {
        "id": snake_id,
        "name": snake_id.title(),
        "health": 90,
        "body": segments,
        "head": segments[0],
        "length": length if length is not None else len(segments),
        "latency": "111",
        "shout": "",
        "squad": "",
    }


def move_request(
    you: dict,
    others: Sequence[dict] = (),
    width: int = 11,
    height: int = 11,
    food: Sequence[Tuple[int, int]] = ((3, 3),),
    turn: int = 14,
) -> dict:
    """A Battlesnake /move request body."""
    return {
        "game": {
            "id": "game-00fe20da-94ad-11ea-bb37",
            "ruleset": {"name": "standard", "version": "v.1.2.3"},
            "timeout": 500,
            "source": "custom",
        },
        "turn": turn,
        "board": {
            "width": width,
            "height": height,
            "food": [{"x": x, "y": y} for x, y in food],
            "hazards": [],
            "snakes": list(others) + [you],
        },
        "you": you,
    }
