"""
GameState entity - everything the engine is told about one turn.
"""

from dataclasses import dataclass, field
from typing import Any, Mapping

from .board import Board
from .errors import GameStateError
from .snake import Battlesnake


@dataclass(frozen=True)
class Game:
    """Game metadata. The id is only used to correlate log lines."""
    id: str = ""
    timeout: int = 500
    ruleset_name: str = "standard"
    source: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Game":
        try:
            game_id = data["id"]
        except (KeyError, TypeError):
            raise GameStateError(f"Game needs an 'id': {data!r}")
        ruleset = data.get("ruleset") or {}
        if not isinstance(ruleset, Mapping):
            raise GameStateError(f"Game 'ruleset' must be an object: {ruleset!r}")
        return cls(
            id=str(game_id),
            timeout=data.get("timeout", 500),
            ruleset_name=ruleset.get("name", "standard"),
            source=data.get("source", ""),
        )


@dataclass(frozen=True)
class GameState:
    """
    A snapshot of the game for a single turn.

    Attributes:
        game: game metadata
        turn: turn number (0-based)
        board: board contents
        you: the snake we are deciding for
    """
    game: Game = field(default_factory=Game)
    turn: int = 0
    board: Board = field(default_factory=Board)
    you: Battlesnake = field(default_factory=Battlesnake)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GameState":
        """Build a GameState from a Battlesnake request body."""
        if not isinstance(data, Mapping):
            raise GameStateError("Request body must be a JSON object")
        for key in ("game", "turn", "board", "you"):
            if key not in data:
                raise GameStateError(f"Request body is missing '{key}'")
        if not isinstance(data["turn"], int):
            raise GameStateError(f"Turn must be an integer: {data['turn']!r}")

        return cls(
            game=Game.from_dict(data["game"]),
            turn=data["turn"],
            board=Board.from_dict(data["board"]),
            you=Battlesnake.from_dict(data["you"]),
        )

    def __repr__(self):
        return (
            f"<GameState game={self.game.id!r} turn={self.turn}, "
            f"board={self.board.width}x{self.board.height}, snakes={len(self.board.snakes)}>"
        )
