"""
Snake entity for the decision engine.
"""

from dataclasses import dataclass
from typing import Any, Iterator, Mapping, Tuple

from .coord import Coord
from .errors import GameStateError


@dataclass(frozen=True)
class Battlesnake:
    """
    One snake as reported for the current turn.

    Attributes:
        id: unique within a game, tells "me" apart from the others
        name: display name
        health: 0-100
        body: segments from head at index 0 to tail at the end
        head: reported separately from the body
        length: reported length; may differ from len(body) and is the
            value used when sizing up opponents
        latency: last response time in ms as reported by the engine
        shout: last shout, if any
        squad: squad id in squad games
    """
    id: str = ""
    name: str = ""
    health: int = 0
    body: Tuple[Coord, ...] = ()
    head: Coord = Coord(0, 0)
    length: int = 0
    latency: str = ""
    shout: str = ""
    squad: str = ""

    @property
    def segments(self) -> Iterator[Coord]:
        """The head followed by every body segment."""
        yield self.head
        yield from self.body

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Battlesnake":
        try:
            snake_id = data["id"]
            raw_body = data["body"]
        except (KeyError, TypeError):
            raise GameStateError(f"Snake needs 'id' and 'body': {data!r}")
        if not isinstance(raw_body, (list, tuple)):
            raise GameStateError(f"Snake {snake_id!r} body must be a list: {raw_body!r}")

        body = tuple(Coord.from_dict(segment) for segment in raw_body)

        if data.get("head") is not None:
            head = Coord.from_dict(data["head"])
        elif body:
            head = body[0]
        else:
            raise GameStateError(f"Snake {snake_id!r} has neither a head nor a body")

        length = data.get("length", len(body))
        if not isinstance(length, int):
            raise GameStateError(f"Snake {snake_id!r} has a non-integer length: {length!r}")

        return cls(
            id=str(snake_id),
            name=data.get("name", ""),
            health=data.get("health", 0),
            body=body,
            head=head,
            length=length,
            latency=str(data.get("latency", "")),
            shout=data.get("shout") or "",
            squad=data.get("squad") or "",
        )

    def __repr__(self):
        return (
            f"<Battlesnake id={self.id!r} head=({self.head.x}, {self.head.y}) "
            f"length={self.length} health={self.health}>"
        )
