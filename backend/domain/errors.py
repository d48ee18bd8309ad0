"""
Errors raised while turning a request body into domain values.
"""


class GameStateError(ValueError):
    """The Battlesnake payload is missing a field or has the wrong shape."""
