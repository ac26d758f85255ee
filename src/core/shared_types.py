"""
Type definitions used across layers
"""

from enum import StrEnum


# --- Values are the names used on the wire by the game service


class Side(StrEnum):
    HUMAN = "player"
    OPPONENT = "bot"


class Rank(StrEnum):
    REGULAR = "regular"
    KING = "king"


class Outcome(StrEnum):
    """Result of a finished game, as stored by the game service."""

    WIN = "player"
    LOSS = "bot"
    DRAW = "draw"
