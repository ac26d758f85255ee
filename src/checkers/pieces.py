"""Defines the checkers pieces and how the game service writes them"""

from dataclasses import dataclass
from typing import Optional, Self

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Rank, Side


@dataclass(frozen=True)
class Piece:
    owner: Side
    rank: Rank

    @classmethod
    def from_marker(cls, marker: Optional[str]) -> Optional[Self]:
        """Decode a board cell. Empty cells ("" or null) decode to None."""
        if not marker:
            return None
        try:
            return MARKER_TO_PIECE[marker]
        except KeyError:
            raise InvalidRequestError(f"Unknown piece marker: {marker!r}") from None

    def to_marker(self) -> str:
        return PIECE_TO_MARKER[self]

    @property
    def is_king(self) -> bool:
        return self.rank == Rank.KING


# The service uses single letters. The lookup table is the only place that knows which letter is which.
MARKER_TO_PIECE: dict[str, Piece] = {
    "r": Piece(Side.HUMAN, Rank.REGULAR),
    "R": Piece(Side.HUMAN, Rank.KING),
    "b": Piece(Side.OPPONENT, Rank.REGULAR),
    "B": Piece(Side.OPPONENT, Rank.KING),
}

PIECE_TO_MARKER: dict[Piece, str] = {
    value: key for key, value in MARKER_TO_PIECE.items()
}
