"""
Boundary layer data model(s).

The client layer builds these from the service responses; the controller and the UI only read them.
(Decouples the wire format from what the rest of the program works with.)
"""

from dataclasses import dataclass
from typing import Optional

from src.checkers.board import Board
from src.core.shared_types import Side


@dataclass(frozen=True)
class Session:
    """Authoritative game state, as last reported by the game service."""

    board: Board
    current_turn: Side
    game_over: bool
    winner: Optional[Side] = None

    @property
    def awaits_human(self) -> bool:
        return not self.game_over and self.current_turn == Side.HUMAN


@dataclass(frozen=True)
class Tally:
    """Cumulative results of the human player."""

    wins: int = 0
    losses: int = 0
    draws: int = 0
