"""Values shared by tests of several layers"""

from typing import Optional

from src.checkers.pieces import Piece
from src.core.shared_types import Rank, Side

HUMAN_PIECE = Piece(Side.HUMAN, Rank.REGULAR)
HUMAN_KING = Piece(Side.HUMAN, Rank.KING)
OPPONENT_PIECE = Piece(Side.OPPONENT, Rank.REGULAR)
OPPONENT_KING = Piece(Side.OPPONENT, Rank.KING)

EMPTY_ROW: list[Optional[str]] = [""] * 8


def wire_board(markers: Optional[dict[tuple[int, int], str]] = None) -> list[list[Optional[str]]]:
    """Empty board in the service's format, with {(row, col): marker} filled in."""
    board = [list(EMPTY_ROW) for _ in range(8)]
    for (row, col), marker in (markers or {}).items():
        board[row][col] = marker
    return board


def wire_state(
    markers: Optional[dict[tuple[int, int], str]] = None,
    current_turn: str = "player",
    game_over: bool = False,
    winner: Optional[str] = None,
) -> dict:
    """A game state as the service sends it."""
    state: dict = {
        "board": wire_board(markers),
        "currentTurn": current_turn,
        "gameOver": game_over,
    }
    if winner is not None:
        state["winner"] = winner
    return state
