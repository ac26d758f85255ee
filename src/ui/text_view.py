"""Plain-text rendering of what the controller holds. No state lives here."""

from typing import Optional

from src.checkers.board import Board
from src.checkers.hints import plausible_destinations
from src.checkers.pieces import Piece
from src.checkers.square import BOARD_DIMENSIONS, Coordinate
from src.core.models import Session, Tally
from src.core.shared_types import Rank, Side
from src.services.game_controller import GameController

LOADING = "Loading..."
BUSY = "(Processing...)"

# Own glyph table: what the terminal shows need not match what the service sends
PIECE_GLYPHS: dict[tuple[Side, Rank], str] = {
    (Side.HUMAN, Rank.REGULAR): "r",
    (Side.HUMAN, Rank.KING): "R",
    (Side.OPPONENT, Rank.REGULAR): "b",
    (Side.OPPONENT, Rank.KING): "B",
}
DARK_CELL = "."
LIGHT_CELL = " "
HINT_CELL = "*"


def glyph(piece: Optional[Piece], coordinate: Coordinate) -> str:
    if piece is not None:
        return PIECE_GLYPHS[(piece.owner, piece.rank)]
    return DARK_CELL if (coordinate.row + coordinate.col) % 2 == 1 else LIGHT_CELL


def render_board(board: Board, selection: Optional[Coordinate] = None) -> str:
    """Grid with row/column indices. The selected piece is bracketed, plausible destinations are starred."""
    hints = plausible_destinations(selection, board)
    lines = ["   " + "".join(f" {col} " for col in range(BOARD_DIMENSIONS[1]))]
    for row in range(BOARD_DIMENSIONS[0]):
        cells = []
        for col in range(BOARD_DIMENSIONS[1]):
            coordinate = Coordinate(row, col)
            if coordinate == selection:
                cells.append(f"[{glyph(board.piece(coordinate), coordinate)}]")
            elif coordinate in hints:
                cells.append(f" {HINT_CELL} ")
            else:
                cells.append(f" {glyph(board.piece(coordinate), coordinate)} ")
        lines.append(f" {row} " + "".join(cells))
    return "\n".join(lines)


def status_banner(session: Session, busy: bool = False) -> str:
    if session.game_over:
        if session.winner == Side.HUMAN:
            outcome = "You Win!"
        elif session.winner == Side.OPPONENT:
            outcome = "Bot Wins!"
        else:
            outcome = "It's a Draw!"
        return f"Game Over! {outcome}"

    banner = "Your Turn" if session.current_turn == Side.HUMAN else "Bot's Turn..."
    return f"{banner} {BUSY}" if busy else banner


def render_tally(tally: Tally) -> str:
    return f"Wins: {tally.wins}  Losses: {tally.losses}  Draws: {tally.draws}"


def render(controller: GameController) -> str:
    """Full screen: tally, status banner and board (or the loading screen)."""
    if controller.session is None:
        return f"{LOADING} {BUSY}" if controller.in_flight else LOADING
    return "\n\n".join(
        [
            render_tally(controller.tally),
            status_banner(controller.session, busy=controller.in_flight),
            render_board(controller.session.board, controller.selection),
        ]
    )
