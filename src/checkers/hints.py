"""Display hints. These decorate the board, they never decide whether a move may be submitted."""

from typing import Optional

from src.checkers.board import Board
from src.checkers.square import Coordinate


def is_plausible_destination(
    target: Coordinate, selection: Optional[Coordinate], board: Board
) -> bool:
    """An empty cell diagonally next to the selected piece.

    Only the game service knows which moves are legal (jumps, kings moving backwards, ...).
    """
    if selection is None:
        return False
    return board.is_empty(target) and target.is_diagonal_neighbour(selection)


def plausible_destinations(
    selection: Optional[Coordinate], board: Board
) -> set[Coordinate]:
    if selection is None:
        return set()
    candidates = (
        Coordinate(selection.row + d_row, selection.col + d_col)
        for d_row in (-1, 1)
        for d_col in (-1, 1)
    )
    return {
        target
        for target in candidates
        if target.is_within_bounds()
        and is_plausible_destination(target, selection, board)
    }
