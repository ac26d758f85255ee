"""Unit tests for src/checkers/board.py"""

from typing import Callable, Optional

import pytest

from src.checkers.board import Board
from src.checkers.pieces import Piece
from src.checkers.square import Coordinate
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Side
from tests.helpers import EMPTY_ROW, HUMAN_KING, HUMAN_PIECE, OPPONENT_PIECE, wire_board

BoardFactory = Callable[[dict[tuple[int, int], Optional[Piece]]], Board]


# --- Decoding ---
def test_from_wire_places_pieces() -> None:
    board = Board.from_wire(
        wire_board({(5, 0): "r", (5, 7): "B", (2, 1): "b"})
    )
    assert board.piece(Coordinate(5, 0)) == HUMAN_PIECE
    assert board.piece(Coordinate(2, 1)) == OPPONENT_PIECE
    assert board.piece(Coordinate(5, 7)).is_king
    assert board.is_empty(Coordinate(0, 0))


def test_from_wire_accepts_null_cells() -> None:
    rows: list[list[Optional[str]]] = [[None] * 8 for _ in range(8)]
    assert Board.from_wire(rows) == Board.empty()


@pytest.mark.parametrize(
    "rows",
    [
        [EMPTY_ROW] * 7,
        [EMPTY_ROW] * 9,
        [EMPTY_ROW] * 7 + [[""] * 7],
        [],
    ],
)
def test_from_wire_rejects_wrong_shape(rows: list[list[str]]) -> None:
    with pytest.raises(InvalidRequestError):
        Board.from_wire(rows)


def test_from_wire_rejects_unknown_marker() -> None:
    with pytest.raises(InvalidRequestError):
        Board.from_wire(wire_board({(0, 0): "q"}))


def test_to_wire_reverses_from_wire() -> None:
    rows = wire_board({(3, 1): "R", (3, 3): "b"})
    assert Board.from_wire(rows).to_wire() == rows


# --- Queries ---
def test_is_owned_by(board_with: BoardFactory) -> None:
    board = board_with({(5, 0): HUMAN_PIECE, (4, 1): OPPONENT_PIECE, (6, 1): HUMAN_KING})
    assert board.is_owned_by(Coordinate(5, 0), Side.HUMAN)
    assert board.is_owned_by(Coordinate(6, 1), Side.HUMAN)
    assert not board.is_owned_by(Coordinate(4, 1), Side.HUMAN)
    assert board.is_owned_by(Coordinate(4, 1), Side.OPPONENT)
    assert not board.is_owned_by(Coordinate(0, 0), Side.HUMAN)


def test_place_returns_a_copy(board_with: BoardFactory) -> None:
    board = board_with({(5, 0): HUMAN_PIECE})
    moved = board.place(Coordinate(4, 1), HUMAN_PIECE).place(Coordinate(5, 0), None)

    assert board.piece(Coordinate(5, 0)) == HUMAN_PIECE
    assert board.is_empty(Coordinate(4, 1))
    assert moved.is_empty(Coordinate(5, 0))
    assert moved.piece(Coordinate(4, 1)) == HUMAN_PIECE


def test_occupied(board_with: BoardFactory) -> None:
    board = board_with({(5, 0): HUMAN_PIECE, (2, 3): OPPONENT_PIECE})
    assert dict(board.occupied()) == {
        Coordinate(5, 0): HUMAN_PIECE,
        Coordinate(2, 3): OPPONENT_PIECE,
    }


# --- Starting position ---
def test_starting_position() -> None:
    """12 pieces per side, on dark cells only, human on rows 0-2 and bot on rows 5-7."""
    board = Board.starting()

    assert board.count_pieces(Side.HUMAN) == 12
    assert board.count_pieces(Side.OPPONENT) == 12
    for coordinate, piece in board.occupied():
        assert (coordinate.row + coordinate.col) % 2 == 1
        assert not piece.is_king
        if piece.owner == Side.HUMAN:
            assert coordinate.row in range(0, 3)
        else:
            assert coordinate.row in range(5, 8)
    assert all(board.is_empty(Coordinate(row, col)) for row in (3, 4) for col in range(8))


def test_starting_position_markers() -> None:
    rows = Board.starting().to_wire()
    assert rows[0] == ["", "r", "", "r", "", "r", "", "r"]
    assert rows[5] == ["b", "", "b", "", "b", "", "b", ""]
