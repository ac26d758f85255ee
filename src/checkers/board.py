"""The board as the game service reports it: an ordered 8x8 grid of optional pieces"""

from dataclasses import dataclass
from typing import Iterator, Optional, Self

from src.checkers.pieces import Piece
from src.checkers.square import BOARD_DIMENSIONS, Coordinate
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Rank, Side

Cells = tuple[tuple[Optional[Piece], ...], ...]

# Rows where each side starts, in the service's orientation
STARTING_ROWS: dict[Side, range] = {
    Side.HUMAN: range(0, 3),
    Side.OPPONENT: range(5, 8),
}


@dataclass(frozen=True)
class Board:
    cells: Cells

    @classmethod
    def from_wire(cls, rows: list[list[Optional[str]]]) -> Self:
        """Construct a board from the service's array of arrays of piece markers.

        ex. a row with a human piece in the second column and everything else empty:
        ["", "r", "", "", "", "", "", ""]
        """
        if len(rows) != BOARD_DIMENSIONS[0]:
            raise InvalidRequestError(
                f"Board must have {BOARD_DIMENSIONS[0]} rows, got {len(rows)}."
            )
        cells: list[tuple[Optional[Piece], ...]] = []
        for row_idx, row in enumerate(rows):
            if len(row) != BOARD_DIMENSIONS[1]:
                raise InvalidRequestError(
                    f"Row {row_idx} must have {BOARD_DIMENSIONS[1]} cells, got {len(row)}."
                )
            cells.append(tuple(Piece.from_marker(marker) for marker in row))
        return cls(tuple(cells))

    def to_wire(self) -> list[list[str]]:
        return [
            [piece.to_marker() if piece else "" for piece in row] for row in self.cells
        ]

    @classmethod
    def empty(cls) -> Self:
        return cls(
            tuple((None,) * BOARD_DIMENSIONS[1] for _ in range(BOARD_DIMENSIONS[0]))
        )

    @classmethod
    def starting(cls) -> Self:
        """Regular pieces on the dark cells ((row + col) odd) of each side's three starting rows."""
        board = cls.empty()
        for side, rows in STARTING_ROWS.items():
            for row in rows:
                for col in range(BOARD_DIMENSIONS[1]):
                    if (row + col) % 2 == 1:
                        board = board.place(Coordinate(row, col), Piece(side, Rank.REGULAR))
        return board

    def piece(self, coordinate: Coordinate) -> Optional[Piece]:
        return self.cells[coordinate.row][coordinate.col]

    def is_empty(self, coordinate: Coordinate) -> bool:
        return self.piece(coordinate) is None

    def is_owned_by(self, coordinate: Coordinate, side: Side) -> bool:
        piece = self.piece(coordinate)
        return piece is not None and piece.owner == side

    def place(self, coordinate: Coordinate, piece: Optional[Piece]) -> Self:
        """Copy of the board with a single cell replaced."""
        rows = [list(row) for row in self.cells]
        rows[coordinate.row][coordinate.col] = piece
        return type(self)(tuple(tuple(row) for row in rows))

    def occupied(self) -> Iterator[tuple[Coordinate, Piece]]:
        for row_idx, row in enumerate(self.cells):
            for col_idx, piece in enumerate(row):
                if piece is not None:
                    yield Coordinate(row_idx, col_idx), piece

    def count_pieces(self, side: Side) -> int:
        return sum(1 for _, piece in self.occupied() if piece.owner == side)
