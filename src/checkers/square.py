"""
A cell on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

# Checkers is played on 8x8. Rows and columns both count from 0.
BOARD_DIMENSIONS = (8, 8)


@dataclass(frozen=True)
class Coordinate:
    row: int
    col: int

    @classmethod
    def from_wire(cls, data: dict[str, int]) -> Coordinate:
        """The service encodes a cell as {"row": r, "col": c}"""
        return cls(int(data["row"]), int(data["col"]))

    def to_wire(self) -> dict[str, int]:
        return {"row": self.row, "col": self.col}

    def is_within_bounds(self) -> bool:
        return (0 <= self.row < BOARD_DIMENSIONS[0]) and (
            0 <= self.col < BOARD_DIMENSIONS[1]
        )

    def is_diagonal_neighbour(self, other: Coordinate) -> bool:
        return abs(self.row - other.row) == 1 and abs(self.col - other.col) == 1
