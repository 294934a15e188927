"""
A square on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

# Chess board is always 8x8. Kept adjustable: (number of columns/files, number of rows/ranks)
BOARD_DIMENSIONS = (8, 8)

FILE_NAMES = "abcdefgh"


@dataclass(frozen=True)
class Square:
    """Zero-indexed: row 0 is the 1st rank, col 0 is the a-file"""

    row: int
    col: int

    @classmethod
    def from_algebraic(cls, sq: str) -> Square:
        """Algebraic notation: 'a1' - 'h8' get converted to (0,0) - (7,7)"""
        col = ord(sq[0].lower()) - ord("a")
        row = int(sq[1]) - 1
        return cls(row, col)

    def to_algebraic(self) -> str:
        return f"{chr(self.col + ord('a'))}{self.row + 1}"

    def is_within_bounds(self) -> bool:
        return (0 <= self.col < BOARD_DIMENSIONS[0]) and (
            0 <= self.row < BOARD_DIMENSIONS[1]
        )


def all_squares() -> list[Square]:
    """Every square on the board, a1, b1, ..., h8"""
    return [
        Square(row, col)
        for row in range(BOARD_DIMENSIONS[1])
        for col in range(BOARD_DIMENSIONS[0])
    ]
