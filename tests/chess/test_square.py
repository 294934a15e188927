"""Unit tests for /src/chess/square.py"""

from string import ascii_lowercase

import pytest

from src.chess.square import BOARD_DIMENSIONS, Square, all_squares


@pytest.mark.parametrize(
    "row, col, notation",
    [
        (row, col, f"{ascii_lowercase[col]}{row + 1}")
        for row in range(8)
        for col in range(8)
    ],
)
def test_creating_from_algebraic(row: int, col: int, notation: str) -> None:
    """Simply checks if the notation for 'a1' indeed maps to row 0, col 0, etc."""
    square = Square.from_algebraic(notation)
    assert square.row == row
    assert square.col == col


@pytest.mark.parametrize(
    "row, col, notation",
    [
        (row, col, f"{ascii_lowercase[col]}{row + 1}")
        for row in range(8)
        for col in range(8)
    ],
)
def test_to_algebraic_notation(row: int, col: int, notation: str) -> None:
    """Test the reverse, so the square on row 0 and col 0 should be denoted as a1"""
    square = Square(row, col)
    assert square.to_algebraic() == notation


def test_file_letter_is_case_insensitive() -> None:
    assert Square.from_algebraic("E2") == Square(1, 4)


def test_square_within_bounds() -> None:
    """happy case: squares within the dimensions of the board"""
    for row in range(BOARD_DIMENSIONS[1]):
        for col in range(BOARD_DIMENSIONS[0]):
            assert Square(row, col).is_within_bounds()


@pytest.mark.parametrize(
    "row, col", [(8, 0), (0, 8), (-1, 0), (0, -1), (10, 10), (10, 3), (3, 10)]
)
def test_square_out_of_bounds(row: int, col: int) -> None:
    assert not Square(row, col).is_within_bounds()


def test_all_squares() -> None:
    squares = all_squares()
    assert len(squares) == 64
    assert len(set(squares)) == 64
    assert squares[0] == Square.from_algebraic("a1")
    assert squares[-1] == Square.from_algebraic("h8")
