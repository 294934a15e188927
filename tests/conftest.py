"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures required for testing multiple layers.
"""

from typing import Callable

import pytest

from src.chess.board import Board
from src.chess.fen import EMPTY_POSITION
from src.chess.pieces import Piece
from src.chess.square import Square

# square name -> FEN character of the piece standing there, ex. {"d4": "Q", "e5": "p"}
Placement = dict[str, str]


@pytest.fixture
def starting_board() -> Board:
    return Board.starting_position()


@pytest.fixture
def board_with_pieces() -> Callable[[Placement], Board]:
    """Call the inner function with the pieces to place on an otherwise empty board"""

    def _create_board(pieces: Placement) -> Board:
        board = Board.from_fen(EMPTY_POSITION)
        for square_name, fen_char in pieces.items():
            board.position[Square.from_algebraic(square_name)] = Piece.from_fen(
                fen_char
            )
        return board

    return _create_board
