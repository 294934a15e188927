"""
Coordinate parser: turns the text a player types into board indices.

Accepted input is two whitespace separated squares, ex. "e2 e4". Anything written between the
first and the last token is ignored, so "e2 to e4" works as well.

Malformed input does NOT raise. Every character that cannot be read becomes INVALID_INDEX, which lies
outside of the board, so the rule checker's bounds check rejects the move like any other illegal move.
Use `parse_move()` when you prefer an explicit "no move" (None) over the sentinel.
"""

from typing import Optional, Protocol

from src.chess.moves import Move
from src.chess.square import BOARD_DIMENSIONS, FILE_NAMES, Square

# Guaranteed to be outside the board in both directions
INVALID_INDEX = 10

Coordinates = tuple[int, int, int, int]

FILE_TO_COL: dict[str, int] = {
    name: idx for idx, name in enumerate(FILE_NAMES[: BOARD_DIMENSIONS[0]])
}
RANK_TO_ROW: dict[str, int] = {
    str(rank): rank - 1 for rank in range(1, BOARD_DIMENSIONS[1] + 1)
}


class Board(Protocol):
    """Not needed for parsing. Accepted so the parser and the rule checker can be called the same way."""


def _token_to_indices(token: str) -> tuple[int, int]:
    """(row, col) for a single square token. Only the first two characters are read."""
    if len(token) < 2:
        return INVALID_INDEX, INVALID_INDEX

    file_char, rank_char = token[0].lower(), token[1]
    row = RANK_TO_ROW.get(rank_char, INVALID_INDEX)
    col = FILE_TO_COL.get(file_char, INVALID_INDEX)
    return row, col


def parse_coordinates(text: str, board: Optional[Board] = None) -> Coordinates:
    """
    Returns (origin row, origin col, destination row, destination col).

    ----
    * blank input: all four indices are INVALID_INDEX
    * origin is read from the first token, destination from the LAST token
    * a token with fewer than two characters cannot be read
    """
    tokens = text.split()
    if not tokens:
        return INVALID_INDEX, INVALID_INDEX, INVALID_INDEX, INVALID_INDEX

    from_row, from_col = _token_to_indices(tokens[0])
    to_row, to_col = _token_to_indices(tokens[-1])
    return from_row, from_col, to_row, to_col


def move_from_text(text: str) -> Move:
    """Always returns a Move. Unreadable parts end up as squares outside of the board."""
    from_row, from_col, to_row, to_col = parse_coordinates(text)
    return Move(Square(from_row, from_col), Square(to_row, to_col))


def parse_move(text: str) -> Optional[Move]:
    """Returns None if the text does not describe two squares on the board."""
    move = move_from_text(text)
    if not move.is_within_bounds():
        return None
    return move
