"""
Geometry/Base movement rules

Key idea: Use strategy pattern to define the movement rule for each piece type.
One rule set serves both colors: the acting color is passed in as data.

Every rule returns a MoveCheck, which says whether the move is accepted and why (not).
"""

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import Callable, Optional, Protocol, Self

from src.chess.pieces import Color, Piece, PieceType
from src.chess.square import Square

logger = logging.getLogger(__name__)


class Board(Protocol):
    """Just the parts the movement strategies need"""

    def piece(self, square: Square) -> Piece: ...


Vector = tuple[int, int]

# White moves UP the board (increasing row), black moves DOWN
PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: 1, Color.BLACK: -1}
PAWN_HOME_ROW: dict[Color, int] = {Color.WHITE: 1, Color.BLACK: 6}
KNIGHT_JUMPS: set[Vector] = {(2, 1), (1, 2)}


@dataclass(frozen=True)
class Move:
    """basic definition of a move to be made"""

    from_square: Square
    to_square: Square

    @property
    def row_delta(self) -> int:
        return self.to_square.row - self.from_square.row

    @property
    def col_delta(self) -> int:
        return self.to_square.col - self.from_square.col

    def is_within_bounds(self) -> bool:
        return self.from_square.is_within_bounds() and self.to_square.is_within_bounds()

    def is_diagonal(self) -> bool:
        return abs(self.row_delta) == abs(self.col_delta)

    def is_straight(self) -> bool:
        return self.row_delta == 0 or self.col_delta == 0

    def to_text(self) -> str:
        """ex. 'e2 e4'. Same format a player types in."""
        return f"{self.from_square.to_algebraic()} {self.to_square.to_algebraic()}"


class Rejection(StrEnum):
    OUT_OF_BOUNDS = "out of bounds"
    WRONG_COLOR = "wrong color"
    SAME_SQUARE = "same square"
    FRIENDLY_OCCUPIED = "friendly occupied"
    NOT_A_LINE = "not a line"
    BLOCKED_PATH = "blocked path"
    INVALID_PATTERN = "invalid pattern"


@dataclass(frozen=True)
class MoveCheck:
    """Outcome of checking a move. Truthy when the move is accepted."""

    accepted: bool
    reason: Optional[Rejection]
    message: str

    @classmethod
    def accept(cls, message: str) -> Self:
        return cls(accepted=True, reason=None, message=message)

    @classmethod
    def reject(cls, reason: Rejection, message: str) -> Self:
        return cls(accepted=False, reason=reason, message=message)

    def __bool__(self) -> bool:
        return self.accepted


# --- PATH TRACING ---
def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def squares_between(from_square: Square, to_square: Square) -> list[Square]:
    """
    Find the squares strictly in between the two squares specified.

    Both squares must share a row, a column or a diagonal.
    Needed for checking if the path of a sliding piece is free (the Board will check which of those are empty).
    """
    d_row = to_square.row - from_square.row
    d_col = to_square.col - from_square.col
    if not (d_row == 0 or d_col == 0 or abs(d_row) == abs(d_col)):
        raise ValueError(
            f"squares_between requires both squares to lie on a shared line. \n from: {from_square}\n to:{to_square}"
        )

    step_row, step_col = _sign(d_row), _sign(d_col)
    squares_found: list[Square] = []
    row = from_square.row + step_row
    col = from_square.col + step_col
    while (row, col) != (to_square.row, to_square.col):
        squares_found.append(Square(row, col))
        row += step_row
        col += step_col
    return squares_found


def first_blocker(move: Move, board: Board) -> Optional[Square]:
    """First occupied square on the path of the move, if any"""
    for square in squares_between(move.from_square, move.to_square):
        if not board.piece(square).is_empty:
            return square
    return None


# --- MOVEMENT RULES ---
def _invalid_pattern(piece_name: str) -> MoveCheck:
    return MoveCheck.reject(
        Rejection.INVALID_PATTERN, f"Not a valid {piece_name} move. Try again."
    )


def _sliding_preconditions(
    move: Move, board: Board, color: Color
) -> Optional[MoveCheck]:
    """Shared by rook, bishop and queen: cannot stay put and cannot land on your own piece."""
    if move.from_square == move.to_square:
        return MoveCheck.reject(
            Rejection.SAME_SQUARE,
            "Attempt to move to the same cell not allowed. Try again.",
        )
    if board.piece(move.to_square).belongs_to(color):
        return MoveCheck.reject(
            Rejection.FRIENDLY_OCCUPIED,
            f"Destination cell is already occupied by a {color.name.lower()} piece. Try again.",
        )
    return None


def _clear_path(move: Move, board: Board, piece_name: str) -> MoveCheck:
    blocker = first_blocker(move, board)
    if blocker is not None:
        logger.debug("Path of %s blocked on %s", move.to_text(), blocker.to_algebraic())
        return MoveCheck.reject(
            Rejection.BLOCKED_PATH,
            f"Something is in the way of your {piece_name}. Try again.",
        )
    return MoveCheck.accept(f"{piece_name.capitalize()} moves {move.to_text()}.")


def _not_a_line(piece_name: str) -> MoveCheck:
    return MoveCheck.reject(
        Rejection.NOT_A_LINE, f"Not a valid move for a {piece_name}. Try again."
    )


def pawn_rule(move: Move, board: Board, color: Color) -> MoveCheck:
    """
    A pawn:
    - moves by a single square forward, onto an empty square.
    - takes diagonally (one square forward, one file to the side)
    - can move by two on its first move (so when on its home row)

    NOTE: the start move needs BOTH squares ahead to be empty, also when only moving by one.
    (Never makes a difference in practice: moving by one onto an empty square is already accepted as a plain step.)
    """
    forward = PAWN_DIRECTION[color]
    home_row = PAWN_HOME_ROW[color]
    target = board.piece(move.to_square)

    # 1. ordinary step
    if move.row_delta == forward and move.col_delta == 0 and target.is_empty:
        return MoveCheck.accept(f"Pawn steps to {move.to_square.to_algebraic()}.")

    # 2. taking move
    if (
        move.row_delta == forward
        and abs(move.col_delta) == 1
        and not target.is_empty
        and not target.belongs_to(color)
    ):
        return MoveCheck.accept(f"Pawn takes on {move.to_square.to_algebraic()}.")

    # 3. starting move
    if (
        move.from_square.row == home_row
        and move.row_delta in (forward, 2 * forward)
        and move.col_delta == 0
    ):
        one_ahead = Square(home_row + forward, move.from_square.col)
        two_ahead = Square(home_row + 2 * forward, move.from_square.col)
        if board.piece(one_ahead).is_empty and board.piece(two_ahead).is_empty:
            return MoveCheck.accept(
                f"Pawn advances to {move.to_square.to_algebraic()}."
            )

    return _invalid_pattern("pawn")


def knight_rule(move: Move, board: Board, color: Color) -> MoveCheck:
    """Knights jump: |delta_row| + |delta_col| = 3, never in a straight line. Pieces in between do not matter."""
    if (abs(move.row_delta), abs(move.col_delta)) in KNIGHT_JUMPS:
        return MoveCheck.accept(f"Knight jumps to {move.to_square.to_algebraic()}.")
    return _invalid_pattern("knight")


def rook_rule(move: Move, board: Board, color: Color) -> MoveCheck:
    """Rooks move either horizontally or vertically"""
    rejected = _sliding_preconditions(move, board, color)
    if rejected is not None:
        return rejected
    if not move.is_straight():
        return _not_a_line("rook")
    return _clear_path(move, board, "rook")


def bishop_rule(move: Move, board: Board, color: Color) -> MoveCheck:
    """Bishops move diagonally: |delta_row| = |delta_col|"""
    rejected = _sliding_preconditions(move, board, color)
    if rejected is not None:
        return rejected
    if not move.is_diagonal():
        return _not_a_line("bishop")
    return _clear_path(move, board, "bishop")


def queen_rule(move: Move, board: Board, color: Color) -> MoveCheck:
    """
    The Queen combines the rook moves (horizontal + vertical movements) and bishop moves (diagonal movement)
    """
    rejected = _sliding_preconditions(move, board, color)
    if rejected is not None:
        return rejected
    if move.is_diagonal() or move.is_straight():
        return _clear_path(move, board, "queen")
    return _not_a_line("queen")


def king_rule(move: Move, board: Board, color: Color) -> MoveCheck:
    """The king can move by a single square at the time, in any of the eight directions."""
    if max(abs(move.row_delta), abs(move.col_delta)) != 1:
        return MoveCheck.reject(
            Rejection.INVALID_PATTERN, "Not a valid move for a king. Try again."
        )
    if board.piece(move.to_square).belongs_to(color):
        return MoveCheck.reject(
            Rejection.FRIENDLY_OCCUPIED,
            f"Destination cell is already occupied by a {color.name.lower()} piece. Try again.",
        )
    return MoveCheck.accept(f"King moves to {move.to_square.to_algebraic()}.")


# -- STRATEGY PATTERN: MOVEMENT RULES ---
MovementRuleFn = Callable[[Move, Board, Color], MoveCheck]
MOVEMENT_RULES: dict[PieceType, MovementRuleFn] = {
    PieceType.PAWN: pawn_rule,
    PieceType.KNIGHT: knight_rule,
    PieceType.BISHOP: bishop_rule,
    PieceType.ROOK: rook_rule,
    PieceType.QUEEN: queen_rule,
    PieceType.KING: king_rule,
}


# --- RULE CHECK ---
def check_move(board: Board, move: Move, color: Color) -> MoveCheck:
    """
    Check a move for the player with the 'color' pieces.
    ----

    1. All four coordinates must be on the board (malformed input ends up here too)
    2. The piece on the origin square must be one of your own
    3. The movement rule of that piece decides
    """
    if not move.is_within_bounds():
        result = MoveCheck.reject(
            Rejection.OUT_OF_BOUNDS,
            "Input coordinates are invalid. Please type them again, in the form 'a6 to c4'.",
        )
        logger.info("Move rejected: %s", result.reason)
        return result

    piece = board.piece(move.from_square)
    if not piece.belongs_to(color):
        result = MoveCheck.reject(
            Rejection.WRONG_COLOR,
            f"Non-{color.name.lower()} piece selected during {color.name.lower()}'s turn. Try again.",
        )
        logger.info("Move %s rejected: %s", move.to_text(), result.reason)
        return result

    logger.info("%s selected.", piece.describe())
    movement_rule = MOVEMENT_RULES[piece.type]
    result = movement_rule(move, board, color)
    if result:
        logger.info("Move %s accepted.", move.to_text())
    else:
        logger.info("Move %s rejected: %s", move.to_text(), result.reason)
    return result


def is_legal(board: Board, move: Move, color: Color) -> bool:
    """Plain yes/no version of check_move"""
    return check_move(board, move, color).accepted
