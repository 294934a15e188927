"""The Game board holds the `position` (in chess: the configuration of pieces on the board) and is the only thing a move changes"""

import logging
from dataclasses import dataclass
from typing import Self

from src.chess.fen import STARTING_POSITION, is_valid_position, placement_field
from src.chess.moves import Move, MoveCheck, check_move
from src.chess.pieces import Color, Piece
from src.chess.square import BOARD_DIMENSIONS, Square
from src.core.exceptions import IllegalMoveError, InvalidFENError

logger = logging.getLogger(__name__)


@dataclass
class Board:
    position: dict[Square, Piece]

    @classmethod
    def starting_position(cls) -> Self:
        """Back ranks full, pawns on the 2nd and 7th rank, everything else empty"""
        return cls.from_fen(STARTING_POSITION)

    @classmethod
    def from_fen(cls, fen_str: str) -> Self:
        """Construct a board using a given FEN string.

        That is, we use the first part of the FEN string that denotes the board position
        ex. standard starting position:
        rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR
        means:
        * black pieces are on the 8th rank, starting with rook on a8, knight on b8, etc.
        * pawns cover 7th rank entirely
        * ranks 6 through 3 have 8 consecutive empty squares
        * rank 2 are the white pawns (capital letters)
        * 1st rank are the white pieces.
        """
        placement = placement_field(fen_str)
        if not is_valid_position(placement):
            raise InvalidFENError(f"Cannot interpret supplied string as a board position: {fen_str!r}")

        position: dict[Square, Piece] = {}
        for rank_idx, fen_one_rank in enumerate(placement.split("/")):
            # FEN string is read from top rank (8th, row 7) to bottom rank (1st, row 0)
            row = BOARD_DIMENSIONS[1] - 1 - rank_idx
            # ... but the first character is the a-file, so reads in normal direction
            col = 0
            for character in fen_one_rank:
                if character.isalpha():
                    # simple case: a letter directly denotes the piece that should be created
                    position[Square(row, col)] = Piece.from_fen(character)
                    col += 1
                else:
                    # A number denotes the amount of empty squares after each other
                    for _ in range(int(character)):
                        position[Square(row, col)] = Piece.empty()
                        col += 1
        return cls(position)

    def to_fen(self) -> str:
        """Ranks are separated by slashes in FEN string."""
        return "/".join(
            self._rank_to_fen(row) for row in range(BOARD_DIMENSIONS[1] - 1, -1, -1)
        )

    def _rank_to_fen(self, row: int) -> str:
        """FEN string of a single rank"""
        fen_characters: list[str] = []
        empty_count = 0
        for col in range(BOARD_DIMENSIONS[0]):
            piece = self.piece(Square(row, col))

            if not piece.is_empty:
                if empty_count > 0:
                    fen_characters.append(str(empty_count))
                    empty_count = 0
                fen_characters.append(piece.to_fen())
            else:
                empty_count += 1

        # if the entire rank is empty, then we still place this number in the string
        if empty_count > 0:
            fen_characters.append(str(empty_count))
        return "".join(fen_characters)

    def piece(self, square: Square) -> Piece:
        return self.position[square]

    def is_empty(self, square: Square) -> bool:
        return self.piece(square).is_empty

    def is_occupied_by(self, square: Square, color: Color) -> bool:
        return self.piece(square).belongs_to(color)

    # --- RULE CHECK (read only) ---
    def check_move(self, move: Move, color: Color) -> MoveCheck:
        """Does the move follow the movement rule of the selected piece? (Board is not changed)"""
        return check_move(self, move, color)

    def is_legal(self, move: Move, color: Color) -> bool:
        return self.check_move(move, color).accepted

    # --- MOVE APPLICATION (read/write) ---
    def move_piece(self, move: Move) -> None:
        """
        Update the position on the board.

        NOTE: does not check the move again. Call `check_move()` first, or use `apply_checked()`.
        Moving a piece onto its own square leaves the board as it is.
        """
        if move.from_square == move.to_square:
            logger.warning(
                "Ignoring move onto the same square: %s",
                move.from_square.to_algebraic(),
            )
            return

        piece_that_moved = self.piece(move.from_square)
        self.position[move.to_square] = piece_that_moved
        self.position[move.from_square] = Piece.empty()
        logger.debug("Moved %s: %s", piece_that_moved.describe(), move.to_text())

    def move_pieces(self, moves: list[Move]) -> None:
        """convenience method to apply multiple moves (if you quickly want to start a board in a given position reached after some moves)"""
        for move in moves:
            self.move_piece(move)

    def apply_checked(self, move: Move, color: Color) -> MoveCheck:
        """Check first, then apply. Raises instead of returning a rejected check."""
        result = self.check_move(move, color)
        if not result:
            raise IllegalMoveError(f"Move not allowed: {result.message}")
        self.move_piece(move)
        return result
