"""
Board placement in FEN notation.

Only the first field of a full FEN string is used here: the configuration of pieces on the board.
Side to move, castling rights, en passant and move counters have no meaning in this game.
"""

from src.chess.pieces import FEN_TO_PIECE
from src.chess.square import BOARD_DIMENSIONS

STARTING_POSITION = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"
EMPTY_POSITION = "/".join(["8"] * BOARD_DIMENSIONS[1])


def placement_field(fen: str) -> str:
    """Accept either a bare placement or a full FEN string, and return just the placement."""
    return fen.strip().split(" ")[0]


def is_valid_position(position: str) -> bool:
    """Only check the part of the FEN encoding for the board position."""
    num_files, num_ranks = BOARD_DIMENSIONS
    rank_fens = position.split("/")
    if len(rank_fens) != num_ranks:
        return False

    for rank_fen in rank_fens:
        file_count = 0
        for character in rank_fen:
            # make sure every character is valid
            if character in "12345678":
                file_count += int(character)
            elif character.lower() in FEN_TO_PIECE:
                file_count += 1
            else:
                # immediately invalidate if the character is anything else
                return False

        # make sure you are creating a correctly sized board
        if file_count != num_files:
            return False
    return True
