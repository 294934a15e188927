"""Draws the board as text: files a-h as column headers, ranks 8 down to 1 as row labels"""

from src.chess.moves import Board
from src.chess.pieces import Piece
from src.chess.square import BOARD_DIMENSIONS, FILE_NAMES, Square
from src.core.shared_types import GlyphSet

CELL_SEPARATOR = "\t"


def piece_symbol(piece: Piece, glyphs: GlyphSet) -> str:
    """Empty squares are drawn as blanks"""
    if piece.is_empty:
        return ""
    if glyphs == GlyphSet.ASCII:
        return piece.to_fen()
    return piece.to_glyph()


def file_header() -> str:
    files = FILE_NAMES[: BOARD_DIMENSIONS[0]]
    return CELL_SEPARATOR + CELL_SEPARATOR.join(files)


def render_rank(board: Board, row: int, glyphs: GlyphSet) -> str:
    """ex. '2.\t♙\t♙ ...' One tab separated cell per square"""
    cells = [
        piece_symbol(board.piece(Square(row, col)), glyphs)
        for col in range(BOARD_DIMENSIONS[0])
    ]
    return f"{row + 1}.{CELL_SEPARATOR}" + CELL_SEPARATOR.join(cells)


def render_board(board: Board, glyphs: GlyphSet = GlyphSet.UNICODE) -> str:
    lines = [file_header(), ""]
    for row in range(BOARD_DIMENSIONS[1] - 1, -1, -1):
        lines.append(render_rank(board, row, glyphs))
        lines.append("")
    lines.append(file_header())
    return "\n".join(lines)
