"""Defines the types of chess pieces"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Self


class PieceType(Enum):
    EMPTY = auto()
    PAWN = auto()
    KNIGHT = auto()
    BISHOP = auto()
    ROOK = auto()
    QUEEN = auto()
    KING = auto()


class Color(Enum):
    NONE = auto()
    WHITE = auto()
    BLACK = auto()

    @property
    def opponent(self) -> "Color":
        if self == Color.WHITE:
            return Color.BLACK
        if self == Color.BLACK:
            return Color.WHITE
        return Color.NONE


FEN_TO_PIECE: dict[str, PieceType] = {
    "p": PieceType.PAWN,
    "n": PieceType.KNIGHT,
    "b": PieceType.BISHOP,
    "r": PieceType.ROOK,
    "q": PieceType.QUEEN,
    "k": PieceType.KING,
}

PIECE_TO_FEN: dict[PieceType, str] = {value: key for key, value in FEN_TO_PIECE.items()}

# Unicode chess symbols, offset between the white and black glyph of a piece type is 6
WHITE_GLYPHS: dict[PieceType, str] = {
    PieceType.KING: "♔",
    PieceType.QUEEN: "♕",
    PieceType.ROOK: "♖",
    PieceType.BISHOP: "♗",
    PieceType.KNIGHT: "♘",
    PieceType.PAWN: "♙",
}
BLACK_GLYPHS: dict[PieceType, str] = {
    piece_type: chr(ord(glyph) + 6) for piece_type, glyph in WHITE_GLYPHS.items()
}


@dataclass(frozen=True)
class Piece:
    """Occupant of a single square. Two pieces with the same type and color are indistinguishable."""

    type: PieceType
    color: Color

    @classmethod
    def empty(cls) -> Self:
        return cls(PieceType.EMPTY, Color.NONE)

    @classmethod
    def from_fen(cls, character: str) -> Self:
        # lower case: Black pieces, upper case: White pieces
        color = Color.WHITE if character.isupper() else Color.BLACK
        piece_type = FEN_TO_PIECE[character.lower()]
        return cls(piece_type, color)

    def to_fen(self) -> str:
        return (
            PIECE_TO_FEN[self.type].upper()
            if self.color == Color.WHITE
            else PIECE_TO_FEN[self.type].lower()
        )

    def to_glyph(self) -> str:
        """Printable chess symbol, or an empty string for an empty square"""
        if self.type == PieceType.EMPTY:
            return ""
        glyphs = WHITE_GLYPHS if self.color == Color.WHITE else BLACK_GLYPHS
        return glyphs[self.type]

    @property
    def is_empty(self) -> bool:
        return self.type == PieceType.EMPTY

    def belongs_to(self, color: Color) -> bool:
        return not self.is_empty and self.color == color

    def describe(self) -> str:
        """ex. 'White pawn'"""
        return f"{self.color.name.capitalize()} {self.type.name.lower()}"
