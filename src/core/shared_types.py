"""
Type definitions used across layers
"""

from enum import StrEnum


class Status(StrEnum):
    IN_PROGRESS = "in progress"
    ABORTED = "aborted"


# --- NOTE Same names as the enums in src/chess/pieces.py on purpose. These are the string versions sent across the
# --- service boundary (no EMPTY / NONE options here). Let the imports show which version is used where.


class Color(StrEnum):
    WHITE = "white"
    BLACK = "black"


class GlyphSet(StrEnum):
    """How pieces are drawn when the board gets rendered"""

    UNICODE = "unicode"
    ASCII = "ascii"
