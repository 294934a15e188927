"""
Custom exceptions shared by all layers.

NOTE: A rejected move is NOT an exception. The rule checker reports it as a MoveCheck and the player simply tries again.
Exceptions are kept for states that the caller should never end up in.
"""


class GameError(Exception):
    """Base class for all errors raised by this application."""


class IllegalMoveError(GameError):
    """Raised when a caller insists on applying a move that did not pass the rule check."""


class GameStateError(GameError):
    """Raised when an operation does not fit the current status of the game (ex. moving after a player quit)."""


class InvalidFENError(GameError):
    """Raised when a board placement string cannot be interpreted."""


class InvalidRequestError(GameError):
    """Raised when request/settings data fails validation."""
