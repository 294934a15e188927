"""
Settings for a session. Built once from the command line arguments and then passed down (no global config object).
"""

import logging
from argparse import Namespace
from typing import Optional, Self

from pydantic import BaseModel, field_validator

from src.chess.fen import is_valid_position, placement_field
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import GlyphSet


class Settings(BaseModel):
    glyphs: GlyphSet = GlyphSet.UNICODE
    quit_command: str = "exit"
    white_player: str = "Player 1"
    black_player: str = "Player 2"
    starting_position: Optional[str] = None
    log_level: str = "WARNING"

    @field_validator("quit_command")
    @classmethod
    def validate_quit_command(cls, value: str) -> str:
        command = value.strip().lower()
        if not command or len(command.split()) != 1:
            raise InvalidRequestError(
                f"Quit command must be a single word, got: {value!r}"
            )
        return command

    @field_validator(*["white_player", "black_player"])
    @classmethod
    def validate_player_name(cls, value: str) -> str:
        if not value.strip():
            raise InvalidRequestError("Player name cannot be blank.")
        return value.strip()

    @field_validator("starting_position")
    @classmethod
    def validate_starting_position(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value

        placement = placement_field(value)
        if not is_valid_position(placement):
            raise InvalidRequestError(
                f"Cannot interpret {value!r} as a board position in FEN notation."
            )
        return placement

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise InvalidRequestError(f"Unknown log level: {value!r}")
        return level

    @classmethod
    def from_args(cls, args: Namespace) -> Self:
        """Only the options that were actually given on the command line override the defaults."""
        given = {
            name: value
            for name, value in vars(args).items()
            if name in cls.model_fields and value is not None
        }
        return cls(**given)
