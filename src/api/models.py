"""Requests and Response models"""

from typing import Optional

from pydantic import BaseModel

from src.core.shared_types import Color, Status

PlayerName = str


# --- REQUEST MODELS ---
class MoveRequest(BaseModel):
    """Raw text as typed by the player. Deliberately NOT validated here: unreadable input is an illegal move, not a bad request."""

    text: str


# --- RESPONSE MODELS ---
class BoardResponse(BaseModel):
    board: str
    fen: str
    to_move: Color
    player: PlayerName
    status: Status


class TurnResponse(BaseModel):
    accepted: bool
    reason: Optional[str] = None
    message: str
    board: BoardResponse
    game_over: bool = False
