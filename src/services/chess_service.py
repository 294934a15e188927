"""Orchestration of communication from the turn loop to the domain layer (and the reverse direction)."""

import logging
from typing import Self

from src.api.models import BoardResponse, MoveRequest, TurnResponse
from src.chess.game import Game, is_quit_command
from src.chess.render import render_board
from src.core.config import Settings
from src.core.shared_types import Color

logger = logging.getLogger(__name__)


class ChessService:
    """Orchestration of layers for chess game."""

    def __init__(self, game: Game, settings: Settings) -> None:
        self.game = game
        self.settings = settings

    @classmethod
    def from_settings(cls, settings: Settings) -> Self:
        """Create a fresh game as described by the settings."""
        game = Game.new_game(
            white=settings.white_player,
            black=settings.black_player,
            starting_fen=settings.starting_position,
        )
        return cls(game, settings)

    # -- Turn loop logic ---
    def start(self) -> BoardResponse:
        """Board before the first move is made."""
        return self._create_board_response()

    def prompt(self) -> str:
        """ex. 'Player 1 (White) move:'"""
        color = self.game.color_to_move.name.capitalize()
        return f"{self.game.player_to_move} ({color}) move:"

    def submit(self, request: MoveRequest) -> TurnResponse:
        """
        Handle one line of input from the player to move.
        ----

        * quit command: the game ends, the board stays as it is.
        * anything else is a move attempt. Rejected attempts leave the turn with the same player.
        """
        if is_quit_command(request.text, self.settings.quit_command):
            player = self.game.player_to_move
            self.game.quit()
            return TurnResponse(
                accepted=False,
                message=f"Program exited by {player}.",
                board=self._create_board_response(),
                game_over=True,
            )

        result = self.game.play(request.text)
        logger.debug("Input %r -> %s", request.text, result)
        return TurnResponse(
            accepted=result.accepted,
            reason=str(result.reason) if result.reason else None,
            message=result.message,
            board=self._create_board_response(),
        )

    # -- Internal helpers --
    def _create_board_response(self) -> BoardResponse:
        return BoardResponse(
            board=render_board(self.game.board, self.settings.glyphs),
            fen=self.game.board.to_fen(),
            to_move=Color[self.game.color_to_move.name],
            player=self.game.player_to_move,
            status=self.game.status,
        )
