"""
The Game class is the entrypoint into the domain layer for the service layer.
It owns the Board and is the only one allowed to change it: it alternates the turns between the two players,
passes every attempt through the rule check and only then applies the move.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Self

from src.chess.board import Board
from src.chess.moves import MoveCheck
from src.chess.notation import move_from_text
from src.chess.pieces import Color
from src.core.exceptions import GameStateError
from src.core.shared_types import Status

logger = logging.getLogger(__name__)

DEFAULT_QUIT_COMMAND = "exit"


def is_quit_command(text: str, command: str = DEFAULT_QUIT_COMMAND) -> bool:
    """Case insensitive. Surrounding whitespace is ignored, so ' exit' quits too (the console original would read it as a move)."""
    return text.strip().lower() == command.strip().lower()


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    board: Board
    players: dict[Color, str]
    color_to_move: Color = Color.WHITE
    status: Status = Status.IN_PROGRESS
    quit_by: Optional[Color] = None
    moves_played: int = 0

    @classmethod
    def new_game(
        cls,
        white: str = "Player 1",
        black: str = "Player 2",
        starting_fen: Optional[str] = None,
    ) -> Self:
        """Start with the standard opening position, unless another placement is supplied. White moves first."""
        board = (
            Board.from_fen(starting_fen) if starting_fen else Board.starting_position()
        )
        return cls(board=board, players={Color.WHITE: white, Color.BLACK: black})

    @property
    def player_to_move(self) -> str:
        return self.players[self.color_to_move]

    @property
    def is_over(self) -> bool:
        return self.status != Status.IN_PROGRESS

    def play(self, text: str) -> MoveCheck:
        """
        Attempt a move for the player whose turn it is
        -----

        1. parse the text into a move (unreadable input becomes a move off the board)
        2. check the move with the color to move
        3. accepted? update the board and pass the turn. Rejected? Same player tries again.
        """
        self._assert_in_progress()

        move = move_from_text(text)
        result = self.board.check_move(move, self.color_to_move)
        if not result:
            return result

        self.board.move_piece(move)
        self.moves_played += 1
        self._pass_turn()
        return result

    def quit(self) -> None:
        """The player whose turn it is ends the game."""
        self._assert_in_progress()
        self.quit_by = self.color_to_move
        self.status = Status.ABORTED
        logger.info("Game ended by %s", self.player_to_move)

    # -- PRIVATE HELPERS ---
    def _assert_in_progress(self) -> None:
        if self.is_over:
            raise GameStateError(f"Game is not in progress. status: {self.status}")

    def _pass_turn(self) -> None:
        self.color_to_move = self.color_to_move.opponent
