"""Unit tests for /src/chess/game.py"""

import pytest

from src.chess.fen import STARTING_POSITION
from src.chess.game import Game, is_quit_command
from src.chess.moves import Rejection
from src.chess.pieces import Color, Piece, PieceType
from src.chess.square import Square
from src.core.exceptions import GameStateError
from src.core.shared_types import Status


@pytest.fixture
def game() -> Game:
    return Game.new_game()


def test_new_game(game: Game) -> None:
    assert game.board.to_fen() == STARTING_POSITION
    assert game.color_to_move == Color.WHITE
    assert game.player_to_move == "Player 1"
    assert game.status == Status.IN_PROGRESS
    assert not game.is_over


def test_new_game_from_position() -> None:
    game = Game.new_game(white="Ann", black="Bo", starting_fen="4k3/8/8/8/8/8/8/4K3")
    assert game.board.piece(Square.from_algebraic("e1")) == Piece(
        PieceType.KING, Color.WHITE
    )
    assert game.players == {Color.WHITE: "Ann", Color.BLACK: "Bo"}


def test_accepted_move_passes_the_turn(game: Game) -> None:
    result = game.play("e2 e4")
    assert result.accepted
    assert game.board.piece(Square(1, 4)) == Piece.empty()
    assert game.board.piece(Square(3, 4)) == Piece(PieceType.PAWN, Color.WHITE)
    assert game.color_to_move == Color.BLACK
    assert game.player_to_move == "Player 2"
    assert game.moves_played == 1


def test_rejected_move_keeps_the_turn(game: Game) -> None:
    result = game.play("a1 a3")
    assert result.reason == Rejection.BLOCKED_PATH
    assert game.color_to_move == Color.WHITE
    assert game.board.to_fen() == STARTING_POSITION
    assert game.moves_played == 0


def test_unreadable_input_keeps_the_turn(game: Game) -> None:
    result = game.play("xyz")
    assert result.reason == Rejection.OUT_OF_BOUNDS
    assert game.color_to_move == Color.WHITE


def test_players_can_only_move_their_own_pieces(game: Game) -> None:
    game.play("e2 e4")
    # black to move, tries to move another white pawn
    assert game.play("d2 d4").reason == Rejection.WRONG_COLOR
    assert game.color_to_move == Color.BLACK


def test_turns_alternate(game: Game) -> None:
    for text in ["e2 e4", "e7 e5", "g1 f3", "b8 c6", "f1 c4", "g8 f6"]:
        assert game.play(text).accepted
    assert game.color_to_move == Color.WHITE
    assert game.moves_played == 6
    assert (
        game.board.to_fen() == "r1bqkb1r/pppp1ppp/2n2n2/4p3/2B1P3/5N2/PPPP1PPP/RNBQK2R"
    )


def test_quit(game: Game) -> None:
    game.play("e2 e4")
    fen_before = game.board.to_fen()
    game.quit()
    assert game.status == Status.ABORTED
    assert game.quit_by == Color.BLACK
    assert game.is_over
    assert game.board.to_fen() == fen_before


def test_no_moves_after_quitting(game: Game) -> None:
    game.quit()
    with pytest.raises(GameStateError):
        game.play("e2 e4")
    with pytest.raises(GameStateError):
        game.quit()


@pytest.mark.parametrize(
    "text, command, expected",
    [
        ("exit", "exit", True),
        ("EXIT", "exit", True),
        ("  Exit \n", "exit", True),
        ("quit", "quit", True),
        ("exit now", "exit", False),
        ("e2 e4", "exit", False),
        ("", "exit", False),
        ("exit", "quit", False),
    ],
)
def test_is_quit_command(text: str, command: str, expected: bool) -> None:
    assert is_quit_command(text, command) == expected
