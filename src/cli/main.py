"""
Console entry point: two players take turns typing moves until one of them quits.

Usage:
    python -m src.cli.main [--glyphs ascii] [--position FEN] [--log-level INFO]
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Optional

from pydantic import ValidationError

from src.api.models import MoveRequest
from src.core.config import Settings
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import GlyphSet
from src.services.chess_service import ChessService

logger = logging.getLogger(__name__)

Reader = Callable[[], str]
Writer = Callable[[str], None]


class TurnLoop:
    """Console adapter around the service.

    Notes:
    - All I/O is isolated here, the service and the domain never print.
    - A rejected move re-prompts the same player, the turn only passes on an accepted move.
    """

    def __init__(
        self,
        service: ChessService,
        read: Reader,
        write: Writer,
        write_error: Optional[Writer] = None,
    ) -> None:
        self.service = service
        self.read = read
        self.write = write
        self.write_error = write_error or write

    def run(self) -> int:
        self.write(self.service.start().board)
        while True:
            self.write(self.service.prompt())
            try:
                line = self.read()
            except (EOFError, KeyboardInterrupt):
                logger.info("Input closed, leaving the game")
                self.write("Input closed. Game over.")
                return 0

            response = self.service.submit(MoveRequest(text=line))
            if response.game_over:
                self.write(response.message)
                return 0

            if response.accepted:
                self.write(response.board.board)
            else:
                self.write_error(response.message)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Two player console chess. Type moves like 'e2 e4', or 'exit' to quit."
    )
    parser.add_argument(
        "--glyphs",
        choices=[glyphs.value for glyphs in GlyphSet],
        help="draw pieces as chess symbols (unicode) or FEN letters (ascii)",
    )
    parser.add_argument(
        "--position",
        dest="starting_position",
        help="start from this board position (FEN placement) instead of the opening position",
    )
    parser.add_argument("--white", dest="white_player", help="name of the white player")
    parser.add_argument("--black", dest="black_player", help="name of the black player")
    parser.add_argument("--quit-command", help="word that ends the game (default: exit)")
    parser.add_argument("--log-level", help="DEBUG, INFO, WARNING, ...")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        settings = Settings.from_args(args)
    except (InvalidRequestError, ValidationError) as exc:
        parser.error(str(exc))

    # Basic logging setup
    logging.basicConfig(level=settings.log_level)

    service = ChessService.from_settings(settings)
    loop = TurnLoop(
        service,
        read=input,
        write=print,
        write_error=lambda message: print(message, file=sys.stderr),
    )
    return loop.run()


if __name__ == "__main__":
    sys.exit(main())
