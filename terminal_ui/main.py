"""Main entry point for the terminal blackjack table."""

import argparse
import sys
from dataclasses import replace
from random import Random
from typing import Callable

from blackjack.game import Action, BlackjackGame, Phase
from config import AppConfig
from logging_utils import get_logger, setup_logging
from terminal_ui.keys import key_to_action
from terminal_ui.render import TableRenderer

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAULT = 1
EXIT_USAGE = 2

# Phases that run on their own without waiting for a key
AUTO_PHASES = (Phase.DEAL, Phase.DEALER_TURN)


class TerminalTable:
    """
    Drive a game from line-based keyboard input.

    The table owns the game for the whole session: it ticks through phases
    that need no input, renders, reads a key and applies the mapped action.
    """

    def __init__(
        self,
        game: BlackjackGame,
        renderer: TableRenderer,
        read_key: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
    ) -> None:
        self.game = game
        self.renderer = renderer
        self._read_key = read_key
        self._write = write

    def run(self) -> int:
        """Play until the player quits or input ends. Returns an exit code."""
        while not self.game.quit_requested:
            if self.game.phase in AUTO_PHASES:
                self.game.apply(Action.TICK)
                continue

            self._write(self.renderer.render(self.game.snapshot()))
            try:
                raw = self._read_key("> ")
            except (EOFError, KeyboardInterrupt):
                logger.info("Input closed, leaving the table")
                break

            action = key_to_action(raw)
            if action is None:
                continue
            self.game.apply(action)

        return EXIT_OK


def build_parser(app_config: AppConfig) -> argparse.ArgumentParser:
    defaults = app_config.game
    parser = argparse.ArgumentParser(description="Play blackjack in the terminal.")
    parser.add_argument(
        "--players", type=int, default=defaults.num_players, help="number of players"
    )
    parser.add_argument(
        "--rounds", type=int, default=defaults.num_rounds, help="number of rounds"
    )
    parser.add_argument(
        "--seed", type=int, default=defaults.seed, help="seed for reproducible shuffles"
    )
    parser.add_argument(
        "--ties-push",
        action=argparse.BooleanOptionalAction,
        default=defaults.ties_push,
        help="equal scores push instead of going to the dealer",
    )
    parser.add_argument(
        "--no-color",
        dest="color",
        action="store_false",
        default=app_config.ui.color,
        help="disable ANSI colors",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Parse arguments, build the game and run the table."""
    try:
        app_config = AppConfig()
    except ValueError as exc:
        print(f"blackjack: {exc}", file=sys.stderr)
        return EXIT_USAGE

    args = build_parser(app_config).parse_args(argv)
    setup_logging(app_config.log.level, app_config.log.file)

    try:
        rules = replace(app_config.game.rules(), ties_push=args.ties_push)
        rng = Random(args.seed) if args.seed is not None else None
        game = BlackjackGame(args.players, args.rounds, rules=rules, rng=rng)
    except ValueError as exc:
        print(f"blackjack: {exc}", file=sys.stderr)
        return EXIT_USAGE

    table = TerminalTable(
        game,
        TableRenderer(color=args.color, clear_screen=sys.stdout.isatty()),
    )
    try:
        return table.run()
    except Exception:
        logger.exception("Unrecovered error, exiting")
        return EXIT_FAULT


def cli() -> None:
    sys.exit(main())


if __name__ == "__main__":
    cli()
