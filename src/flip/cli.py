"""
Command line entry point for flip.

    flip new <dim> [playerXtype] [playerOtype]
    flip load <filename>

Exit status: 0 game over, 1 usage, 2 bad board size, 3 bad player type,
4 load failure, 5 input ended before the game did.
"""
import argparse
import os
import sys
from typing import List, Optional

from .config import Config, get_default_config
from .console import ConsoleCommandSource, ConsoleListener, _leading_digits
from .errors import ConfigError, ConfigErrorKind, LoadError
from .game.board import SYMBOLS
from .game.game import FlipGame, start_new_game
from .logger import setup_logger
from .persistence.codec import load_game
from .session import play

USAGE = ("Usage: flip load filename\n"
         "    or flip new dim [playerXtype] [playerOtype]")

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_BAD_SIZE = 2
EXIT_BAD_PLAYER_TYPE = 3
EXIT_LOAD_FAILED = 4
EXIT_END_OF_INPUT = 5


class UsageError(Exception):
    pass


class _Parser(argparse.ArgumentParser):
    """ArgumentParser that reports bad invocations to the caller instead of exiting."""

    def error(self, message):
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(prog='flip', description='Two-player tile flipping board game', add_help=False)
    parser.add_argument('--config', type=str, default=None,
                        help='Path to a JSON config file')
    parser.add_argument('--log-level', type=str, default=None,
                        help='Logging level (DEBUG, INFO, WARNING, ...)')
    subparsers = parser.add_subparsers(dest='command', required=True)

    new = subparsers.add_parser('new', help='Start a new game', add_help=False)
    new.add_argument('dim', help='Board side length, greater than 3')
    new.add_argument('player_x', nargs='?', default=None,
                     help='Player X type: 0 human, 1 forward scan AI, 2 reverse scan AI')
    new.add_argument('player_o', nargs='?', default=None,
                     help='Player O type: 0 human, 1 forward scan AI, 2 reverse scan AI')

    load = subparsers.add_parser('load', help='Resume a saved game', add_help=False)
    load.add_argument('filename', help='Save file to load')
    return parser


def _parse_number(text: str, kind: ConfigErrorKind) -> int:
    text = text.strip()
    if not text or not all('0' <= ch <= '9' for ch in text):
        raise ConfigError(kind, f"not a non-negative integer: {text!r}")
    return int(text)


def new_game_from_args(args: argparse.Namespace, config: Config) -> FlipGame:
    """Validate `flip new` arguments in order and start the game.

    The last player type given is cut at its first non-digit, so `1x` reads as 1.
    """
    player_x, player_o = args.player_x, args.player_o
    if player_o is not None:
        player_o = _leading_digits(player_o)
    elif player_x is not None:
        player_x = _leading_digits(player_x)
    size = _parse_number(args.dim, ConfigErrorKind.BAD_SIZE)
    player_x = _parse_number('0' if player_x is None else player_x, ConfigErrorKind.BAD_PLAYER_TYPE)
    player_o = _parse_number('0' if player_o is None else player_o, ConfigErrorKind.BAD_PLAYER_TYPE)
    return start_new_game(size, player_o=player_o, player_x=player_x,
                          min_size=config.game.min_board_size)


def load_config(path: Optional[str]) -> Config:
    if path is None:
        return get_default_config()
    if not os.path.exists(path):
        print(f"Config file {path} not found, using default configuration", file=sys.stderr)
        return get_default_config()
    try:
        config = Config.load(path)
    except (ValueError, TypeError, AttributeError) as e:
        print(f"Config file {path} is invalid ({e}), using default configuration", file=sys.stderr)
        return get_default_config()
    magic_tag = config.persistence.magic_tag
    if not isinstance(magic_tag, str) or not magic_tag.isascii():
        print(f"Config file {path} has a non-ASCII magic_tag, using default configuration",
              file=sys.stderr)
        return get_default_config()
    return config


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        print(USAGE)
        return EXIT_USAGE

    try:
        args = build_parser().parse_args(argv)
    except UsageError:
        print(USAGE)
        return EXIT_USAGE

    config = load_config(args.config)
    if args.log_level:
        config.logging.log_level = args.log_level
    log = setup_logger(config)

    try:
        try:
            if args.command == 'new':
                game = new_game_from_args(args, config)
            else:
                game = load_game(args.filename, config.persistence.magic_tag)
        except ConfigError as e:
            log.logger.debug("Rejected setup: %s", e)
            if e.kind is ConfigErrorKind.BAD_SIZE:
                print("Invalid board dimension.")
                return EXIT_BAD_SIZE
            print("Invalid player type.")
            return EXIT_BAD_PLAYER_TYPE
        except LoadError as e:
            log.logger.debug("Load failed: %s", e)
            print("Error loading board.")
            return EXIT_LOAD_FAILED

        result = play(game, ConsoleCommandSource(), ConsoleListener(),
                      magic=config.persistence.magic_tag)
        if result is None:
            print(f"End of input from Player {SYMBOLS[game.current_player]}.")
            return EXIT_END_OF_INPUT
        return EXIT_OK
    finally:
        log.close()


if __name__ == "__main__":
    raise SystemExit(main())
