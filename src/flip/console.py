"""
Console front end: reads player commands from stdin and prints game progress.
"""
from typing import Callable, Optional

from .errors import SaveError, SaveErrorKind
from .game.board import SYMBOLS
from .game.game import FlipGame, GameResult
from .session import (
    Command,
    CommandSource,
    EndOfInput,
    GameListener,
    MoveCommand,
    SaveCommand,
)


def _leading_digits(text: str) -> str:
    """Cut `text` at its first non-digit character."""
    for i, ch in enumerate(text):
        if not '0' <= ch <= '9':
            return text[:i]
    return text


def _is_number(text: str) -> bool:
    return text != "" and all('0' <= ch <= '9' for ch in text)


def parse_command(line: str) -> Optional[Command]:
    """
    Turn one input line into a command.

    's<filename>' saves, '<x> <y>' moves. Returns None for anything else.
    """
    if line.startswith('s'):
        return SaveCommand(line[1:].strip())

    first, sep, second = line.partition(' ')
    if not sep or not first:
        return None
    second = _leading_digits(second)
    if not (_is_number(first) and _is_number(second)):
        return None
    return MoveCommand(int(first), int(second))


class ConsoleCommandSource(CommandSource):
    """Prompts the current player and reads lines until one parses."""

    def __init__(self, input_fn: Optional[Callable[[str], str]] = None):
        self.input_fn = input_fn or input

    def next_command(self, game: FlipGame) -> Command:
        prompt = f"Player ({SYMBOLS[game.current_player]})> "
        while True:
            try:
                line = self.input_fn(prompt)
            except EOFError:
                return EndOfInput()
            command = parse_command(line.rstrip('\n'))
            if command is not None:
                return command


class ConsoleListener(GameListener):
    """Prints the board and game messages to stdout."""

    def __init__(self, print_fn: Optional[Callable[..., None]] = None):
        self.print = print_fn or print

    def show_board(self, game: FlipGame) -> None:
        for row in game.board.render():
            self.print(row)

    def on_start(self, game: FlipGame) -> None:
        self.show_board(game)

    def on_pass(self, game: FlipGame, player: int) -> None:
        self.print(f"{SYMBOLS[player]} passes.")

    def on_move(self, game: FlipGame, player: int, x: int, y: int, by_ai: bool) -> None:
        if by_ai:
            self.print(f"Player {SYMBOLS[player]} moves at {x} {y}.")
        self.show_board(game)

    def on_saved(self, game: FlipGame, path: str) -> None:
        self.print("Game saved.")

    def on_save_failed(self, game: FlipGame, error: SaveError) -> None:
        if error.kind is SaveErrorKind.EMPTY_PATH:
            self.print("Please give a filename.")
        else:
            self.print(f"Unable to write to {error.path}.")

    def on_game_over(self, game: FlipGame, result: GameResult) -> None:
        self.print(f"Game Over - O={result.score_o} X={result.score_x}.")
