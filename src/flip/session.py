"""
Game session loop.
Drives a FlipGame to the end, polling a command source whenever a human
player has to move and reporting progress to a listener.
"""
import logging
from dataclasses import dataclass
from typing import Optional, Union

from .errors import SaveError
from .game.game import FlipGame, GameResult, TurnEvent
from .persistence.codec import MAGIC, save_game

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MoveCommand:
    x: int
    y: int


@dataclass(frozen=True)
class SaveCommand:
    path: str


@dataclass(frozen=True)
class EndOfInput:
    pass


Command = Union[MoveCommand, SaveCommand, EndOfInput]


class CommandSource:
    """Supplies human commands; `next_command` blocks until one is available."""

    def next_command(self, game: FlipGame) -> Command:
        raise NotImplementedError


class GameListener:
    """Receives game progress. All hooks do nothing by default."""

    def on_start(self, game: FlipGame) -> None:
        pass

    def on_pass(self, game: FlipGame, player: int) -> None:
        pass

    def on_move(self, game: FlipGame, player: int, x: int, y: int, by_ai: bool) -> None:
        pass

    def on_saved(self, game: FlipGame, path: str) -> None:
        pass

    def on_save_failed(self, game: FlipGame, error: SaveError) -> None:
        pass

    def on_game_over(self, game: FlipGame, result: GameResult) -> None:
        pass


def play(game: FlipGame, source: CommandSource, listener: Optional[GameListener] = None,
         magic: str = MAGIC) -> Optional[GameResult]:
    """
    Play `game` until it ends or the command source runs dry.

    Args:
        game: Game to drive, mutated in place
        source: Where human moves and save requests come from
        listener: Progress hooks
        magic: Magic tag written by save requests

    Returns:
        The final GameResult, or None if input ended before the game did
    """
    listener = listener or GameListener()
    listener.on_start(game)

    while True:
        turn = game.turn_decision()

        if turn.event is TurnEvent.GAME_OVER:
            listener.on_game_over(game, game.result)
            return game.result

        if turn.event is TurnEvent.PASSED:
            listener.on_pass(game, turn.player)
            continue

        if turn.event is TurnEvent.AI_MOVED:
            x, y = turn.move
            listener.on_move(game, turn.player, x, y, True)
            continue

        command = source.next_command(game)
        if isinstance(command, EndOfInput):
            logger.info("Input ended before the game finished")
            return None
        if isinstance(command, SaveCommand):
            try:
                save_game(command.path, game, magic)
            except SaveError as e:
                listener.on_save_failed(game, e)
            else:
                listener.on_saved(game, command.path)
        elif isinstance(command, MoveCommand):
            if game.submit_move(command.x, command.y):
                listener.on_move(game, turn.player, command.x, command.y, False)
