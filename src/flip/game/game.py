"""
Flip game module.
Handles turn sequencing, passes, scoring and game-over detection.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple

from ..ai.naive import PlayerType, create_player
from ..errors import ConfigError, ConfigErrorKind
from .board import Board, PLAYER_O, PLAYER_X, SYMBOLS, opponent
from .rules import ValidMoveSet, recompute_valid_moves

logger = logging.getLogger(__name__)

MIN_BOARD_SIZE = 4


class GameOverReason(Enum):
    BOARD_FULL = "board_full"
    BOTH_PASSED = "both_passed"


@dataclass(frozen=True)
class GameResult:
    """Final outcome of a game."""
    reason: GameOverReason
    score_o: int
    score_x: int

    @property
    def winner(self) -> Optional[int]:
        """PLAYER_O, PLAYER_X, or None for a draw."""
        if self.score_o > self.score_x:
            return PLAYER_O
        if self.score_x > self.score_o:
            return PLAYER_X
        return None


class TurnEvent(Enum):
    GAME_OVER = "game_over"
    PASSED = "passed"
    AI_MOVED = "ai_moved"
    AWAITING_MOVE = "awaiting_move"


@dataclass(frozen=True)
class Turn:
    """What a single call to FlipGame.turn_decision did."""
    event: TurnEvent
    player: int
    move: Optional[Tuple[int, int]] = None


class FlipGame:
    """
    Main game class for flip that owns the board and the turn sequence.
    """

    def __init__(self, board: Board, player_o: int = PlayerType.HUMAN,
                 player_x: int = PlayerType.HUMAN, current_player: int = PLAYER_O,
                 passes: int = 0):
        """
        Initialize a game around an existing board.

        Args:
            board: Board to play on
            player_o: PlayerType for O
            player_x: PlayerType for X
            current_player: Player to move next
            passes: Consecutive passes so far
        """
        self.board = board
        self.size = board.size
        self.player_types: Dict[int, PlayerType] = {
            PLAYER_O: PlayerType(player_o),
            PLAYER_X: PlayerType(player_x),
        }
        self.current_player = current_player
        self.passes = passes
        self.score_o = 0
        self.score_x = 0
        self.filepath = ""
        self.result: Optional[GameResult] = None
        self.valid_moves = ValidMoveSet(board.size)
        self._valid_for: Optional[int] = None
        self._ai = {
            tile: create_player(kind)
            for tile, kind in self.player_types.items()
            if kind is not PlayerType.HUMAN
        }
        self.update_scoring()

    def update_valid_moves(self) -> ValidMoveSet:
        """Refresh the valid move set for the current player."""
        recompute_valid_moves(self.board, self.current_player, self.valid_moves)
        self._valid_for = self.current_player
        return self.valid_moves

    def update_scoring(self) -> Tuple[int, int]:
        self.score_o = self.board.count(PLAYER_O)
        self.score_x = self.board.count(PLAYER_X)
        return self.score_o, self.score_x

    def next_player(self) -> None:
        self.current_player = opponent(self.current_player)

    def is_ai(self, player: int) -> bool:
        return player in self._ai

    def turn_decision(self) -> Turn:
        """
        Run one step of the turn sequence.

        Returns:
            Turn describing what happened: the game ended, the current player
            passed, an AI player moved, or a human move is needed.
        """
        if self.result is not None:
            return Turn(TurnEvent.GAME_OVER, self.current_player)

        player = self.current_player
        self.update_valid_moves()
        self.update_scoring()

        if self.board.is_full():
            return self._finish(GameOverReason.BOARD_FULL)

        if not self.valid_moves.has_move(player):
            logger.debug("%s has no legal move and passes", SYMBOLS[player])
            self.next_player()
            self.passes += 1
            if self.passes > 1:
                self._finish(GameOverReason.BOTH_PASSED)
            return Turn(TurnEvent.PASSED, player)

        if self.is_ai(player):
            x, y = self._ai[player].get_move(self.valid_moves, player)
            self._put_tile(x, y)
            return Turn(TurnEvent.AI_MOVED, player, (x, y))

        return Turn(TurnEvent.AWAITING_MOVE, player)

    def submit_move(self, x: int, y: int) -> bool:
        """
        Try a move for the current player.

        Args:
            x: Row of the move (0-based)
            y: Column of the move (0-based)

        Returns:
            bool: True if the move was legal and made, False otherwise
        """
        if self.result is not None:
            return False
        if not self.board.in_bounds(x, y):
            return False
        if self._valid_for != self.current_player:
            self.update_valid_moves()
        if not self.valid_moves.is_marked(x, y, self.current_player):
            return False
        self._put_tile(x, y)
        return True

    def _put_tile(self, x: int, y: int) -> None:
        player = self.current_player
        flipped = self.board.place_and_capture(x, y, player)
        logger.debug("%s plays (%d, %d) flipping %d", SYMBOLS[player], x, y, flipped)
        self.next_player()
        self.passes = 0
        self._valid_for = None
        self.update_scoring()

    def _finish(self, reason: GameOverReason) -> Turn:
        self.result = GameResult(reason, self.score_o, self.score_x)
        logger.info("Game over (%s): O=%d X=%d", reason.value, self.score_o, self.score_x)
        return Turn(TurnEvent.GAME_OVER, self.current_player)

    def is_terminal(self) -> Optional[GameResult]:
        """The final result once the game has ended, else None."""
        return self.result

    def get_score(self) -> Tuple[int, int]:
        """
        Get the current score (O, X).

        Returns:
            Tuple of (o_score, x_score)
        """
        return self.score_o, self.score_x

    def copy(self) -> 'FlipGame':
        """Create a deep copy of the game."""
        new_game = FlipGame(self.board.copy(), self.player_types[PLAYER_O],
                            self.player_types[PLAYER_X], self.current_player, self.passes)
        new_game.filepath = self.filepath
        new_game.result = self.result
        return new_game

    def __str__(self) -> str:
        lines = self.board.render()
        lines.append(f"Current player: {SYMBOLS[self.current_player]}")
        lines.append(f"Score - O: {self.score_o}, X: {self.score_x}")
        return "\n".join(lines)


def start_new_game(size: int, player_o: int = 0, player_x: int = 0,
                   min_size: int = MIN_BOARD_SIZE) -> FlipGame:
    """
    Start a game on a fresh board.

    Args:
        size: Board side length, at least `min_size`
        player_o: PlayerType for O (0 human, 1 forward scan, 2 reverse scan)
        player_x: PlayerType for X

    Raises:
        ConfigError: BAD_SIZE or BAD_PLAYER_TYPE
    """
    if size < min_size:
        raise ConfigError(ConfigErrorKind.BAD_SIZE, f"board size must be at least {min_size}, got {size}")
    for kind in (player_o, player_x):
        try:
            PlayerType(kind)
        except ValueError:
            raise ConfigError(ConfigErrorKind.BAD_PLAYER_TYPE, f"invalid player type {kind!r}") from None
    logger.info("New %dx%d game: O=%s X=%s", size, size,
                PlayerType(player_o).name, PlayerType(player_x).name)
    return FlipGame(Board(size), player_o, player_x)
