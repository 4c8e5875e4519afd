"""
Naive scan players.
Both pick the first legal cell of a fixed scan order over the valid move set,
so they are fully deterministic.
"""
from enum import IntEnum
from typing import TYPE_CHECKING, Iterator, Tuple

from ..errors import InvariantViolation

if TYPE_CHECKING:
    from ..game.rules import ValidMoveSet


class PlayerType(IntEnum):
    """Who chooses a player's moves."""
    HUMAN = 0
    FORWARD_SCAN = 1
    REVERSE_SCAN = 2


class ScanPlayer:
    """Picks the first legal cell in `scan_order`."""

    player_type = PlayerType.FORWARD_SCAN

    def scan_order(self, size: int) -> Iterator[Tuple[int, int]]:
        for x in range(size):
            for y in range(size):
                yield x, y

    def get_move(self, valid_moves: 'ValidMoveSet', tile: int) -> Tuple[int, int]:
        """
        Choose a move for `tile`.

        Raises:
            InvariantViolation: if no cell is marked legal for `tile`
        """
        for x, y in self.scan_order(valid_moves.size):
            if valid_moves.is_marked(x, y, tile):
                return x, y
        raise InvariantViolation(
            f"{self.player_type.name} player asked to move with no legal cell"
        )


class ReverseScanPlayer(ScanPlayer):
    """Scans backwards from the bottom-right corner."""

    player_type = PlayerType.REVERSE_SCAN

    def scan_order(self, size: int) -> Iterator[Tuple[int, int]]:
        for x in range(size - 1, -1, -1):
            for y in range(size - 1, -1, -1):
                yield x, y


_PLAYERS = {
    PlayerType.FORWARD_SCAN: ScanPlayer,
    PlayerType.REVERSE_SCAN: ReverseScanPlayer,
}


def create_player(player_type: int) -> ScanPlayer:
    """Build the AI for a non-human player type."""
    try:
        return _PLAYERS[PlayerType(player_type)]()
    except (KeyError, ValueError):
        raise ValueError(f"no AI for player type {player_type!r}") from None
