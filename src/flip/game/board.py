"""
Board module for flip.
Handles the grid of tiles, the opening position and capture-aware placement.
"""
from typing import List, Sequence
import numpy as np

from .rules import DIRECTIONS, WalkMode, directional_scan

# Tile values
EMPTY = 0
PLAYER_O = 1  # moves first
PLAYER_X = 2

SYMBOLS = {EMPTY: '.', PLAYER_O: 'O', PLAYER_X: 'X'}
TILES = {symbol: tile for tile, symbol in SYMBOLS.items()}


def opponent(player: int) -> int:
    """Return the other player."""
    return 3 - player


class Board:
    """
    Square N x N flip board.
    Cells are stored in a numpy int8 array indexed [x, y], x being the row.
    """

    def __init__(self, size: int, opening: bool = True):
        """
        Initialize a new board.

        Args:
            size: Side length N
            opening: Stamp the four centre tiles (off for boards read from a file)
        """
        if size < 2:
            raise ValueError(f"board size must be at least 2, got {size}")

        self.size = size
        self.cells = np.full((size, size), EMPTY, dtype=np.int8)
        self.border = '-' * size
        if opening:
            mid = (size - 1) // 2
            self.cells[mid, mid] = PLAYER_O
            self.cells[mid + 1, mid] = PLAYER_X
            self.cells[mid, mid + 1] = PLAYER_X
            self.cells[mid + 1, mid + 1] = PLAYER_O

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> 'Board':
        """Build a board from row strings of '.', 'O' and 'X'."""
        board = cls(len(rows), opening=False)
        for x, row in enumerate(rows):
            if len(row) != board.size:
                raise ValueError(f"row {x} has length {len(row)}, expected {board.size}")
            for y, symbol in enumerate(row):
                if symbol not in TILES:
                    raise ValueError(f"unknown cell symbol {symbol!r} at ({x}, {y})")
                board.cells[x, y] = TILES[symbol]
        return board

    def copy(self) -> 'Board':
        """Create a deep copy of the board."""
        new_board = Board(self.size, opening=False)
        new_board.cells = self.cells.copy()
        return new_board

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size

    def get(self, x: int, y: int) -> int:
        """Tile at (x, y); callers keep x and y within [0, size)."""
        return int(self.cells[x, y])

    def place_and_capture(self, x: int, y: int, player: int) -> int:
        """
        Place a tile and flip every bracketed line of opposing tiles.

        Args:
            x: Row of the placement
            y: Column of the placement
            player: PLAYER_O or PLAYER_X

        Returns:
            Number of tiles flipped
        """
        self.cells[x, y] = player
        flipped = 0
        for dx, dy in DIRECTIONS:
            if directional_scan(x, y, dx, dy, player, self, WalkMode.VALIDATE):
                flipped += directional_scan(x, y, dx, dy, player, self, WalkMode.REPLACE)
        return flipped

    def is_full(self) -> bool:
        return not bool(np.any(self.cells == EMPTY))

    def count(self, tile: int) -> int:
        return int(np.count_nonzero(self.cells == tile))

    def empty_count(self) -> int:
        return self.count(EMPTY)

    def rows(self) -> List[str]:
        """Rows as strings of '.', 'O' and 'X'."""
        return [''.join(SYMBOLS[int(tile)] for tile in row) for row in self.cells]

    def render(self) -> List[str]:
        """Display rows framed by the border."""
        frame = f"+{self.border}+"
        return [frame] + [f"|{row}|" for row in self.rows()] + [frame]

    def get_board_state(self) -> np.ndarray:
        """
        Get the current board state as a numpy array.

        Returns:
            Copy of the N x N tile array
        """
        return self.cells.copy()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.size == other.size and np.array_equal(self.cells, other.cells)

    def __str__(self) -> str:
        return "\n".join(self.render())
