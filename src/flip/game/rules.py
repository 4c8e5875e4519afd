"""
Move validation and capture resolution.
Pure functions over a Board: directional line walks, move legality and the
per-turn valid move set.
"""
from enum import Enum
from typing import TYPE_CHECKING, Iterator, Optional, Tuple
import numpy as np

if TYPE_CHECKING:
    from .board import Board

EMPTY = 0

# (dx, dy) for all 8 paths from a tile
DIRECTIONS = ((-1, -1), (-1, 0), (-1, 1),
              (0, -1),           (0, 1),
              (1, -1),  (1, 0),  (1, 1))


class WalkMode(Enum):
    """What a directional scan does to the cells it walks over."""
    VALIDATE = 1  # report whether a capturable line exists
    REPLACE = 2   # also flip the opposing tiles (line assumed validated)


def directional_scan(x: int, y: int, dx: int, dy: int, tile: int,
                     board: 'Board', mode: WalkMode = WalkMode.VALIDATE) -> int:
    """
    Walk from (x, y) along (dx, dy) looking for a bracket.

    Args:
        x, y: Starting cell (not inspected itself)
        dx, dy: Step vector
        tile: The player looking for a bracket
        board: Board to walk over
        mode: VALIDATE only counts, REPLACE also flips opposing tiles

    Returns:
        Number of opposing tiles between (x, y) and the first `tile` cell,
        or 0 when the walk leaves the board or reaches an empty cell first.
    """
    cells = board.cells
    size = board.size
    enemy_pieces = 0
    i, j = x, y
    while True:
        i += dx
        j += dy
        if i < 0 or j < 0 or i >= size or j >= size:
            return 0
        cell = cells[i, j]
        if cell == EMPTY:
            return 0
        if cell != tile:
            enemy_pieces += 1
            if mode is WalkMode.REPLACE:
                cells[i, j] = tile
        else:
            return enemy_pieces


def is_legal_move(x: int, y: int, tile: int, board: 'Board') -> bool:
    """Check if placing `tile` at (x, y) captures at least one line."""
    if board.cells[x, y] != EMPTY:
        return False
    for dx, dy in DIRECTIONS:
        if directional_scan(x, y, dx, dy, tile, board, WalkMode.VALIDATE):
            return True
    return False


class ValidMoveSet:
    """
    Per-turn grid marking which player may place on each cell.
    Derived state: cleared and rebuilt every turn.
    """

    def __init__(self, size: int):
        self.size = size
        self.grid = np.zeros((size, size), dtype=np.int8)

    def clear(self) -> None:
        self.grid.fill(EMPTY)

    def mark(self, x: int, y: int, tile: int) -> None:
        self.grid[x, y] = tile

    def is_marked(self, x: int, y: int, tile: int) -> bool:
        if x < 0 or y < 0 or x >= self.size or y >= self.size:
            return False
        return bool(self.grid[x, y] == tile)

    def has_move(self, tile: int) -> bool:
        return bool(np.any(self.grid == tile))

    def positions(self, tile: int) -> Iterator[Tuple[int, int]]:
        """Yield the legal cells for `tile` in row-major order."""
        for x, y in zip(*np.nonzero(self.grid == tile)):
            yield int(x), int(y)

    def __eq__(self, other) -> bool:
        if not isinstance(other, ValidMoveSet):
            return NotImplemented
        return self.size == other.size and np.array_equal(self.grid, other.grid)

    def __repr__(self) -> str:
        return f"ValidMoveSet(size={self.size}, moves={int(np.count_nonzero(self.grid))})"


def recompute_valid_moves(board: 'Board', tile: int,
                          valid: Optional[ValidMoveSet] = None) -> ValidMoveSet:
    """
    Rebuild the valid move set for `tile`.

    Args:
        board: Current board
        tile: Player to move
        valid: Scratch set to reuse; a new one is allocated when omitted

    Returns:
        The refreshed ValidMoveSet
    """
    if valid is None or valid.size != board.size:
        valid = ValidMoveSet(board.size)
    else:
        valid.clear()
    for i in range(board.size):
        for j in range(board.size):
            if is_legal_move(i, j, tile, board):
                valid.mark(i, j, tile)
    return valid
