"""
Binary save format for flip games.

Layout, no padding, integers little-endian:

    magic tag        ASCII program identifier ("flip"), no terminator
    passes           int32
    player O type    int32
    player X type    int32
    current turn     1 byte, 'O' or 'X'
    board size N     int32
    board            N rows of N bytes, '.', 'O' or 'X'
"""
import logging
import struct
from dataclasses import dataclass
import numpy as np

from ..ai.naive import PlayerType
from ..errors import LoadError, LoadErrorKind, SaveError, SaveErrorKind
from ..game.board import Board, PLAYER_O, PLAYER_X, SYMBOLS, TILES
from ..game.game import FlipGame

logger = logging.getLogger(__name__)

MAGIC = "flip"

_HEADER = struct.Struct("<iiici")

# byte value -> tile, -1 for bytes that are not a cell symbol
_BYTE_TO_TILE = np.full(256, -1, dtype=np.int8)
for _symbol, _tile in TILES.items():
    _BYTE_TO_TILE[ord(_symbol)] = _tile
_TILE_TO_BYTE = np.array([ord(SYMBOLS[t]) for t in sorted(SYMBOLS)], dtype=np.uint8)


@dataclass
class SaveRecord:
    """The persisted part of a game."""
    passes: int
    player_o: int
    player_x: int
    turn: int
    cells: np.ndarray

    @property
    def size(self) -> int:
        return int(self.cells.shape[0])

    @classmethod
    def from_game(cls, game: FlipGame) -> 'SaveRecord':
        return cls(
            passes=game.passes,
            player_o=int(game.player_types[PLAYER_O]),
            player_x=int(game.player_types[PLAYER_X]),
            turn=game.current_player,
            cells=game.board.get_board_state(),
        )

    def to_game(self) -> FlipGame:
        """Rebuild a game; the board comes from the record, not the opening."""
        board = Board(self.size, opening=False)
        board.cells[:, :] = self.cells
        return FlipGame(board, self.player_o, self.player_x, self.turn, self.passes)


def encode(record: SaveRecord, magic: str = MAGIC) -> bytes:
    """Serialize a record to the save layout."""
    header = _HEADER.pack(
        record.passes,
        record.player_o,
        record.player_x,
        SYMBOLS[record.turn].encode('ascii'),
        record.size,
    )
    board = _TILE_TO_BYTE[record.cells].tobytes()
    return magic.encode('ascii') + header + board


def _bad_format(message: str) -> LoadError:
    return LoadError(LoadErrorKind.BAD_FORMAT, message=message)


def decode(data: bytes, magic: str = MAGIC) -> SaveRecord:
    """
    Parse bytes in the save layout.

    Raises:
        LoadError: BAD_FORMAT if the data is not a complete, well-formed save
    """
    tag = magic.encode('ascii')
    if data[:len(tag)] != tag:
        raise _bad_format("magic tag mismatch")
    offset = len(tag)
    if len(data) < offset + _HEADER.size:
        raise _bad_format("truncated header")

    passes, player_o, player_x, turn, size = _HEADER.unpack_from(data, offset)
    offset += _HEADER.size

    if turn not in (b'O', b'X'):
        raise _bad_format(f"invalid turn byte {turn!r}")
    for kind in (player_o, player_x):
        if kind not in (PlayerType.HUMAN, PlayerType.FORWARD_SCAN, PlayerType.REVERSE_SCAN):
            raise _bad_format(f"invalid player type {kind}")
    if passes < 0:
        raise _bad_format(f"invalid pass count {passes}")
    if size < 2:
        raise _bad_format(f"invalid board size {size}")
    if len(data) - offset != size * size:
        raise _bad_format(f"expected {size * size} board bytes, found {len(data) - offset}")

    raw = np.frombuffer(data, dtype=np.uint8, count=size * size, offset=offset)
    cells = _BYTE_TO_TILE[raw].reshape(size, size)
    if np.any(cells < 0):
        raise _bad_format("unknown cell byte in board")

    return SaveRecord(passes, player_o, player_x, TILES[turn.decode('ascii')], cells)


def save_game(path: str, game: FlipGame, magic: str = MAGIC) -> None:
    """
    Write a game to `path`, replacing any existing file.

    Raises:
        SaveError: EMPTY_PATH or WRITE_FAILURE
    """
    game.filepath = path
    if not path:
        raise SaveError(SaveErrorKind.EMPTY_PATH)
    data = encode(SaveRecord.from_game(game), magic)
    try:
        with open(path, 'wb') as f:
            f.write(data)
    except OSError as e:
        raise SaveError(SaveErrorKind.WRITE_FAILURE, path, str(e)) from e
    logger.info("Saved %dx%d game to %s", game.size, game.size, path)


def load_game(path: str, magic: str = MAGIC) -> FlipGame:
    """
    Read a game from `path`.

    Raises:
        LoadError: EMPTY_PATH, UNREADABLE or BAD_FORMAT
    """
    if not path:
        raise LoadError(LoadErrorKind.EMPTY_PATH)
    try:
        with open(path, 'rb') as f:
            data = f.read()
    except OSError as e:
        raise LoadError(LoadErrorKind.UNREADABLE, path, str(e)) from e

    try:
        record = decode(data, magic)
    except LoadError as e:
        logger.warning("Rejected save file %s: %s", path, e)
        e.path = path
        raise

    game = record.to_game()
    game.filepath = path
    logger.info("Loaded %dx%d game from %s", game.size, game.size, path)
    return game
