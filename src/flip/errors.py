"""
Error types for the flip engine.
Each error carries a kind so callers can tell failures apart.
"""
from enum import Enum
from typing import Optional


class FlipError(Exception):
    """Base class for all engine errors."""


class ConfigErrorKind(Enum):
    BAD_SIZE = "bad_size"
    BAD_PLAYER_TYPE = "bad_player_type"


class LoadErrorKind(Enum):
    EMPTY_PATH = "empty_path"
    UNREADABLE = "unreadable"
    BAD_FORMAT = "bad_format"


class SaveErrorKind(Enum):
    EMPTY_PATH = "empty_path"
    WRITE_FAILURE = "write_failure"


class ConfigError(FlipError):
    """Raised when a new game is requested with bad settings."""

    def __init__(self, kind: ConfigErrorKind, message: str = ""):
        self.kind = kind
        super().__init__(message or kind.value)


class LoadError(FlipError):
    """Raised when a save file cannot be turned into a game."""

    def __init__(self, kind: LoadErrorKind, path: Optional[str] = None, message: str = ""):
        self.kind = kind
        self.path = path
        super().__init__(message or f"{kind.value}: {path!r}")


class SaveError(FlipError):
    """Raised when a game cannot be written to disk."""

    def __init__(self, kind: SaveErrorKind, path: Optional[str] = None, message: str = ""):
        self.kind = kind
        self.path = path
        super().__init__(message or f"{kind.value}: {path!r}")


class InvariantViolation(RuntimeError):
    """The engine reached a state its own turn sequence rules out."""
