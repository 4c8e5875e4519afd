"""
flip: a two-player tile flipping board game engine.
"""

from .errors import (
    ConfigError,
    ConfigErrorKind,
    FlipError,
    InvariantViolation,
    LoadError,
    LoadErrorKind,
    SaveError,
    SaveErrorKind,
)
from .game import Board, FlipGame, GameOverReason, GameResult, start_new_game
from .ai import PlayerType
from .persistence import load_game, save_game

__all__ = [
    'Board', 'FlipGame', 'GameOverReason', 'GameResult', 'start_new_game',
    'PlayerType', 'load_game', 'save_game',
    'FlipError', 'ConfigError', 'ConfigErrorKind', 'LoadError', 'LoadErrorKind',
    'SaveError', 'SaveErrorKind', 'InvariantViolation',
]
