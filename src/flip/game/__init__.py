"""
Flip game module.
This package contains the board, the move rules and the turn sequence.
"""

from .board import Board, EMPTY, PLAYER_O, PLAYER_X, opponent
from .rules import ValidMoveSet, WalkMode, directional_scan, is_legal_move, recompute_valid_moves
from .game import FlipGame, GameOverReason, GameResult, Turn, TurnEvent, start_new_game

__all__ = [
    'Board', 'EMPTY', 'PLAYER_O', 'PLAYER_X', 'opponent',
    'ValidMoveSet', 'WalkMode', 'directional_scan', 'is_legal_move', 'recompute_valid_moves',
    'FlipGame', 'GameOverReason', 'GameResult', 'Turn', 'TurnEvent', 'start_new_game',
]
