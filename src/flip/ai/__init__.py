"""
Naive AI players for flip.
"""
from .naive import PlayerType, ReverseScanPlayer, ScanPlayer, create_player

__all__ = ['PlayerType', 'ScanPlayer', 'ReverseScanPlayer', 'create_player']
