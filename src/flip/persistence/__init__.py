"""
Save file support for flip games.
"""
from .codec import MAGIC, SaveRecord, decode, encode, load_game, save_game

__all__ = ['MAGIC', 'SaveRecord', 'decode', 'encode', 'load_game', 'save_game']
