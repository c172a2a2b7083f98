"""
NoGo game engine package.

This package contains the rules the search engine plays against:
- Board management and placement legality
- Legal move generation
- Turn order and game end detection
"""

from .board import Board, Player
from .game import NoGoGame
from .move_generator import LegalMoveGenerator, Move, parse_move

__all__ = [
    'Board', 'Player',
    'Move', 'LegalMoveGenerator', 'parse_move',
    'NoGoGame'
]
