"""
Reversi game module.
This package contains the core game logic for Reversi.
"""

from .board import Board, OccupiedCellError, Position, Stone
from .game import GameState, MoveResult, ReversiGame

__all__ = ['Board', 'GameState', 'MoveResult', 'OccupiedCellError', 'Position', 'ReversiGame', 'Stone']
