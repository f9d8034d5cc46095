"""
Reversi game module.
This package contains the core game logic for Reversi.
"""

from .board import (Board, GameStatus, MoveRecord, EMPTY, BLACK, WHITE, PASS,
                    opponent, player_name)
from .game import ReversiGame

__all__ = ['Board', 'GameStatus', 'MoveRecord', 'ReversiGame', 'EMPTY', 'BLACK',
           'WHITE', 'PASS', 'opponent', 'player_name']
