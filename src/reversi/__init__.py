"""
Reversi (Othello) rules engine and AI opponent.
"""
from .game import Board, ReversiGame, GameStatus, EMPTY, BLACK, WHITE
from .ai import AIPlayer, Difficulty
from .config import Config, get_default_config

__version__ = "0.2.0"

__all__ = ['Board', 'ReversiGame', 'GameStatus', 'EMPTY', 'BLACK', 'WHITE',
           'AIPlayer', 'Difficulty', 'Config', 'get_default_config']
