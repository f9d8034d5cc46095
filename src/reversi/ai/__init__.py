"""
Computer opponents for Reversi.
"""
from .player import AIPlayer, Difficulty, STRATEGIES
from .evaluation import evaluate_board, score_for, POSITION_WEIGHTS
from .minimax import minimax, search_best_move

__all__ = ['AIPlayer', 'Difficulty', 'STRATEGIES', 'evaluate_board', 'score_for',
           'POSITION_WEIGHTS', 'minimax', 'search_best_move']
