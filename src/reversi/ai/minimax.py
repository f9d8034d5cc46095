"""
Depth-limited minimax search with alpha-beta pruning.
"""
import logging
import math
from typing import List, Optional, Tuple

from ..game.board import Board, opponent
from .evaluation import score_for

logger = logging.getLogger(__name__)

Move = Tuple[int, int]


def minimax(board: Board, depth: int, alpha: float, beta: float, maximizing_player: int) -> float:
    """
    Score a position by searching `depth` plies ahead.

    The side equal to `maximizing_player` maximizes, the other side minimizes.
    A side without a legal move passes; passing does not use up depth.

    Args:
        board: Position to search; never modified
        depth: Remaining plies
        alpha: Best score the maximizer can already force
        beta: Best score the minimizer can already force
        maximizing_player: The player the score is computed for

    Returns:
        Score from `maximizing_player`'s point of view
    """
    if depth <= 0 or board.is_game_finished():
        return score_for(board, maximizing_player)

    valid_moves = board.get_valid_moves()
    if not valid_moves:
        if not board.has_valid_move(opponent(board.current_player)):
            return score_for(board, maximizing_player)
        passed = board.clone_state()
        passed.current_player = opponent(board.current_player)
        return minimax(passed, depth, alpha, beta, maximizing_player)

    if board.current_player == maximizing_player:
        max_score = -math.inf
        for row, col in valid_moves:
            child = board.clone_state()
            child.make_move(row, col)
            score = minimax(child, depth - 1, alpha, beta, maximizing_player)
            max_score = max(max_score, score)
            alpha = max(alpha, score)
            if beta <= alpha:
                break
        return max_score

    min_score = math.inf
    for row, col in valid_moves:
        child = board.clone_state()
        child.make_move(row, col)
        score = minimax(child, depth - 1, alpha, beta, maximizing_player)
        min_score = min(min_score, score)
        beta = min(beta, score)
        if beta <= alpha:
            break
    return min_score


def search_best_move(board: Board, depth: int,
                     moves: Optional[List[Move]] = None) -> Tuple[Optional[Move], float]:
    """
    Pick the root move with the highest minimax score for the player to move.
    Ties go to the first move in row-major order.

    Returns:
        (best_move, score), or (None, -inf) when there is nothing to play
    """
    if moves is None:
        moves = board.get_valid_moves()

    player = board.current_player
    best_move = None
    best_score = -math.inf

    for row, col in moves:
        child = board.clone_state()
        child.make_move(row, col)
        score = minimax(child, depth - 1, -math.inf, math.inf, player)
        if best_move is None or score > best_score:
            best_score = score
            best_move = (row, col)

    logger.debug("Minimax depth %d chose %s with score %s", depth, best_move, best_score)
    return best_move, best_score
