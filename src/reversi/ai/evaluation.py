"""
Static evaluation for Reversi positions.
"""
import numpy as np

from ..game.board import Board, BLACK, WHITE

# Corners are worth the most; the squares next to them hand corners to the opponent.
POSITION_WEIGHTS = np.array([
    [100, -20, 10,  5,  5, 10, -20, 100],
    [-20, -50, -2, -2, -2, -2, -50, -20],
    [ 10,  -2, -1, -1, -1, -1,  -2,  10],
    [  5,  -2, -1, -1, -1, -1,  -2,   5],
    [  5,  -2, -1, -1, -1, -1,  -2,   5],
    [ 10,  -2, -1, -1, -1, -1,  -2,  10],
    [-20, -50, -2, -2, -2, -2, -50, -20],
    [100, -20, 10,  5,  5, 10, -20, 100],
], dtype=np.int32)

PIECE_WEIGHT = 2


def position_weights(size: int) -> np.ndarray:
    """Get the positional weight table for a board of the given size."""
    if size != POSITION_WEIGHTS.shape[0]:
        raise ValueError(f"Positional weights are only defined for 8x8 boards, got {size}x{size}")
    return POSITION_WEIGHTS


def positional_score(board: Board) -> int:
    """Sum of weights under Black's pieces minus the sum under White's."""
    weights = position_weights(board.size)
    grid = board.grid
    return int(weights[grid == BLACK].sum() - weights[grid == WHITE].sum())


def evaluate_board(board: Board) -> int:
    """
    Evaluate a position from Black's point of view.

    Args:
        board: Position to evaluate

    Returns:
        PIECE_WEIGHT * (black - white) + positional score; positive favours Black
    """
    black, white = board.get_score()
    return PIECE_WEIGHT * (black - white) + positional_score(board)


def score_for(board: Board, player: int) -> int:
    """Evaluate a position from `player`'s point of view."""
    score = evaluate_board(board)
    return score if player == BLACK else -score
