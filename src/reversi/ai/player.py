"""
Computer opponent with four difficulty tiers.
"""
import logging
import random
from enum import IntEnum
from typing import Callable, Dict, List, Optional, Tuple

from ..game.board import Board, BLACK, WHITE, player_name
from .evaluation import position_weights
from .minimax import search_best_move

logger = logging.getLogger(__name__)

Move = Tuple[int, int]

DEFAULT_SEARCH_DEPTH = 3


class Difficulty(IntEnum):
    RANDOM = 0
    GREEDY = 1
    POSITIONAL = 2
    MINIMAX = 3

    @property
    def label(self) -> str:
        return _LABELS[self]

    @classmethod
    def from_name(cls, name: str) -> 'Difficulty':
        """Look up a tier by label ('easy' ... 'expert') or member name ('MINIMAX')."""
        key = name.strip().lower()
        for difficulty, label in _LABELS.items():
            if key in (label, difficulty.name.lower()):
                return difficulty
        raise ValueError(f"Unknown difficulty: {name!r}")


_LABELS = {
    Difficulty.RANDOM: "easy",
    Difficulty.GREEDY: "medium",
    Difficulty.POSITIONAL: "hard",
    Difficulty.MINIMAX: "expert",
}

_STRATEGY_NAMES = {
    Difficulty.RANDOM: "Random",
    Difficulty.GREEDY: "Greedy",
    Difficulty.POSITIONAL: "Positional",
    Difficulty.MINIMAX: "Minimax",
}


def _pick_max(moves: List[Move], score: Callable[[Move], float]) -> Move:
    best_move = moves[0]
    best_score = score(best_move)
    for move in moves[1:]:
        value = score(move)
        if value > best_score:
            best_score = value
            best_move = move
    return best_move


def random_move(ai: 'AIPlayer', board: Board, moves: List[Move]) -> Move:
    return ai.rng.choice(moves)


def greedy_move(ai: 'AIPlayer', board: Board, moves: List[Move]) -> Move:
    """The move that flips the most pieces."""
    return _pick_max(moves, lambda move: len(board.get_flips(move[0], move[1])))


def positional_move(ai: 'AIPlayer', board: Board, moves: List[Move]) -> Move:
    """The move on the most valuable square."""
    weights = position_weights(board.size)
    return _pick_max(moves, lambda move: weights[move[0], move[1]])


def minimax_move(ai: 'AIPlayer', board: Board, moves: List[Move]) -> Move:
    move, _ = search_best_move(board, ai.search_depth, moves)
    return move


STRATEGIES: Dict[Difficulty, Callable[['AIPlayer', Board, List[Move]], Move]] = {
    Difficulty.RANDOM: random_move,
    Difficulty.GREEDY: greedy_move,
    Difficulty.POSITIONAL: positional_move,
    Difficulty.MINIMAX: minimax_move,
}


class AIPlayer:
    """Chooses moves for one side of the board."""

    def __init__(self, player: int = BLACK, difficulty: Difficulty = Difficulty.GREEDY,
                 search_depth: int = DEFAULT_SEARCH_DEPTH, seed: Optional[int] = None):
        """
        Initialize an AI player.

        Args:
            player: Color the AI plays for. Moves are always chosen for the
                board's current player; this is kept for display.
            difficulty: Strategy tier
            search_depth: Plies searched by the minimax tier
            seed: Seed for the random tier
        """
        if player not in (BLACK, WHITE):
            raise ValueError(f"Unknown player: {player}")
        if search_depth < 1:
            raise ValueError(f"Search depth must be at least 1, got {search_depth}")

        self.player = player
        self.difficulty = Difficulty(difficulty)
        self.search_depth = search_depth
        self.rng = random.Random(seed)

    def get_player(self) -> int:
        return self.player

    def get_difficulty(self) -> Difficulty:
        return self.difficulty

    def set_difficulty(self, difficulty: Difficulty) -> None:
        self.difficulty = Difficulty(difficulty)

    def get_name(self) -> str:
        return f"{player_name(self.player)} {self.difficulty.label.capitalize()} ({_STRATEGY_NAMES[self.difficulty]})"

    def get_best_move(self, board: Board) -> Optional[Move]:
        """
        Choose a move for the board's current player.

        Args:
            board: Current game state; left unchanged

        Returns:
            (row, col) of the chosen move, or None if there is no valid move
        """
        moves = board.get_valid_moves()
        if not moves:
            return None

        move = STRATEGIES[self.difficulty](self, board, moves)
        logger.debug("%s picked %s out of %d moves", self.get_name(), move, len(moves))
        return move

    def __repr__(self) -> str:
        return f"AIPlayer(player={self.player}, difficulty={self.difficulty.name}, search_depth={self.search_depth})"
