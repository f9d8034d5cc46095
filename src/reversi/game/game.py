"""
Reversi game module.
Handles game flow between a human player and the computer.
"""
import logging
from concurrent.futures import ThreadPoolExecutor, TimeoutError as FutureTimeoutError
from typing import List, Tuple, Optional, Dict, Any, Union

from ..ai.player import AIPlayer, Difficulty
from ..config import Config, get_default_config
from .board import Board, opponent, player_name

logger = logging.getLogger(__name__)


class ReversiGame:
    """
    Main game class for Reversi that manages the game state and flow.

    The human plays the color opposite to config.ai.player. When the AI owns
    the first move, call play_ai_move() to open the game.
    """

    def __init__(self, config: Optional[Config] = None):
        """
        Initialize a new Reversi game.

        Args:
            config: Configuration object (default: get_default_config())
        """
        self.config = config or get_default_config()
        self.board = Board(self.config.board.board_size)
        self.ai_player = self._create_ai(Difficulty.from_name(self.config.ai.difficulty))
        self.move_count = 0
        self.is_active = True

    def _create_ai(self, difficulty: Difficulty) -> AIPlayer:
        return AIPlayer(
            player=self.config.ai.player,
            difficulty=difficulty,
            search_depth=self.config.ai.search_depth,
            seed=self.config.seed,
        )

    @property
    def human_player(self) -> int:
        return opponent(self.ai_player.player)

    def new_game(self, difficulty: Union[Difficulty, str, None] = None) -> None:
        """
        Reset the game to its initial state.

        Args:
            difficulty: New AI tier, as a Difficulty or a name like 'expert'.
                Keeps the current tier if None.
        """
        if difficulty is None:
            difficulty = self.ai_player.difficulty
        elif isinstance(difficulty, str):
            difficulty = Difficulty.from_name(difficulty)

        self.board.new_game()
        self.ai_player = self._create_ai(difficulty)
        self.move_count = 0
        self.is_active = True
        logger.info("New game started with difficulty: %s", self.ai_player.difficulty.label)

    def is_ai_turn(self) -> bool:
        return self.is_active and self.board.current_player == self.ai_player.player

    def get_valid_moves(self) -> List[Tuple[int, int]]:
        return self.board.get_valid_moves()

    def make_move(self, row: int, col: int) -> bool:
        """
        Make a move for the human player.

        Args:
            row: Row of the move (0-based)
            col: Column of the move (0-based)

        Returns:
            bool: True if the move was valid and made, False otherwise
        """
        if not self.is_active or self.is_ai_turn():
            return False

        if not self.board.make_move(row, col):
            logger.warning("Invalid move: (%d, %d)", row, col)
            return False

        self._after_move()
        if self.config.ai.auto_respond:
            self._respond()
        return True

    def play_ai_move(self, timeout: Optional[float] = None) -> Optional[Tuple[int, int]]:
        """
        Let the AI choose and play a move.

        The search runs on a clone in a worker thread. If it does not finish
        within `timeout` seconds its result is discarded.

        Args:
            timeout: Seconds to wait (default: config.ai.move_timeout)

        Returns:
            The move played, or None if no move was made
        """
        if not self.is_active:
            return None
        if timeout is None:
            timeout = self.config.ai.move_timeout

        snapshot = self.board.clone_state()
        executor = ThreadPoolExecutor(max_workers=1)
        try:
            future = executor.submit(self.ai_player.get_best_move, snapshot)
            move = future.result(timeout=timeout)
        except FutureTimeoutError:
            logger.warning("AI move timeout after %.1fs, move discarded", timeout)
            return None
        finally:
            executor.shutdown(wait=False)

        if move is None:
            logger.info("%s has no valid moves", player_name(self.board.current_player))
            return None

        row, col = move
        if not self.board.make_move(row, col):
            return None

        self._after_move()
        return move

    def _respond(self) -> None:
        # The engine hands the turn back when the opponent is stuck,
        # so the AI may have to move more than once.
        while self.is_ai_turn():
            if self.play_ai_move() is None:
                break

    def _after_move(self) -> None:
        self.move_count += 1
        if self.board.is_game_finished():
            self.is_active = False
            black, white = self.board.get_score()
            logger.info("Game over after %d moves - Black: %d, White: %d",
                        self.move_count, black, white)

    def undo(self) -> bool:
        """Take back the last move."""
        if not self.is_active or self.move_count == 0:
            return False

        if not self.board.undo_move():
            return False
        self.move_count -= 1
        return True

    def redo(self) -> bool:
        """Replay the last move taken back."""
        if not self.is_active:
            return False

        if not self.board.redo_move():
            return False
        self._after_move()
        return True

    def skip(self) -> bool:
        """Pass the turn when the player to move has no valid move."""
        if not self.is_active or self.board.has_valid_move():
            return False

        if not self.board.skip_turn():
            return False

        if self.board.is_game_finished():
            self.is_active = False
        elif self.config.ai.auto_respond:
            self._respond()
        return True

    def get_score(self) -> Tuple[int, int]:
        """
        Get the current score (black, white).

        Returns:
            Tuple of (black_score, white_score)
        """
        return self.board.get_score()

    def get_winner(self) -> Optional[int]:
        return self.board.get_winner()

    def get_state(self) -> Dict[str, Any]:
        """
        Get everything a front end needs to draw the game.

        Returns:
            Dictionary with the board as nested lists, the player to move,
            valid moves, scores, move counter and status
        """
        black, white = self.board.get_score()
        return {
            'board': self.board.get_board_state().tolist(),
            'current_player': self.board.current_player,
            'valid_moves': self.board.get_valid_moves(),
            'black_count': black,
            'white_count': white,
            'move_count': self.move_count,
            'is_active': self.is_active,
            'is_ai_turn': self.is_ai_turn(),
            'status': self.board.get_game_status().name,
            'difficulty': self.ai_player.difficulty.label,
        }

    def __str__(self) -> str:
        """String representation of the game state."""
        return f"{self.board}\nMoves played: {self.move_count}"
