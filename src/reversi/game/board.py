"""
Board module for Reversi.
Handles the game board state, move validation, flipping and undo/redo history.
"""
import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import List, Tuple, Optional, Sequence

import numpy as np

logger = logging.getLogger(__name__)

# Player constants
EMPTY = 0
BLACK = 1  # Player 1, moves first
WHITE = 2  # Player 2

# Position recorded in the move log for a skipped turn
PASS = (-1, -1)

DIRECTIONS = [(-1, -1), (-1, 0), (-1, 1),
              (0, -1),           (0, 1),
              (1, -1),  (1, 0),  (1, 1)]

_SYMBOLS = {EMPTY: '.', BLACK: 'B', WHITE: 'W'}
_CELLS = {symbol: value for value, symbol in _SYMBOLS.items()}


def opponent(player: int) -> int:
    """Return the other player."""
    return 3 - player  # Toggle between BLACK (1) and WHITE (2)


def player_name(player: int) -> str:
    if player == BLACK:
        return "Black"
    if player == WHITE:
        return "White"
    return "None"


class GameStatus(IntEnum):
    PLAYING = 0
    WHITE_WIN = 1
    BLACK_WIN = 2
    DRAW = 3


@dataclass(frozen=True)
class MoveRecord:
    """A single entry of the move log."""
    position: Tuple[int, int]
    player: int
    pieces_flipped: int

    @property
    def is_pass(self) -> bool:
        return self.position == PASS


@dataclass(frozen=True, eq=False)
class GameSnapshot:
    """Full copy of the live game state, as kept on the undo/redo stacks."""
    grid: np.ndarray
    current_player: int
    game_over: bool
    move_history: Tuple[MoveRecord, ...]


class Board:
    """
    Reversi game engine.

    Owns the grid, the player to move, the undo/redo stacks and the move log.
    Commands that do not apply (illegal move, empty stack, skipping while a
    move exists) return False and leave the state untouched.
    """

    EMPTY = EMPTY
    BLACK = BLACK
    WHITE = WHITE

    def __init__(self, size: int = 8):
        """
        Initialize a new Reversi board in the standard starting position.

        Args:
            size: Board side length, an even number of at least 4
        """
        if size < 4 or size % 2 != 0:
            raise ValueError(f"Board size must be an even number >= 4, got {size}")

        self.size = size
        self.grid = np.zeros((size, size), dtype=np.int8)
        self.current_player = BLACK
        self.game_over = False
        self.move_history: List[MoveRecord] = []
        self.undo_stack: List[GameSnapshot] = []
        self.redo_stack: List[GameSnapshot] = []
        self.new_game()

    @classmethod
    def from_rows(cls, rows: Sequence[str], current_player: int = BLACK) -> 'Board':
        """
        Build a board from a textual position.

        Args:
            rows: One string per row using 'B', 'W' and '.'; spaces are ignored
            current_player: The player to move

        Returns:
            Board with empty history
        """
        if current_player not in (BLACK, WHITE):
            raise ValueError(f"Unknown player: {current_player}")

        cleaned = [row.replace(' ', '') for row in rows]
        board = cls(len(cleaned))
        for r, row in enumerate(cleaned):
            if len(row) != board.size:
                raise ValueError(f"Row {r} has {len(row)} cells, expected {board.size}")
            for c, symbol in enumerate(row):
                if symbol not in _CELLS:
                    raise ValueError(f"Unknown cell symbol {symbol!r} at ({r}, {c})")
                board.grid[r, c] = _CELLS[symbol]

        board.current_player = current_player
        return board

    def new_game(self) -> None:
        """Reset to the starting position with Black to move and no history."""
        self.grid.fill(EMPTY)
        mid = self.size // 2
        self.grid[mid - 1, mid - 1] = WHITE
        self.grid[mid - 1, mid] = BLACK
        self.grid[mid, mid - 1] = BLACK
        self.grid[mid, mid] = WHITE

        self.current_player = BLACK
        self.game_over = False
        self.move_history = []
        self.undo_stack = []
        self.redo_stack = []

    def clone_state(self) -> 'Board':
        """
        Copy the grid, player to move and finished flag.
        The clone starts with empty undo/redo stacks and an empty move log.
        """
        clone = Board.__new__(Board)
        clone.size = self.size
        clone.grid = self.grid.copy()
        clone.current_player = self.current_player
        clone.game_over = self.game_over
        clone.move_history = []
        clone.undo_stack = []
        clone.redo_stack = []
        return clone

    def _in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def get_board_cell(self, row: int, col: int) -> int:
        if not self._in_bounds(row, col):
            return EMPTY
        return int(self.grid[row, col])

    def get_board_state(self) -> np.ndarray:
        """Get a copy of the grid as a numpy array."""
        return self.grid.copy()

    def get_current_player(self) -> int:
        return self.current_player

    def is_game_finished(self) -> bool:
        return self.game_over

    def is_valid_move(self, row: int, col: int, player: Optional[int] = None) -> bool:
        """Check if placing a piece of `player` at (row, col) brackets anything."""
        if player is None:
            player = self.current_player

        if not self._in_bounds(row, col) or self.grid[row, col] != EMPTY:
            return False

        other = opponent(player)
        for dr, dc in DIRECTIONS:
            r, c = row + dr, col + dc
            found_opponent = False
            while self._in_bounds(r, c):
                cell = self.grid[r, c]
                if cell == other:
                    found_opponent = True
                    r += dr
                    c += dc
                elif cell == player and found_opponent:
                    return True
                else:
                    break

        return False

    def get_flips(self, row: int, col: int, player: Optional[int] = None) -> List[Tuple[int, int]]:
        """
        Get the opponent pieces a move at (row, col) would flip.

        Each direction is walked independently; a run only counts when it is
        closed by one of the mover's pieces.

        Args:
            row: Row of the move (0-based)
            col: Column of the move (0-based)
            player: The moving player. If None, uses current_player

        Returns:
            List of (row, col) tuples, empty for an illegal move
        """
        if player is None:
            player = self.current_player

        if not self._in_bounds(row, col) or self.grid[row, col] != EMPTY:
            return []

        other = opponent(player)
        flips = []
        for dr, dc in DIRECTIONS:
            r, c = row + dr, col + dc
            line = []
            while self._in_bounds(r, c) and self.grid[r, c] == other:
                line.append((r, c))
                r += dr
                c += dc
            if line and self._in_bounds(r, c) and self.grid[r, c] == player:
                flips.extend(line)

        return flips

    def get_valid_moves(self, player: Optional[int] = None) -> List[Tuple[int, int]]:
        """
        Get all valid moves, scanned row by row.

        Args:
            player: The player to get valid moves for. If None, uses current player.

        Returns:
            List of (row, col) tuples in row-major order
        """
        if player is None:
            player = self.current_player

        return [(row, col)
                for row in range(self.size)
                for col in range(self.size)
                if self.is_valid_move(row, col, player)]

    def has_valid_move(self, player: Optional[int] = None) -> bool:
        """Check if the player has any valid moves."""
        if player is None:
            player = self.current_player

        return any(self.is_valid_move(row, col, player)
                   for row in range(self.size)
                   for col in range(self.size))

    def make_move(self, row: int, col: int) -> bool:
        """
        Play the current player's piece at (row, col).

        Args:
            row: Row of the move (0-based)
            col: Column of the move (0-based)

        Returns:
            bool: True if the move was valid and made, False otherwise
        """
        if self.game_over or not self.is_valid_move(row, col, self.current_player):
            logger.debug("Rejected move (%d, %d) for %s", row, col, player_name(self.current_player))
            return False

        self._save_state()

        mover = self.current_player
        flips = self.get_flips(row, col, mover)
        self.grid[row, col] = mover
        for r, c in flips:
            self.grid[r, c] = mover

        self.move_history.append(MoveRecord((row, col), mover, len(flips)))

        self.current_player = opponent(mover)
        self.redo_stack = []
        self._resolve_turn()
        return True

    def skip_turn(self) -> bool:
        """
        Pass the turn. Only allowed when the current player has no valid move.

        Returns:
            bool: True if the turn was passed, False otherwise
        """
        if self.game_over or self.has_valid_move(self.current_player):
            return False

        self._save_state()
        self.move_history.append(MoveRecord(PASS, self.current_player, 0))

        self.current_player = opponent(self.current_player)
        self.redo_stack = []
        self._resolve_turn()
        return True

    def _resolve_turn(self) -> None:
        # The new player is stuck: hand the turn back. If the original player
        # is stuck as well the game is over.
        if self.has_valid_move(self.current_player):
            return

        self.current_player = opponent(self.current_player)
        if not self.has_valid_move(self.current_player):
            self.game_over = True
            black, white = self.get_score()
            logger.debug("Game over - Black: %d, White: %d", black, white)

    def _snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            grid=self.grid.copy(),
            current_player=self.current_player,
            game_over=self.game_over,
            move_history=tuple(self.move_history),
        )

    def _restore(self, snapshot: GameSnapshot) -> None:
        self.grid = snapshot.grid.copy()
        self.current_player = snapshot.current_player
        self.game_over = snapshot.game_over
        self.move_history = list(snapshot.move_history)

    def _save_state(self) -> None:
        self.undo_stack.append(self._snapshot())

    def can_undo(self) -> bool:
        return len(self.undo_stack) > 0

    def can_redo(self) -> bool:
        return len(self.redo_stack) > 0

    def undo_move(self) -> bool:
        """Step back to the state before the last move or skip."""
        if not self.undo_stack:
            return False

        snapshot = self.undo_stack.pop()
        self.redo_stack.append(self._snapshot())
        self._restore(snapshot)
        return True

    def redo_move(self) -> bool:
        """Replay the most recently undone move or skip."""
        if not self.redo_stack:
            return False

        snapshot = self.redo_stack.pop()
        self.undo_stack.append(self._snapshot())
        self._restore(snapshot)
        return True

    def count_pieces(self, player: int) -> int:
        return int(np.count_nonzero(self.grid == player))

    def get_black_count(self) -> int:
        return self.count_pieces(BLACK)

    def get_white_count(self) -> int:
        return self.count_pieces(WHITE)

    def get_score(self) -> Tuple[int, int]:
        """
        Get the current score (black, white).

        Returns:
            Tuple of (black_score, white_score)
        """
        return self.get_black_count(), self.get_white_count()

    def get_game_status(self) -> GameStatus:
        if not self.game_over:
            return GameStatus.PLAYING

        black, white = self.get_score()
        if black > white:
            return GameStatus.BLACK_WIN
        if white > black:
            return GameStatus.WHITE_WIN
        return GameStatus.DRAW

    def get_winner(self) -> Optional[int]:
        """
        Get the winner of the game.

        Returns:
            int: BLACK, WHITE, or 0 for draw, None if game not over
        """
        status = self.get_game_status()
        if status == GameStatus.PLAYING:
            return None
        if status == GameStatus.BLACK_WIN:
            return BLACK
        if status == GameStatus.WHITE_WIN:
            return WHITE
        return 0

    def get_move_history(self) -> List[MoveRecord]:
        return list(self.move_history)

    def __str__(self) -> str:
        """Return a string representation of the board."""
        rows = [' '.join(_SYMBOLS[int(cell)] for cell in row) for row in self.grid]

        status = ["\n".join(rows)]
        status.append(f"Current player: {player_name(self.current_player)}")

        black_count, white_count = self.get_score()
        status.append(f"Score - Black: {black_count}, White: {white_count}")

        if self.game_over:
            winner = self.get_winner()
            if winner == 0:
                status.append("Game over! It's a draw!")
            else:
                status.append(f"Game over! {player_name(winner)} wins!")

        return "\n".join(status)
