"""
Arena for running tournaments between AI tiers with ELO rating.
"""
import logging
import time
from typing import List, Dict, Optional

from tqdm import tqdm

from ..ai.player import AIPlayer, Difficulty
from ..config import Config, get_default_config
from ..game.board import Board, BLACK, WHITE

logger = logging.getLogger(__name__)


class ELORatingSystem:
    """ELO rating system for tracking player strength."""

    def __init__(self, k: float = 32, initial_rating: float = 1500.0):
        """
        Initialize the ELO rating system.

        Args:
            k: K-factor, controls how much ratings change after each game
            initial_rating: Initial rating for new players
        """
        self.k = k
        self.initial_rating = initial_rating
        self.ratings: Dict[str, float] = {}
        self.games_played: Dict[str, int] = {}

    def add_player(self, player_id: str, rating: Optional[float] = None):
        """Add a new player to the rating system."""
        if player_id not in self.ratings:
            self.ratings[player_id] = rating if rating is not None else self.initial_rating
            self.games_played[player_id] = 0

    def get_rating(self, player_id: str) -> float:
        """Get the current rating of a player."""
        return self.ratings.get(player_id, self.initial_rating)

    def get_expected_score(self, rating_a: float, rating_b: float) -> float:
        """Calculate the expected score of player A against player B."""
        return 1.0 / (1.0 + 10.0 ** ((rating_b - rating_a) / 400.0))

    def update_ratings(self, player_a: str, player_b: str, score_a: float) -> Dict[str, float]:
        """
        Update ratings after a game.

        Args:
            player_a: ID of player A
            player_b: ID of player B
            score_a: Score for player A (1.0 for win, 0.5 for draw, 0.0 for loss)

        Returns:
            Ratings of both players before and after the game
        """
        self.add_player(player_a)
        self.add_player(player_b)

        rating_a = self.ratings[player_a]
        rating_b = self.ratings[player_b]

        expected_a = self.get_expected_score(rating_a, rating_b)
        delta = self.k * (score_a - expected_a)

        self.ratings[player_a] = rating_a + delta
        self.ratings[player_b] = rating_b - delta
        self.games_played[player_a] += 1
        self.games_played[player_b] += 1

        return {
            'rating_a_before': rating_a,
            'rating_b_before': rating_b,
            'rating_a_after': self.ratings[player_a],
            'rating_b_after': self.ratings[player_b],
        }

    def get_leaderboard(self) -> List[Dict]:
        """Get the current leaderboard sorted by rating."""
        leaderboard = [
            {'player_id': player_id, 'rating': rating, 'games_played': self.games_played[player_id]}
            for player_id, rating in self.ratings.items()
        ]
        leaderboard.sort(key=lambda x: x['rating'], reverse=True)
        return leaderboard


class Arena:
    """Arena for playing AI tiers against each other."""

    def __init__(self, config: Optional[Config] = None, elo_system: Optional[ELORatingSystem] = None):
        """
        Initialize the arena.

        Args:
            config: Configuration object (default: get_default_config())
            elo_system: Optional ELO rating system to use
        """
        self.config = config or get_default_config()
        if elo_system is None:
            elo_system = ELORatingSystem(k=self.config.arena.k,
                                         initial_rating=self.config.arena.initial_rating)
        self.elo = elo_system
        self.players: Dict[str, Difficulty] = {}
        self._games_started = 0

    def add_player(self, player_id: str, difficulty: Difficulty):
        """Register an AI tier under `player_id`."""
        self.players[player_id] = Difficulty(difficulty)
        self.elo.add_player(player_id)

    def _create_ai(self, player_id: str, color: int) -> AIPlayer:
        # Fresh seed per game so random tiers do not replay the same game
        seed = self.config.seed + self._games_started * 2 + color
        return AIPlayer(player=color, difficulty=self.players[player_id],
                        search_depth=self.config.ai.search_depth, seed=seed)

    def play_game(self, black_id: str, white_id: str) -> float:
        """
        Play a single game between two registered players.

        Args:
            black_id: ID of the player moving first
            white_id: ID of the second player

        Returns:
            1.0 if black_id wins, 0.5 for a draw, 0.0 if white_id wins
        """
        if black_id not in self.players or white_id not in self.players:
            raise ValueError(f"One or both players not found: {black_id}, {white_id}")

        ais = {BLACK: self._create_ai(black_id, BLACK), WHITE: self._create_ai(white_id, WHITE)}
        self._games_started += 1
        board = Board(self.config.board.board_size)

        while not board.is_game_finished():
            move = ais[board.current_player].get_best_move(board)
            if move is None:
                board.skip_turn()
            else:
                board.make_move(*move)

        black_count, white_count = board.get_score()
        logger.debug("%s (Black) vs %s (White): %d-%d", black_id, white_id, black_count, white_count)

        if black_count > white_count:
            return 1.0
        if white_count > black_count:
            return 0.0
        return 0.5

    def run_tournament(self, rounds: Optional[int] = None) -> Dict:
        """
        Run a round-robin tournament between all players.

        Args:
            rounds: Number of rounds to play (default: config.arena.rounds).
                Each pair meets once per round, colors alternating by round.

        Returns:
            Dictionary with tournament results
        """
        if rounds is None:
            rounds = self.config.arena.rounds

        player_ids = list(self.players.keys())
        if len(player_ids) < 2:
            raise ValueError("Need at least 2 players for a tournament")

        pairs = [(player_ids[i], player_ids[j])
                 for i in range(len(player_ids))
                 for j in range(i + 1, len(player_ids))]

        results = {
            'games_played': 0,
            'matchups': {
                f"{p1}_vs_{p2}": {'player1': p1, 'player2': p2, 'wins1': 0, 'wins2': 0, 'draws': 0}
                for p1, p2 in pairs
            },
            'start_time': time.time(),
        }

        progress = tqdm(total=rounds * len(pairs), desc="Tournament",
                        disable=not self.config.arena.show_progress)
        for round_num in range(rounds):
            for p1, p2 in pairs:
                black, white = (p1, p2) if round_num % 2 == 0 else (p2, p1)
                result = self.play_game(black, white)
                self.elo.update_ratings(black, white, result)

                # Score from p1's point of view
                score1 = result if black == p1 else 1.0 - result
                matchup = results['matchups'][f"{p1}_vs_{p2}"]
                if score1 == 1.0:
                    matchup['wins1'] += 1
                elif score1 == 0.0:
                    matchup['wins2'] += 1
                else:
                    matchup['draws'] += 1
                results['games_played'] += 1
                progress.update(1)

            logger.info("After round %d: %s", round_num + 1, self.format_leaderboard())
        progress.close()

        results['end_time'] = time.time()
        results['duration'] = results['end_time'] - results['start_time']
        results['leaderboard'] = self.elo.get_leaderboard()
        return results

    def format_leaderboard(self) -> str:
        """Format the current leaderboard on one line."""
        return ", ".join(f"{i}. {entry['player_id']} {entry['rating']:.1f}"
                         for i, entry in enumerate(self.elo.get_leaderboard(), 1))
