"""
Test script for AI tournaments.
"""
import pytest

from reversi.ai import Difficulty
from reversi.arena import Arena, ELORatingSystem
from reversi.config import get_default_config


def make_arena(**arena_overrides):
    config = get_default_config()
    config.arena.show_progress = False
    for key, value in arena_overrides.items():
        setattr(config.arena, key, value)
    return Arena(config)


def test_expected_score():
    elo = ELORatingSystem()
    assert elo.get_expected_score(1500, 1500) == pytest.approx(0.5)
    assert elo.get_expected_score(1900, 1500) == pytest.approx(1 / 1.1)


def test_rating_update_is_zero_sum():
    elo = ELORatingSystem(k=32)
    record = elo.update_ratings("a", "b", 1.0)

    assert record['rating_a_after'] == pytest.approx(1516.0)
    assert record['rating_b_after'] == pytest.approx(1484.0)
    assert elo.get_rating("a") + elo.get_rating("b") == pytest.approx(3000.0)
    assert elo.games_played == {"a": 1, "b": 1}


def test_draw_between_equals_changes_nothing():
    elo = ELORatingSystem()
    elo.update_ratings("a", "b", 0.5)
    assert elo.get_rating("a") == pytest.approx(1500.0)
    assert elo.get_rating("b") == pytest.approx(1500.0)


def test_leaderboard_sorted():
    elo = ELORatingSystem()
    elo.add_player("low", 1400)
    elo.add_player("high", 1600)
    elo.add_player("mid")
    assert [entry['player_id'] for entry in elo.get_leaderboard()] == ["high", "mid", "low"]


def test_play_game_returns_result():
    arena = make_arena()
    arena.add_player("greedy", Difficulty.GREEDY)
    arena.add_player("positional", Difficulty.POSITIONAL)
    assert arena.play_game("greedy", "positional") in (0.0, 0.5, 1.0)


def test_deterministic_tiers_replay_the_same_game():
    arena = make_arena()
    arena.add_player("greedy", Difficulty.GREEDY)
    arena.add_player("positional", Difficulty.POSITIONAL)
    assert arena.play_game("greedy", "positional") == arena.play_game("greedy", "positional")


def test_play_game_unknown_player():
    arena = make_arena()
    arena.add_player("greedy", Difficulty.GREEDY)
    with pytest.raises(ValueError):
        arena.play_game("greedy", "nobody")


def test_tournament_needs_two_players():
    arena = make_arena()
    arena.add_player("greedy", Difficulty.GREEDY)
    with pytest.raises(ValueError):
        arena.run_tournament(1)


def test_run_tournament():
    arena = make_arena(rounds=2)
    arena.add_player("random", Difficulty.RANDOM)
    arena.add_player("greedy", Difficulty.GREEDY)
    arena.add_player("positional", Difficulty.POSITIONAL)

    results = arena.run_tournament()

    assert results['games_played'] == 6
    assert len(results['matchups']) == 3
    for matchup in results['matchups'].values():
        assert matchup['wins1'] + matchup['wins2'] + matchup['draws'] == 2
    assert len(results['leaderboard']) == 3
    assert sum(entry['rating'] for entry in results['leaderboard']) == pytest.approx(4500.0)
    assert all(entry['games_played'] == 4 for entry in results['leaderboard'])
    assert "1. " in arena.format_leaderboard()


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
