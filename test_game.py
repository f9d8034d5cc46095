"""
Test script for the Reversi game session.
"""
import threading

import pytest

from reversi.ai import Difficulty
from reversi.config import get_default_config
from reversi.game import Board, ReversiGame, BLACK, WHITE


def make_game(**ai_overrides):
    config = get_default_config()
    for key, value in ai_overrides.items():
        setattr(config.ai, key, value)
    return ReversiGame(config)


def test_initial_game():
    game = make_game()
    assert game.ai_player.player == BLACK
    assert game.ai_player.difficulty == Difficulty.GREEDY
    assert game.human_player == WHITE
    assert game.is_ai_turn()
    assert game.move_count == 0
    assert game.get_score() == (2, 2)


def test_human_cannot_move_on_ai_turn():
    game = make_game()
    assert not game.make_move(2, 3)
    assert game.move_count == 0


def test_ai_opens_and_human_replies():
    game = make_game()
    assert game.play_ai_move() == (2, 3)
    assert game.move_count == 1
    assert not game.is_ai_turn()

    human_move = game.get_valid_moves()[0]
    assert game.make_move(*human_move)
    # The AI answers straight away
    assert game.move_count == 3
    assert game.board.current_player == WHITE
    assert not game.is_ai_turn()


def test_without_auto_respond_ai_waits():
    game = make_game(auto_respond=False)
    game.play_ai_move()
    assert game.make_move(*game.get_valid_moves()[0])
    assert game.move_count == 2
    assert game.is_ai_turn()


def test_invalid_human_move_rejected():
    game = make_game()
    game.play_ai_move()
    assert not game.make_move(0, 0)
    assert game.move_count == 1


def test_ai_timeout_discards_move():
    game = make_game()
    release = threading.Event()

    def slow_move(board):
        release.wait(5)
        return board.get_valid_moves()[0]

    game.ai_player.get_best_move = slow_move
    try:
        assert game.play_ai_move(timeout=0.05) is None
    finally:
        release.set()

    assert game.move_count == 0
    assert game.board.get_score() == (2, 2)
    assert not game.board.can_undo()


def test_undo_and_redo_track_move_count():
    game = make_game(auto_respond=False)
    assert not game.undo()

    game.play_ai_move()
    game.make_move(*game.get_valid_moves()[0])
    assert game.move_count == 2

    assert game.undo()
    assert game.move_count == 1
    assert game.redo()
    assert game.move_count == 2
    assert not game.redo()


def test_skip_lets_ai_finish_the_game():
    game = make_game()
    game.board = Board.from_rows([
        "BW......",
        "........",
        "........",
        "........",
        "........",
        "........",
        "........",
        "........",
    ], current_player=WHITE)

    assert game.get_valid_moves() == []
    assert game.skip()
    assert game.board.is_game_finished()
    assert not game.is_active
    assert game.get_winner() == BLACK
    assert game.move_count == 1

    assert not game.make_move(1, 1)
    assert not game.undo()
    assert game.play_ai_move() is None


def test_skip_refused_when_moves_exist():
    game = make_game()
    game.play_ai_move()
    assert not game.skip()


def test_new_game_with_difficulty_name():
    game = make_game(auto_respond=False)
    game.play_ai_move()
    game.make_move(*game.get_valid_moves()[0])

    game.new_game("expert")
    assert game.ai_player.difficulty == Difficulty.MINIMAX
    assert game.move_count == 0
    assert game.is_active
    assert game.get_score() == (2, 2)
    assert not game.board.can_undo()

    game.new_game()
    assert game.ai_player.difficulty == Difficulty.MINIMAX


def test_unknown_difficulty_in_config():
    with pytest.raises(ValueError):
        make_game(difficulty="impossible")


def test_get_state():
    game = make_game()
    state = game.get_state()
    assert state['board'][3][3] == WHITE
    assert state['current_player'] == BLACK
    assert state['valid_moves'] == [(2, 3), (3, 2), (4, 5), (5, 4)]
    assert (state['black_count'], state['white_count']) == (2, 2)
    assert state['status'] == 'PLAYING'
    assert state['is_ai_turn']
    assert state['difficulty'] == 'medium'


def test_full_game_against_ai_ends():
    game = make_game(difficulty="hard")
    game.play_ai_move()
    while game.is_active:
        moves = game.get_valid_moves()
        if moves:
            assert game.make_move(*moves[-1])
        else:
            assert game.skip()
    assert game.board.is_game_finished()
    black, white = game.get_score()
    assert game.get_winner() == (BLACK if black > white else WHITE if white > black else 0)
    assert "Moves played" in str(game)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
