"""
Test script for the flip game implementation.
"""
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent / "src"))

from flip.ai import PlayerType
from flip.errors import ConfigError, ConfigErrorKind
from flip.game.board import Board, PLAYER_O, PLAYER_X
from flip.game.game import FlipGame, GameOverReason, GameResult, TurnEvent, start_new_game


def assert_scores_consistent(game):
    n = game.size
    assert game.score_o + game.score_x + game.board.empty_count() == n * n


def test_new_game_defaults():
    game = start_new_game(4)
    assert game.current_player == PLAYER_O
    assert game.passes == 0
    assert game.get_score() == (2, 2)
    assert game.player_types == {PLAYER_O: PlayerType.HUMAN, PLAYER_X: PlayerType.HUMAN}
    assert game.is_terminal() is None


@pytest.mark.parametrize("size", [-1, 0, 3])
def test_bad_board_size(size):
    with pytest.raises(ConfigError) as excinfo:
        start_new_game(size)
    assert excinfo.value.kind is ConfigErrorKind.BAD_SIZE


@pytest.mark.parametrize("player_o, player_x", [(3, 0), (0, -1), (0, 7)])
def test_bad_player_type(player_o, player_x):
    with pytest.raises(ConfigError) as excinfo:
        start_new_game(8, player_o, player_x)
    assert excinfo.value.kind is ConfigErrorKind.BAD_PLAYER_TYPE


def test_legal_move_captures_and_switches_player():
    game = start_new_game(4)
    assert game.turn_decision().event is TurnEvent.AWAITING_MOVE

    assert game.submit_move(3, 1), "Should be a valid move"

    assert game.board.get(3, 1) == PLAYER_O
    assert game.board.get(2, 1) == PLAYER_O, "Should capture X tile"
    assert game.get_score() == (4, 1)
    assert game.current_player == PLAYER_X
    assert game.passes == 0
    assert_scores_consistent(game)


def test_unbracketed_move_is_ignored():
    game = start_new_game(4)
    game.turn_decision()
    before = game.board.copy()

    # (0, 1) brackets nothing for O on the opening board
    assert not game.submit_move(0, 1)

    assert game.board == before
    assert game.current_player == PLAYER_O


@pytest.mark.parametrize("x, y", [(1, 1), (4, 0), (0, 4), (-1, 2), (100, 100)])
def test_occupied_or_out_of_bounds_move_is_ignored(x, y):
    game = start_new_game(4)
    game.turn_decision()
    assert not game.submit_move(x, y)
    assert game.current_player == PLAYER_O
    assert game.get_score() == (2, 2)


def test_submit_move_without_turn_decision():
    game = start_new_game(4)
    assert game.submit_move(0, 2)
    # X's moves must be recomputed before X can play
    assert not game.submit_move(0, 2)
    assert game.submit_move(0, 1)


def test_ai_player_moves():
    game = start_new_game(4, player_o=PlayerType.FORWARD_SCAN)
    turn = game.turn_decision()
    assert turn.event is TurnEvent.AI_MOVED
    assert turn.player == PLAYER_O
    assert turn.move == (0, 2)
    assert game.current_player == PLAYER_X

    # X is human
    assert game.turn_decision().event is TurnEvent.AWAITING_MOVE


def test_reverse_ai_player_moves():
    game = start_new_game(4, player_o=PlayerType.REVERSE_SCAN)
    turn = game.turn_decision()
    assert turn.move == (3, 1)


@pytest.mark.parametrize("size", [4, 5, 6, 8])
@pytest.mark.parametrize("player_o, player_x", [(1, 2), (2, 1), (1, 1), (2, 2)])
def test_ai_game_keeps_invariants(size, player_o, player_x):
    game = start_new_game(size, player_o, player_x)
    for _ in range(4 * size * size):
        turn = game.turn_decision()
        assert_scores_consistent(game)
        assert turn.event is not TurnEvent.AWAITING_MOVE
        if turn.event is TurnEvent.GAME_OVER:
            break
    result = game.is_terminal()
    assert result is not None, "AI vs AI game should end"
    assert result.score_o + result.score_x + game.board.empty_count() == size * size
    if result.reason is GameOverReason.BOTH_PASSED:
        assert game.passes > 1


def test_full_board_ends_game():
    board = Board.from_rows([
        "OXOX",
        "XOXO",
        "OOOX",
        "XXXO",
    ])
    game = FlipGame(board)

    turn = game.turn_decision()

    assert turn.event is TurnEvent.GAME_OVER
    result = game.is_terminal()
    assert result.reason is GameOverReason.BOARD_FULL
    assert (result.score_o, result.score_x) == (8, 8)
    assert result.winner is None
    # once over, the game stays over
    assert game.turn_decision().event is TurnEvent.GAME_OVER
    assert not game.submit_move(0, 0)


def test_filling_last_cell_ends_game():
    board = Board.from_rows([
        ".XOO",
        "OOOO",
        "OOOO",
        "OOOO",
    ])
    game = FlipGame(board)
    assert game.submit_move(0, 0)
    assert game.board.is_full()
    assert game.turn_decision().event is TurnEvent.GAME_OVER
    assert game.is_terminal() == GameResult(GameOverReason.BOARD_FULL, 16, 0)
    assert game.is_terminal().winner == PLAYER_O


def test_two_passes_end_game():
    board = Board.from_rows([
        "O...",
        "....",
        "....",
        "....",
    ])
    game = FlipGame(board)

    first = game.turn_decision()
    assert first.event is TurnEvent.PASSED
    assert first.player == PLAYER_O
    assert game.passes == 1
    assert game.is_terminal() is None

    second = game.turn_decision()
    assert second.event is TurnEvent.PASSED
    assert second.player == PLAYER_X
    assert game.passes == 2

    assert game.turn_decision().event is TurnEvent.GAME_OVER
    result = game.is_terminal()
    assert result.reason is GameOverReason.BOTH_PASSED
    assert (result.score_o, result.score_x) == (1, 0)


def test_move_after_pass_resets_counter():
    board = Board.from_rows([
        "XO..",
        "....",
        "....",
        "....",
    ])
    game = FlipGame(board)

    assert game.turn_decision().event is TurnEvent.PASSED
    assert game.current_player == PLAYER_X
    assert game.passes == 1

    assert game.turn_decision().event is TurnEvent.AWAITING_MOVE
    assert game.submit_move(0, 2)
    assert game.passes == 0
    assert game.board.rows()[0] == "XXX."

    # O has no tiles left; both players now pass
    assert game.turn_decision().event is TurnEvent.PASSED
    assert game.turn_decision().event is TurnEvent.PASSED
    assert game.is_terminal().reason is GameOverReason.BOTH_PASSED


def test_copy_is_independent():
    game = start_new_game(4)
    clone = game.copy()
    clone.submit_move(3, 1)
    assert game.get_score() == (2, 2)
    assert game.current_player == PLAYER_O


def test_str_shows_board_and_score():
    text = str(start_new_game(4))
    assert "|.OX.|" in text
    assert "Score - O: 2, X: 2" in text


def test_current_player_is_a_plain_attribute():
    game = start_new_game(4)
    assert game.current_player == PLAYER_O
    assert not hasattr(FlipGame, "get_current_player")


if __name__ == "__main__":
    pytest.main([__file__])
