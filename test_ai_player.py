"""
Tests for the minimax AI player.
Run with pytest, or directly: python test_ai_player.py
"""

import sys

import pytest

from logic.ai_player import AIPlayer, find_best_move
from logic.errors import PreconditionError
from logic.game_state import GameState, Move, Player
from logic.win_checker import WinChecker


X = Player.CROSS
O = Player.NOUGHT


def play_out(game: GameState):
    """Let the AI play both sides until the game ends."""
    checker = WinChecker()
    ai = AIPlayer()
    outcome = checker.get_outcome(game)
    while not outcome.is_terminal:
        game.apply_move(ai.get_best_move(game))
        outcome = checker.get_outcome(game)
    return outcome


# ==================== KNOWN POSITIONS ====================

def test_takes_the_win_as_cross():
    game = GameState.from_rows(["XX.", "OO.", "..."], X)
    assert find_best_move(game) == Move(0, 2)


def test_takes_the_win_as_nought():
    game = GameState.from_rows(["OO.", "XX.", "X.."], O)
    assert find_best_move(game) == Move(0, 2)


def test_blocks_the_opponent():
    # X threatens to finish row 1, every other reply loses at once
    game = GameState.from_rows(["O..", "XX.", "..."], O)
    assert find_best_move(game) == Move(1, 2)


def test_blocks_when_threat_is_first_empty_cell():
    game = GameState.from_rows(["XX.", ".O.", "..."], O)
    assert find_best_move(game) == Move(0, 2)


def test_only_move_is_returned():
    game = GameState.from_rows(["XOX", "OOX", "XX."], O)
    assert find_best_move(game) == Move(2, 2)


def test_wins_on_four_by_four():
    game = GameState.from_rows(["XXX.", "OO..", "O...", "...."], X)
    assert find_best_move(game) == Move(0, 3)


# ==================== TIE-BREAK ====================

def test_equal_moves_resolve_to_first_in_row_major_order():
    # Every opening move on an empty 3x3 board draws with best play
    assert find_best_move(GameState.start(X, 3)) == Move(0, 0)


def test_equal_wins_resolve_to_first_in_row_major_order():
    # X can win at (0, 2) or (2, 0)
    game = GameState.from_rows(["XX.", "X.O", ".OO"], X)
    assert find_best_move(game) == Move(0, 2)


@pytest.mark.parametrize("size", [1, 2])
def test_tiny_boards_pick_first_cell(size):
    assert find_best_move(GameState.start(O, size)) == Move(0, 0)


# ==================== STATE PRESERVATION ====================

@pytest.mark.parametrize("rows, player", [
    (["...", "...", "..."], X),
    (["X..", "...", "..."], O),
    (["O..", "XX.", "..."], O),
    (["XX.", "OO.", "..."], X),
    (["XXX.", "OO..", "O...", "...."], X),
])
def test_search_leaves_state_unchanged(rows, player):
    game = GameState.from_rows(rows, player)
    board = game.board
    before = game.copy()

    find_best_move(game)

    assert game == before
    assert game.board is board


# ==================== PRECONDITIONS ====================

def test_search_on_won_game_raises():
    game = GameState.from_rows(["XXX", "OO.", "..."], O)
    before = game.copy()

    with pytest.raises(PreconditionError):
        find_best_move(game)

    assert game == before


def test_search_on_full_board_raises():
    game = GameState.from_rows(["XOX", "XOO", "OXX"], O)
    with pytest.raises(PreconditionError):
        find_best_move(game)


def test_search_on_early_draw_raises():
    game = GameState.from_rows(["XOX", "XOO", "OX."], X)
    with pytest.raises(PreconditionError):
        find_best_move(game)


# ==================== SELF-PLAY ====================

@pytest.mark.parametrize("first", [X, O])
def test_self_play_on_three_by_three_is_a_draw(first):
    outcome = play_out(GameState.start(first, 3))
    assert outcome.is_draw


@pytest.mark.parametrize("first", [X, O])
def test_first_player_wins_on_two_by_two(first):
    outcome = play_out(GameState.start(first, 2))
    assert outcome.is_win
    assert outcome.winner == first


def test_first_player_wins_on_one_by_one():
    outcome = play_out(GameState.start(X, 1))
    assert outcome.winner == X
    assert outcome.line == ((0, 0),)


def test_ai_never_loses_from_any_reply():
    # Whatever X opens with, best play from there on draws
    for opening in GameState.start(X, 3).available_moves():
        game = GameState.start(X, 3)
        game.apply_move(opening)
        outcome = play_out(game)
        assert outcome.is_draw


# ==================== DIAGNOSTICS ====================

def test_counts_positions_and_prunes():
    ai = AIPlayer()
    ai.get_best_move(GameState.start(X, 3))
    first_count = ai.moves_evaluated

    # The unpruned 3x3 game tree has 549,946 nodes
    assert 0 < first_count < 549946

    ai.get_best_move(GameState.from_rows(["XX.", "OO.", "..."], X))
    assert 0 < ai.moves_evaluated < first_count


def test_verbose_prints_summary(capsys):
    AIPlayer(verbose=True).get_best_move(GameState.from_rows(["XX.", "OO.", "..."], X))
    out = capsys.readouterr().out
    assert "AI evaluated" in out
    assert "Best move: (0, 2) (score: 1)" in out


def test_quiet_by_default(capsys):
    find_best_move(GameState.from_rows(["XX.", "OO.", "..."], X))
    assert capsys.readouterr().out == ""


def test_move_suggestion():
    game = GameState.from_rows(["XX.", "OO.", "..."], X)
    assert AIPlayer().get_move_suggestion(game) == "Place X at position (0, 2)"


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
