"""
Tests for the console front end.
"""

import sys

import pytest

import main
from logic.game_state import Player


def test_self_play_console_ends_in_draw(capsys):
    game = main.TicTacToeConsole(human_player=None, size=3)
    outcome = game.start()

    assert outcome.is_draw
    out = capsys.readouterr().out
    assert "AI plays both sides" in out
    assert "It's a DRAW!" in out


def test_human_input_is_checked_until_legal(capsys):
    scripted = iter(["abc", "1 1", "1 1", "9 9", "1 2 3"])

    def fake_input(prompt):
        try:
            return next(scripted)
        except StopIteration:
            # Keep playing the first free cell
            move = game.game_state.available_moves()[0]
            return f"{move.row},{move.col}"

    game = main.TicTacToeConsole(human_player=Player.CROSS, size=3, input_func=fake_input)
    outcome = game.start()

    assert outcome.is_terminal
    assert outcome.winner != Player.CROSS

    out = capsys.readouterr().out
    assert "Could not read 'abc'" in out
    assert "Illegal move: Cell (1, 1) is already occupied by X" in out
    assert "Illegal move: Invalid position (9, 9)" in out
    assert "Could not read '1 2 3'" in out
    assert ">>> AI places O" in out


def test_main_self_play_on_two_by_two(capsys):
    main.main(["--self-play", "--size", "2", "--verbose"])

    out = capsys.readouterr().out
    assert "X WINS!" in out
    assert "AI evaluated" in out
    assert "Goodbye!" in out


def test_main_rejects_bad_size():
    with pytest.raises(SystemExit):
        main.main(["--size", "0"])


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
