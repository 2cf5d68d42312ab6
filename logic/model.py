"""
Functional interface to the TicTacToe engine.

Front ends that want plain functions instead of the classes use these:
start a game, build and apply moves, read the outcome and ask the AI.
"""

from .ai_player import find_best_move
from .game_state import GameState, Move, Player
from .outcome import Outcome
from .win_checker import WinChecker

CROSS = Player.CROSS
NOUGHT = Player.NOUGHT

_win_checker = WinChecker()


def game_start(first: Player, size: int) -> GameState:
    """New game of the given size with `first` to move."""
    return GameState.start(first, size)


def create_move(row: int, col: int) -> Move:
    return Move(row, col)


def apply_move(game: GameState, move: Move) -> GameState:
    return game.apply_move(move)


def undo_move(game: GameState, move: Move) -> GameState:
    return game.undo_move(move)


def game_outcome(game: GameState) -> Outcome:
    return _win_checker.get_outcome(game)


__all__ = [
    "CROSS",
    "NOUGHT",
    "game_start",
    "create_move",
    "apply_move",
    "undo_move",
    "game_outcome",
    "find_best_move",
]
