"""
Win checker for the TicTacToe engine.
Checks if a player has won or if the game is a draw.
"""

from functools import lru_cache
from typing import Optional, Tuple

import numpy as np

from .game_state import GameState, Player
from .outcome import Line, Outcome


@lru_cache(maxsize=None)
def winning_lines(size: int) -> Tuple[Line, ...]:
    """
    All lines of an N x N board, as tuples of (row, col).

    Order: rows top to bottom, columns left to right, then the main
    diagonal and the anti-diagonal. Computed once per size.
    """
    cells = range(size)
    rows = [tuple((row, col) for col in cells) for row in cells]
    cols = [tuple((row, col) for row in cells) for col in cells]
    diagonal = tuple((i, i) for i in cells)
    anti_diagonal = tuple((i, size - 1 - i) for i in cells)
    return tuple(rows + cols + [diagonal, anti_diagonal])


@lru_cache(maxsize=None)
def _line_indices(size: int) -> Tuple[np.ndarray, np.ndarray]:
    """Row and column index arrays of shape (lines, size) for fancy indexing."""
    lines = np.array(winning_lines(size), dtype=np.intp)
    line_rows = lines[:, :, 0]
    line_cols = lines[:, :, 1]
    line_rows.setflags(write=False)
    line_cols.setflags(write=False)
    return line_rows, line_cols


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: all N cells of a row, column or diagonal hold the
    same player's mark. A line holding both players can never be won;
    the game is a draw once every line is like that.
    """

    def get_outcome(self, game_state: GameState) -> Outcome:
        """
        Work out the outcome of the current board.

        Args:
            game_state: The game state to look at.

        Returns:
            The first winning line in scan order, else Draw if no line can
            still be won, else Undecided.
        """
        n = game_state.size
        line_rows, line_cols = _line_indices(n)

        # Line coordinates are fixed per size, contents are read fresh
        values = game_state.board[line_rows, line_cols]
        crosses = np.count_nonzero(values == Player.CROSS.value, axis=1)
        noughts = np.count_nonzero(values == Player.NOUGHT.value, axis=1)

        full = np.flatnonzero((crosses == n) | (noughts == n))
        if full.size:
            first = int(full[0])
            winner = Player.CROSS if crosses[first] == n else Player.NOUGHT
            return Outcome.win(winner, winning_lines(n)[first])

        if np.all((crosses > 0) & (noughts > 0)):
            return Outcome.draw()

        return Outcome.undecided()

    def check_winner(self, game_state: GameState) -> Optional[Player]:
        """
        Check if there's a winner.

        Returns:
            The winning Player, or None if no winner yet.
        """
        return self.get_outcome(game_state).winner

    def check_draw(self, game_state: GameState) -> bool:
        """True when no line can be won by either player any more."""
        return self.get_outcome(game_state).is_draw

    def get_winning_line(self, game_state: GameState) -> Optional[Line]:
        """
        Get the winning line if there is one.

        Returns:
            The winning line as tuple of (row, col), or None.
        """
        outcome = self.get_outcome(game_state)
        return outcome.line if outcome.is_win else None
