"""
Errors raised by the TicTacToe engine.
All of them are programming-contract violations and are never swallowed.
"""


class TicTacToeError(Exception):
    """Base class for every engine error."""


class InvalidConfigurationError(TicTacToeError, ValueError):
    """A game was set up with a bad size or a bad board."""


class IllegalMoveError(TicTacToeError, ValueError):
    """A move targets an occupied or out-of-range cell."""


class IllegalStateError(TicTacToeError, RuntimeError):
    """A move was undone on a cell that holds no mark."""


class PreconditionError(TicTacToeError, RuntimeError):
    """The search was asked for a move in a finished game."""
