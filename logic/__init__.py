"""
N x N TicTacToe engine.
Handles game state, rules, outcomes and the minimax AI opponent.
"""

from .config import GameConfig
from .errors import (
    TicTacToeError,
    InvalidConfigurationError,
    IllegalMoveError,
    IllegalStateError,
    PreconditionError,
)
from .game_state import GameState, Move, Player
from .move_validator import MoveValidator, ValidationResult
from .outcome import Outcome, OutcomeKind, heuristic
from .win_checker import WinChecker, winning_lines
from .ai_player import AIPlayer, find_best_move

__version__ = "1.0.0"
