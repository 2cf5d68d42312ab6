"""
Move validator for the TicTacToe engine.
Validates that moves follow the rules.
"""

from typing import Optional, TYPE_CHECKING
from dataclasses import dataclass

from .config import GameConfig

if TYPE_CHECKING:
    from .game_state import GameState


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Row and column must lie on the board
    2. Can only place on empty cells
    """

    def validate_move(
        self,
        game_state: "GameState",
        row: int,
        col: int
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            row: Row to place the mark (0 to size-1).
            col: Column to place the mark (0 to size-1).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        size = game_state.size

        # Check if row/col are in valid range
        if not (0 <= row < size and 0 <= col < size):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position ({row}, {col}). Must be 0-{size - 1}."
            )

        # Check if cell is empty
        cell = int(game_state.board[row, col])
        if cell != 0:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell ({row}, {col}) is already occupied by {GameConfig.MARKERS[cell]}"
            )

        return ValidationResult(is_valid=True)

    def validate_undo(
        self,
        game_state: "GameState",
        row: int,
        col: int
    ) -> ValidationResult:
        """Check that a cell holds a mark that can be taken back."""
        size = game_state.size

        if not (0 <= row < size and 0 <= col < size):
            return ValidationResult(
                is_valid=False,
                error_message=f"Cannot undo ({row}, {col}): off the {size}x{size} board."
            )

        if int(game_state.board[row, col]) == 0:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cannot undo ({row}, {col}): cell is already empty."
            )

        return ValidationResult(is_valid=True)
