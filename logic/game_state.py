"""
Game state management for the TicTacToe engine.
Tracks the N x N board and whose turn it is.
"""

from enum import Enum
from typing import List, Sequence, Union
from dataclasses import dataclass

import numpy as np

from .config import GameConfig
from .errors import IllegalMoveError, IllegalStateError, InvalidConfigurationError
from .move_validator import MoveValidator

# Cell value of an empty square
EMPTY = 0


class Player(Enum):
    """The two players in the game. Values are the marks stored on the board."""
    CROSS = 1
    NOUGHT = -1

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.NOUGHT if self == Player.CROSS else Player.CROSS

    @property
    def marker(self) -> str:
        """Display marker ("X" or "O")."""
        return GameConfig.MARKERS[self.value]

    @classmethod
    def from_marker(cls, marker: str) -> "Player":
        """Look up a player by its display marker."""
        for player in cls:
            if player.marker == marker.upper():
                return player
        raise InvalidConfigurationError(f"Unknown player marker: {marker!r}")


@dataclass(frozen=True, order=True)
class Move:
    """
    A move in the game: the cell to mark.
    Moves order by row, then column.
    """
    row: int    # Row (0 to size-1)
    col: int    # Column (0 to size-1)


_validator = MoveValidator()


@dataclass(eq=False)
class GameState:
    """
    The complete state of a TicTacToe game.

    Tracks:
    - The N x N board (0 empty, +1 cross, -1 nought)
    - The board size N
    - Whose turn it is

    The state is mutated in place by apply_move/undo_move. Whoever is
    currently manipulating it owns it exclusively.
    """

    board: np.ndarray
    size: int
    current_player: Player

    @classmethod
    def start(cls, first_player: Player, size: int = GameConfig.DEFAULT_BOARD_SIZE) -> "GameState":
        """
        Start a new game on an empty board.

        Args:
            first_player: The player who moves first.
            size: Side length of the board.

        Returns:
            A fresh GameState.

        Raises:
            InvalidConfigurationError: If size is not an integer >= 1.
        """
        if isinstance(size, bool) or not isinstance(size, (int, np.integer)):
            raise InvalidConfigurationError(f"Board size must be an integer, got {size!r}")
        if size < GameConfig.MIN_BOARD_SIZE:
            raise InvalidConfigurationError(
                f"Board size must be at least {GameConfig.MIN_BOARD_SIZE}, got {size}"
            )
        if not isinstance(first_player, Player):
            raise InvalidConfigurationError(f"First player must be a Player, got {first_player!r}")

        size = int(size)
        board = np.full((size, size), EMPTY, dtype=np.int8)
        return cls(board=board, size=size, current_player=first_player)

    @classmethod
    def from_rows(
        cls,
        rows: Sequence[Union[str, Sequence[str]]],
        current_player: Player
    ) -> "GameState":
        """
        Build a state from a picture of the board.

        Each row is a string (or a sequence of strings) of display markers,
        e.g. ["XO.", ".X.", "..O"]. The board is copied, never shared.
        """
        size = len(rows)
        if size < GameConfig.MIN_BOARD_SIZE:
            raise InvalidConfigurationError("Board must have at least one row")

        state = cls.start(current_player, size)
        for row, cells in enumerate(rows):
            if len(cells) != size:
                raise InvalidConfigurationError(
                    f"Row {row} has {len(cells)} cells, expected {size}"
                )
            for col, marker in enumerate(cells):
                if marker in GameConfig.EMPTY_INPUT_MARKERS:
                    continue
                state.board[row, col] = Player.from_marker(marker).value
        return state

    @property
    def turn(self) -> Player:
        """Whose turn it is."""
        return self.current_player

    def get_piece(self, row: int, col: int) -> str:
        """Display form of a cell: "" when empty, else the player's marker."""
        return GameConfig.MARKERS[int(self.board[row, col])]

    def owner(self, row: int, col: int):
        """The Player occupying a cell, or None if it is empty."""
        cell = int(self.board[row, col])
        return None if cell == EMPTY else Player(cell)

    def apply_move(self, move: Move) -> "GameState":
        """
        Place the current player's mark and pass the turn.

        Args:
            move: The cell to mark.

        Returns:
            This state (mutated in place).

        Raises:
            IllegalMoveError: If the cell is occupied or off the board.
                The state is left untouched.
        """
        result = _validator.validate_move(self, move.row, move.col)
        if not result.is_valid:
            raise IllegalMoveError(result.error_message)

        self.board[move.row, move.col] = self.current_player.value
        self.current_player = self.current_player.opposite()
        return self

    def undo_move(self, move: Move) -> "GameState":
        """
        Take back a move: clear the cell and hand the turn back.
        Exact inverse of apply_move for the same move.

        Raises:
            IllegalStateError: If the cell holds no mark.
        """
        result = _validator.validate_undo(self, move.row, move.col)
        if not result.is_valid:
            raise IllegalStateError(result.error_message)

        self.board[move.row, move.col] = EMPTY
        self.current_player = self.current_player.opposite()
        return self

    def available_moves(self) -> List[Move]:
        """
        Get all empty cells on the board, in row-major order.

        Returns:
            List of Move.
        """
        rows, cols = np.nonzero(self.board == EMPTY)
        return [Move(int(row), int(col)) for row, col in zip(rows, cols)]

    def move_count(self) -> int:
        """Number of marks on the board."""
        return int(np.count_nonzero(self.board))

    def copy(self) -> "GameState":
        """Create a deep copy of the game state."""
        return GameState(
            board=self.board.copy(),
            size=self.size,
            current_player=self.current_player
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, GameState):
            return NotImplemented
        return (
            self.size == other.size
            and self.current_player == other.current_player
            and np.array_equal(self.board, other.board)
        )

    def print_board(self):
        """Print the board to console."""
        n = self.size
        print("\n  " + "".join(f"  {col} " for col in range(n)))
        print("  ┌" + "┬".join("───" for _ in range(n)) + "┐")

        for row in range(n):
            cells = "│".join(f" {self.get_piece(row, col) or ' '} " for col in range(n))
            print(f"{row} │{cells}│")

            if row < n - 1:
                print("  ├" + "┼".join("───" for _ in range(n)) + "┤")

        print("  └" + "┴".join("───" for _ in range(n)) + "┘")
        print(f"\nCurrent turn: {self.current_player.marker}")


# Quick test
if __name__ == "__main__":
    print("Testing GameState...")

    game = GameState.start(Player.CROSS, 3)

    for row, col in [(1, 1), (0, 0), (0, 2)]:
        print(f"\n{game.current_player.marker} moves to ({row}, {col})")
        game.apply_move(Move(row, col))
        game.print_board()

    game.undo_move(Move(0, 2))
    print(f"\nAfter undo, empty cells: {[(m.row, m.col) for m in game.available_moves()]}")

    print("\nGame state test done!")
