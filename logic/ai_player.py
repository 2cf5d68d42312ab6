"""
AI player for the TicTacToe engine.
Uses the Minimax algorithm with alpha-beta pruning to choose the best move.
"""

from typing import Optional, Tuple

from .config import GameConfig
from .errors import PreconditionError
from .game_state import GameState, Move, Player
from .outcome import heuristic
from .win_checker import WinChecker


class AIPlayer:
    """
    An AI that plays TicTacToe using the Minimax algorithm.

    The AI plays for whoever is to move in the state it is given. It
    searches the whole remaining game tree, so it will win if possible,
    block the opponent if needed, and never lose a game it can draw.
    Only terminal positions are scored: +1 win, 0 draw, -1 loss.
    """

    def __init__(self, verbose: bool = GameConfig.VERBOSE):
        """
        Initialize the AI player.

        Args:
            verbose: Print a summary line after every search.
        """
        self.verbose = verbose
        self.win_checker = WinChecker()

        # Keep track of how many positions we've evaluated (for debugging)
        self.moves_evaluated = 0

    def get_best_move(self, game_state: GameState) -> Move:
        """
        Get the best move for the player to move.

        The state is mutated during the search and restored before
        returning.

        Args:
            game_state: Current game state.

        Returns:
            The best Move. Among equally good moves the first in row-major
            order is chosen.

        Raises:
            PreconditionError: If the game is already over.
        """
        self.moves_evaluated = 0

        outcome = self.win_checker.get_outcome(game_state)
        if outcome.is_terminal:
            raise PreconditionError(f"Cannot search a finished game: {outcome}")
        if not game_state.available_moves():
            raise PreconditionError("Cannot search a board with no empty cells")

        best_move, best_score = self._minimax(
            game_state,
            perspective=game_state.current_player,
            alpha=GameConfig.ROOT_ALPHA,
            beta=GameConfig.ROOT_BETA
        )

        if self.verbose:
            print(
                f"AI evaluated {self.moves_evaluated} positions. "
                f"Best move: ({best_move.row}, {best_move.col}) (score: {best_score})"
            )

        return best_move

    def _minimax(
        self,
        game_state: GameState,
        perspective: Player,
        alpha: float,
        beta: float
    ) -> Tuple[Optional[Move], float]:
        """
        Minimax algorithm with alpha-beta pruning.

        Args:
            game_state: Current state to evaluate (mutated and restored).
            perspective: The player we are maximizing for.
            alpha: Best score the maximizer is already assured of.
            beta: Best score the minimizer is already assured of.

        Returns:
            (best move, score). The move is None at terminal positions.
        """
        self.moves_evaluated += 1

        outcome = self.win_checker.get_outcome(game_state)
        if outcome.is_terminal:
            return None, heuristic(outcome, perspective)

        best_move = None

        if game_state.current_player == perspective:
            best_score = float('-inf')
            for move in game_state.available_moves():
                game_state.apply_move(move)
                try:
                    _, score = self._minimax(game_state, perspective, alpha, beta)
                finally:
                    game_state.undo_move(move)

                if score > best_score:
                    best_score = score
                    best_move = move
                alpha = max(alpha, best_score)
                if alpha >= beta:
                    break  # Beta cut-off
        else:
            best_score = float('inf')
            for move in game_state.available_moves():
                game_state.apply_move(move)
                try:
                    _, score = self._minimax(game_state, perspective, alpha, beta)
                finally:
                    game_state.undo_move(move)

                if score < best_score:
                    best_score = score
                    best_move = move
                beta = min(beta, best_score)
                if alpha >= beta:
                    break  # Alpha cut-off

        return best_move, best_score

    def get_move_suggestion(self, game_state: GameState) -> str:
        """
        Get a human-readable move suggestion.

        Args:
            game_state: Current game state.

        Returns:
            A string describing the suggested move.
        """
        move = self.get_best_move(game_state)
        return f"Place {game_state.current_player.marker} at position ({move.row}, {move.col})"


def find_best_move(game_state: GameState, verbose: bool = GameConfig.VERBOSE) -> Move:
    """Best move for the player to move in game_state."""
    return AIPlayer(verbose=verbose).get_best_move(game_state)


# Quick test
if __name__ == "__main__":
    print("Testing AIPlayer...")

    ai = AIPlayer(verbose=True)

    # Test 1: AI should block a winning move
    game = GameState.from_rows(["O..", "XX.", "..."], Player.NOUGHT)
    game.print_board()
    print("\nAI is O. X is about to win with (1,2)!")

    move = ai.get_best_move(game)
    assert move == Move(1, 2), f"Expected (1, 2), got {move}"
    print("✓ AI correctly blocks the win!")

    # Test 2: AI should take a winning move
    game2 = GameState.from_rows(["OO.", "XX.", "X.."], Player.NOUGHT)
    game2.print_board()
    print("\nAI is O. Can win with (0,2)!")

    move = ai.get_best_move(game2)
    assert move == Move(0, 2), f"Expected (0, 2), got {move}"
    print("✓ AI correctly takes the win!")

    print("\nAIPlayer test done!")
