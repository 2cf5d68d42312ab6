"""
Console front end for the TicTacToe engine.

Play against the minimax AI on any N x N board, or watch the AI play
itself. All game rules live in the logic package; this script only reads
moves and prints boards.
"""

from typing import Callable, Optional

from logic.config import GameConfig
from logic.errors import IllegalMoveError
from logic.game_state import GameState, Move, Player
from logic.outcome import Outcome
from logic.win_checker import WinChecker
from logic.ai_player import AIPlayer


class TicTacToeConsole:
    """
    Console controller for a game.

    Game flow:
    1. The human types a move as "row col" (or the AI moves in self-play)
    2. The move is applied and the board printed
    3. The AI answers with its best move
    4. Repeat until someone wins or it's a draw
    """

    def __init__(
        self,
        human_player: Optional[Player] = Player.CROSS,
        size: int = GameConfig.DEFAULT_BOARD_SIZE,
        first_player: Player = Player.from_marker(GameConfig.DEFAULT_FIRST_PLAYER),
        verbose: bool = GameConfig.VERBOSE,
        input_func: Callable[[str], str] = input
    ):
        """
        Initialize the console game.

        Args:
            human_player: Which player the human controls, None for self-play.
            size: Side length of the board.
            first_player: Who moves first.
            verbose: Let the AI print its search summary.
            input_func: Where human moves are read from.
        """
        self.human_player = human_player
        self.input_func = input_func

        self.game_state = GameState.start(first_player, size)
        self.win_checker = WinChecker()
        self.ai = AIPlayer(verbose=verbose)

        print("\n" + "="*60)
        print(f"   TicTacToe {size}x{size} - Ready!")
        if human_player is None:
            print("   AI plays both sides")
        else:
            print(f"   Human plays: {human_player.marker}")
            print(f"   AI plays: {human_player.opposite().marker}")
        print("="*60 + "\n")

    def start(self) -> Outcome:
        """Play the game to the end and return its outcome."""
        self.game_state.print_board()
        outcome = self.win_checker.get_outcome(self.game_state)

        while not outcome.is_terminal:
            if self.game_state.current_player == self.human_player:
                self._human_move()
            else:
                self._ai_move()

            self.game_state.print_board()
            outcome = self.win_checker.get_outcome(self.game_state)

        self._show_game_result(outcome)
        return outcome

    def _human_move(self):
        """Read moves until a legal one is entered, then apply it."""
        marker = self.game_state.current_player.marker
        while True:
            text = self.input_func(f"{marker} to move (row col): ")
            try:
                row, col = (int(part) for part in text.replace(",", " ").split())
                self.game_state.apply_move(Move(row, col))
                return
            except IllegalMoveError as e:
                print(f"Illegal move: {e}")
            except ValueError:
                print(f"Could not read {text!r}. Enter two numbers, e.g. 1 1")

    def _ai_move(self):
        """Let the AI pick and apply a move."""
        print(f"\n>>> AI ({self.game_state.current_player.marker}) is thinking...")
        move = self.ai.get_best_move(self.game_state)
        print(f">>> AI places {self.game_state.current_player.marker} at ({move.row}, {move.col})")
        self.game_state.apply_move(move)

    def _show_game_result(self, outcome: Outcome):
        """Show the final game result."""
        print("\n" + "="*60)
        print("   GAME OVER!")
        print("="*60)

        if outcome.is_win:
            print(f"\n{outcome.winner.marker} WINS! Line: {list(outcome.line)}")
        else:
            print("\nIt's a DRAW!")


def main(argv=None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="N x N TicTacToe against a minimax AI")
    parser.add_argument(
        "--size",
        type=int,
        default=GameConfig.DEFAULT_BOARD_SIZE,
        help="Board side length (default: 3)"
    )
    parser.add_argument(
        "--ai-first",
        action="store_true",
        help="Let the AI play first (as X)"
    )
    parser.add_argument(
        "--self-play",
        action="store_true",
        help="AI plays both sides"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print search statistics after every AI move"
    )

    args = parser.parse_args(argv)
    if args.size < GameConfig.MIN_BOARD_SIZE:
        parser.error(f"--size must be at least {GameConfig.MIN_BOARD_SIZE}")

    if args.self_play:
        human_player = None
    elif args.ai_first:
        human_player = Player.NOUGHT
    else:
        human_player = Player.CROSS

    game = TicTacToeConsole(
        human_player=human_player,
        size=args.size,
        verbose=args.verbose
    )

    try:
        game.start()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
