"""
Game outcomes for the TicTacToe engine.
An outcome is Win (with winner and line), Draw or Undecided.
"""

from enum import Enum
from typing import Optional, Tuple
from dataclasses import dataclass

from .config import GameConfig
from .game_state import Player

# A line is the ordered (row, col) cells that make a win
Line = Tuple[Tuple[int, int], ...]


class OutcomeKind(Enum):
    WIN = "win"
    DRAW = "draw"
    UNDECIDED = "undecided"


@dataclass(frozen=True)
class Outcome:
    """
    Result of looking at a board.

    Only WIN carries a payload: the winning player and the line they filled.
    Outcomes are always recomputed from the board, never stored on it.
    """
    kind: OutcomeKind
    winner: Optional[Player] = None
    line: Line = ()

    @classmethod
    def win(cls, winner: Player, line: Line) -> "Outcome":
        return cls(OutcomeKind.WIN, winner, tuple(line))

    @classmethod
    def draw(cls) -> "Outcome":
        return cls(OutcomeKind.DRAW)

    @classmethod
    def undecided(cls) -> "Outcome":
        return cls(OutcomeKind.UNDECIDED)

    @property
    def is_win(self) -> bool:
        return self.kind is OutcomeKind.WIN

    @property
    def is_draw(self) -> bool:
        return self.kind is OutcomeKind.DRAW

    @property
    def is_undecided(self) -> bool:
        return self.kind is OutcomeKind.UNDECIDED

    @property
    def is_terminal(self) -> bool:
        """True once the game is over (Win or Draw)."""
        return self.kind is not OutcomeKind.UNDECIDED

    def __str__(self) -> str:
        if self.kind is OutcomeKind.WIN:
            return f"{self.winner.marker} wins along {list(self.line)}"
        if self.kind is OutcomeKind.DRAW:
            return "Draw"
        return "Undecided"


def heuristic(outcome: Outcome, perspective: Player) -> int:
    """
    Score a finished game for the searching player.

    Returns:
        SCORE_WIN if perspective won, SCORE_LOSS if it lost,
        SCORE_DRAW otherwise.
    """
    if outcome.kind is OutcomeKind.WIN:
        return GameConfig.SCORE_WIN if outcome.winner == perspective else GameConfig.SCORE_LOSS
    return GameConfig.SCORE_DRAW
