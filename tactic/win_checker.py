"""
Win checker for tactic.
Classifies a board as in progress, drawn, or won by one of the sides.
"""

from enum import Enum
from typing import Dict, Optional, Tuple
from dataclasses import dataclass

from .board import Board, Cell, Position, Side


class GameMode(Enum):
    """Which rule decides the winner."""
    CLASSIC = "classic"   # Three of your own marks in a row wins
    REVERSE = "reverse"   # Three of your own marks in a row loses

    @property
    def description(self) -> str:
        if self is GameMode.CLASSIC:
            return "Play to place three of your pieces in a row."
        return "Play to avoid placing three of your pieces in a row."


class WinPosition(Enum):
    """
    The row, column, or diagonal a game was won with.

    Lines are checked in definition order, so if a board has more than
    one complete line the earliest one decides the outcome.
    """
    TOP_ROW = (Position(0, 0), Position(0, 1), Position(0, 2))
    MIDDLE_ROW = (Position(1, 0), Position(1, 1), Position(1, 2))
    BOTTOM_ROW = (Position(2, 0), Position(2, 1), Position(2, 2))
    LEFT_COLUMN = (Position(0, 0), Position(1, 0), Position(2, 0))
    MIDDLE_COLUMN = (Position(0, 1), Position(1, 1), Position(2, 1))
    RIGHT_COLUMN = (Position(0, 2), Position(1, 2), Position(2, 2))
    TOP_LEFT_TO_BOTTOM_RIGHT = (Position(0, 0), Position(1, 1), Position(2, 2))
    BOTTOM_LEFT_TO_TOP_RIGHT = (Position(2, 0), Position(1, 1), Position(0, 2))

    @property
    def positions(self) -> Tuple[Position, Position, Position]:
        return self.value


class OutcomeStatus(Enum):
    IN_PROGRESS = "in_progress"
    DRAW = "draw"
    WON = "won"


@dataclass(frozen=True)
class Outcome:
    """
    The outcome of a board.

    Outcomes are derived from a board on demand and never stored on it.
    `winner` and `win_position` are only set when status is WON.
    """
    status: OutcomeStatus
    winner: Optional[Side] = None
    win_position: Optional[WinPosition] = None

    @property
    def in_progress(self) -> bool:
        return self.status is OutcomeStatus.IN_PROGRESS

    @property
    def game_finished(self) -> bool:
        """True if a side has won or no moves are left."""
        return not self.in_progress

    @property
    def game_won(self) -> bool:
        return self.status is OutcomeStatus.WON

    def describe(self) -> str:
        if self.status is OutcomeStatus.WON:
            return f"Player {self.winner.value} wins!"
        if self.status is OutcomeStatus.DRAW:
            return "Draw!"
        if self.status is OutcomeStatus.IN_PROGRESS:
            return "Game finished early!"
        raise ValueError(f"Unhandled outcome status: {self.status!r}")


IN_PROGRESS = Outcome(OutcomeStatus.IN_PROGRESS)
DRAW = Outcome(OutcomeStatus.DRAW)


def won(side: Side, win_position: Optional[WinPosition] = None) -> Outcome:
    return Outcome(OutcomeStatus.WON, side, win_position)


class WinChecker:
    """
    Checks for win conditions in tic-tac-toe.

    In classic mode the side that completes a line wins. In reverse mode
    the side that completes a line loses, so the opposite side wins.
    """

    # All possible winning lines, in priority order
    WINNING_LINES: Tuple[WinPosition, ...] = tuple(WinPosition)

    def __init__(self, mode: GameMode = GameMode.CLASSIC):
        self.mode = mode

    def classify(self, board: Board) -> Outcome:
        """
        Classify a board.

        Args:
            board: The board to check.

        Returns:
            WON with the winner and line, DRAW if the board is full,
            otherwise IN_PROGRESS.
        """
        for line in self.WINNING_LINES:
            owner = self._check_line(board, line)
            if owner is None:
                continue
            if self.mode is GameMode.CLASSIC:
                return won(owner, line)
            if self.mode is GameMode.REVERSE:
                return won(owner.opposite(), line)
            raise ValueError(f"Unhandled game mode: {self.mode!r}")

        if Cell.EMPTY in board.cells:
            return IN_PROGRESS
        return DRAW

    def _check_line(self, board: Board, line: WinPosition) -> Optional[Side]:
        """Return the side holding all 3 spaces of a line, or None."""
        first, second, third = (board.space(position) for position in line.positions)
        if first is not Cell.EMPTY and first is second is third:
            return Side.from_cell(first)
        return None

    def get_winning_line(self, board: Board) -> Optional[WinPosition]:
        """Get the completed line, if there is one."""
        for line in self.WINNING_LINES:
            if self._check_line(board, line) is not None:
                return line
        return None


_CHECKERS: Dict[GameMode, WinChecker] = {mode: WinChecker(mode) for mode in GameMode}


def classify(board: Board, mode: GameMode = GameMode.CLASSIC) -> Outcome:
    """Convenience function for WinChecker(mode).classify(board)."""
    return _CHECKERS[mode].classify(board)
