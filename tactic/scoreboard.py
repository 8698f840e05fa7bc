"""
Score tracking across games. Kept in memory only.
"""

from typing import List
from dataclasses import dataclass

from .board import Side
from .settings import AutoquitMode
from .win_checker import Outcome, OutcomeStatus


@dataclass
class Scoreboard:
    x_wins: int = 0
    o_wins: int = 0
    draws: int = 0

    @property
    def number_of_games(self) -> int:
        return self.x_wins + self.o_wins + self.draws

    @property
    def non_draw_games(self) -> int:
        return self.x_wins + self.o_wins

    def wins(self, side: Side) -> int:
        return self.x_wins if side is Side.X else self.o_wins

    def record(self, outcome: Outcome):
        """Add a finished game. Games quit early are not counted."""
        if outcome.status is OutcomeStatus.WON:
            if outcome.winner is Side.X:
                self.x_wins += 1
            else:
                self.o_wins += 1
        elif outcome.status is OutcomeStatus.DRAW:
            self.draws += 1

    def percentage(self, count: int) -> float:
        if self.number_of_games == 0:
            return 0.0
        return count / self.number_of_games * 100.0

    def limit_reached(self, mode: AutoquitMode, value: int) -> bool:
        """
        Check whether the game limit has been reached.

        Args:
            mode: Which count the limit applies to.
            value: The limit.
        """
        if mode is AutoquitMode.UNLIMITED:
            return False
        if mode is AutoquitMode.GAME_NUMBER_LIMIT:
            return self.number_of_games >= value
        if mode is AutoquitMode.NON_DRAW_NUMBER_LIMIT:
            return self.non_draw_games >= value
        if mode is AutoquitMode.SCORE_NUMBER_LIMIT:
            return max(self.x_wins, self.o_wins) >= value
        raise ValueError(f"Unhandled autoquit mode: {mode!r}")

    def summary_lines(self) -> List[str]:
        return [
            f"X score:     {self.x_wins}\t({self.percentage(self.x_wins):.2f}%)",
            f"O score:     {self.o_wins}\t({self.percentage(self.o_wins):.2f}%)",
            f"Draws:       {self.draws}\t({self.percentage(self.draws):.2f}%)",
            f"Total games: {self.number_of_games}",
        ]
