"""
Exceptions raised by the tactic game logic.
"""


class TacticError(Exception):
    """Base class for all tactic errors."""


class IllegalMoveError(TacticError, ValueError):
    """A mark was placed on a cell that is already occupied."""


class InvalidDifficultyError(TacticError, ValueError):
    """AI difficulty outside (0.0, 1.0], NaN, or not a number."""


class SettingsError(TacticError, ValueError):
    """The chosen game settings can't be used to start a game."""


class AIError(TacticError):
    """The AI player could not take its turn."""


class GameFinishedError(AIError):
    """
    The board is already won or drawn, so there is no turn to take.

    This is an expected condition: the caller should stop asking for turns.
    """


class NoMovesFoundError(AIError):
    """
    The board is in progress but has no empty space.

    This means the outcome classification disagrees with the board's
    occupancy and should be treated as a fatal bug.
    """
