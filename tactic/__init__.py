"""
tactic
======
Terminal tic-tac-toe for human and AI players.

The AI scores every legal move by playing out all continuations and
makes deliberate mistakes depending on its difficulty.
"""

from .board import Board, Cell, Position, Side, all_positions
from .win_checker import GameMode, Outcome, OutcomeStatus, WinChecker, WinPosition, classify
from .ai_player import AIPlayer, CandidateMove, ai_take_turn, evaluate_moves
from .move_validator import MoveValidator, parse_position
from .settings import AutoquitMode, GameConfig, GameSettings, PlayerType
from .scoreboard import Scoreboard
from .errors import (
    AIError,
    GameFinishedError,
    IllegalMoveError,
    InvalidDifficultyError,
    NoMovesFoundError,
    SettingsError,
    TacticError,
)

__version__ = "1.0.0"
