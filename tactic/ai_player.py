"""
AI player for tactic.

Scores every legal move by exhaustively playing out all continuations,
then picks either the best move or, with a probability set by the
difficulty, a deliberate mistake.
"""

import logging
import math
from functools import lru_cache
from numbers import Real
from typing import List, NamedTuple, Optional, Protocol

import numpy as np

from .board import Board, Position, Side
from .errors import GameFinishedError, InvalidDifficultyError, NoMovesFoundError
from .win_checker import GameMode, Outcome, OutcomeStatus, classify


logger = logging.getLogger(__name__)


# Each ply of look-ahead halves a move's score, so near outcomes
# weigh more than distant ones
DECAY = 0.5


class RandomSource(Protocol):
    """Anything with a random() returning a float in [0.0, 1.0)."""

    def random(self) -> float:
        ...


class CandidateMove(NamedTuple):
    """A legal move and its win score for the perspective side."""
    position: Position
    score: float


def _terminal_score(outcome: Outcome, perspective: Side) -> float:
    if outcome.status is OutcomeStatus.WON:
        return 1.0 if outcome.winner is perspective else -1.0
    if outcome.status is OutcomeStatus.DRAW:
        return 0.0
    raise ValueError(f"Not a terminal outcome: {outcome!r}")


@lru_cache(maxsize=None)
def _score_move(
    board: Board,
    position: Position,
    acting: Side,
    perspective: Side,
    mode: GameMode
) -> float:
    """
    Win score for `acting` placing a mark at `position`.

    A move that ends the game scores +1, -1 or 0. Otherwise the score is
    half the average score of every reply the opponent could make.
    Boards are immutable, so every level works on its own copy.
    """
    new_board = board.with_move(position, acting)
    outcome = classify(new_board, mode)

    if outcome.game_finished:
        return _terminal_score(outcome, perspective)

    # A full board is never in progress, so there's always a reply here
    opponent = acting.opposite()
    sub_scores = [
        _score_move(new_board, sub_position, opponent, perspective, mode)
        for sub_position in new_board.empty_positions()
    ]
    return DECAY * (sum(sub_scores) / len(sub_scores))


def evaluate_moves(
    board: Board,
    perspective: Side,
    mode: GameMode = GameMode.CLASSIC
) -> List[CandidateMove]:
    """
    Score every legal move `perspective` could make on this board.

    Args:
        board: Board to evaluate. Should be in progress; the caller checks.
        perspective: The side to move, whose wins score positively.
        mode: Rule set used to classify finished boards.

    Returns:
        One CandidateMove per empty space, in enumeration order. Scores
        are in [-1.0, 1.0] and only meaningful relative to each other.
    """
    return [
        CandidateMove(position, _score_move(board, position, perspective, perspective, mode))
        for position in board.empty_positions()
    ]


class AIPlayer:
    """
    An AI that plays tic-tac-toe with a configurable difficulty.

    At difficulty 1.0 the AI always plays its highest scoring move. Below
    that it makes a mistake with probability 1 - difficulty. A mistake
    picks the move at index floor(difficulty * n) of the candidates sorted
    from worst to best, so a strong AI's mistakes are mild and a weak AI's
    mistakes are severe.
    """

    DEFAULT_DIFFICULTY = 0.85

    def __init__(
        self,
        difficulty: float = DEFAULT_DIFFICULTY,
        mode: GameMode = GameMode.CLASSIC
    ):
        """
        Initialize the AI player.

        Args:
            difficulty: In (0.0, 1.0]. 1.0 never makes mistakes.
            mode: Rule set the AI is playing under.

        Raises:
            InvalidDifficultyError: if difficulty is out of range or NaN.
        """
        self._difficulty = self._validate_difficulty(difficulty)
        self.mode = mode

    @property
    def difficulty(self) -> float:
        return self._difficulty

    @difficulty.setter
    def difficulty(self, value: float):
        self._difficulty = self._validate_difficulty(value)

    @staticmethod
    def _validate_difficulty(value) -> float:
        if isinstance(value, bool) or not isinstance(value, Real):
            raise InvalidDifficultyError(f"Difficulty must be a number, got {value!r}")
        value = float(value)
        if math.isnan(value) or not 0.0 < value <= 1.0:
            raise InvalidDifficultyError(
                f"Difficulty must be greater than 0.0 and at most 1.0, got {value}"
            )
        return value

    @property
    def mistake_chance(self) -> float:
        # Clamped even though a valid difficulty never needs it
        return min(max(1.0 - self._difficulty, 0.0), 1.0)

    def select_move(
        self,
        board: Board,
        active_side: Side,
        rng: Optional[RandomSource] = None
    ) -> CandidateMove:
        """
        Choose the move to play.

        Args:
            board: Current board.
            active_side: The side the AI is playing this turn.
            rng: Random source; one value is drawn per call.

        Returns:
            The chosen CandidateMove.

        Raises:
            GameFinishedError: if the board is already won or drawn.
            NoMovesFoundError: if the board is in progress but has no empty space.
        """
        if classify(board, self.mode).game_finished:
            raise GameFinishedError("Can't take a turn, the game is already finished")

        candidates = evaluate_moves(board, active_side, self.mode)
        if not candidates:
            raise NoMovesFoundError("No moves found despite game not being finished")

        # Stable sort, so equal scores keep enumeration order
        candidates.sort(key=lambda candidate: candidate.score)

        if rng is None:
            rng = np.random.default_rng()
        roll = float(rng.random())

        if self.mistake_chance > roll:
            index = math.floor(self._difficulty * len(candidates))
            chosen = candidates[index] if index < len(candidates) else candidates[0]
            logger.debug(
                "%s makes a mistake (roll %.3f < %.3f): index %d of %d",
                active_side.value, roll, self.mistake_chance, index, len(candidates)
            )
        else:
            chosen = candidates[-1]

        logger.info(
            "AI %s plays (%d, %d) (score: %.4f, best: %.4f)",
            active_side.value, chosen.position.row, chosen.position.col,
            chosen.score, candidates[-1].score
        )
        return chosen

    def take_turn(
        self,
        board: Board,
        active_side: Side,
        rng: Optional[RandomSource] = None
    ) -> Board:
        """
        Play one turn.

        Returns:
            A new board with the chosen move applied. The input board is
            never modified.
        """
        chosen = self.select_move(board, active_side, rng)
        return board.with_move(chosen.position, active_side)

    def get_move_suggestion(self, board: Board, active_side: Side) -> str:
        """
        Get a human-readable suggestion of the best move.

        Args:
            board: Current board.
            active_side: Side to suggest a move for.

        Returns:
            A string describing the suggested move.
        """
        if classify(board, self.mode).game_finished:
            return "No moves available!"

        candidates = sorted(evaluate_moves(board, active_side, self.mode), key=lambda c: c.score)
        if not candidates:
            return "No moves available!"
        best = candidates[-1]
        return f"Place {active_side.value} at {best.position.index + 1} (row {best.position.row}, column {best.position.col})"

    def __repr__(self) -> str:
        return f"AIPlayer(difficulty={self._difficulty}, mode={self.mode.value})"


def ai_take_turn(
    policy: AIPlayer,
    board: Board,
    active_side: Side,
    rng: Optional[RandomSource] = None
) -> Board:
    """Let `policy` play one turn for `active_side`. See AIPlayer.take_turn."""
    return policy.take_turn(board, active_side, rng)
