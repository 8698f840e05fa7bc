"""
Move validator for tactic.
Validates moves typed in by a human player.
"""

from typing import List, Optional
from dataclasses import dataclass

from .board import BOARD_SIZE, Board, Position
from .win_checker import GameMode, classify


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates tic-tac-toe moves.

    Rules:
    1. Game must not be over
    2. Position must be on the board
    3. Can only place on empty cells
    """

    def __init__(self, mode: GameMode = GameMode.CLASSIC):
        self.mode = mode

    def validate_move(self, board: Board, row: int, col: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Current board.
            row: Row to place the mark (0-2).
            col: Column to place the mark (0-2).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        # Check if game is over
        if classify(board, self.mode).game_finished:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        # Check if row/col are in valid range
        if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position ({row}, {col}). Must be 0-2."
            )

        position = Position(row, col)
        if not board.is_empty(position):
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell ({row}, {col}) is already occupied by {board.space(position)}"
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, board: Board) -> List[Position]:
        """All positions the side to move may play; empty once the game is over."""
        if classify(board, self.mode).game_finished:
            return []
        return board.empty_positions()


def parse_position(text: str) -> Optional[Position]:
    """
    Parse a position typed by a player.

    Accepts a keypad index "1".."9" (row-major, 1 is top-left) or
    "row,col" with 0-based coordinates. Range checks are left to
    MoveValidator, so "5,5" parses.

    Returns:
        The Position, or None if the text isn't a position at all.
    """
    text = text.strip()
    if "," in text:
        parts = text.split(",")
        if len(parts) != 2:
            return None
        try:
            return Position(int(parts[0]), int(parts[1]))
        except ValueError:
            return None

    try:
        index = int(text)
    except ValueError:
        return None
    if not 1 <= index <= BOARD_SIZE * BOARD_SIZE:
        return None
    return Position.from_index(index - 1)
