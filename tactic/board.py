"""
Board model for tactic.
Cells, sides, positions and the immutable 3x3 board.
"""

from enum import Enum
from typing import Iterator, List, NamedTuple, Sequence, Tuple
from dataclasses import dataclass

from .errors import IllegalMoveError


BOARD_SIZE = 3


class Cell(Enum):
    """The three states a space on the board can be in."""
    EMPTY = " "
    X = "X"
    O = "O"

    def __str__(self) -> str:
        return self.value


class Side(Enum):
    """The two players in the game."""
    X = "X"
    O = "O"

    def opposite(self) -> "Side":
        """Get the opposite side."""
        if self is Side.X:
            return Side.O
        if self is Side.O:
            return Side.X
        raise ValueError(f"Unknown side: {self!r}")

    @property
    def cell(self) -> Cell:
        """The cell value this side writes to the board."""
        return Cell(self.value)

    @classmethod
    def from_cell(cls, cell: Cell) -> "Side":
        """Get the side that owns a non-empty cell."""
        if cell is Cell.EMPTY:
            raise ValueError("An empty cell has no side")
        return cls(cell.value)


class Position(NamedTuple):
    """A space on the board. (0, 0) is top-left, (2, 2) is bottom-right."""
    row: int
    col: int

    @property
    def index(self) -> int:
        """Row-major index, 0-8."""
        if not (0 <= self.row < BOARD_SIZE and 0 <= self.col < BOARD_SIZE):
            raise ValueError(f"Invalid position ({self.row}, {self.col}). Must be 0-2.")
        return self.row * BOARD_SIZE + self.col

    @classmethod
    def from_index(cls, index: int) -> "Position":
        if not 0 <= index < BOARD_SIZE * BOARD_SIZE:
            raise ValueError(f"Invalid index {index}. Must be 0-8.")
        return cls(*divmod(index, BOARD_SIZE))


# Row-major: TopLeft, TopMiddle, TopRight, MiddleLeft, ... BottomRight
ALL_POSITIONS: Tuple[Position, ...] = tuple(
    Position(row, col) for row in range(BOARD_SIZE) for col in range(BOARD_SIZE)
)


def all_positions() -> Iterator[Position]:
    """
    Iterate over all 9 positions in a stable, row-major order.

    This order is used for legal move discovery and as the tie-break
    order when the AI sorts candidate moves.
    """
    return iter(ALL_POSITIONS)


@dataclass(frozen=True)
class Board:
    """
    The 3x3 tic-tac-toe board.

    Boards are immutable values: placing a mark returns a new board and
    leaves the original untouched. This also makes them hashable.
    """

    cells: Tuple[Cell, ...] = (Cell.EMPTY,) * (BOARD_SIZE * BOARD_SIZE)

    def __post_init__(self):
        # Lists are accepted, but stored as a tuple so the board stays hashable
        object.__setattr__(self, "cells", tuple(self.cells))
        if len(self.cells) != BOARD_SIZE * BOARD_SIZE:
            raise ValueError(f"A board has 9 cells, got {len(self.cells)}")
        for cell in self.cells:
            if not isinstance(cell, Cell):
                raise ValueError(f"Board cells must be Cell values, got {cell!r}")

    @classmethod
    def new(cls) -> "Board":
        """Create an empty board."""
        return cls()

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> "Board":
        """
        Build a board from three row strings.

        Args:
            rows: e.g. ["XOX", " O ", "  X"]. Spaces, '.', '_' and '-'
                are empty cells.

        Returns:
            The new board.
        """
        if len(rows) != BOARD_SIZE:
            raise ValueError(f"Expected 3 rows, got {len(rows)}")

        cells: List[Cell] = []
        for row in rows:
            if len(row) != BOARD_SIZE:
                raise ValueError(f"Row {row!r} must have exactly 3 cells")
            for char in row:
                if char in " ._-":
                    cells.append(Cell.EMPTY)
                else:
                    cells.append(Cell(char.upper()))
        return cls(tuple(cells))

    def space(self, position: Position) -> Cell:
        """Get the cell at a position."""
        return self.cells[position.index]

    def is_empty(self, position: Position) -> bool:
        return self.space(position) is Cell.EMPTY

    def with_move(self, position: Position, side: Side) -> "Board":
        """
        Return a copy of this board with the side's mark written at position.

        Raises:
            IllegalMoveError: if the position is already occupied.
        """
        if not self.is_empty(position):
            raise IllegalMoveError(
                f"Cell ({position.row}, {position.col}) is already occupied by {self.space(position)}"
            )
        cells = list(self.cells)
        cells[position.index] = side.cell
        return Board(tuple(cells))

    def empty_positions(self) -> List[Position]:
        """All empty positions, in enumeration order."""
        return [position for position in all_positions() if self.is_empty(position)]

    def all_spaces(self) -> Iterator[Tuple[Position, Cell]]:
        """Iterate over (position, cell) pairs."""
        for position in ALL_POSITIONS:
            yield position, self.space(position)

    def count(self, cell: Cell) -> int:
        return self.cells.count(cell)

    def rows(self) -> List[Tuple[Cell, ...]]:
        return [
            self.cells[row * BOARD_SIZE:(row + 1) * BOARD_SIZE]
            for row in range(BOARD_SIZE)
        ]

    def __str__(self) -> str:
        lines = [" " + " | ".join(str(cell) for cell in row) for row in self.rows()]
        return "\n-----------\n".join(lines)
