"""
Tests for outcome classification.
"""

import pytest

from tactic.board import Board, Cell, Side
from tactic.win_checker import GameMode, OutcomeStatus, WinChecker, WinPosition, classify


def _board_with_line(line: WinPosition, cell: Cell) -> Board:
    cells = [Cell.EMPTY] * 9
    for position in line.positions:
        cells[position.index] = cell
    return Board(tuple(cells))


@pytest.mark.parametrize("line", list(WinPosition))
def test_every_line_wins(line):
    outcome = classify(_board_with_line(line, Cell.X))
    assert outcome.status is OutcomeStatus.WON
    assert outcome.winner is Side.X
    assert outcome.win_position is line
    assert outcome.game_finished
    assert outcome.game_won


def test_o_wins_middle_column():
    board = Board.from_rows(["XO ", "XO ", " O "])
    outcome = classify(board)
    assert outcome.winner is Side.O
    assert outcome.win_position is WinPosition.MIDDLE_COLUMN


def test_first_line_has_priority():
    board = Board.from_rows(["XXX", "XO ", "XO "])
    assert classify(board).win_position is WinPosition.TOP_ROW


def test_full_board_without_line_is_draw():
    board = Board.from_rows(["XOX", "XOO", "OXX"])
    outcome = classify(board)
    assert outcome.status is OutcomeStatus.DRAW
    assert outcome.winner is None
    assert outcome.game_finished
    assert not outcome.game_won


def test_full_board_with_line_is_a_win_not_a_draw():
    board = Board.from_rows(["XOX", "OXO", "OXX"])
    outcome = classify(board)
    assert outcome.status is OutcomeStatus.WON
    assert outcome.win_position is WinPosition.TOP_LEFT_TO_BOTTOM_RIGHT


@pytest.mark.parametrize("rows", [
    ["   ", "   ", "   "],
    ["XO ", "   ", "   "],
    ["XOX", "XOO", "OX "],
])
def test_in_progress(rows):
    outcome = classify(Board.from_rows(rows))
    assert outcome.status is OutcomeStatus.IN_PROGRESS
    assert outcome.in_progress
    assert not outcome.game_finished


def test_reverse_mode_line_owner_loses():
    board = Board.from_rows(["XXX", "OO ", "   "])
    assert classify(board, GameMode.CLASSIC).winner is Side.X

    outcome = classify(board, GameMode.REVERSE)
    assert outcome.winner is Side.O
    assert outcome.win_position is WinPosition.TOP_ROW


def test_reverse_mode_draw_is_unchanged():
    board = Board.from_rows(["XOX", "XOO", "OXX"])
    assert classify(board, GameMode.REVERSE).status is OutcomeStatus.DRAW


def test_get_winning_line():
    checker = WinChecker()
    assert checker.get_winning_line(Board.from_rows(["O X", " X ", "X O"])) is WinPosition.BOTTOM_LEFT_TO_TOP_RIGHT
    assert checker.get_winning_line(Board.new()) is None


def test_describe():
    assert classify(_board_with_line(WinPosition.TOP_ROW, Cell.O)).describe() == "Player O wins!"
    assert classify(Board.from_rows(["XOX", "XOO", "OXX"])).describe() == "Draw!"
    assert classify(Board.new()).describe() == "Game finished early!"
