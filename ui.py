"""
tactic console UI
Plays games of tic-tac-toe in the terminal.

Shows:
- The board after every move
- Whose turn it is and how to play
- The result and running score after each game
"""

import logging
from typing import Callable, Optional

import numpy as np

from tactic.ai_player import AIPlayer, RandomSource, ai_take_turn
from tactic.board import Board, Side
from tactic.errors import GameFinishedError
from tactic.move_validator import MoveValidator, parse_position
from tactic.scoreboard import Scoreboard
from tactic.settings import GameConfig, GameSettings, PlayerType
from tactic.win_checker import Outcome, WinChecker, classify


logger = logging.getLogger(__name__)

QUIT_KEYS = ("q", "quit", "exit")
HINT_KEYS = ("h", "hint")


class QuitGame(Exception):
    """The user asked to quit in the middle of a game."""


class ConsoleUI:
    """
    Main UI class for tactic.

    Game flow:
    1. X plays, then O plays, alternating until the game is finished
    2. Human players type a space, AI players move on their own
    3. The result and score are shown, and the user picks whether to
       play again (unless the game limit was reached)
    """

    def __init__(
        self,
        settings: GameSettings,
        input_func: Callable[[str], str] = input,
        print_func: Callable[..., None] = print,
        rng: Optional[RandomSource] = None
    ):
        """
        Initialize the UI.

        Args:
            settings: Validated game settings.
            input_func: Reads a line from the user.
            print_func: Writes a line to the user.
            rng: Random source shared by the AI players.
        """
        self.settings = settings
        self.input = input_func
        self.print = print_func
        self.rng = rng if rng is not None else np.random.default_rng()

        self.validator = MoveValidator(settings.game_mode)
        self.win_checker = WinChecker(settings.game_mode)
        self.scoreboard = Scoreboard()
        self.ais = {side: settings.ai_for(side) for side in Side}
        # Used for hints, whatever the players' own difficulty
        self.advisor = AIPlayer(1.0, settings.game_mode)

        self.board = Board.new()
        self.active_player = Side.X
        self.exit_flag = False

    def run(self) -> Scoreboard:
        """Play games until the user stops or the game limit is reached."""
        self.print(self.settings.describe())

        while True:
            self.play_game()
            if self.exit_flag:
                break
            if self.scoreboard.limit_reached(self.settings.autoquit_mode, self.settings.autoquit_value):
                self._show_game_result()
                self.print("Game limit reached.")
                break
            if not self.play_again_menu():
                break

        self.print("Goodbye!")
        return self.scoreboard

    def play_game(self) -> Outcome:
        """
        The main game loop.

        Returns:
            The final outcome. IN_PROGRESS if the user quit early.
        """
        self.board = Board.new()
        self.active_player = Side.X
        outcome = classify(self.board, self.settings.game_mode)

        self.print(f"\nIndex map:\n{GameConfig.INDEX_MAP}\n")

        while not (outcome.game_finished or self.exit_flag):
            self.print(f"\n{self.board}\n")
            self.print(f"{self.active_player.value}'s turn")

            if self.settings.player_type(self.active_player) is PlayerType.HUMAN:
                try:
                    self._human_turn()
                except QuitGame:
                    self.print("\nGame quit by user.")
                    self.exit_flag = True
            else:
                try:
                    self._ai_turn()
                except GameFinishedError:
                    break

            outcome = classify(self.board, self.settings.game_mode)

        self.scoreboard.record(outcome)
        logger.info("Game over: %s", outcome.describe())
        return outcome

    def _human_turn(self):
        """Read moves until a valid one is typed, then play it."""
        while True:
            text = self.input(
                f"Play {self.active_player.value} at [1-9 or row,col], h for a hint, q to quit: "
            ).strip().lower()

            if text in QUIT_KEYS:
                raise QuitGame()
            if text in HINT_KEYS:
                self.print(self.advisor.get_move_suggestion(self.board, self.active_player))
                continue

            position = parse_position(text)
            if position is None:
                self.print("Please type a number 1..9 or row,col.")
                continue

            result = self.validator.validate_move(self.board, position.row, position.col)
            if not result.is_valid:
                self.print(f"Illegal move: {result.error_message}")
                continue

            self.board = self.board.with_move(position, self.active_player)
            self.active_player = self.active_player.opposite()
            return

    def _ai_turn(self):
        """Let the AI play. NoMovesFoundError is a bug and is not caught."""
        ai = self.ais[self.active_player]
        new_board = ai_take_turn(ai, self.board, self.active_player, self.rng)

        played = next(
            position for position, cell in new_board.all_spaces()
            if cell is not self.board.space(position)
        )
        self.print(f"AI {self.active_player.value} plays at {played.index + 1}")

        self.board = new_board
        self.active_player = self.active_player.opposite()

    def _show_game_result(self):
        self.print(f"\n{self.board}\n")
        self.print(classify(self.board, self.settings.game_mode).describe())
        winning_line = self.win_checker.get_winning_line(self.board)
        if winning_line is not None:
            self.print(f"Winning line: {winning_line.name.replace('_', ' ').capitalize()}")
        for line in self.scoreboard.summary_lines():
            self.print(line)

    def play_again_menu(self) -> bool:
        """
        The post-game menu.

        Returns:
            True if the user chooses to play another game.
        """
        self._show_game_result()

        while True:
            text = self.input("\nPlay again? Press y for yes or n for no: ").strip().lower()
            if text in ("y", "yes", ""):
                return True
            if text in ("n", "no") or text in QUIT_KEYS:
                return False
