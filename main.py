"""
Main entry point for tactic.

Parses the game settings from the command line and starts the console UI.
Run this script to play tic-tac-toe against a friend or the AI!
"""

import argparse
import logging
import sys

import numpy as np

from tactic.errors import SettingsError
from tactic.settings import AutoquitMode, GameConfig, GameSettings, PlayerType
from tactic.win_checker import GameMode
from ui import ConsoleUI


logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Tic-tac-toe in the terminal")
    parser.add_argument(
        "--player-x",
        choices=[t.value for t in PlayerType],
        default=PlayerType.HUMAN.value,
        help="Who plays X (moves first)"
    )
    parser.add_argument(
        "--player-o",
        choices=[t.value for t in PlayerType],
        default=PlayerType.AI.value,
        help="Who plays O"
    )
    parser.add_argument(
        "--x-difficulty",
        type=int,
        default=GameConfig.DIFFICULTY_DEFAULT,
        help=f"AI difficulty for X, {GameConfig.DIFFICULTY_MIN}-{GameConfig.DIFFICULTY_MAX} "
             f"in steps of {GameConfig.DIFFICULTY_STEP}"
    )
    parser.add_argument(
        "--o-difficulty",
        type=int,
        default=GameConfig.DIFFICULTY_DEFAULT,
        help="AI difficulty for O"
    )
    parser.add_argument(
        "--mode",
        choices=[m.value for m in GameMode],
        default=GameMode.CLASSIC.value,
        help="classic: three in a row wins. reverse: three in a row loses"
    )
    parser.add_argument(
        "--limit-type",
        choices=[m.value for m in AutoquitMode],
        default=AutoquitMode.UNLIMITED.value,
        help="Stop after a number of games, won games, or when a player reaches a score"
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=GameConfig.AUTOQUIT_VALUE_DEFAULT,
        help="Value for --limit-type"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed the AI's random mistakes for a repeatable game"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log AI decisions"
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )

    try:
        settings = GameSettings.from_args(args)
    except SettingsError as e:
        logger.error("Invalid settings: %s", e)
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    ui = ConsoleUI(settings, rng=np.random.default_rng(args.seed))

    try:
        ui.run()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
