"""
Game settings for tactic.
Player types, AI difficulty, game limits and rule mode.
"""

import logging
from enum import Enum
from typing import Optional
from dataclasses import dataclass

from .ai_player import AIPlayer
from .board import Side
from .errors import SettingsError
from .win_checker import GameMode


logger = logging.getLogger(__name__)


class GameConfig:
    """
    Defaults and limits for the game settings.
    """

    # ==================== AI DIFFICULTY ====================
    # Difficulty is picked as a percentage and handed to the AI as a fraction.
    # 0% is not allowed: the AI needs a difficulty greater than 0.0
    DIFFICULTY_DEFAULT = 85
    DIFFICULTY_STEP = 5
    DIFFICULTY_MIN = 5
    DIFFICULTY_MAX = 100

    # ==================== GAME LIMIT ====================
    AUTOQUIT_VALUE_DEFAULT = 1
    AUTOQUIT_VALUE_MIN = 1

    # ==================== CONSOLE ====================
    INDEX_MAP = " 1 | 2 | 3\n-----------\n 4 | 5 | 6\n-----------\n 7 | 8 | 9"


class PlayerType(Enum):
    """Who controls a side."""
    HUMAN = "human"
    AI = "ai"


class AutoquitMode(Enum):
    """When to stop playing games automatically."""
    UNLIMITED = "unlimited"
    GAME_NUMBER_LIMIT = "games"          # Max number of total games
    NON_DRAW_NUMBER_LIMIT = "wins"       # Max number of won games
    SCORE_NUMBER_LIMIT = "score"         # Max score of either player

    @property
    def label(self) -> str:
        return {
            AutoquitMode.UNLIMITED: "Unlimited",
            AutoquitMode.GAME_NUMBER_LIMIT: "Max number of total games",
            AutoquitMode.NON_DRAW_NUMBER_LIMIT: "Max number of won games",
            AutoquitMode.SCORE_NUMBER_LIMIT: "Max score of either player",
        }[self]


@dataclass
class GameSettings:
    """
    Everything chosen before the first game starts.

    Difficulties are percentages; use ai_for() to get the AI player.
    """

    player_x: PlayerType = PlayerType.HUMAN
    player_o: PlayerType = PlayerType.AI
    x_difficulty: int = GameConfig.DIFFICULTY_DEFAULT
    o_difficulty: int = GameConfig.DIFFICULTY_DEFAULT
    autoquit_mode: AutoquitMode = AutoquitMode.UNLIMITED
    autoquit_value: int = GameConfig.AUTOQUIT_VALUE_DEFAULT
    game_mode: GameMode = GameMode.CLASSIC

    def player_type(self, side: Side) -> PlayerType:
        return self.player_x if side is Side.X else self.player_o

    def difficulty_percent(self, side: Side) -> int:
        return self.x_difficulty if side is Side.X else self.o_difficulty

    def ai_for(self, side: Side) -> Optional[AIPlayer]:
        """
        Build the AI player for a side.

        Returns:
            An AIPlayer, or None if the side is played by a human.
        """
        if self.player_type(side) is not PlayerType.AI:
            return None
        return AIPlayer(self.difficulty_percent(side) / 100.0, self.game_mode)

    def validate(self) -> "GameSettings":
        """
        Check the settings can be used to start a game.

        Raises:
            SettingsError: describing the first problem found.
        """
        for side in Side:
            percent = self.difficulty_percent(side)
            if not GameConfig.DIFFICULTY_MIN <= percent <= GameConfig.DIFFICULTY_MAX:
                raise SettingsError(
                    f"Player {side.value} difficulty must be between "
                    f"{GameConfig.DIFFICULTY_MIN} and {GameConfig.DIFFICULTY_MAX}, got {percent}"
                )
            if percent % GameConfig.DIFFICULTY_STEP != 0:
                raise SettingsError(
                    f"Player {side.value} difficulty must be a multiple of "
                    f"{GameConfig.DIFFICULTY_STEP}, got {percent}"
                )

        if self.autoquit_value < GameConfig.AUTOQUIT_VALUE_MIN:
            raise SettingsError(f"Game limit must be at least 1, got {self.autoquit_value}")

        # Two AI players with no limit would play forever
        if (self.player_x is PlayerType.AI and self.player_o is PlayerType.AI
                and self.autoquit_mode is AutoquitMode.UNLIMITED):
            raise SettingsError("A game limit is required when both players are AI")

        return self

    @classmethod
    def from_args(cls, args) -> "GameSettings":
        """Build settings from parsed command-line arguments."""
        settings = cls(
            player_x=PlayerType(args.player_x),
            player_o=PlayerType(args.player_o),
            x_difficulty=args.x_difficulty,
            o_difficulty=args.o_difficulty,
            autoquit_mode=AutoquitMode(args.limit_type),
            autoquit_value=args.limit,
            game_mode=GameMode(args.mode),
        )
        logger.debug("Settings from args: %s", settings)
        return settings.validate()

    def describe(self) -> str:
        lines = []
        for side in Side:
            player_type = self.player_type(side)
            text = f"Player {side.value}: {player_type.value.upper()}"
            if player_type is PlayerType.AI:
                text += f" (difficulty {self.difficulty_percent(side)})"
            lines.append(text)
        lines.append(f"Game mode: {self.game_mode.value.capitalize()}. {self.game_mode.description}")
        limit = self.autoquit_mode.label
        if self.autoquit_mode is not AutoquitMode.UNLIMITED:
            limit += f": {self.autoquit_value}"
        lines.append(f"Game limit: {limit}")
        return "\n".join(lines)
