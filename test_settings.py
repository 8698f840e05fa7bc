"""
Tests for game settings, the scoreboard and the command line.
"""

import pytest

from main import main, parse_args
from tactic.ai_player import AIPlayer
from tactic.board import Side
from tactic.errors import SettingsError
from tactic.scoreboard import Scoreboard
from tactic.settings import AutoquitMode, GameSettings, PlayerType
from tactic.win_checker import DRAW, IN_PROGRESS, GameMode, won


# ==================== SETTINGS ====================

def test_defaults_are_valid():
    settings = GameSettings().validate()
    assert settings.player_x is PlayerType.HUMAN
    assert settings.player_o is PlayerType.AI
    assert settings.game_mode is GameMode.CLASSIC


def test_ai_for():
    settings = GameSettings(player_o=PlayerType.AI, o_difficulty=60, game_mode=GameMode.REVERSE)
    assert settings.ai_for(Side.X) is None

    ai = settings.ai_for(Side.O)
    assert isinstance(ai, AIPlayer)
    assert ai.difficulty == 0.6
    assert ai.mode is GameMode.REVERSE


@pytest.mark.parametrize("kwargs", [
    {"x_difficulty": 0},
    {"o_difficulty": 105},
    {"x_difficulty": 42},
    {"autoquit_value": 0},
    {"player_x": PlayerType.AI, "player_o": PlayerType.AI},
])
def test_invalid_settings(kwargs):
    with pytest.raises(SettingsError):
        GameSettings(**kwargs).validate()


def test_two_ai_players_need_a_limit():
    settings = GameSettings(
        player_x=PlayerType.AI,
        player_o=PlayerType.AI,
        autoquit_mode=AutoquitMode.GAME_NUMBER_LIMIT,
        autoquit_value=3,
    )
    assert settings.validate() is settings


def test_describe():
    text = GameSettings(autoquit_mode=AutoquitMode.SCORE_NUMBER_LIMIT, autoquit_value=5).describe()
    assert "Player X: HUMAN" in text
    assert "Player O: AI (difficulty 85)" in text
    assert "Max score of either player: 5" in text


def test_from_args():
    args = parse_args([
        "--player-x", "ai", "--x-difficulty", "100",
        "--mode", "reverse", "--limit-type", "wins", "--limit", "3",
    ])
    settings = GameSettings.from_args(args)
    assert settings.player_x is PlayerType.AI
    assert settings.player_o is PlayerType.AI
    assert settings.x_difficulty == 100
    assert settings.game_mode is GameMode.REVERSE
    assert settings.autoquit_mode is AutoquitMode.NON_DRAW_NUMBER_LIMIT
    assert settings.autoquit_value == 3


# ==================== SCOREBOARD ====================

def test_record_outcomes():
    scoreboard = Scoreboard()
    scoreboard.record(won(Side.X))
    scoreboard.record(won(Side.O))
    scoreboard.record(won(Side.O))
    scoreboard.record(DRAW)
    scoreboard.record(IN_PROGRESS)

    assert (scoreboard.x_wins, scoreboard.o_wins, scoreboard.draws) == (1, 2, 1)
    assert scoreboard.number_of_games == 4
    assert scoreboard.wins(Side.O) == 2
    assert scoreboard.percentage(scoreboard.o_wins) == 50.0


def test_percentage_with_no_games():
    assert Scoreboard().percentage(0) == 0.0


@pytest.mark.parametrize("mode, value, expected", [
    (AutoquitMode.UNLIMITED, 1, False),
    (AutoquitMode.GAME_NUMBER_LIMIT, 4, True),
    (AutoquitMode.GAME_NUMBER_LIMIT, 5, False),
    (AutoquitMode.NON_DRAW_NUMBER_LIMIT, 3, True),
    (AutoquitMode.NON_DRAW_NUMBER_LIMIT, 4, False),
    (AutoquitMode.SCORE_NUMBER_LIMIT, 2, True),
    (AutoquitMode.SCORE_NUMBER_LIMIT, 3, False),
])
def test_limit_reached(mode, value, expected):
    scoreboard = Scoreboard(x_wins=1, o_wins=2, draws=1)
    assert scoreboard.limit_reached(mode, value) is expected


def test_summary_lines():
    lines = Scoreboard(x_wins=1, o_wins=0, draws=1).summary_lines()
    assert lines[0] == "X score:     1\t(50.00%)"
    assert lines[3] == "Total games: 2"


# ==================== COMMAND LINE ====================

def test_main_rejects_unlimited_ai_games(capsys):
    assert main(["--player-x", "ai", "--player-o", "ai"]) == 2
    assert "game limit is required" in capsys.readouterr().err


def test_main_plays_ai_games_to_the_limit(capsys):
    code = main([
        "--player-x", "ai", "--player-o", "ai",
        "--limit-type", "games", "--limit", "1", "--seed", "5",
    ])
    out = capsys.readouterr().out
    assert code == 0
    assert "Game limit reached." in out
    assert "Total games: 1" in out
