"""
Tests for board_arcade.cli
"""

from unittest.mock import patch

import pytest

from board_arcade import cli
from board_arcade.core.types import Difficulty, GameMode


class TestParseArgs:

    def test_defaults(self):
        args = cli.parse_args([])
        assert args.game == "tic_tac_toe"
        assert args.mode == "ai"
        assert args.difficulty == "normal"
        assert args.matches == 0
        assert not args.self_play

    def test_short_flags(self):
        args = cli.parse_args(["-g", "reversi", "-d", "hard", "-s", "3", "-n", "10", "-w", "2"])
        assert (args.game, args.difficulty, args.seed, args.matches, args.workers) == ("reversi", "hard", 3, 10, 2)

    def test_unknown_game(self):
        with pytest.raises(SystemExit):
            cli.parse_args(["--game", "blackjack"])


class TestMain:

    def test_interactive(self):
        with patch.object(cli, "play_game") as play:
            cli.main(["--game", "takeover", "--mode", "local", "--self-play"])
        config = play.call_args[0][0]
        assert config.game_name == "takeover"
        assert config.mode is GameMode.LOCAL
        assert play.call_args[1] == {"self_play": True, "show_scores": False}

    def test_matches(self, capsys):
        with patch.object(cli, "run_matches", return_value="summary line") as run:
            cli.main(["-g", "connect_four", "-n", "6", "-d", "hard", "--opponent-difficulty", "easy", "-w", "3"])
        assert run.call_args[0] == ("connect_four", 6)
        assert run.call_args[1]["difficulty"] is Difficulty.HARD
        assert run.call_args[1]["opponent_difficulty"] is Difficulty.EASY
        assert run.call_args[1]["num_workers"] == 3
        assert "summary line" in capsys.readouterr().out
