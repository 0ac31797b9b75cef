"""
Tests for board_arcade.api
"""

import itertools
from unittest.mock import MagicMock, patch

import pytest

from board_arcade.api import OUTCOME_LINES, parse_move, play_game, run_matches
from board_arcade.core.types import Difficulty, GameMode, Move, MoveKind, Player
from board_arcade.utils.config import Config
from board_arcade.utils.factory import create_controller


def scripted(*answers):
    """input() replacement that replays `answers` in order."""
    it = iter(answers)
    return lambda prompt="": next(it)


class TestParseMove:

    def test_cell(self):
        controller = create_controller(Config("tic_tac_toe"))
        assert parse_move(controller, "4") == Move(4)

    def test_column_tap(self):
        controller = create_controller(Config("connect_four"))
        assert parse_move(controller, " 3 ") == Move(38, kind=MoveKind.DROP)

    def test_from_to(self):
        controller = create_controller(Config("checkers"))
        move = parse_move(controller, "17,26")
        assert (move.source, move.target) == (17, 26)

    @pytest.mark.parametrize("raw", ["", "a", "1,2,3", "99", "0"])
    def test_rejects(self, raw):
        controller = create_controller(Config("reversi"))
        with pytest.raises(ValueError):
            parse_move(controller, raw)


class TestPlayGame:

    def test_self_play_finishes(self, capsys):
        winner = play_game(Config("tic_tac_toe", difficulty="normal"), self_play=True)
        out = capsys.readouterr().out
        assert winner is None
        assert "Game over! It's a draw." in out

    def test_human_moves_with_retry(self, capsys):
        # "9" is off the board; X then takes the top row
        config = Config("tic_tac_toe", mode=GameMode.LOCAL)
        answers = scripted("9", "0", "3", "1", "4", "2")
        winner = play_game(config, input_fn=answers)
        out = capsys.readouterr().out
        assert "Invalid input" in out
        assert winner is Player.ONE
        assert "Game over! X wins." in out

    def test_show_scores(self, capsys):
        play_game(Config("reversi", difficulty="hard"), self_play=True, show_scores=True)
        assert "reversi / hard" in capsys.readouterr().out

    def test_dots_and_boxes_hint_names_the_edge(self, capsys):
        def interrupt(prompt=""):
            raise KeyboardInterrupt

        play_game(Config("dots_and_boxes", mode=GameMode.LOCAL), input_fn=interrupt)
        assert "(e.g., 1 (h-0-0))" in capsys.readouterr().out

    def test_human_sees_own_result(self, capsys):
        # Cycles through every cell; occupied ones are rejected and retried
        cells = itertools.cycle(str(i) for i in range(9))
        play_game(Config("tic_tac_toe", difficulty="hard"), input_fn=lambda prompt="": next(cells))
        out = capsys.readouterr().out
        assert sum(line in out for line in OUTCOME_LINES.values()) == 1

    def test_keyboard_interrupt(self, capsys):
        def interrupt(prompt=""):
            raise KeyboardInterrupt

        assert play_game(Config("tic_tac_toe", mode=GameMode.LOCAL), input_fn=interrupt) is None
        assert "Interrupted." in capsys.readouterr().out

    def test_errors_are_logged_and_raised(self, caplog):
        with patch("board_arcade.api.GameController.computer_move", side_effect=RuntimeError("boom")):
            with pytest.raises(RuntimeError):
                play_game(Config("tic_tac_toe"), self_play=True)
        assert "Fatal error in play loop" in caplog.text


class TestRunMatches:

    def test_seat_difficulties(self):
        runner = MagicMock()
        runner.__enter__.return_value = runner
        with patch("board_arcade.api.MatchRunner", return_value=runner):
            run_matches("checkers", 4, difficulty="hard", opponent_difficulty="easy", seed=1, num_workers=2)
        args, kwargs = runner.run_batch.call_args
        assert args[0] == "checkers"
        assert args[1] == 4
        assert args[2] == {Player.ONE: Difficulty.EASY, Player.TWO: Difficulty.HARD}
        assert kwargs == {"seed": 1}

    def test_unknown_game(self):
        with pytest.raises(ValueError):
            run_matches("go", 1)
