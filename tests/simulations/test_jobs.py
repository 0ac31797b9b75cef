"""
Tests for board_arcade.simulation.jobs
"""

import pickle

from board_arcade.core.types import Difficulty, Move, Player
from board_arcade.simulation.jobs import MAX_PLIES, MatchJob, MatchResult, MatchSummary

LEVELS = {Player.ONE: Difficulty.EASY, Player.TWO: Difficulty.HARD}


def result(winner=None, plies=10, completed=True):
    return MatchResult("tic_tac_toe", winner, plies, completed, {Player.ONE: 0, Player.TWO: 0})


class TestMatchJob:

    def test_defaults(self):
        job = MatchJob("reversi", LEVELS)
        assert job.seed is None
        assert job.max_plies == MAX_PLIES

    def test_pickles(self):
        job = MatchJob("checkers", LEVELS, seed=4, max_plies=50)
        assert pickle.loads(pickle.dumps(job)) == job


class TestMatchResult:

    def test_draw_only_when_completed(self):
        assert result().is_draw
        assert not result(completed=False).is_draw
        assert not result(winner=Player.ONE).is_draw

    def test_moves_default_empty(self):
        assert result().moves == []

    def test_pickles_with_moves(self):
        r = MatchResult("tic_tac_toe", Player.ONE, 1, True, {Player.ONE: 1, Player.TWO: 0}, [Move(4)])
        assert pickle.loads(pickle.dumps(r)) == r


class TestMatchSummary:

    def test_tally(self):
        summary = MatchSummary("tic_tac_toe", LEVELS)
        for r in (result(Player.ONE, 5), result(Player.TWO, 6), result(None, 9), result(None, 20, False)):
            summary.add(r)
        assert summary.matches == 4
        assert summary.wins == {Player.ONE: 1, Player.TWO: 1}
        assert summary.draws == 1
        assert summary.unfinished == 1
        assert summary.average_plies == 10.0

    def test_empty_average(self):
        assert MatchSummary("reversi", LEVELS).average_plies == 0.0

    def test_str(self):
        summary = MatchSummary("tic_tac_toe", LEVELS)
        summary.add(result(Player.TWO, 7))
        assert str(summary) == "tic_tac_toe: 1 matches (easy vs hard) | P1 0  P2 1  draws 0 | avg 7.0 plies"

    def test_str_mentions_unfinished(self):
        summary = MatchSummary("tic_tac_toe", LEVELS)
        summary.add(result(completed=False))
        assert "unfinished 1" in str(summary)
