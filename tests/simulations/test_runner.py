"""
Tests for board_arcade.simulation.runner

Most tests swap the process pool for an in-process stand-in so wave
handling can be checked without forking.
"""

from unittest.mock import MagicMock

import pytest

from board_arcade.core.types import Difficulty, Player
from board_arcade.simulation import runner as runner_module
from board_arcade.simulation.runner import MatchRunner, _active_runners, _shutdown_all

EASY_BOTH = {Player.ONE: Difficulty.EASY, Player.TWO: Difficulty.EASY}


@pytest.fixture(autouse=True)
def clean_registry():
    yield
    _shutdown_all()
    _active_runners.clear()


@pytest.fixture
def fake_pool(monkeypatch):
    """Pool replacement that runs map() in-process and records each wave."""
    pool = MagicMock()
    pool.waves = []

    def fake_map(fn, jobs):
        pool.waves.append(list(jobs))
        return [fn(job) for job in jobs]

    pool.map.side_effect = fake_map
    monkeypatch.setattr(runner_module, "Pool", MagicMock(return_value=pool))
    return pool


class TestLifecycle:

    def test_rejects_zero_workers(self):
        with pytest.raises(ValueError):
            MatchRunner(0)

    def test_registers_and_unregisters(self, fake_pool):
        runner = MatchRunner(2)
        assert runner in _active_runners
        runner.shutdown()
        assert runner not in _active_runners

    def test_context_manager_closes_pool(self, fake_pool):
        with MatchRunner(2):
            pass
        fake_pool.close.assert_called_once()
        fake_pool.join.assert_called_once()
        fake_pool.terminate.assert_not_called()

    def test_exception_terminates_pool(self, fake_pool):
        with pytest.raises(RuntimeError):
            with MatchRunner(2):
                raise RuntimeError("boom")
        fake_pool.terminate.assert_called_once()

    def test_shutdown_all(self, fake_pool):
        runners = [MatchRunner(1), MatchRunner(1)]
        for r in runners:
            r._ensure_pool()
        _shutdown_all()
        assert _active_runners == []
        assert fake_pool.terminate.call_count == 2


class TestRunBatch:

    def test_waves_of_num_workers(self, fake_pool):
        with MatchRunner(3) as runner:
            summary = runner.run_batch("tic_tac_toe", 7, EASY_BOTH, seed=10)
        assert [len(w) for w in fake_pool.waves] == [3, 3, 1]
        assert summary.matches == 7
        assert summary.unfinished == 0
        assert sum(summary.wins.values()) + summary.draws == 7

    def test_seeds_follow_match_index(self, fake_pool):
        with MatchRunner(2) as runner:
            runner.run_batch("tic_tac_toe", 4, EASY_BOTH, seed=100)
        seeds = [job.seed for wave in fake_pool.waves for job in wave]
        assert seeds == [100, 101, 102, 103]

    def test_seeded_batches_repeat(self, fake_pool):
        with MatchRunner(2) as runner:
            a = runner.run_batch("connect_four", 4, EASY_BOTH, seed=7)
            b = runner.run_batch("connect_four", 4, EASY_BOTH, seed=7)
        assert (a.wins, a.draws, a.total_plies) == (b.wins, b.draws, b.total_plies)

    def test_no_matches(self, fake_pool):
        summary = MatchRunner(1).run_batch("reversi", 0, EASY_BOTH)
        assert summary.matches == 0
        fake_pool.map.assert_not_called()

    def test_ply_cap_counts_unfinished(self, fake_pool):
        with MatchRunner(2) as runner:
            summary = runner.run_batch("reversi", 2, EASY_BOTH, seed=1, max_plies=4)
        assert summary.unfinished == 2
        assert summary.total_plies == 8

    def test_make_jobs_without_seed(self):
        jobs = MatchRunner._make_jobs("takeover", 3, EASY_BOTH, None, 100)
        assert len(jobs) == 3
        assert all(job.seed is not None and job.max_plies == 100 for job in jobs)


def test_real_process_pool():
    """One worker process, two quick matches."""
    with MatchRunner(1) as runner:
        summary = runner.run_batch("tic_tac_toe", 2, {p: Difficulty.NORMAL for p in Player}, seed=0)
    assert summary.matches == 2
    assert summary.draws + sum(summary.wins.values()) == 2
