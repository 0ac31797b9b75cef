"""
Parallel match runner.

Matches run in waves of num_workers on a process pool; each wave
completes and is tallied before the next one starts.
"""

from __future__ import annotations

import atexit
import logging
import multiprocessing as mp
import random
import signal
import sys
from multiprocessing.pool import Pool
from typing import Dict, List, Optional

from board_arcade.core.types import Difficulty, Player
from board_arcade.simulation.jobs import MAX_PLIES, MatchJob, MatchResult, MatchSummary
from board_arcade.simulation.worker import run_match

logger = logging.getLogger(__name__)

DEFAULT_WORKER_COUNT = max(1, mp.cpu_count() - 1)

# ---------------------------------------------------------------------------
# Process cleanup
# ---------------------------------------------------------------------------

_active_runners: List["MatchRunner"] = []


def _shutdown_all():
    for runner in _active_runners[:]:
        runner.shutdown(force=True)


def _worker_init():
    """Workers ignore SIGINT; only the main process handles Ctrl+C."""
    signal.signal(signal.SIGINT, signal.SIG_IGN)


def _on_signal(signum, frame):
    _shutdown_all()
    if signum == signal.SIGINT:
        raise KeyboardInterrupt
    sys.exit(1)


if mp.current_process().name == 'MainProcess':
    signal.signal(signal.SIGINT, _on_signal)
    signal.signal(signal.SIGTERM, _on_signal)
    atexit.register(_shutdown_all)


# ---------------------------------------------------------------------------
# Runner
# ---------------------------------------------------------------------------

class MatchRunner:
    """
    Plays batches of computer-vs-computer matches in parallel.

    Usable as a context manager; the pool is created lazily and torn
    down on exit (terminated if an exception escaped).
    """

    def __init__(self, num_workers: int = DEFAULT_WORKER_COUNT):
        if num_workers < 1:
            raise ValueError(f"num_workers must be at least 1, got {num_workers}")
        self.num_workers = num_workers
        self._pool: Optional[Pool] = None

        _active_runners.append(self)

    def __enter__(self):
        self._ensure_pool()
        return self

    def __exit__(self, exc_type, *_):
        self.shutdown(force=exc_type is not None)

    def _ensure_pool(self) -> Pool:
        if self._pool is None:
            self._pool = Pool(processes=self.num_workers, initializer=_worker_init)
        return self._pool

    def shutdown(self, force: bool = False) -> None:
        if self in _active_runners:
            _active_runners.remove(self)

        if self._pool is None:
            return

        pool, self._pool = self._pool, None
        pool.terminate() if force else pool.close()
        pool.join()

    def run_batch(
        self,
        game_name: str,
        num_matches: int,
        difficulties: Dict[Player, Difficulty],
        seed: Optional[int] = None,
        max_plies: int = MAX_PLIES,
    ) -> MatchSummary:
        """
        Play `num_matches` matches in waves and tally the results.

        With a seed, match i uses seed + i, so a batch is reproducible.
        """
        summary = MatchSummary(game_name=game_name, difficulties=dict(difficulties))
        if num_matches <= 0:
            return summary

        pool = self._ensure_pool()
        jobs = self._make_jobs(game_name, num_matches, difficulties, seed, max_plies)
        job_idx = 0

        try:
            while job_idx < len(jobs):
                wave = jobs[job_idx : job_idx + self.num_workers]
                results: List[MatchResult] = pool.map(run_match, wave)
                for result in results:
                    summary.add(result)
                job_idx += len(wave)
                logger.debug("%s: %d/%d matches done", game_name, job_idx, len(jobs))

        except KeyboardInterrupt:
            logger.info("Interrupted after %d matches", summary.matches)
            raise

        if summary.unfinished:
            logger.warning("%s: %d matches hit the %d-ply cap", game_name, summary.unfinished, max_plies)
        logger.info("%s", summary)
        return summary

    @staticmethod
    def _make_jobs(
        game_name: str,
        count: int,
        difficulties: Dict[Player, Difficulty],
        seed: Optional[int],
        max_plies: int,
    ) -> List[MatchJob]:
        return [
            MatchJob(
                game_name=game_name,
                difficulties=dict(difficulties),
                seed=seed + i if seed is not None else random.randrange(2 ** 32),
                max_plies=max_plies,
            )
            for i in range(count)
        ]
