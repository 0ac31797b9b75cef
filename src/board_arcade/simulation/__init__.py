"""
Simulation module - parallel computer-vs-computer matches.

Provides the infrastructure for playing many matches in parallel
and summarising the results.
"""

from board_arcade.simulation.jobs import MatchJob, MatchResult, MatchSummary
from board_arcade.simulation.runner import MatchRunner, DEFAULT_WORKER_COUNT

__all__ = [
    "MatchJob",
    "MatchResult",
    "MatchSummary",
    "MatchRunner",
    "DEFAULT_WORKER_COUNT",
]
