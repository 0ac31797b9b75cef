"""
Job data structures for parallel match play.

Defines the input (MatchJob) and output (MatchResult) types used
by worker processes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from board_arcade.core.types import Difficulty, Move, Outcome, Player

# Upper bound on plies per match; every built-in game ends well before it
MAX_PLIES = 2000


@dataclass(frozen=True)
class MatchJob:
    """
    Self-contained job for a worker process.

    Contains everything needed to play one computer-vs-computer match
    without requiring shared state.
    """
    game_name: str
    difficulties: Dict[Player, Difficulty]
    seed: Optional[int] = None
    max_plies: int = MAX_PLIES


@dataclass
class MatchResult:
    """Outcome of a finished (or truncated) match."""
    game_name: str
    winner: Optional[Player]
    plies: int
    completed: bool
    scores: Dict[Player, int]
    moves: List[Move] = field(default_factory=list)
    # Per seat; NEUTRAL for both when the match was cut off
    outcomes: Dict[Player, Outcome] = field(default_factory=dict)

    @property
    def is_draw(self) -> bool:
        return self.completed and self.winner is None


@dataclass
class MatchSummary:
    """Aggregate over a batch of matches."""
    game_name: str
    difficulties: Dict[Player, Difficulty]
    matches: int = 0
    wins: Dict[Player, int] = field(default_factory=lambda: {p: 0 for p in Player})
    draws: int = 0
    unfinished: int = 0
    total_plies: int = 0

    def add(self, result: MatchResult) -> None:
        self.matches += 1
        self.total_plies += result.plies
        if not result.completed:
            self.unfinished += 1
        elif result.winner is None:
            self.draws += 1
        else:
            self.wins[result.winner] += 1

    @property
    def average_plies(self) -> float:
        return self.total_plies / self.matches if self.matches else 0.0

    def __str__(self) -> str:
        one, two = Player.ONE, Player.TWO
        return (
            f"{self.game_name}: {self.matches} matches "
            f"({self.difficulties[one].value} vs {self.difficulties[two].value}) | "
            f"P1 {self.wins[one]}  P2 {self.wins[two]}  draws {self.draws}"
            + (f"  unfinished {self.unfinished}" if self.unfinished else "")
            + f" | avg {self.average_plies:.1f} plies"
        )
