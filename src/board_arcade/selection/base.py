"""
Strategy - abstract base class for computer opponents.

Each game supplies one Strategy subclass with three tiers:

    EASY    random or near-random, drawn from the injected RNG
    NORMAL  one-ply greedy heuristic, fully deterministic
    HARD    heuristic plus bounded lookahead, fully deterministic

Only EASY ever touches the RNG, so NORMAL and HARD return the same move
for the same position on every call.
"""

from __future__ import annotations

import logging
import random
from abc import ABC, abstractmethod
from typing import Callable, List, Optional, Sequence, Tuple, TYPE_CHECKING

from board_arcade.core.types import Difficulty, Move

if TYPE_CHECKING:
    from board_arcade.games.game_base import GameRules
    from board_arcade.games.game_state import GameState

logger = logging.getLogger(__name__)

Scored = Tuple[Move, float]


def best_move(
    scored: Sequence[Scored],
    tie_break: Optional[Callable[[Move], int]] = None,
) -> Move:
    """
    Deterministic: pick the move with the highest score.

    Args:
        scored: (move, score) pairs in generation order
        tie_break: key whose LOWEST value wins among equal scores;
                   None keeps the first move reached

    Returns:
        Selected move
    """
    best, best_score = scored[0]
    for move, score in scored[1:]:
        if score > best_score:
            best, best_score = move, score
        elif score == best_score and tie_break is not None and tie_break(move) < tie_break(best):
            best = move
    return best


def lowest_target(move: Move) -> int:
    return move.target


def random_move(moves: Sequence[Move], rng: random.Random) -> Move:
    """Uniform choice over `moves`."""
    return moves[rng.randrange(len(moves))]


class Strategy(ABC):
    """Per-game move selector."""

    GAME_ID: str = ""

    def __init__(self, rules: "GameRules", rng: Optional[random.Random] = None, seed: Optional[int] = None):
        self.rules = rules
        self.rng = rng if rng is not None else random.Random(seed)

    def choose_move(
        self,
        state: "GameState",
        legal_moves: Sequence[Move],
        difficulty: Difficulty = Difficulty.NORMAL,
    ) -> Move:
        """
        Pick one of `legal_moves` for the player to act in `state`.

        Raises:
            ValueError: legal_moves is empty (callers must check first)
        """
        if not legal_moves:
            raise ValueError("choose_move needs at least one legal move")

        moves = list(legal_moves)
        difficulty = Difficulty(difficulty)
        if len(moves) == 1:
            return moves[0]

        if difficulty is Difficulty.EASY:
            move = self.easy(state, moves)
        elif difficulty is Difficulty.HARD:
            move = self.hard(state, moves)
        else:
            move = self.normal(state, moves)

        logger.debug("%s %s picked %s from %d moves", self.GAME_ID, difficulty.value, move, len(moves))
        return move

    def easy(self, state: "GameState", moves: List[Move]) -> Move:
        return random_move(moves, self.rng)

    @abstractmethod
    def normal(self, state: "GameState", moves: List[Move]) -> Move:
        """One-ply greedy choice."""

    @abstractmethod
    def hard(self, state: "GameState", moves: List[Move]) -> Move:
        """Heuristic choice with bounded lookahead."""

    def score_moves(
        self, state: "GameState", moves: Sequence[Move], difficulty: Difficulty
    ) -> List[Scored]:
        """
        Heuristic score per move, for debugging displays.

        Strategies that rank by a single numeric score override this;
        rule-based ones (priority lists, search) return an empty list.
        """
        return []
