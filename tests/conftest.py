"""
Shared test fixtures for board_arcade tests.

Design principles:
- Game-agnostic fixtures where possible
- Boards built from plain numpy arrays
- Minimal, focused fixtures
"""

import random
from typing import Callable, List, Optional

import numpy as np
import pytest

from board_arcade.core.board import Board
from board_arcade.games.game_base import GameRules
from board_arcade.games.game_state import GameState
from board_arcade.utils.config import GAMES

GAME_NAMES = list(GAMES.keys())


# =============================================================================
# Board helpers
# =============================================================================

def board_from_rows(rows: List[str], mapping: Optional[dict] = None) -> Board:
    """
    Build a Board from a picture, one string per row.

    '.' is empty, '1'/'2' are players; `mapping` adds game-specific symbols.
    """
    symbols = {".": 0, "1": 1, "2": 2}
    symbols.update(mapping or {})
    return Board(np.array([[symbols[ch] for ch in row] for row in rows], dtype=np.int8))


def play_out(
    rules: GameRules,
    state: GameState,
    pick: Callable[[GameState, list], object],
    limit: int = 2000,
) -> List:
    """Apply picked moves until terminal (or `limit` plies). Returns the results."""
    results = []
    while not rules.is_terminal(state) and len(results) < limit:
        move = pick(state, rules.generate_moves(state))
        result = rules.apply_move(state, move)
        assert result.applied
        results.append(result)
        state = result.state
    return results


# =============================================================================
# Game Fixtures (Game-Agnostic)
# =============================================================================

@pytest.fixture(params=GAME_NAMES)
def game_name(request) -> str:
    """Every registered game, one test per game."""
    return request.param


@pytest.fixture
def rules(game_name: str) -> GameRules:
    return GAMES[game_name]()


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def random_picker(rng: random.Random):
    """Uniform random move picker bound to a seeded RNG."""
    def pick(state, moves):
        return moves[rng.randrange(len(moves))]
    return pick


@pytest.fixture
def make_board():
    """board_from_rows as a fixture."""
    return board_from_rows


@pytest.fixture
def run_game():
    """play_out as a fixture."""
    return play_out
