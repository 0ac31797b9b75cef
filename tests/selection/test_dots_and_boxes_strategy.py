"""
Tests for DotsAndBoxesStrategy.

Lattice indices: box (1,1) is cell 10, bordered by edges 1 (top),
9 (left), 11 (right) and 19 (bottom).
"""

import pytest

from board_arcade.core.board import Board
from board_arcade.core.types import Difficulty, Player
from board_arcade.games.dots_and_boxes import DotsAndBoxes
from board_arcade.games.game_state import GameState
from board_arcade.selection.dots_and_boxes import DotsAndBoxesStrategy, classify, future_safe_edges


@pytest.fixture
def rules():
    return DotsAndBoxes()


@pytest.fixture
def strategy(rules):
    return DotsAndBoxesStrategy(rules, seed=4)


def with_edges(*edges) -> Board:
    return Board.empty(9, 9).with_cells({e: 1 for e in edges})


def state_with(*edges) -> GameState:
    return GameState(with_edges(*edges), Player.TWO)


class TestClassify:

    def test_fresh_edge_is_safe(self):
        assert classify(with_edges(), 1) == (0, 0)

    def test_third_side_is_risky(self):
        assert classify(with_edges(1, 9), 11) == (0, 1)

    def test_fourth_side_completes(self):
        assert classify(with_edges(1, 9, 19), 11) == (1, 0)

    def test_shared_edge_completes_two(self):
        assert classify(with_edges(1, 9, 19, 3, 13, 21), 11) == (2, 0)

    def test_future_safe_edges_on_empty_board(self):
        assert future_safe_edges(with_edges(), 1) == 39


@pytest.mark.parametrize("difficulty", [Difficulty.NORMAL, Difficulty.HARD])
class TestCompleting:

    def test_takes_the_box(self, rules, strategy, difficulty):
        state = state_with(1, 9, 19)
        move = strategy.choose_move(state, rules.generate_moves(state), difficulty)
        assert move.target == 11

    def test_takes_the_double(self, rules, strategy, difficulty):
        state = state_with(1, 9, 19, 3, 13, 21)
        move = strategy.choose_move(state, rules.generate_moves(state), difficulty)
        assert move.target == 11


class TestNormal:

    def test_lowest_safe_edge(self, rules, strategy):
        state = state_with(1, 9)
        move = strategy.choose_move(state, rules.generate_moves(state), Difficulty.NORMAL)
        assert move.target == 3

    def test_opening_takes_first_edge(self, rules, strategy):
        state = rules.initial_state()
        move = strategy.choose_move(state, rules.generate_moves(state), Difficulty.NORMAL)
        assert move.target == 1


class TestHard:

    def test_never_hands_over_a_box(self, rules, strategy):
        state = state_with(1, 9)
        move = strategy.choose_move(state, rules.generate_moves(state), Difficulty.HARD)
        assert move.target not in (11, 19)

    def test_repeatable(self, rules, strategy):
        state = state_with(1, 9)
        moves = rules.generate_moves(state)
        picks = {strategy.choose_move(state, moves, Difficulty.HARD) for _ in range(20)}
        assert len(picks) == 1

    def test_score_moves(self, rules, strategy):
        state = state_with(1, 9, 19)
        scored = {m.target: s for m, s in strategy.score_moves(state, rules.generate_moves(state), "hard")}
        assert scored[11] == 10.0
        assert scored[3] == 0.0


class TestEasy:

    def test_variety(self, rules, strategy):
        state = rules.initial_state()
        moves = rules.generate_moves(state)
        picks = {strategy.choose_move(state, moves, Difficulty.EASY) for _ in range(200)}
        assert len(picks) > 10
