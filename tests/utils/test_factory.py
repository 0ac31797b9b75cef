"""
Tests for board_arcade.utils.factory
"""

import random

import pytest

from board_arcade.controller import GameController
from board_arcade.core.types import Difficulty, GameMode, Player
from board_arcade.utils.config import Config
from board_arcade.utils.factory import create_controller, create_game, create_strategy


def test_create_game(game_name):
    rules = create_game(game_name)
    assert rules.game_id() == game_name


def test_create_game_unknown():
    with pytest.raises(ValueError):
        create_game("backgammon")


def test_create_strategy_shares_rules(game_name):
    rules = create_game(game_name)
    strategy = create_strategy(game_name, rules, seed=1)
    assert strategy.rules is rules
    assert strategy.GAME_ID == game_name


def test_create_strategy_builds_rules():
    strategy = create_strategy("connect_four")
    assert strategy.rules.game_id() == "connect_four"


def test_explicit_rng_wins_over_seed():
    rng = random.Random(0)
    strategy = create_strategy("reversi", seed=5, rng=rng)
    assert strategy.rng is rng


def test_seed_makes_easy_repeatable():
    a = create_strategy("dots_and_boxes", seed=12)
    b = create_strategy("dots_and_boxes", seed=12)
    state = a.rules.initial_state()
    moves = a.rules.generate_moves(state)
    assert [a.choose_move(state, moves, "easy") for _ in range(10)] == \
           [b.choose_move(state, moves, "easy") for _ in range(10)]


def test_create_controller():
    controller = create_controller(Config("reversi", difficulty="hard", computer_player=Player.ONE))
    assert isinstance(controller, GameController)
    assert controller.rules.game_id() == "reversi"
    assert controller.mode is GameMode.AI
    assert controller.difficulty is Difficulty.HARD
    assert controller.is_computer_turn()


def test_create_controller_default():
    controller = create_controller()
    assert controller.rules.game_id() == "tic_tac_toe"
    assert not controller.is_computer_turn()
