"""
Factory functions for creating games, strategies and controllers.
"""

import random
from typing import Optional

from board_arcade.controller import GameController
from board_arcade.games.game_base import GameRules
from board_arcade.selection.base import Strategy
from board_arcade.utils.config import DEFAULT_CONFIG, GAMES, STRATEGIES, Config, check_game_name


def create_game(game_name: str) -> GameRules:
    """
    Create the rules engine for a game.

    Args:
        game_name: Key from GAMES registry (e.g., "tic_tac_toe")

    Returns:
        Stateless rules instance
    """
    return GAMES[check_game_name(game_name)]()


def create_strategy(
    game_name: str,
    rules: Optional[GameRules] = None,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> Strategy:
    """
    Create the computer opponent for a game.

    Args:
        game_name: Key from STRATEGIES registry
        rules: Rules instance to share; a fresh one is created if omitted
        seed: Seed for the EASY tier's random source
        rng: Explicit random source (takes precedence over seed)
    """
    check_game_name(game_name)
    if rules is None:
        rules = create_game(game_name)
    return STRATEGIES[game_name](rules, rng=rng, seed=seed)


def create_controller(config: Config = DEFAULT_CONFIG) -> GameController:
    """Build a ready-to-play controller from a Config."""
    rules = create_game(config.game_name)
    strategy = create_strategy(config.game_name, rules, seed=config.seed)
    return GameController(
        rules,
        strategy,
        mode=config.mode,
        difficulty=config.difficulty,
        computer_players=(config.computer_player,),
    )
