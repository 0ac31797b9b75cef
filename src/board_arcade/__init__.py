"""
Board Arcade - rule engines and computer opponents for two-player board games.

This package provides immutable-state rule engines for tic-tac-toe,
connect four, reversi, checkers, takeover, dots and boxes and chess, a
three-tier computer opponent for each, and a controller that runs a
live game between humans and the computer.

Quick Start:
    from board_arcade import Config, create_controller

    controller = create_controller(Config(game_name="reversi", difficulty="hard"))
    controller.attempt_move(controller.legal_moves()[0])
    if controller.is_computer_turn():
        controller.computer_move()
    print(controller.status_text)

Modules:
    core       - Board snapshots, shared value types, exceptions
    games      - Rule engines (move generation + move application)
    selection  - Computer opponents (EASY / NORMAL / HARD)
    simulation - Parallel computer-vs-computer matches
    debug      - Visualization tools for development
"""

from board_arcade.api import play_game, run_matches
from board_arcade.controller import GameController, Phase
from board_arcade.core import (
    ArcadeError,
    Board,
    Difficulty,
    GameMode,
    GameStatus,
    InvalidStateError,
    Move,
    MoveKind,
    Player,
    Transition,
)
from board_arcade.games import GameRules, GameState, MoveResult
from board_arcade.simulation import DEFAULT_WORKER_COUNT, MatchRunner, MatchSummary
from board_arcade.utils.config import DEFAULT_CONFIG, GAMES, Config
from board_arcade.utils.factory import create_controller, create_game, create_strategy

__version__ = "1.0.0"

__all__ = [
    # Main API
    "play_game",
    "run_matches",
    "create_controller",
    "create_game",
    "create_strategy",
    "GameController",
    "Phase",
    "MatchRunner",
    "MatchSummary",
    "DEFAULT_WORKER_COUNT",
    # Configuration
    "Config",
    "DEFAULT_CONFIG",
    "GAMES",
    # Types
    "ArcadeError",
    "InvalidStateError",
    "Board",
    "Difficulty",
    "GameMode",
    "GameStatus",
    "GameRules",
    "GameState",
    "Move",
    "MoveKind",
    "MoveResult",
    "Player",
    "Transition",
]
