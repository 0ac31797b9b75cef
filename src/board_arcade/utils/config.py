"""
Configuration and game registry.
"""

from typing import Optional

from board_arcade.core.types import Difficulty, GameMode, Player
from board_arcade.games import Checkers, Chess, ConnectFour, DotsAndBoxes, Reversi, Takeover, TicTacToe
from board_arcade.selection import (
    CheckersStrategy,
    ChessStrategy,
    ConnectFourStrategy,
    DotsAndBoxesStrategy,
    ReversiStrategy,
    TakeoverStrategy,
    TicTacToeStrategy,
)
from board_arcade.simulation import DEFAULT_WORKER_COUNT


# ---------------------------------------------------------------------------
# Game Registry
# ---------------------------------------------------------------------------

GAMES = {
    "tic_tac_toe": TicTacToe,
    "connect_four": ConnectFour,
    "reversi": Reversi,
    "checkers": Checkers,
    "takeover": Takeover,
    "dots_and_boxes": DotsAndBoxes,
    "chess": Chess,
}

STRATEGIES = {
    "tic_tac_toe": TicTacToeStrategy,
    "connect_four": ConnectFourStrategy,
    "reversi": ReversiStrategy,
    "checkers": CheckersStrategy,
    "takeover": TakeoverStrategy,
    "dots_and_boxes": DotsAndBoxesStrategy,
    "chess": ChessStrategy,
}

# Boards use int8 encoding (0 = empty); Player.ONE always opens
INITIAL_STATES = {name: game_class().initial_state() for name, game_class in GAMES.items()}


def check_game_name(game_name: str) -> str:
    if game_name not in GAMES:
        available = ", ".join(GAMES.keys())
        raise ValueError(f"Unknown game: {game_name}. Available: {available}")
    return game_name


# ---------------------------------------------------------------------------
# Default Settings
# ---------------------------------------------------------------------------

class Config:
    """Session configuration with sensible defaults."""

    def __init__(
        self,
        game_name: str = "tic_tac_toe",
        mode: GameMode = GameMode.AI,
        difficulty: Difficulty = Difficulty.NORMAL,
        seed: Optional[int] = None,
        computer_player: Player = Player.TWO,
        num_workers: int = DEFAULT_WORKER_COUNT,
    ):
        if num_workers < 1:
            raise ValueError(f"num_workers must be at least 1, got {num_workers}")

        self.game_name = check_game_name(game_name)
        self.mode = GameMode(mode)
        self.difficulty = Difficulty(difficulty)
        self.seed = seed
        self.computer_player = Player(computer_player)
        self.num_workers = num_workers

    def __repr__(self) -> str:
        return (
            f"Config(game_name={self.game_name!r}, mode={self.mode.value}, "
            f"difficulty={self.difficulty.value}, seed={self.seed}, "
            f"computer_player={self.computer_player.name}, num_workers={self.num_workers})"
        )


# Default configuration
DEFAULT_CONFIG = Config()
