"""
Games module - rule engines (move generation + move application).
"""

from board_arcade.games.game_state import GameState
from board_arcade.games.game_base import GameRules, MoveResult
from board_arcade.games.tic_tac_toe import TicTacToe
from board_arcade.games.connect_four import ConnectFour
from board_arcade.games.reversi import Reversi
from board_arcade.games.checkers import Checkers
from board_arcade.games.takeover import Takeover
from board_arcade.games.dots_and_boxes import DotsAndBoxes
from board_arcade.games.chess import Chess

__all__ = [
    "GameState",
    "GameRules",
    "MoveResult",
    "TicTacToe",
    "ConnectFour",
    "Reversi",
    "Checkers",
    "Takeover",
    "DotsAndBoxes",
    "Chess",
]
