"""Computer opponents, one Strategy subclass per game."""

from board_arcade.selection.base import Strategy, best_move, lowest_target, random_move
from board_arcade.selection.checkers import CheckersStrategy
from board_arcade.selection.chess import ChessStrategy
from board_arcade.selection.connect_four import ConnectFourStrategy
from board_arcade.selection.dots_and_boxes import DotsAndBoxesStrategy
from board_arcade.selection.reversi import ReversiStrategy
from board_arcade.selection.takeover import TakeoverStrategy
from board_arcade.selection.tic_tac_toe import TicTacToeStrategy

__all__ = [
    "Strategy",
    "best_move",
    "lowest_target",
    "random_move",
    "CheckersStrategy",
    "ChessStrategy",
    "ConnectFourStrategy",
    "DotsAndBoxesStrategy",
    "ReversiStrategy",
    "TakeoverStrategy",
    "TicTacToeStrategy",
]
