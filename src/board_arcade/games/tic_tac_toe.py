"""
TicTacToe rules.

Uses int8 board:
    0 = empty
    1 = player ONE (X)
    2 = player TWO (O)
"""

from __future__ import annotations

from typing import List, Optional, Tuple

import numpy as np

from board_arcade.core.board import Board
from board_arcade.core.types import Move, Player, SideEffects
from board_arcade.games.game_base import GameRules
from board_arcade.games.game_state import GameState

# Pre-computed winning lines (indices into flattened 3x3 board)
WIN_LINES = np.array([
    [0, 1, 2], [3, 4, 5], [6, 7, 8],  # rows
    [0, 3, 6], [1, 4, 7], [2, 5, 8],  # cols
    [0, 4, 8], [2, 4, 6],             # diagonals
], dtype=np.int8)


def find_winning_line(cells: np.ndarray) -> Optional[Tuple[int, int, int]]:
    """Return the first completed line on a flat 9-cell array, if any."""
    for a, b, c in WIN_LINES:
        v = cells[a]
        if v != 0 and cells[b] == v and cells[c] == v:
            return int(a), int(b), int(c)
    return None


def line_winner(cells: np.ndarray) -> int:
    """0 = no line, otherwise the owner of the first completed line."""
    line = find_winning_line(cells)
    return 0 if line is None else int(cells[line[0]])


class TicTacToe(GameRules):
    """3x3 noughts and crosses."""

    GAME_ID = "tic_tac_toe"
    PLAYER_LABELS = {Player.ONE: "X", Player.TWO: "O"}
    CELL_STRINGS = {0: " ", 1: "X", 2: "O"}

    def initial_board(self) -> Board:
        return Board.empty(3, 3)

    def _generate(self, board: Board, player: Player, forced_from: Optional[int] = None) -> List[Move]:
        return [Move(i) for i in board.empty_cells()]

    def _resolve(self, board: Board, move: Move, player: Player) -> Tuple[Board, SideEffects]:
        return board.with_cells({move.target: int(player)}), SideEffects()

    def _evaluate_terminal(self, state: GameState) -> Tuple[bool, Optional[Player]]:
        flat = state.board.cells.ravel()
        winner = line_winner(flat)
        if winner:
            return True, Player(winner)
        return state.board.is_full(), None

    def winning_line(self, state: GameState) -> Optional[Tuple[int, int, int]]:
        return find_winning_line(state.board.cells.ravel())


