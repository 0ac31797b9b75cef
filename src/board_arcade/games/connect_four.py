"""
Connect Four rules.

6 rows x 7 columns, row 0 at the top. Discs fall to the lowest empty
row of the chosen column.

Uses int8 board:
    0 = empty
    1 = player ONE (Red)
    2 = player TWO (Yellow)
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from board_arcade.core.board import Board
from board_arcade.core.types import Move, MoveKind, Player, SideEffects
from board_arcade.games.game_base import GameRules
from board_arcade.games.game_state import GameState

ROWS = 6
COLUMNS = 7
WIN_LENGTH = 4

# Line directions checked from each disc (down, right, down-right, down-left)
LINE_DIRS = ((1, 0), (0, 1), (1, 1), (1, -1))


def drop_row(board: Board, column: int) -> int:
    """Lowest empty row in `column`, or -1 if the column is full."""
    for row in range(board.rows - 1, -1, -1):
        if board.at(row, column) == 0:
            return row
    return -1


def line_winner(board: Board) -> int:
    """0 = nobody, otherwise the owner of the first four-in-a-row found."""
    for row in range(board.rows):
        for col in range(board.cols):
            disc = board.at(row, col)
            if disc == 0:
                continue
            for dr, dc in LINE_DIRS:
                matches = 1
                while matches < WIN_LENGTH:
                    nr, nc = row + dr * matches, col + dc * matches
                    if not board.in_bounds(nr, nc) or board.at(nr, nc) != disc:
                        break
                    matches += 1
                if matches == WIN_LENGTH:
                    return disc
    return 0


class ConnectFour(GameRules):
    """Gravity four-in-a-row."""

    GAME_ID = "connect_four"
    PLAYER_LABELS = {Player.ONE: "Red", Player.TWO: "Yellow"}
    CELL_STRINGS = {0: " ", 1: "R", 2: "Y"}

    def initial_board(self) -> Board:
        return Board.empty(ROWS, COLUMNS)

    def _generate(self, board: Board, player: Player, forced_from: Optional[int] = None) -> List[Move]:
        moves = []
        for column in range(board.cols):
            row = drop_row(board, column)
            if row >= 0:
                moves.append(Move(board.index(row, column), kind=MoveKind.DROP))
        return moves

    def _resolve(self, board: Board, move: Move, player: Player) -> Tuple[Board, SideEffects]:
        return board.with_cells({move.target: int(player)}), SideEffects()

    def _evaluate_terminal(self, state: GameState) -> Tuple[bool, Optional[Player]]:
        winner = line_winner(state.board)
        if winner:
            return True, Player(winner)
        return state.board.is_full(), None

    def move_for_column(self, state: GameState, column: int) -> Optional[Move]:
        """Legal drop into `column`, or None when the column is full or the game is over."""
        if not 0 <= column < state.board.cols:
            return None
        for move in self.generate_moves(state):
            if state.board.row_col(move.target)[1] == column:
                return move
        return None

    def tap_target(self, state: GameState, index: int) -> int:
        """Any cell of a column stands for a drop into that column."""
        column = state.board.row_col(index)[1]
        row = drop_row(state.board, column)
        return state.board.index(row, column) if row >= 0 else index
