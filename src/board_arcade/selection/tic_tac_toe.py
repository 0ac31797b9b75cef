"""
TicTacToe opponent.

EASY    70% random, otherwise the NORMAL choice
NORMAL  win > block > centre > first free corner > first free side
HARD    exhaustive minimax (the board is small enough to search fully)
"""

from __future__ import annotations

from typing import List, Optional

from board_arcade.core.types import Move, Player
from board_arcade.games.game_state import GameState
from board_arcade.games.tic_tac_toe import WIN_LINES
from board_arcade.selection.base import Strategy, random_move

CENTER = 4
CORNERS = (0, 2, 6, 8)
SIDES = (1, 3, 5, 7)

EASY_RANDOM_RATE = 0.7

_LINES = [tuple(int(i) for i in line) for line in WIN_LINES]


def winner_of(cells: List[int]) -> int:
    for a, b, c in _LINES:
        v = cells[a]
        if v != 0 and cells[b] == v and cells[c] == v:
            return v
    return 0


def winning_cell(cells: List[int], mark: int) -> Optional[int]:
    """First empty cell that completes a line for `mark`."""
    for i, v in enumerate(cells):
        if v != 0:
            continue
        cells[i] = mark
        won = winner_of(cells) == mark
        cells[i] = 0
        if won:
            return i
    return None


def minimax(cells: List[int], me: int, maximizing: bool, depth: int) -> int:
    """
    Plain recursive minimax over a scratch list (restored on return).

    Wins score 10 - depth, losses depth - 10, so quicker wins and slower
    losses are preferred.
    """
    w = winner_of(cells)
    if w == me:
        return 10 - depth
    if w != 0:
        return depth - 10
    empty = [i for i, v in enumerate(cells) if v == 0]
    if not empty:
        return 0

    mark = me if maximizing else 3 - me
    best = -100 if maximizing else 100
    for i in empty:
        cells[i] = mark
        score = minimax(cells, me, not maximizing, depth + 1)
        cells[i] = 0
        if maximizing and score > best:
            best = score
        elif not maximizing and score < best:
            best = score
    return best


class TicTacToeStrategy(Strategy):

    GAME_ID = "tic_tac_toe"

    def easy(self, state: GameState, moves: List[Move]) -> Move:
        pick = random_move(moves, self.rng)
        if self.rng.random() < EASY_RANDOM_RATE:
            return pick
        return self.normal(state, moves)

    def normal(self, state: GameState, moves: List[Move]) -> Move:
        by_cell = {m.target: m for m in moves}
        cells = state.board.to_list()
        me = int(state.current_player)

        for mark in (me, int(Player(me).opponent)):
            cell = winning_cell(cells, mark)
            if cell is not None:
                return by_cell[cell]

        for cell in (CENTER,) + CORNERS + SIDES:
            if cell in by_cell:
                return by_cell[cell]
        return moves[0]

    def hard(self, state: GameState, moves: List[Move]) -> Move:
        cells = state.board.to_list()
        me = int(state.current_player)
        best, best_score = moves[0], None
        for move in moves:
            cells[move.target] = me
            score = minimax(cells, me, False, 1)
            cells[move.target] = 0
            if best_score is None or score > best_score:
                best, best_score = move, score
        return best
