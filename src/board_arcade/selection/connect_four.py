"""
Connect Four opponent.

EASY    75% random column, otherwise the NORMAL choice
NORMAL  winning column > blocking column > first free column by centre priority
HARD    win / block, then depth-5 alpha-beta minimax with window scoring

Search runs on flat Python lists; only the final choice is mapped back
to a legal Move.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from board_arcade.core.types import Move
from board_arcade.games.connect_four import COLUMNS, LINE_DIRS, ROWS, WIN_LENGTH
from board_arcade.games.game_state import GameState
from board_arcade.selection.base import Strategy

HARD_SEARCH_DEPTH = 5
EASY_RANDOM_RATE = 0.75
CENTER_PRIORITY_COLUMNS = (3, 2, 4, 1, 5, 0, 6)
CENTER_COLUMN = COLUMNS // 2

WIN_SCORE = 1_000_000
INF = float("inf")

# Window weights, from the searching player's point of view
FOUR_OWN = 100_000
FOUR_OPP = -100_000
THREE_OWN = 120
TWO_OWN = 18
THREE_OPP = -110
TWO_OPP = -14
CENTER_DISC = 9


def _build_windows() -> List[Tuple[int, ...]]:
    windows = []
    for row in range(ROWS):
        for col in range(COLUMNS):
            for dr, dc in LINE_DIRS:
                end_r, end_c = row + dr * (WIN_LENGTH - 1), col + dc * (WIN_LENGTH - 1)
                if 0 <= end_r < ROWS and 0 <= end_c < COLUMNS:
                    windows.append(tuple((row + dr * k) * COLUMNS + col + dc * k for k in range(WIN_LENGTH)))
    return windows


WINDOWS = _build_windows()


def drop_row(cells: List[int], column: int) -> int:
    for row in range(ROWS - 1, -1, -1):
        if cells[row * COLUMNS + column] == 0:
            return row
    return -1


def available_columns(cells: List[int]) -> List[int]:
    return [c for c in CENTER_PRIORITY_COLUMNS if cells[c] == 0]


def wins_through(cells: List[int], index: int) -> bool:
    """Whether the disc on `index` is part of a four-in-a-row."""
    disc = cells[index]
    row, col = divmod(index, COLUMNS)
    for dr, dc in LINE_DIRS:
        run = 1
        for sign in (1, -1):
            r, c = row + dr * sign, col + dc * sign
            while 0 <= r < ROWS and 0 <= c < COLUMNS and cells[r * COLUMNS + c] == disc:
                run += 1
                r, c = r + dr * sign, c + dc * sign
        if run >= WIN_LENGTH:
            return True
    return False


def winning_column(cells: List[int], disc: int) -> Optional[int]:
    """Lowest column index where dropping `disc` wins immediately."""
    for column in range(COLUMNS):
        row = drop_row(cells, column)
        if row < 0:
            continue
        idx = row * COLUMNS + column
        cells[idx] = disc
        won = wins_through(cells, idx)
        cells[idx] = 0
        if won:
            return column
    return None


def score_window(cells: List[int], window: Tuple[int, ...], me: int) -> int:
    own = opp = empty = 0
    for idx in window:
        v = cells[idx]
        if v == 0:
            empty += 1
        elif v == me:
            own += 1
        else:
            opp += 1

    if own == 4:
        return FOUR_OWN
    if opp == 4:
        return FOUR_OPP

    score = 0
    if own == 3 and empty == 1:
        score += THREE_OWN
    elif own == 2 and empty == 2:
        score += TWO_OWN
    if opp == 3 and empty == 1:
        score += THREE_OPP
    elif opp == 2 and empty == 2:
        score += TWO_OPP
    return score


def score_board(cells: List[int], me: int) -> int:
    score = sum(CENTER_DISC for row in range(ROWS) if cells[row * COLUMNS + CENTER_COLUMN] == me)
    for window in WINDOWS:
        score += score_window(cells, window, me)
    return score


def minimax(
    cells: List[int],
    me: int,
    depth: int,
    alpha: float,
    beta: float,
    maximizing: bool,
    last: int,
) -> float:
    """Alpha-beta search; `last` is the most recently filled cell."""
    if last >= 0 and wins_through(cells, last):
        return WIN_SCORE + depth if cells[last] == me else -WIN_SCORE - depth

    columns = available_columns(cells)
    if depth == 0 or not columns:
        return score_board(cells, me)

    disc = me if maximizing else 3 - me
    value = -INF if maximizing else INF
    for column in columns:
        idx = drop_row(cells, column) * COLUMNS + column
        cells[idx] = disc
        score = minimax(cells, me, depth - 1, alpha, beta, not maximizing, idx)
        cells[idx] = 0
        if maximizing:
            value = max(value, score)
            alpha = max(alpha, value)
        else:
            value = min(value, score)
            beta = min(beta, value)
        if alpha >= beta:
            break
    return value


class ConnectFourStrategy(Strategy):

    GAME_ID = "connect_four"

    @staticmethod
    def _by_column(moves: List[Move]) -> Dict[int, Move]:
        return {m.target % COLUMNS: m for m in moves}

    def _priority_pick(self, by_column: Dict[int, Move]) -> Move:
        for column in CENTER_PRIORITY_COLUMNS:
            if column in by_column:
                return by_column[column]
        return next(iter(by_column.values()))

    def easy(self, state: GameState, moves: List[Move]) -> Move:
        by_column = self._by_column(moves)
        ordered = [by_column[c] for c in CENTER_PRIORITY_COLUMNS if c in by_column]
        pick = ordered[self.rng.randrange(len(ordered))]
        if self.rng.random() < EASY_RANDOM_RATE:
            return pick
        return self.normal(state, moves)

    def _forced(self, cells: List[int], me: int, by_column: Dict[int, Move]) -> Optional[Move]:
        for disc in (me, 3 - me):
            column = winning_column(cells, disc)
            if column is not None and column in by_column:
                return by_column[column]
        return None

    def normal(self, state: GameState, moves: List[Move]) -> Move:
        cells = state.board.to_list()
        me = int(state.current_player)
        by_column = self._by_column(moves)
        forced = self._forced(cells, me, by_column)
        if forced is not None:
            return forced
        return self._priority_pick(by_column)

    def hard(self, state: GameState, moves: List[Move]) -> Move:
        cells = state.board.to_list()
        me = int(state.current_player)
        by_column = self._by_column(moves)
        forced = self._forced(cells, me, by_column)
        if forced is not None:
            return forced

        best_column, best_score = None, -INF
        for column in available_columns(cells):
            idx = drop_row(cells, column) * COLUMNS + column
            cells[idx] = me
            score = minimax(cells, me, HARD_SEARCH_DEPTH - 1, -INF, INF, False, idx)
            cells[idx] = 0
            if best_column is None or score > best_score:
                best_column, best_score = column, score
        return by_column[best_column]

    def score_moves(self, state, moves, difficulty):
        cells = state.board.to_list()
        me = int(state.current_player)
        scored = []
        for move in moves:
            cells[move.target] = me
            scored.append((move, float(score_board(cells, me))))
            cells[move.target] = 0
        return scored
