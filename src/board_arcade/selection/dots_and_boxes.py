"""
Dots and Boxes opponent.

An edge is "completing" if it draws the fourth side of a box, "risky" if
it draws the third side (handing the box to the opponent) and "safe"
otherwise.

EASY    uniform random edge
NORMAL  completing edge with the most boxes > lowest safe edge > lowest edge
HARD    completing edge > safe edge leaving the most safe edges behind >
        edge with the fewest risky boxes
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from board_arcade.core.board import Board
from board_arcade.core.types import Move
from board_arcade.games.dots_and_boxes import adjacent_boxes, drawn_sides, edge_indices
from board_arcade.games.game_state import GameState
from board_arcade.selection.base import Scored, Strategy


def classify(board: Board, edge: int) -> Tuple[int, int]:
    """(boxes completed, boxes left on three sides) if `edge` is drawn."""
    completed = risky = 0
    for box in adjacent_boxes(board, edge):
        if board[box] != 0:
            continue
        sides = drawn_sides(board, box, extra=edge)
        if sides == 4:
            completed += 1
        elif sides == 3:
            risky += 1
    return completed, risky


def future_safe_edges(board: Board, edge: int) -> int:
    """Undrawn edges that would still be safe once `edge` is drawn."""
    after = board.with_cells({edge: 1})
    return sum(
        1 for e in edge_indices(after)
        if after[e] == 0 and classify(after, e) == (0, 0)
    )


class DotsAndBoxesStrategy(Strategy):

    GAME_ID = "dots_and_boxes"

    def _partition(self, state: GameState, moves: List[Move]):
        """Best completing move, safe moves, and (move, risk) for the rest."""
        completing: Optional[Tuple[Move, int]] = None
        safe: List[Move] = []
        risky: List[Tuple[Move, int]] = []
        for move in sorted(moves, key=lambda m: m.target):
            completed, risk = classify(state.board, move.target)
            if completed:
                if completing is None or completed > completing[1]:
                    completing = (move, completed)
            elif risk == 0:
                safe.append(move)
            else:
                risky.append((move, risk))
        return completing, safe, risky

    def normal(self, state: GameState, moves: List[Move]) -> Move:
        completing, safe, _ = self._partition(state, moves)
        if completing is not None:
            return completing[0]
        if safe:
            return safe[0]
        return min(moves, key=lambda m: m.target)

    def hard(self, state: GameState, moves: List[Move]) -> Move:
        completing, safe, risky = self._partition(state, moves)
        if completing is not None:
            return completing[0]
        if safe:
            best, best_future = safe[0], -1
            for move in safe:
                future = future_safe_edges(state.board, move.target)
                if future > best_future:
                    best, best_future = move, future
            return best
        if risky:
            return min(risky, key=lambda mr: (mr[1], mr[0].target))[0]
        return min(moves, key=lambda m: m.target)

    def score_moves(self, state, moves, difficulty) -> List[Scored]:
        scored = []
        for move in moves:
            completed, risk = classify(state.board, move.target)
            scored.append((move, float(completed * 10 - risk)))
        return scored
