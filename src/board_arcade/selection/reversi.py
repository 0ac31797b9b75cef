"""
Reversi opponent.

EASY    uniform random placement
NORMAL  corners first, then the most flips
HARD    corner / flips / edge / disc lead, minus opponent mobility and a
        penalty for X- and C-squares next to an empty corner
"""

from __future__ import annotations

from typing import Dict, List

from board_arcade.core.board import Board
from board_arcade.core.types import Difficulty, Move, Player
from board_arcade.games.game_state import GameState
from board_arcade.games.reversi import BOARD_SIZE
from board_arcade.selection.base import Scored, Strategy, best_move, lowest_target

LAST = BOARD_SIZE - 1

NORMAL_CORNER = 1000

HARD_CORNER = 1200
HARD_FLIP = 8
HARD_EDGE = 10
HARD_LEAD = 3
HARD_OPP_MOBILITY = 6
HARD_RISKY_CORNER = 80


def _idx(row: int, col: int) -> int:
    return row * BOARD_SIZE + col


# Squares adjacent to a corner -> the corner they give away
RISKY_CORNER_BY_MOVE: Dict[int, int] = {
    _idx(0, 1): _idx(0, 0),
    _idx(1, 0): _idx(0, 0),
    _idx(1, 1): _idx(0, 0),
    _idx(0, LAST - 1): _idx(0, LAST),
    _idx(1, LAST - 1): _idx(0, LAST),
    _idx(1, LAST): _idx(0, LAST),
    _idx(LAST - 1, 0): _idx(LAST, 0),
    _idx(LAST - 1, 1): _idx(LAST, 0),
    _idx(LAST, 1): _idx(LAST, 0),
    _idx(LAST - 1, LAST): _idx(LAST, LAST),
    _idx(LAST - 1, LAST - 1): _idx(LAST, LAST),
    _idx(LAST, LAST - 1): _idx(LAST, LAST),
}


def is_corner(board: Board, index: int) -> bool:
    row, col = board.row_col(index)
    return row in (0, board.rows - 1) and col in (0, board.cols - 1)


def is_edge(board: Board, index: int) -> bool:
    row, col = board.row_col(index)
    return row in (0, board.rows - 1) or col in (0, board.cols - 1)


class ReversiStrategy(Strategy):

    GAME_ID = "reversi"

    def normal(self, state: GameState, moves: List[Move]) -> Move:
        return best_move(self._normal_scores(state, moves), tie_break=lowest_target)

    def hard(self, state: GameState, moves: List[Move]) -> Move:
        return best_move(self._hard_scores(state, moves), tie_break=lowest_target)

    def score_moves(self, state, moves, difficulty) -> List[Scored]:
        if Difficulty(difficulty) is Difficulty.HARD:
            return self._hard_scores(state, moves)
        return self._normal_scores(state, moves)

    def _normal_scores(self, state: GameState, moves: List[Move]) -> List[Scored]:
        board = state.board
        return [
            (m, (NORMAL_CORNER if is_corner(board, m.target) else 0) + len(m.captured))
            for m in moves
        ]

    def _hard_scores(self, state: GameState, moves: List[Move]) -> List[Scored]:
        board = state.board
        me: Player = state.current_player
        opp = me.opponent
        scored = []
        for move in moves:
            after, _ = self.rules.simulate(board, move, me)
            opponent_mobility = len(self.rules.moves_for(after, opp))
            lead = after.count(int(me)) - after.count(int(opp))
            risky = RISKY_CORNER_BY_MOVE.get(move.target)
            corner_penalty = HARD_RISKY_CORNER if risky is not None and board[risky] == 0 else 0

            score = (
                (HARD_CORNER if is_corner(board, move.target) else 0)
                + len(move.captured) * HARD_FLIP
                + (HARD_EDGE if is_edge(board, move.target) else 0)
                + lead * HARD_LEAD
                - opponent_mobility * HARD_OPP_MOBILITY
                - corner_penalty
            )
            scored.append((move, score))
        return scored
