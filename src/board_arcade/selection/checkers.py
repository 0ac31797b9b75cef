"""
Checkers opponent.

EASY    uniform random move
NORMAL  captures and promotions
HARD    simulates the move, then rewards continuation captures and
        advancement while penalising opponent mobility, opponent captures
        and leaving the moved piece exposed
"""

from __future__ import annotations

from typing import List

from board_arcade.core.types import Difficulty, Move
from board_arcade.games import checkers as rules
from board_arcade.games.game_state import GameState
from board_arcade.selection.base import Scored, Strategy, best_move, lowest_target

NORMAL_CAPTURE = 100
NORMAL_PROMOTE = 20

HARD_CAPTURE = 140
HARD_PROMOTE = 70
HARD_CONTINUATION = 45
HARD_ADVANCE = 3
HARD_OPP_MOVE = 3
HARD_OPP_CAPTURE = 35
HARD_EXPOSED = 60


class CheckersStrategy(Strategy):

    GAME_ID = "checkers"

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
        scored = []
        for move in moves:
            piece = board[move.source]
            promotes = rules.promotes(piece, board.row_col(move.target)[0])
            scored.append((move, len(move.captured) * NORMAL_CAPTURE + (NORMAL_PROMOTE if promotes else 0)))
        return scored

    def _hard_scores(self, state: GameState, moves: List[Move]) -> List[Scored]:
        board = state.board
        scored = []
        for move in moves:
            piece = board[move.source]
            player = rules.owner(piece)
            dest_row = board.row_col(move.target)[0]
            after, promoted = rules.apply_to_board(board, move)

            continuation = len(rules.capture_moves(after, move.target)) if move.captured else 0
            opponent_moves = rules.legal_moves(after, player.opponent)
            opponent_captures = [m for m in opponent_moves if m.captured]
            exposed = any(move.target in m.captured for m in opponent_captures)

            if abs(piece) == rules.KING:
                advancement = 0
            elif rules.PROMOTION_ROW[player] == rules.BOARD_SIZE - 1:
                advancement = dest_row
            else:
                advancement = rules.BOARD_SIZE - 1 - dest_row

            score = (
                len(move.captured) * HARD_CAPTURE
                + (HARD_PROMOTE if promoted else 0)
                + continuation * HARD_CONTINUATION
                + advancement * HARD_ADVANCE
                - len(opponent_moves) * HARD_OPP_MOVE
                - len(opponent_captures) * HARD_OPP_CAPTURE
                - (HARD_EXPOSED if exposed else 0)
            )
            scored.append((move, score))
        return scored
