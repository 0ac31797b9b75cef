"""
Takeover opponent.

Every candidate gets a base score: conversions, a clone bonus and a small
territory term. EASY picks at random from the weaker half, NORMAL takes
the best base score, HARD also looks at both sides' mobility and the
opponent's best immediate reply.
"""

from __future__ import annotations

import math
from typing import List, Tuple

from board_arcade.core.board import Board
from board_arcade.core.types import Difficulty, Move, MoveKind, Player
from board_arcade.games.game_state import GameState
from board_arcade.games.takeover import apply_to_board, legal_moves
from board_arcade.selection.base import Scored, Strategy

CONVERSION = 4
CLONE_BONUS = 2
CONTROL = 0.1

HARD_BASE = 1.4
HARD_MOBILITY = 0.35
HARD_REPLY = 0.9
HARD_BLOCKED_OPPONENT = 8.0
HARD_TERMINAL = 500.0


def score_move(board: Board, move: Move, player: Player) -> Tuple[float, Board]:
    """Base score for `move` and the board it produces."""
    after, converted = apply_to_board(board, move, player)
    control = after.count(int(player)) - after.count(int(player.opponent))
    score = len(converted) * CONVERSION + (CLONE_BONUS if move.kind is MoveKind.CLONE else 0) + control * CONTROL
    return score, after


class TakeoverStrategy(Strategy):

    GAME_ID = "takeover"

    def _base_scores(self, state: GameState, moves: List[Move]) -> List[Tuple[Move, float, Board]]:
        return [(m, *score_move(state.board, m, state.current_player)) for m in moves]

    def easy(self, state: GameState, moves: List[Move]) -> Move:
        ranked = sorted(self._base_scores(state, moves), key=lambda s: s[1])
        weaker = ranked[:max(1, math.ceil(len(ranked) / 2))]
        return weaker[self.rng.randrange(len(weaker))][0]

    def normal(self, state: GameState, moves: List[Move]) -> Move:
        best, best_score = moves[0], -math.inf
        for move, score, _ in self._base_scores(state, moves):
            if score > best_score:
                best, best_score = move, score
        return best

    def hard(self, state: GameState, moves: List[Move]) -> Move:
        best, best_hard, best_base = moves[0], -math.inf, -math.inf
        for move, base, hard in self._hard_scores(state, moves):
            if hard > best_hard or (hard == best_hard and base > best_base):
                best, best_hard, best_base = move, hard, base
        return best

    def _hard_scores(self, state: GameState, moves: List[Move]) -> List[Tuple[Move, float, float]]:
        me = state.current_player
        opp = me.opponent
        out = []
        for move, base, after in self._base_scores(state, moves):
            opponent_moves = legal_moves(after, opp)
            own_mobility = len(legal_moves(after, me))

            best_reply = 0.0
            for reply in opponent_moves:
                reply_score, _ = score_move(after, reply, opp)
                best_reply = max(best_reply, reply_score)

            terminal_bonus = 0.0
            if self.rules.is_terminal(GameState(after, opp)):
                mine, theirs = after.count(int(me)), after.count(int(opp))
                if mine > theirs:
                    terminal_bonus = HARD_TERMINAL
                elif mine < theirs:
                    terminal_bonus = -HARD_TERMINAL

            hard = (
                base * HARD_BASE
                + (own_mobility - len(opponent_moves)) * HARD_MOBILITY
                - best_reply * HARD_REPLY
                + (HARD_BLOCKED_OPPONENT if not opponent_moves else 0.0)
                + terminal_bonus
            )
            out.append((move, base, hard))
        return out

    def score_moves(self, state, moves, difficulty) -> List[Scored]:
        if Difficulty(difficulty) is Difficulty.HARD:
            return [(m, hard) for m, _, hard in self._hard_scores(state, moves)]
        return [(m, base) for m, base, _ in self._base_scores(state, moves)]
