"""
Chess opponent.

EASY    uniform random move
NORMAL  one-reply search: assume the opponent answers with its best
        reply, score the result by material plus a small centre bonus
HARD    alpha-beta search two plies past the candidate move, scored by
        material plus piece-square tables

Scores are centipawns, positive for White; search code flips the sign
for the side to move. A side with no legal reply is mated (in check) or
stalemated (score 0). Mates found sooner score higher.
"""

from __future__ import annotations

from typing import List, Sequence

from board_arcade.core.types import Difficulty, Move, Player
from board_arcade.games import chess as rules
from board_arcade.games.game_state import GameState
from board_arcade.selection.base import Scored, Strategy, best_move

PIECE_VALUES = {
    rules.PAWN: 100,
    rules.KNIGHT: 320,
    rules.BISHOP: 330,
    rules.ROOK: 500,
    rules.QUEEN: 900,
    rules.KING: 20000,
}

MATE_SCORE = 20000
MATE_STEP = 100
HARD_DEPTH = 2
INFINITY = 10 ** 9

# Piece-square tables, White's point of view (row 0 is Black's back rank)
PAWN_TABLE = (
    0, 0, 0, 0, 0, 0, 0, 0,
    50, 50, 50, 50, 50, 50, 50, 50,
    10, 10, 20, 30, 30, 20, 10, 10,
    5, 5, 10, 25, 25, 10, 5, 5,
    0, 0, 0, 20, 20, 0, 0, 0,
    5, -5, -10, 0, 0, -10, -5, 5,
    5, 10, 10, -20, -20, 10, 10, 5,
    0, 0, 0, 0, 0, 0, 0, 0,
)

KNIGHT_TABLE = (
    -50, -40, -30, -30, -30, -30, -40, -50,
    -40, -20, 0, 0, 0, 0, -20, -40,
    -30, 0, 10, 15, 15, 10, 0, -30,
    -30, 5, 15, 20, 20, 15, 5, -30,
    -30, 0, 15, 20, 20, 15, 0, -30,
    -30, 5, 10, 15, 15, 10, 5, -30,
    -40, -20, 0, 5, 5, 0, -20, -40,
    -50, -40, -30, -30, -30, -30, -40, -50,
)

BISHOP_TABLE = (
    -20, -10, -10, -10, -10, -10, -10, -20,
    -10, 0, 0, 0, 0, 0, 0, -10,
    -10, 0, 10, 10, 10, 10, 0, -10,
    -10, 5, 5, 10, 10, 5, 5, -10,
    -10, 0, 10, 10, 10, 10, 0, -10,
    -10, 10, 10, 10, 10, 10, 10, -10,
    -10, 5, 0, 0, 0, 0, 5, -10,
    -20, -10, -10, -10, -10, -10, -10, -20,
)

ROOK_TABLE = (
    0, 0, 0, 0, 0, 0, 0, 0,
    5, 10, 10, 10, 10, 10, 10, 5,
    -5, 0, 0, 0, 0, 0, 0, -5,
    -5, 0, 0, 0, 0, 0, 0, -5,
    -5, 0, 0, 0, 0, 0, 0, -5,
    -5, 0, 0, 0, 0, 0, 0, -5,
    -5, 0, 0, 0, 0, 0, 0, -5,
    0, 0, 0, 5, 5, 0, 0, 0,
)

QUEEN_TABLE = (
    -20, -10, -10, -5, -5, -10, -10, -20,
    -10, 0, 0, 0, 0, 0, 0, -10,
    -10, 0, 5, 5, 5, 5, 0, -10,
    -5, 0, 5, 5, 5, 5, 0, -5,
    0, 0, 5, 5, 5, 5, 0, -5,
    -10, 5, 5, 5, 5, 5, 0, -10,
    -10, 0, 5, 0, 0, 0, 0, -10,
    -20, -10, -10, -5, -5, -10, -10, -20,
)

KING_TABLE = (
    -30, -40, -40, -50, -50, -40, -40, -30,
    -30, -40, -40, -50, -50, -40, -40, -30,
    -30, -40, -40, -50, -50, -40, -40, -30,
    -30, -40, -40, -50, -50, -40, -40, -30,
    -20, -30, -30, -40, -40, -30, -30, -20,
    -10, -20, -20, -20, -20, -20, -20, -10,
    20, 20, 0, 0, 0, 0, 20, 20,
    20, 30, 10, 0, 0, 10, 30, 20,
)

SQUARE_TABLES = {
    rules.PAWN: PAWN_TABLE,
    rules.KNIGHT: KNIGHT_TABLE,
    rules.BISHOP: BISHOP_TABLE,
    rules.ROOK: ROOK_TABLE,
    rules.QUEEN: QUEEN_TABLE,
    rules.KING: KING_TABLE,
}

CENTER = {27, 28, 35, 36}
NEAR_CENTER = {
    r * rules.BOARD_SIZE + c for r in range(2, 6) for c in range(2, 6)
} - CENTER
CENTER_BONUS = 10
NEAR_CENTER_BONUS = 5


def mirror(square: int) -> int:
    """Same file, rank seen from the other side."""
    r, c = divmod(square, rules.BOARD_SIZE)
    return (rules.BOARD_SIZE - 1 - r) * rules.BOARD_SIZE + c


def evaluate(cells: Sequence[int]) -> int:
    """Material plus piece-square bonus, positive for White."""
    score = 0
    for square, piece in enumerate(cells):
        if piece == rules.EMPTY:
            continue
        kind = rules.base_kind(piece)
        if piece > 0:
            score += PIECE_VALUES[kind] + SQUARE_TABLES[kind][square]
        else:
            score -= PIECE_VALUES[kind] + SQUARE_TABLES[kind][mirror(square)]
    return score


def evaluate_simple(cells: Sequence[int]) -> int:
    """Material plus a flat centre bonus, positive for White."""
    score = 0
    for square, piece in enumerate(cells):
        if piece == rules.EMPTY:
            continue
        value = PIECE_VALUES[rules.base_kind(piece)]
        if square in CENTER:
            value += CENTER_BONUS
        elif square in NEAR_CENTER:
            value += NEAR_CENTER_BONUS
        score += value if piece > 0 else -value
    return score


def for_player(score: int, player: Player) -> int:
    return score if player is Player.ONE else -score


class ChessStrategy(Strategy):

    GAME_ID = "chess"

    def normal(self, state: GameState, moves: List[Move]) -> Move:
        return best_move(self._normal_scores(state, moves))

    def hard(self, state: GameState, moves: List[Move]) -> Move:
        cells = state.board.to_list()
        player = state.current_player
        alpha = -INFINITY
        scored = []
        for move in moves:
            after = rules.apply_to_cells(cells, move)
            score = -self._alpha_beta(after, HARD_DEPTH, -INFINITY, -alpha, player.opponent)
            alpha = max(alpha, score)
            scored.append((move, score))
        return best_move(scored)

    def score_moves(self, state, moves, difficulty) -> List[Scored]:
        if Difficulty(difficulty) is Difficulty.HARD:
            cells = state.board.to_list()
            opponent = state.current_player.opponent
            return [
                (m, -self._alpha_beta(rules.apply_to_cells(cells, m), HARD_DEPTH, -INFINITY, INFINITY, opponent))
                for m in moves
            ]
        return self._normal_scores(state, moves)

    def _normal_scores(self, state: GameState, moves: Sequence[Move]) -> List[Scored]:
        cells = state.board.to_list()
        opponent = state.current_player.opponent
        return [(m, -self._best_reply(rules.apply_to_cells(cells, m), opponent)) for m in moves]

    def _best_reply(self, cells: List[int], player: Player) -> int:
        """Score for `player` after its best single reply."""
        replies = rules.legal_moves(cells, player)
        if not replies:
            return -(MATE_SCORE - MATE_STEP) if rules.in_check(cells, player) else 0
        return max(
            for_player(evaluate_simple(rules.apply_to_cells(cells, reply)), player)
            for reply in replies
        )

    def _alpha_beta(self, cells: List[int], depth: int, alpha: int, beta: int, player: Player) -> int:
        """Fail-hard negamax, scored for `player`."""
        if depth == 0:
            return for_player(evaluate(cells), player)
        replies = rules.legal_moves(cells, player)
        if not replies:
            if rules.in_check(cells, player):
                return -MATE_SCORE + (HARD_DEPTH + 1 - depth) * MATE_STEP
            return 0
        for reply in replies:
            score = -self._alpha_beta(rules.apply_to_cells(cells, reply), depth - 1, -beta, -alpha, player.opponent)
            alpha = max(alpha, score)
            if alpha >= beta:
                break
        return alpha
