"""
Takeover rules (Ataxx-style).

7x7 board. Each player starts with two tokens in opposite corners.
A token either CLONES into an empty cell at distance 1 (the original
stays) or JUMPS to an empty cell at distance 2 (the original leaves).
Every opponent token in the 8 cells around the landing cell converts.

Uses int8 board:
    0 = empty
    1 = player ONE (Blue)
    2 = player TWO (Orange)
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from board_arcade.core.board import ALL_DIRS, Board
from board_arcade.core.types import Move, MoveKind, Player, SideEffects
from board_arcade.games.game_base import GameRules
from board_arcade.games.game_state import GameState

BOARD_SIZE = 7
MOVE_RANGE = 2

# (dr, dc, kind) for every reachable offset, in row-major scan order
MOVE_OFFSETS: Tuple[Tuple[int, int, MoveKind], ...] = tuple(
    (dr, dc, MoveKind.CLONE if max(abs(dr), abs(dc)) == 1 else MoveKind.JUMP)
    for dr in range(-MOVE_RANGE, MOVE_RANGE + 1)
    for dc in range(-MOVE_RANGE, MOVE_RANGE + 1)
    if (dr, dc) != (0, 0)
)


def moves_from(board: Board, source: int, player: Player) -> List[Move]:
    if board[source] != player:
        return []
    row, col = board.row_col(source)
    moves = []
    for dr, dc, kind in MOVE_OFFSETS:
        tr, tc = row + dr, col + dc
        if not board.in_bounds(tr, tc) or board.at(tr, tc) != 0:
            continue
        moves.append(Move(board.index(tr, tc), source, kind))
    return moves


def legal_moves(board: Board, player: Player) -> List[Move]:
    moves: List[Move] = []
    for source in board.indices_of(int(player)):
        moves.extend(moves_from(board, source, player))
    return moves


def apply_to_board(board: Board, move: Move, player: Player) -> Tuple[Board, Tuple[int, ...]]:
    """Place, vacate on a jump, and convert neighbours. Returns (board, converted)."""
    changes = {move.target: int(player)}
    if move.kind is MoveKind.JUMP:
        changes[move.source] = 0
    theirs = int(player.opponent)
    converted = []
    for direction in ALL_DIRS:
        idx = board.neighbor(move.target, direction)
        if idx is not None and board[idx] == theirs:
            changes[idx] = int(player)
            converted.append(idx)
    return board.with_cells(changes), tuple(converted)


def majority(board: Board) -> Optional[Player]:
    ones, twos = board.count(1), board.count(2)
    if ones == twos:
        return None
    return Player.ONE if ones > twos else Player.TWO


class Takeover(GameRules):
    """Clone/jump territory game with neighbour conversion."""

    GAME_ID = "takeover"
    PLAYER_LABELS = {Player.ONE: "Blue", Player.TWO: "Orange"}
    CELL_STRINGS = {0: " ", 1: "B", 2: "O"}
    ALLOWS_PASS = True
    SHOW_SCORE = True

    def initial_board(self) -> Board:
        board = Board.empty(BOARD_SIZE, BOARD_SIZE)
        last = BOARD_SIZE - 1
        return board.with_cells({
            board.index(0, 0): int(Player.ONE),
            board.index(last, last): int(Player.ONE),
            board.index(0, last): int(Player.TWO),
            board.index(last, 0): int(Player.TWO),
        })

    def _generate(self, board: Board, player: Player, forced_from: Optional[int] = None) -> List[Move]:
        return legal_moves(board, player)

    def _resolve(self, board: Board, move: Move, player: Player) -> Tuple[Board, SideEffects]:
        board, converted = apply_to_board(board, move, player)
        return board, SideEffects(converted=converted)

    def _pass_message(self, blocked: Player, mover: Player) -> str:
        return f"{self.player_label(blocked)} has no legal moves. {self.player_label(mover)} plays."

    def _evaluate_terminal(self, state: GameState) -> Tuple[bool, Optional[Player]]:
        board = state.board
        if board.is_full() or board.count(1) == 0 or board.count(2) == 0:
            return True, majority(board)
        if legal_moves(board, Player.ONE) or legal_moves(board, Player.TWO):
            return False, None
        return True, majority(board)
