"""
Checkers rules - 8x8 English draughts.

Board encoding (int8), like signed chess encodings:
    0 = empty
    Positive = Player ONE (Black):  1 = man, 2 = king
    Negative = Player TWO (Red):   -1 = man, -2 = king

This allows fast owner checks: piece > 0 -> ONE, piece < 0 -> TWO.

Black starts on rows 0-2 and moves down; Red starts on rows 5-7 and
moves up. Captures are mandatory and a capturing piece must keep
capturing from its landing square while it can.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from board_arcade.core.board import Board, Direction
from board_arcade.core.types import Move, MoveKind, Player, SideEffects
from board_arcade.games.game_base import GameRules
from board_arcade.games.game_state import GameState

# Piece type constants
EMPTY = 0
MAN = 1
KING = 2

BOARD_SIZE = 8
STARTING_ROWS = 3
STARTING_PIECES = 12

# Direction templates (dr, dc)
KING_DIRS: Tuple[Direction, ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
MAN_DIRS: Dict[Player, Tuple[Direction, ...]] = {
    Player.ONE: ((1, -1), (1, 1)),
    Player.TWO: ((-1, -1), (-1, 1)),
}
PROMOTION_ROW = {Player.ONE: BOARD_SIZE - 1, Player.TWO: 0}


def owner(piece: int) -> Optional[Player]:
    if piece > 0:
        return Player.ONE
    if piece < 0:
        return Player.TWO
    return None


def encode(player: Player, kind: int) -> int:
    return kind if player is Player.ONE else -kind


def is_playable(row: int, col: int) -> bool:
    return (row + col) % 2 == 1


def directions(piece: int) -> Tuple[Direction, ...]:
    if abs(piece) == KING:
        return KING_DIRS
    return MAN_DIRS[owner(piece)]


def promotes(piece: int, target_row: int) -> bool:
    return abs(piece) == MAN and PROMOTION_ROW[owner(piece)] == target_row


def capture_moves(board: Board, index: int) -> List[Move]:
    """Single jumps available to the piece on `index`."""
    piece = board[index]
    if piece == EMPTY:
        return []
    moves = []
    for direction in directions(piece):
        mid = board.neighbor(index, direction)
        land = board.neighbor(index, direction, 2)
        if mid is None or land is None:
            continue
        victim = board[mid]
        if victim != EMPTY and owner(victim) != owner(piece) and board[land] == EMPTY:
            moves.append(Move(land, index, MoveKind.CAPTURE, (mid,)))
    return moves


def step_moves(board: Board, index: int) -> List[Move]:
    """Non-capturing diagonal steps for the piece on `index`."""
    piece = board[index]
    if piece == EMPTY:
        return []
    moves = []
    for direction in directions(piece):
        dest = board.neighbor(index, direction)
        if dest is not None and board[dest] == EMPTY:
            moves.append(Move(dest, index, MoveKind.STEP))
    return moves


def legal_moves(board: Board, player: Player, forced_from: Optional[int] = None) -> List[Move]:
    """Mandatory-capture move generation."""
    if forced_from is not None:
        if owner(board[forced_from]) != player:
            return []
        return capture_moves(board, forced_from)

    captures: List[Move] = []
    steps: List[Move] = []
    for idx, piece in enumerate(board):
        if owner(piece) != player:
            continue
        captures.extend(capture_moves(board, idx))
        steps.extend(step_moves(board, idx))
    return captures if captures else steps


def apply_to_board(board: Board, move: Move) -> Tuple[Board, bool]:
    """Move the piece, remove the jumped piece, promote. Returns (board, promoted)."""
    piece = board[move.source]
    promoted = promotes(piece, board.row_col(move.target)[0])
    landed = encode(owner(piece), KING) if promoted else piece
    changes = {move.source: EMPTY, move.target: landed}
    for idx in move.captured:
        changes[idx] = EMPTY
    return board.with_cells(changes), promoted


def count_pieces(board: Board, player: Player) -> int:
    return sum(1 for piece in board if owner(piece) == player)


def count_kings(board: Board, player: Player) -> int:
    return board.count(encode(player, KING))


class Checkers(GameRules):
    """English draughts with mandatory capture and multi-jump chains."""

    GAME_ID = "checkers"
    PLAYER_LABELS = {Player.ONE: "Black", Player.TWO: "Red"}
    CELL_STRINGS = {0: " ", 1: "b", 2: "B", -1: "r", -2: "R"}
    IDLE_LIMIT = 80  # 40 moves each without a capture or a man advancing

    def initial_board(self) -> Board:
        board = Board.empty(BOARD_SIZE, BOARD_SIZE)
        changes = {}
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                if not is_playable(row, col):
                    continue
                if row < STARTING_ROWS:
                    changes[board.index(row, col)] = encode(Player.ONE, MAN)
                elif row >= BOARD_SIZE - STARTING_ROWS:
                    changes[board.index(row, col)] = encode(Player.TWO, MAN)
        return board.with_cells(changes)

    def _generate(self, board: Board, player: Player, forced_from: Optional[int] = None) -> List[Move]:
        return legal_moves(board, player, forced_from)

    def _resolve(self, board: Board, move: Move, player: Player) -> Tuple[Board, SideEffects]:
        board, promoted = apply_to_board(board, move)
        return board, SideEffects(captured=move.captured, promoted=promoted)

    def _continuation_from(self, board: Board, move: Move, effects: SideEffects) -> Optional[int]:
        if move.captured and capture_moves(board, move.target):
            return move.target
        return None

    def _is_progress(self, board: Board, move: Move, effects: SideEffects) -> bool:
        return move.is_capture or abs(board[move.source]) == MAN

    def _evaluate_terminal(self, state: GameState) -> Tuple[bool, Optional[Player]]:
        board, player = state.board, state.current_player
        if count_pieces(board, player) > 0 and legal_moves(board, player, state.forced_from):
            return False, None
        if count_pieces(board, player.opponent) == 0:
            return True, None
        return True, player.opponent

    def scores(self, state: GameState) -> Dict[Player, int]:
        return {p: count_pieces(state.board, p) for p in Player}

    def capture_required(self, state: GameState) -> bool:
        return any(m.is_capture for m in self.generate_moves(state))
