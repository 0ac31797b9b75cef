"""
Chess rules - standard 8x8 chess.

Board encoding (int8), signed like checkers:
    0 = empty
    Positive = Player ONE (White), negative = Player TWO (Black)
    1 = pawn, 2 = knight, 3 = bishop, 4 = rook, 5 = queen, 6 = king

Three more codes keep castling rights and en passant on the board, so
Board + player to move describes the whole position:
    7 = rook that has never moved
    8 = king that has never moved
    9 = pawn that advanced two squares on the previous ply

White starts on rows 6-7 and moves towards row 0. Legal moves never
leave the mover's own king attacked. No legal move means checkmate when
in check and stalemate otherwise; 100 plies without a capture or a pawn
move is a draw.

Move generation and application work on flat Python lists of cell
values (Board.to_list()) so search code can call them in tight loops.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Dict, List, Optional, Sequence, Tuple

from board_arcade.core.board import ALL_DIRS, DIAGONAL, ORTHOGONAL, Board, Direction
from board_arcade.core.types import Move, MoveKind, Player, SideEffects
from board_arcade.games.game_base import GameRules
from board_arcade.games.game_state import GameState

# Piece type constants
EMPTY = 0
PAWN = 1
KNIGHT = 2
BISHOP = 3
ROOK = 4
QUEEN = 5
KING = 6
UNMOVED_ROOK = 7
UNMOVED_KING = 8
DOUBLE_STEP_PAWN = 9

BOARD_SIZE = 8
BACK_RANK = (UNMOVED_ROOK, KNIGHT, BISHOP, QUEEN, UNMOVED_KING, BISHOP, KNIGHT, UNMOVED_ROOK)

BASE_KIND = {UNMOVED_ROOK: ROOK, UNMOVED_KING: KING, DOUBLE_STEP_PAWN: PAWN}

SIGN = {Player.ONE: 1, Player.TWO: -1}
HOME_ROW = {1: BOARD_SIZE - 1, -1: 0}
PAWN_START_ROW = {1: BOARD_SIZE - 2, -1: 1}
PAWN_DIRECTION = {1: -1, -1: 1}

KNIGHT_JUMPS: Tuple[Direction, ...] = (
    (-2, -1), (-2, 1), (-1, -2), (-1, 2),
    (1, -2), (1, 2), (2, -1), (2, 1),
)

# Generation order for promotions; the first one is what a tap picks
PROMOTIONS: Dict[MoveKind, int] = {
    MoveKind.PROMOTE_QUEEN: QUEEN,
    MoveKind.PROMOTE_ROOK: ROOK,
    MoveKind.PROMOTE_BISHOP: BISHOP,
    MoveKind.PROMOTE_KNIGHT: KNIGHT,
}

FILES = "abcdefgh"
PIECE_LETTERS = {PAWN: "P", KNIGHT: "N", BISHOP: "B", ROOK: "R", QUEEN: "Q", KING: "K"}


def _targets(square: int, offsets: Sequence[Direction]) -> Tuple[int, ...]:
    r, c = divmod(square, BOARD_SIZE)
    return tuple(
        (r + dr) * BOARD_SIZE + c + dc
        for dr, dc in offsets
        if 0 <= r + dr < BOARD_SIZE and 0 <= c + dc < BOARD_SIZE
    )


def _ray(square: int, direction: Direction) -> Tuple[int, ...]:
    r, c = divmod(square, BOARD_SIZE)
    dr, dc = direction
    out = []
    r, c = r + dr, c + dc
    while 0 <= r < BOARD_SIZE and 0 <= c < BOARD_SIZE:
        out.append(r * BOARD_SIZE + c)
        r, c = r + dr, c + dc
    return tuple(out)


# Per-square lookup tables
SQUARES = range(BOARD_SIZE * BOARD_SIZE)
KNIGHT_TARGETS = tuple(_targets(sq, KNIGHT_JUMPS) for sq in SQUARES)
KING_TARGETS = tuple(_targets(sq, ALL_DIRS) for sq in SQUARES)
DIAGONAL_RAYS = tuple(tuple(_ray(sq, d) for d in DIAGONAL) for sq in SQUARES)
ORTHOGONAL_RAYS = tuple(tuple(_ray(sq, d) for d in ORTHOGONAL) for sq in SQUARES)


def base_kind(piece: int) -> int:
    kind = abs(piece)
    return BASE_KIND.get(kind, kind)


def owner(piece: int) -> Optional[Player]:
    if piece > 0:
        return Player.ONE
    if piece < 0:
        return Player.TWO
    return None


def square_name(square: int) -> str:
    r, c = divmod(square, BOARD_SIZE)
    return f"{FILES[c]}{BOARD_SIZE - r}"


# ---------------------------------------------------------------------------
# Attacks
# ---------------------------------------------------------------------------

def is_attacked(cells: Sequence[int], square: int, by: int) -> bool:
    """Whether any piece of sign `by` attacks `square`."""
    knights = by * KNIGHT
    for sq in KNIGHT_TARGETS[square]:
        if cells[sq] == knights:
            return True

    kings = (by * KING, by * UNMOVED_KING)
    for sq in KING_TARGETS[square]:
        if cells[sq] in kings:
            return True

    # A pawn attacks diagonally forward, so look one row behind it
    r, c = divmod(square, BOARD_SIZE)
    pr = r - PAWN_DIRECTION[by]
    if 0 <= pr < BOARD_SIZE:
        pawns = (by * PAWN, by * DOUBLE_STEP_PAWN)
        for pc in (c - 1, c + 1):
            if 0 <= pc < BOARD_SIZE and cells[pr * BOARD_SIZE + pc] in pawns:
                return True

    diagonal = (by * BISHOP, by * QUEEN)
    for ray in DIAGONAL_RAYS[square]:
        for sq in ray:
            piece = cells[sq]
            if piece != EMPTY:
                if piece in diagonal:
                    return True
                break

    straight = (by * ROOK, by * UNMOVED_ROOK, by * QUEEN)
    for ray in ORTHOGONAL_RAYS[square]:
        for sq in ray:
            piece = cells[sq]
            if piece != EMPTY:
                if piece in straight:
                    return True
                break
    return False


def find_king(cells: Sequence[int], sign: int) -> Optional[int]:
    for king in (sign * KING, sign * UNMOVED_KING):
        if king in cells:
            return cells.index(king)
    return None


def in_check(cells: Sequence[int], player: Player) -> bool:
    sign = SIGN[player]
    king = find_king(cells, sign)
    if king is None:
        return False
    return is_attacked(cells, king, -sign)


# ---------------------------------------------------------------------------
# Move generation
# ---------------------------------------------------------------------------

def _add_pawn_advance(out: List[Move], source: int, target: int, last_row: bool, captured: Tuple[int, ...]):
    if last_row:
        out.extend(Move(target, source, kind, captured) for kind in PROMOTIONS)
    else:
        out.append(Move(target, source, MoveKind.CAPTURE if captured else MoveKind.STEP, captured))


def _add_pawn_moves(out: List[Move], cells: Sequence[int], source: int, sign: int):
    """Forward one or two, diagonal captures, en passant, promotion."""
    r, c = divmod(source, BOARD_SIZE)
    nr = r + PAWN_DIRECTION[sign]
    if not 0 <= nr < BOARD_SIZE:
        return
    last_row = nr == HOME_ROW[-sign]

    ahead = nr * BOARD_SIZE + c
    if cells[ahead] == EMPTY:
        _add_pawn_advance(out, source, ahead, last_row, ())
        if r == PAWN_START_ROW[sign]:
            two = ahead + PAWN_DIRECTION[sign] * BOARD_SIZE
            if cells[two] == EMPTY:
                out.append(Move(two, source, MoveKind.STEP))

    for nc in (c - 1, c + 1):
        if not 0 <= nc < BOARD_SIZE:
            continue
        target = nr * BOARD_SIZE + nc
        victim = cells[target]
        if victim * sign < 0:
            _add_pawn_advance(out, source, target, last_row, (target,))
        elif victim == EMPTY:
            beside = r * BOARD_SIZE + nc
            if cells[beside] == -sign * DOUBLE_STEP_PAWN:
                out.append(Move(target, source, MoveKind.EN_PASSANT, (beside,)))


def _add_step_moves(out: List[Move], cells: Sequence[int], source: int, sign: int, targets: Sequence[int]):
    """Knight and king moves."""
    for target in targets:
        piece = cells[target]
        if piece == EMPTY:
            out.append(Move(target, source, MoveKind.STEP))
        elif piece * sign < 0:
            out.append(Move(target, source, MoveKind.CAPTURE, (target,)))


def _add_line_moves(out: List[Move], cells: Sequence[int], source: int, sign: int, rays):
    """Bishop, rook and queen moves."""
    for ray in rays:
        for target in ray:
            piece = cells[target]
            if piece == EMPTY:
                out.append(Move(target, source, MoveKind.STEP))
                continue
            if piece * sign < 0:
                out.append(Move(target, source, MoveKind.CAPTURE, (target,)))
            break


def _add_castling(out: List[Move], cells: Sequence[int], sign: int):
    row = HOME_ROW[sign] * BOARD_SIZE
    king = row + 4
    if cells[king] != sign * UNMOVED_KING or is_attacked(cells, king, -sign):
        return
    rook = sign * UNMOVED_ROOK
    # Kingside: f and g empty and not attacked
    if (
        cells[row + 7] == rook
        and cells[row + 5] == EMPTY and cells[row + 6] == EMPTY
        and not is_attacked(cells, row + 5, -sign)
        and not is_attacked(cells, row + 6, -sign)
    ):
        out.append(Move(row + 6, king, MoveKind.CASTLE))
    # Queenside: b, c and d empty, c and d not attacked
    if (
        cells[row] == rook
        and cells[row + 1] == EMPTY and cells[row + 2] == EMPTY and cells[row + 3] == EMPTY
        and not is_attacked(cells, row + 3, -sign)
        and not is_attacked(cells, row + 2, -sign)
    ):
        out.append(Move(row + 2, king, MoveKind.CASTLE))


def pseudo_legal_moves(cells: Sequence[int], player: Player) -> List[Move]:
    """Moves by piece movement alone, ignoring whether the king is left attacked."""
    sign = SIGN[player]
    out: List[Move] = []
    for square, piece in enumerate(cells):
        if piece * sign <= 0:
            continue
        kind = base_kind(piece)
        if kind == PAWN:
            _add_pawn_moves(out, cells, square, sign)
        elif kind == KNIGHT:
            _add_step_moves(out, cells, square, sign, KNIGHT_TARGETS[square])
        elif kind == BISHOP:
            _add_line_moves(out, cells, square, sign, DIAGONAL_RAYS[square])
        elif kind == ROOK:
            _add_line_moves(out, cells, square, sign, ORTHOGONAL_RAYS[square])
        elif kind == QUEEN:
            _add_line_moves(out, cells, square, sign, DIAGONAL_RAYS[square])
            _add_line_moves(out, cells, square, sign, ORTHOGONAL_RAYS[square])
        else:
            _add_step_moves(out, cells, square, sign, KING_TARGETS[square])
            if abs(piece) == UNMOVED_KING:
                _add_castling(out, cells, sign)
    return out


def legal_moves(cells: Sequence[int], player: Player) -> List[Move]:
    """Pseudo-legal moves that do not leave the mover in check."""
    return [
        move for move in pseudo_legal_moves(cells, player)
        if not in_check(apply_to_cells(cells, move), player)
    ]


def apply_to_cells(cells: Sequence[int], move: Move) -> List[int]:
    """New cell list after `move`. No validation."""
    out = list(cells)
    piece = out[move.source]
    sign = 1 if piece > 0 else -1

    # Only the opponent's last double step can still be taken en passant
    stale = -sign * DOUBLE_STEP_PAWN
    if stale in out:
        out[out.index(stale)] = -sign * PAWN

    kind = base_kind(piece)
    out[move.source] = EMPTY
    for square in move.captured:
        out[square] = EMPTY

    if move.kind is MoveKind.CASTLE:
        row = move.target - move.target % BOARD_SIZE
        if move.target % BOARD_SIZE == 6:
            out[row + 7], out[row + 5] = EMPTY, sign * ROOK
        else:
            out[row], out[row + 3] = EMPTY, sign * ROOK

    if move.kind in PROMOTIONS:
        landed = PROMOTIONS[move.kind]
    elif kind == PAWN and abs(move.target - move.source) == 2 * BOARD_SIZE:
        landed = DOUBLE_STEP_PAWN
    else:
        landed = kind
    out[move.target] = sign * landed
    return out


@lru_cache(maxsize=1024)
def _legal_for(board: Board, player: Player) -> Tuple[Move, ...]:
    return tuple(legal_moves(board.to_list(), player))


def material(board: Board, player: Player) -> int:
    """Number of pieces `player` has on the board, king included."""
    sign = SIGN[player]
    return sum(1 for piece in board if piece * sign > 0)


# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------

CELL_STRINGS = {EMPTY: " "}
for _kind in range(PAWN, DOUBLE_STEP_PAWN + 1):
    CELL_STRINGS[_kind] = PIECE_LETTERS[base_kind(_kind)]
    CELL_STRINGS[-_kind] = PIECE_LETTERS[base_kind(_kind)].lower()


class Chess(GameRules):
    """Standard chess with castling, en passant and promotion."""

    GAME_ID = "chess"
    PLAYER_LABELS = {Player.ONE: "White", Player.TWO: "Black"}
    CELL_STRINGS = CELL_STRINGS
    IDLE_LIMIT = 100  # 50 moves each without a capture or a pawn move

    def initial_board(self) -> Board:
        cells = [EMPTY] * (BOARD_SIZE * BOARD_SIZE)
        for c, kind in enumerate(BACK_RANK):
            cells[c] = -kind
            cells[BOARD_SIZE + c] = -PAWN
            cells[6 * BOARD_SIZE + c] = PAWN
            cells[7 * BOARD_SIZE + c] = kind
        return Board.from_list(cells, BOARD_SIZE, BOARD_SIZE)

    def _generate(self, board: Board, player: Player, forced_from: Optional[int] = None) -> List[Move]:
        return list(_legal_for(board, Player(player)))

    def _resolve(self, board: Board, move: Move, player: Player) -> Tuple[Board, SideEffects]:
        cells = apply_to_cells(board.to_list(), move)
        promoted = move.kind in PROMOTIONS
        return Board.from_list(cells, BOARD_SIZE, BOARD_SIZE), SideEffects(captured=move.captured, promoted=promoted)

    def _is_progress(self, board: Board, move: Move, effects: SideEffects) -> bool:
        return move.is_capture or base_kind(board[move.source]) == PAWN

    def _evaluate_terminal(self, state: GameState) -> Tuple[bool, Optional[Player]]:
        player = state.current_player
        if _legal_for(state.board, player):
            return False, None
        if in_check(state.board.to_list(), player):
            return True, player.opponent
        return True, None

    def evaluate(self, state: GameState) -> Tuple[bool, Optional[Player]]:
        """Checkmate and stalemate are decided before the 100-ply draw."""
        terminal, winner = self._evaluate_terminal(state)
        if not terminal and state.idle_plies >= self.IDLE_LIMIT:
            return True, None
        return terminal, winner

    def is_in_check(self, state: GameState) -> bool:
        return in_check(state.board.to_list(), state.current_player)

    def status_note(self, state: GameState) -> Optional[str]:
        if self.is_in_check(state):
            return f"{self.player_label(state.current_player)} is in check!"
        return None

    def scores(self, state: GameState) -> Dict[Player, int]:
        return {p: material(state.board, p) for p in Player}

    def move_label(self, board: Board, move: Move) -> str:
        label = f"{move.source},{move.target} ({square_name(move.source)}-{square_name(move.target)}"
        if move.kind in PROMOTIONS:
            label += "=" + PIECE_LETTERS[PROMOTIONS[move.kind]]
        return label + ")"
