"""
Dots and Boxes rules.

A 5x5 grid of dots is stored as a 9x9 lattice so that dots, edges and
boxes share one Board:

    (even, even)  dot            always 0
    (even, odd)   horizontal edge  0 = undrawn, else Player who drew it
    (odd,  even)  vertical edge    0 = undrawn, else Player who drew it
    (odd,  odd)   box              0 = unclaimed, else owning Player

Drawing the fourth side of one or two boxes claims them and grants the
same player another turn.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from board_arcade.core.board import ORTHOGONAL, Board
from board_arcade.core.types import Move, MoveKind, Player, SideEffects
from board_arcade.games.game_base import GameRules
from board_arcade.games.game_state import GameState

DOTS_PER_SIDE = 5
BOXES_PER_SIDE = DOTS_PER_SIDE - 1
LATTICE_SIZE = 2 * DOTS_PER_SIDE - 1

# Boxes on either side of an edge, by orientation
HORIZONTAL_EDGE_SIDES = ((-1, 0), (1, 0))
VERTICAL_EDGE_SIDES = ((0, -1), (0, 1))


def is_edge(row: int, col: int) -> bool:
    return (row + col) % 2 == 1


def is_box(row: int, col: int) -> bool:
    return row % 2 == 1 and col % 2 == 1


def edge_indices(board: Board) -> List[int]:
    return [
        board.index(r, c)
        for r in range(board.rows)
        for c in range(board.cols)
        if is_edge(r, c)
    ]


def box_indices(board: Board) -> List[int]:
    return [
        board.index(r, c)
        for r in range(board.rows)
        for c in range(board.cols)
        if is_box(r, c)
    ]


def adjacent_boxes(board: Board, edge: int) -> List[int]:
    """The one or two boxes bordered by `edge`."""
    row, _ = board.row_col(edge)
    sides = HORIZONTAL_EDGE_SIDES if row % 2 == 0 else VERTICAL_EDGE_SIDES
    boxes = []
    for direction in sides:
        idx = board.neighbor(edge, direction)
        if idx is not None:
            boxes.append(idx)
    return boxes


def box_edges(board: Board, box: int) -> List[int]:
    """The four edges around `box`."""
    return [board.neighbor(box, direction) for direction in ORTHOGONAL]


def drawn_sides(board: Board, box: int, extra: Optional[int] = None) -> int:
    """Drawn edges around `box`, counting `extra` as drawn."""
    return sum(1 for e in box_edges(board, box) if e == extra or board[e] != 0)


def edge_label(board: Board, edge: int) -> str:
    """Human-readable edge id: 'h-row-col' or 'v-row-col' in dot coordinates."""
    row, col = board.row_col(edge)
    if row % 2 == 0:
        return f"h-{row // 2}-{col // 2}"
    return f"v-{row // 2}-{col // 2}"


class DotsAndBoxes(GameRules):
    """Classic pencil-and-paper box claiming."""

    GAME_ID = "dots_and_boxes"
    PLAYER_LABELS = {Player.ONE: "A", Player.TWO: "B"}
    CELL_STRINGS = {0: " ", 1: "A", 2: "B"}
    SHOW_SCORE = True

    def initial_board(self) -> Board:
        return Board.empty(LATTICE_SIZE, LATTICE_SIZE)

    def _generate(self, board: Board, player: Player, forced_from: Optional[int] = None) -> List[Move]:
        return [Move(e, kind=MoveKind.EDGE) for e in edge_indices(board) if board[e] == 0]

    def _resolve(self, board: Board, move: Move, player: Player) -> Tuple[Board, SideEffects]:
        claimed = tuple(
            box for box in adjacent_boxes(board, move.target)
            if board[box] == 0 and drawn_sides(board, box, extra=move.target) == 4
        )
        changes = {move.target: int(player)}
        changes.update({box: int(player) for box in claimed})
        return board.with_cells(changes), SideEffects(claimed=claimed)

    def _grants_extra_turn(self, move: Move, effects: SideEffects) -> bool:
        return len(effects.claimed) > 0

    def _evaluate_terminal(self, state: GameState) -> Tuple[bool, Optional[Player]]:
        board = state.board
        if any(board[e] == 0 for e in edge_indices(board)):
            return False, None
        scores = self.scores(state)
        if scores[Player.ONE] == scores[Player.TWO]:
            return True, None
        return True, max(scores, key=scores.get)

    def scores(self, state: GameState) -> Dict[Player, int]:
        boxes = [state.board[b] for b in box_indices(state.board)]
        return {p: boxes.count(int(p)) for p in Player}

    def edges_remaining(self, state: GameState) -> int:
        return sum(1 for e in edge_indices(state.board) if state.board[e] == 0)

    def move_label(self, board: Board, move: Move) -> str:
        return f"{move.target} ({edge_label(board, move.target)})"

    def state_string(self, state: GameState) -> str:
        board = state.board
        lines = []
        for r in range(board.rows):
            parts = []
            for c in range(board.cols):
                value = board.at(r, c)
                if r % 2 == 0 and c % 2 == 0:
                    parts.append("•")
                elif r % 2 == 0:
                    parts.append("───" if value else "   ")
                elif c % 2 == 0:
                    parts.append("│" if value else " ")
                else:
                    parts.append(f" {self.CELL_STRINGS[value]} ")
            lines.append("".join(parts))
        return "\n".join(lines)
