"""
Reversi rules.

8x8 board, four centre discs at start, Black (ONE) moves first.
A placement is legal only if it outflanks at least one opponent disc;
every outflanked line in all 8 directions flips. A blocked player
passes; the game ends when neither side can move.

Uses int8 board:
    0 = empty
    1 = player ONE (Black)
    2 = player TWO (White)
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from board_arcade.core.board import ALL_DIRS, Board
from board_arcade.core.types import Move, Player, SideEffects
from board_arcade.games.game_base import GameRules
from board_arcade.games.game_state import GameState

BOARD_SIZE = 8


def outflanked(board: Board, index: int, player: Player) -> List[int]:
    """Opponent discs flipped by `player` placing on `index` (empty if illegal)."""
    if board[index] != 0:
        return []
    mine, theirs = int(player), int(player.opponent)
    captured: List[int] = []
    for direction in ALL_DIRS:
        line: List[int] = []
        for idx in board.ray(index, direction):
            value = board[idx]
            if value == theirs:
                line.append(idx)
                continue
            if value == mine and line:
                captured.extend(line)
            break
    return captured


class Reversi(GameRules):
    """Othello-style disc flipping."""

    GAME_ID = "reversi"
    PLAYER_LABELS = {Player.ONE: "Black", Player.TWO: "White"}
    CELL_STRINGS = {0: " ", 1: "●", 2: "○"}
    ALLOWS_PASS = True

    def initial_board(self) -> Board:
        board = Board.empty(BOARD_SIZE, BOARD_SIZE)
        mid = BOARD_SIZE // 2
        return board.with_cells({
            board.index(mid - 1, mid - 1): int(Player.TWO),
            board.index(mid - 1, mid): int(Player.ONE),
            board.index(mid, mid - 1): int(Player.ONE),
            board.index(mid, mid): int(Player.TWO),
        })

    def _generate(self, board: Board, player: Player, forced_from: Optional[int] = None) -> List[Move]:
        moves = []
        for idx in board.empty_cells():
            flips = outflanked(board, idx, player)
            if flips:
                moves.append(Move(idx, captured=tuple(flips)))
        return moves

    def _resolve(self, board: Board, move: Move, player: Player) -> Tuple[Board, SideEffects]:
        changes = {idx: int(player) for idx in move.captured}
        changes[move.target] = int(player)
        return board.with_cells(changes), SideEffects(converted=move.captured)

    def _evaluate_terminal(self, state: GameState) -> Tuple[bool, Optional[Player]]:
        board = state.board
        if self._generate(board, state.current_player) or self._generate(board, state.current_player.opponent):
            return False, None
        return True, _majority(board)


def _majority(board: Board) -> Optional[Player]:
    ones, twos = board.count(1), board.count(2)
    if ones == twos:
        return None
    return Player.ONE if ones > twos else Player.TWO
