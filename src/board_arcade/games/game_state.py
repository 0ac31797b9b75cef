"""
GameState - immutable position container.

A position is the Board plus whose turn it is, the forced-continuation
origin while a capture chain is in progress, and the number of plies
since the last irreversible move (used by draw-by-inactivity rules).
"""

from __future__ import annotations

from typing import Optional

from board_arcade.core.board import Board
from board_arcade.core.types import Player


class GameState:
    """
    Lightweight immutable position.

    Status (legal moves, winner, terminal flag) is never stored here;
    rules recompute it from these fields on demand.
    """
    __slots__ = ('board', 'current_player', 'forced_from', 'idle_plies')

    def __init__(
        self,
        board: Board,
        current_player: Player,
        forced_from: Optional[int] = None,
        idle_plies: int = 0,
    ):
        object.__setattr__(self, 'board', board)
        object.__setattr__(self, 'current_player', Player(current_player))
        object.__setattr__(self, 'forced_from', forced_from)
        object.__setattr__(self, 'idle_plies', idle_plies)

    def __setattr__(self, name, value):
        raise AttributeError("GameState is immutable")

    def __reduce__(self):
        return (GameState, (self.board, self.current_player, self.forced_from, self.idle_plies))

    def replace(self, **changes) -> "GameState":
        """Return a copy with some fields changed."""
        return GameState(
            changes.get('board', self.board),
            changes.get('current_player', self.current_player),
            changes.get('forced_from', self.forced_from),
            changes.get('idle_plies', self.idle_plies),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameState):
            return NotImplemented
        return (
            self.current_player == other.current_player
            and self.forced_from == other.forced_from
            and self.idle_plies == other.idle_plies
            and self.board == other.board
        )

    def __hash__(self) -> int:
        return hash((self.board, int(self.current_player), self.forced_from, self.idle_plies))

    def __repr__(self) -> str:
        forced = f", forced_from={self.forced_from}" if self.forced_from is not None else ""
        return f"GameState({self.board!r}, player={self.current_player.name}{forced})"
