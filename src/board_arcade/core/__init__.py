"""
Core module - board snapshots and shared value types.
"""

from board_arcade.core.board import Board, ALL_DIRS, DIAGONAL, ORTHOGONAL, hash_board
from board_arcade.core.exceptions import ArcadeError, InvalidStateError
from board_arcade.core.types import (
    Difficulty,
    GameMode,
    GameStatus,
    Move,
    MoveKind,
    Outcome,
    Player,
    SideEffects,
    Transition,
)

__all__ = [
    # Board
    "Board",
    "ALL_DIRS",
    "DIAGONAL",
    "ORTHOGONAL",
    "hash_board",
    # Errors
    "ArcadeError",
    "InvalidStateError",
    # Types
    "Difficulty",
    "GameMode",
    "GameStatus",
    "Move",
    "MoveKind",
    "Outcome",
    "Player",
    "SideEffects",
    "Transition",
]
