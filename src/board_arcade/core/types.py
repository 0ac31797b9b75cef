"""
Core types, enums, and value objects.

This module contains the fundamental types shared by every game:
- Player: the two seats at the table
- Move: a single legal action (placement, drop, step, jump, edge)
- GameStatus: derived, never stored, view of a position
- Outcome / Difficulty / GameMode / Transition enums
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum, auto
from typing import NamedTuple, Optional, Tuple


class Player(IntEnum):
    """The two seats. Values double as the cell encoding for most games."""

    ONE = 1
    TWO = 2

    @property
    def opponent(self) -> "Player":
        return Player.TWO if self is Player.ONE else Player.ONE


class Outcome(Enum):
    """Result of a game from one player's point of view."""

    WIN = auto()
    TIE = auto()
    LOSS = auto()
    NEUTRAL = auto()


class Difficulty(Enum):
    EASY = "easy"
    NORMAL = "normal"
    HARD = "hard"


class GameMode(Enum):
    LOCAL = "local"  # two humans on one device
    AI = "ai"        # human vs computer


class MoveKind(Enum):
    PLACE = "place"      # tic-tac-toe, reversi
    DROP = "drop"        # connect four column drop
    STEP = "step"        # checkers and chess non-capturing move
    CAPTURE = "capture"  # checkers jump, chess capture
    CLONE = "clone"      # takeover distance 1
    JUMP = "jump"        # takeover distance 2
    EDGE = "edge"        # dots and boxes
    CASTLE = "castle"
    EN_PASSANT = "en_passant"
    PROMOTE_QUEEN = "promote_queen"
    PROMOTE_ROOK = "promote_rook"
    PROMOTE_BISHOP = "promote_bishop"
    PROMOTE_KNIGHT = "promote_knight"


class Transition(Enum):
    """What happened to the turn after a move request."""

    REJECTED = auto()
    TURN_ADVANCED = auto()
    FORCED_CONTINUATION = auto()
    PASS = auto()
    EXTRA_TURN = auto()
    TERMINAL = auto()


class Move(NamedTuple):
    """
    A single legal action.

    target:   destination cell index (row * width + col)
    source:   origin cell index, None for placement-only games
    kind:     MoveKind distinguishing e.g. clone vs jump
    captured: cells removed or flipped as a direct consequence
    """

    target: int
    source: Optional[int] = None
    kind: MoveKind = MoveKind.PLACE
    captured: Tuple[int, ...] = ()

    @property
    def is_capture(self) -> bool:
        return len(self.captured) > 0


@dataclass(frozen=True)
class GameStatus:
    """Status recomputed from a GameState on every request."""

    current_player: Player
    legal_moves: Tuple[Move, ...]
    winner: Optional[Player]
    is_terminal: bool
    forced_continuation_from: Optional[int] = None

    @property
    def is_draw(self) -> bool:
        return self.is_terminal and self.winner is None


@dataclass(frozen=True)
class SideEffects:
    """Cells touched by a move beyond its own source/target."""

    captured: Tuple[int, ...] = ()
    converted: Tuple[int, ...] = ()
    claimed: Tuple[int, ...] = ()
    promoted: bool = False
