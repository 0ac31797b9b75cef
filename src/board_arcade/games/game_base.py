"""
GameRules - abstract base class for all board games.

IMPORTANT ARCHITECTURE NOTE:
-----------------------------
- Rules are STATELESS. Positions live in immutable GameState values.
- apply_move() never mutates; it returns a MoveResult with a new state.
- Status (legal moves, winner, terminal) is DERIVED from a GameState
  every time it is requested. Do NOT cache it on the state.

Subclasses supply move generation, side-effect resolution and terminal
evaluation. The turn-advance skeleton (alternate / forced continuation /
pass / extra turn) lives here and is shared by every game.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from board_arcade.core.board import Board
from board_arcade.core.types import (
    GameStatus,
    Move,
    Outcome,
    Player,
    SideEffects,
    Transition,
)
from board_arcade.games.game_state import GameState


@dataclass(frozen=True)
class MoveResult:
    """Outcome of a move request against the rules."""

    applied: bool
    state: GameState
    move: Move
    side_effects: SideEffects = SideEffects()
    transition: Transition = Transition.REJECTED
    is_terminal: bool = False
    pass_message: Optional[str] = None

    @property
    def board(self) -> Board:
        return self.state.board

    @property
    def next_player(self) -> Player:
        return self.state.current_player

    @classmethod
    def rejected(cls, state: GameState, move: Move) -> "MoveResult":
        return cls(applied=False, state=state, move=move)


class GameRules(ABC):
    """
    Move generator + rule engine for one game.

    Class attributes to override:
        GAME_ID        stable identifier (e.g. 'reversi')
        PLAYER_LABELS  display name per Player
        CELL_STRINGS   cell value -> display string for state_string()
        ALLOWS_PASS    True where a blocked player forfeits the turn
        IDLE_LIMIT     plies without progress before a draw (None = no limit)
        SHOW_SCORE     True where the final status reports the score
    """

    GAME_ID: str = ""
    PLAYER_LABELS: Dict[Player, str] = {Player.ONE: "Player 1", Player.TWO: "Player 2"}
    CELL_STRINGS: Dict[int, str] = {0: " ", 1: "1", 2: "2"}
    ALLOWS_PASS: bool = False
    IDLE_LIMIT: Optional[int] = None
    SHOW_SCORE: bool = False

    def game_id(self) -> str:
        return self.GAME_ID

    def num_players(self) -> int:
        return 2

    def player_label(self, player: Player) -> str:
        return self.PLAYER_LABELS[Player(player)]

    # ------------------------------------------------------------------
    # Game-specific hooks
    # ------------------------------------------------------------------

    @abstractmethod
    def initial_board(self) -> Board:
        """Fixed starting layout."""

    @abstractmethod
    def _generate(self, board: Board, player: Player, forced_from: Optional[int] = None) -> List[Move]:
        """Raw move generation, ignoring whether the game is over."""

    @abstractmethod
    def _resolve(self, board: Board, move: Move, player: Player) -> Tuple[Board, SideEffects]:
        """Apply a legal move and all its side effects to the board."""

    @abstractmethod
    def _evaluate_terminal(self, state: GameState) -> Tuple[bool, Optional[Player]]:
        """Return (is_terminal, winner). Winner is None while running or on a draw."""

    def _continuation_from(self, board: Board, move: Move, effects: SideEffects) -> Optional[int]:
        """Origin the same player must keep moving from, if any."""
        return None

    def _is_progress(self, board: Board, move: Move, effects: SideEffects) -> bool:
        """Whether `move` (played on `board`) resets the idle-ply counter."""
        return True

    def _grants_extra_turn(self, move: Move, effects: SideEffects) -> bool:
        return False

    def _pass_message(self, blocked: Player, mover: Player) -> str:
        return (
            f"{self.player_label(blocked)} has no legal moves. "
            f"{self.player_label(mover)} plays again."
        )

    # ------------------------------------------------------------------
    # Public contract
    # ------------------------------------------------------------------

    def initial_state(self) -> GameState:
        return GameState(self.initial_board(), Player.ONE)

    def evaluate(self, state: GameState) -> Tuple[bool, Optional[Player]]:
        """(is_terminal, winner) for `state`, including the idle-ply draw."""
        if self.IDLE_LIMIT is not None and state.idle_plies >= self.IDLE_LIMIT:
            return True, None
        return self._evaluate_terminal(state)

    def generate_moves(self, state: GameState) -> List[Move]:
        """All legal moves for the player to act. Empty on a terminal state."""
        if self.is_terminal(state):
            return []
        return self._generate(state.board, state.current_player, state.forced_from)

    def is_legal(self, state: GameState, move: Move) -> bool:
        return move in self.generate_moves(state)

    def moves_for(self, board: Board, player: Player) -> List[Move]:
        """Raw moves for `player` on `board`, for lookahead. No terminal check."""
        return self._generate(board, player)

    def simulate(self, board: Board, move: Move, player: Player) -> Tuple[Board, SideEffects]:
        """Resolve a move already known to be legal. No validation, no turn logic."""
        return self._resolve(board, move, player)

    def apply_move(self, state: GameState, move: Move) -> MoveResult:
        """
        Validate and apply `move`.

        Moves outside generate_moves(state) are rejected: the returned
        result carries the original state object and applied=False.
        """
        if move not in self.generate_moves(state):
            return MoveResult.rejected(state, move)

        mover = state.current_player
        board, effects = self._resolve(state.board, move, mover)
        idle = 0 if self._is_progress(state.board, move, effects) else state.idle_plies + 1
        next_state, transition, message = self._advance(board, move, mover, effects)
        next_state = next_state.replace(idle_plies=idle)

        terminal = self.is_terminal(next_state)
        if terminal:
            transition = Transition.TERMINAL
            message = None

        return MoveResult(
            applied=True,
            state=next_state,
            move=move,
            side_effects=effects,
            transition=transition,
            is_terminal=terminal,
            pass_message=message,
        )

    def _advance(
        self, board: Board, move: Move, mover: Player, effects: SideEffects
    ) -> Tuple[GameState, Transition, Optional[str]]:
        """Shared turn-advance policy: continuation, extra turn, pass, alternate."""
        origin = self._continuation_from(board, move, effects)
        if origin is not None:
            return GameState(board, mover, origin), Transition.FORCED_CONTINUATION, None

        if self._grants_extra_turn(move, effects):
            return GameState(board, mover), Transition.EXTRA_TURN, None

        candidate = mover.opponent
        if (
            self.ALLOWS_PASS
            and not self._generate(board, candidate)
            and self._generate(board, mover)
        ):
            return GameState(board, mover), Transition.PASS, self._pass_message(candidate, mover)

        return GameState(board, candidate), Transition.TURN_ADVANCED, None

    def normalize(self, state: GameState) -> Tuple[GameState, Optional[str]]:
        """
        Hand the turn over when the player to act is blocked.

        Only meaningful for externally built positions; apply_move() never
        produces a blocked, non-terminal player.
        """
        if not self.ALLOWS_PASS or self.is_terminal(state):
            return state, None
        player = state.current_player
        if self._generate(state.board, player):
            return state, None
        other = player.opponent
        return state.replace(current_player=other), self._pass_message(player, other)

    def is_terminal(self, state: GameState) -> bool:
        return self.evaluate(state)[0]

    def winner(self, state: GameState) -> Optional[Player]:
        terminal, winner = self.evaluate(state)
        return winner if terminal else None

    def status(self, state: GameState) -> GameStatus:
        terminal, winner = self.evaluate(state)
        moves = () if terminal else tuple(
            self._generate(state.board, state.current_player, state.forced_from)
        )
        return GameStatus(
            current_player=state.current_player,
            legal_moves=moves,
            winner=winner if terminal else None,
            is_terminal=terminal,
            forced_continuation_from=state.forced_from,
        )

    def get_result(self, state: GameState, player: Player) -> Outcome:
        """Payoff for `player`: WIN / TIE / LOSS, or NEUTRAL while running."""
        terminal, winner = self.evaluate(state)
        if not terminal:
            return Outcome.NEUTRAL
        if winner is None:
            return Outcome.TIE
        return Outcome.WIN if winner == player else Outcome.LOSS

    def status_note(self, state: GameState) -> Optional[str]:
        """Extra line for the status text (e.g. check), or None."""
        return None

    def tap_target(self, state: GameState, index: int) -> int:
        """Map a tapped cell to the move target it stands for."""
        return index

    def scores(self, state: GameState) -> Dict[Player, int]:
        """Pieces (or points) held by each player."""
        return {p: state.board.count(int(p)) for p in Player}

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def move_label(self, board: Board, move: Move) -> str:
        """Move as typed at the prompt: 'cell' or 'from,to'."""
        if move.source is None:
            return str(move.target)
        return f"{move.source},{move.target}"

    def state_string(self, state: GameState) -> str:
        """Pretty string representation of the board."""
        board = state.board
        width = max(len(s) for s in self.CELL_STRINGS.values())
        bar = "─" * (width + 2)
        lines = ["╭" + "┬".join([bar] * board.cols) + "╮"]
        for r in range(board.rows):
            cells = (self.CELL_STRINGS.get(board.at(r, c), "?").center(width) for c in range(board.cols))
            lines.append("│ " + " │ ".join(cells) + " │")
            if r < board.rows - 1:
                lines.append("├" + "┼".join([bar] * board.cols) + "┤")
        lines.append("╰" + "┴".join([bar] * board.cols) + "╯")
        return "\n".join(lines)
