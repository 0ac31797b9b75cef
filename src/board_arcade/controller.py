"""
GameController - owns the live game and arbitrates between seats.

The controller holds the authoritative GameState, routes human input
(full moves or cell taps) and computer turns through the rules engine,
and notifies subscribers after every transition. Rules and strategies
stay pure; everything mutable lives here.
"""

from __future__ import annotations

import logging
from enum import Enum, auto
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from board_arcade.core.board import Board
from board_arcade.core.exceptions import InvalidStateError
from board_arcade.core.types import Difficulty, GameMode, GameStatus, Move, Outcome, Player, Transition
from board_arcade.games.game_base import GameRules, MoveResult
from board_arcade.games.game_state import GameState
from board_arcade.selection.base import Strategy

logger = logging.getLogger(__name__)

Listener = Callable[[Optional[MoveResult]], None]


class Phase(Enum):
    WAITING_FOR_HUMAN = auto()
    WAITING_FOR_COMPUTER = auto()
    TERMINAL = auto()


def _plural(count: int, noun: str) -> str:
    return f"{count} {noun}{'' if count == 1 else 's'}"


class GameController:
    """
    One running game.

    In GameMode.AI the seats in `computer_players` are driven by the
    strategy; every other seat (and every seat in LOCAL mode) is human.
    """

    def __init__(
        self,
        rules: GameRules,
        strategy: Strategy,
        mode: GameMode = GameMode.AI,
        difficulty: Difficulty = Difficulty.NORMAL,
        computer_players: Iterable[Player] = (Player.TWO,),
    ):
        self.rules = rules
        self.strategy = strategy
        self._mode = GameMode(mode)
        self._computer_players: Tuple[Player, ...] = tuple(Player(p) for p in computer_players)
        self._difficulties: Dict[Player, Difficulty] = {
            p: Difficulty(difficulty) for p in self._computer_players
        }
        self._default_difficulty = Difficulty(difficulty)
        self._listeners: List[Listener] = []
        self._reset_fields()

    def _reset_fields(self) -> None:
        self._state: GameState = self.rules.initial_state()
        self._history: List[MoveResult] = []
        self._pass_message: Optional[str] = None
        self._selected: Optional[int] = None

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def board(self) -> Board:
        return self._state.board

    @property
    def current_player(self) -> Player:
        return self._state.current_player

    @property
    def mode(self) -> GameMode:
        return self._mode

    @property
    def history(self) -> Tuple[MoveResult, ...]:
        return tuple(self._history)

    @property
    def pass_message(self) -> Optional[str]:
        return self._pass_message

    @property
    def selected(self) -> Optional[int]:
        """Cell of the piece picked by select_cell, for from/to games."""
        if self._state.forced_from is not None:
            return self._state.forced_from
        return self._selected

    @property
    def winner(self) -> Optional[Player]:
        return self.rules.winner(self._state)

    @property
    def is_game_over(self) -> bool:
        return self.rules.is_terminal(self._state)

    @property
    def phase(self) -> Phase:
        if self.is_game_over:
            return Phase.TERMINAL
        if self.is_computer_turn():
            return Phase.WAITING_FOR_COMPUTER
        return Phase.WAITING_FOR_HUMAN

    def status(self) -> GameStatus:
        return self.rules.status(self._state)

    def legal_moves(self) -> List[Move]:
        return self.rules.generate_moves(self._state)

    def move_for(self, target: int, source: Optional[int] = None) -> Optional[Move]:
        """
        The legal move landing on `target` (from `source`, for games that
        move pieces), with its kind and captures filled in. None if no
        legal move matches. Where several do (chess promotions), the first
        generated one wins.
        """
        for move in self.legal_moves():
            if move.target == target and move.source == source:
                return move
        return None

    def scores(self) -> Dict[Player, int]:
        return self.rules.scores(self._state)

    def outcome(self, player: Player) -> Outcome:
        """WIN / TIE / LOSS for `player`, NEUTRAL while the game runs."""
        return self.rules.get_result(self._state, player)

    def is_computer_seat(self, player: Player) -> bool:
        return self._mode is GameMode.AI and Player(player) in self._computer_players

    def is_computer_turn(self) -> bool:
        return not self.is_game_over and self.is_computer_seat(self._state.current_player)

    # ------------------------------------------------------------------
    # Difficulty / mode
    # ------------------------------------------------------------------

    @property
    def difficulty(self) -> Difficulty:
        """Difficulty of the first computer seat."""
        if not self._computer_players:
            return self._default_difficulty
        return self._difficulties[self._computer_players[0]]

    @difficulty.setter
    def difficulty(self, value: Difficulty) -> None:
        value = Difficulty(value)
        self._default_difficulty = value
        for player in self._computer_players:
            self._difficulties[player] = value

    def difficulty_for(self, player: Player) -> Difficulty:
        return self._difficulties.get(Player(player), self._default_difficulty)

    def set_difficulty(self, player: Player, difficulty: Difficulty) -> None:
        """Difficulty for one computer seat (self-play with uneven opponents)."""
        player = Player(player)
        if player not in self._computer_players:
            raise ValueError(f"{self.rules.player_label(player)} is not a computer seat")
        self._difficulties[player] = Difficulty(difficulty)

    def set_mode(self, mode: GameMode) -> None:
        """Switch between LOCAL and AI play. Changing the mode restarts the game."""
        mode = GameMode(mode)
        if mode is self._mode:
            return
        self._mode = mode
        self.reset()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def reset(self) -> None:
        self._reset_fields()
        logger.debug("%s reset", self.rules.game_id())
        self._notify(None)

    def load_state(self, state: GameState) -> None:
        """Replace the live position, handing the turn over if its player is blocked."""
        self._state, self._pass_message = self.rules.normalize(state)
        self._history = []
        self._selected = None
        self._notify(None)

    def subscribe(self, callback: Listener) -> None:
        if callback not in self._listeners:
            self._listeners.append(callback)

    def unsubscribe(self, callback: Listener) -> None:
        if callback in self._listeners:
            self._listeners.remove(callback)

    def _notify(self, result: Optional[MoveResult]) -> None:
        for callback in list(self._listeners):
            callback(result)

    # ------------------------------------------------------------------
    # Moves
    # ------------------------------------------------------------------

    def attempt_move(self, move: Move) -> MoveResult:
        """
        Apply a human move.

        Returns a rejected MoveResult (state unchanged, nobody notified)
        when the game is over, when the computer is to act, or when the
        move is not legal.
        """
        if self.is_game_over or self.is_computer_turn():
            logger.debug("Rejected %s: not a human turn", move)
            return MoveResult.rejected(self._state, move)
        return self._apply(move)

    def computer_move(self) -> Move:
        """
        Let the strategy pick and play a move for the computer seat.

        Raises:
            InvalidStateError: it is not the computer's turn
        """
        if not self.is_computer_turn():
            raise InvalidStateError(
                f"{self.rules.game_id()}: computer_move() called while {self.phase.name}"
            )

        player = self._state.current_player
        difficulty = self.difficulty_for(player)
        move = self.strategy.choose_move(self._state, self.legal_moves(), difficulty)
        self._apply(move)
        return move

    def _apply(self, move: Move) -> MoveResult:
        result = self.rules.apply_move(self._state, move)
        if not result.applied:
            logger.debug("Rejected illegal move %s for %s", move, self._state.current_player.name)
            return result

        self._state = result.state
        self._history.append(result)
        self._pass_message = result.pass_message
        self._selected = None

        if result.transition is Transition.TERMINAL:
            winner = self.rules.winner(self._state)
            logger.info(
                "%s over after %d moves: %s",
                self.rules.game_id(),
                len(self._history),
                self.rules.player_label(winner) + " wins" if winner is not None else "draw",
            )

        self._notify(result)
        return result

    def select_cell(self, index: int) -> Optional[MoveResult]:
        """
        Tap handling.

        Placement games apply the move for the tapped cell directly. For
        from/to games the first tap selects one of the mover's pieces and
        the second picks a destination; during a forced continuation only
        the forced piece can move. Taps that match nothing, including
        taps outside the grid, are ignored.
        """
        if self.is_game_over or self.is_computer_turn():
            return None
        if not 0 <= index < self.board.size:
            return None

        moves = self.legal_moves()
        if all(m.source is None for m in moves):
            move = self.move_for(self.rules.tap_target(self._state, index))
            return self._apply(move) if move is not None else None

        selected = self.selected
        if selected is not None:
            move = self.move_for(index, source=selected)
            if move is not None:
                return self._apply(move)

        if self._state.forced_from is None and any(m.source == index for m in moves):
            self._selected = index
        return None

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def _label(self, player: Player) -> str:
        label = self.rules.player_label(player)
        return f"{label} (AI)" if self.is_computer_seat(player) else label

    @property
    def status_text(self) -> str:
        status = self.status()
        if status.is_terminal:
            tally = ""
            if self.rules.SHOW_SCORE:
                scores = self.scores()
                tally = f" {scores[Player.ONE]}-{scores[Player.TWO]}"
            if status.winner is None:
                return f"Game over! It's a draw{' at' + tally if tally else ''}."
            return f"Game over! {self.rules.player_label(status.winner)} wins{tally}."

        note = self.rules.status_note(self._state)
        text = self._turn_text(status)
        return f"{text} {note}" if note else text

    def _turn_text(self, status: GameStatus) -> str:
        player = status.current_player
        moves = _plural(len(status.legal_moves), "legal move")
        if self.is_computer_turn():
            return f"{self._label(player)} is thinking ({moves})."
        if status.forced_continuation_from is not None:
            return f"{self._label(player)} must continue capturing with the selected piece."
        if self._pass_message:
            return f"Pass: {self._pass_message} {self._label(player)} to move ({moves})."
        return f"Turn: {self._label(player)} ({moves})."

    def render(self) -> str:
        return self.rules.state_string(self._state)
