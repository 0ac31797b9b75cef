"""
Tests for board_arcade.games.checkers
"""

import pytest

from board_arcade.core.types import Move, MoveKind, Player, Transition
from board_arcade.games.checkers import (
    KING,
    MAN,
    STARTING_PIECES,
    Checkers,
    count_kings,
    count_pieces,
    encode,
)
from board_arcade.games.game_state import GameState

PIECES = {"b": encode(Player.ONE, MAN), "B": encode(Player.ONE, KING),
          "r": encode(Player.TWO, MAN), "R": encode(Player.TWO, KING)}

EMPTY_ROW = "........"

# Black man on (2,1) can jump (3,2) then (5,4); a second Black man on
# (2,5) can jump (3,6).
DOUBLE_JUMP = [
    EMPTY_ROW,
    EMPTY_ROW,
    ".b...b..",
    "..r...r.",
    EMPTY_ROW,
    "....r...",
    EMPTY_ROW,
    EMPTY_ROW,
]


@pytest.fixture
def game() -> Checkers:
    return Checkers()


@pytest.fixture
def position(make_board):
    def build(rows, player=Player.ONE, **kwargs):
        return GameState(make_board(rows, PIECES), player, **kwargs)
    return build


class TestSetup:
    """Starting position."""

    def test_twelve_pieces_each(self, game: Checkers):
        state = game.initial_state()
        assert count_pieces(state.board, Player.ONE) == STARTING_PIECES
        assert count_pieces(state.board, Player.TWO) == STARTING_PIECES
        assert game.scores(state) == {Player.ONE: 12, Player.TWO: 12}

    def test_pieces_on_dark_squares(self, game: Checkers):
        board = game.initial_state().board
        for idx, piece in enumerate(board):
            if piece:
                row, col = board.row_col(idx)
                assert (row + col) % 2 == 1

    def test_opening_moves(self, game: Checkers):
        """Black has 7 opening steps, all from row 2."""
        state = game.initial_state()
        moves = game.generate_moves(state)
        assert len(moves) == 7
        assert all(m.kind is MoveKind.STEP for m in moves)
        assert all(state.board.row_col(m.source)[0] == 2 for m in moves)


class TestCaptures:
    """Mandatory capture and multi-jump chains."""

    def test_capture_is_mandatory(self, game: Checkers, position):
        state = position(DOUBLE_JUMP)
        moves = game.generate_moves(state)
        assert moves
        assert all(m.is_capture for m in moves)
        assert sorted(m.source for m in moves) == [17, 21]
        assert game.capture_required(state)

    def test_multi_jump_keeps_turn(self, game: Checkers, position):
        """After a jump with a follow-up, the same player continues from the landing cell."""
        state = position(DOUBLE_JUMP)
        first = Move(35, 17, MoveKind.CAPTURE, (26,))
        result = game.apply_move(state, first)

        assert result.applied
        assert result.transition is Transition.FORCED_CONTINUATION
        assert result.next_player is Player.ONE
        assert result.state.forced_from == 35
        assert result.board[26] == 0
        assert result.side_effects.captured == (26,)

        follow_ups = game.generate_moves(result.state)
        assert follow_ups == [Move(53, 35, MoveKind.CAPTURE, (44,))]
        assert game.status(result.state).forced_continuation_from == 35

    def test_other_piece_locked_during_chain(self, game: Checkers, position):
        state = game.apply_move(position(DOUBLE_JUMP), Move(35, 17, MoveKind.CAPTURE, (26,))).state
        other = Move(39, 21, MoveKind.CAPTURE, (30,))
        result = game.apply_move(state, other)
        assert result.applied is False
        assert result.state is state

    def test_chain_ends_and_turn_passes(self, game: Checkers, position):
        state = game.apply_move(position(DOUBLE_JUMP), Move(35, 17, MoveKind.CAPTURE, (26,))).state
        result = game.apply_move(state, Move(53, 35, MoveKind.CAPTURE, (44,)))
        assert result.transition is Transition.TURN_ADVANCED
        assert result.next_player is Player.TWO
        assert result.state.forced_from is None
        assert count_pieces(result.board, Player.TWO) == 1


class TestPromotion:
    """Men crown on the far row."""

    def test_black_promotes(self, game: Checkers, position):
        rows = [".R......"] + [EMPTY_ROW] * 5 + [".b......", EMPTY_ROW]
        state = position(rows)
        result = game.apply_move(state, Move(56, 49, MoveKind.STEP))
        assert result.applied
        assert result.side_effects.promoted is True
        assert result.board[56] == PIECES["B"]
        assert count_kings(result.board, Player.ONE) == 1

    def test_king_moves_backwards(self, game: Checkers, position):
        rows = [EMPTY_ROW] * 8
        rows[4] = "...B...."
        rows[0] = ".r......"
        state = position(rows)
        targets = sorted(m.target for m in game.generate_moves(state))
        assert targets == [26, 28, 42, 44]


class TestTerminal:
    """Win by elimination or blockade, draw by inactivity."""

    def test_no_pieces_loses(self, game: Checkers, position):
        rows = [EMPTY_ROW] * 8
        rows[3] = "..b....."
        state = position(rows, Player.TWO)
        assert game.is_terminal(state)
        assert game.winner(state) is Player.ONE

    def test_blocked_loses(self, game: Checkers, position):
        """Red man on (1,0) with a Black man in front and no landing square."""
        rows = [".b......", "r......."] + [EMPTY_ROW] * 6
        state = position(rows, Player.TWO)
        assert game.generate_moves(state) == []
        assert game.winner(state) is Player.ONE

    def test_idle_limit_draw(self, game: Checkers, position):
        rows = [EMPTY_ROW] * 8
        rows[0] = ".R......"
        rows[7] = "B......."
        state = position(rows, idle_plies=Checkers.IDLE_LIMIT)
        assert game.is_terminal(state)
        assert game.winner(state) is None

    def test_king_step_counts_towards_idle(self, game: Checkers, position):
        rows = [EMPTY_ROW] * 8
        rows[0] = ".R......"
        rows[7] = "B......."
        state = position(rows, idle_plies=3)
        result = game.apply_move(state, Move(49, 56, MoveKind.STEP))
        assert result.state.idle_plies == 4

    def test_man_step_resets_idle(self, game: Checkers):
        state = game.initial_state().replace(idle_plies=10)
        result = game.apply_move(state, game.generate_moves(state)[0])
        assert result.state.idle_plies == 0
