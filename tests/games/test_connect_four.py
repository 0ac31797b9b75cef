"""
Tests for board_arcade.games.connect_four
"""

import pytest

from board_arcade.core.types import Move, MoveKind, Player
from board_arcade.games.connect_four import COLUMNS, ROWS, ConnectFour, drop_row
from board_arcade.games.game_state import GameState


@pytest.fixture
def game() -> ConnectFour:
    return ConnectFour()


def drop(game: ConnectFour, state: GameState, column: int) -> GameState:
    move = game.move_for_column(state, column)
    assert move is not None
    result = game.apply_move(state, move)
    assert result.applied
    return result.state


def drops(game: ConnectFour, columns) -> GameState:
    state = game.initial_state()
    for column in columns:
        state = drop(game, state, column)
    return state


class TestGravity:
    """Discs fall to the lowest free row."""

    def test_seven_initial_moves(self, game: ConnectFour):
        moves = game.generate_moves(game.initial_state())
        assert len(moves) == COLUMNS
        assert all(m.kind is MoveKind.DROP for m in moves)
        assert [game.initial_state().board.row_col(m.target)[0] for m in moves] == [ROWS - 1] * COLUMNS

    def test_stacking(self, game: ConnectFour):
        state = drops(game, [3, 3])
        assert state.board.at(ROWS - 1, 3) == 1
        assert state.board.at(ROWS - 2, 3) == 2
        assert drop_row(state.board, 3) == ROWS - 3

    def test_tap_maps_to_drop_cell(self, game: ConnectFour):
        """Tapping the top of a column targets its lowest empty cell."""
        state = game.initial_state()
        assert game.tap_target(state, 2) == state.board.index(ROWS - 1, 2)


class TestFullColumn:
    """A full column is never legal."""

    def test_full_column_rejected(self, game: ConnectFour):
        state = drops(game, [0] * ROWS)
        assert game.move_for_column(state, 0) is None
        assert len(game.generate_moves(state)) == COLUMNS - 1
        result = game.apply_move(state, Move(state.board.index(0, 0), kind=MoveKind.DROP))
        assert result.applied is False
        assert result.state is state

    def test_out_of_range_column(self, game: ConnectFour):
        assert game.move_for_column(game.initial_state(), 7) is None


class TestWins:
    """Four in a row in every direction."""

    def test_horizontal(self, game: ConnectFour):
        state = drops(game, [0, 0, 1, 1, 2, 2, 3])
        assert game.winner(state) is Player.ONE

    def test_vertical(self, game: ConnectFour):
        state = drops(game, [0, 1, 0, 1, 0, 1, 0])
        assert game.winner(state) is Player.ONE

    def test_diagonal(self, game: ConnectFour):
        state = drops(game, [0, 1, 1, 2, 2, 3, 2, 3, 3, 6, 3])
        assert game.winner(state) is Player.ONE

    def test_anti_diagonal(self, game: ConnectFour):
        state = drops(game, [6, 5, 5, 4, 4, 3, 4, 3, 3, 0, 3])
        assert game.winner(state) is Player.ONE

    def test_game_over_blocks_moves(self, game: ConnectFour):
        state = drops(game, [0, 1, 0, 1, 0, 1, 0])
        assert game.generate_moves(state) == []
        assert game.move_for_column(state, 5) is None


class TestDraw:
    """Full board without four in a row."""

    def test_full_board_draw(self, game: ConnectFour):
        # Column pairs filled in an order that never lines up four
        order = []
        for pair in ((0, 1), (2, 3), (4, 5)):
            for _ in range(3):
                order += [pair[0], pair[1]]
            for _ in range(3):
                order += [pair[1], pair[0]]
        order += [6] * ROWS
        state = drops(game, order)
        assert state.board.is_full()
        assert game.is_terminal(state)
        assert game.winner(state) is None
