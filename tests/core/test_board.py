"""
Tests for board_arcade.core.board

Tests the immutable Board snapshot.
"""

import pickle

import numpy as np
import pytest

from board_arcade.core.board import ALL_DIRS, DIAGONAL, ORTHOGONAL, Board, hash_board


@pytest.fixture
def board() -> Board:
    return Board(np.arange(12, dtype=np.int8).reshape(3, 4))


class TestConstruction:
    """Board construction tests."""

    def test_copies_input(self):
        """Mutating the source array does not change the board."""
        arr = np.zeros((2, 2), dtype=np.int8)
        board = Board(arr)
        arr[0, 0] = 5
        assert board[0] == 0

    def test_read_only(self, board: Board):
        """Underlying cells cannot be written."""
        with pytest.raises(ValueError):
            board.cells[0, 0] = 1

    def test_rejects_1d(self):
        """Only 2D arrays are accepted."""
        with pytest.raises(ValueError):
            Board(np.zeros(9, dtype=np.int8))

    def test_empty(self):
        """Board.empty gives an all-zero grid."""
        board = Board.empty(6, 7)
        assert (board.rows, board.cols, board.size) == (6, 7, 42)
        assert board.is_full() is False
        assert len(board.empty_cells()) == 42

    def test_from_list(self):
        """from_list reshapes a flat list."""
        board = Board.from_list([1, 0, 2, 0], 2, 2)
        assert board.at(1, 0) == 2
        assert board.to_list() == [1, 0, 2, 0]


class TestGeometry:
    """Index and neighbour arithmetic."""

    def test_index_round_trip(self, board: Board):
        """index and row_col are inverse."""
        assert board.index(2, 1) == 9
        assert board.row_col(9) == (2, 1)

    def test_neighbor_in_bounds(self, board: Board):
        """Neighbour one step down-right."""
        assert board.neighbor(0, (1, 1)) == 5

    def test_neighbor_off_grid(self, board: Board):
        """Walking off the edge gives None."""
        assert board.neighbor(0, (-1, 0)) is None
        assert board.neighbor(3, (0, 1)) is None

    def test_neighbor_distance(self, board: Board):
        """distance scales the step."""
        assert board.neighbor(0, (1, 1), 2) == 10

    def test_ray(self, board: Board):
        """ray walks to the edge, excluding the start."""
        assert list(board.ray(0, (0, 1))) == [1, 2, 3]
        assert list(board.ray(11, (0, 1))) == []

    def test_direction_sets(self):
        """Direction constants have the expected sizes."""
        assert len(ORTHOGONAL) == 4
        assert len(DIAGONAL) == 4
        assert len(ALL_DIRS) == 8
        assert set(ALL_DIRS) == set(ORTHOGONAL) | set(DIAGONAL)


class TestCellAccess:
    """Reading cells."""

    def test_getitem_flat(self, board: Board):
        """Flat index reads row-major."""
        assert board[5] == 5
        assert isinstance(board[5], int)

    def test_iteration(self, board: Board):
        """Iteration yields all cells in order."""
        assert list(board) == list(range(12))
        assert len(board) == 12

    def test_count_and_indices(self):
        """count and indices_of agree."""
        board = Board.from_list([1, 2, 1, 0], 2, 2)
        assert board.count(1) == 2
        assert board.indices_of(1) == [0, 2]
        assert board.empty_cells() == [3]


class TestDerivation:
    """with_cells produces new boards."""

    def test_with_cells_dict(self):
        """Dict changes are applied to a copy."""
        original = Board.empty(2, 2)
        changed = original.with_cells({3: 2})
        assert changed[3] == 2
        assert original[3] == 0

    def test_with_cells_pairs(self):
        """Iterable of pairs also works."""
        changed = Board.empty(2, 2).with_cells([(0, 1), (1, 2)])
        assert changed.to_list() == [1, 2, 0, 0]

    def test_to_array_writable(self, board: Board):
        """to_array returns a writable copy."""
        arr = board.to_array()
        arr[0, 0] = 9
        assert board[0] == 0


class TestValueSemantics:
    """Equality, hashing and pickling."""

    def test_equal_boards(self):
        """Same contents compare and hash equal."""
        a = Board.from_list([1, 0, 0, 2], 2, 2)
        b = Board.empty(2, 2).with_cells({0: 1, 3: 2})
        assert a == b
        assert hash(a) == hash(b)
        assert a.key() == b.key()

    def test_shape_matters(self):
        """Same flat contents but different shape are different boards."""
        assert Board.empty(2, 3) != Board.empty(3, 2)

    def test_hash_board_deterministic(self):
        """hash_board depends only on the bytes."""
        arr = np.ones((3, 3), dtype=np.int8)
        assert hash_board(arr) == hash_board(arr.copy())
        assert len(hash_board(arr)) == 16

    def test_pickle(self, board: Board):
        """Boards survive pickling and stay read-only."""
        clone = pickle.loads(pickle.dumps(board))
        assert clone == board
        assert clone.cells.flags.writeable is False
