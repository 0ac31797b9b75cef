"""
Board - immutable grid snapshot.

Optimized for fast copying and hashing. Uses an int8 numpy array:
    0 = empty
    non-zero = game-specific cell encoding (usually the owning Player)

Cells are addressed by flat index (row * width + col). Every change
produces a new Board, so AI lookahead can simulate without side effects.
"""

from __future__ import annotations

import hashlib
from typing import Dict, Iterable, Iterator, List, Tuple

import numpy as np

Direction = Tuple[int, int]

# Direction vectors (dr, dc)
ORTHOGONAL: Tuple[Direction, ...] = ((0, 1), (0, -1), (1, 0), (-1, 0))
DIAGONAL: Tuple[Direction, ...] = ((1, 1), (1, -1), (-1, 1), (-1, -1))
ALL_DIRS: Tuple[Direction, ...] = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1), (0, 1),
    (1, -1), (1, 0), (1, 1),
)


def hash_board(cells: np.ndarray) -> str:
    """Fast content hash for an int8 array (direct tobytes)."""
    return hashlib.sha256(cells.tobytes()).hexdigest()[:16]


class Board:
    """Read-only grid of cells."""

    __slots__ = ("_cells", "_key")

    def __init__(self, cells: np.ndarray):
        arr = np.array(cells, dtype=np.int8, copy=True)
        if arr.ndim != 2:
            raise ValueError(f"Board needs a 2D array, got shape {arr.shape}")
        arr.flags.writeable = False
        self._cells = arr
        self._key = None

    @classmethod
    def empty(cls, rows: int, cols: int) -> "Board":
        return cls(np.zeros((rows, cols), dtype=np.int8))

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------

    @property
    def rows(self) -> int:
        return self._cells.shape[0]

    @property
    def cols(self) -> int:
        return self._cells.shape[1]

    @property
    def size(self) -> int:
        return self._cells.size

    @property
    def cells(self) -> np.ndarray:
        """Read-only view of the underlying array."""
        return self._cells

    def index(self, row: int, col: int) -> int:
        return row * self.cols + col

    def row_col(self, index: int) -> Tuple[int, int]:
        return divmod(index, self.cols)

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def neighbor(self, index: int, direction: Direction, distance: int = 1) -> int | None:
        """Index reached by walking `distance` steps, or None off the grid."""
        r, c = self.row_col(index)
        nr, nc = r + direction[0] * distance, c + direction[1] * distance
        if not self.in_bounds(nr, nc):
            return None
        return nr * self.cols + nc

    def ray(self, index: int, direction: Direction) -> Iterator[int]:
        """Yield successive indices from `index` (exclusive) to the edge."""
        r, c = self.row_col(index)
        dr, dc = direction
        r, c = r + dr, c + dc
        while self.in_bounds(r, c):
            yield r * self.cols + c
            r, c = r + dr, c + dc

    # ------------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------------

    def __getitem__(self, index: int) -> int:
        r, c = divmod(index, self.cols)
        return int(self._cells[r, c])

    def at(self, row: int, col: int) -> int:
        return int(self._cells[row, col])

    def __len__(self) -> int:
        return self._cells.size

    def __iter__(self) -> Iterator[int]:
        return (int(v) for v in self._cells.flat)

    def count(self, value: int) -> int:
        return int(np.count_nonzero(self._cells == value))

    def indices_of(self, value: int) -> List[int]:
        return [int(i) for i in np.flatnonzero(self._cells == value)]

    def empty_cells(self) -> List[int]:
        return self.indices_of(0)

    def is_full(self) -> bool:
        return not np.any(self._cells == 0)

    # ------------------------------------------------------------------
    # Derivation
    # ------------------------------------------------------------------

    def with_cells(self, changes: Dict[int, int] | Iterable[Tuple[int, int]]) -> "Board":
        """Return a new Board with the given {index: value} changes applied."""
        items = changes.items() if isinstance(changes, dict) else changes
        arr = self._cells.copy()
        flat = arr.reshape(-1)
        for idx, value in items:
            flat[idx] = value
        return Board(arr)

    def to_list(self) -> List[int]:
        """Flat Python list of cell values, for tight search loops."""
        return self._cells.ravel().tolist()

    @classmethod
    def from_list(cls, values: Iterable[int], rows: int, cols: int) -> "Board":
        return cls(np.array(list(values), dtype=np.int8).reshape(rows, cols))

    def to_array(self) -> np.ndarray:
        """Writable copy of the cells."""
        return self._cells.copy()

    # ------------------------------------------------------------------
    # Value semantics
    # ------------------------------------------------------------------

    def key(self) -> str:
        if self._key is None:
            self._key = hash_board(self._cells)
        return self._key

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells.shape == other._cells.shape and bool(
            np.array_equal(self._cells, other._cells)
        )

    def __hash__(self) -> int:
        return hash((self._cells.shape, self.key()))

    def __reduce__(self):
        return (Board, (self._cells,))

    def __repr__(self) -> str:
        return f"Board({self.rows}x{self.cols}, {self.key()})"
