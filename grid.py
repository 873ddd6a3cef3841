"""
Square walkability grid for maze search.

Cells are (row, col) pairs; each maps to the linear id row * n + col.
"""

from typing import Iterator, Sequence, Tuple

import numpy as np

Cell = Tuple[int, int]

# Up, left, down, right.
DIRECTIONS: Tuple[Cell, ...] = ((-1, 0), (0, -1), (1, 0), (0, 1))


class Grid:
    """
    n x n grid backed by a boolean numpy array; True means walkable.
    """

    def __init__(self, cells) -> None:
        arr = np.asarray(cells, dtype=bool)
        if arr.ndim != 2 or arr.shape[0] != arr.shape[1]:
            raise ValueError(f"Grid must be square, got shape {arr.shape}")
        self._cells = arr.copy()
        self._cells.setflags(write=False)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "Grid":
        """Build from nested 0/1 rows (1 = walkable)."""
        if any(len(row) != len(rows) for row in rows):
            raise ValueError(f"Grid must be square, got row lengths {[len(row) for row in rows]} for {len(rows)} rows")
        return cls(np.array(rows, dtype=np.int64) != 0)

    @classmethod
    def parse(cls, text: str) -> "Grid":
        """
        Build from text with one row per line of 0/1 characters.

        Whitespace inside a row is ignored, so "1 0 1" and "101" are equal.
        """
        rows = []
        for line in text.splitlines():
            line = "".join(line.split())
            if not line:
                continue
            if set(line) - {"0", "1"}:
                raise ValueError(f"Grid rows may only contain 0 and 1, got {line!r}")
            rows.append([int(ch) for ch in line])
        return cls.from_rows(rows)

    @property
    def size(self) -> int:
        return int(self._cells.shape[0])

    @property
    def cells(self) -> np.ndarray:
        """Read-only view of the walkability matrix."""
        return self._cells

    def to_id(self, cell: Cell) -> int:
        row, col = cell
        return row * self.size + col

    def from_id(self, node_id: int) -> Cell:
        row, col = divmod(node_id, self.size)
        return row, col

    def in_bounds(self, cell: Cell) -> bool:
        row, col = cell
        return 0 <= row < self.size and 0 <= col < self.size

    def is_walkable(self, cell: Cell) -> bool:
        return self.in_bounds(cell) and bool(self._cells[cell[0], cell[1]])

    def neighbors(self, cell: Cell) -> Iterator[Cell]:
        """Walkable 4-connected neighbours in up, left, down, right order."""
        row, col = cell
        for dr, dc in DIRECTIONS:
            nxt = (row + dr, col + dc)
            if self.is_walkable(nxt):
                yield nxt

    def __repr__(self) -> str:
        return f"Grid(size={self.size}, walkable={int(self._cells.sum())})"
