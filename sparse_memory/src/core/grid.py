"""Growable rectangular grid stored inside each memory node."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, List, Sequence, Tuple

import numpy as np

from .errors import IndexOutOfBoundsError, InvalidArgumentError

FILL_VALUE = 0


@dataclass
class Grid:
    """2D grid of numeric cells that only grows through :meth:`expand_to`.

    Rows always share one width. A grid with no rows reports zero columns.
    """

    data: List[List[Any]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.data:
            row_len = len(self.data[0])
            for row in self.data:
                if len(row) != row_len:
                    raise InvalidArgumentError("All rows must have the same length")

    @classmethod
    def zeros(cls, rows: int, cols: int) -> "Grid":
        """Return a ``rows`` x ``cols`` grid filled with zeros."""
        if rows < 0 or cols < 0:
            raise InvalidArgumentError(f"grid size must be non-negative, got ({rows}, {cols})")
        return cls([[FILL_VALUE] * cols for _ in range(rows)])

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Any]]) -> "Grid":
        """Return a grid holding a copy of ``rows``."""
        return cls([list(r) for r in rows])

    def shape(self) -> Tuple[int, int]:
        """Return the grid shape as (height, width)."""
        if not self.data:
            return 0, 0
        return len(self.data), len(self.data[0])

    def contains(self, row: int, col: int) -> bool:
        h, w = self.shape()
        return 0 <= row < h and 0 <= col < w

    def get(self, row: int, col: int) -> Any:
        """Return the value at ``row``, ``col`` without growing the grid."""
        if not self.contains(row, col):
            raise IndexOutOfBoundsError(
                f"cell ({row}, {col}) outside grid of shape {self.shape()}"
            )
        return self.data[row][col]

    def set(self, row: int, col: int, value: Any) -> bool:
        """Write ``value``, growing the grid first. Return ``True`` if it grew."""
        grew = self.expand_to(row, col)
        self.data[row][col] = value
        return grew

    def expand_to(self, row: int, col: int) -> bool:
        """Grow so that ``(row, col)`` is addressable; return ``True`` if it grew.

        Rows are appended first at the current width, then every row is
        padded at the end to ``col + 1`` cells. Existing cells keep their
        position and value; an in-bounds target is a no-op.
        """

        if row < 0 or col < 0:
            raise InvalidArgumentError(f"cell indices must be non-negative, got ({row}, {col})")
        grew = False
        width = len(self.data[0]) if self.data else 0
        while len(self.data) <= row:
            self.data.append([FILL_VALUE] * width)
            grew = True

        width = len(self.data[0])
        if col >= width:
            for r in self.data:
                r.extend([FILL_VALUE] * (col + 1 - len(r)))
            grew = True
        return grew

    def cell_count(self) -> int:
        h, w = self.shape()
        return h * w

    def occupancy(self) -> int:
        """Return the number of non-zero cells."""
        return sum(1 for row in self.data for value in row if value != FILL_VALUE)

    def map_cells(self, fn: Callable[[int, int, Any], Any]) -> "Grid":
        """Return a new grid with ``fn(row, col, value)`` applied row-major."""
        return Grid(
            [[fn(r, c, value) for c, value in enumerate(row)] for r, row in enumerate(self.data)]
        )

    def to_list(self) -> List[List[Any]]:
        """Return a deep list copy of the grid data."""
        return [row[:] for row in self.data]

    def to_array(self) -> np.ndarray:
        """Return a read-only ``numpy`` copy shaped ``(rows, cols)``."""
        arr = np.array(self.data).reshape(self.shape())
        arr.flags.writeable = False
        return arr

    def visualize(self) -> None:
        """Pretty-print the grid values."""
        for row in self.data:
            print(" ".join(str(v) for v in row))

    def __repr__(self) -> str:
        return f"Grid(shape={self.shape()})"


__all__ = ["Grid", "FILL_VALUE"]
