"""Matrix shape and validation helpers."""

from __future__ import annotations

from numbers import Number
from typing import Any, Sequence, Tuple

from sparse_memory.src.core.errors import InvalidArgumentError


def is_numeric(value: Any) -> bool:
    """Return ``True`` if ``value`` can be stored in a grid cell."""
    return isinstance(value, Number)


def is_rectangular(rows: Sequence[Sequence[Any]]) -> bool:
    """Return ``True`` if every row of ``rows`` has the same length."""
    if len(rows) == 0:
        return True
    width = len(rows[0])
    return all(len(r) == width for r in rows)


def matrix_shape(matrix: Sequence[Sequence[Any]]) -> Tuple[int, int]:
    """Return ``(rows, cols)`` where ``cols`` is the first row's length."""
    rows = len(matrix)
    return rows, (len(matrix[0]) if rows else 0)


def validate_matrix(matrix: Any) -> Tuple[int, int]:
    """Check ``matrix`` is a rectangular sequence of numeric rows.

    Returns the ``(rows, cols)`` shape. Raises :class:`InvalidArgumentError`
    for strings, non-sequences, ragged rows or non-numeric cells.
    """

    if isinstance(matrix, (str, bytes)) or not hasattr(matrix, "__len__"):
        raise InvalidArgumentError("matrix must be a sequence of rows")
    for r, row in enumerate(matrix):
        if isinstance(row, (str, bytes)) or not hasattr(row, "__len__"):
            raise InvalidArgumentError(f"matrix row {r} is not a sequence")
    if not is_rectangular(matrix):
        lengths = sorted({len(row) for row in matrix})
        raise InvalidArgumentError(f"matrix rows must share one length, got {lengths}")
    for r, row in enumerate(matrix):
        for c, value in enumerate(row):
            if not is_numeric(value):
                raise InvalidArgumentError(f"non-numeric cell at ({r}, {c}): {value!r}")
    return matrix_shape(matrix)


__all__ = ["is_numeric", "is_rectangular", "matrix_shape", "validate_matrix"]
