from __future__ import annotations

"""Per-cell transforms accepted by :meth:`MemoryStore.sweep`.

A transform is called as ``transform(address, row, col, value)`` and returns
the new cell value. Real gating policies can be plugged in with the same
signature.
"""

from typing import Any, Callable

from sparse_memory.src.core.address import Address
from sparse_memory.src.utils import config_loader

CellTransform = Callable[[Address, int, int, Any], Any]


def constant(value: Any) -> CellTransform:
    """Return a transform that writes ``value`` to every cell."""

    def _constant(address: Address, row: int, col: int, current: Any) -> Any:
        return value

    _constant.__name__ = f"constant({value!r})"
    return _constant


def identity(address: Address, row: int, col: int, value: Any) -> Any:
    return value


def placeholder_update() -> CellTransform:
    """Return the placeholder update: every cell set to the configured constant."""
    return constant(config_loader.PLACEHOLDER_UPDATE_VALUE)


__all__ = ["CellTransform", "constant", "identity", "placeholder_update"]
