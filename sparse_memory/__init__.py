"""Sparse memory: 3D-addressed nodes holding auto-expanding 2D grids.

Quick start::

    from sparse_memory import MemoryStore

    memory = MemoryStore()
    memory.set_matrix((0, 0, 0), [[1, 2, 3], [4, 5, 6]])
    memory.set((0, 1, 2), 5, 3, 42)
    memory.get_dimensions((0, 1, 2))  # (6, 4)
"""

from sparse_memory.src.core import (
    Address,
    Grid,
    IndexOutOfBoundsError,
    InvalidArgumentError,
    Node,
    NodeSummary,
    NotFoundError,
    StoreError,
)
from sparse_memory.src.memory import MemoryStore, constant, identity, placeholder_update

__version__ = "0.1.0"

__all__ = [
    "MemoryStore",
    "Address",
    "Grid",
    "Node",
    "NodeSummary",
    "StoreError",
    "NotFoundError",
    "IndexOutOfBoundsError",
    "InvalidArgumentError",
    "constant",
    "identity",
    "placeholder_update",
]
