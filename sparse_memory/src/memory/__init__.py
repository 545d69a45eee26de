"""Sparse grid store and its sweep transforms."""

from .memory_store import MemoryStore
from .transforms import CellTransform, constant, identity, placeholder_update

__all__ = [
    "MemoryStore",
    "CellTransform",
    "constant",
    "identity",
    "placeholder_update",
]
