"""Core address, grid and node data structures."""

from .address import Address, to_address
from .errors import (
    IndexOutOfBoundsError,
    InvalidArgumentError,
    NotFoundError,
    StoreError,
)
from .grid import Grid
from .node import Node, NodeSummary

__all__ = [
    "Address",
    "to_address",
    "Grid",
    "Node",
    "NodeSummary",
    "StoreError",
    "NotFoundError",
    "IndexOutOfBoundsError",
    "InvalidArgumentError",
]
