from __future__ import annotations

"""Node record pairing an address with its grid."""

from dataclasses import dataclass, field
from typing import NamedTuple

from .address import Address
from .grid import Grid


@dataclass
class Node:
    """Single addressable unit of storage."""

    address: Address
    grid: Grid = field(default_factory=Grid)

    def dimensions(self) -> tuple[int, int]:
        return self.grid.shape()

    def summary(self) -> "NodeSummary":
        rows, cols = self.grid.shape()
        return NodeSummary(self.address, rows, cols, self.grid.occupancy())


class NodeSummary(NamedTuple):
    """Read-only description of a node for renderers."""

    address: Address
    rows: int
    cols: int
    occupancy: int


__all__ = ["Node", "NodeSummary"]
