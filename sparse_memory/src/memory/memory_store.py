from __future__ import annotations

"""In-memory store of 3D-addressed nodes holding growable 2D grids.

Nodes are created lazily by the first write to their address and are never
deleted. Single-cell writes outside a node's grid grow it (rows first, then
columns across every row) without moving or losing existing values. Grids
are not capped: writing to far-out indices allocates the full rectangle, and
a warning is logged once a grid passes ``growth_warning_cells``.
"""

import threading
from contextlib import nullcontext
from typing import Any, Dict, FrozenSet, List, Optional, Set, Tuple

import numpy as np

from sparse_memory.src.core.address import Address, is_index, to_address
from sparse_memory.src.core.errors import (
    IndexOutOfBoundsError,
    InvalidArgumentError,
    NotFoundError,
)
from sparse_memory.src.core.grid import Grid
from sparse_memory.src.core.node import Node, NodeSummary
from sparse_memory.src.memory.transforms import CellTransform, placeholder_update
from sparse_memory.src.utils import config_loader
from sparse_memory.src.utils.grid_utils import is_numeric, validate_matrix
from sparse_memory.src.utils.logger import get_logger

logger = get_logger(__name__)

AddressLike = Any


def _check_index(name: str, value: Any) -> int:
    if not is_index(value):
        raise InvalidArgumentError(f"{name} must be an integer, got {value!r}")
    if value < 0:
        raise InvalidArgumentError(f"{name} must be non-negative, got {value}")
    return int(value)


class MemoryStore:
    """Sparse collection of nodes keyed by :class:`Address`.

    Enumeration order is node creation order. When ``thread_safe`` is on
    every operation runs under one re-entrant lock owned by the store.
    """

    def __init__(self, *, thread_safe: Optional[bool] = None) -> None:
        if thread_safe is None:
            thread_safe = config_loader.THREAD_SAFE
        self._nodes: Dict[Address, Node] = {}
        self._used_addresses: Set[Address] = set()
        self._lock = threading.RLock() if thread_safe else nullcontext()

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------
    def create_or_get(
        self, address: AddressLike, initial_rows: int = 0, initial_cols: int = 0
    ) -> Node:
        """Return the node at ``address``, creating a zero grid if absent."""
        addr = to_address(address)
        rows = _check_index("initial_rows", initial_rows)
        cols = _check_index("initial_cols", initial_cols)
        with self._lock:
            return self._create_or_get(addr, rows, cols)

    def set_matrix(self, address: AddressLike, matrix: Any) -> None:
        """Replace the whole grid at ``address`` with a copy of ``matrix``.

        Ragged or non-numeric matrices raise :class:`InvalidArgumentError`
        and leave the store unchanged.
        """
        addr = to_address(address)
        rows, cols = validate_matrix(matrix)
        grid = Grid.from_rows(matrix)
        with self._lock:
            node = self._create_or_get(addr, rows, cols)
            node.grid = grid
            self._warn_if_large(node)

    def set(self, address: AddressLike, row: int, col: int, value: Any) -> None:
        """Write ``value`` at ``(row, col)``, creating or growing the node."""
        addr = to_address(address)
        row = _check_index("row", row)
        col = _check_index("col", col)
        if not is_numeric(value):
            raise InvalidArgumentError(f"cell value must be numeric, got {value!r}")
        with self._lock:
            node = self._create_or_get(addr, row + 1, col + 1)
            before = node.grid.shape()
            if node.grid.set(row, col, value):
                self._log_growth(node, before)

    def sweep(self, transform: CellTransform) -> None:
        """Apply ``transform(address, row, col, value)`` to every cell.

        Nodes are visited in creation order, cells row-major. New grids are
        committed only after every cell has been transformed, so a failing
        transform leaves all nodes untouched.
        """
        if not callable(transform):
            raise InvalidArgumentError("transform must be callable")
        with self._lock:
            pending: List[Tuple[Node, Grid]] = []
            for node in self._nodes.values():
                pending.append((node, self._transform_grid(node, transform)))
            for node, grid in pending:
                node.grid = grid
        logger.debug(f"STORE sweep applied {getattr(transform, '__name__', transform)}")

    def update(self) -> None:
        """Placeholder update: set every cell of every node to a constant."""
        self.sweep(placeholder_update())

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------
    def get_all_data(self, address: AddressLike) -> List[List[Any]]:
        """Return a deep copy of the grid at ``address``."""
        addr = to_address(address)
        with self._lock:
            return self._require(addr).grid.to_list()

    def get(self, address: AddressLike, row: int, col: int) -> Any:
        """Return one cell. Never grows the grid."""
        addr = to_address(address)
        if not (is_index(row) and is_index(col)):
            raise InvalidArgumentError(f"cell indices must be integers, got ({row!r}, {col!r})")
        with self._lock:
            node = self._require(addr)
            try:
                return node.grid.get(row, col)
            except IndexOutOfBoundsError as exc:
                raise IndexOutOfBoundsError(f"{exc} at address {addr}") from None

    def get_dimensions(self, address: AddressLike) -> Tuple[int, int]:
        """Return ``(rows, cols)``, or ``(0, 0)`` for an unknown address."""
        addr = to_address(address)
        with self._lock:
            node = self._nodes.get(addr)
            return node.dimensions() if node is not None else (0, 0)

    def as_array(self, address: AddressLike) -> np.ndarray:
        """Return a read-only ``numpy`` snapshot of the grid at ``address``."""
        addr = to_address(address)
        with self._lock:
            return self._require(addr).grid.to_array()

    def has_node(self, address: AddressLike) -> bool:
        addr = to_address(address)
        with self._lock:
            return addr in self._used_addresses

    def addresses(self) -> List[Address]:
        """Return node addresses in creation order."""
        with self._lock:
            return list(self._nodes)

    @property
    def used_addresses(self) -> FrozenSet[Address]:
        with self._lock:
            return frozenset(self._used_addresses)

    def node_summaries(self) -> List[NodeSummary]:
        """Return address, shape and occupancy of each node in creation order."""
        with self._lock:
            return [node.summary() for node in self._nodes.values()]

    def __contains__(self, address: object) -> bool:
        try:
            return self.has_node(address)
        except InvalidArgumentError:
            return False

    def __len__(self) -> int:
        with self._lock:
            return len(self._nodes)

    def __repr__(self) -> str:
        return f"MemoryStore(nodes={len(self)})"

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _create_or_get(self, addr: Address, rows: int, cols: int) -> Node:
        node = self._nodes.get(addr)
        if node is None:
            node = Node(addr, Grid.zeros(rows, cols))
            self._nodes[addr] = node
            self._used_addresses.add(addr)
            logger.debug(f"STORE created node {addr} with shape ({rows}, {cols})")
            self._warn_if_large(node)
        return node

    def _require(self, addr: Address) -> Node:
        node = self._nodes.get(addr)
        if node is None:
            raise NotFoundError(f"no node at address {addr}")
        return node

    def _transform_grid(self, node: Node, transform: CellTransform) -> Grid:
        addr = node.address

        def _apply(row: int, col: int, value: Any) -> Any:
            result = transform(addr, row, col, value)
            if not is_numeric(result):
                raise InvalidArgumentError(
                    f"transform returned non-numeric {result!r} for {addr} ({row}, {col})"
                )
            return result

        return node.grid.map_cells(_apply)

    def _log_growth(self, node: Node, before: Tuple[int, int]) -> None:
        msg = f"STORE grew node {node.address} from {before} to {node.grid.shape()}"
        if config_loader.LOG_GROWTH:
            logger.info(msg)
        else:
            logger.debug(msg)
        self._warn_if_large(node)

    def _warn_if_large(self, node: Node) -> None:
        cells = node.grid.cell_count()
        if cells > config_loader.GROWTH_WARNING_CELLS:
            logger.warning(
                f"STORE node {node.address} holds {cells} cells "
                f"(above {config_loader.GROWTH_WARNING_CELLS})"
            )


__all__ = ["MemoryStore"]
