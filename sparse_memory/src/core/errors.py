from __future__ import annotations

"""Exception types raised by the sparse grid store."""


class StoreError(Exception):
    """Base class for all store failures."""


class NotFoundError(StoreError, KeyError):
    """No node has been created at the requested address."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message.
        return Exception.__str__(self)


class IndexOutOfBoundsError(StoreError, IndexError):
    """Cell coordinates fall outside the node's current grid."""


class InvalidArgumentError(StoreError, ValueError):
    """Caller passed a malformed address, index, matrix or value."""


__all__ = [
    "StoreError",
    "NotFoundError",
    "IndexOutOfBoundsError",
    "InvalidArgumentError",
]
