from __future__ import annotations

"""Three dimensional node addresses."""

from numbers import Integral
from typing import Any, NamedTuple

from .errors import InvalidArgumentError


class Address(NamedTuple):
    """Integer ``(x, y, z)`` key of a node. Coordinates may be negative."""

    x: int
    y: int
    z: int

    def label(self) -> str:
        """Return the ``"x,y,z"`` display form of the address."""
        return f"{self.x},{self.y},{self.z}"

    def __str__(self) -> str:
        return self.label()


def is_index(value: Any) -> bool:
    """Return ``True`` if ``value`` is an integer and not a bool."""
    return isinstance(value, Integral) and not isinstance(value, bool)


def to_address(value: Any) -> Address:
    """Coerce ``value`` (an :class:`Address` or any 3-sequence of ints)."""
    if isinstance(value, Address):
        return value
    if isinstance(value, (str, bytes)):
        raise InvalidArgumentError(f"address must be a coordinate triple, got {value!r}")
    try:
        coords = tuple(value)
    except TypeError:
        raise InvalidArgumentError(f"address must be a coordinate triple, got {value!r}") from None
    if len(coords) != 3 or not all(is_index(c) for c in coords):
        raise InvalidArgumentError(f"address must be three integers, got {value!r}")
    return Address(*(int(c) for c in coords))


__all__ = ["Address", "to_address", "is_index"]
