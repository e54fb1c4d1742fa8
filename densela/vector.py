"""Dense vectors of floats with arithmetic operators."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from numbers import Real


class DimensionError(ValueError):
    """Raised when operands have sizes that do not fit together."""


def format_number(value: float) -> str:
    """Format a value as an integer when it is one, else with two decimals."""
    if abs(value - round(value)) < 1e-9:
        return str(int(round(value)))
    return f"{value:.2f}"


class Vector:
    """A mutable vector of floats, indexed from zero."""

    __slots__ = ("_data",)

    def __init__(self, data: Iterable[float] = ()) -> None:
        self._data = [float(x) for x in data]

    @classmethod
    def zeros(cls, size: int) -> Vector:
        """Return a vector of ``size`` zeros."""
        if size < 0:
            raise ValueError("vector size must not be negative")
        return cls([0.0] * size)

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[float]:
        return iter(self._data)

    def _check_index(self, index: int) -> int:
        if not isinstance(index, int) or isinstance(index, bool):
            raise TypeError("vector indices must be integers")
        if not 0 <= index < len(self._data):
            raise IndexError(
                f"index {index} out of range for vector of size {len(self._data)}"
            )
        return index

    def __getitem__(self, index: int) -> float:
        return self._data[self._check_index(index)]

    def __setitem__(self, index: int, value: float) -> None:
        self._data[self._check_index(index)] = float(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Vector({self._data!r})"

    def __str__(self) -> str:
        return "[" + ", ".join(format_number(x) for x in self._data) + "]"

    def copy(self) -> Vector:
        """Return an independent copy."""
        return Vector(self._data)

    def __neg__(self) -> Vector:
        return Vector(-x for x in self._data)

    def increment(self) -> Vector:
        """Add one to every entry in place and return this vector."""
        self._data = [x + 1 for x in self._data]
        return self

    def decrement(self) -> Vector:
        """Subtract one from every entry in place and return this vector."""
        self._data = [x - 1 for x in self._data]
        return self

    def _require_same_size(self, other: Vector, operation: str) -> None:
        if len(self._data) != len(other._data):
            raise DimensionError(
                f"vector sizes must match for {operation}: "
                f"{len(self._data)} != {len(other._data)}"
            )

    def __add__(self, other: object) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        self._require_same_size(other, "addition")
        return Vector(a + b for a, b in zip(self._data, other._data))

    def __iadd__(self, other: object) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        self._require_same_size(other, "addition")
        self._data = [a + b for a, b in zip(self._data, other._data)]
        return self

    def __sub__(self, other: object) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        self._require_same_size(other, "subtraction")
        return Vector(a - b for a, b in zip(self._data, other._data))

    def __isub__(self, other: object) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        self._require_same_size(other, "subtraction")
        self._data = [a - b for a, b in zip(self._data, other._data)]
        return self

    def __mul__(self, other: object) -> Vector | float:
        """Scale by a number, or take the dot product with another vector."""
        if isinstance(other, Vector):
            return self.dot(other)
        if isinstance(other, Real):
            scalar = float(other)
            return Vector(x * scalar for x in self._data)
        return NotImplemented

    def __rmul__(self, other: object) -> Vector | float:
        if isinstance(other, Real):
            return self * other
        return NotImplemented

    def __imul__(self, scalar: object) -> Vector:
        if not isinstance(scalar, Real):
            return NotImplemented
        factor = float(scalar)
        self._data = [x * factor for x in self._data]
        return self

    def dot(self, other: Vector) -> float:
        """Return the dot product with ``other``."""
        self._require_same_size(other, "dot product")
        return math.fsum(a * b for a, b in zip(self._data, other._data)) if False else sum(
            (a * b for a, b in zip(self._data, other._data)), 0.0
        )