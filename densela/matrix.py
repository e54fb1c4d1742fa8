"""Dense matrices of floats with arithmetic, determinant and inverses."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from numbers import Real

from .vector import DimensionError, Vector, format_number


class SingularMatrixError(ValueError):
    """Raised when a matrix cannot be inverted."""


class Matrix:
    """A mutable rows x cols matrix of floats, indexed from zero by ``(i, j)``."""

    __slots__ = ("_data", "_num_cols")

    def __init__(
        self,
        rows: int = 1,
        cols: int = 1,
        data: Iterable[Iterable[float]] | None = None,
    ) -> None:
        if rows <= 0 or cols <= 0:
            raise ValueError("matrix dimensions must be positive")
        if data is None:
            self._data = [[0.0] * cols for _ in range(rows)]
        else:
            values = [[float(x) for x in row] for row in data]
            if len(values) != rows or any(len(row) != cols for row in values):
                raise DimensionError(
                    f"data does not have the shape {rows} x {cols}"
                )
            self._data = values
        self._num_cols = cols

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[float]]) -> Matrix:
        """Build a matrix from a sequence of equally long rows."""
        values = [[float(x) for x in row] for row in rows]
        if not values or not values[0]:
            raise ValueError("matrix dimensions must be positive")
        return cls(len(values), len(values[0]), values)

    @classmethod
    def identity(cls, size: int) -> Matrix:
        """Return the ``size`` x ``size`` identity matrix."""
        result = cls(size, size)
        for i, row in enumerate(result._data):
            row[i] = 1.0
        return result

    @classmethod
    def _wrap(cls, values: list[list[float]]) -> Matrix:
        return cls(len(values), len(values[0]), values)

    @property
    def num_rows(self) -> int:
        return len(self._data)

    @property
    def num_cols(self) -> int:
        return self._num_cols

    @property
    def shape(self) -> tuple[int, int]:
        return (len(self._data), self._num_cols)

    def rows(self) -> list[list[float]]:
        """Return a copy of the entries as a list of rows."""
        return [row[:] for row in self._data]

    def __iter__(self) -> Iterator[list[float]]:
        return iter(self.rows())

    def _check_index(self, index: object) -> tuple[int, int]:
        if not isinstance(index, tuple) or len(index) != 2:
            raise TypeError("matrix indices must be a pair (row, column)")
        i, j = index
        for k in (i, j):
            if not isinstance(k, int) or isinstance(k, bool):
                raise TypeError("matrix indices must be integers")
        if not (0 <= i < self.num_rows and 0 <= j < self._num_cols):
            raise IndexError(
                f"index ({i}, {j}) out of range for matrix of shape {self.shape}"
            )
        return i, j

    def __getitem__(self, index: tuple[int, int]) -> float:
        i, j = self._check_index(index)
        return self._data[i][j]

    def __setitem__(self, index: tuple[int, int], value: float) -> None:
        i, j = self._check_index(index)
        self._data[i][j] = float(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Matrix.from_rows({self._data!r})"

    def __str__(self) -> str:
        lines = (
            "[" + ", ".join(format_number(x) for x in row) + "]"
            for row in self._data
        )
        return "[" + ",\n ".join(lines) + "]"

    def copy(self) -> Matrix:
        """Return an independent copy."""
        return Matrix._wrap(self.rows())

    def _assign(self, other: Matrix) -> None:
        self._data = other._data
        self._num_cols = other._num_cols

    def __neg__(self) -> Matrix:
        return Matrix._wrap([[-x for x in row] for row in self._data])

    def increment(self) -> Matrix:
        """Add one to every entry in place and return this matrix."""
        self._data = [[x + 1 for x in row] for row in self._data]
        return self

    def decrement(self) -> Matrix:
        """Subtract one from every entry in place and return this matrix."""
        self._data = [[x - 1 for x in row] for row in self._data]
        return self

    def _require_same_shape(self, other: Matrix, operation: str) -> None:
        if self.shape != other.shape:
            raise DimensionError(
                f"matrix shapes must match for {operation}: "
                f"{self.shape} != {other.shape}"
            )

    def _elementwise(self, other: Matrix, op) -> list[list[float]]:
        return [
            [op(a, b) for a, b in zip(row_a, row_b)]
            for row_a, row_b in zip(self._data, other._data)
        ]

    def __add__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._require_same_shape(other, "addition")
        return Matrix._wrap(self._elementwise(other, lambda a, b: a + b))

    def __iadd__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._require_same_shape(other, "addition")
        self._data = self._elementwise(other, lambda a, b: a + b)
        return self

    def __sub__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._require_same_shape(other, "subtraction")
        return Matrix._wrap(self._elementwise(other, lambda a, b: a - b))

    def __isub__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._require_same_shape(other, "subtraction")
        self._data = self._elementwise(other, lambda a, b: a - b)
        return self

    def _matmul(self, other: Matrix) -> Matrix:
        if self._num_cols != other.num_rows:
            raise DimensionError(
                f"cannot multiply {self.shape} by {other.shape}"
            )
        columns = list(zip(*other._data))
        return Matrix._wrap(
            [
                [sum((a * b for a, b in zip(row, col)), 0.0) for col in columns]
                for row in self._data
            ]
        )

    def _vecmul(self, vector: Vector) -> list[float]:
        if self._num_cols != len(vector):
            raise DimensionError(
                f"cannot multiply {self.shape} by a vector of size {len(vector)}"
            )
        return [sum((a * b for a, b in zip(row, vector)), 0.0) for row in self._data]

    def _scaled(self, scalar: float) -> list[list[float]]:
        return [[x * scalar for x in row] for row in self._data]

    def __mul__(self, other: object) -> Matrix | Vector:
        """Multiply by a matrix, a vector or a number."""
        if isinstance(other, Matrix):
            return self._matmul(other)
        if isinstance(other, Vector):
            return Vector(self._vecmul(other))
        if isinstance(other, Real):
            return Matrix._wrap(self._scaled(float(other)))
        return NotImplemented

    def __rmul__(self, other: object) -> Matrix:
        if isinstance(other, Real):
            return Matrix._wrap(self._scaled(float(other)))
        return NotImplemented

    def __imul__(self, other: object) -> Matrix:
        """Multiply in place; a vector operand leaves a one-column matrix."""
        if isinstance(other, Matrix):
            self._assign(self._matmul(other))
        elif isinstance(other, Vector):
            self._assign(Matrix._wrap([[x] for x in self._vecmul(other)]))
        elif isinstance(other, Real):
            self._data = self._scaled(float(other))
        else:
            return NotImplemented
        return self

    def _require_square(self) -> int:
        if self.num_rows != self._num_cols:
            raise DimensionError(f"matrix must be square, not {self.shape}")
        return self.num_rows

    def determinant(self) -> float:
        """Return the determinant of a square matrix."""
        n = self._require_square()
        d = self._data
        if n == 1:
            return d[0][0]
        if n == 2:
            return d[0][0] * d[1][1] - d[0][1] * d[1][0]

        work = self.rows()
        sign = 1.0
        for i in range(n):
            pivot = work[i][i]
            if pivot == 0:
                swap = next((j for j in range(i + 1, n) if work[j][i] != 0), None)
                if swap is None:
                    return 0.0
                work[i], work[swap] = work[swap], work[i]
                sign = -sign
                pivot = work[i][i]
            pivot_row = work[i]
            for j in range(i + 1, n):
                factor = work[j][i] / pivot
                work[j][i:] = [
                    a - factor * b for a, b in zip(work[j][i:], pivot_row[i:])
                ]
        det = math.prod(row[i] for i, row in enumerate(work))
        return det if sign > 0 else -det

    def inverse(self) -> Matrix:
        """Return the inverse of a square matrix by Gauss-Jordan elimination."""
        n = self._require_square()
        if self.determinant() == 0:
            raise SingularMatrixError("matrix is singular and cannot be inverted")

        aug = [
            row + [1.0 if i == j else 0.0 for j in range(n)]
            for i, row in enumerate(self.rows())
        ]
        for i in range(n):
            pivot = aug[i][i]
            if pivot == 0.0:
                swap = next((j for j in range(i + 1, n) if aug[j][i] != 0.0), None)
                if swap is None:
                    raise SingularMatrixError(
                        "matrix is singular and cannot be inverted"
                    )
                aug[i], aug[swap] = aug[swap], aug[i]
                pivot = aug[i][i]
            aug[i] = [x / pivot for x in aug[i]]
            pivot_row = aug[i]
            for j, row in enumerate(aug):
                if j != i:
                    factor = row[i]
                    aug[j] = [a - factor * b for a, b in zip(row, pivot_row)]
        return Matrix._wrap([row[n:] for row in aug])

    def pseudo_inverse(self) -> Matrix:
        """Return the Moore-Penrose inverse of a full-rank matrix."""
        rows, cols = self.shape
        if rows == cols:
            return self.inverse()

        rank = min(rows, cols)
        full_rank = any(
            Matrix._wrap(
                [row[c:c + rank] for row in self._data[r:r + rank]]
            ).determinant()
            != 0
            for r in range(rows - rank + 1)
            for c in range(cols - rank + 1)
        )
        if not full_rank:
            raise SingularMatrixError(
                "matrix has neither full row rank nor full column rank, "
                "cannot find pseudo-inverse"
            )

        t = self.transpose()
        if rank == rows:
            return t._matmul(self._matmul(t).inverse())
        return t._matmul(self).inverse()._matmul(t)

    def transpose(self) -> Matrix:
        """Return the transposed matrix."""
        return Matrix._wrap([list(col) for col in zip(*self._data)])