"""Linear systems ``A x = b`` with direct and iterative solvers."""

from __future__ import annotations

from .matrix import Matrix, SingularMatrixError
from .vector import DimensionError, Vector

_CG_MAX_ITERATIONS = 1000
_CG_TOLERANCE = 1e-10


class LinearSystem:
    """The system ``A x = b`` for a matrix ``A`` and a right-hand side ``b``."""

    def __init__(self, a: Matrix, b: Vector) -> None:
        if len(b) != a.num_rows:
            raise DimensionError(
                f"right-hand side has size {len(b)}, "
                f"but the matrix has {a.num_rows} rows"
            )
        self.a = a
        self.b = b
        self._size = a.num_rows

    @property
    def size(self) -> int:
        """Number of equations in the system."""
        return self._size

    def solve(self) -> Vector:
        """Solve a square system by Gaussian elimination with partial pivoting."""
        n = self._size
        if self.a.shape != (n, n):
            raise DimensionError(
                f"direct solve needs a square matrix, not {self.a.shape}"
            )

        aug = [row + [value] for row, value in zip(self.a.rows(), self.b)]

        for i in range(n):
            max_row = max(range(i, n), key=lambda k: abs(aug[k][i]))
            if max_row != i:
                aug[i], aug[max_row] = aug[max_row], aug[i]

            pivot_row = aug[i]
            pivot = pivot_row[i]
            if pivot == 0:
                raise SingularMatrixError("matrix is singular; system has no unique solution")

            for j in range(i + 1, n):
                factor = aug[j][i] / pivot
                aug[j][i:] = [
                    a - factor * p for a, p in zip(aug[j][i:], pivot_row[i:])
                ]

        result = [0.0] * n
        for i in reversed(range(n)):
            value = aug[i][n]
            for coefficient, known in zip(aug[i][i + 1:n], result[i + 1:]):
                value -= coefficient * known
            result[i] = value / aug[i][i]

        return Vector(result)

    def solve_least_squares(self) -> Vector:
        """Solve an over-determined system through the normal equations."""
        at = self.a.transpose()
        return LinearSystem(at * self.a, at * self.b).solve()

    def solve_minimum_norm(self) -> Vector:
        """Return the minimum-norm solution of an under-determined system."""
        at = self.a.transpose()
        y = LinearSystem(self.a * at, self.b).solve()
        return at * y


class PositiveSymmetricSystem(LinearSystem):
    """A system whose matrix is symmetric positive definite."""

    def is_symmetric(self, a: Matrix) -> bool:
        """Return whether ``a`` equals its transpose exactly."""
        return a.transpose() == a

    def solve(self) -> Vector:
        """Solve the system by the conjugate gradient method."""
        x = Vector.zeros(self._size)
        r = self.b - self.a * x
        p = r.copy()
        rs_old = r.dot(r)
        if rs_old == 0:
            return x

        for _ in range(_CG_MAX_ITERATIONS):
            ap = self.a * p
            alpha = rs_old / p.dot(ap)
            x = x + p * alpha
            r_next = r - ap * alpha
            rs_new = r_next.dot(r_next)
            if rs_new < _CG_TOLERANCE * _CG_TOLERANCE:
                break
            beta = rs_new / rs_old
            p = r_next + p * beta
            r = r_next
            rs_old = rs_new

        return x