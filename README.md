# densela

A small, dependency-free toolkit for dense linear algebra in pure Python.

## What it provides

- `densela.vector.Vector`: a mutable vector of floats, indexed from zero.
  It supports `len()`, iteration, `v[i]` access and assignment, `==`,
  negation, `+`, `-`, `+=`, `-=`, scaling by a number (`v * 2`, `2 * v`,
  `v *= 2`), and the dot product (`v.dot(w)` or `v * w`). `Vector.zeros(n)`
  builds a zero vector; `copy()` returns an independent copy;
  `increment()` and `decrement()` add or subtract one from every entry in
  place and return the vector itself.
- `densela.matrix.Matrix`: a mutable matrix of floats, indexed from zero by
  `m[i, j]`. `Matrix(rows, cols)` builds a zero matrix, `Matrix.from_rows(...)`
  builds one from a list of rows and `Matrix.identity(n)` the identity.
  It has `num_rows`, `num_cols` and `shape`, `rows()` (a copy of the entries),
  `copy()`, negation, `+`, `-`, `+=`, `-=`, `increment()`, `decrement()`, and
  `*` with a matrix, a `Vector` (giving a `Vector`) or a number. `m *= v` with a
  vector leaves a one-column matrix. It also offers `determinant()`,
  `inverse()` (Gauss–Jordan elimination), `pseudo_inverse()` (for matrices of
  full row or column rank) and `transpose()`.
- `densela.linear_system.LinearSystem`: the system `A x = b`. `solve()` uses
  Gaussian elimination with partial pivoting on a square matrix;
  `solve_least_squares()` solves an over-determined system through the normal
  equations; `solve_minimum_norm()` returns the minimum-norm solution of an
  under-determined one. `size` is the number of equations.
- `densela.linear_system.PositiveSymmetricSystem`: a `LinearSystem` whose
  `solve()` uses the conjugate gradient method (at most 1000 iterations,
  stopping once the residual norm falls below 1e-10). `is_symmetric(a)` tells
  whether a matrix equals its transpose exactly.

## Errors

- `densela.vector.DimensionError` (a `ValueError`) is raised when operand
  sizes do not fit together, or when `solve()` is given a non-square matrix.
- `densela.matrix.SingularMatrixError` (a `ValueError`) is raised when
  inverting a singular matrix, when asking for the pseudo-inverse of a matrix
  without full rank, and when `LinearSystem.solve()` meets a zero pivot.
- Out-of-range indices raise `IndexError`; non-positive matrix dimensions
  and negative vector sizes raise `ValueError`.

## Printing

`str()` of a vector or matrix prints whole numbers without a decimal point
and any other value with two decimals; matrix rows go on separate lines.

## Usage

```python
from densela.vector import Vector
from densela.matrix import Matrix
from densela.linear_system import LinearSystem, PositiveSymmetricSystem

v = Vector([3, 1, 4])
print(v)                           # [3, 1, 4]
print(v.dot(Vector([1, 1, 1])))    # 8.0

a = Matrix.from_rows([[2, 1, -1], [-3, -1, 2], [-2, 1, 2]])
b = Vector([8, -11, -3])
print(LinearSystem(a, b).solve())  # [2, 3, -1]

spd = Matrix.from_rows([[4, 1], [1, 3]])
print(PositiveSymmetricSystem(spd, Vector([1, 2])).solve())  # [0.09, 0.64]

m = Matrix.from_rows([[4, 6], [3, 8]])
print(m.determinant())             # 14.0
print(m.inverse() * m)             # the 2 x 2 identity
```

## Self-check

`densela.selftest` runs a fixed set of built-in numerical checks over
vectors, matrices and both solvers. `run_checks()` returns one `CheckResult`
per check; the command prints a coloured report, ends with the number of
checks passed, and exits with status 0 only when all of them pass:

```
densela-selftest
```

## What it does not do

Everything works on small dense matrices held in memory as Python lists.
There is no sparse storage, no reading or writing of matrix files, and no
command for solving systems given on the command line; the only command is
the self-check above.

## Installation and tests

```
pip install .
pip install .[test]
pytest
```