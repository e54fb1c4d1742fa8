import math

import pytest

from densela.linear_system import LinearSystem, PositiveSymmetricSystem
from densela.matrix import Matrix, SingularMatrixError
from densela.vector import DimensionError, Vector


def _residual_norm(a, x, b):
    r = a * x - b
    return math.sqrt(r.dot(r))


def test_gaussian_elimination_source_example():
    a = Matrix.from_rows([[2, 1, -1], [-3, -1, 2], [-2, 1, 2]])
    b = Vector([8, -11, -3])
    x = LinearSystem(a, b).solve()
    assert list(x) == pytest.approx([2, 3, -1])
    assert str(x) == "[2, 3, -1]"


def test_solve_does_not_modify_inputs():
    a = Matrix.from_rows([[0, 1], [1, 0]])
    b = Vector([3, 4])
    before_a, before_b = a.copy(), b.copy()
    x = LinearSystem(a, b).solve()
    assert a == before_a
    assert b == before_b
    assert _residual_norm(a, x, b) < 1e-12


def test_pivoting_handles_zero_leading_entry():
    a = Matrix.from_rows([[0, 2, 1], [1, 1, 1], [2, 0, 3]])
    b = Vector([1, 2, 3])
    x = LinearSystem(a, b).solve()
    assert _residual_norm(a, x, b) < 1e-12


def test_size_matches_rows():
    a = Matrix.from_rows([[1, 2], [3, 4], [5, 6]])
    system = LinearSystem(a, Vector([1, 2, 3]))
    assert system.size == 3


def test_mismatched_rhs_raises():
    a = Matrix.from_rows([[1, 0], [0, 1]])
    with pytest.raises(DimensionError):
        LinearSystem(a, Vector([1, 2, 3]))


def test_singular_system_raises():
    a = Matrix.from_rows([[1, 2], [2, 4]])
    with pytest.raises(SingularMatrixError):
        LinearSystem(a, Vector([1, 2])).solve()


def test_direct_solve_requires_square():
    a = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
    with pytest.raises(DimensionError):
        LinearSystem(a, Vector([1, 2])).solve()


def test_least_squares_recovers_consistent_solution():
    a = Matrix.from_rows([[1, 0], [0, 1], [1, 1], [2, -1]])
    expected = Vector([3, -2])
    b = a * expected
    x = LinearSystem(a, b).solve_least_squares()
    assert list(x) == pytest.approx(list(expected))


def test_least_squares_residual_orthogonal_to_columns():
    a = Matrix.from_rows([[1, 1], [1, 2], [1, 3]])
    b = Vector([1, 2, 2])
    x = LinearSystem(a, b).solve_least_squares()
    residual = b - a * x
    at_r = a.transpose() * residual
    assert all(abs(v) < 1e-10 for v in at_r)


def test_minimum_norm_satisfies_system_and_lies_in_row_space():
    a = Matrix.from_rows([[1, 2, 3], [0, 1, -1]])
    b = Vector([4, 1])
    x = LinearSystem(a, b).solve_minimum_norm()
    assert len(x) == 3
    assert _residual_norm(a, x, b) < 1e-10
    # x = A^T y, so x is orthogonal to the null space of A
    null = Vector([-5, 1, 1])
    assert list(a * null) == pytest.approx([0, 0])
    assert abs(x.dot(null)) < 1e-10


def test_conjugate_gradient_source_example():
    a = Matrix.from_rows([[25, 15, -5], [15, 18, 0], [-5, 0, 11]])
    b = Vector([35, 33, 6])
    x = PositiveSymmetricSystem(a, b).solve()
    assert list(x) == pytest.approx([1, 1, 1], abs=1e-8)


def test_conjugate_gradient_two_by_two():
    a = Matrix.from_rows([[4, 1], [1, 3]])
    b = Vector([1, 2])
    x = PositiveSymmetricSystem(a, b).solve()
    assert abs(x[0] - 0.0909) < 1e-4
    assert abs(x[1] - 0.6364) < 1e-4


def test_conjugate_gradient_identity():
    a = Matrix.identity(3)
    b = Vector([7, 8, 9])
    x = PositiveSymmetricSystem(a, b).solve()
    assert list(x) == pytest.approx([7, 8, 9], abs=1e-4)


def test_conjugate_gradient_hilbert_is_finite_and_accurate():
    a = Matrix.from_rows(
        [[1, 1 / 2, 1 / 3], [1 / 2, 1 / 3, 1 / 4], [1 / 3, 1 / 4, 1 / 5]]
    )
    b = Vector([1, 1, 1])
    x = PositiveSymmetricSystem(a, b).solve()
    assert all(math.isfinite(v) for v in x)
    assert _residual_norm(a, x, b) < 1e-6


def test_conjugate_gradient_agrees_with_elimination():
    a = Matrix.from_rows([[6, 2, 1], [2, 5, 2], [1, 2, 4]])
    b = Vector([1, -2, 3])
    cg = PositiveSymmetricSystem(a, b).solve()
    direct = LinearSystem(a, b).solve()
    assert list(cg) == pytest.approx(list(direct), abs=1e-8)


def test_conjugate_gradient_zero_rhs_gives_zero():
    a = Matrix.from_rows([[2, 0], [0, 3]])
    x = PositiveSymmetricSystem(a, Vector([0, 0])).solve()
    assert x == Vector.zeros(2)


def test_is_symmetric():
    a = Matrix.from_rows([[4, 1], [1, 3]])
    system = PositiveSymmetricSystem(a, Vector([1, 2]))
    assert system.is_symmetric(a) is True
    assert system.is_symmetric(Matrix.from_rows([[1, 2], [3, 4]])) is False
    assert system.is_symmetric(Matrix.from_rows([[1, 2, 3]])) is False