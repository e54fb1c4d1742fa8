"""Built-in checks of vectors, matrices and solvers, runnable from the command line."""

from __future__ import annotations

import argparse
import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from .linear_system import LinearSystem, PositiveSymmetricSystem
from .matrix import Matrix
from .vector import Vector

RESET = "\033[0m"
RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[93m"

_TOLERANCE = 1e-4


@dataclass(frozen=True)
class CheckResult:
    """Outcome of one built-in check."""

    number: int
    title: str
    passed: bool
    output: tuple[str, ...]


def _close(actual: float, expected: float, tol: float = _TOLERANCE) -> bool:
    return abs(actual - expected) < tol


def _all_close(actual, expected, tol: float = _TOLERANCE) -> bool:
    actual = list(actual)
    expected = list(expected)
    return len(actual) == len(expected) and all(
        _close(a, e, tol) for a, e in zip(actual, expected)
    )


def _matrix_close(actual: Matrix, expected: Matrix, tol: float = _TOLERANCE) -> bool:
    return actual.shape == expected.shape and all(
        _all_close(row_a, row_e, tol)
        for row_a, row_e in zip(actual.rows(), expected.rows())
    )


def _check_vector_entries(out: list[str]) -> bool:
    v = Vector.zeros(3)
    v[0] = 3
    v[1] = 1
    v[2] = 4
    out.append(str(v))
    out.append("Expected: [3, 1, 4]")
    return list(v) == [3, 1, 4]


def _check_vector_from_data(out: list[str]) -> bool:
    v = Vector([1, 5, 9])
    out.append(str(v))
    out.append("Expected: [1, 5, 9]")
    return list(v) == [1, 5, 9]


def _check_vector_copy(out: list[str]) -> bool:
    v1 = Vector([2, 6, 5])
    v2 = v1.copy()
    out.append(f"v1 = {v1}")
    out.append(f"v2 = {v2}")
    out.append("Expected: v1 == v2")
    v1[0] = 0
    return list(v2) == [2, 6, 5]


def _check_vector_negation(out: list[str]) -> bool:
    v = Vector([3, 5, 8, 9])
    v1 = -v
    out.append(f"v1 = {v1}")
    out.append(f"v = {v}")
    out.append("Expected: v1 = [-3, -5, -8, -9]")
    return list(v1) == [-3, -5, -8, -9] and list(v) == [3, 5, 8, 9]


def _check_vector_increment(out: list[str]) -> bool:
    v = Vector([7, 9, 3, 2, 3])
    v1 = v.increment().copy()
    v2 = v.copy()
    v.increment()
    out.append(f"v1 = {v1}")
    out.append(f"v2 = {v2}")
    out.append(f"v = {v}")
    out.append("Expected: v1 = v2 = [8, 10, 4, 3, 4]; v = [9, 11, 5, 4, 5]")
    return (
        list(v1) == [8, 10, 4, 3, 4]
        and list(v2) == [8, 10, 4, 3, 4]
        and list(v) == [9, 11, 5, 4, 5]
    )


def _check_vector_decrement(out: list[str]) -> bool:
    v = Vector([8, 4, 6])
    v1 = v.decrement().copy()
    v2 = v.copy()
    v.decrement()
    out.append(f"v1 = {v1}")
    out.append(f"v2 = {v2}")
    out.append(f"v = {v}")
    out.append("Expected: v1 = v2 = [7, 3, 5]; v = [6, 2, 4]")
    return list(v1) == [7, 3, 5] and list(v2) == [7, 3, 5] and list(v) == [6, 2, 4]


def _check_vector_addition(out: list[str]) -> bool:
    v1 = Vector([2, 6, 4, 3])
    v2 = Vector([3, 8, 3, 2])
    v = v1 + v2
    out.append(f"v1 = {v1}")
    out.append(f"v2 = {v2}")
    out.append(f"v = v1 + v2 = {v}")
    out.append("Expected: v = [5, 14, 7, 5]")
    vv = v.copy()
    vv += v2
    out.append(f"vv = v; vv += v2 -> {vv}")
    out.append("Expected: vv = [8, 22, 10, 7]")
    return list(v) == [5, 14, 7, 5] and list(vv) == [8, 22, 10, 7]


def _check_vector_subtraction(out: list[str]) -> bool:
    v1 = Vector([2, 6, 4, 3])
    v2 = Vector([3, 8, 3, 2])
    v = v1 - v2
    out.append(f"v1 = {v1}")
    out.append(f"v2 = {v2}")
    out.append(f"v = v1 - v2 = {v}")
    out.append("Expected: v = [-1, -2, 1, 1]")
    vv = v.copy()
    vv -= v2
    out.append(f"vv = v; vv -= v2 -> {vv}")
    out.append("Expected: vv = [-4, -10, -2, -1]")
    return list(v) == [-1, -2, 1, 1] and list(vv) == [-4, -10, -2, -1]


def _check_vector_products(out: list[str]) -> bool:
    v1 = Vector([2, 6, 4, 3])
    v2 = Vector([3, 8, 3, 2])
    dot = v1 * v2
    v1 *= 5
    out.append(f"5 * v1 = {v1}")
    out.append(f"v2 = {v2}")
    out.append(f"v1 . v2 = {dot:g}")
    out.append("Expected: 5 * v1 = [10, 30, 20, 15]; v1 . v2 = 72")
    return list(v1) == [10, 30, 20, 15] and dot == 72


def _check_matrix_entries(out: list[str]) -> bool:
    m = Matrix(2, 2)
    m[0, 0] = 7
    m[0, 1] = 9
    m[1, 0] = 5
    m[1, 1] = 0
    out.append(str(m))
    out.append("Expected: [[7, 9], [5, 0]]")
    return m.rows() == [[7, 9], [5, 0]]


def _check_pseudo_inverse(out: list[str]) -> bool:
    m3 = Matrix.from_rows([[5, -8, 2], [0, 7, -2]])
    p3 = m3.pseudo_inverse()
    out.append(f"Pseudo-inverse of m3: {p3}")
    expected3 = Matrix.from_rows(
        [
            [0.199398043641836, 0.225733634311512],
            [-0.00300978179082, 0.128668171557562],
            [-0.010534236267871, -0.049661399548533],
        ]
    )
    out.append(f"Expected: {expected3}")

    m4 = Matrix.from_rows(
        [[5, -8, 2], [0, 7, -2], [2, 9, -3], [-4, -1, 8], [0, 0, -3]]
    )
    p4 = m4.pseudo_inverse()
    out.append(f"Pseudo-inverse of m4: {p4}")
    out.append("Expected: a 3 x 5 left inverse of m4")

    return (
        _matrix_close(p3, expected3, 1e-6)
        and _matrix_close(m3 * p3, Matrix.identity(2), 1e-9)
        and p4.shape == (3, 5)
        and _matrix_close(p4 * m4, Matrix.identity(3), 1e-9)
    )


def _report_determinant(out: list[str], m: Matrix, expected: float) -> bool:
    det = m.determinant()
    out.append(f"Determinant: {det:g} (Expected: {expected:g})")
    return _close(det, expected)


def _check_det_4x4(out: list[str]) -> bool:
    m = Matrix.from_rows([[1, 2, 3, 4], [5, 6, 7, 8], [2, 6, 4, 8], [3, 1, 1, 2]])
    return _report_determinant(out, m, 72)


def _check_det_5x5(out: list[str]) -> bool:
    m = Matrix.from_rows(
        [
            [0, -2, 3, 0, 1],
            [4, 0, 0, -1, 2],
            [0, 0, 0, 0, 1],
            [1, 2, 3, 4, 5],
            [-1, 1, -1, 1, -1],
        ]
    )
    return _report_determinant(out, m, 19)


def _check_det_singular_4x4(out: list[str]) -> bool:
    m = Matrix.from_rows(
        [[2, 4, 6, 8], [1, 2, 3, 4], [2, 4, 6, 8], [3, 6, 9, 12]]
    )
    return _report_determinant(out, m, 0)


def _check_det_vandermonde(out: list[str]) -> bool:
    m = Matrix.from_rows([[1, x, x * x, x * x * x] for x in (1.0, 2.0, 3.0, 4.0)])
    return _report_determinant(out, m, 12)


def _check_det_diagonal(out: list[str]) -> bool:
    m = Matrix(6, 6)
    for i in range(6):
        m[i, i] = i + 1
    return _report_determinant(out, m, 720)


def _check_det_identity(out: list[str]) -> bool:
    return _report_determinant(out, Matrix.identity(5), 1)


def _check_inverse_determinant(out: list[str]) -> bool:
    m = Matrix.from_rows([[4, 7, 2], [3, 6, 1], [2, 5, 1]])
    inv = m.inverse()
    det = m.determinant()
    inv_det = inv.determinant()
    out.append(
        f"Determinant of matrix: {det:g} and of inverse matrix: {inv_det:g} "
        "(Expected: 3, 1/3)"
    )
    out.append(f"Inverse: {inv}")
    return _close(det, 3) and _close(inv_det, 1 / 3)


def _check_least_squares(out: list[str]) -> bool:
    a = Matrix.from_rows([[1, 0], [0, 1], [1, 1]])
    b = Vector([1, 2, 3])
    x = LinearSystem(a, b).solve_least_squares()
    out.append(f"Least-squares solution: {x} (Expected: [1, 2])")
    return _all_close(x, [1, 2])


def _check_minimum_norm(out: list[str]) -> bool:
    a = Matrix.from_rows([[1, 1]])
    b = Vector([2])
    x = LinearSystem(a, b).solve_minimum_norm()
    out.append(f"Minimum-norm solution: {x} (Expected: [1, 1])")
    return _all_close(x, [1, 1])


def _check_matrix_product(out: list[str]) -> bool:
    a = Matrix.from_rows([[1, 2], [3, 4]])
    b = Matrix.from_rows([[5, 6], [7, 8]])
    product = a * b
    out.append(f"A * B = {product}")
    out.append("Expected: [[19, 22], [43, 50]]")
    return product.rows() == [[19, 22], [43, 50]]


def _check_inverse_product(out: list[str]) -> bool:
    m = Matrix.from_rows([[4, 7, 2], [3, 6, 1], [2, 5, 1]])
    product = m * m.inverse()
    out.append(f"A * inverse(A) = {product}")
    out.append("Expected: the 3 x 3 identity")
    return _matrix_close(product, Matrix.identity(3), 1e-9)


def _check_gauss_solve(out: list[str]) -> bool:
    a = Matrix.from_rows([[2, 1, -1], [-3, -1, 2], [-2, 1, 2]])
    b = Vector([8, -11, -3])
    x = LinearSystem(a, b).solve()
    out.append(f"LinearSystem.solve() solution: {x} (Expected: [2, 3, -1])")
    return _all_close(x, [2, 3, -1])


def _check_cg_3x3(out: list[str]) -> bool:
    a = Matrix.from_rows([[25, 15, -5], [15, 18, 0], [-5, 0, 11]])
    b = Vector([35, 33, 6])
    x = PositiveSymmetricSystem(a, b).solve()
    out.append(f"x = {x} (Expected: [1, 1, 1])")
    return _all_close(x, [1, 1, 1])


def _check_det_2x2(out: list[str]) -> bool:
    m = Matrix.from_rows([[4, 6], [3, 8]])
    return _report_determinant(out, m, 14)


def _check_det_3x3(out: list[str]) -> bool:
    m = Matrix.from_rows([[6, 1, 1], [4, -2, 5], [2, 8, 7]])
    return _report_determinant(out, m, -306)


def _check_det_singular_2x2(out: list[str]) -> bool:
    m = Matrix.from_rows([[1, 2], [2, 4]])
    return _report_determinant(out, m, 0)


def _check_cg_2x2(out: list[str]) -> bool:
    a = Matrix.from_rows([[4, 1], [1, 3]])
    b = Vector([1, 2])
    x = PositiveSymmetricSystem(a, b).solve()
    out.append(f"x = {x} (Expected: [0.0909, 0.6364])")
    return _all_close(x, [0.0909, 0.6364])


def _check_cg_identity(out: list[str]) -> bool:
    b = Vector([7, 8, 9])
    x = PositiveSymmetricSystem(Matrix.identity(3), b).solve()
    out.append(f"x = {x} (Expected: [7, 8, 9])")
    return _all_close(x, [7, 8, 9])


def _check_cg_hilbert(out: list[str]) -> bool:
    a = Matrix.from_rows([[1 / (i + j + 1) for j in range(3)] for i in range(3)])
    b = Vector([1, 1, 1])
    x = PositiveSymmetricSystem(a, b).solve()
    out.append(f"x = {x} (Hilbert 3 x 3)")
    return all(math.isfinite(value) for value in x)


_CHECKS: tuple[tuple[str, Callable[[list[str]], bool]], ...] = (
    ("vector entries", _check_vector_entries),
    ("vector from data", _check_vector_from_data),
    ("vector copy", _check_vector_copy),
    ("vector negation", _check_vector_negation),
    ("vector increment", _check_vector_increment),
    ("vector decrement", _check_vector_decrement),
    ("vector addition", _check_vector_addition),
    ("vector subtraction", _check_vector_subtraction),
    ("vector scaling and dot product", _check_vector_products),
    ("matrix entries", _check_matrix_entries),
    ("pseudo-inverse", _check_pseudo_inverse),
    ("determinant 4 x 4", _check_det_4x4),
    ("determinant 5 x 5", _check_det_5x5),
    ("determinant of singular 4 x 4", _check_det_singular_4x4),
    ("determinant of Vandermonde 4 x 4", _check_det_vandermonde),
    ("determinant of diagonal 6 x 6", _check_det_diagonal),
    ("determinant of identity 5 x 5", _check_det_identity),
    ("determinant of inverse", _check_inverse_determinant),
    ("least squares", _check_least_squares),
    ("minimum norm", _check_minimum_norm),
    ("matrix product", _check_matrix_product),
    ("matrix times inverse", _check_inverse_product),
    ("Gaussian elimination", _check_gauss_solve),
    ("conjugate gradient 3 x 3", _check_cg_3x3),
    ("determinant 2 x 2", _check_det_2x2),
    ("determinant 3 x 3", _check_det_3x3),
    ("determinant of singular 2 x 2", _check_det_singular_2x2),
    ("conjugate gradient 2 x 2", _check_cg_2x2),
    ("conjugate gradient on identity", _check_cg_identity),
    ("conjugate gradient on Hilbert matrix", _check_cg_hilbert),
)


def run_checks() -> list[CheckResult]:
    """Run every built-in check and return their results in order."""
    results = []
    for number, (title, check) in enumerate(_CHECKS, start=1):
        out: list[str] = []
        try:
            passed = bool(check(out))
        except Exception as exc:  # a crashing check counts as a failure
            out.append(f"error: {exc}")
            passed = False
        results.append(CheckResult(number, title, passed, tuple(out)))
    return results


def main(argv: Sequence[str] | None = None) -> int:
    """Run the built-in checks, print a coloured report and return an exit code."""
    parser = argparse.ArgumentParser(
        prog="densela-selftest",
        description="Run the built-in checks of vectors, matrices and solvers.",
    )
    parser.parse_args(argv)

    results = run_checks()
    for result in results:
        print(f"{YELLOW}TEST {result.number}: {result.title}{RESET}")
        for line in result.output:
            print(line)
        if result.passed:
            print(f"{GREEN}Test {result.number} passed{RESET}")
        else:
            print(f"{RED}Test {result.number} failed{RESET}")

    total = len(results)
    passed = sum(result.passed for result in results)
    if passed == total:
        colour = GREEN
    elif passed == 0:
        colour = RED
    else:
        colour = YELLOW
    print(f"{colour}Total Passed: {passed}/{total}.{RESET}")
    return 0 if passed == total else 1


if __name__ == "__main__":
    raise SystemExit(main())