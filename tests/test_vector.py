import math

import pytest

from densela.vector import DimensionError, Vector


def test_set_entries_of_zero_vector():
    v = Vector.zeros(3)
    v[0] = 3
    v[1] = 1
    v[2] = 4
    assert list(v) == [3.0, 1.0, 4.0]
    assert str(v) == "[3, 1, 4]"


def test_zeros_is_all_zero_and_sized():
    v = Vector.zeros(5)
    assert len(v) == 5
    assert all(x == 0.0 for x in v)


def test_zeros_of_size_zero_is_empty():
    v = Vector.zeros(0)
    assert len(v) == 0
    assert str(v) == "[]"


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Vector.zeros(-1)


def test_from_data():
    v = Vector([1, 5, 9])
    assert (v[0], v[1], v[2]) == (1, 5, 9)
    assert str(v) == "[1, 5, 9]"


def test_copy_is_independent():
    v1 = Vector([2, 6, 5])
    v2 = v1.copy()
    assert v2 == v1
    v2[0] = 100
    assert v1[0] == 2


def test_negation_leaves_original():
    v = Vector([3, 5, 8, 9])
    v1 = -v
    assert list(v1) == [-3, -5, -8, -9]
    assert list(v) == [3, 5, 8, 9]


def test_increment_prefix_and_postfix_semantics():
    v = Vector([7, 9, 3, 2, 3])
    v1 = v.increment().copy()
    v2 = v.copy()
    v.increment()
    assert v1[0] == 8 and v2[0] == 8 and v[0] == 9
    assert v1 == Vector([8, 10, 4, 3, 4])
    assert v == Vector([9, 11, 5, 4, 5])


def test_decrement_prefix_and_postfix_semantics():
    v = Vector([8, 4, 6])
    v1 = v.decrement().copy()
    v2 = v.copy()
    v.decrement()
    assert v1[0] == 7 and v2[0] == 7 and v[0] == 6


def test_increment_then_decrement_round_trip():
    v = Vector([1.5, -2.25, 0])
    original = v.copy()
    assert v.increment().decrement() == original


def test_addition_and_in_place_addition():
    v1 = Vector([2, 6, 4, 3])
    v2 = Vector([3, 8, 3, 2])
    v = v1 + v2
    assert v == Vector([5, 14, 7, 5])
    vv = v.copy()
    vv += v2
    assert vv == Vector([8, 22, 10, 7])
    assert v == Vector([5, 14, 7, 5])


def test_in_place_addition_keeps_identity():
    v = Vector([1, 2])
    alias = v
    v += Vector([1, 1])
    assert alias is v
    assert alias == Vector([2, 3])


def test_subtraction_and_in_place_subtraction():
    v1 = Vector([2, 6, 4, 3])
    v2 = Vector([3, 8, 3, 2])
    v = v1 - v2
    assert v == Vector([-1, -2, 1, 1])
    vv = v.copy()
    vv -= v2
    assert vv == Vector([-4, -10, -2, -1])


def test_add_then_subtract_round_trip():
    a = Vector([1.25, -3, 7])
    b = Vector([0.5, 2, -1])
    assert (a + b) - b == a


def test_scalar_and_dot_product():
    v1 = Vector([2, 6, 4, 3])
    v2 = Vector([3, 8, 3, 2])
    dot = v1 * v2
    v1 *= 5
    assert v1 == Vector([10, 30, 20, 15])
    assert dot == 72
    assert v2.dot(Vector([2, 6, 4, 3])) == 72


def test_scalar_multiplication_commutes():
    v = Vector([1, -2, 3])
    assert 2 * v == v * 2
    assert list(v * 2) == [2, -4, 6]
    assert v == Vector([1, -2, 3])


def test_dot_is_symmetric():
    a = Vector([1, 2, 3])
    b = Vector([-4, 0.5, 2])
    assert a.dot(b) == b.dot(a)


@pytest.mark.parametrize(
    "operation",
    [
        lambda a, b: a + b,
        lambda a, b: a - b,
        lambda a, b: a * b,
        lambda a, b: a.dot(b),
    ],
)
def test_size_mismatch_raises(operation):
    with pytest.raises(DimensionError):
        operation(Vector([1, 2]), Vector([1, 2, 3]))


def test_in_place_size_mismatch_raises():
    v = Vector([1, 2])
    with pytest.raises(DimensionError):
        v += Vector([1])
    with pytest.raises(DimensionError):
        v -= Vector([1])
    assert v == Vector([1, 2])


def test_index_out_of_range():
    v = Vector([1, 2, 3])
    with pytest.raises(IndexError):
        _ = v[3]
    with pytest.raises(IndexError):
        _ = v[-1]
    with pytest.raises(IndexError):
        v[3] = 0
    assert list(v) == [1.0, 2.0, 3.0]
    assert v[2] == 3


def test_non_integer_index_rejected():
    with pytest.raises(TypeError):
        Vector([1])[0.5]


def test_str_non_integer_uses_two_decimals():
    assert str(Vector([0.5, 2, -1.25])) == "[0.50, 2, -1.25]"


def test_equality_with_other_types():
    assert (Vector([1]) == [1.0]) is False


def test_repr_round_trip():
    v = Vector([1.5, -2])
    assert repr(v) == "Vector([1.5, -2.0])"
    assert Vector(eval_free_parse(repr(v))) == v


def eval_free_parse(text):
    inner = text[len("Vector([") : -len("])")]
    return [float(part) for part in inner.split(",")]