import math

from methopts.vectors import add, dot, norm2, scalar_mul, sub


def test_add_then_sub_round_trip():
    a = [1.5, -2.0, 3.25]
    b = [0.5, 4.0, -1.0]
    assert sub(add(a, b), b) == a


def test_add_is_commutative():
    a = [1.0, 2.0, 3.0]
    b = [-4.0, 0.5, 10.0]
    assert add(a, b) == add(b, a)


def test_sub_of_self_is_zero():
    a = [3.0, -7.5, 0.25]
    assert sub(a, a) == [0.0, 0.0, 0.0]


def test_scalar_mul_by_one_and_zero():
    a = [2.0, -3.0, 4.5]
    assert scalar_mul(a, 1.0) == a
    assert scalar_mul(a, 0.0) == [0.0, 0.0, 0.0]


def test_scalar_mul_then_divide_round_trip():
    a = [2.0, -3.0, 4.5]
    assert scalar_mul(scalar_mul(a, 4.0), 0.25) == a


def test_dot_is_symmetric():
    a = [1.0, 2.0, 3.0]
    b = [4.0, -5.0, 6.0]
    assert dot(a, b) == dot(b, a)


def test_dot_of_orthogonal_vectors_is_zero():
    assert dot([1.0, 0.0], [0.0, 1.0]) == 0.0


def test_norm2_matches_dot():
    a = [1.0, -2.0, 2.0]
    assert math.isclose(norm2(a) ** 2, dot(a, a))


def test_norm2_of_three_four():
    assert math.isclose(norm2([3.0, 4.0]), 5.0)


def test_empty_vectors():
    assert add([], []) == []
    assert dot([], []) == 0.0
    assert norm2([]) == 0.0