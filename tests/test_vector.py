import math

import pytest

from stellargen.vector import Vector


def test_components_and_indexing():
    v = Vector([1.0, 2.0, 3.0])
    assert len(v) == 3
    assert list(v) == [1.0, 2.0, 3.0]
    assert v[1] == 2.0
    assert v[-1] == 3.0
    assert v[0:2] == Vector([1.0, 2.0])


def test_default_is_empty():
    assert len(Vector()) == 0


def test_filled():
    v = Vector.filled(4, 2.5)
    assert list(v) == [2.5, 2.5, 2.5, 2.5]


def test_filled_negative_size_rejected():
    with pytest.raises(ValueError):
        Vector.filled(-1, 0.0)


def test_equality():
    assert Vector([1, 2]) == Vector([1, 2])
    assert not (Vector([1, 2]) == Vector([2, 1]))


def test_norm_of_pythagorean_triple():
    v = Vector([3.0, 4.0])
    assert v.norm2() == 25.0
    assert v.norm() == 5.0


def test_normalize_gives_unit_length_and_keeps_direction():
    v = Vector([2.0, -6.0, 3.0])
    original = Vector(v)
    v.normalize()
    assert v.norm() == pytest.approx(1.0)
    scale = original.norm()
    for a, b in zip(v, original):
        assert a * scale == pytest.approx(b)


def test_normalize_zero_vector_raises():
    with pytest.raises(ZeroDivisionError):
        Vector([0.0, 0.0]).normalize()


def test_scalar_operations_apply_to_each_component():
    v = Vector([1.0, 2.0])
    assert v + 1.0 == Vector([2.0, 3.0])
    assert v - 1.0 == Vector([0.0, 1.0])
    assert v * 2.0 == Vector([2.0, 4.0])
    assert v / 2.0 == Vector([0.5, 1.0])


def test_elementwise_operations():
    a = Vector([1.0, 2.0, 3.0])
    b = Vector([4.0, 5.0, 6.0])
    assert a + b == Vector([5.0, 7.0, 9.0])
    assert (a + b) - b == a
    assert a * b == Vector([4.0, 10.0, 18.0])
    assert (a * b) / b == a


def test_binary_ops_do_not_modify_operands():
    a = Vector([1.0, 2.0])
    b = Vector([3.0, 4.0])
    _ = a + b
    assert a == Vector([1.0, 2.0])
    assert b == Vector([3.0, 4.0])


def test_inplace_operations_mutate_same_object():
    v = Vector([1.0, 2.0])
    ref = v
    v += Vector([1.0, 1.0])
    assert ref is v
    assert v == Vector([2.0, 3.0])
    v -= 1.0
    assert v == Vector([1.0, 2.0])
    v *= Vector([2.0, 3.0])
    assert v == Vector([2.0, 6.0])
    v /= 2.0
    assert v == Vector([1.0, 3.0])
    assert ref == Vector([1.0, 3.0])


def test_size_mismatch_raises():
    with pytest.raises(ValueError):
        Vector([1.0, 2.0]) + Vector([1.0])
    v = Vector([1.0])
    with pytest.raises(ValueError):
        v *= Vector([1.0, 2.0])


def test_unsupported_operand_raises_type_error():
    with pytest.raises(TypeError):
        Vector([1.0]) + "x"


def test_norm_matches_hypot():
    v = Vector([1.5, -2.5, 0.5])
    assert v.norm() == pytest.approx(math.hypot(1.5, -2.5, 0.5))