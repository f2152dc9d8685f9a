import math

import pytest

from stellargen.matrix import (
    Matrix,
    absolute,
    determinant,
    direct_sum,
    dot,
    expand,
    expm,
    identity,
    inverse,
    kronecker_product,
    maximum,
    minimum,
    sign,
    to_column_matrix,
    to_row_matrix,
    to_vector,
    transpose,
)
from stellargen.vector import Vector


def _assert_close(a, b, tol=1e-9):
    assert a.shape == b.shape
    for x, y in zip(a, b):
        assert x == pytest.approx(y, abs=tol)


@pytest.fixture
def sample():
    return Matrix([[2, -1, 3], [0, 4, -5], [1, 2, 6]])


def test_shape_and_indexing(sample):
    assert sample.shape == (3, 3)
    assert sample[1, 2] == -5
    assert sample[0] == [2, -1, 3]
    sample[1, 2] = 7
    assert sample[1, 2] == 7


def test_set_row_length_checked(sample):
    with pytest.raises(ValueError):
        sample[0] = [1, 2]
    assert sample[0] == [2, -1, 3]


def test_ragged_rows_rejected():
    with pytest.raises(ValueError):
        Matrix([[1, 2], [3]])


def test_iteration_is_row_major(sample):
    assert list(sample) == [2, -1, 3, 0, 4, -5, 1, 2, 6]


def test_zeros_shape_and_content():
    z = Matrix.zeros(2, 3)
    assert z.shape == (2, 3)
    assert all(x == 0 for x in z)


def test_str_format():
    assert str(Matrix([[1, 2], [3, 4]])) == "Mat[2x2]:\n  1 2\n  3 4\n  "


def test_scalar_round_trip(sample):
    assert (sample + 3) - 3 == sample
    assert 3 + sample == sample + 3
    assert (sample * 2) / 2 == sample
    assert 2 * sample == sample + sample


def test_scalar_on_left_subtracts_from_elements(sample):
    assert 3 - sample == sample - 3


def test_elementwise_matrix_ops(sample):
    other = Matrix([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
    assert (sample + other) - other == sample
    assert (sample * other) / other == sample


def test_shape_mismatch_raises(sample):
    with pytest.raises(ValueError):
        sample + Matrix([[1, 2], [3, 4]])


def test_minimum_and_maximum(sample):
    assert minimum(sample) == min(list(sample))
    assert maximum(sample) == max(list(sample))
    clamped = minimum(sample, 1)
    assert all(x <= 1 for x in clamped)
    assert all(c == s for c, s in zip(clamped, sample) if s <= 1)
    raised = maximum(sample, 1)
    assert all(x >= 1 for x in raised)
    both = maximum(minimum(sample, identity(3)), minimum(sample, identity(3)))
    assert both == minimum(sample, identity(3))


def test_elementwise_min_max_invariant(sample):
    other = Matrix([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
    assert minimum(sample, other) + maximum(sample, other) == sample + other


def test_absolute_and_sign(sample):
    assert all(x >= 0 for x in absolute(sample))
    assert sign(sample) * absolute(sample) == sample
    assert set(sign(sample)) <= {-1, 0, 1}


def test_vector_conversions_round_trip():
    v = Vector([1, 2, 3])
    assert to_row_matrix(v).shape == (1, 3)
    assert to_column_matrix(v).shape == (3, 1)
    assert to_vector(to_row_matrix(v)) == v
    assert to_vector(to_column_matrix(v)) == v


def test_to_vector_rejects_full_matrix(sample):
    with pytest.raises(ValueError):
        to_vector(sample)


def test_dot_with_identity(sample):
    assert dot(identity(3), sample) == sample
    assert dot(sample, identity(3)) == sample


def test_dot_shape_mismatch():
    with pytest.raises(ValueError):
        dot(Matrix([[1, 2]]), Matrix([[1, 2]]))


def test_dot_with_vectors_matches_matrix_product(sample):
    v = Vector([1, -2, 4])
    assert dot(sample, v) == to_vector(dot(sample, to_column_matrix(v)))
    assert dot(v, sample) == to_vector(dot(to_row_matrix(v), sample))


def test_dot_rejects_other_types(sample):
    with pytest.raises(TypeError):
        dot(sample, 3)


def test_transpose_involution_and_product(sample):
    other = Matrix([[1, 0, 2], [3, 1, 0], [0, 1, 1]])
    assert transpose(transpose(sample)) == sample
    assert transpose(dot(sample, other)) == dot(transpose(other), transpose(sample))
    rect = Matrix([[1, 2, 3], [4, 5, 6]])
    t = transpose(rect)
    assert t.shape == (3, 2)
    assert all(t[j, i] == rect[i, j] for i in range(2) for j in range(3))


def test_direct_sum_blocks():
    a = Matrix([[1, 2], [3, 4]])
    b = Matrix([[5, 6, 7]])
    s = direct_sum(a, b)
    assert s.shape == (3, 5)
    assert [row[:2] for row in (s[0], s[1])] == [a[0], a[1]]
    assert s[2][2:] == b[0]
    assert s[0][2:] == [0, 0, 0] and s[2][:2] == [0, 0]


def test_kronecker_with_identity_is_direct_sum():
    b = Matrix([[1, 2], [3, 4]])
    assert kronecker_product(identity(2), b) == direct_sum(b, b)
    assert kronecker_product(Matrix([[1, 2, 3]]), b).shape == (2, 6)


def test_determinant_triangular():
    m = Matrix([[2, 7, 1], [0, 3, 5], [0, 0, 4]])
    assert determinant(m) == pytest.approx(math.prod([2, 3, 4]))


def test_determinant_of_row_swap_changes_sign(sample):
    swap = Matrix([[0, 1], [1, 0]])
    assert determinant(swap) == -determinant(identity(2))
    swapped = Matrix([sample[1], sample[0], sample[2]])
    assert determinant(swapped) == pytest.approx(-determinant(sample))


def test_determinant_is_multiplicative(sample):
    other = Matrix([[1, 0, 2], [3, 1, 0], [0, 1, 1]])
    assert determinant(dot(sample, other)) == pytest.approx(
        determinant(sample) * determinant(other)
    )


def test_determinant_zero_column():
    assert determinant(Matrix([[0, 1], [0, 2]])) == 0


def test_determinant_non_square():
    with pytest.raises(ValueError):
        determinant(Matrix([[1, 2, 3], [4, 5, 6]]))


def test_inverse_gives_identity(sample):
    _assert_close(dot(sample, inverse(sample)), identity(3))
    _assert_close(dot(inverse(sample), sample), identity(3))


def test_inverse_of_one_by_one():
    m = Matrix([[4]])
    _assert_close(dot(m, inverse(m)), identity(1))


def test_inverse_zero_pivot_raises():
    with pytest.raises(ZeroDivisionError):
        inverse(Matrix([[0, 0], [0, 0]]))


def test_expand(sample):
    e = expand(sample)
    assert e.shape == (4, 4)
    assert e[3, 3] == 1
    assert all(e[i][:3] == sample[i] for i in range(3))
    assert [e[i, 3] for i in range(3)] == [0, 0, 0]
    assert e[3][:3] == [0, 0, 0]


def test_expm_of_zero_is_identity():
    _assert_close(expm(Matrix.zeros(3, 3)), identity(3))


def test_expm_of_diagonal():
    result = expm(Matrix([[1, 0], [0, 2]]))
    assert result[0, 0] == pytest.approx(math.exp(1), abs=1e-2)
    assert result[1, 1] == pytest.approx(math.exp(2), abs=1e-2)
    assert result[0, 1] == 0 and result[1, 0] == 0


def test_expm_non_square():
    with pytest.raises(ValueError):
        expm(Matrix([[1, 2]]))