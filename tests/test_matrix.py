import math

import pytest

from minirt.matrix import (Matrix, identity, rotate_align, rotate_axis_angle,
                           scaling, translation, view_transform)
from minirt.tuple import point, vector


def flat(m):
    return [value for row in m.rows for value in row]


SAMPLE = Matrix((
    (-5, 2, 6, -8),
    (1, -5, 1, 8),
    (7, 7, -6, -7),
    (1, -3, 7, 4),
))
OTHER = Matrix((
    (3, -9, 7, 3),
    (3, -8, 2, -9),
    (-4, 4, 4, 1),
    (-6, 5, -1, 1),
))


def test_identity_is_neutral():
    assert identity(4) @ SAMPLE == SAMPLE
    assert SAMPLE @ identity(4) == SAMPLE


def test_two_by_two_determinant():
    assert Matrix(((1, 5), (-3, 2))).determinant() == 17


def test_transpose_twice_is_original():
    assert SAMPLE.transpose().transpose() == SAMPLE
    assert SAMPLE.transpose()[0, 1] == SAMPLE[1, 0]


def test_submatrix_drops_row_and_column():
    sub = SAMPLE.submatrix(1, 2)
    assert (sub.h, sub.w) == (3, 3)
    assert sub.rows[0] == (-5.0, 2.0, -8.0)
    assert sub.rows[1] == (7.0, 7.0, -7.0)


def test_cofactor_sign():
    assert SAMPLE.cofactor(0, 0) == SAMPLE.minor(0, 0)
    assert SAMPLE.cofactor(0, 1) == -SAMPLE.minor(0, 1)


def test_determinant_multiplicative():
    assert (SAMPLE @ OTHER).determinant() == pytest.approx(
        SAMPLE.determinant() * OTHER.determinant())
    assert SAMPLE.transpose().determinant() == pytest.approx(
        SAMPLE.determinant())


def test_inverse_gives_identity():
    assert flat(SAMPLE @ SAMPLE.inverse()) == pytest.approx(
        flat(identity(4)), abs=1e-9)


def test_inverse_undoes_product():
    product = SAMPLE @ OTHER
    assert flat(product @ OTHER.inverse()) == pytest.approx(flat(SAMPLE))


def test_singular_matrix_raises():
    singular = Matrix(((1, 2, 3), (2, 4, 6), (0, 1, 1)))
    with pytest.raises(ValueError):
        singular.inverse()


def test_non_square_determinant_raises():
    with pytest.raises(ValueError):
        Matrix(((1, 2, 3), (4, 5, 6))).determinant()


def test_ragged_rows_rejected():
    with pytest.raises(ValueError):
        Matrix(((1, 2), (3,)))


def test_multiply_by_column():
    column = Matrix(((1,), (2,), (3,), (1,)))
    result = identity(4) @ column
    assert (result.h, result.w) == (4, 1)
    assert result == column


def test_translation_moves_points_not_vectors():
    offset = vector(5, -3, 2)
    m = translation(offset)
    assert m.apply(point(0, 0, 0)) == point(5, -3, 2)
    assert m.apply(vector(-3, 4, 5)) == vector(-3, 4, 5)


def test_translation_inverse():
    offset = vector(5, -3, 2)
    assert flat(translation(offset).inverse()) == pytest.approx(
        flat(translation(-offset)))


def test_scaling_point():
    assert scaling(point(2, 3, 4)).apply(point(1, 1, 1)) == point(2, 3, 4)
    assert scaling(point(2, 3, 4)).apply(vector(1, 1, 1)).is_vector()


def test_rotate_axis_angle_zero_is_identity():
    assert flat(rotate_axis_angle(vector(0, 1, 0), 0)) == pytest.approx(
        flat(identity(4)))


def test_rotation_keeps_axis_and_length():
    axis = vector(1, 2, 2).normalize()
    m = rotate_axis_angle(axis, 1.1)
    assert m.apply(axis).approx_equals(axis)
    v = vector(3, -1, 4)
    assert m.apply(v).length() == pytest.approx(v.length())


def test_rotate_align_maps_first_onto_second():
    v1 = vector(0, 1, 0)
    v2 = vector(1, 1, 1).normalize()
    assert rotate_align(v1, v2).apply(v1).approx_equals(v2)


def test_rotate_align_parallel_raises():
    with pytest.raises(ValueError):
        rotate_align(vector(0, 1, 0), vector(0, 1, 0))


def test_default_view_transform_is_identity():
    m = view_transform(point(0, 0, 0), point(0, 0, -1), vector(0, 1, 0))
    assert flat(m) == pytest.approx(flat(identity(4)))