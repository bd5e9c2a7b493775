import math

import pytest

from linalg.vectors.geometry import (
    angle,
    angle_deg,
    cross,
    direction_cosines,
    project,
    reflect,
    rotate_2d,
    rotate_3d,
    scalar_product,
    vector_product,
)


def test_angle_perpendicular():
    assert angle([1.0, 0, 0], [0, 1.0, 0]) == pytest.approx(math.pi / 2, abs=1e-6)


def test_angle_45_degrees():
    assert angle([1.0, 0, 0], [1.0, 1.0, 0]) == pytest.approx(math.pi / 4, abs=1e-6)


def test_angle_zero_vector_error():
    with pytest.raises(ValueError, match="zero vector"):
        angle([0, 0, 0], [1, 0, 0])


def test_angle_dimension_and_empty_errors():
    with pytest.raises(ValueError, match="same dimension"):
        angle([1, 0], [1, 0, 0])
    with pytest.raises(ValueError, match="empty"):
        angle([], [])


def test_angle_parallel_and_antiparallel():
    assert angle([1, 2, 3], [2, 4, 6]) == pytest.approx(0.0, abs=1e-6)
    assert angle([1, 2, 3], [-1, -2, -3]) == pytest.approx(math.pi, abs=1e-6)


def test_angle_deg():
    assert angle_deg([1.0, 0, 0], [0, 1.0, 0]) == pytest.approx(90.0, abs=1e-6)


def test_cross_unit_axes():
    assert cross([1, 0, 0], [0, 1, 0]) == pytest.approx([0.0, 0.0, 1.0], abs=1e-6)


def test_cross_anticommutative():
    a, b = [1, 2, 3], [4, 5, 6]
    assert cross(a, b) == pytest.approx([-x for x in cross(b, a)])
    assert cross(a, b) == pytest.approx([-3.0, 6.0, -3.0])


def test_cross_requires_3d():
    with pytest.raises(ValueError, match="3D"):
        cross([1, 0], [0, 1])


def test_scalar_product_unit_cube():
    assert scalar_product([1.0, 0, 0], [0, 1.0, 0], [0, 0, 1.0]) == pytest.approx(
        1.0, abs=1e-6
    )


def test_scalar_product_coplanar():
    assert scalar_product([1.0, 0, 0], [0, 1.0, 0], [1.0, 1.0, 0]) == pytest.approx(
        0.0, abs=1e-6
    )


def test_scalar_product_requires_3d():
    with pytest.raises(ValueError, match="three 3D vectors"):
        scalar_product([1, 0], [0, 1, 0], [0, 0, 1])


def test_vector_product():
    result = vector_product([1.0, 0, 0], [0, 1.0, 0], [0, 0, 1.0])
    assert result == pytest.approx([0.0, 0.0, 0.0], abs=1e-6)


def test_vector_product_matches_nested_cross():
    a, b, c = [1, 2, 3], [4, 5, 6], [7, 8, 10]
    assert vector_product(a, b, c) == pytest.approx(cross(a, cross(b, c)))


def test_vector_product_requires_3d():
    with pytest.raises(ValueError, match="three 3D vectors"):
        vector_product([1, 0, 0], [0, 1], [0, 0, 1])


def test_project_onto_x_axis():
    assert project([3.0, 3.0, 0], [1.0, 0, 0]) == pytest.approx(
        [3.0, 0.0, 0.0], abs=1e-6
    )


def test_project_onto_zero_vector():
    with pytest.raises(ValueError, match="zero vector"):
        project([3.0, 3.0, 0], [0, 0, 0])


def test_project_errors():
    with pytest.raises(ValueError, match="same dimension"):
        project([1, 2], [1, 2, 3])
    with pytest.raises(ValueError, match="empty"):
        project([], [])


def test_reflect():
    assert reflect([1.0, 1.0, 0], [0, 1.0, 0]) == pytest.approx(
        [1.0, -1.0, 0.0], abs=1e-6
    )


def test_reflect_dimension_error():
    with pytest.raises(ValueError):
        reflect([1, 1], [0, 1, 0])


def test_rotate_2d():
    assert rotate_2d([1.0, 0], math.pi / 2) == pytest.approx([0.0, 1.0], abs=1e-6)


def test_rotate_2d_requires_2d():
    with pytest.raises(ValueError, match="2D"):
        rotate_2d([1, 0, 0], 1.0)


def test_rotate_3d():
    result = rotate_3d([1.0, 0, 0], [0, 0, 1.0], math.pi / 2)
    assert result == pytest.approx([0.0, 1.0, 0.0], abs=1e-6)


def test_rotate_3d_axis_must_be_unit():
    with pytest.raises(ValueError, match="unit vector"):
        rotate_3d([1, 0, 0], [0, 0, 2], 1.0)


def test_rotate_3d_requires_3d():
    with pytest.raises(ValueError, match="3D"):
        rotate_3d([1, 0], [0, 0, 1], 1.0)


def test_direction_cosines():
    l, m, n = direction_cosines([3, 4, 0])
    assert (l, m, n) == pytest.approx((0.6, 0.8, 0.0))
    assert l * l + m * m + n * n == pytest.approx(1.0)


def test_direction_cosines_errors():
    with pytest.raises(ValueError, match="3D"):
        direction_cosines([1, 2])
    with pytest.raises(ValueError, match="zero vector"):
        direction_cosines([0, 0, 0])