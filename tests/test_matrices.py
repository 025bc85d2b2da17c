"""Test transformations of matrices.

:author: Shay Hill
:created: 2025-11-08
"""

import math
import random
from contextlib import suppress

import pytest

from element_core.transformations import (
    mat_apply,
    mat_dot,
    mat_invert,
    mat_set_angle_and_scales,
    new_rotation_about,
    new_transformation_matrix,
    transform_points,
)


class TestMat:
    def test_explicit(self):
        expect = (31, 46, 12, 22, 10, 14)
        assert mat_dot((1, 2, 3, 4, 5, 6), (7, 8, 9, 1, 2, 1)) == expect

    def test_apply(self):
        expect = (36, 52)
        assert mat_apply((1, 2, 3, 4, 5, 6), (7, 8)) == expect

    def test_dot_applies_right_first(self):
        """mat_dot(a, b) applied to a point is b then a."""
        mat_a = (1, 2, 3, 4, 5, 6)
        mat_b = (2, 1, 4, 3, 6, 5)
        point = (7, 8)
        expect = mat_apply(mat_a, mat_apply(mat_b, point))
        assert mat_apply(mat_dot(mat_a, mat_b), point) == expect

    def test_invert(self):
        identity = (1, 0, 0, 1, 0, 0)
        for _ in range(10):
            tmat = (
                random.randint(-10, 10),
                random.randint(-10, 10),
                random.randint(-10, 10),
                random.randint(-10, 10),
                random.randint(-10, 10),
                random.randint(-10, 10),
            )
            with suppress(ValueError):
                result = mat_dot(tmat, mat_invert(tmat))
                for x, y in zip(result, identity):
                    assert math.isclose(x, y, abs_tol=0.0001)

    def test_invert_singular(self):
        with pytest.raises(ValueError):
            _ = mat_invert((1, 2, 2, 4, 0, 0))


class TestNewMatrix:
    def test_scale_float(self) -> None:
        assert new_transformation_matrix(scale=2.0) == (2.0, 0, 0, 2.0, 0, 0)

    def test_translate(self) -> None:
        assert new_transformation_matrix(dx=3, dy=4) == (1.0, 0, 0, 1.0, 3, 4)

    def test_set_angle_keeps_translation(self) -> None:
        """The linear part is replaced. The translation is kept."""
        tmat = mat_set_angle_and_scales((5, 6, 7, 8, 9, 10), 0)
        assert tmat == (1.0, 0.0, -0.0, 1.0, 9, 10)

    def test_set_angle_quarter_turn(self) -> None:
        """A quarter turn sends +x to +y (clockwise on a y-down screen)."""
        tmat = mat_set_angle_and_scales((1, 0, 0, 1, 0, 0), math.pi / 2)
        x, y = mat_apply(tmat, (1, 0))
        assert math.isclose(x, 0, abs_tol=1e-12)
        assert math.isclose(y, 1)


class TestRotationAbout:
    def test_center_is_fixed(self) -> None:
        tmat = new_rotation_about((3, 4), 37)
        x, y = mat_apply(tmat, (3, 4))
        assert math.isclose(x, 3)
        assert math.isclose(y, 4)

    def test_half_turn(self) -> None:
        tmat = new_rotation_about((1, 1), 180)
        x, y = mat_apply(tmat, (0, 0))
        assert math.isclose(x, 2)
        assert math.isclose(y, 2)

    def test_transform_points(self) -> None:
        tmat = new_transformation_matrix(dx=1, dy=2)
        assert transform_points(tmat, [(0, 0), (1, 1)]) == [(1, 2), (2, 3)]
