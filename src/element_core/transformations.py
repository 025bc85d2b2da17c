"""Math for 2D affine transformation matrices.

:author: Shay Hill
:created: 2025-11-02

Matrices are 6-tuples in svg (and cairo) order. For the 3x3 matrix

[[xx, xy, x0],
 [yx, yy, y0],
 [ 0,  0,  1]]

the tuple is (xx, yx, xy, yy, x0, y0).
"""

from __future__ import annotations

import math
import numbers
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from collections.abc import Iterable

    from element_core.geometry import Point


_Matrix: TypeAlias = tuple[float, float, float, float, float, float]

IDENTITY: _Matrix = (1, 0, 0, 1, 0, 0)


def mat_dot(mat1: _Matrix, mat2: _Matrix) -> _Matrix:
    """Matrix multiplication for svg-style matrices.

    :param mat1: transformation matrix (xx, yx, xy, yy, x0, y0)
    :param mat2: transformation matrix (xx, yx, xy, yy, x0, y0)
    :return: mat1 @ mat2. Applying the result to a point is the same as applying
        mat2, then mat1.
    """
    aa = sum(mat1[x] * mat2[y] for x, y in ((0, 0), (2, 1)))
    bb = sum(mat1[x] * mat2[y] for x, y in ((1, 0), (3, 1)))
    cc = sum(mat1[x] * mat2[y] for x, y in ((0, 2), (2, 3)))
    dd = sum(mat1[x] * mat2[y] for x, y in ((1, 2), (3, 3)))
    ee = sum(mat1[x] * mat2[y] for x, y in ((0, 4), (2, 5))) + mat1[4]
    ff = sum(mat1[x] * mat2[y] for x, y in ((1, 4), (3, 5))) + mat1[5]
    return (aa, bb, cc, dd, ee, ff)


def mat_apply(matrix: _Matrix, point: Point) -> Point:
    """Apply an svg-style transformation matrix to a point.

    :param matrix: transformation matrix (a, b, c, d, e, f) describing a 3x3 matrix
        with an implied third row of (0, 0, 1)
        [[a, c, e], [b, d, f], [0, 0, 1]]
    :param point: point (x, y)
    """
    a, b, c, d, e, f = matrix
    x, y = point
    result_x = a * x + c * y + e
    result_y = b * x + d * y + f
    return result_x, result_y


def mat_invert(tmat: _Matrix) -> _Matrix:
    """Invert a 2D transformation matrix in svg format."""
    a, b, c, d, e, f = tmat
    det = a * d - b * c
    if det == 0:
        msg = "Matrix is not invertible"
        raise ValueError(msg)
    return (
        d / det,
        -b / det,
        -c / det,
        a / det,
        (c * f - d * e) / det,
        (b * e - a * f) / det,
    )


def mat_set_angle_and_scales(
    matrix: _Matrix, angle: float, scale_x: float = 1, scale_y: float = 1
) -> _Matrix:
    """Replace the linear part of a matrix with a rotation and scale.

    :param matrix: transformation matrix. Only the translation (x0, y0) is kept.
    :param angle: rotation in radians. With y pointing down, a positive angle turns
        clockwise on screen.
    :param scale_x: scale along the rotated x axis
    :param scale_y: scale along the rotated y axis
    :return: (cos*sx, sin*sx, -sin*sy, cos*sy, x0, y0)
    """
    cos, sin = math.cos(angle), math.sin(angle)
    return (cos * scale_x, sin * scale_x, -sin * scale_y, cos * scale_y, *matrix[4:])


def new_transformation_matrix(
    transformation: _Matrix | None = None,
    *,
    scale: tuple[float, float] | float | None = None,
    dx: float | None = None,
    dy: float | None = None,
) -> _Matrix:
    """Create a new transformation matrix.

    Scale, dx, and dy are applied after the transformation matrix if both are given.
    """
    transformation = transformation or IDENTITY

    if isinstance(scale, (float, int, numbers.Real)):
        scale_x, scale_y = (scale, scale)
    elif scale is None:
        scale_x, scale_y = (1, 1)
    else:
        scale_x, scale_y = scale

    dx = dx or 0
    dy = dy or 0
    return mat_dot((float(scale_x), 0, 0, float(scale_y), dx, dy), transformation)


def new_rotation_about(center: Point, angle: float) -> _Matrix:
    """Create a matrix that rotates about a center point.

    :param center: (x, y) fixed point of the rotation
    :param angle: rotation in degrees
    :return: translate(center) @ rotate(angle) @ translate(-center)
    """
    cx, cy = center
    to_origin = new_transformation_matrix(dx=-cx, dy=-cy)
    rotate_back = mat_set_angle_and_scales((1, 0, 0, 1, cx, cy), math.radians(angle))
    return mat_dot(rotate_back, to_origin)


def transform_points(matrix: _Matrix, points: Iterable[Point]) -> list[Point]:
    """Apply one transformation matrix to each of several points."""
    return [mat_apply(matrix, p) for p in points]
