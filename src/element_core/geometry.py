"""Points and axis-aligned rectangles in a y-down coordinate system.

:author: Shay Hill
:created: 2025-11-02

Points are plain (x, y) tuples. Nothing here mutates a point. An element that
"moves its corner" rebinds ``corner`` to a new tuple.
"""

from __future__ import annotations

import dataclasses
import math
from typing import TypeAlias

Point: TypeAlias = tuple[float, float]

_Corners: TypeAlias = tuple[Point, Point, Point, Point]


def point_add(pnt_a: Point, pnt_b: Point) -> Point:
    """Add two points (vectors).

    :param pnt_a: (x, y)
    :param pnt_b: (x, y)
    :return: (xa + xb, ya + yb)
    """
    return pnt_a[0] + pnt_b[0], pnt_a[1] + pnt_b[1]


def point_sub(pnt_a: Point, pnt_b: Point) -> Point:
    """Subtract pnt_b from pnt_a.

    :param pnt_a: (x, y)
    :param pnt_b: (x, y)
    :return: (xa - xb, ya - yb)
    """
    return pnt_a[0] - pnt_b[0], pnt_a[1] - pnt_b[1]


def point_scale(pnt: Point, scale: float) -> Point:
    """Scale a point (vector) about the origin."""
    return pnt[0] * scale, pnt[1] * scale


def point_distance(pnt_a: Point, pnt_b: Point) -> float:
    """Euclidean distance between two points."""
    return math.dist(pnt_a, pnt_b)


@dataclasses.dataclass
class Rectangle:
    """Mutable axis-aligned rectangle.

    :param left: minimum x value
    :param top: minimum y value (y grows downward)
    :param right: maximum x value
    :param bottom: maximum y value

    This is the shape of a bounding box in the host editor: four edges rather than
    a corner and a size. Use ``from_corner`` to build one from an element pose.
    """

    left: float = 0.0
    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0

    @classmethod
    def from_corner(cls, corner: Point, width: float, height: float) -> Rectangle:
        """Create a rectangle from a top-left corner and a size.

        :param corner: top-left (x, y)
        :param width: extent along x
        :param height: extent along y
        :return: Rectangle(x, y, x + width, y + height)
        """
        x, y = corner
        return cls(x, y, x + width, y + height)

    @property
    def width(self) -> float:
        """Extent along x."""
        return self.right - self.left

    @property
    def height(self) -> float:
        """Extent along y."""
        return self.bottom - self.top

    @property
    def center(self) -> Point:
        """Midpoint of the rectangle."""
        return (self.left + self.right) / 2, (self.top + self.bottom) / 2

    @property
    def corners(self) -> _Corners:
        """Get the corners of the rectangle. CW from top left (y down)."""
        return (
            (self.left, self.top),
            (self.right, self.top),
            (self.right, self.bottom),
            (self.left, self.bottom),
        )

    def values(self) -> tuple[float, float, float, float]:
        """Get the edges of the rectangle.

        :return: left, top, right, bottom
        """
        return self.left, self.top, self.right, self.bottom

    def contains(self, point: Point) -> bool:
        """Return True if point lies inside or on the edge of the rectangle."""
        x, y = point
        return self.left <= x <= self.right and self.top <= y <= self.bottom

    def encloses(self, other: Rectangle) -> bool:
        """Return True if other lies entirely inside (or on the edge of) self."""
        return all(self.contains(c) for c in other.corners)

    @classmethod
    def union(cls, *rects: Rectangle) -> Rectangle:
        """Create a rectangle around all other rectangles.

        :param rects: one or more rectangles
        :return: a rectangle encompassing all rects args
        :raises ValueError: if no rects are given
        """
        if not rects:
            msg = "At least one rectangle is required"
            raise ValueError(msg)
        return cls(
            min(r.left for r in rects),
            min(r.top for r in rects),
            max(r.right for r in rects),
            max(r.bottom for r in rects),
        )
