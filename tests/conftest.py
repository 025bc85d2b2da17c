"""Test configuration for pytest.

:author: Shay Hill
:created: 2025-11-08
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any

from element_core.connections import ConnectionPointFlags
from element_core.element import Element

if TYPE_CHECKING:
    from collections.abc import Iterable

    from element_core.geometry import Point


def pytest_assertrepr_compare(
    config: Any, op: str, left: str, right: str
) -> list[str] | None:
    """See full error diffs"""
    del config
    if op in ("==", "!="):
        return [f"{left} {op} {right}"]
    return None


def new_box(corner: Point = (0, 0), width: float = 1, height: float = 1) -> Element:
    """Create an initialized element with its decorations in place.

    This is what a subtype does on creation: init, flag the middle connection
    point as main, and update.
    """
    elem = Element(corner, width, height)
    elem.init(8, 9)
    elem.connections[8].flags = ConnectionPointFlags.MAIN
    elem.update_data()
    return elem


def pose(elem: Element) -> tuple[Point, float, float]:
    """Get (corner, width, height) of an element."""
    return elem.corner, elem.width, elem.height


def points_close(points_a: Iterable[Point], points_b: Iterable[Point]) -> bool:
    """Return True if two sequences of points match within floating tolerance."""
    pairs = list(zip(points_a, points_b, strict=True))
    return all(
        math.isclose(ax, bx, abs_tol=1e-9) and math.isclose(ay, by, abs_tol=1e-9)
        for (ax, ay), (bx, by) in pairs
    )
