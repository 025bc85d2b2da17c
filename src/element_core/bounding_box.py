"""Grow a rectangle into a bounding box.

:author: Shay Hill
:created: 2025-11-02

A stroked rectangle paints half its line width outside of its geometry. The extra
spacing records that half width so the bounding box covers everything painted.
"""

from __future__ import annotations

import dataclasses

from element_core.geometry import Rectangle


@dataclasses.dataclass
class ElementBBExtras:
    """Padding added on every side of an element's geometry.

    :param border_trans: half the line width of the element border
    """

    border_trans: float = 0.0


def rectangle_bbox(rect: Rectangle, extras: ElementBBExtras) -> Rectangle:
    """Return a new rectangle with extra spacing.

    :param rect: the geometry of the element
    :param extras: the padding to apply
    :return: a new rectangle, rect grown by extras.border_trans on every side
    """
    pad = extras.border_trans
    return Rectangle(rect.left - pad, rect.top - pad, rect.right + pad, rect.bottom + pad)
