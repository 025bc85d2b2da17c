"""Export the outline of an element as an svg polygon.

:author: Shay Hill
:created: 2025-11-07
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from element_core.constructors import new_element
from element_core.nsmap import new_qname
from element_core.string_conversion import format_numbers

if TYPE_CHECKING:
    from lxml.etree import (
        _Element as EtreeElement,  # pyright: ignore[reportPrivateUsage]
    )

    from element_core.attrib_hints import ElemAttrib
    from element_core.element import Element
    from element_core.geometry import Point


def svg_points(points: tuple[Point, ...] | list[Point]) -> str:
    """Create a points string for an svg polygon or polyline.

    :param points: (x, y) points
    :return: "x0,y0 x1,y1 ..." with each number formatted
    """
    return " ".join(",".join(format_numbers(p)) for p in points)


def new_poly_element(
    elem: Element, angle: float = 0.0, **attributes: ElemAttrib
) -> EtreeElement:
    """Create an svg polygon around an element.

    :param elem: the element to outline
    :param angle: rotation in degrees about the element center
    :param attributes: additional attributes for the polygon element (e.g.,
        ``stroke_width=1`` becomes ``stroke-width="1"``)
    :return: a new svg <polygon> with the corners of elem, clockwise from top left
    """
    points = svg_points(elem.get_poly(angle))
    return new_element(new_qname("svg", "polygon"), points=points, **attributes)
