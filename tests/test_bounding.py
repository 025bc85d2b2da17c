"""Test the bounding box of an element.

:author: Shay Hill
:created: 2025-11-08
"""

from conftest import new_box

from element_core.bounding_box import ElementBBExtras, rectangle_bbox
from element_core.geometry import Rectangle


class TestRectangleBBox:
    def test_no_extras(self):
        rect = Rectangle(0, 0, 4, 2)
        assert rectangle_bbox(rect, ElementBBExtras()) == rect

    def test_pads_every_side(self):
        bbox = rectangle_bbox(Rectangle(0, 0, 4, 2), ElementBBExtras(border_trans=0.5))
        assert bbox == Rectangle(-0.5, -0.5, 4.5, 2.5)

    def test_returns_new_rectangle(self):
        rect = Rectangle(0, 0, 4, 2)
        _ = rectangle_bbox(rect, ElementBBExtras(border_trans=1))
        assert rect == Rectangle(0, 0, 4, 2)


class TestUpdateBoundingBox:
    """The bounding box covers the element plus its extra spacing."""

    def test_geometry_only(self) -> None:
        elem = new_box((10, 20), 3, 4)
        elem.update_boundingbox()
        assert elem.object.bounding_box == Rectangle(10, 20, 13, 24)

    def test_with_line_width(self) -> None:
        elem = new_box((10, 20), 3, 4)
        elem.extra_spacing.border_trans = 0.25
        elem.update_boundingbox()
        assert elem.object.bounding_box == Rectangle(9.75, 19.75, 13.25, 24.25)

    def test_encloses_element(self) -> None:
        elem = new_box((-5, 7), 2.5, 0)
        elem.extra_spacing.border_trans = 0.1
        elem.update_boundingbox()
        geometry = Rectangle.from_corner(elem.corner, elem.width, elem.height)
        assert elem.object.bounding_box.encloses(geometry)

    def test_follows_pose(self) -> None:
        """The bounding box is stale until updated."""
        elem = new_box((0, 0), 1, 1)
        elem.width = 5
        assert elem.object.bounding_box == Rectangle(0, 0, 1, 1)
        elem.update_boundingbox()
        assert elem.object.bounding_box == Rectangle(0, 0, 5, 1)
