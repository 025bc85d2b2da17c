"""Test the common element property descriptions and accessors.

:author: Shay Hill
:created: 2025-11-10
"""

import logging

import pytest
from conftest import new_box, pose

from element_core.properties import (
    ELEMENT_COMMON_PROPERTIES,
    MAXFLOAT,
    WIDTH_RANGE,
    PropType,
)


class TestDescriptions:
    def test_names(self) -> None:
        names = [p.name for p in ELEMENT_COMMON_PROPERTIES]
        assert names == ["elem_corner", "elem_width", "elem_height"]

    def test_types(self) -> None:
        types = [p.type for p in ELEMENT_COMMON_PROPERTIES]
        assert types == [PropType.POINT, PropType.REAL, PropType.REAL]

    def test_width_range(self) -> None:
        assert WIDTH_RANGE == (-MAXFLOAT, MAXFLOAT, 0.1)
        assert ELEMENT_COMMON_PROPERTIES[1].number_range is WIDTH_RANGE
        assert ELEMENT_COMMON_PROPERTIES[2].number_range is WIDTH_RANGE
        assert ELEMENT_COMMON_PROPERTIES[0].number_range is None


class TestGetSet:
    def test_get(self) -> None:
        elem = new_box((1, 2), 3, 4)
        assert elem.get_props() == {
            "elem_corner": (1, 2),
            "elem_width": 3,
            "elem_height": 4,
        }

    def test_set(self) -> None:
        elem = new_box((1, 2), 3, 4)
        elem.set_props({"elem_corner": (5, 6), "elem_width": 7, "elem_height": 8})
        assert pose(elem) == ((5, 6), 7, 8)

    def test_round_trip(self) -> None:
        elem = new_box((1, 2), 3, 4)
        other = new_box()
        other.set_props(elem.get_props())
        assert pose(other) == pose(elem)

    def test_unknown(self, caplog: pytest.LogCaptureFixture) -> None:
        elem = new_box((1, 2), 3, 4)
        with caplog.at_level(logging.WARNING):
            elem.set_props({"elem_depth": 9, "elem_width": 5})
        assert pose(elem) == ((1, 2), 5, 4)
        assert "elem_depth" in caplog.text

    def test_negative(self, caplog: pytest.LogCaptureFixture) -> None:
        elem = new_box((1, 2), 3, 4)
        with caplog.at_level(logging.WARNING):
            elem.set_props({"elem_width": -1, "elem_height": 6})
        assert pose(elem) == ((1, 2), 3, 6)
        assert "negative" in caplog.text
