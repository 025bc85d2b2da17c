"""Test the pose undo record.

:author: Shay Hill
:created: 2025-11-09
"""

import logging

import pytest
from conftest import new_box, pose

from element_core.element import ElementChange, element_change_new
from element_core.handles import HandleId


class TestSwap:
    """Apply and revert both swap the stored pose with the element pose."""

    def test_revert_then_revert(self) -> None:
        elem = new_box((1, 1), 3, 4)
        change = elem.change_new()
        elem.corner, elem.width, elem.height = (5, 5), 7, 8

        change.revert()
        assert pose(elem) == ((1, 1), 3, 4)
        assert (change.corner, change.width, change.height) == ((5, 5), 7, 8)

        change.revert()
        assert pose(elem) == ((5, 5), 7, 8)
        assert (change.corner, change.width, change.height) == ((1, 1), 3, 4)

    def test_apply_twice_is_identity(self) -> None:
        elem = new_box((1, 1), 3, 4)
        change = elem.change_new()
        elem.move_handle(HandleId.RESIZE_SE, (9, 9))
        after_drag = pose(elem)
        change.apply()
        change.apply()
        assert pose(elem) == after_drag

    def test_undo_redo_drag(self) -> None:
        """Snapshot, drag, undo, redo."""
        elem = new_box((0, 0), 2, 2)
        change = elem.change_new()
        elem.move_handle(HandleId.RESIZE_SE, (5, 3))
        elem.update_data()

        change.revert()
        elem.update_data()
        assert pose(elem) == ((0, 0), 2, 2)
        assert elem.resize_handles[7].pos == (2, 2)

        change.apply()
        elem.update_data()
        assert pose(elem) == ((0, 0), 5, 3)
        assert elem.resize_handles[7].pos == (5, 3)

    def test_aspect_drag(self) -> None:
        elem = new_box((0, 0), 10, 10)
        change = elem.change_new()
        elem.move_handle_aspect(HandleId.RESIZE_NW, (2, 6), 2)
        change.revert()
        assert pose(elem) == ((0, 0), 10, 10)

    def test_own_object_accepted(self) -> None:
        elem = new_box((1, 1), 3, 4)
        change = elem.change_new()
        elem.width = 10
        change.revert(elem.object)
        assert elem.width == 3

    def test_foreign_object_refused(self, caplog: pytest.LogCaptureFixture) -> None:
        elem = new_box((1, 1), 3, 4)
        other = new_box((0, 0), 1, 1)
        change = elem.change_new()
        elem.width = 10
        with caplog.at_level(logging.WARNING):
            change.revert(other.object)
        assert elem.width == 10
        assert pose(other) == ((0, 0), 1, 1)
        assert "does not belong" in caplog.text

    def test_free(self) -> None:
        """Free releases nothing and leaves the element alone."""
        elem = new_box((1, 1), 3, 4)
        change = elem.change_new()
        change.free()
        assert pose(elem) == ((1, 1), 3, 4)


class TestElementChangeNew:
    def test_records_current_pose(self) -> None:
        """Pose arguments are ignored. The current pose is recorded."""
        elem = new_box((1, 1), 3, 4)
        change = element_change_new((100, 100), 50, 60, elem)
        assert isinstance(change, ElementChange)
        assert (change.corner, change.width, change.height) == ((1, 1), 3, 4)
        assert change.element is elem

    def test_no_element(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING):
            change = element_change_new((0, 0), 1, 1, None)
        assert change is None
        assert "without an element" in caplog.text

    def test_record_after_mutation_is_useless(self) -> None:
        """A record created after the change holds the changed pose."""
        elem = new_box((1, 1), 3, 4)
        elem.width = 10
        change = element_change_new(elem.corner, 3, elem.height, elem)
        assert change is not None
        change.revert()
        assert elem.width == 10
