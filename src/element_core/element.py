"""A rectangular diagram object with resize handles and connection points.

:author: Shay Hill
:created: 2025-11-06

An Element is a box. It has non-connectable resize handles on its corners and on
the middles of its edges, connection points in the same places as the handles,
and a main connection point in the middle.

    NW  N  NE
    W   +   E
    SW  S  SE

The pose of an element is (corner, width, height). Corner is the top left in a
y-down coordinate system.

Nothing here re-derives decorations after the pose changes. The caller moves a
handle, then calls ``update_data`` (or ``update_handles``,
``update_connections_rectangle``, and ``update_boundingbox`` separately).

A typical drag, with undo:

    ```
    change = element.change_new()
    element.move_handle(HandleId.RESIZE_SE, (5, 3))
    element.update_data()
    undo_stack.push(change)
    ```

The change record must be created *before* the element is moved. It records the
pose the element has when the record is created.
"""

from __future__ import annotations

import copy
import dataclasses
import logging
from typing import TYPE_CHECKING

from element_core.base_object import DiagramObject
from element_core.bounding_box import ElementBBExtras, rectangle_bbox
from element_core.connections import (
    NUM_RECTANGLE_CONNECTIONS,
    infer_connection_directions,
    layout_rectangle_connections,
)
from element_core.geometry import Rectangle, point_sub
from element_core.handles import (
    RESIZE_HANDLE_IDS,
    Handle,
    HandleConnectType,
    HandleId,
    HandleType,
    canonical_handle_pos,
    is_resize_handle,
)
from element_core.persistence import (
    attribute_first_data,
    data_add_point,
    data_add_real,
    data_point,
    data_real,
    find_attribute,
    new_attribute,
)
from element_core.properties import ELEMENT_COMMON_PROPERTIES
from element_core.transformations import new_rotation_about, transform_points

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from lxml.etree import (
        _Element as EtreeElement,  # pyright: ignore[reportPrivateUsage]
    )
    from typing_extensions import Self

    from element_core.base_object import ObjectChange
    from element_core.connections import ConnectionPoint
    from element_core.geometry import Point
    from element_core.handles import HandleMoveReason, ModifierKeys

_log = logging.getLogger(__name__)

NUM_RESIZE_HANDLES = len(RESIZE_HANDLE_IDS)

DEFAULT_CORNER: Point = (0.0, 0.0)
DEFAULT_WIDTH = 1.0
DEFAULT_HEIGHT = 1.0

# which side of the box each handle drags
_WEST = frozenset({HandleId.RESIZE_NW, HandleId.RESIZE_W, HandleId.RESIZE_SW})
_EAST = frozenset({HandleId.RESIZE_NE, HandleId.RESIZE_E, HandleId.RESIZE_SE})
_NORTH = frozenset({HandleId.RESIZE_NW, HandleId.RESIZE_N, HandleId.RESIZE_NE})
_SOUTH = frozenset({HandleId.RESIZE_SW, HandleId.RESIZE_S, HandleId.RESIZE_SE})


def _anchor_fraction(
    handle_id: HandleId, near: frozenset[HandleId], far: frozenset[HandleId]
) -> float:
    """How much of a size change the corner absorbs along one axis.

    :return: 1 if the handle drags the near (west or north) side, 0 if it drags
        the far side, 0.5 if it drags neither
    """
    if handle_id in near:
        return 1.0
    if handle_id in far:
        return 0.0
    return 0.5


class Element:
    """An axis-aligned box with eight resize handles and nine connection points.

    :param corner: top left (x, y)
    :param width: extent along x, not negative
    :param height: extent along y, not negative

    A new Element has no handle slots or connection points on its object. Call
    ``init`` before use.
    """

    def __init__(
        self,
        corner: Point = DEFAULT_CORNER,
        width: float = 0.0,
        height: float = 0.0,
    ) -> None:
        """Create an element. It is not usable until ``init`` is called."""
        self.object = DiagramObject()
        self.corner: Point = corner
        self.width = width
        self.height = height
        self.resize_handles = [Handle(id=i) for i in RESIZE_HANDLE_IDS]
        self.extra_spacing = ElementBBExtras()

    def __repr__(self) -> str:
        """Show the pose."""
        cls = type(self).__name__
        return f"{cls}(corner={self.corner}, width={self.width}, height={self.height})"

    # ===========================================================================
    #   lifecycle
    # ===========================================================================

    def init(
        self, num_handles: int = NUM_RESIZE_HANDLES, num_connections: int = 9
    ) -> None:
        """Set up handle slots and connection points.

        :param num_handles: number of handle slots, at least 8. The first eight
            are the element's resize handles. A subtype fills any others.
        :param num_connections: number of connection points, at least 9. These
            are created on the object, but not placed. The subtype places them
            (usually with ``update_connections_rectangle``) and flags its main
            point.
        """
        if num_handles < NUM_RESIZE_HANDLES:
            _log.error("An element needs at least 8 handles, got %d.", num_handles)
            return
        if num_connections < NUM_RECTANGLE_CONNECTIONS:
            _log.error(
                "An element needs at least 9 connection points, got %d.",
                num_connections,
            )
            return

        self.object.init(num_handles, num_connections)
        for i, handle in enumerate(self.resize_handles):
            handle.connect_type = HandleConnectType.NONCONNECTABLE
            handle.connected_to = None
            handle.type = HandleType.MAJOR_CONTROL
            self.object.handles[i] = handle

    def copy(self) -> Self:
        """Copy an element.

        :return: a new element with the same pose and extra spacing. Its handle
            slots and connection points are new, in the same places, and
            connected to nothing.

        A subtype with more state should extend this and copy that state onto the
        returned element.
        """
        new = copy.copy(self)
        new.object = self.object.copy()
        new.resize_handles = [
            dataclasses.replace(h, connected_to=None) for h in self.resize_handles
        ]
        for i, handle in enumerate(new.resize_handles):
            if i < new.object.num_handles:
                new.object.handles[i] = handle
        new.extra_spacing = dataclasses.replace(self.extra_spacing)
        return new

    def destroy(self) -> None:
        """Disconnect the element and release its handles and connection points.

        The element is not usable afterward.
        """
        self.object.destroy()

    @property
    def connections(self) -> list[ConnectionPoint]:
        """The connection points of the underlying object."""
        return self.object.connections

    @property
    def center(self) -> Point:
        """Middle of the element."""
        x, y = self.corner
        return x + self.width / 2.0, y + self.height / 2.0

    # ===========================================================================
    #   derived decorations
    # ===========================================================================

    def update_boundingbox(self) -> None:
        """Set object.bounding_box to the element rectangle plus extra spacing."""
        rect = Rectangle.from_corner(self.corner, self.width, self.height)
        self.object.bounding_box = rectangle_bbox(rect, self.extra_spacing)

    def update_handles(self) -> None:
        """Move the resize handles to the corners and edge middles of the element."""
        for i, (handle_id, handle) in enumerate(
            zip(RESIZE_HANDLE_IDS, self.resize_handles)
        ):
            handle.id = handle_id
            handle.pos = canonical_handle_pos(self.corner, self.width, self.height, i)

    def update_connections_rectangle(
        self, cps: Sequence[ConnectionPoint] | None = None
    ) -> None:
        """Place nine connection points on the rectangle and its center.

        :param cps: the connection points to place, usually (and by default)
            self.connections. Only the first nine are written. The order is
            left-to-right, top row first, then the center: NW, N, NE, W, E, SW, S,
            SE, CENTER. Existing saved files depend on this order.
        """
        cps = self.connections if cps is None else cps
        if min(len(cps), self.object.num_connections) < NUM_RECTANGLE_CONNECTIONS:
            _log.error(
                "Cannot place 9 connection points on an element with %d.",
                min(len(cps), self.object.num_connections),
            )
            return
        layout_rectangle_connections(cps, self.corner, self.width, self.height)

    def update_connections_directions(
        self, cps: Sequence[ConnectionPoint] | None = None
    ) -> None:
        """Set connection point directions by quadrant about the element center.

        :param cps: the connection points, usually (and by default)
            self.connections. The first ``object.num_connections`` are updated.

        Works for any number of connection points. Works best for symmetric
        elements.
        """
        cps = self.connections if cps is None else cps
        infer_connection_directions(cps[: self.object.num_connections], self.center)

    def update_data(self) -> None:
        """Bring handles, connection points, bounds, and position in line with pose.

        A subtype that places its connection points differently should override
        this.
        """
        self.update_handles()
        self.update_connections_rectangle()
        self.update_boundingbox()
        self.object.position = self.corner

    # ===========================================================================
    #   resize
    # ===========================================================================

    def move_handle(
        self,
        handle_id: HandleId,
        to: Point,
        cp: ConnectionPoint | None = None,
        reason: HandleMoveReason | None = None,
        modifiers: ModifierKeys | None = None,
    ) -> ObjectChange | None:
        """Drag one of the resize handles.

        :param handle_id: which handle. Must be one of the eight resize ids.
        :param to: where the handle is dragged to
        :param cp: ignored
        :param reason: ignored
        :param modifiers: ignored
        :return: None. Snapshot the pose with ``change_new`` before the drag.

        A side dragged toward the opposite side stops short of it. Width and height
        never go negative, and the held handle never crosses the far side.
        """
        del cp, reason, modifiers
        if not is_resize_handle(handle_id):
            _log.warning("move_handle called with wrong handle id %s.", handle_id)
            return None

        x, y = self.corner
        to_x, to_y = to
        dx, dy = point_sub(to, self.corner)

        if handle_id in _WEST and to_x < x + self.width:
            x += dx
            self.width -= dx
        elif handle_id in _EAST and dx > 0:
            self.width = dx

        if handle_id in _NORTH and to_y < y + self.height:
            y += dy
            self.height -= dy
        elif handle_id in _SOUTH and dy > 0:
            self.height = dy

        self.corner = (x, y)
        return None

    def move_handle_aspect(
        self, handle_id: HandleId, to: Point, aspect_ratio: float
    ) -> None:
        """Drag one of the resize handles, keeping width / height fixed.

        :param handle_id: which handle. Must be one of the eight resize ids.
        :param to: where the handle is dragged to
        :param aspect_ratio: width / height to keep. Must be positive.

        The larger of the two dragged sizes wins. An edge handle drags only one
        size, so the other follows it. The side (or corner) opposite the handle
        stays put. An edge handle grows the element evenly on both sides of its
        axis. Dragging through the opposite side collapses the element to zero
        size.
        """
        if not is_resize_handle(handle_id):
            _log.warning(
                "move_handle_aspect called with wrong handle id %s.", handle_id
            )
            return
        if aspect_ratio <= 0:
            _log.warning(
                "move_handle_aspect needs a positive aspect ratio, got %s.",
                aspect_ratio,
            )
            return

        dx, dy = point_sub(to, self.corner)
        width, height = self.width, self.height

        new_width = 0.0
        if handle_id in _WEST:
            new_width = width - dx
        elif handle_id in _EAST:
            new_width = dx
        new_height = 0.0
        if handle_id in _NORTH:
            new_height = height - dy
        elif handle_id in _SOUTH:
            new_height = dy

        if new_width > new_height * aspect_ratio:
            new_height = new_width / aspect_ratio
        else:
            new_width = new_height * aspect_ratio

        if new_width < 0 or new_height < 0:
            new_width = 0.0
            new_height = 0.0

        move_x = _anchor_fraction(handle_id, _WEST, _EAST)
        move_y = _anchor_fraction(handle_id, _NORTH, _SOUTH)
        x, y = self.corner
        self.corner = (
            x - (new_width - width) * move_x,
            y - (new_height - height) * move_y,
        )
        self.width = new_width
        self.height = new_height

    # ===========================================================================
    #   undo
    # ===========================================================================

    def change_new(self) -> ElementChange:
        """Snapshot the current pose for undo. Call before changing the pose."""
        return ElementChange(self, self.corner, self.width, self.height)

    # ===========================================================================
    #   read-time geometry
    # ===========================================================================

    def get_poly(self, angle: float = 0.0) -> tuple[Point, Point, Point, Point]:
        """Get the corners of the element, optionally rotated about its center.

        :param angle: rotation in degrees. With y pointing down, positive angles
            turn clockwise on screen.
        :return: four corners clockwise from top left: NW, NE, SE, SW

        The element itself is not rotated.
        """
        rect = Rectangle.from_corner(self.corner, self.width, self.height)
        corners = rect.corners
        if angle != 0:
            tmat = new_rotation_about(self.center, angle)
            nw, ne, se, sw = transform_points(tmat, corners)
            return nw, ne, se, sw
        return corners

    # ===========================================================================
    #   persistence
    # ===========================================================================

    def save(self, obj_node: EtreeElement) -> None:
        """Write the element to an object node.

        Writes whatever the underlying object writes, then elem_corner,
        elem_width, and elem_height.
        """
        self.object.save(obj_node)
        data_add_point(new_attribute(obj_node, "elem_corner"), self.corner)
        data_add_real(new_attribute(obj_node, "elem_width"), self.width)
        data_add_real(new_attribute(obj_node, "elem_height"), self.height)

    def load(self, obj_node: EtreeElement) -> None:
        """Read the element from an object node.

        Missing attributes fall back to corner (0, 0), width 1, and height 1.

        :raises ValueError: if an attribute is present but cannot be read
        """
        self.object.load(obj_node)

        self.corner = DEFAULT_CORNER
        attr = find_attribute(obj_node, "elem_corner")
        if attr is not None:
            self.corner = data_point(attribute_first_data(attr))

        self.width = DEFAULT_WIDTH
        attr = find_attribute(obj_node, "elem_width")
        if attr is not None:
            self.width = data_real(attribute_first_data(attr))

        self.height = DEFAULT_HEIGHT
        attr = find_attribute(obj_node, "elem_height")
        if attr is not None:
            self.height = data_real(attribute_first_data(attr))

    # ===========================================================================
    #   properties
    # ===========================================================================

    def get_props(self) -> dict[str, Point | float]:
        """Get the common element properties by name."""
        return {
            "elem_corner": self.corner,
            "elem_width": self.width,
            "elem_height": self.height,
        }

    def set_props(self, props: Mapping[str, Point | float]) -> None:
        """Set common element properties by name.

        :param props: any of elem_corner, elem_width, and elem_height. Unknown
            names are skipped with a warning. A negative width or height is
            skipped with a warning.
        """
        known = {p.name for p in ELEMENT_COMMON_PROPERTIES}
        for name, value in props.items():
            if name not in known:
                _log.warning("Element has no property %s.", name)
                continue
            if name == "elem_corner":
                x, y = value  # type: ignore[misc]
                self.corner = (float(x), float(y))
                continue
            size = float(value)  # type: ignore[arg-type]
            if size < 0:
                _log.warning("Skipping negative %s %s.", name, size)
                continue
            if name == "elem_width":
                self.width = size
            else:
                self.height = size


class ElementChange:
    """Undo record for the pose of an element.

    :param element: the element that changed
    :param corner: the corner to restore
    :param width: the width to restore
    :param height: the height to restore

    Apply and revert are the same swap: exchange the stored pose with the pose of
    the element. The swap is its own inverse, so the record works as long as apply
    and revert alternate.
    """

    def __init__(
        self, element: Element, corner: Point, width: float, height: float
    ) -> None:
        """Store an element and the pose to swap back into it."""
        self.element = element
        self.corner = corner
        self.width = width
        self.height = height

    def __repr__(self) -> str:
        """Show the stored pose."""
        return (
            f"ElementChange(corner={self.corner}, width={self.width}, "
            + f"height={self.height})"
        )

    def _swap(self, obj: DiagramObject | None) -> None:
        """Exchange the stored pose with the element pose.

        :param obj: None or the element's own object. Anything else is refused.
        """
        if obj is not None and obj is not self.element.object:
            _log.warning("ElementChange applied to an object it does not belong to.")
            return
        elem = self.element
        self.corner, elem.corner = elem.corner, self.corner
        self.width, elem.width = elem.width, self.width
        self.height, elem.height = elem.height, self.height

    def apply(self, obj: DiagramObject | None = None) -> None:
        """Redo: swap the stored pose into the element."""
        self._swap(obj)

    def revert(self, obj: DiagramObject | None = None) -> None:
        """Undo: swap the stored pose into the element."""
        self._swap(obj)

    def free(self) -> None:
        """Nothing to release. The record holds only a reference and numbers."""


def element_change_new(
    corner: Point, width: float, height: float, elem: Element | None
) -> ElementChange | None:
    """Create an undo record for the pose of an element.

    :param corner: ignored
    :param width: ignored
    :param height: ignored
    :param elem: the element about to change
    :return: a record of the *current* pose of elem, or None if elem is None

    The pose arguments are not recorded. The record takes the pose elem has right
    now, so create it before changing elem.
    """
    del corner, width, height
    if elem is None:
        _log.warning("element_change_new called without an element.")
        return None
    return elem.change_new()
