"""The host object an element is built on.

:author: Shay Hill
:created: 2025-11-05

A DiagramObject owns what every diagram object has: a position, a bounding box,
a list of handles, and a list of connection points. It knows nothing about
rectangles. An Element contains one and fills in its handles.

Handle slots may be None until the owner fills them. An Element fills the first
eight with its own resize handles.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import TYPE_CHECKING, Protocol

from element_core.connections import ConnectionPoint
from element_core.geometry import Rectangle
from element_core.persistence import (
    attribute_first_data,
    data_add_point,
    data_add_rectangle,
    data_point,
    data_rectangle,
    find_attribute,
    new_attribute,
)

if TYPE_CHECKING:
    from lxml.etree import (
        _Element as EtreeElement,  # pyright: ignore[reportPrivateUsage]
    )
    from typing_extensions import Self

    from element_core.geometry import Point
    from element_core.handles import Handle, HandleId, HandleMoveReason, ModifierKeys

_log = logging.getLogger(__name__)


class ObjectChange(Protocol):
    """One reversible change on the host editor's undo stack.

    The undo stack calls ``revert`` to undo and ``apply`` to redo. Each is only
    called after the other (or, for ``revert``, after the change was made by hand).
    ``free`` is called when the stack drops the change.
    """

    def apply(self, obj: DiagramObject | None = None) -> None:
        """Redo the change."""
        ...

    def revert(self, obj: DiagramObject | None = None) -> None:
        """Undo the change."""
        ...

    def free(self) -> None:
        """Release anything held by the change."""
        ...


class SupportsObjectOps(Protocol):
    """The operations a host editor calls on any object it holds.

    Elements and their subtypes satisfy this protocol. The host dispatches through
    it rather than through a registry of types.
    """

    def move_handle(
        self,
        handle_id: HandleId,
        to: Point,
        cp: ConnectionPoint | None = None,
        reason: HandleMoveReason | None = None,
        modifiers: ModifierKeys | None = None,
    ) -> ObjectChange | None:
        """Move one handle of the object."""
        ...

    def update_data(self) -> None:
        """Bring decorations and bounding box in line with geometry."""
        ...

    def save(self, obj_node: EtreeElement) -> None:
        """Write the object to an object node."""
        ...

    def load(self, obj_node: EtreeElement) -> None:
        """Read the object from an object node."""
        ...

    def copy(self) -> Self:
        """Return an unconnected duplicate of the object."""
        ...

    def destroy(self) -> None:
        """Disconnect the object and release its handles and connection points."""
        ...


class DiagramObject:
    """Position, bounds, handles, and connection points of a diagram object."""

    def __init__(self) -> None:
        """Create an object with no handles and no connection points."""
        self.position: Point = (0.0, 0.0)
        self.bounding_box = Rectangle()
        self.handles: list[Handle | None] = []
        self.connections: list[ConnectionPoint] = []

    @property
    def num_handles(self) -> int:
        """Number of handle slots."""
        return len(self.handles)

    @property
    def num_connections(self) -> int:
        """Number of connection points."""
        return len(self.connections)

    def init(self, num_handles: int, num_connections: int) -> None:
        """Allocate handle slots and connection points.

        :param num_handles: number of (empty) handle slots
        :param num_connections: number of connection points. These are created at
            the origin with no flags. The owner places them.
        """
        self.handles = [None] * num_handles
        self.connections = [ConnectionPoint(object=self) for _ in range(num_connections)]

    def copy(self) -> DiagramObject:
        """Copy position, bounds, and connection points.

        :return: a new object with the same number of (empty) handle slots and
            fresh connection points in the same places. Nothing is connected to
            the copy.
        """
        new = DiagramObject()
        new.position = self.position
        new.bounding_box = dataclasses.replace(self.bounding_box)
        new.handles = [None] * self.num_handles
        new.connections = [
            dataclasses.replace(cp, object=new, connected=[])
            for cp in self.connections
        ]
        return new

    def destroy(self) -> None:
        """Disconnect everything and drop all handles and connection points."""
        for handle in self.handles:
            if handle is not None:
                self.unconnect(handle)
        for cp in self.connections:
            for other in list(cp.connected):
                for handle in other.handles:
                    if handle is not None and handle.connected_to is cp:
                        other.unconnect(handle)
        self.handles = []
        self.connections = []

    def connect(self, handle: Handle, cp: ConnectionPoint) -> None:
        """Attach one of this object's handles to a connection point.

        :param handle: a handle in self.handles
        :param cp: a connection point, usually of another object
        :effects: handle.connected_to is cp and self is in cp.connected
        """
        if not any(h is handle for h in self.handles):
            _log.warning("Cannot connect a handle this object does not hold.")
            return
        self.unconnect(handle)
        handle.connected_to = cp
        cp.connected.append(self)

    def unconnect(self, handle: Handle) -> None:
        """Detach a handle from whatever it is connected to."""
        cp = handle.connected_to
        if cp is None:
            return
        handle.connected_to = None
        if not any(h is not None and h.connected_to is cp for h in self.handles):
            cp.connected[:] = [o for o in cp.connected if o is not self]

    def save(self, obj_node: EtreeElement) -> None:
        """Write obj_pos and obj_bb to an object node."""
        data_add_point(new_attribute(obj_node, "obj_pos"), self.position)
        data_add_rectangle(new_attribute(obj_node, "obj_bb"), self.bounding_box)

    def load(self, obj_node: EtreeElement) -> None:
        """Read obj_pos and obj_bb from an object node.

        Missing attributes leave the position at the origin and the bounding box
        empty.
        """
        self.position = (0.0, 0.0)
        attr = find_attribute(obj_node, "obj_pos")
        if attr is not None:
            self.position = data_point(attribute_first_data(attr))

        self.bounding_box = Rectangle()
        attr = find_attribute(obj_node, "obj_bb")
        if attr is not None:
            self.bounding_box = data_rectangle(attribute_first_data(attr))
