"""Connection points and the direction hints routers read from them.

:author: Shay Hill
:created: 2025-11-03

A connection point is an anchor where a connector (a line, an arrow) may attach.
Its ``directions`` tell a router which headings make sense when leaving the
point. A point on the east edge of a box should be left heading east.
"""

from __future__ import annotations

import dataclasses
import enum
from typing import TYPE_CHECKING, Any

from element_core.handles import canonical_handle_pos

if TYPE_CHECKING:
    from collections.abc import Sequence

    from element_core.geometry import Point


class Direction(enum.IntFlag):
    """Acceptable outbound headings from a connection point."""

    NONE = 0
    NORTH = 1
    EAST = 2
    SOUTH = 4
    WEST = 8
    ALL = NORTH | EAST | SOUTH | WEST


class ConnectionPointFlags(enum.IntFlag):
    """Behavior flags of a connection point.

    MAIN (ANYPLACE | AUTOGAP) marks the point in the middle of an object.
    """

    NONE = 0
    ANYPLACE = 1
    AUTOGAP = 2
    MAIN = ANYPLACE | AUTOGAP


@dataclasses.dataclass(eq=False)
class ConnectionPoint:
    """One anchor on a diagram object.

    :param pos: where the point is
    :param last_pos: where the point was when connected objects last followed it
    :param directions: acceptable outbound headings
    :param flags: behavior flags
    :param name: optional label for the point
    :param object: the object that owns this point
    :param connected: objects attached to this point

    Compared by identity. Two points in the same place are still two points.
    """

    pos: Point = (0.0, 0.0)
    last_pos: Point = (0.0, 0.0)
    directions: Direction = Direction.ALL
    flags: ConnectionPointFlags = ConnectionPointFlags.NONE
    name: str | None = None
    object: Any = None
    connected: list[Any] = dataclasses.field(default_factory=list)

    @property
    def is_main(self) -> bool:
        """True if this is the center point of its object."""
        return self.flags == ConnectionPointFlags.MAIN


# Directions of the nine rectangle points: NW, N, NE, W, E, SW, S, SE, CENTER.
RECTANGLE_DIRECTIONS = (
    Direction.NORTH | Direction.WEST,
    Direction.NORTH,
    Direction.NORTH | Direction.EAST,
    Direction.WEST,
    Direction.EAST,
    Direction.SOUTH | Direction.WEST,
    Direction.SOUTH,
    Direction.SOUTH | Direction.EAST,
    Direction.ALL,
)

NUM_RECTANGLE_CONNECTIONS = len(RECTANGLE_DIRECTIONS)


def layout_rectangle_connections(
    cps: Sequence[ConnectionPoint], corner: Point, width: float, height: float
) -> None:
    """Place nine connection points on a rectangle and its center.

    :param cps: at least nine connection points. Only the first nine are written.
    :param corner: top-left corner of the rectangle
    :param width: width of the rectangle
    :param height: height of the rectangle
    :effects: sets pos and directions of cps[0] through cps[8]

    The first eight points share the positions of the resize handles. The ninth
    is the center.
    """
    for i, cp in enumerate(cps[:8]):
        cp.pos = canonical_handle_pos(corner, width, height, i)
    x, y = corner
    cps[8].pos = (x + width / 2.0, y + height / 2.0)
    for cp, directions in zip(cps, RECTANGLE_DIRECTIONS):
        cp.directions = directions


def infer_direction(pos: Point, center: Point) -> Direction:
    """Get the headings that point away from a center.

    :param pos: position of a connection point
    :param center: center of the owning object
    :return: EAST or WEST by the sign of x - cx, SOUTH or NORTH by the sign of
        y - cy. A point exactly on an axis gets no heading for that axis.
    """
    x, y = pos
    cx, cy = center
    directions = Direction.NONE
    if x > cx:
        directions |= Direction.EAST
    elif x < cx:
        directions |= Direction.WEST
    if y > cy:
        directions |= Direction.SOUTH
    elif y < cy:
        directions |= Direction.NORTH
    return directions


def infer_connection_directions(
    cps: Sequence[ConnectionPoint], center: Point
) -> None:
    """Set directions of any number of points by their quadrant about a center.

    :param cps: connection points to update
    :param center: center of the owning object
    :effects: sets directions of every point in cps. Main points get ALL.

    Works best for symmetric objects.
    """
    for cp in cps:
        cp.directions = infer_direction(cp.pos, center)
        if cp.is_main:
            cp.directions |= Direction.ALL
