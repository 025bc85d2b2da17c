"""Handles: the draggable affordances of a diagram object.

:author: Shay Hill
:created: 2025-11-03

An element has eight resize handles, one on each corner and one on the middle of
each edge. They are laid out in reading order (left-to-right, top row first)
skipping the center:

    NW  N  NE
    W       E
    SW  S  SE
"""

from __future__ import annotations

import dataclasses
import enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from element_core.connections import ConnectionPoint
    from element_core.geometry import Point


class HandleId(enum.IntEnum):
    """Identity of a handle. The resize ids are also slot indices."""

    RESIZE_NW = 0
    RESIZE_N = 1
    RESIZE_NE = 2
    RESIZE_W = 3
    RESIZE_E = 4
    RESIZE_SW = 5
    RESIZE_S = 6
    RESIZE_SE = 7
    MOVE_STARTPOINT = 8
    MOVE_ENDPOINT = 9
    CUSTOM1 = 200
    CUSTOM2 = 201
    CUSTOM3 = 202
    CUSTOM4 = 203
    CUSTOM5 = 204
    CUSTOM6 = 205
    CUSTOM7 = 206
    CUSTOM8 = 207
    CUSTOM9 = 208


RESIZE_HANDLE_IDS = tuple(HandleId(i) for i in range(8))


class HandleType(enum.Enum):
    """How a handle is drawn and whether it can be dragged."""

    NON_MOVABLE = enum.auto()
    MAJOR_CONTROL = enum.auto()
    MINOR_CONTROL = enum.auto()


class HandleConnectType(enum.Enum):
    """Whether a handle can attach to a connection point."""

    NONCONNECTABLE = enum.auto()
    CONNECTABLE = enum.auto()
    CONNECTABLE_NOBREAK = enum.auto()


class HandleMoveReason(enum.Enum):
    """What is causing a handle to move."""

    USER = enum.auto()
    USER_FINAL = enum.auto()
    CONNECTED = enum.auto()
    CREATE = enum.auto()
    CREATE_FINAL = enum.auto()


class ModifierKeys(enum.IntFlag):
    """Keys held while a handle is dragged."""

    NONE = 0
    SHIFT = 1
    ALT = 2
    CONTROL = 4


@dataclasses.dataclass
class Handle:
    """One handle slot.

    :param id: identity of the handle
    :param pos: position of the handle
    :param type: how the handle is drawn
    :param connect_type: whether the handle may connect
    :param connected_to: the connection point this handle is attached to, if any
    """

    id: HandleId = HandleId.RESIZE_NW
    pos: Point = (0.0, 0.0)
    type: HandleType = HandleType.MAJOR_CONTROL
    connect_type: HandleConnectType = HandleConnectType.NONCONNECTABLE
    connected_to: ConnectionPoint | None = None


def is_resize_handle(handle_id: int) -> bool:
    """Return True if handle_id is one of the eight resize ids."""
    return HandleId.RESIZE_NW <= handle_id <= HandleId.RESIZE_SE


def canonical_handle_id(index: int) -> HandleId:
    """Return the id of the handle in slot ``index`` (0 through 7)."""
    return RESIZE_HANDLE_IDS[index]


def canonical_handle_pos(
    corner: Point, width: float, height: float, index: int
) -> Point:
    """Return the position of the handle in slot ``index``.

    :param corner: top-left corner of the element
    :param width: width of the element
    :param height: height of the element
    :param index: slot index 0 through 7 (NW, N, NE, W, E, SW, S, SE)
    :return: a corner or edge midpoint of the rectangle
    """
    x, y = corner
    col, row = _GRID[index]
    return x + width * col / 2.0, y + height * row / 2.0


# (column, row) in half-sizes for each slot. The (1, 1) center is not a handle.
_GRID = ((0, 0), (1, 0), (2, 0), (0, 1), (2, 1), (0, 2), (1, 2), (2, 2))
