"""Import functions into the package namespace.

:author: Shay Hill
:created: 2025-11-02
"""

from element_core.base_object import DiagramObject, ObjectChange, SupportsObjectOps
from element_core.bounding_box import ElementBBExtras, rectangle_bbox
from element_core.connections import (
    ConnectionPoint,
    ConnectionPointFlags,
    Direction,
)
from element_core.element import Element, ElementChange, element_change_new
from element_core.export import new_poly_element
from element_core.geometry import Point, Rectangle
from element_core.handles import (
    Handle,
    HandleConnectType,
    HandleId,
    HandleMoveReason,
    HandleType,
    ModifierKeys,
)
from element_core.nsmap import NSMAP, new_qname
from element_core.persistence import new_object_node
from element_core.properties import (
    ELEMENT_COMMON_PROPERTIES,
    MAXFLOAT,
    WIDTH_RANGE,
)
from element_core.string_conversion import format_number, format_numbers
from element_core.transformations import (
    mat_apply,
    mat_dot,
    mat_invert,
    new_rotation_about,
)

__all__ = [
    "ELEMENT_COMMON_PROPERTIES",
    "MAXFLOAT",
    "NSMAP",
    "WIDTH_RANGE",
    "ConnectionPoint",
    "ConnectionPointFlags",
    "DiagramObject",
    "Direction",
    "Element",
    "ElementBBExtras",
    "ElementChange",
    "Handle",
    "HandleConnectType",
    "HandleId",
    "HandleMoveReason",
    "HandleType",
    "ModifierKeys",
    "ObjectChange",
    "Point",
    "Rectangle",
    "SupportsObjectOps",
    "element_change_new",
    "format_number",
    "format_numbers",
    "mat_apply",
    "mat_dot",
    "mat_invert",
    "new_object_node",
    "new_poly_element",
    "new_qname",
    "new_rotation_about",
    "rectangle_bbox",
]
