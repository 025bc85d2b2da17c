"""Property descriptions an editor panel reads to show element fields.

:author: Shay Hill
:created: 2025-11-05

The width range is the full float range. Elements themselves never hold a negative
width or height.
"""

from __future__ import annotations

import enum
from typing import NamedTuple

# largest finite single-precision float
MAXFLOAT = 3.4028234663852886e38


class NumberRange(NamedTuple):
    """Bounds and spin-button step of a numeric property."""

    lower: float
    upper: float
    step: float


WIDTH_RANGE = NumberRange(-MAXFLOAT, MAXFLOAT, 0.1)


class PropType(enum.Enum):
    """Value type of a property."""

    POINT = "point"
    REAL = "real"


class PropDescription(NamedTuple):
    """One editable property.

    :param name: the property name, also the saved attribute name
    :param type: value type
    :param label: human-readable label
    :param number_range: bounds for a REAL property, None for others
    """

    name: str
    type: PropType
    label: str
    number_range: NumberRange | None = None


ELEMENT_COMMON_PROPERTIES = (
    PropDescription("elem_corner", PropType.POINT, "Element corner"),
    PropDescription("elem_width", PropType.REAL, "Element width", WIDTH_RANGE),
    PropDescription("elem_height", PropType.REAL, "Element height", WIDTH_RANGE),
)
