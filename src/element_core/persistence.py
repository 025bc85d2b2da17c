"""Read and write typed attributes on diagram object nodes.

:author: Shay Hill
:created: 2025-11-04

An object is saved as an xml node. Each named attribute holds typed data:

    <dia:object type="Standard - Box" version="0" id="O0">
      <dia:attribute name="elem_corner">
        <dia:point val="1,2"/>
      </dia:attribute>
      <dia:attribute name="elem_width">
        <dia:real val="3"/>
      </dia:attribute>
    </dia:object>

Writers format numbers at full precision, so a value read back is the value that
was written. Readers raise a ValueError for data they cannot understand. A missing
attribute is not an error here. ``find_attribute`` returns None and callers supply
their own defaults.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from lxml import etree
from paragraphs import par

from element_core.constructors import new_sub_element
from element_core.geometry import Rectangle
from element_core.nsmap import NSMAP, new_qname
from element_core.string_conversion import format_numbers

if TYPE_CHECKING:
    from lxml.etree import (
        _Element as EtreeElement,  # pyright: ignore[reportPrivateUsage]
    )

    from element_core.geometry import Point

_OBJECT = new_qname("dia", "object")
_ATTRIBUTE = new_qname("dia", "attribute")
_POINT = new_qname("dia", "point")
_REAL = new_qname("dia", "real")
_RECTANGLE = new_qname("dia", "rectangle")


def new_object_node(
    type_name: str, version: int = 0, obj_id: str | None = None
) -> EtreeElement:
    """Create an empty object node.

    :param type_name: the object type, e.g. "Standard - Box"
    :param version: the version of the object type's save format
    :param obj_id: optional unique id of the object in its diagram
    :return: a <dia:object> element with the dia namespace declared
    """
    node = etree.Element(_OBJECT, nsmap={"dia": NSMAP["dia"]})
    node.set("type", type_name)
    node.set("version", str(version))
    if obj_id is not None:
        node.set("id", obj_id)
    return node


def new_attribute(obj_node: EtreeElement, name: str) -> EtreeElement:
    """Append a new, empty named attribute to an object node.

    :param obj_node: the object node
    :param name: the attribute name, e.g. "elem_corner"
    :return: the new <dia:attribute> element
    """
    return new_sub_element(obj_node, _ATTRIBUTE, name=name)


def find_attribute(obj_node: EtreeElement, name: str) -> EtreeElement | None:
    """Find a named attribute of an object node.

    :param obj_node: the object node
    :param name: the attribute name
    :return: the first <dia:attribute> child with that name or None
    """
    for attr in obj_node.iterchildren(str(_ATTRIBUTE)):
        if attr.get("name") == name:
            return attr
    return None


def attribute_first_data(attr: EtreeElement) -> EtreeElement | None:
    """Get the first data element of an attribute.

    :param attr: a <dia:attribute> element
    :return: the first child element or None if the attribute is empty
    """
    for data in attr.iterchildren(tag=etree.Element):
        return data
    return None


def data_add_point(attr: EtreeElement, point: Point) -> EtreeElement:
    """Append a point to an attribute.

    :param attr: a <dia:attribute> element
    :param point: (x, y)
    :return: the new <dia:point val="x,y"/> element
    """
    val = ",".join(format_numbers(point, resolution=None))
    return new_sub_element(attr, _POINT, val=val)


def data_add_real(attr: EtreeElement, value: float) -> EtreeElement:
    """Append a real number to an attribute.

    :param attr: a <dia:attribute> element
    :param value: the number
    :return: the new <dia:real val="value"/> element
    """
    (val,) = format_numbers((value,), resolution=None)
    return new_sub_element(attr, _REAL, val=val)


def data_add_rectangle(attr: EtreeElement, rect: Rectangle) -> EtreeElement:
    """Append a rectangle to an attribute.

    :param attr: a <dia:attribute> element
    :param rect: the rectangle
    :return: the new <dia:rectangle val="left,top;right,bottom"/> element
    """
    left, top, right, bottom = format_numbers(rect.values(), resolution=None)
    return new_sub_element(attr, _RECTANGLE, val=f"{left},{top};{right},{bottom}")


def data_point(data: EtreeElement | None) -> Point:
    """Read a point from a data element.

    :param data: a <dia:point> element
    :return: (x, y)
    :raises ValueError: if data is not a readable point
    """
    x, y = _read_floats(data, _POINT, ",", 2)
    return x, y


def data_real(data: EtreeElement | None) -> float:
    """Read a real number from a data element.

    :param data: a <dia:real> element
    :return: the number
    :raises ValueError: if data is not a readable real
    """
    (value,) = _read_floats(data, _REAL, ",", 1)
    return value


def data_rectangle(data: EtreeElement | None) -> Rectangle:
    """Read a rectangle from a data element.

    :param data: a <dia:rectangle> element
    :return: the rectangle
    :raises ValueError: if data is not a readable rectangle
    """
    left, top, right, bottom = _read_floats(data, _RECTANGLE, ";", 4)
    return Rectangle(left, top, right, bottom)


def _read_floats(
    data: EtreeElement | None, tag: etree.QName, delimiter: str, count: int
) -> list[float]:
    """Read ``count`` floats from the val attribute of a data element.

    :param data: the data element
    :param tag: the tag the data element must have
    :param delimiter: the delimiter between pairs. Values in a pair are always
        separated by a comma.
    :param count: the number of floats expected
    :return: the floats
    :raises ValueError: if data is missing, has the wrong tag, or has an unreadable
        or missing val
    """
    if data is None:
        msg = f"Expected a {tag.localname} data element, found nothing."
        raise ValueError(msg)
    if data.tag != str(tag):
        msg = par(
            f"""Expected a {tag.localname} data element, found
            {etree.QName(data).localname}."""
        )
        raise ValueError(msg)
    val = data.get("val")
    if val is None:
        msg = f"The {tag.localname} data element has no val attribute."
        raise ValueError(msg)
    try:
        floats = [float(v) for v in val.replace(delimiter, ",").split(",")]
    except ValueError as e:
        msg = f"Cannot read {count} numbers from {tag.localname} value '{val}'."
        raise ValueError(msg) from e
    if len(floats) != count:
        msg = par(
            f"""Expected {count} numbers in {tag.localname} value '{val}', found
            {len(floats)}."""
        )
        raise ValueError(msg)
    return floats

