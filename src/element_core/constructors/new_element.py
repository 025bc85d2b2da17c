"""Xml element constructors. Create an lxml element from keyword arguments.

:author: Shay Hill
:created: 2025-11-04

This is principally to allow passing values, rather than strings, as element
parameters.

Will translate ``stroke_width=10`` to ``stroke-width="10"``
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from lxml import etree

from element_core.string_conversion import set_attributes

if TYPE_CHECKING:
    from lxml.etree import (
        QName,
    )
    from lxml.etree import (
        _Element as EtreeElement,  # pyright: ignore[reportPrivateUsage]
    )

    from element_core.attrib_hints import ElemAttrib


def new_element(tag: str | QName, **attributes: ElemAttrib) -> EtreeElement:
    """Create an etree.Element, make every kwarg value a string.

    :param tag: element tag
    :param attributes: element attribute names and values
    :returns: new ``tag`` element

        >>> elem = new_element('polygon', stroke_width=1)
        >>> etree.tostring(elem)
        b'<polygon stroke-width="1"/>'
    """
    elem = etree.Element(tag)
    set_attributes(elem, **attributes)
    return elem


def new_sub_element(
    parent: EtreeElement, tag: str | QName, **attributes: ElemAttrib
) -> EtreeElement:
    """Create an etree.SubElement, make every kwarg value a string.

    :param parent: parent element
    :param tag: element tag
    :param attributes: element attribute names and values
    :returns: new ``tag`` element

        >>> parent = etree.Element('object')
        >>> _ = new_sub_element(parent, 'attribute', name='elem_width')
        >>> etree.tostring(parent)
        b'<object><attribute name="elem_width"/></object>'
    """
    elem = etree.SubElement(parent, tag)
    set_attributes(elem, **attributes)
    return elem

