"""xml namespace entries for diagram object nodes.

:author: Shay Hill
:created: 2025-11-04

Object nodes live in the dia namespace. The svg namespace is here for polygon
export.
"""

from __future__ import annotations

from lxml.etree import QName

_DIA_NAMESPACE = "http://www.lysator.liu.se/~alla/dia/"
_SVG_NAMESPACE = "http://www.w3.org/2000/svg"
NSMAP = {
    "dia": _DIA_NAMESPACE,
    "svg": _SVG_NAMESPACE,
}


def new_qname(namespace_abbreviation: str | None, tag: str) -> QName:
    """Create a qualified name for an element.

    :param namespace_abbreviation: The namespace abbreviation. This
        will have to be a key in NSMAP (e.g., "dia", "svg").
    :param tag: The tag name of the element.
    :return: A qualified name for the element.
    """
    return QName(NSMAP[namespace_abbreviation], tag)
