"""Quasi-private functions for high-level string conversion.

:author: Shay Hill
:created: 2025-11-04

Two precisions are in play:
* Persisted values use full precision so a saved element loads back exactly.
* Exported svg coordinates are rounded to six digits after the decimal.
"""

from __future__ import annotations

import itertools as it
from typing import TYPE_CHECKING

import svg_path_data
from lxml import etree

from element_core.nsmap import NSMAP

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from lxml.etree import (
        _Element as EtreeElement,  # pyright: ignore[reportPrivateUsage]
    )

    from element_core.attrib_hints import ElemAttrib


def format_number(num: float | str, resolution: int | None = 6) -> str:
    """Format a number into an svg-readable float string with resolution = 6.

    :param num: number to format (string or float)
    :param resolution: number of digits after the decimal point, defaults to 6. None
        to match behavior of `str(num)`.
    :return: string representation of the number with six digits after the decimal
        (if in fixed-point notation). Will return exponential notation when shorter.
    """
    return svg_path_data.format_number(num, resolution=resolution)


def format_numbers(
    nums: Iterable[float] | Iterable[str] | Iterable[float | str],
    resolution: int | None = 6,
) -> list[str]:
    """Format multiple numbers to limited precision.

    :param nums: iterable of floats
    :param resolution: passed to format_number
    :return: list of formatted strings
    """
    return [format_number(num, resolution) for num in nums]


def _fix_key_and_format_val(key: str, val: ElemAttrib) -> Iterator[tuple[str, str]]:
    """Format one key, value pair for an xml element.

    :param key: element attribute name
    :param val: element attribute value
    :return: tuple of key, value

    etree.Elements will only accept string values. This saves having to convert
    input to strings.

    * convert float values to formatted strings
    * replace '_' with '-' in keywords
    * remove trailing '_' from keywords
    * will convert `namespace:tag` to a qualified name
    """
    if ":" in key:
        namespace, tag = key.split(":")
        key_ = str(etree.QName(NSMAP[namespace], tag))
    else:
        key_ = key.rstrip("_").replace("_", "-")

    if val is None:
        val_ = "none"
    elif isinstance(val, (int, float)):
        val_ = format_number(val)
    else:
        val_ = val

    yield key_, val_


def format_attr_dict(**attributes: ElemAttrib) -> dict[str, str]:
    """Use the key / value fixer to create a dict of attributes.

    :param attributes: element attribute names and values.
    :return: dict of attributes, each key a valid attribute name, each value a str
    """
    items = attributes.items()
    return dict(it.chain(*(_fix_key_and_format_val(k, v) for k, v in items)))


def set_attributes(elem: EtreeElement, **attributes: ElemAttrib) -> None:
    """Set name: value items as element attributes. Make every value a string.

    :param elem: element to receive element.set(keyword, str(value)) calls
    :param attributes: element attribute names and values.
    :effects: updates ``elem``
    """
    for key, val in format_attr_dict(**attributes).items():
        elem.set(key, val)
