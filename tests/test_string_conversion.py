"""Test number formatting and keyword-argument element constructors.

:author: Shay Hill
:created: 2025-11-10
"""

import random
from collections.abc import Iterator

from lxml import etree

import element_core.string_conversion as mod
from element_core import constructors
from element_core.nsmap import NSMAP

_FLOAT_ITERATIONS = 100
_RNG = random.Random(4)


def random_floats() -> Iterator[float]:
    """Yield random float values of any sign and a wide range of magnitudes."""
    for _ in range(_FLOAT_ITERATIONS):
        yield _RNG.uniform(-1, 1) * 10 ** _RNG.randint(-12, 12)


class TestFormatNumber:
    def test_negative_zero(self):
        """Remove "-" from "-0"."""
        assert mod.format_number(-0.0000000001) == "0"

    def test_round_to_int(self):
        """Round to int if no decimal values != 0."""
        assert mod.format_number(1.0000000001) == "1"

    def test_full_precision_reads_back(self):
        """With no resolution, a formatted float reads back exactly."""
        for num in random_floats():
            assert float(mod.format_number(num, resolution=None)) == num


class TestFormatNumbers:
    def test_empty(self):
        assert mod.format_numbers([]) == []

    def test_explicit(self):
        assert mod.format_numbers([1, 2, 3]) == ["1", "2", "3"]


class TestFormatAttrDict:
    def test_float(self):
        assert mod.format_attr_dict(x=1.0) == {"x": "1"}

    def test_none(self):
        assert mod.format_attr_dict(fill=None) == {"fill": "none"}

    def test_trailing_underscore(self):
        """Remove trailing underscore from key."""
        assert mod.format_attr_dict(x_=1) == {"x": "1"}

    def test_replace_underscore(self):
        """Replace underscore with hyphen."""
        assert mod.format_attr_dict(stroke_width=1) == {"stroke-width": "1"}

    def test_qualified_name(self):
        """A namespace:name key becomes a qualified name."""
        assert mod.format_attr_dict(**{"dia:name": "elem_width"}) == {
            f"{{{NSMAP['dia']}}}name": "elem_width"
        }


class TestNewElement:
    def test_params(self) -> None:
        """Replace _ with -. Pass params.values() as strings."""
        elem = constructors.new_element("polygon", points="0,0 1,1", stroke_width=2)
        assert etree.tostring(elem) == b'<polygon points="0,0 1,1" stroke-width="2"/>'

    def test_sub_element(self) -> None:
        parent = etree.Element("object")
        child = constructors.new_sub_element(parent, "attribute", name="elem_width")
        assert child.getparent() is parent
        assert etree.tostring(parent) == (
            b'<object><attribute name="elem_width"/></object>'
        )
