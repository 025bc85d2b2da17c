"""Raise the level of the constructors module.

:author: Shay Hill
created: 2025-11-04
"""

from element_core.constructors.new_element import new_element, new_sub_element

__all__ = ["new_element", "new_sub_element"]
