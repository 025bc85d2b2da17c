"""Type hints for pass-through arguments to lxml constructors.

:author: Shay Hill
:created: 2025-11-04
"""

from typing import TypeAlias

# Types element_core can format to pass through to lxml constructors.
ElemAttrib: TypeAlias = str | float | None
