"""Boolean generation.

Booleans always draw a uint8 at REFERENCE_SIZE, whatever the ambient size,
so both values stay equally reachable even at size 0. True shrinks to
False; False is minimal.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Iterable

from treeshrink.constants import REFERENCE_SIZE
from treeshrink.context import GenerationContext
from treeshrink.shrink import constant, nothing

from .base import ValueGenerator
from .integers import uint8

__all__ = ["BooleanGenerator", "booleans"]


class BooleanGenerator(ValueGenerator[bool]):
    """Generator for bool values."""

    __slots__ = ()

    def draw(self, size: int, context: GenerationContext) -> bool:
        """True iff the low bit of a full-size uint8 draw is zero."""
        return uint8.draw(REFERENCE_SIZE, context) & 1 == 0

    def shrink(self, value: bool) -> Iterable[bool]:
        """True -> [False], False -> []."""
        if value:
            return constant([False])
        return nothing()

    def __repr__(self) -> str:
        """Return representation for debugging."""
        return "<BooleanGenerator>"


booleans = BooleanGenerator()
