"""Floating-point generation.

A signed 64-bit integer drawn through int64 is normalized into [-1, 1]
and scaled by REAL_GROWTH_BASE ** size. Size acts as a continuous growth
exponent here rather than as a bit count: values are tiny at small sizes
and grow smoothly as size increases.

Shrinking only tries fixed candidates: the negation of a negative value,
then the value truncated toward zero.

Python 3.13+.
"""

from __future__ import annotations

import math
import struct

from treeshrink.constants import INT64_MAX, MAX_REAL_EXPONENT, REAL_GROWTH_BASE
from treeshrink.context import GenerationContext
from treeshrink.shrink import constant

from .base import ValueGenerator
from .integers import int64

__all__ = ["RealGenerator", "float32", "float64"]

_BINARY32 = struct.Struct("<f")


def _to_binary32(value: float) -> float:
    """Round value to the nearest IEEE 754 single-precision float."""
    return _BINARY32.unpack(_BINARY32.pack(value))[0]


class RealGenerator(ValueGenerator[float]):
    """Generator for float values, optionally rounded to single precision.

    Invariant:
        abs(draw(size, ctx)) <= REAL_GROWTH_BASE ** size
        (up to binary32 rounding for float32)
    """

    __slots__ = ("_single_precision",)

    def __init__(self, *, single_precision: bool = False) -> None:
        """Initialize generator."""
        self._single_precision = single_precision

    @property
    def single_precision(self) -> bool:
        """Whether values are rounded to binary32."""
        return self._single_precision

    def draw(self, size: int, context: GenerationContext) -> float:
        """Scale a normalized int64 draw by the growth curve."""
        unit = int64.draw(size, context) / INT64_MAX
        value = REAL_GROWTH_BASE ** min(size, MAX_REAL_EXPONENT) * unit
        if self._single_precision:
            return _to_binary32(value)
        return value

    def shrink(self, value: float) -> tuple[float, ...]:
        """Negation of a negative value, then truncation toward zero."""
        candidates: list[float] = []
        if value < 0:
            candidates.append(-value)
        truncated = float(math.trunc(value))
        if abs(truncated) < abs(value):
            candidates.append(truncated)
        return constant(candidates)

    def __repr__(self) -> str:
        """Return representation for debugging."""
        return f"<RealGenerator float{32 if self._single_precision else 64}>"


float32 = RealGenerator(single_precision=True)
float64 = RealGenerator()
