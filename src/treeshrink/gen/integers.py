"""Fixed-width integer generation.

Size controls how many low bits of the atom are kept: at size 0 every
integer type yields 0, and at REFERENCE_SIZE every magnitude the type can
hold is reachable. Signed types take their sign from the top bit of the
raw atom, so magnitude and sign come from one draw.

Shrinking tries the negation of a negative value first, then bisects
toward zero.

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by signedness then width
from __future__ import annotations

import logging
from collections.abc import Iterator

from treeshrink.constants import ATOM_BITS, REFERENCE_SIZE
from treeshrink.context import GenerationContext, pick_atom
from treeshrink.diagnostics import ErrorTemplate, GeneratorConstructionError
from treeshrink.shrink import constant, sequentially, towards

from .base import ValueGenerator

__all__ = [
    "IntegerGenerator",
    "int8",
    "int16",
    "int32",
    "int64",
    "uint8",
    "uint16",
    "uint32",
    "uint64",
]

logger = logging.getLogger(__name__)


class IntegerGenerator(ValueGenerator[int]):
    """Generator for an integer type of a fixed bit width.

    Attributes:
        bits: Width of the type in bits (1..ATOM_BITS)
        signed: Whether the type is two's-complement signed
        digits: Value bits excluding the sign bit

    Example:
        >>> from treeshrink.context import GenerationContext
        >>> from treeshrink.engine import AtomNode
        >>> ctx = GenerationContext.create().with_node(AtomNode.leaf(0xFF))
        >>> int8.draw(100, ctx)
        127
        >>> int8.draw(0, ctx)
        0
    """

    __slots__ = ("_bits", "_signed")

    def __init__(self, bits: int, *, signed: bool) -> None:
        """Initialize generator.

        Raises:
            GeneratorConstructionError: If bits is outside 1..ATOM_BITS
        """
        if not 1 <= bits <= ATOM_BITS:
            raise GeneratorConstructionError(ErrorTemplate.invalid_bit_width(bits))
        self._bits = bits
        self._signed = signed

    @property
    def bits(self) -> int:
        """Width of the type in bits."""
        return self._bits

    @property
    def signed(self) -> bool:
        """Whether the type is signed."""
        return self._signed

    @property
    def digits(self) -> int:
        """Number of magnitude bits."""
        return self._bits - 1 if self._signed else self._bits

    @property
    def min_value(self) -> int:
        """Smallest value representable by the type."""
        return -(1 << self.digits) if self._signed else 0

    @property
    def max_value(self) -> int:
        """Largest value representable by the type."""
        return (1 << self.digits) - 1

    def draw(self, size: int, context: GenerationContext) -> int:
        """Derive an integer from one atom, scaled by size."""
        atom = pick_atom(context)
        if size > REFERENCE_SIZE:
            logger.debug("Clamping size %d to %d", size, REFERENCE_SIZE)
            size = REFERENCE_SIZE

        n_bits = size * self.digits // REFERENCE_SIZE
        if n_bits == 0:
            return 0

        magnitude = atom & ((1 << n_bits) - 1)
        # Top bit of the raw atom, not of the masked magnitude
        if self._signed and atom >> (ATOM_BITS - 1):
            return -magnitude
        return magnitude

    def shrink(self, value: int) -> Iterator[int]:
        """Negation of a negative value, then bisection toward zero."""
        return sequentially(constant([-value] if value < 0 else []), towards(value, 0))

    def __repr__(self) -> str:
        """Return representation for debugging."""
        prefix = "int" if self._signed else "uint"
        return f"<IntegerGenerator {prefix}{self._bits}>"


int8 = IntegerGenerator(8, signed=True)
int16 = IntegerGenerator(16, signed=True)
int32 = IntegerGenerator(32, signed=True)
int64 = IntegerGenerator(64, signed=True)
uint8 = IntegerGenerator(8, signed=False)
uint16 = IntegerGenerator(16, signed=False)
uint32 = IntegerGenerator(32, signed=False)
uint64 = IntegerGenerator(64, signed=False)
