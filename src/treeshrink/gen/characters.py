"""Single-character generation for text.

Most draws are printable ASCII. The remaining draws pick a Basic
Multilingual Plane code point whose bit width grows with size; control
characters and surrogates are folded back into printable ASCII.

Python 3.13+.
"""

from __future__ import annotations

from treeshrink.constants import ATOM_BITS, REFERENCE_SIZE, SIMPLE_CHARACTERS
from treeshrink.context import GenerationContext, pick_atom
from treeshrink.shrink import constant

from .base import ValueGenerator

__all__ = ["CharacterGenerator", "characters"]

_PRINTABLE_FIRST = 0x20
_PRINTABLE_COUNT = 95  # 0x20..0x7E
_CONTROLS = range(0x7F, 0xA0)  # DEL and C1
_SURROGATES = range(0xD800, 0xE000)

# Top three atom bits select the range: 7 of 8 draws are printable ASCII
_SELECTOR_SHIFT = ATOM_BITS - 3
_ASCII_SELECTORS = 7

_ASCII_BITS = 7
_BMP_BITS = 16


def _printable(code: int) -> str:
    return chr(_PRINTABLE_FIRST + code % _PRINTABLE_COUNT)


class CharacterGenerator(ValueGenerator[str]):
    """Generator for one-character strings."""

    __slots__ = ()

    def draw(self, size: int, context: GenerationContext) -> str:
        """Pick a character from one atom."""
        atom = pick_atom(context)
        if atom >> _SELECTOR_SHIFT < _ASCII_SELECTORS:
            return _printable(atom)

        n_bits = max(_ASCII_BITS, min(size, REFERENCE_SIZE) * _BMP_BITS // REFERENCE_SIZE)
        code_point = atom & ((1 << n_bits) - 1)
        if (
            code_point < _PRINTABLE_FIRST
            or code_point in _CONTROLS
            or code_point in _SURROGATES
        ):
            return _printable(code_point)
        return chr(code_point)

    def shrink(self, value: str) -> tuple[str, ...]:
        """Lower-case form, then the simple characters that precede value.

        Every path ends at SIMPLE_CHARACTERS[0]: simple characters only shrink
        to earlier simple characters, and any other character shrinks to its
        lower-case form or straight to a simple one.
        """
        index = SIMPLE_CHARACTERS.find(value) if len(value) == 1 else -1
        if index >= 0:
            return constant(SIMPLE_CHARACTERS[:index])

        candidates: dict[str, None] = {}
        lowered = value.lower()
        if lowered != value and len(lowered) == 1:
            candidates[lowered] = None
        candidates.update(dict.fromkeys(SIMPLE_CHARACTERS))
        return constant(candidates)

    def __repr__(self) -> str:
        """Return representation for debugging."""
        return "<CharacterGenerator>"


characters = CharacterGenerator()
