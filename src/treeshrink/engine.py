"""Random atom source and replay records.

Provides the two sources of randomness a generator can draw from:
    - RandomEngine: Fresh 64-bit atoms from a seeded pseudo-random stream
    - AtomNode: A previously recorded atom (plus recorded child atoms for
      composite values), replayed to regenerate a structurally similar value

Determinism:
    Two RandomEngine instances built from the same seed produce the same
    atom sequence, so a whole generation can be replayed by re-seeding.

Python 3.13+.
"""

from __future__ import annotations

import random
from dataclasses import dataclass

from treeshrink.constants import ATOM_BITS, ATOM_MAX, DEFAULT_SEED

__all__ = ["AtomNode", "RandomEngine"]


class RandomEngine:
    """Seeded source of fixed-width unsigned atoms.

    Mutable by nature: every next_atom() call advances the stream. One
    engine belongs to one top-level generation request and is never shared
    between concurrent requests.

    Example:
        >>> engine = RandomEngine(seed=42)
        >>> atom = engine.next_atom()
        >>> 0 <= atom < 2**64
        True
        >>> RandomEngine(seed=42).next_atom() == atom
        True
    """

    __slots__ = ("_random", "_seed")

    def __init__(self, seed: int = DEFAULT_SEED) -> None:
        """Initialize engine from an integer seed."""
        self._seed = seed
        self._random = random.Random(seed)

    @property
    def seed(self) -> int:
        """Seed this engine was created from."""
        return self._seed

    def next_atom(self) -> int:
        """Draw one atom uniformly distributed over ATOM_BITS bits."""
        return self._random.getrandbits(ATOM_BITS)

    def fork(self, stream: int) -> RandomEngine:
        """Return an independent engine derived deterministically from the seed.

        Forking does not advance this engine.
        """
        return RandomEngine(hash((self._seed, stream)) & ATOM_MAX)

    def __repr__(self) -> str:
        """Return representation for debugging."""
        return f"RandomEngine(seed={self._seed!r})"


@dataclass(frozen=True, slots=True)
class AtomNode:
    """Recorded atom used to replay a draw instead of taking a fresh one.

    Composite generators hand child i of their node to their i-th component,
    so a recorded tree of atoms mirrors the structure of the generated value.

    Attributes:
        atom: The recorded atom (0 <= atom <= ATOM_MAX)
        children: Recorded atoms for nested draws, by position
    """

    atom: int
    children: tuple[AtomNode, ...] = ()

    def __post_init__(self) -> None:
        """Validate that the atom fits in ATOM_BITS.

        Raises:
            ValueError: If atom is negative or wider than ATOM_BITS
        """
        if not 0 <= self.atom <= ATOM_MAX:
            msg = f"AtomNode.atom must fit in {ATOM_BITS} bits, got {self.atom}"
            raise ValueError(msg)

    @classmethod
    def leaf(cls, atom: int) -> AtomNode:
        """Create a node without recorded children."""
        return cls(atom)

    def child(self, index: int) -> AtomNode | None:
        """Return the recorded child at index, or None if nothing was recorded."""
        if 0 <= index < len(self.children):
            return self.children[index]
        return None
