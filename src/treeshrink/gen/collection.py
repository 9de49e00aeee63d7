"""Variable-length collections: lists, dicts and text.

The length is drawn first from its own atom and is at most the (clamped)
size, so larger sizes give longer collections. Every element is then
generated independently at the same size. Shrinking is delegated to a
CollectionShrinkStrategy over the element trees; the default removes
chunks before shrinking individual elements. Candidates that build a
collection equal to their parent are skipped.

A dict is a collection of key/value pairs; a text value is a collection of
characters joined into a string.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator

from treeshrink.constants import REFERENCE_SIZE
from treeshrink.context import GenerationContext, pick_atom
from treeshrink.shrink import CollectionShrinkStrategy, default_strategy
from treeshrink.shrinkable import Shrinkable

from .base import Generator, generate_nested
from .characters import characters
from .tuples import pairs

__all__ = ["CollectionGenerator", "dicts", "lists", "text"]


class CollectionGenerator[E, C](Generator[C]):
    """Generator for collections of independently generated elements.

    Attributes:
        element: Generator for each element
        factory: Builds the collection from an iterable of element values
        strategy: Produces smaller element-tree sequences when shrinking

    Replay:
        Child 0 of the context's node holds the length atom; child i + 1
        holds the atoms of element i.
    """

    __slots__ = ("_element", "_factory", "_strategy")

    def __init__(
        self,
        element: Generator[E],
        factory: Callable[[Iterable[E]], C],
        strategy: CollectionShrinkStrategy = default_strategy,
    ) -> None:
        """Initialize from an element generator and a collection factory."""
        self._element = element
        self._factory = factory
        self._strategy = strategy

    @property
    def element(self) -> Generator[E]:
        """Generator used for every element."""
        return self._element

    def generate(self, size: int, context: GenerationContext) -> Shrinkable[C]:
        """Draw a length, generate that many elements, and build the tree."""
        length = pick_atom(context.for_child(0)) % (min(size, REFERENCE_SIZE) + 1)
        elements = tuple(
            generate_nested(self._element, size, context.for_child(index + 1))
            for index in range(length)
        )
        return self._tree(elements)

    def _tree(self, elements: tuple[Shrinkable[E], ...]) -> Shrinkable[C]:
        value = self._factory(element.value for element in elements)

        def children() -> Iterator[Shrinkable[C]]:
            for smaller in self._strategy(elements):
                child = self._tree(tuple(smaller))
                # Shadowed dict keys can make a removal a no-op
                if child.value != value:
                    yield child

        return Shrinkable(value, children)

    def __repr__(self) -> str:
        """Return representation for debugging."""
        return f"<CollectionGenerator element={self._element!r}>"


def lists[E](
    element: Generator[E], strategy: CollectionShrinkStrategy = default_strategy
) -> CollectionGenerator[E, list[E]]:
    """Generator for lists of element values."""
    return CollectionGenerator(element, list, strategy)


def dicts[K, V](
    keys: Generator[K],
    values: Generator[V],
    strategy: CollectionShrinkStrategy = default_strategy,
) -> CollectionGenerator[tuple[K, V], dict[K, V]]:
    """Generator for dicts built from generated key/value pairs.

    Duplicate keys collapse; the last generated pair for a key wins.
    Removing or shrinking a shadowed pair leaves the dict unchanged, so
    such candidates never appear among the shrinks.
    """
    return CollectionGenerator(pairs(keys, values), dict, strategy)


def _join(chars: Iterable[str]) -> str:
    return "".join(chars)


def text(
    chars: Generator[str] = characters,
    strategy: CollectionShrinkStrategy = default_strategy,
) -> CollectionGenerator[str, str]:
    """Generator for strings built from generated characters."""
    return CollectionGenerator(chars, _join, strategy)
