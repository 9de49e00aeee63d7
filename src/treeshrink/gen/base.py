"""Generator base classes.

A Generator is a stateless capability: given a size and a generation
context it returns a Shrinkable whose root is the sampled value and whose
children are simpler alternatives. Generators hold no mutable state and
are safe to build once at module scope and share across requests.

Class hierarchy:
    Generator            - generate(size, context) -> Shrinkable
    ├── ValueGenerator   - draw() a value, shrink() it value-by-value
    ├── MappedGenerator  - another generator's tree passed through map
    └── ResizedGenerator - another generator run at a fixed size

Python 3.13+.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable

from treeshrink.context import GenerationContext, bind_context
from treeshrink.diagnostics import ErrorTemplate
from treeshrink.shrinkable import Shrinkable, shrink_recur, transform

__all__ = [
    "Generator",
    "MappedGenerator",
    "ResizedGenerator",
    "ValueGenerator",
    "generate_nested",
]


class Generator[T](ABC):
    """Produces Shrinkable values of type T."""

    __slots__ = ()

    @abstractmethod
    def generate(self, size: int, context: GenerationContext) -> Shrinkable[T]:
        """Sample one value and its shrink tree.

        Args:
            size: Magnitude control, >= 0
            context: Random engine and optional replay node

        Returns:
            Tree rooted at the sampled value
        """

    def map[U](self, mapper: Callable[[T], U]) -> Generator[U]:
        """Generator whose whole shrink tree is passed through mapper."""
        return MappedGenerator(self, mapper)

    def resized(self, size: int) -> Generator[T]:
        """Generator that ignores the requested size and always uses size."""
        return ResizedGenerator(self, size)


class ValueGenerator[T](Generator[T]):
    """Generator defined by a draw function and a value-level shrinker.

    Subclasses implement draw() and shrink(); generate() draws the root
    value and expands shrink() recursively and lazily into a tree.
    """

    __slots__ = ()

    @abstractmethod
    def draw(self, size: int, context: GenerationContext) -> T:
        """Sample a single value."""

    @abstractmethod
    def shrink(self, value: T) -> Iterable[T]:
        """Simpler candidates for value, best first."""

    def generate(self, size: int, context: GenerationContext) -> Shrinkable[T]:
        """Draw a value and wrap it in its recursive shrink tree."""
        return shrink_recur(self.draw(size, context), self.shrink)


class MappedGenerator[T, U](Generator[U]):
    """Generator applying mapper to every value of a source generator's tree."""

    __slots__ = ("_mapper", "_source")

    def __init__(self, source: Generator[T], mapper: Callable[[T], U]) -> None:
        """Initialize from a source generator and a value mapper."""
        self._source = source
        self._mapper = mapper

    def generate(self, size: int, context: GenerationContext) -> Shrinkable[U]:
        """Generate from the source and map the resulting tree."""
        return transform.map(self._mapper, self._source.generate(size, context))


class ResizedGenerator[T](Generator[T]):
    """Generator running a source generator at a fixed size."""

    __slots__ = ("_size", "_source")

    def __init__(self, source: Generator[T], size: int) -> None:
        """Initialize from a source generator and the size to force.

        Raises:
            ValueError: If size is negative
        """
        if size < 0:
            msg = str(ErrorTemplate.negative_size(size))
            raise ValueError(msg)
        self._source = source
        self._size = size

    def generate(self, size: int, context: GenerationContext) -> Shrinkable[T]:
        """Generate from the source at the fixed size."""
        return generate_nested(self._source, self._size, context.resized(self._size))


def generate_nested[T](
    generator: Generator[T], size: int, context: GenerationContext
) -> Shrinkable[T]:
    """Generate with a derived context bound as the ambient context.

    Composite generators call this for every nested draw so that pick()
    inside a nested generator sees the size and replay node it was handed.
    The previous binding is restored on return.
    """
    with bind_context(context):
        return generator.generate(size, context)
