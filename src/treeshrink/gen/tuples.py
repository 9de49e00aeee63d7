"""Fixed-arity structures: tuples and pairs.

Each component is generated independently by its own generator. Shrinking
changes one component at a time: all shrinks of component 0 (others held
fixed) come first, then all shrinks of component 1, and so on. Repeated
shrink steps still reach combined simplifications one dimension at a time.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from treeshrink.context import GenerationContext
from treeshrink.diagnostics import ErrorTemplate, GeneratorConstructionError
from treeshrink.shrinkable import Shrinkable

from .base import Generator, generate_nested

__all__ = ["TupleGenerator", "pairs", "tuples"]


def _tuple_tree(components: tuple[Shrinkable[Any], ...]) -> Shrinkable[tuple[Any, ...]]:
    """Combine component trees into one tree of tuples."""

    def children() -> Iterator[Shrinkable[tuple[Any, ...]]]:
        for index, component in enumerate(components):
            for candidate in component.shrinks():
                yield _tuple_tree(
                    components[:index] + (candidate,) + components[index + 1 :]
                )

    return Shrinkable(tuple(component.value for component in components), children)


class TupleGenerator(Generator[tuple[Any, ...]]):
    """Generator for tuples with one generator per position.

    Component i replays child i of the context's node, if any.
    """

    __slots__ = ("_components",)

    def __init__(self, *components: Generator[Any]) -> None:
        """Initialize from component generators.

        Raises:
            GeneratorConstructionError: If no components are given
        """
        if not components:
            raise GeneratorConstructionError(ErrorTemplate.empty_tuple_generator())
        self._components = components

    @property
    def components(self) -> tuple[Generator[Any], ...]:
        """Component generators, by position."""
        return self._components

    def generate(
        self, size: int, context: GenerationContext
    ) -> Shrinkable[tuple[Any, ...]]:
        """Generate every component and combine their trees."""
        return _tuple_tree(
            tuple(
                generate_nested(component, size, context.for_child(index))
                for index, component in enumerate(self._components)
            )
        )

    def __repr__(self) -> str:
        """Return representation for debugging."""
        return f"<TupleGenerator arity={len(self._components)}>"


def tuples(*components: Generator[Any]) -> TupleGenerator:
    """Generator for tuples built from the given component generators."""
    return TupleGenerator(*components)


def pairs[A, B](first: Generator[A], second: Generator[B]) -> Generator[tuple[A, B]]:
    """Generator for 2-tuples."""
    return TupleGenerator(first, second)  # type: ignore[return-value]
