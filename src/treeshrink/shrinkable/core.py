"""Shrinkable trees: a value plus a lazy sequence of simpler alternatives.

A Shrinkable never stores its children. It stores a zero-argument factory
and calls it every time shrinks() is asked for, so:
    - Conceptually unbounded trees cost nothing until they are walked
    - The children can be traversed any number of times, independently
    - Unexplored branches are never computed

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator

__all__ = [
    "Shrinkable",
    "just",
    "shrink_recur",
    "shrinkable",
    "walk_first",
]

type ShrinksFactory[T] = Callable[[], Iterable[Shrinkable[T]]]


def _no_shrinks() -> tuple[()]:
    return ()


class Shrinkable[T]:
    """Immutable tree node holding one value and its lazily computed shrinks.

    Example:
        >>> tree = Shrinkable(3, lambda: [just(1), just(0)])
        >>> tree.value
        3
        >>> [child.value for child in tree.shrinks()]
        [1, 0]
        >>> [child.value for child in tree.shrinks()]  # restartable
        [1, 0]
    """

    __slots__ = ("_factory", "_value")

    def __init__(self, value: T, factory: ShrinksFactory[T] = _no_shrinks) -> None:
        """Initialize node.

        Args:
            value: The value at this node
            factory: Called on every shrinks() to produce the children
        """
        self._value = value
        self._factory = factory

    @property
    def value(self) -> T:
        """Value at this node."""
        return self._value

    def shrinks(self) -> Iterator[Shrinkable[T]]:
        """Return a fresh iterator over the children, simplest candidates first."""
        return iter(self._factory())

    def __repr__(self) -> str:
        """Return representation for debugging (children are not evaluated)."""
        return f"Shrinkable(value={self._value!r})"


def just[T](value: T) -> Shrinkable[T]:
    """Leaf node: value with no shrinks."""
    return Shrinkable(value)


def shrinkable[T](value: T, factory: ShrinksFactory[T]) -> Shrinkable[T]:
    """Node with the given children factory."""
    return Shrinkable(value, factory)


def shrink_recur[T](value: T, shrink: Callable[[T], Iterable[T]]) -> Shrinkable[T]:
    """Build a tree by applying a value-level shrinker recursively.

    The children of a node holding v are shrink_recur(c, shrink) for each c
    in shrink(v), in order. shrink must eventually stop producing candidates
    along every path for greedy walks to terminate.
    """
    return Shrinkable(
        value, lambda: (shrink_recur(candidate, shrink) for candidate in shrink(value))
    )


def walk_first[T](tree: Shrinkable[T], limit: int | None = None) -> Iterator[T]:
    """Yield the values along the path that always takes the first child.

    Starts with the root value. Stops at a node without children, or after
    limit steps when a limit is given.
    """
    yield tree.value
    steps = 0
    node = tree
    while limit is None or steps < limit:
        first = next(node.shrinks(), None)
        if first is None:
            return
        node = first
        steps += 1
        yield node.value
