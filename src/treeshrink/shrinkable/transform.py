"""Structural transforms over already-built Shrinkable trees.

Provides three combinators:
    - map: Transform every value in the tree (type may change)
    - map_shrinks: Reshape the child sequence, keeping the root value
    - filter: Prune every subtree whose root fails a predicate

All three are lazy: nothing below the root is computed until a caller
walks the resulting tree.

Python 3.13+.
"""

# ruff: noqa: A001 - map and filter mirror the builtin names
from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator

from .core import Shrinkable
from .maybe import ABSENT, Maybe, Present

__all__ = ["filter", "map", "map_shrinks"]

logger = logging.getLogger(__name__)


def map[T, U](mapper: Callable[[T], U], tree: Shrinkable[T]) -> Shrinkable[U]:
    """Map every value of tree through mapper.

    The root value becomes mapper(tree.value) and each child c becomes
    map(mapper, c), so shape is preserved while values (and their type)
    change.

    Example:
        >>> from treeshrink.shrinkable.core import just
        >>> doubled = map(lambda x: x * 2, Shrinkable(3, lambda: [just(1)]))
        >>> doubled.value, [c.value for c in doubled.shrinks()]
        (6, [2])
    """
    return Shrinkable(
        mapper(tree.value),
        lambda: (map(mapper, child) for child in tree.shrinks()),
    )


def map_shrinks[T](
    mapper: Callable[[Iterator[Shrinkable[T]]], Iterable[Shrinkable[T]]],
    tree: Shrinkable[T],
) -> Shrinkable[T]:
    """Return tree with the same root value and its children passed through mapper.

    mapper receives a fresh iterator over the original children each time
    the result's shrinks() is called and returns the replacement sequence.
    Use it to reorder, truncate, annotate or extend the candidates without
    touching the root value or the value type.

    Usage:
        first_two = map_shrinks(lambda s: itertools.islice(s, 2), tree)
    """
    return Shrinkable(tree.value, lambda: mapper(tree.shrinks()))


def filter[T](predicate: Callable[[T], bool], tree: Shrinkable[T]) -> Maybe[Shrinkable[T]]:
    """Recursively remove every subtree whose root fails predicate.

    A failing node is dropped together with all its descendants; they are
    not promoted to its parent. Because the root itself may fail, the result
    is ABSENT when predicate(tree.value) is false.

    Returns:
        Present(filtered tree) if the root satisfies predicate, else ABSENT
    """
    if not predicate(tree.value):
        logger.debug("Filter removed tree root %r", tree.value)
        return ABSENT
    return Present(_kept(predicate, tree))


def _kept[T](predicate: Callable[[T], bool], tree: Shrinkable[T]) -> Shrinkable[T]:
    """Filtered copy of a tree whose root is already known to pass."""

    def children() -> Iterator[Shrinkable[T]]:
        for child in tree.shrinks():
            if predicate(child.value):
                yield _kept(predicate, child)

    return Shrinkable(tree.value, children)
