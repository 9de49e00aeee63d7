"""Shrink strategies for variable-length collections.

A collection shrink strategy receives the element trees of one generated
collection and yields smaller element-tree sequences. The collection
generator turns each yielded sequence into a child node, so strategies
never touch collection types (list, dict, str) directly.

Two directions are available:
    - remove_chunks: Fewer elements (contiguous chunks removed)
    - shrink_each: Same elements, one of them replaced by its own shrink

removal_then_elements, the default, tries every removal before any
element shrink: cardinality is usually the cheaper simplification.

Python 3.13+.
"""

from __future__ import annotations

import itertools
from collections.abc import Iterable, Iterator, Sequence
from typing import Protocol

from treeshrink.shrinkable import Shrinkable

__all__ = [
    "CollectionShrinkStrategy",
    "default_strategy",
    "remove_chunks",
    "removal_then_elements",
    "shrink_each",
]

type ElementTrees[E] = tuple[Shrinkable[E], ...]


class CollectionShrinkStrategy(Protocol):
    """Callable producing smaller element sequences for one collection."""

    def __call__[E](
        self, elements: Sequence[Shrinkable[E]], /
    ) -> Iterable[ElementTrees[E]]:
        ...  # pragma: no cover  # Protocol stub - not executable


def remove_chunks[E](elements: Sequence[Shrinkable[E]]) -> Iterator[ElementTrees[E]]:
    """Sequences with one contiguous chunk removed, larger chunks first.

    Chunk sizes are len, len // 2, ..., 1; for each size every start
    offset is tried from left to right.

    Example:
        For [a, b, c, d]: [], [c, d], [a, d], [a, b], [b, c, d], [a, c, d], ...
    """
    items = tuple(elements)
    count = len(items)
    chunk = count
    while chunk > 0:
        for start in range(count - chunk + 1):
            yield items[:start] + items[start + chunk :]
        chunk //= 2


def shrink_each[E](elements: Sequence[Shrinkable[E]]) -> Iterator[ElementTrees[E]]:
    """Sequences with exactly one element replaced by one of its shrinks.

    Elements are visited in order; each element's shrinks are exhausted
    before the next element is touched.
    """
    items = tuple(elements)
    for index, element in enumerate(items):
        for candidate in element.shrinks():
            yield items[:index] + (candidate,) + items[index + 1 :]


def removal_then_elements[E](
    elements: Sequence[Shrinkable[E]],
) -> Iterator[ElementTrees[E]]:
    """All chunk removals, then all single-element shrinks."""
    return itertools.chain(remove_chunks(elements), shrink_each(elements))


default_strategy: CollectionShrinkStrategy = removal_then_elements
