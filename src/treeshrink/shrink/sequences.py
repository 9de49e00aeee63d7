"""Value-level shrink combinators.

Every combinator returns a plain iterable of candidate values, simplest
first. Shrink functions are called again for every traversal of a tree
node, so each call must build a fresh iterable (generators do).

Provides:
    - nothing: No candidates
    - constant: Fixed candidates tried in order
    - towards: Bisection from a target back toward the value
    - sequentially: Concatenation of several candidate sources
    - map_values: Lazily mapped candidates

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import itertools
from collections.abc import Callable, Iterable, Iterator

__all__ = ["constant", "map_values", "nothing", "sequentially", "towards"]


def nothing[T]() -> Iterator[T]:
    """No candidates."""
    return iter(())


def constant[T](values: Iterable[T]) -> tuple[T, ...]:
    """Fixed candidates, in the given order.

    The values are copied at call time, so later mutation of the input
    does not change the candidates.
    """
    return tuple(values)


def _halve(distance: int) -> int:
    """Halve an integer, truncating toward zero."""
    if distance >= 0:
        return distance // 2
    return -((-distance) // 2)


def towards(value: int, target: int) -> Iterator[int]:
    """Candidates between target and value, starting at target.

    Yields target first, then points that halve the remaining distance back
    toward value: towards(100, 0) yields 0, 50, 75, 88, 94, 97, 99. Every
    candidate is strictly closer to target than value, so repeatedly taking
    the first candidate reaches target, and a driver that commits to the
    first failing candidate performs a binary search for the boundary.

    Example:
        >>> list(towards(100, 0))
        [0, 50, 75, 88, 94, 97, 99]
        >>> list(towards(-5, 0))
        [0, -3, -4]
        >>> list(towards(7, 7))
        []
    """
    distance = target - value
    while distance != 0:
        yield value + distance
        distance = _halve(distance)


def sequentially[T](*sources: Iterable[T]) -> Iterator[T]:
    """Candidates of each source in turn, earlier sources exhausted first."""
    return itertools.chain.from_iterable(sources)


def map_values[T, U](source: Iterable[T], mapper: Callable[[T], U]) -> Iterator[U]:
    """Candidates of source passed lazily through mapper."""
    return (mapper(candidate) for candidate in source)
