"""Tests for shrinkable/core.py: lazy, restartable Shrinkable trees."""

from __future__ import annotations

from collections.abc import Iterator

from tests.tree_helpers import child_values
from treeshrink.shrinkable import Shrinkable, just, shrink_recur, shrinkable, walk_first


def _halves(value: int) -> Iterator[int]:
    if value > 0:
        yield value // 2


class TestShrinkable:
    """Basic node behavior."""

    def test_just_has_no_children(self) -> None:
        """just() builds a leaf."""
        leaf = just("x")
        assert leaf.value == "x"
        assert child_values(leaf) == []

    def test_children_are_restartable(self) -> None:
        """shrinks() can be traversed repeatedly and independently."""
        tree = shrinkable(5, lambda: (just(n) for n in range(3)))
        first = tree.shrinks()
        second = tree.shrinks()
        assert next(first).value == 0
        assert [c.value for c in second] == [0, 1, 2]
        assert [c.value for c in first] == [1, 2]
        assert child_values(tree) == [0, 1, 2]

    def test_children_computed_on_demand(self) -> None:
        """The factory is not called until shrinks() is requested."""
        calls: list[int] = []

        def factory() -> Iterator[Shrinkable[int]]:
            calls.append(1)
            yield just(0)

        tree = Shrinkable(1, factory)
        assert calls == []
        iterator = tree.shrinks()
        next(iterator)
        assert calls == [1]

    def test_unbounded_children_are_safe(self) -> None:
        """A conceptually infinite child sequence is fine if only partly read."""

        def naturals() -> Iterator[Shrinkable[int]]:
            n = 0
            while True:
                yield just(n)
                n += 1

        tree = Shrinkable(-1, naturals)
        iterator = tree.shrinks()
        assert [next(iterator).value for _ in range(4)] == [0, 1, 2, 3]

    def test_repr_does_not_evaluate_children(self) -> None:
        """repr shows only the value."""

        def explode() -> list[Shrinkable[int]]:
            raise AssertionError

        assert repr(Shrinkable(3, explode)) == "Shrinkable(value=3)"


class TestShrinkRecur:
    """Trees built from value-level shrinkers."""

    def test_children_follow_shrinker(self) -> None:
        """Each level applies the shrinker to its own value."""
        tree = shrink_recur(8, _halves)
        assert child_values(tree) == [4]
        assert list(walk_first(tree)) == [8, 4, 2, 1, 0]

    def test_walk_first_respects_limit(self) -> None:
        """walk_first stops after limit steps."""
        assert list(walk_first(shrink_recur(8, _halves), limit=2)) == [8, 4, 2]

    def test_walk_first_of_leaf(self) -> None:
        """A leaf walk yields only the root."""
        assert list(walk_first(just(3))) == [3]
