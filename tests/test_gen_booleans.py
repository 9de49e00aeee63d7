"""Tests for gen/booleans.py: full-entropy boolean generation."""

from __future__ import annotations

from hypothesis import given

from tests.tree_helpers import atoms, child_values, replay, sizes
from treeshrink.gen import booleans


class TestBooleanDraw:
    """True iff the low bit of a full-size uint8 draw is zero."""

    @given(atom=atoms, size=sizes)
    def test_low_bit_decides(self, atom: int, size: int) -> None:
        """PROPERTY: value depends only on the atom's low bit, never on size."""
        assert booleans.draw(size, replay(atom, size)) is (atom & 1 == 0)

    def test_both_values_reachable_at_size_zero(self) -> None:
        """Booleans ignore the ambient size."""
        assert booleans.draw(0, replay(2, 0)) is True
        assert booleans.draw(0, replay(3, 0)) is False


class TestBooleanShrink:
    """Two-state machine: True -> {False}, False -> {}."""

    def test_true_shrinks_to_false(self) -> None:
        """shrink(True) == [False]."""
        assert list(booleans.shrink(True)) == [False]

    def test_false_is_minimal(self) -> None:
        """shrink(False) == []."""
        assert list(booleans.shrink(False)) == []

    def test_tree_shape(self) -> None:
        """A generated True has exactly one child, a terminal False."""
        tree = booleans.generate(10, replay(0, 10))
        assert tree.value is True
        assert child_values(tree) == [False]
        assert child_values(next(tree.shrinks())) == []
