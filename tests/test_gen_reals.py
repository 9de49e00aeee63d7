"""Tests for gen/reals.py: exponentially scaled floating-point generation."""

from __future__ import annotations

import struct

from hypothesis import given
from hypothesis import strategies as st

from tests.tree_helpers import atoms, child_values, replay, sizes
from treeshrink.constants import INT64_MAX, REAL_GROWTH_BASE, REFERENCE_SIZE
from treeshrink.gen import RealGenerator, float32, float64
from treeshrink.shrinkable import shrink_recur, walk_first

SIGN_BIT = 1 << 63


class TestRealDraw:
    """Scaling law and precision."""

    @given(atom=atoms)
    def test_size_zero_is_small(self, atom: int) -> None:
        """PROPERTY: size 0 stays within the unit interval (in fact yields 0.0)."""
        value = float64.draw(0, replay(atom, 0))
        assert abs(value) <= 1.0
        assert value == 0.0

    @given(atom=atoms, size=sizes)
    def test_magnitude_bounded_by_growth_curve(self, atom: int, size: int) -> None:
        """PROPERTY: abs(value) <= 1.2 ** size."""
        value = float64.draw(size, replay(atom, size))
        assert abs(value) <= REAL_GROWTH_BASE**size

    @given(atom=atoms, size=sizes)
    def test_float32_bounded_up_to_rounding(self, atom: int, size: int) -> None:
        """PROPERTY: float32 obeys the same bound up to one binary32 ulp."""
        value = float32.draw(size, replay(atom, size))
        assert abs(value) <= REAL_GROWTH_BASE**size * (1 + 2**-23)

    @given(atom=atoms, size=sizes)
    def test_float32_values_are_single_precision(self, atom: int, size: int) -> None:
        """PROPERTY: float32 values survive a binary32 round trip unchanged."""
        value = float32.draw(size, replay(atom, size))
        assert struct.unpack("<f", struct.pack("<f", value))[0] == value

    def test_extreme_atom_reaches_growth_curve(self) -> None:
        """The largest int64 draw maps onto +/- 1.2 ** size."""
        top = REAL_GROWTH_BASE**REFERENCE_SIZE
        assert float64.draw(REFERENCE_SIZE, replay(INT64_MAX)) == top
        assert float64.draw(REFERENCE_SIZE, replay(SIGN_BIT | INT64_MAX)) == -top

    def test_huge_size_does_not_overflow(self) -> None:
        """Very large sizes stay finite, also in single precision."""
        assert abs(float32.draw(10_000, replay(INT64_MAX))) < float("inf")
        assert abs(float64.draw(10_000, replay(INT64_MAX))) < float("inf")

    def test_repr(self) -> None:
        """Debug representation names the precision."""
        assert repr(float32) == "<RealGenerator float32>"
        assert repr(RealGenerator()) == "<RealGenerator float64>"


class TestRealShrink:
    """Candidate-only shrinking: negation, then truncation."""

    def test_negative_fraction(self) -> None:
        """-2.5 -> 2.5, then -2.0."""
        assert list(float64.shrink(-2.5)) == [2.5, -2.0]

    def test_positive_fraction(self) -> None:
        """2.5 -> 2.0."""
        assert list(float64.shrink(2.5)) == [2.0]

    def test_integral_values_are_minimal(self) -> None:
        """Whole numbers have no truncation candidate."""
        assert list(float64.shrink(3.0)) == []
        assert list(float64.shrink(0.0)) == []
        assert list(float64.shrink(-3.0)) == [3.0]

    def test_tree_children(self) -> None:
        """The generated tree exposes the candidates."""
        tree = float64.generate(REFERENCE_SIZE, replay(SIGN_BIT | INT64_MAX))
        assert child_values(tree) == [-tree.value, float(int(tree.value))]

    @given(
        value=st.floats(
            min_value=-1e12, max_value=1e12, allow_nan=False, allow_infinity=False
        )
    )
    def test_greedy_shrink_terminates(self, value: float) -> None:
        """PROPERTY: greedy walks end within two steps at a non-negative whole number."""
        path = list(walk_first(shrink_recur(value, float64.shrink), limit=10))
        assert len(path) <= 3
        assert path[-1] >= 0
        assert path[-1].is_integer()
