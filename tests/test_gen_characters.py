"""Tests for gen/characters.py: single-character generation and shrinking."""

from __future__ import annotations

import unicodedata

from hypothesis import given
from hypothesis import strategies as st

from tests.tree_helpers import atoms, replay, sizes
from treeshrink.gen import characters
from treeshrink.shrinkable import shrink_recur, walk_first

NON_ASCII = 7 << 61


class TestCharacterDraw:
    """Printable ASCII mostly, BMP characters otherwise."""

    def test_ascii_selection(self) -> None:
        """Low selector values pick printable ASCII from the atom."""
        assert characters.draw(100, replay(0)) == " "
        assert characters.draw(100, replay(33)) == "A"

    def test_bmp_selection(self) -> None:
        """The top selector picks a BMP code point."""
        assert characters.draw(100, replay(NON_ASCII | 0x3B1)) == "α"

    def test_control_characters_fold_to_ascii(self) -> None:
        """DEL and the C1 block are never produced."""
        assert characters.draw(100, replay(NON_ASCII | 0x7F)) == "@"
        assert characters.draw(100, replay(NON_ASCII | 0x85)) == "F"
        assert characters.draw(100, replay(NON_ASCII | 0x9F)) == "`"
        assert characters.draw(100, replay(NON_ASCII | 0xA0)) == "\xa0"

    def test_surrogates_fold_to_ascii(self) -> None:
        """Surrogate code points are never produced."""
        assert characters.draw(100, replay(NON_ASCII | 0xD800)) == "&"

    def test_small_size_limits_code_points(self) -> None:
        """At small sizes, non-ASCII draws stay within 7 bits."""
        assert ord(characters.draw(0, replay(NON_ASCII | 0x3B1))) < 0x80

    @given(atom=atoms, size=sizes)
    def test_always_one_valid_character(self, atom: int, size: int) -> None:
        """PROPERTY: one non-surrogate, non-control character."""
        char = characters.draw(size, replay(atom, size))
        assert len(char) == 1
        assert unicodedata.category(char) != "Cc"
        assert not 0xD800 <= ord(char) < 0xE000


class TestCharacterShrink:
    """Lower-case form, then simple characters."""

    def test_simple_characters(self) -> None:
        """a is minimal; b and c shrink to earlier simple characters."""
        assert list(characters.shrink("a")) == []
        assert list(characters.shrink("b")) == ["a"]
        assert list(characters.shrink("c")) == ["a", "b"]

    def test_upper_case_tries_lower_first(self) -> None:
        """Upper-case letters try their lower-case form first."""
        assert list(characters.shrink("Z")) == ["z", "a", "b", "c"]
        assert list(characters.shrink("A")) == ["a", "b", "c"]

    def test_other_characters(self) -> None:
        """Anything else shrinks straight to the simple characters."""
        assert list(characters.shrink("#")) == ["a", "b", "c"]

    @given(char=st.characters(exclude_categories=("Cs",)))
    def test_greedy_shrink_reaches_a(self, char: str) -> None:
        """PROPERTY: greedy shrinking of any character ends at 'a'."""
        path = list(walk_first(shrink_recur(char, characters.shrink), limit=10))
        assert path[-1] == "a"
