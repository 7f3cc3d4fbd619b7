"""Tests for formatting context propagation."""

import dataclasses

import pytest

from htmlplain.conversion import FormattingContext, ListKind, NumberingCounter, derive_child_context
from htmlplain.conversion.context import successor


class TestDeriveChildContext:
    """Tests for derive_child_context."""

    def test_default_context(self):
        """Test the context a conversion starts with."""
        context = FormattingContext()
        assert context.pre is False
        assert context.show_links is True
        assert context.list_kind == ListKind.NONE
        assert context.counter is None

    def test_other_elements_pass_context_through(self):
        """Test that non-list, non-pre elements reuse the parent's context."""
        context = FormattingContext()
        for name in ("div", "p", "li", "table", "a"):
            assert derive_child_context(name, context) is context

    def test_unordered_list(self):
        """Test entering an unordered list."""
        child = derive_child_context("ul", FormattingContext())
        assert child.list_kind == ListKind.UNORDERED
        assert child.ul_depth == 0

    def test_nested_unordered_list(self):
        """Test that depth increases per level."""
        child = derive_child_context("ul", derive_child_context("ul", FormattingContext()))
        assert child.ul_depth == 1

    def test_ordered_list_seeds(self):
        """Test that depth parity picks the first marker."""
        first = derive_child_context("ol", FormattingContext())
        second = derive_child_context("ol", first)
        third = derive_child_context("ol", second)
        assert first.counter.value == "1"
        assert second.counter.value == "a"
        assert third.counter.value == "1"
        assert third.ol_depth == 2

    def test_nested_ordered_list_gets_fresh_counter(self):
        """Test that a sublist never shares its parent's counter."""
        outer = derive_child_context("ol", FormattingContext())
        inner = derive_child_context("ol", outer)
        assert inner.counter is not outer.counter

    def test_sibling_lists_get_separate_counters(self):
        """Test that two lists at the same depth count independently."""
        context = FormattingContext()
        first = derive_child_context("ol", context)
        second = derive_child_context("ol", context)
        first.counter.next()
        assert second.counter.value == "1"

    def test_list_inside_other_kind_keeps_depths(self):
        """Test that entering a ul keeps ordered list state."""
        ordered = derive_child_context("ol", FormattingContext())
        unordered = derive_child_context("ul", ordered)
        assert unordered.list_kind == ListKind.UNORDERED
        assert unordered.ol_depth == 0
        assert unordered.counter is ordered.counter

    def test_pre(self):
        """Test entering a preformatted element."""
        context = FormattingContext(show_links=False)
        child = derive_child_context("pre", context)
        assert child.pre is True
        assert child.show_links is False
        assert context.pre is False

    def test_context_is_immutable(self):
        """Test that contexts cannot be changed in place."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            FormattingContext().pre = True


class TestNumberingCounter:
    """Tests for NumberingCounter and successor."""

    def test_next_returns_then_advances(self):
        """Test consecutive markers."""
        counter = NumberingCounter("1")
        assert [counter.next() for _ in range(3)] == ["1", "2", "3"]
        assert counter.value == "4"

    def test_alphabetic(self):
        """Test letter markers."""
        counter = NumberingCounter.for_depth(1)
        assert [counter.next() for _ in range(3)] == ["a", "b", "c"]

    @pytest.mark.parametrize(
        "marker, expected",
        [
            ("1", "2"),
            ("9", "10"),
            ("99", "100"),
            ("a", "b"),
            ("z", "aa"),
            ("az", "ba"),
            ("zz", "aaa"),
            ("A", "B"),
            ("Z", "AA"),
        ],
    )
    def test_successor(self, marker, expected):
        """Test carrying past the last digit or letter."""
        assert successor(marker) == expected
