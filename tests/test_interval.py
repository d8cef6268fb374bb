"""Tests for half-open character spans."""

import pytest

from whenwords.interval import Span


def test_touching_spans_do_not_overlap():
    """The end of a span is exclusive."""
    a = Span(start=0, end=3)
    b = Span(start=3, end=5)
    assert not a.overlaps(b)
    assert not b.overlaps(a)


def test_partial_overlap():
    """Spans sharing one character overlap."""
    a = Span(start=0, end=4)
    b = Span(start=3, end=6)
    assert a.overlaps(b)
    assert b.overlaps(a)


def test_nested_spans_overlap():
    """A span inside another overlaps it."""
    outer = Span(start=0, end=10)
    inner = Span(start=2, end=4)
    assert outer.overlaps(inner)
    assert inner.overlaps(outer)


def test_identical_spans_overlap():
    """A span overlaps itself."""
    span = Span(start=1, end=4)
    assert span.overlaps(Span(start=1, end=4))


def test_disjoint_spans():
    """Spans with a gap between them do not overlap."""
    a = Span(start=0, end=2)
    b = Span(start=5, end=9)
    assert not a.overlaps(b)
    assert not b.overlaps(a)


def test_start_after_end_rejected():
    """A span cannot end before it starts."""
    with pytest.raises(ValueError, match="must be <= end"):
        Span(start=5, end=2)


def test_str():
    """String form shows the range and width."""
    assert str(Span(start=2, end=7)) == "Span(2→7, 5 chars)"
