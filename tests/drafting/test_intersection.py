"""Tests for segment intersection."""

from __future__ import annotations

import pytest

from drafting.intersection import intersect_segments


def test_crossing_segments() -> None:
    assert intersect_segments((0.0, 0.0), (4.0, 4.0), (0.0, 4.0), (4.0, 0.0)) == pytest.approx((2.0, 2.0))


def test_touching_endpoints_count_as_intersection() -> None:
    assert intersect_segments((0.0, 0.0), (2.0, 0.0), (2.0, 0.0), (2.0, 3.0)) == pytest.approx((2.0, 0.0))


def test_parallel_and_collinear_segments_do_not_intersect() -> None:
    assert intersect_segments((0.0, 0.0), (2.0, 0.0), (0.0, 1.0), (2.0, 1.0)) is None
    assert intersect_segments((0.0, 0.0), (2.0, 0.0), (1.0, 0.0), (3.0, 0.0)) is None


def test_extend_treats_segments_as_infinite_lines() -> None:
    a_start, a_end = (0.0, 0.0), (1.0, 1.0)
    b_start, b_end = (4.0, 0.0), (3.0, 1.0)

    assert intersect_segments(a_start, a_end, b_start, b_end) is None
    assert intersect_segments(a_start, a_end, b_start, b_end, extend=True) == pytest.approx((2.0, 2.0))
