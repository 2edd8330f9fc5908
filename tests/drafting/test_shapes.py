"""Tests for ready-made shapes and darts."""

from __future__ import annotations

import math

import pytest

from drafting.errors import ConstructionError
from drafting.outline import derive_outline
from drafting.piece import PieceDraft
from drafting.primitives import PathRole, Point
from drafting.shapes import add_dart, basic_bodice, circle, rectangle


def test_rectangle_corners() -> None:
    piece = rectangle("Band", 12.0, 3.0, prefix="band_", quantity=2, cut_on_fold=True).finalize()

    assert set(piece.points) == {"band_top_left", "band_top_right", "band_bottom_right", "band_bottom_left"}
    assert piece.points["band_bottom_right"].coords == (12.0, 3.0)
    assert piece.quantity == 2
    assert piece.cut_on_fold
    with pytest.raises(ConstructionError):
        rectangle("Flat", 1.0, 0.0)


def test_circle_is_a_closed_polygon() -> None:
    piece = circle("Disc", 10.0, 32).finalize()

    assert len(piece.paths) == 32
    assert "center" in piece.points
    expected = 0.5 * 32 * 100.0 * math.sin(2.0 * math.pi / 32)
    assert derive_outline(piece).area == pytest.approx(expected, rel=1e-6)
    with pytest.raises(ConstructionError):
        circle("Bad", 10.0, 2)


def test_basic_bodice_on_fold() -> None:
    piece = basic_bodice("Bodice", 96.0, 76.0, 40.0, 38.0)

    assert piece.cut_on_fold
    assert piece.path("center_line").role is PathRole.FOLD_LINE
    assert piece.grain_line == ("center_waist", "neck_center")
    assert piece.instructions["cutting"] == "Cut 1 on fold"
    assert piece.points["armhole"].coords == pytest.approx((24.0, 16.0))


def test_basic_bodice_cut_twice() -> None:
    piece = basic_bodice("Bodice", 96.0, 76.0, 40.0, 38.0, cut_on_fold=False, quantity=2)

    assert piece.path("center_line").role is PathRole.CUT_LINE
    assert piece.instructions["cutting"] == "Cut 2"


def test_add_dart() -> None:
    draft = PieceDraft("Darted")
    base = draft.add_point(Point("waist", 10.0, 0.0))

    left, tip, right = add_dart(draft, "waist", base, 2.0, 5.0)

    assert left.coords == pytest.approx((9.0, 0.0))
    assert right.coords == pytest.approx((11.0, 0.0))
    assert tip.coords == pytest.approx((10.0, 5.0))
    assert tip.name == "waist_dart_point"
    assert len(draft.paths) == 2
    with pytest.raises(ConstructionError):
        add_dart(draft, "bad", base, 0.0, 5.0)
