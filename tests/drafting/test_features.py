"""Tests for hem pieces."""

from __future__ import annotations

import pytest

from drafting.errors import ConstructionError
from drafting.features import HemFeature
from drafting.outline import derive_outline
from drafting.primitives import Line, PathRole, Point, PointRole


def _edge() -> Line:
    return Line(Point("s", 0.0, 0.0), Point("e", 10.0, 0.0), name="hem_edge")


def test_hem_piece_geometry() -> None:
    (piece,) = HemFeature(_edge()).draft()

    assert piece.name == "Hem for hem_edge"
    assert piece.quantity == 1
    assert piece.points["HemTopLeft"].coords == (0.0, 0.0)
    assert piece.points["HemTopRight"].coords == (10.0, 0.0)
    assert piece.points["HemBottomRight"].coords == pytest.approx((10.0, 3.0))
    assert piece.points["HemBottomLeft"].coords == pytest.approx((0.0, 3.0))
    assert piece.points["HemTopMid"].role is PointRole.CONSTRUCTION
    assert piece.points["HemBottomLeft"].role is PointRole.LANDMARK

    assert len(piece.paths_with_role(PathRole.CUT_LINE)) == 4
    fold = piece.path("HemFold")
    assert fold.role is PathRole.FOLD_LINE
    assert fold.start.coords == (5.0, 0.0)
    assert fold.end.coords == pytest.approx((5.0, 3.0))
    assert derive_outline(piece).area == pytest.approx(30.0)


def test_hem_instructions() -> None:
    (piece,) = HemFeature(_edge(), 2.0).draft()

    assert piece.instructions["cutting"] == "Cut 1"
    assert piece.instructions["alignment"] == "Match top edge with hem_edge"
    assert "Fold along center line" in piece.instructions["sewing"]


def test_non_positive_width_uses_default() -> None:
    assert HemFeature(_edge(), 0.0).width == HemFeature.DEFAULT_WIDTH
    assert HemFeature(_edge(), -1.0).width == 3.0


def test_hem_follows_edge_direction() -> None:
    edge = Line(Point("s", 0.0, 0.0), Point("e", 0.0, 8.0))

    (piece,) = HemFeature(edge, 2.0).draft()

    assert piece.points["HemBottomRight"].coords == pytest.approx((-2.0, 8.0))


def test_standalone_hem() -> None:
    feature = HemFeature.standalone(20.0, 4.0)

    (piece,) = feature.draft()

    assert piece.name == "Hem for StandaloneEdge"
    assert derive_outline(piece).area == pytest.approx(80.0)
    with pytest.raises(ConstructionError):
        HemFeature.standalone(0.0)
