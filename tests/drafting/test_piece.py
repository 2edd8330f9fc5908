"""Tests for finalised pieces and the mutable draft."""

from __future__ import annotations

import pytest

from drafting.errors import ConstructionError
from drafting.piece import Piece, PieceDraft
from drafting.primitives import Curve, Line, PathRole, Point


def _triangle_draft() -> PieceDraft:
    a = Point("a", 0.0, 0.0)
    b = Point("b", 4.0, 0.0)
    c = Point("c", 0.0, 3.0)
    draft = PieceDraft("Triangle", seam_allowance=0.5, quantity=2)
    draft.add_paths([Line(a, b), Line(b, c), Line(c, a)])
    return draft


def test_add_path_registers_its_points() -> None:
    draft = _triangle_draft()

    piece = draft.finalize()

    assert set(piece.points) == {"a", "b", "c"}
    assert len(piece.paths) == 3
    assert piece.quantity == 2
    assert piece.seam_allowance == 0.5


def test_curve_control_point_is_registered() -> None:
    start = Point("s", 0.0, 0.0)
    end = Point("e", 6.0, 0.0)
    draft = PieceDraft("Curved")
    curve = draft.add_path(Curve.from_offset(start, end, 1.0, name="edge"))

    piece = draft.finalize()

    assert piece.points[curve.control.name] is curve.control


def test_draft_rejects_a_second_point_with_the_same_name() -> None:
    draft = PieceDraft("Clash")
    draft.add_point(Point("a", 0.0, 0.0))

    with pytest.raises(ConstructionError):
        draft.add_point(Point("a", 1.0, 1.0))


def test_finalised_piece_is_read_only() -> None:
    piece = _triangle_draft().finalize()

    with pytest.raises(TypeError):
        piece.points["d"] = Point("d", 1.0, 1.0)  # type: ignore[index]
    with pytest.raises(AttributeError):
        piece.name = "Renamed"  # type: ignore[misc]


def test_piece_validates_its_fields() -> None:
    a = Point("a", 0.0, 0.0)
    b = Point("b", 1.0, 0.0)
    stranger = Point("b", 1.0, 0.0)
    line = Line(a, b)

    with pytest.raises(ConstructionError):
        Piece("Unregistered", {"a": a, "b": stranger}, (line,))
    with pytest.raises(ConstructionError):
        Piece("Wrong key", {"a": a, "x": b}, ())
    with pytest.raises(ConstructionError):
        Piece("No cut", {"a": a, "b": b}, (line,), quantity=0)
    with pytest.raises(ConstructionError):
        Piece("Negative", {"a": a, "b": b}, (line,), seam_allowance=-1.0)
    with pytest.raises(ConstructionError):
        Piece("Grain", {"a": a, "b": b}, (line,), grain_line=("a",))
    with pytest.raises(ConstructionError):
        Piece(" ", {"a": a, "b": b}, (line,))


def test_lookup_helpers() -> None:
    draft = _triangle_draft()
    a = draft.points["a"]
    fold = Line(draft.points["b"], a, PathRole.FOLD_LINE, name="fold", visible=False)
    draft.add_path(fold)
    draft.set_grain_line("a", "c")
    piece = draft.finalize()

    assert piece.point("a") is a
    assert piece.path("fold") is fold
    assert piece.paths_with_role(PathRole.FOLD_LINE) == (fold,)
    assert fold not in piece.outline_paths()
    assert len(piece.outline_paths()) == 3
    assert piece.grain_line == ("a", "c")
    with pytest.raises(ConstructionError):
        piece.point("missing")
    with pytest.raises(ConstructionError):
        piece.path("missing")


def test_to_draft_copies_everything() -> None:
    draft = _triangle_draft()
    draft.add_instruction("cutting", "Cut 2")
    piece = draft.finalize()

    copy = piece.to_draft("Copy").finalize()

    assert copy.name == "Copy"
    assert copy.points["a"] is piece.points["a"]
    assert copy.paths == piece.paths
    assert copy.instructions == {"cutting": "Cut 2"}
    assert copy.quantity == piece.quantity
