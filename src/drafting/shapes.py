"""Ready-made piece shapes and small construction helpers."""

from __future__ import annotations

import math

from .errors import ConstructionError
from .piece import Piece, PieceDraft
from .primitives import Curve, Line, PathRole, Point, PointRole

__all__ = ["add_dart", "basic_bodice", "circle", "rectangle"]


def rectangle(
    name: str,
    width: float,
    height: float,
    *,
    cut_on_fold: bool = False,
    quantity: int = 1,
    seam_allowance: float = 1.0,
    prefix: str = "",
) -> PieceDraft:
    """Open a draft for a ``width`` x ``height`` rectangle anchored at the origin.

    Corner points are named ``<prefix>top_left``, ``top_right``,
    ``bottom_right`` and ``bottom_left``; the four sides are cut lines.
    """

    if width <= 0 or height <= 0:
        raise ConstructionError(f"Rectangle {name!r} needs a positive width and height.")

    draft = PieceDraft(name, seam_allowance=seam_allowance, cut_on_fold=cut_on_fold, quantity=quantity)
    corners = [
        Point(f"{prefix}top_left", 0.0, 0.0, PointRole.LANDMARK),
        Point(f"{prefix}top_right", width, 0.0, PointRole.LANDMARK),
        Point(f"{prefix}bottom_right", width, height, PointRole.LANDMARK),
        Point(f"{prefix}bottom_left", 0.0, height, PointRole.LANDMARK),
    ]
    draft.add_points(*corners)
    for index, start in enumerate(corners):
        draft.add_path(Line(start, corners[(index + 1) % 4], PathRole.CUT_LINE))
    return draft


def circle(
    name: str,
    radius: float,
    segments: int = 32,
    *,
    quantity: int = 1,
    seam_allowance: float = 1.0,
) -> PieceDraft:
    """Open a draft for a circle approximated by ``segments`` cut lines."""

    if radius <= 0:
        raise ConstructionError(f"Circle {name!r} needs a positive radius.")
    if segments < 3:
        raise ConstructionError(f"Circle {name!r} needs at least three segments.")

    draft = PieceDraft(name, seam_allowance=seam_allowance, quantity=quantity)
    draft.add_point(Point("center", 0.0, 0.0, PointRole.CONSTRUCTION))
    rim = []
    for index in range(segments):
        angle = 2.0 * math.pi * index / segments
        rim.append(
            draft.add_point(
                Point(f"p{index}", radius * math.cos(angle), radius * math.sin(angle), PointRole.CUT_POINT)
            )
        )
    for index, start in enumerate(rim):
        draft.add_path(Line(start, rim[(index + 1) % segments], PathRole.CUT_LINE))
    return draft


def basic_bodice(
    name: str,
    bust: float,
    waist: float,
    shoulder_to_waist: float,
    across_shoulder: float,
    *,
    cut_on_fold: bool = True,
    quantity: int = 1,
    seam_allowance: float = 1.5,
) -> Piece:
    """Quarter-bodice block with a curved neck and armhole."""

    width = bust / 4.0
    waist_width = waist / 4.0
    shoulder_width = across_shoulder / 2.0
    height = shoulder_to_waist

    neck_center = Point("neck_center", 0.0, 0.0, PointRole.LANDMARK)
    shoulder = Point("shoulder", shoulder_width, 0.0, PointRole.LANDMARK)
    armhole = Point("armhole", width, height * 0.4, PointRole.LANDMARK)
    side_waist = Point("side_waist", waist_width, height, PointRole.LANDMARK)
    center_waist = Point("center_waist", 0.0, height, PointRole.LANDMARK)

    draft = PieceDraft(name, seam_allowance=seam_allowance, cut_on_fold=cut_on_fold, quantity=quantity)
    draft.add_points(neck_center, shoulder, armhole, side_waist, center_waist)
    draft.add_path(Curve.from_offset(neck_center, shoulder, -shoulder_width * 0.2, 0.3, name="neck_curve"))
    draft.add_path(Curve.from_offset(shoulder, armhole, shoulder_width * 0.15, 0.5, name="armhole_curve"))
    draft.add_path(Line(armhole, side_waist, PathRole.CUT_LINE, name="side_seam"))
    draft.add_path(Line(side_waist, center_waist, PathRole.CUT_LINE, name="waist_line"))
    center_role = PathRole.FOLD_LINE if cut_on_fold else PathRole.CUT_LINE
    draft.add_path(Line(center_waist, neck_center, center_role, name="center_line"))
    draft.set_grain_line(center_waist, neck_center)

    draft.add_instruction("cutting", "Cut 1 on fold" if cut_on_fold else "Cut 2")
    draft.add_instruction("sewing", "Sew shoulder seams first, then side seams")
    return draft.finalize()


def add_dart(
    draft: PieceDraft,
    base_name: str,
    base: Point,
    width: float,
    length: float,
    angle: float = 0.0,
) -> tuple[Point, Point, Point]:
    """Add a dart centred on ``base`` and return its (left, point, right) triple.

    ``angle`` is in radians and rotates the dart's base line; the tip sits
    ``length`` away along the base line's normal.
    """

    if width <= 0 or length <= 0:
        raise ConstructionError(f"Dart {base_name!r} needs a positive width and length.")

    half = width / 2.0
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    left = Point(f"{base_name}_dart_left", base.x - half * cos_a, base.y - half * sin_a, PointRole.LANDMARK)
    right = Point(f"{base_name}_dart_right", base.x + half * cos_a, base.y + half * sin_a, PointRole.LANDMARK)
    tip = Point(f"{base_name}_dart_point", base.x - length * sin_a, base.y + length * cos_a, PointRole.LANDMARK)

    draft.add_points(left, tip, right)
    draft.add_path(Line(left, tip, PathRole.CUT_LINE))
    draft.add_path(Line(tip, right, PathRole.CUT_LINE))
    return left, tip, right
