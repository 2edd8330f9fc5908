"""Torso block drafted from chest, back and neck measurements."""

from __future__ import annotations

from typing import Iterable

from drafting.errors import DraftingError
from drafting.measurements import PieceOptions, TorsoMeasurements
from drafting.piece import Piece, PieceDraft
from drafting.pipeline import PieceDrafter
from drafting.primitives import Curve, Line, PathElement, PathRole, Point, PointRole

__all__ = ["TorsoDrafter"]

_FRONT_ONLY_POINTS = {"front_neck_point"}
_FRONT_ONLY_PATHS = {"front_neck_curve"}
_BACK_ONLY_PATHS = {"back_neck_curve"}


class TorsoDrafter(PieceDrafter):
    """Drafts matching front and back torso pieces.

    Easy fit adds more ease at the scye depth, half back and chest, for
    jersey garments worn over other layers.
    """

    measurements: TorsoMeasurements

    def __init__(self, measurements: TorsoMeasurements, options: PieceOptions | None = None) -> None:
        super().__init__(measurements, options or PieceOptions())

    @property
    def easy_fit(self) -> bool:
        return bool(self.options.easy_fit)

    @property
    def armhole_diagonal(self) -> float:
        """Straight distance from the shoulder top to the armhole side point."""

        geometry = self.geometry
        return geometry.point("shoulder_top_point").distance(geometry.point("armhole_side_point"))

    def piece_name(self) -> str:
        return "Jersey Torso Block" if self.easy_fit else "Basic Torso Block"

    def add_landmark_points(self) -> None:
        m = self.measurements
        geometry = self.geometry
        scye_depth = m.scye_depth + (5.0 if self.easy_fit else 3.0)
        back_width = m.half_back + (3.5 if self.easy_fit else 2.5)
        chest_width = m.quarter_chest + (4.0 if self.easy_fit else 2.5)
        length = m.finished_length

        def landmark(key: str, x: float, y: float) -> Point:
            return geometry.add_point(key, Point(key, x, y, PointRole.LANDMARK))

        landmark("origin", 0.0, 0.0)
        landmark("waist_level", 0.0, m.back_neck_to_waist + 1.0)
        landmark("hem_level", 0.0, length)
        landmark("scye_depth_level", 0.0, scye_depth)
        landmark("half_scye_depth_level", 0.0, scye_depth / 2.0)
        landmark("quarter_scye_depth_level", 0.0, scye_depth / 8.0)
        landmark("neck_shoulder_point", m.neck_width, 0.0)
        landmark("back_neck_point", m.neck_width, -0.75)
        landmark("back_side_point", back_width, scye_depth)
        landmark("armhole_side_point", chest_width, scye_depth)
        landmark("hem_side_point", chest_width, length)
        landmark("front_neck_point", 0.0, m.neck_width - 1.5)

    def add_landmark_paths(self) -> None:
        geometry = self.geometry
        side_x = geometry.point("armhole_side_point").x

        def construction(key: str, start_key: str, end: Point) -> None:
            geometry.add_path(key, Line(geometry.point(start_key), end, PathRole.CONSTRUCTION_LINE, name=key))

        waist_y = geometry.point("waist_level").y
        construction("waist_line", "waist_level", geometry.add_point("waist_right", Point("waist_right", side_x, waist_y)))
        construction("hem_line", "hem_level", geometry.point("hem_side_point"))
        construction("scye_depth_line", "scye_depth_level", geometry.point("armhole_side_point"))
        half_y = geometry.point("half_scye_depth_level").y
        construction(
            "half_scye_depth_line",
            "half_scye_depth_level",
            geometry.add_point("half_scye_right", Point("half_scye_right", side_x, half_y)),
        )
        quarter_y = geometry.point("quarter_scye_depth_level").y
        construction(
            "quarter_scye_depth_line",
            "quarter_scye_depth_level",
            geometry.add_point("quarter_scye_right", Point("quarter_scye_right", side_x, quarter_y)),
        )

        geometry.add_path(
            "back_neck_curve",
            Curve.from_offset(
                geometry.point("origin"), geometry.point("back_neck_point"), 0.25, 0.5, name="back_neck_curve"
            ),
        )

    def add_relative_points_and_paths(self) -> None:
        geometry = self.geometry
        back_x = geometry.point("back_side_point").x

        armhole_mid = geometry.add_point(
            "shoulder_end_point",
            Point("shoulder_end_point", back_x, geometry.point("half_scye_depth_level").y, PointRole.LANDMARK),
            relative=True,
        )
        shoulder_level = geometry.point("quarter_scye_depth_level").y
        geometry.add_point(
            "shoulder_square_point",
            Point("shoulder_square_point", back_x, shoulder_level, PointRole.CONSTRUCTION),
            relative=True,
        )
        shoulder_top = geometry.add_point(
            "shoulder_top_point",
            Point("shoulder_top_point", back_x + 0.75, shoulder_level, PointRole.LANDMARK),
            relative=True,
        )

        back_neck = geometry.point("back_neck_point")
        armhole_side = geometry.point("armhole_side_point")
        hem_side = geometry.point("hem_side_point")
        hem_level = geometry.point("hem_level")

        paths: list[tuple[str, PathElement]] = [
            ("shoulder_seam", Line(back_neck, shoulder_top, name="shoulder_seam")),
            ("top_armhole_curve", Curve.from_offset(shoulder_top, armhole_mid, 0.25, 0.4, name="top_armhole_curve")),
            (
                "bottom_armhole_curve",
                Curve.from_offset(armhole_mid, armhole_side, 2.5, 0.7, name="bottom_armhole_curve"),
            ),
            ("side_seam", Line(armhole_side, hem_side, name="side_seam")),
            ("bottom_hem", Line(hem_side, hem_level, name="bottom_hem")),
            ("center_line", Line(hem_level, geometry.point("origin"), name="center_line")),
            (
                "front_neck_curve",
                Curve.from_offset(back_neck, geometry.point("front_neck_point"), -2.5, 0.5, name="front_neck_curve"),
            ),
        ]
        for key, path in paths:
            geometry.add_path(key, path, relative=True)

    def add_additional_features(self) -> None:
        geometry = self.geometry
        grain_x = geometry.point("armhole_side_point").x / 2.0
        top = geometry.add_point(
            "grain_line_top", Point("grain_line_top", grain_x, geometry.point("origin").y + 2.0), relative=True
        )
        bottom = geometry.add_point(
            "grain_line_bottom",
            Point("grain_line_bottom", grain_x, geometry.point("hem_level").y - 2.0),
            relative=True,
        )
        geometry.add_path("grain_line", Line(top, bottom, PathRole.GRAIN_LINE, name="grain_line"), relative=True)

        back_neck = geometry.point("back_neck_point")
        shoulder_top = geometry.point("shoulder_top_point")
        geometry.add_point(
            "shoulder_notch",
            Point(
                "shoulder_notch",
                back_neck.x + 0.5 * (shoulder_top.x - back_neck.x),
                back_neck.y + 0.5 * (shoulder_top.y - back_neck.y),
                PointRole.NOTCH,
            ),
            relative=True,
        )

    def build_pieces(self) -> Iterable[Piece]:
        yield self._build_piece("Front", exclude_points=set(), exclude_paths=_BACK_ONLY_PATHS)
        yield self._build_piece("Back", exclude_points=_FRONT_ONLY_POINTS, exclude_paths=_FRONT_ONLY_PATHS)

    def _build_piece(self, side: str, *, exclude_points: set[str], exclude_paths: set[str]) -> Piece:
        geometry = self.geometry
        draft = PieceDraft(f"{self.piece_name()} - {side}", seam_allowance=1.0, quantity=1)
        skipped = {id(getattr(geometry.path(key), "control", None)) for key in exclude_paths}
        for point in geometry:
            if point.name not in exclude_points and id(point) not in skipped:
                draft.add_point(point)
        for path in geometry.landmark_paths() + geometry.relative_paths():
            if path.name not in exclude_paths:
                draft.add_path(path)
        draft.set_grain_line("grain_line_top", "grain_line_bottom")
        draft.add_instruction("cutting", "Cut 1")
        draft.add_instruction("sewing", "Sew shoulder seams first, then side seams")
        return draft.finalize()

    def hem_lines(self) -> tuple[PathElement, ...]:
        if not self.geometry.has_path("bottom_hem"):
            raise DraftingError("TorsoDrafter hem lines are only available after drafting.")
        return (self.geometry.path("bottom_hem"),)
