"""Trouser block: front and back legs plus an optional waistband.

Points follow the numbered construction of a classic trouser draft
(``p0`` at the front waist, ``p2`` at the hem, ``p4`` on the hip line and so
on). The knee positions of the inside leg are found by crossing the side
seams with the knee line, so those points are only available after the
landmark paths exist.
"""

from __future__ import annotations

from typing import Iterable

from drafting.measurements import PantMeasurements, PantOptions
from drafting.piece import Piece, PieceDraft
from drafting.pipeline import PieceDrafter
from drafting.primitives import Curve, Line, PathElement, PathRole, Point, PointRole
from drafting.shapes import rectangle

__all__ = ["PantDrafter"]

_SHARED_POINTS = (
    "p0_origin",
    "p1_body_rise",
    "p2_bottom_leg",
    "p3_knee_line",
    "p4_hip_line",
    "bottom_right",
)
_SHARED_PATHS = ("center_line", "body_rise_line", "knee_line", "bottom_line")

_FRONT_POINTS = _SHARED_POINTS + (
    "p5_hip_line_top",
    "p6_top_front",
    "p7_front_crotch_curve",
    "p8_front_crotch",
    "p9_center_leg",
    "p10_center_knee",
    "p11_center_bottom",
    "p12_bottom_front",
    "p13_inner_ankle_front",
    "p14_front_knee_side",
    "p15_front_knee_inside",
    "front_grain_top",
    "front_grain_bottom",
)
_FRONT_PATHS = _SHARED_PATHS + (
    "front_side_seam_top",
    "front_side_seam",
    "front_bottom_line",
    "front_inner_leg_bottom",
    "front_inner_leg_top",
    "front_crotch_curve",
    "front_crotch_line",
    "front_waist_line",
    "front_grain_line",
)

_BACK_POINTS = _SHARED_POINTS + (
    "p16_back_waist",
    "p17_top_back",
    "p18_back_center_waist",
    "p19_back_crotch_curve",
    "p20_back_crotch_extension",
    "p21_back_crotch",
    "p22_back_bottom",
    "p23_back_knee_side",
    "p24_back_ankle_inside",
    "p25_back_knee_inside",
    "back_grain_top",
    "back_grain_bottom",
)
_BACK_PATHS = _SHARED_PATHS + (
    "back_waist_line",
    "back_center_seam",
    "back_side_seam",
    "back_bottom_line",
    "back_inner_leg_straight",
    "back_inner_leg_curve",
    "back_crotch_curve",
    "back_grain_line",
)


class PantDrafter(PieceDrafter):
    """Drafts trouser front, back and waistband pieces."""

    measurements: PantMeasurements
    options: PantOptions

    def __init__(self, measurements: PantMeasurements, options: PantOptions | None = None) -> None:
        super().__init__(measurements, options or PantOptions())

    @property
    def easy_fit(self) -> bool:
        return bool(self.options.easy_fit)

    def piece_name(self) -> str:
        return "Pants"

    def _landmark(self, key: str, x: float, y: float, role: PointRole = PointRole.LANDMARK) -> Point:
        return self.geometry.add_point(key, Point(key, x, y, role))

    def add_landmark_points(self) -> None:
        m = self.measurements
        rise_ease = 4.0 if self.easy_fit else 2.0
        seat_ease = 8.0 if self.easy_fit else 4.0
        crotch_adjustment = 0.5 if self.easy_fit else -0.5

        # front
        p0 = self._landmark("p0_origin", 0.0, 0.0)
        p1 = self._landmark("p1_body_rise", 0.0, m.rise + rise_ease)
        p2 = self._landmark("p2_bottom_leg", 0.0, p1.y + m.inside_leg)
        p3 = self._landmark("p3_knee_line", 0.0, p1.y + m.inside_leg / 2.0)
        p4 = self._landmark("p4_hip_line", m.quarter_seat + seat_ease, p1.y)
        p5 = self._landmark("p5_hip_line_top", p4.x, p0.y)
        p6 = self._landmark("p6_top_front", p5.x - 1.0, p0.y)
        self._landmark("p7_front_crotch_curve", p4.x, p4.y - p5.distance(p4) / 4.0)
        crotch_depth = p4.x - p1.x
        p8 = self._landmark("p8_front_crotch", p4.x + crotch_depth / 4.0 + crotch_adjustment, p4.y)
        p9 = self._landmark("p9_center_leg", crotch_depth / 2.0 + 1.0, p1.y)
        self._landmark("p10_center_knee", p9.x, p3.y)
        p11 = self._landmark("p11_center_bottom", p9.x, p2.y)
        p12 = self._landmark("p12_bottom_front", p11.x + crotch_depth / 3.0 + 1.0, p11.y)
        p13 = self._landmark("p13_inner_ankle_front", p11.x - (p12.x - p11.x), p11.y)

        # back
        p16 = self._landmark("p16_back_waist", p6.x - 5.0, p6.y)
        self._landmark("p17_top_back", p16.x, p16.y - 4.0)
        self._landmark("p18_back_center_waist", p0.x - (5.0 if self.easy_fit else 4.0), p0.y)
        self._landmark("p19_back_crotch_curve", p4.x, p4.y - p5.distance(p4) / 2.0)
        p20 = self._landmark(
            "p20_back_crotch_extension",
            p8.x + p4.distance(p8) + (1.0 if self.easy_fit else 0.5),
            p8.y,
        )
        self._landmark("p21_back_crotch", p20.x, p20.y + 1.0)
        self._landmark("p22_back_bottom", p13.x + 1.0, p13.y)
        self._landmark("p24_back_ankle_inside", p12.x - 1.0, p12.y)

    def add_landmark_paths(self) -> None:
        geometry = self.geometry
        point = geometry.point

        def add(key: str, start: str, end: str, role: PathRole = PathRole.CUT_LINE) -> None:
            geometry.add_path(key, Line(point(start), point(end), role, name=key))

        add("center_line", "p0_origin", "p2_bottom_leg", PathRole.CONSTRUCTION_LINE)
        add("body_rise_line", "p1_body_rise", "p4_hip_line", PathRole.CONSTRUCTION_LINE)
        add("knee_line", "p3_knee_line", "p10_center_knee", PathRole.CONSTRUCTION_LINE)

        add("front_side_seam_top", "p0_origin", "p1_body_rise")
        add("front_side_seam", "p1_body_rise", "p13_inner_ankle_front")
        add("front_bottom_line", "p13_inner_ankle_front", "p12_bottom_front")
        add("front_crotch_line", "p7_front_crotch_curve", "p6_top_front")
        add("front_waist_line", "p6_top_front", "p0_origin")
        geometry.add_path(
            "front_crotch_curve",
            Curve.through_reference(
                point("p8_front_crotch"),
                point("p7_front_crotch_curve"),
                point("p4_hip_line"),
                3.25 if self.easy_fit else 3.0,
                name="front_crotch_curve",
            ),
        )

        add("back_center_seam", "p19_back_crotch_curve", "p17_top_back")
        add("back_waist_line", "p17_top_back", "p18_back_center_waist")
        add("back_side_seam", "p18_back_center_waist", "p22_back_bottom")
        add("back_bottom_line", "p22_back_bottom", "p24_back_ankle_inside")
        geometry.add_path(
            "back_crotch_curve",
            Curve.through_reference(
                point("p21_back_crotch"),
                point("p19_back_crotch_curve"),
                point("p4_hip_line"),
                -(6.0 if self.easy_fit else 5.5),
                name="back_crotch_curve",
            ),
        )

    def add_relative_points_and_paths(self) -> None:
        geometry = self.geometry
        knee_line = geometry.line("knee_line")
        p10 = geometry.point("p10_center_knee")

        p14 = geometry.add_point(
            "p14_front_knee_side",
            self.require_intersection(
                geometry.line("front_side_seam"), knee_line, "p14_front_knee_side", role=PointRole.CONSTRUCTION
            ),
            relative=True,
        )
        p15 = geometry.add_point(
            "p15_front_knee_inside",
            Point("p15_front_knee_inside", p10.x + p14.distance(p10), p10.y, PointRole.LANDMARK),
            relative=True,
        )
        p23 = geometry.add_point(
            "p23_back_knee_side",
            self.require_intersection(
                geometry.line("back_side_seam"), knee_line, "p23_back_knee_side", role=PointRole.CONSTRUCTION
            ),
            relative=True,
        )
        p25 = geometry.add_point(
            "p25_back_knee_inside",
            Point("p25_back_knee_inside", p15.x + p23.distance(p14), p15.y, PointRole.LANDMARK),
            relative=True,
        )

        p2 = geometry.point("p2_bottom_leg")
        bottom_right = geometry.add_point(
            "bottom_right",
            Point("bottom_right", max(geometry.point("p12_bottom_front").x, p23.x) + 5.0, p2.y),
            relative=True,
        )

        for key, path in (
            ("bottom_line", Line(p2, bottom_right, PathRole.CONSTRUCTION_LINE, name="bottom_line")),
            (
                "front_inner_leg_bottom",
                Line(geometry.point("p12_bottom_front"), p15, name="front_inner_leg_bottom"),
            ),
            (
                "front_inner_leg_top",
                Curve.from_offset(p15, geometry.point("p8_front_crotch"), -1.0, 0.5, name="front_inner_leg_top"),
            ),
            (
                "back_inner_leg_straight",
                Line(geometry.point("p24_back_ankle_inside"), p25, name="back_inner_leg_straight"),
            ),
            (
                "back_inner_leg_curve",
                Curve.from_offset(p25, geometry.point("p21_back_crotch"), -2.0, 0.5, name="back_inner_leg_curve"),
            ),
        ):
            geometry.add_path(key, path, relative=True)

    def add_additional_features(self) -> None:
        geometry = self.geometry
        top_y = 5.0
        bottom_y = geometry.point("p2_bottom_leg").y - 5.0

        front_x = geometry.point("p9_center_leg").x / 2.0
        back_x = (geometry.point("p18_back_center_waist").x + geometry.point("p17_top_back").x) / 2.0
        for side, x in (("front", front_x), ("back", back_x)):
            top = geometry.add_point(f"{side}_grain_top", Point(f"{side}_grain_top", x, top_y), relative=True)
            bottom = geometry.add_point(
                f"{side}_grain_bottom", Point(f"{side}_grain_bottom", x, bottom_y), relative=True
            )
            geometry.add_path(
                f"{side}_grain_line",
                Line(top, bottom, PathRole.GRAIN_LINE, name=f"{side}_grain_line"),
                relative=True,
            )

    def build_pieces(self) -> Iterable[Piece]:
        yield self._build_leg("Front", _FRONT_POINTS, _FRONT_PATHS, self.options.front_pockets)
        yield self._build_leg("Back", _BACK_POINTS, _BACK_PATHS, self.options.back_pockets)
        if self.options.include_waistband:
            yield self._build_waistband()

    def _build_leg(self, side: str, point_keys: Iterable[str], path_keys: Iterable[str], pockets: bool) -> Piece:
        geometry = self.geometry
        lower = side.lower()
        draft = PieceDraft(f"{self.piece_name()} - {side}", seam_allowance=1.5, quantity=2)
        draft.add_points(*geometry.points(*point_keys))
        draft.add_paths(geometry.paths(*path_keys))
        draft.set_grain_line(f"{lower}_grain_top", f"{lower}_grain_bottom")
        draft.add_instruction("cutting", "Cut 2")
        draft.add_instruction("seam allowance", "1.5cm seam allowance included")
        draft.add_instruction("style", f"{self.options.style.value.replace('_', ' ')} leg")
        if pockets:
            draft.add_instruction("pockets", f"Add {lower} pocket as desired")
        return draft.finalize()

    def _build_waistband(self) -> Piece:
        length = self.measurements.waist + 4.0
        width = self.options.waistband_width * 2.0 + 3.0
        draft = rectangle(
            f"{self.piece_name()} - Waistband",
            length,
            width,
            quantity=1,
            seam_allowance=1.5,
            prefix="waistband_",
        )
        fold_left = draft.add_point(Point("waistband_fold_left", 0.0, width / 2.0))
        fold_right = draft.add_point(Point("waistband_fold_right", length, width / 2.0))
        draft.add_path(Line(fold_left, fold_right, PathRole.FOLD_LINE, name="waistband_fold_line"))
        draft.add_instruction("cutting", "Cut 1")
        draft.add_instruction("sewing", "Fold in half along fold line, attach to pants waist")
        return draft.finalize()

    def hem_lines(self) -> tuple[PathElement, ...]:
        geometry = self.geometry
        return (geometry.path("front_bottom_line"), geometry.path("back_bottom_line"))
