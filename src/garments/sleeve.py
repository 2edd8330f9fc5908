"""Set-in sleeve drafted to fit the torso armhole."""

from __future__ import annotations

import math

from drafting.measurements import PieceOptions, SleeveMeasurements
from drafting.piece import PieceDraft
from drafting.pipeline import PieceDrafter
from drafting.primitives import Curve, Line, PathElement, PathRole, Point, PointRole

__all__ = ["SleeveDrafter"]

CAP_EASE = 2.5
CUFF_HEIGHT = 5.0
HEM_HEIGHT = 2.5


class SleeveDrafter(PieceDrafter):
    """Drafts one sleeve, cut as a pair.

    The cap width comes from the armhole diagonal measured on the torso
    block, so the sleeve head matches the armhole it is eased into.
    """

    measurements: SleeveMeasurements

    def __init__(
        self,
        measurements: SleeveMeasurements,
        options: PieceOptions | None,
        armhole_diagonal: float,
    ) -> None:
        super().__init__(measurements, options or PieceOptions())
        self.armhole_diagonal = float(armhole_diagonal)

    @property
    def short(self) -> bool:
        return bool(self.options.short)

    @property
    def cap_width(self) -> float:
        half_scye = self.measurements.half_scye_depth
        diagonal = self.armhole_diagonal
        cap_height = math.sqrt(diagonal**2 - half_scye**2) if diagonal > half_scye else 0.0
        return cap_height + CAP_EASE

    def piece_name(self) -> str:
        return "Short Sleeve" if self.short else "Long Sleeve"

    def configure_piece(self, draft: PieceDraft) -> None:
        draft.quantity = 2
        draft.seam_allowance = 1.0
        draft.cut_on_fold = False

    def add_instructions(self, draft: PieceDraft) -> None:
        draft.set_grain_line("sleeve_grain_top", "sleeve_grain_bottom")
        draft.add_instruction("cutting", "Cut 2")
        draft.add_instruction("sewing", "Ease sleeve cap into armhole")
        if not self.short:
            draft.add_instruction("finishing", "Add cuff or hem as required")

    def add_landmark_points(self) -> None:
        geometry = self.geometry
        half_scye = self.measurements.half_scye_depth
        length = self.measurements.sleeve_length
        cap_width = self.cap_width
        if self.short:
            wrist_x = cap_width - 4.0
        else:
            wrist_x = self.measurements.wrist / 2.0 + (7.0 if self.options.easy_fit else 6.0)

        for key, x, y in (
            ("sleeve_origin", 0.0, 0.0),
            ("half_scye_point", half_scye, 0.0),
            ("sleeve_length_point", 0.0, length),
            ("cap_width_point", cap_width, half_scye),
            ("underarm_point", cap_width, half_scye),
            ("front_cap_point", cap_width * 2.0 / 3.0, half_scye * 2.0 / 3.0),
            ("wrist_point", wrist_x, length),
        ):
            geometry.add_point(key, Point(key, x, y, PointRole.LANDMARK))

    def add_landmark_paths(self) -> None:
        geometry = self.geometry
        origin = geometry.point("sleeve_origin")
        length_point = geometry.point("sleeve_length_point")
        geometry.add_path(
            "half_scye_line",
            Line(origin, geometry.point("half_scye_point"), PathRole.CONSTRUCTION_LINE, name="half_scye_line"),
        )
        geometry.add_path(
            "sleeve_length_line",
            Line(length_point, geometry.point("wrist_point"), PathRole.CONSTRUCTION_LINE, name="sleeve_length_line"),
        )
        geometry.add_path("sleeve_center_line", Line(origin, length_point, name="sleeve_center_line"))

    def add_relative_points_and_paths(self) -> None:
        geometry = self.geometry
        cap_width_point = geometry.point("cap_width_point")
        front_cap = geometry.point("front_cap_point")
        underarm = geometry.point("underarm_point")
        wrist = geometry.point("wrist_point")

        geometry.add_path(
            "back_cap_curve",
            Curve.from_offset(cap_width_point, front_cap, -0.75, 0.5, name="back_cap_curve"),
            relative=True,
        )
        geometry.add_path(
            "front_cap_curve",
            Curve.from_offset(front_cap, geometry.point("sleeve_origin"), 2.0, 0.5, name="front_cap_curve"),
            relative=True,
        )
        geometry.add_path(
            "underarm_seam",
            Curve.from_offset(underarm, wrist, 0.75 if self.short else 2.0, 0.5, name="underarm_seam"),
            relative=True,
        )
        geometry.add_path(
            "wrist_line",
            Line(wrist, geometry.point("sleeve_length_point"), name="wrist_line"),
            relative=True,
        )

    def add_additional_features(self) -> None:
        geometry = self.geometry
        cap_width = self.cap_width
        length_point = geometry.point("sleeve_length_point")
        wrist = geometry.point("wrist_point")

        geometry.add_point(
            "sleeve_shoulder_notch",
            Point("sleeve_shoulder_notch", cap_width * 0.75, -0.5, PointRole.NOTCH),
            relative=True,
        )
        top = geometry.add_point(
            "sleeve_grain_top", Point("sleeve_grain_top", cap_width / 2.0, 2.0), relative=True
        )
        bottom = geometry.add_point(
            "sleeve_grain_bottom",
            Point("sleeve_grain_bottom", cap_width / 2.0, length_point.y - 2.0),
            relative=True,
        )
        geometry.add_path(
            "sleeve_grain_line", Line(top, bottom, PathRole.GRAIN_LINE, name="sleeve_grain_line"), relative=True
        )

        prefix, height = ("hem_fold", HEM_HEIGHT) if self.short else ("cuff_fold", CUFF_HEIGHT)
        fold_y = length_point.y - height
        left = geometry.add_point(f"{prefix}_left", Point(f"{prefix}_left", length_point.x, fold_y), relative=True)
        right = geometry.add_point(f"{prefix}_right", Point(f"{prefix}_right", wrist.x, fold_y), relative=True)
        geometry.add_path(
            f"{prefix}_line", Line(left, right, PathRole.CONSTRUCTION_LINE, name=f"{prefix}_line"), relative=True
        )

    def hem_lines(self) -> tuple[PathElement, ...]:
        return (self.geometry.path("wrist_line"),)
