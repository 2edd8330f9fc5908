"""Accessory pieces derived from the edges of drafted pieces."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod

from .errors import ConstructionError
from .piece import Piece, PieceDraft
from .primitives import Line, PathElement, PathRole, Point, PointRole

__all__ = ["HemFeature", "PatternFeature"]


class PatternFeature(ABC):
    """Produces extra pieces from geometry that has already been drafted."""

    @abstractmethod
    def draft(self) -> tuple[Piece, ...]:
        """Return the pieces contributed by this feature."""


class HemFeature(PatternFeature):
    """Rectangular hem band folded along its centre and sewn to an edge."""

    DEFAULT_WIDTH = 3.0

    def __init__(self, edge: PathElement, width: float = DEFAULT_WIDTH) -> None:
        self.edge = edge
        self.width = float(width) if width > 0 else self.DEFAULT_WIDTH

    @classmethod
    def standalone(cls, length: float, width: float = DEFAULT_WIDTH) -> "HemFeature":
        """Hem along a horizontal edge of ``length`` starting at the origin."""

        if length <= 0:
            raise ConstructionError("Hem length must be positive.")
        start = Point("Start", 0.0, 0.0, PointRole.CONSTRUCTION)
        end = Point("End", float(length), 0.0, PointRole.CONSTRUCTION)
        return cls(Line(start, end, PathRole.CONSTRUCTION_LINE, name="StandaloneEdge"), width)

    @property
    def piece_name(self) -> str:
        return f"Hem for {self.edge.name}"

    def draft(self) -> tuple[Piece, ...]:
        start = self.edge.start
        end = self.edge.end
        dx = end.x - start.x
        dy = end.y - start.y
        length = math.hypot(dx, dy)
        if length <= 1e-9:
            raise ConstructionError(f"Edge {self.edge.name!r} is too short to hem.")
        perp_x = -dy / length * self.width
        perp_y = dx / length * self.width

        top_left = Point("HemTopLeft", start.x, start.y, PointRole.LANDMARK)
        top_right = Point("HemTopRight", end.x, end.y, PointRole.LANDMARK)
        bottom_right = Point("HemBottomRight", end.x + perp_x, end.y + perp_y, PointRole.LANDMARK)
        bottom_left = Point("HemBottomLeft", start.x + perp_x, start.y + perp_y, PointRole.LANDMARK)
        top_mid = Point(
            "HemTopMid", (start.x + end.x) / 2.0, (start.y + end.y) / 2.0, PointRole.CONSTRUCTION
        )
        bottom_mid = Point(
            "HemBottomMid",
            (bottom_left.x + bottom_right.x) / 2.0,
            (bottom_left.y + bottom_right.y) / 2.0,
            PointRole.CONSTRUCTION,
        )

        draft = PieceDraft(self.piece_name, seam_allowance=1.0, quantity=1)
        draft.add_points(top_left, top_right, bottom_right, bottom_left, top_mid, bottom_mid)
        draft.add_path(Line(top_left, top_right, PathRole.CUT_LINE))
        draft.add_path(Line(top_right, bottom_right, PathRole.CUT_LINE))
        draft.add_path(Line(bottom_right, bottom_left, PathRole.CUT_LINE))
        draft.add_path(Line(bottom_left, top_left, PathRole.CUT_LINE))
        draft.add_path(Line(top_mid, bottom_mid, PathRole.FOLD_LINE, name="HemFold"))

        draft.add_instruction("cutting", "Cut 1")
        draft.add_instruction("sewing", "Fold along center line and press before attaching to garment")
        draft.add_instruction("alignment", f"Match top edge with {self.edge.name}")
        return (draft.finalize(),)
