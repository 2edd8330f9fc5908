"""Outline derivation and seam-allowance expansion for pattern pieces."""

from __future__ import annotations

import warnings
from dataclasses import dataclass

from shapely.geometry import LineString, MultiPolygon, Polygon
from shapely.ops import polygonize, unary_union

from .errors import OutlineWarning
from .piece import Piece
from .primitives import DEFAULT_CURVE_SAMPLES, Line, PathRole, Point, PointRole

__all__ = ["OutlineResult", "add_seam_allowance", "derive_outline", "seam_allowance_name"]


@dataclass(frozen=True, slots=True)
class OutlineResult:
    """Closed outline of a piece, or the reason it could not be built."""

    polygon: Polygon | None
    diagnostic: str | None = None

    @property
    def ok(self) -> bool:
        return self.polygon is not None

    @property
    def area(self) -> float:
        return float(self.polygon.area) if self.polygon is not None else 0.0

    def exterior(self) -> list[tuple[float, float]]:
        """Outline ring without the repeated closing coordinate."""

        if self.polygon is None:
            return []
        return [(float(x), float(y)) for x, y in list(self.polygon.exterior.coords)[:-1]]


def derive_outline(piece: Piece, samples: int = DEFAULT_CURVE_SAMPLES) -> OutlineResult:
    """Polygonise the visible cut and seam paths of ``piece``.

    Paths are noded together first so crossings and shared endpoints split
    into proper edges. Of the closed regions found, the one with the largest
    enclosed area is the outline. When no region closes, a diagnostic is
    returned and an :class:`OutlineWarning` is emitted.
    """

    lines = [LineString(path.coordinates(samples)) for path in piece.outline_paths()]
    if not lines:
        return _failed(piece, "has no visible cut or seam paths")

    noded = unary_union(lines)
    polygons = [polygon for polygon in polygonize(noded) if not polygon.is_empty]
    if not polygons:
        return _failed(piece, f"has {len(lines)} outline paths but none of them close a region")

    largest = max(polygons, key=lambda polygon: Polygon(polygon.exterior).area)
    return OutlineResult(Polygon(largest.exterior))


def _failed(piece: Piece, reason: str) -> OutlineResult:
    message = f"Could not derive outline for piece {piece.name!r}: it {reason}."
    warnings.warn(message, OutlineWarning, stacklevel=3)
    return OutlineResult(None, message)


def seam_allowance_name(name: str) -> str:
    return f"{name} with seam allowance"


def _ring_prefix(piece: Piece) -> str:
    prefix = "sa"
    generation = 1
    while any(name.startswith(f"{prefix}_") for name in piece.points):
        generation += 1
        prefix = f"sa{generation}"
    return prefix


def add_seam_allowance(piece: Piece, width: float | None = None) -> Piece:
    """Return a copy of ``piece`` grown outward by ``width`` centimetres.

    ``width`` defaults to the piece's own seam allowance. A non-positive
    width, or a piece whose outline cannot be derived, yields ``piece``
    unchanged. The original geometry is kept with its cut lines re-tagged as
    seam lines, and a ring of ``sa_<i>`` cut points joined by cut lines
    traces the expanded outline. Growing a piece again names the new ring
    ``sa2_<i>``, ``sa3_<i>`` and so on.
    """

    allowance = piece.seam_allowance if width is None else float(width)
    if allowance <= 0:
        return piece

    outline = derive_outline(piece)
    if outline.polygon is None:
        return piece

    expanded = outline.polygon.buffer(allowance, join_style="round")
    if isinstance(expanded, MultiPolygon):
        expanded = max(expanded.geoms, key=lambda polygon: polygon.area)
    ring = list(expanded.exterior.coords)[:-1]

    draft = piece.to_draft(seam_allowance_name(piece.name))
    draft.seam_allowance = 0.0
    draft.paths = [
        path.with_role(PathRole.SEAM_LINE) if path.role is PathRole.CUT_LINE else path
        for path in draft.paths
    ]

    prefix = _ring_prefix(piece)
    cut_points = [
        draft.add_point(Point(f"{prefix}_{index}", x, y, PointRole.CUT_POINT))
        for index, (x, y) in enumerate(ring)
    ]
    for index, start in enumerate(cut_points):
        end = cut_points[(index + 1) % len(cut_points)]
        draft.add_path(Line(start, end, PathRole.CUT_LINE))

    return draft.finalize()
