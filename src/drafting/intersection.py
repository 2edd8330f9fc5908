"""Parametric intersection of two line segments."""

from __future__ import annotations

__all__ = ["PARALLEL_TOLERANCE", "intersect_segments"]

PARALLEL_TOLERANCE = 1e-4

Coordinate = tuple[float, float]


def intersect_segments(
    a_start: Coordinate,
    a_end: Coordinate,
    b_start: Coordinate,
    b_end: Coordinate,
    *,
    extend: bool = False,
) -> Coordinate | None:
    """Return the crossing point of segments ``a`` and ``b``.

    ``None`` is returned for parallel or coincident segments and, unless
    ``extend`` is set, for crossings that fall outside either segment.
    """

    x1, y1 = a_start
    x2, y2 = a_end
    x3, y3 = b_start
    x4, y4 = b_end

    denominator = (y4 - y3) * (x2 - x1) - (x4 - x3) * (y2 - y1)
    if abs(denominator) < PARALLEL_TOLERANCE:
        return None

    ua = ((x4 - x3) * (y1 - y3) - (y4 - y3) * (x1 - x3)) / denominator
    ub = ((x2 - x1) * (y1 - y3) - (y2 - y1) * (x1 - x3)) / denominator

    if not extend and not (0.0 <= ua <= 1.0 and 0.0 <= ub <= 1.0):
        return None

    return x1 + ua * (x2 - x1), y1 + ua * (y2 - y1)
