"""Control-point synthesis for quadratic pattern curves.

Both helpers operate on plain ``(x, y)`` tuples so they can be reused by
exporters and tests without constructing :class:`~drafting.primitives.Point`
instances.
"""

from __future__ import annotations

import math

from .errors import ConstructionError

__all__ = [
    "MIN_CHORD_LENGTH",
    "REFERENCE_NUDGE",
    "chord_frame",
    "control_from_offset",
    "control_from_reference",
]

MIN_CHORD_LENGTH = 1e-3
REFERENCE_NUDGE = 0.01

Coordinate = tuple[float, float]


def chord_frame(start: Coordinate, end: Coordinate) -> tuple[float, float, float]:
    """Return ``(dx, dy, length)`` for the chord ``start -> end``.

    Raises :class:`ConstructionError` when the chord is shorter than
    :data:`MIN_CHORD_LENGTH`.
    """

    dx = end[0] - start[0]
    dy = end[1] - start[1]
    length = math.hypot(dx, dy)
    if length < MIN_CHORD_LENGTH:
        raise ConstructionError(
            f"Chord from {start} to {end} is too short to shape a curve ({length:.6f} cm)."
        )
    return dx, dy, length


def control_from_offset(
    start: Coordinate,
    end: Coordinate,
    distance: float,
    position: float = 0.5,
) -> Coordinate:
    """Place a control point perpendicular to the chord.

    The control sits at twice ``distance`` from the chord midpoint along the
    counter-clockwise normal of ``start -> end``. When ``position`` differs
    from ``0.5`` the control is slid along the chord by a quarter of the
    offset fraction, pulling the bulge toward ``start`` or ``end``.
    """

    dx, dy, length = chord_frame(start, end)
    mid_x = (start[0] + end[0]) / 2.0
    mid_y = (start[1] + end[1]) / 2.0
    perp_x = -dy / length
    perp_y = dx / length

    control_x = mid_x + perp_x * distance * 2.0
    control_y = mid_y + perp_y * distance * 2.0

    if abs(position - 0.5) > 1e-3:
        shift = (position - 0.5) * 2.0
        control_x += dx * shift * 0.25
        control_y += dy * shift * 0.25

    return control_x, control_y


def control_from_reference(
    start: Coordinate,
    end: Coordinate,
    reference: Coordinate,
    distance: float,
) -> Coordinate:
    """Derive a control point from an external reference point.

    A ``distance`` of (almost) zero uses the reference itself. Otherwise the
    reference is projected onto the chord and the control is placed along
    the projection normal at ``|CR| - 0.5 / distance`` from the foot point.
    """

    if abs(distance) < 1e-3:
        return float(reference[0]), float(reference[1])

    dx, dy, length = chord_frame(start, end)
    unit_x = dx / length
    unit_y = dy / length

    projection = (reference[0] - start[0]) * unit_x + (reference[1] - start[1]) * unit_y
    ratio = projection / length
    foot_x = start[0] + ratio * dx
    foot_y = start[1] + ratio * dy

    perp_x = reference[0] - foot_x
    perp_y = reference[1] - foot_y
    perp_distance = math.hypot(perp_x, perp_y)
    if perp_distance < 1e-3:
        # reference lies on the chord
        perp_x = -unit_y * REFERENCE_NUDGE
        perp_y = unit_x * REFERENCE_NUDGE
        perp_distance = REFERENCE_NUDGE

    adjusted = perp_distance - 0.5 / distance
    return (
        foot_x + perp_x / perp_distance * adjusted,
        foot_y + perp_y / perp_distance * adjusted,
    )
