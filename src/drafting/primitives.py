"""Named points and the line/curve elements that connect them."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from enum import Enum

import numpy as np

from .errors import ConstructionError
from .intersection import intersect_segments
from .shaping import MIN_CHORD_LENGTH, control_from_offset, control_from_reference

__all__ = [
    "DEFAULT_CURVE_SAMPLES",
    "Curve",
    "Line",
    "PathElement",
    "PathRole",
    "Point",
    "PointRole",
]

DEFAULT_CURVE_SAMPLES = 20


class PointRole(str, Enum):
    """How a point participates in the drafted pattern."""

    CONSTRUCTION = "construction"
    LANDMARK = "landmark"
    NOTCH = "notch"
    CUT_POINT = "cut_point"
    SEAM_POINT = "seam_point"
    FOLD_POINT = "fold_point"


class PathRole(str, Enum):
    """How a path is interpreted when cutting and sewing."""

    CUT_LINE = "cut_line"
    SEAM_LINE = "seam_line"
    FOLD_LINE = "fold_line"
    CONSTRUCTION_LINE = "construction_line"
    GRAIN_LINE = "grain_line"
    BUTTON_LINE = "button_line"
    HEM_LINE = "hem_line"


@dataclass(frozen=True, slots=True, eq=False)
class Point:
    """Immutable, named 2D location measured in centimetres.

    Points compare by identity: two points at the same coordinates are still
    distinct drafting entities.
    """

    name: str
    x: float
    y: float
    role: PointRole = PointRole.CONSTRUCTION

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise ConstructionError("Point name must be a non-empty string.")
        try:
            x = float(self.x)
            y = float(self.y)
        except (TypeError, ValueError) as exc:
            raise ConstructionError(f"Point {self.name!r} has non-numeric coordinates.") from exc
        if not (math.isfinite(x) and math.isfinite(y)):
            raise ConstructionError(f"Point {self.name!r} has non-finite coordinates ({x}, {y}).")
        object.__setattr__(self, "x", x)
        object.__setattr__(self, "y", y)
        object.__setattr__(self, "role", PointRole(self.role))

    @property
    def coords(self) -> tuple[float, float]:
        return self.x, self.y

    def distance(self, other: "Point") -> float:
        return math.hypot(other.x - self.x, other.y - self.y)

    def mirror(self, *, vertically: bool = False, horizontally: bool = False) -> "Point":
        """Return a mirrored copy named ``<name>_mirrored``.

        ``vertically`` flips across the vertical axis (negates ``x``) and
        ``horizontally`` flips across the horizontal axis (negates ``y``).
        """

        return Point(
            f"{self.name}_mirrored",
            -self.x if vertically else self.x,
            -self.y if horizontally else self.y,
            self.role,
        )

    def __repr__(self) -> str:
        return f"Point({self.name!r}, {self.x:.4f}, {self.y:.4f}, {self.role.value})"


def _require_distinct(start: Point, end: Point, kind: str) -> None:
    if not isinstance(start, Point) or not isinstance(end, Point):
        raise ConstructionError(f"{kind} endpoints must be Point instances.")
    if start is end:
        raise ConstructionError(f"{kind} cannot start and end at the same point {start.name!r}.")
    if start.distance(end) <= 1e-9:
        raise ConstructionError(
            f"{kind} from {start.name!r} to {end.name!r} has zero length."
        )


@dataclass(frozen=True, slots=True, eq=False)
class Line:
    """Straight path element between two registered points."""

    start: Point
    end: Point
    role: PathRole = PathRole.CUT_LINE
    name: str = ""
    visible: bool = True

    def __post_init__(self) -> None:
        _require_distinct(self.start, self.end, "Line")
        object.__setattr__(self, "role", PathRole(self.role))
        if not self.name:
            object.__setattr__(self, "name", f"line_{self.start.name}_{self.end.name}")

    @property
    def points(self) -> tuple[Point, ...]:
        return self.start, self.end

    @property
    def length(self) -> float:
        return self.start.distance(self.end)

    def with_role(self, role: PathRole) -> "Line":
        return replace(self, role=role)

    def sample(self, count: int = DEFAULT_CURVE_SAMPLES) -> list[tuple[float, float]]:
        return [self.start.coords, self.end.coords]

    def coordinates(self, samples: int = DEFAULT_CURVE_SAMPLES) -> list[tuple[float, float]]:
        return self.sample(samples)

    def intersect(self, other: "Line", *, extend: bool = False) -> Point | None:
        """Return the crossing with ``other`` as a construction point, if any."""

        hit = intersect_segments(
            self.start.coords,
            self.end.coords,
            other.start.coords,
            other.end.coords,
            extend=extend,
        )
        if hit is None:
            return None
        return Point(f"Intersection_{self.name}_{other.name}", hit[0], hit[1], PointRole.CONSTRUCTION)


@dataclass(frozen=True, slots=True, eq=False)
class Curve:
    """Quadratic Bezier path element shaped by a single control point."""

    start: Point
    end: Point
    control: Point
    role: PathRole = PathRole.CUT_LINE
    name: str = ""
    visible: bool = True

    def __post_init__(self) -> None:
        _require_distinct(self.start, self.end, "Curve")
        if not isinstance(self.control, Point):
            raise ConstructionError("Curve control must be a Point instance.")
        if self.start.distance(self.end) < MIN_CHORD_LENGTH:
            raise ConstructionError(
                f"Curve from {self.start.name!r} to {self.end.name!r} has a degenerate chord."
            )
        mid_x = (self.start.x + self.end.x) / 2.0
        mid_y = (self.start.y + self.end.y) / 2.0
        if math.hypot(self.control.x - mid_x, self.control.y - mid_y) <= 1e-9:
            raise ConstructionError(
                f"Curve from {self.start.name!r} to {self.end.name!r} has its control on the chord midpoint."
            )
        object.__setattr__(self, "role", PathRole(self.role))
        if not self.name:
            object.__setattr__(self, "name", f"curve_{self.start.name}_{self.end.name}")

    @classmethod
    def from_offset(
        cls,
        start: Point,
        end: Point,
        distance: float,
        position: float = 0.5,
        *,
        role: PathRole = PathRole.CUT_LINE,
        name: str = "",
        visible: bool = True,
    ) -> "Curve":
        """Shape a curve by pushing the chord midpoint ``distance`` along its normal."""

        x, y = control_from_offset(start.coords, end.coords, distance, position)
        control = Point(_control_name(start, end), x, y, PointRole.CONSTRUCTION)
        return cls(start, end, control, role=role, name=name, visible=visible)

    @classmethod
    def through_reference(
        cls,
        start: Point,
        end: Point,
        reference: Point,
        distance: float,
        *,
        role: PathRole = PathRole.CUT_LINE,
        name: str = "",
        visible: bool = True,
    ) -> "Curve":
        """Shape a curve toward an external reference point.

        When ``distance`` is effectively zero the reference point itself is
        used as the control.
        """

        if abs(distance) < 1e-3:
            return cls(start, end, reference, role=role, name=name, visible=visible)
        x, y = control_from_reference(start.coords, end.coords, reference.coords, distance)
        control = Point(_control_name(start, end), x, y, PointRole.CONSTRUCTION)
        return cls(start, end, control, role=role, name=name, visible=visible)

    @property
    def points(self) -> tuple[Point, ...]:
        return self.start, self.end, self.control

    def with_role(self, role: PathRole) -> "Curve":
        return replace(self, role=role)

    def sample(self, count: int = DEFAULT_CURVE_SAMPLES) -> list[tuple[float, float]]:
        """Evaluate the Bezier at ``count`` evenly spaced parameters from 0 to 1."""

        if count < 2:
            raise ValueError("Curve sampling requires at least two points.")
        t = np.arange(count, dtype=float) / float(count - 1)
        weights = np.stack(((1.0 - t) ** 2, 2.0 * (1.0 - t) * t, t**2), axis=1)
        nodes = np.array([self.start.coords, self.control.coords, self.end.coords], dtype=float)
        samples = weights @ nodes
        return [(float(x), float(y)) for x, y in samples]

    def coordinates(self, samples: int = DEFAULT_CURVE_SAMPLES) -> list[tuple[float, float]]:
        return self.sample(samples)


def _control_name(start: Point, end: Point) -> str:
    return f"control_{start.name}_{end.name}"


PathElement = Line | Curve
