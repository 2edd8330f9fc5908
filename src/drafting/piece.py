"""Pattern pieces and the mutable draft used to assemble them."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping

from .errors import ConstructionError
from .primitives import PathElement, PathRole, Point

__all__ = ["OUTLINE_ROLES", "Piece", "PieceDraft"]

OUTLINE_ROLES = frozenset({PathRole.CUT_LINE, PathRole.SEAM_LINE})


@dataclass(frozen=True, slots=True, eq=False)
class Piece:
    """Finalised, immutable pattern piece.

    Every point referenced by a path is the exact :class:`Point` registered
    under that name, so exporters can walk either collection safely.
    """

    name: str
    points: Mapping[str, Point]
    paths: tuple[PathElement, ...]
    seam_allowance: float = 1.0
    cut_on_fold: bool = False
    quantity: int = 1
    grain_line: tuple[str, ...] = ()
    instructions: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise ConstructionError("Piece name must be a non-empty string.")
        seam_allowance = float(self.seam_allowance)
        if seam_allowance < 0:
            raise ConstructionError(f"Piece {self.name!r} has a negative seam allowance.")
        if isinstance(self.quantity, bool) or int(self.quantity) != self.quantity or self.quantity < 1:
            raise ConstructionError(f"Piece {self.name!r} must be cut at least once.")

        points: dict[str, Point] = {}
        for key, point in dict(self.points).items():
            if not isinstance(point, Point):
                raise ConstructionError(f"Piece {self.name!r} entry {key!r} is not a Point.")
            if key != point.name:
                raise ConstructionError(
                    f"Piece {self.name!r} registers point {point.name!r} under the key {key!r}."
                )
            points[key] = point

        paths = tuple(self.paths)
        for path in paths:
            for point in path.points:
                if points.get(point.name) is not point:
                    raise ConstructionError(
                        f"Path {path.name!r} in piece {self.name!r} references unregistered point {point.name!r}."
                    )

        grain_line = tuple(self.grain_line)
        if len(grain_line) not in (0, 2):
            raise ConstructionError(f"Piece {self.name!r} grain line needs exactly two point names.")
        for point_name in grain_line:
            if point_name not in points:
                raise ConstructionError(
                    f"Grain line point {point_name!r} is not registered in piece {self.name!r}."
                )

        instructions = {str(key): str(value) for key, value in dict(self.instructions).items()}

        object.__setattr__(self, "points", MappingProxyType(points))
        object.__setattr__(self, "paths", paths)
        object.__setattr__(self, "seam_allowance", seam_allowance)
        object.__setattr__(self, "quantity", int(self.quantity))
        object.__setattr__(self, "grain_line", grain_line)
        object.__setattr__(self, "instructions", MappingProxyType(instructions))

    def point(self, name: str) -> Point:
        try:
            return self.points[name]
        except KeyError as exc:
            raise ConstructionError(f"Piece {self.name!r} has no point named {name!r}.") from exc

    def path(self, name: str) -> PathElement:
        for path in self.paths:
            if path.name == name:
                return path
        raise ConstructionError(f"Piece {self.name!r} has no path named {name!r}.")

    def outline_paths(self) -> tuple[PathElement, ...]:
        """Visible cut and seam paths, the ones that bound the piece."""

        return tuple(path for path in self.paths if path.visible and path.role in OUTLINE_ROLES)

    def paths_with_role(self, role: PathRole) -> tuple[PathElement, ...]:
        return tuple(path for path in self.paths if path.role is role)

    def to_draft(self, name: str | None = None) -> "PieceDraft":
        """Open a mutable copy for deriving a new piece."""

        draft = PieceDraft(
            name or self.name,
            seam_allowance=self.seam_allowance,
            cut_on_fold=self.cut_on_fold,
            quantity=self.quantity,
        )
        draft.add_points(*self.points.values())
        for path in self.paths:
            draft.add_path(path)
        if self.grain_line:
            draft.set_grain_line(*self.grain_line)
        draft.instructions.update(self.instructions)
        return draft


class PieceDraft:
    """Mutable accumulator of points and paths, finalised into a :class:`Piece`."""

    def __init__(
        self,
        name: str,
        *,
        seam_allowance: float = 1.0,
        cut_on_fold: bool = False,
        quantity: int = 1,
    ) -> None:
        self.name = name
        self.seam_allowance = seam_allowance
        self.cut_on_fold = cut_on_fold
        self.quantity = quantity
        self.points: dict[str, Point] = {}
        self.paths: list[PathElement] = []
        self.grain_line: tuple[str, ...] = ()
        self.instructions: dict[str, str] = {}

    def add_point(self, point: Point) -> Point:
        existing = self.points.get(point.name)
        if existing is not None and existing is not point:
            raise ConstructionError(
                f"Piece {self.name!r} already has a different point named {point.name!r}."
            )
        self.points[point.name] = point
        return point

    def add_points(self, *points: Point) -> "PieceDraft":
        for point in points:
            self.add_point(point)
        return self

    def add_path(self, path: PathElement) -> PathElement:
        """Append ``path`` and register every point it references."""

        for point in path.points:
            self.add_point(point)
        self.paths.append(path)
        return path

    def add_paths(self, paths: Iterable[PathElement]) -> "PieceDraft":
        for path in paths:
            self.add_path(path)
        return self

    def set_grain_line(self, top: Point | str, bottom: Point | str) -> "PieceDraft":
        names = []
        for end in (top, bottom):
            if isinstance(end, Point):
                self.add_point(end)
                names.append(end.name)
            else:
                names.append(str(end))
        self.grain_line = tuple(names)
        return self

    def add_instruction(self, key: str, text: str) -> "PieceDraft":
        self.instructions[key] = text
        return self

    def finalize(self) -> Piece:
        return Piece(
            name=self.name,
            points=dict(self.points),
            paths=tuple(self.paths),
            seam_allowance=self.seam_allowance,
            cut_on_fold=bool(self.cut_on_fold),
            quantity=self.quantity,
            grain_line=self.grain_line,
            instructions=dict(self.instructions),
        )
