"""Stage-ordered template for drafting garment pieces."""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Iterable, Iterator

from .errors import ConstructionError, DraftingError
from .piece import Piece, PieceDraft
from .primitives import Line, PathElement, Point

__all__ = ["DraftGeometry", "DraftStage", "PieceDrafter"]


class DraftStage(IntEnum):
    """Ordered stages every piece drafter passes through exactly once per run."""

    INITIALIZE = 0
    LANDMARK_POINTS = 1
    LANDMARK_PATHS = 2
    RELATIVE_POINTS_AND_PATHS = 3
    ADDITIONAL_FEATURES = 4
    ASSEMBLE = 5


class DraftGeometry:
    """Keyed store of the points and paths produced during one drafting run.

    Entries are split into *landmark* geometry (derived straight from the
    measurements) and *relative* geometry (derived from earlier entries).
    Reading a key that has not been produced yet raises
    :class:`DraftingError`.
    """

    def __init__(self, owner: str) -> None:
        self.owner = owner
        self._points: dict[str, Point] = {}
        self._paths: dict[str, PathElement] = {}
        self._relative_points: set[str] = set()
        self._relative_paths: set[str] = set()

    def add_point(self, key: str, point: Point, *, relative: bool = False) -> Point:
        if key in self._points:
            raise ConstructionError(f"{self.owner}: point key {key!r} is already registered.")
        for existing in self._points.values():
            if existing.name == point.name and existing is not point:
                raise ConstructionError(
                    f"{self.owner}: another point is already named {point.name!r}."
                )
        self._points[key] = point
        if relative:
            self._relative_points.add(key)
        return point

    def add_path(self, key: str, path: PathElement, *, relative: bool = False) -> PathElement:
        """Register ``path``; its endpoints must already be registered points.

        A curve's synthesised control point is registered alongside it under
        ``<key>_control`` when it is not stored yet.
        """

        if key in self._paths:
            raise ConstructionError(f"{self.owner}: path key {key!r} is already registered.")
        known = {id(point) for point in self._points.values()}
        for end in (path.start, path.end):
            if id(end) not in known:
                raise ConstructionError(
                    f"{self.owner}: path {key!r} uses unregistered point {end.name!r}."
                )
        control = getattr(path, "control", None)
        if control is not None and id(control) not in known:
            self.add_point(f"{key}_control", control, relative=relative)
        self._paths[key] = path
        if relative:
            self._relative_paths.add(key)
        return path

    def point(self, key: str) -> Point:
        try:
            return self._points[key]
        except KeyError as exc:
            raise DraftingError(f"{self.owner}: point {key!r} has not been drafted yet.") from exc

    def path(self, key: str) -> PathElement:
        try:
            return self._paths[key]
        except KeyError as exc:
            raise DraftingError(f"{self.owner}: path {key!r} has not been drafted yet.") from exc

    def line(self, key: str) -> Line:
        path = self.path(key)
        if not isinstance(path, Line):
            raise DraftingError(f"{self.owner}: path {key!r} is not a straight line.")
        return path

    def has_point(self, key: str) -> bool:
        return key in self._points

    def has_path(self, key: str) -> bool:
        return key in self._paths

    def landmark_points(self) -> list[Point]:
        return [point for key, point in self._points.items() if key not in self._relative_points]

    def relative_points(self) -> list[Point]:
        return [point for key, point in self._points.items() if key in self._relative_points]

    def landmark_paths(self) -> list[PathElement]:
        return [path for key, path in self._paths.items() if key not in self._relative_paths]

    def relative_paths(self) -> list[PathElement]:
        return [path for key, path in self._paths.items() if key in self._relative_paths]

    def points(self, *keys: str) -> list[Point]:
        return [self.point(key) for key in keys]

    def paths(self, *keys: str) -> list[PathElement]:
        return [self.path(key) for key in keys]

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points.values())


class PieceDrafter:
    """Template drafter that runs the drafting stages in a fixed order.

    Subclasses override the stage hooks. :meth:`advance` executes exactly the
    next stage and :meth:`draft` runs a fresh, complete sequence. By default
    the assembled output is a single piece holding every drafted point and
    path.
    """

    def __init__(self, measurements: Any, options: Any = None) -> None:
        self.measurements = measurements
        self.options = options
        self._stage: DraftStage | None = None
        self._geometry: DraftGeometry | None = None
        self._pieces: tuple[Piece, ...] = ()

    @property
    def stage(self) -> DraftStage | None:
        """Last completed stage, or ``None`` before the run started."""

        return self._stage

    @property
    def geometry(self) -> DraftGeometry:
        if self._geometry is None:
            raise DraftingError(f"{type(self).__name__} has not initialised its geometry yet.")
        return self._geometry

    @property
    def pieces(self) -> tuple[Piece, ...]:
        if self._stage is not DraftStage.ASSEMBLE:
            raise DraftingError(f"{type(self).__name__} has not assembled its pieces yet.")
        return self._pieces

    def advance(self) -> DraftStage:
        """Run the next stage and return it."""

        if self._stage is DraftStage.ASSEMBLE:
            raise DraftingError(f"{type(self).__name__} has already assembled its pieces.")
        stage = DraftStage.INITIALIZE if self._stage is None else DraftStage(self._stage + 1)

        if stage is DraftStage.INITIALIZE:
            self._geometry = self.initialize_geometry()
            self._pieces = ()
        elif stage is DraftStage.LANDMARK_POINTS:
            self.add_landmark_points()
        elif stage is DraftStage.LANDMARK_PATHS:
            self.add_landmark_paths()
        elif stage is DraftStage.RELATIVE_POINTS_AND_PATHS:
            self.add_relative_points_and_paths()
        elif stage is DraftStage.ADDITIONAL_FEATURES:
            self.add_additional_features()
        else:
            pieces = tuple(self.build_pieces())
            for piece in pieces:
                if not isinstance(piece, Piece):
                    raise DraftingError(f"{type(self).__name__} assembled a non-piece {piece!r}.")
            self._pieces = pieces

        self._stage = stage
        return stage

    def draft(self) -> tuple[Piece, ...]:
        """Run every stage from a clean slate and return the assembled pieces."""

        self._stage = None
        self._geometry = None
        while self._stage is not DraftStage.ASSEMBLE:
            self.advance()
        return self._pieces

    # Stage hooks ----------------------------------------------------------------

    def initialize_geometry(self) -> DraftGeometry:
        return DraftGeometry(type(self).__name__)

    def add_landmark_points(self) -> None:
        raise NotImplementedError

    def add_landmark_paths(self) -> None:
        raise NotImplementedError

    def add_relative_points_and_paths(self) -> None:
        raise NotImplementedError

    def add_additional_features(self) -> None:
        """Optional hook for notches, grain lines and similar markings."""

    def build_pieces(self) -> Iterable[Piece]:
        yield self.build_main_piece()

    # Assembly helpers -------------------------------------------------------------

    def piece_name(self) -> str:
        raise NotImplementedError

    def configure_piece(self, draft: PieceDraft) -> None:
        """Set quantity, fold and seam allowance on the main piece."""

    def add_instructions(self, draft: PieceDraft) -> None:
        """Attach cutting and sewing instructions to the main piece."""

    def build_main_piece(self) -> Piece:
        draft = PieceDraft(self.piece_name())
        self.configure_piece(draft)
        geometry = self.geometry
        draft.add_points(*geometry.landmark_points())
        draft.add_points(*geometry.relative_points())
        draft.add_paths(geometry.landmark_paths())
        draft.add_paths(geometry.relative_paths())
        self.add_instructions(draft)
        return draft.finalize()

    def hem_lines(self) -> tuple[PathElement, ...]:
        """Edges that should receive a separate hem piece."""

        return ()

    def require_intersection(self, first: Line, second: Line, name: str, **kwargs: Any) -> Point:
        """Intersect two segments; a missing crossing aborts the run."""

        hit = first.intersect(second)
        if hit is None:
            raise DraftingError(
                f"{type(self).__name__}: {first.name!r} does not cross {second.name!r}; "
                f"cannot place {name!r}."
            )
        return Point(name, hit.x, hit.y, **kwargs)
