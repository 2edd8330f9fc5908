"""SVG export of drafted pattern pieces at 1:1 centimetre scale."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Mapping, Sequence

import numpy as np

from drafting.pattern import Pattern
from drafting.piece import Piece
from drafting.primitives import DEFAULT_CURVE_SAMPLES, PathElement, PathRole, PointRole

__all__ = [
    "PATH_STYLES",
    "POINT_COLOURS",
    "PathStyle",
    "SvgExporter",
    "piece_filename",
    "piece_label",
]


@dataclass(frozen=True, slots=True)
class PathStyle:
    """Stroke settings used to render one path role."""

    stroke: str
    width: float
    dasharray: str | None = None

    def attributes(self) -> str:
        attrs = f'stroke="{self.stroke}" stroke-width="{self.width:g}" fill="none"'
        if self.dasharray:
            attrs += f' stroke-dasharray="{self.dasharray}"'
        return attrs


PATH_STYLES: Mapping[PathRole, PathStyle] = {
    PathRole.CUT_LINE: PathStyle("#000000", 0.2),
    PathRole.SEAM_LINE: PathStyle("#1f4fd1", 0.15),
    PathRole.FOLD_LINE: PathStyle("#1b8a3a", 0.15, "1 0.5"),
    PathRole.CONSTRUCTION_LINE: PathStyle("#b0b0b0", 0.05, "0.2 0.2"),
    PathRole.GRAIN_LINE: PathStyle("#d12f2f", 0.1, "1 0.5 0.2 0.5"),
    PathRole.BUTTON_LINE: PathStyle("#7a2fd1", 0.1, "1 0.5 0.2 0.5 0.2 0.5"),
    PathRole.HEM_LINE: PathStyle("#b8860b", 0.15),
}

POINT_COLOURS: Mapping[PointRole, str] = {
    PointRole.CONSTRUCTION: "#b0b0b0",
    PointRole.LANDMARK: "#000000",
    PointRole.NOTCH: "#d12f2f",
    PointRole.CUT_POINT: "#000000",
    PointRole.SEAM_POINT: "#1f4fd1",
    PointRole.FOLD_POINT: "#1b8a3a",
}

_UNSAFE_FILENAME = re.compile(r"[^a-z0-9]+")


def piece_filename(name: str, prefix: str = "", suffix: str = ".svg") -> str:
    """Lower-case, underscore-separated file name for a piece."""

    safe = _UNSAFE_FILENAME.sub("_", name.lower()).strip("_") or "piece"
    return f"{prefix}_{safe}{suffix}" if prefix else f"{safe}{suffix}"


def _escape_svg_text(value: str) -> str:
    return (
        value.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
    )


def piece_label(piece: Piece) -> str:
    label = piece.name
    if piece.cut_on_fold:
        label += " - CUT ON FOLD"
    if piece.quantity > 1:
        label += f" (Cut {piece.quantity})"
    return label


class SvgExporter:
    """Write pattern pieces as SVG documents measured in centimetres.

    With ``cut_only`` set only visible cut lines are emitted, in a single
    stroke colour, which is what laser cutters and plotters expect. Otherwise
    every visible path is drawn in the style of its role and points are
    marked.
    """

    def __init__(
        self,
        *,
        include_labels: bool = True,
        padding: float = 1.0,
        cut_only: bool = False,
        cut_stroke: str = "#FF0000",
        cut_stroke_width: float = 0.1,
        samples: int = DEFAULT_CURVE_SAMPLES,
        styles: Mapping[PathRole, PathStyle] | None = None,
    ) -> None:
        if padding < 0:
            raise ValueError("SVG padding must be non-negative.")
        self.include_labels = include_labels
        self.padding = float(padding)
        self.cut_only = cut_only
        self.cut_stroke = cut_stroke
        self.cut_stroke_width = float(cut_stroke_width)
        self.samples = samples
        self.styles = dict(PATH_STYLES if styles is None else styles)

    def _drawn_paths(self, piece: Piece) -> list[PathElement]:
        if self.cut_only:
            return [path for path in piece.paths if path.visible and path.role is PathRole.CUT_LINE]
        return [path for path in piece.paths if path.visible]

    def bounds(self, piece: Piece) -> tuple[float, float, float, float]:
        """Padded ``(min_x, min_y, max_x, max_y)`` of everything drawn for ``piece``."""

        coords: list[tuple[float, float]] = []
        for path in self._drawn_paths(piece):
            coords.extend(path.coordinates(self.samples))
        if not self.cut_only:
            coords.extend(point.coords for point in piece.points.values())
        if not coords:
            return (0.0, 0.0, 1.0, 1.0)
        array = np.asarray(coords, dtype=float)
        min_x, min_y = array.min(axis=0) - self.padding
        max_x, max_y = array.max(axis=0) + self.padding
        if max_x - min_x < 1e-9:
            max_x = min_x + 1.0
        if max_y - min_y < 1e-9:
            max_y = min_y + 1.0
        return float(min_x), float(min_y), float(max_x), float(max_y)

    def render_piece(self, piece: Piece) -> str:
        min_x, min_y, max_x, max_y = self.bounds(piece)
        width = max_x - min_x
        height = max_y - min_y
        lines = [
            '<?xml version="1.0" encoding="UTF-8"?>',
            f'<svg xmlns="http://www.w3.org/2000/svg" version="1.1" width="{width:.3f}cm" height="{height:.3f}cm" '
            f'viewBox="0 0 {width:.3f} {height:.3f}">',
            "  <metadata>",
            f"    <title>{_escape_svg_text(piece.name)}</title>",
            f"    <description>{_escape_svg_text(self._description(piece))}</description>",
            "  </metadata>",
        ]
        lines.extend(self._piece_body(piece, -min_x, -min_y))
        if self.include_labels:
            lines.append(
                f'  <text x="{width / 2:.3f}" y="{height - 0.5:.3f}" font-family="Arial, sans-serif" '
                f'font-size="0.5" text-anchor="middle" fill="#000000">{_escape_svg_text(piece_label(piece))}</text>'
            )
        lines.append("</svg>")
        return "\n".join(lines) + "\n"

    def _description(self, piece: Piece) -> str:
        text = f"Pattern piece: {piece.name}"
        if piece.cut_on_fold:
            text += ", Cut on fold"
        if piece.quantity > 1:
            text += f", Quantity: {piece.quantity}"
        return text

    def _piece_body(self, piece: Piece, offset_x: float, offset_y: float) -> list[str]:
        lines: list[str] = []
        transform = f'transform="translate({offset_x:.3f} {offset_y:.3f})"'
        if self.cut_only:
            lines.append(
                f'  <g id="cutlines" {transform} stroke="{self.cut_stroke}" '
                f'stroke-width="{self.cut_stroke_width:g}" fill="none">'
            )
            for path in self._drawn_paths(piece):
                lines.append(f'    <polyline points="{self._points_attr(path)}" />')
            lines.append("  </g>")
            return lines

        lines.append(f'  <g id="paths" {transform}>')
        for path in self._drawn_paths(piece):
            style = self.styles.get(path.role, PATH_STYLES[PathRole.CUT_LINE])
            lines.append(
                f'    <polyline id="{_escape_svg_text(path.name)}" class="{path.role.value}" '
                f'points="{self._points_attr(path)}" {style.attributes()} />'
            )
        lines.append("  </g>")
        lines.append(f'  <g id="points" {transform}>')
        for point in piece.points.values():
            colour = POINT_COLOURS.get(point.role, "#000000")
            lines.append(
                f'    <circle class="{point.role.value}" cx="{point.x:.3f}" cy="{point.y:.3f}" r="0.15" '
                f'fill="{colour}"><title>{_escape_svg_text(point.name)}</title></circle>'
            )
        lines.append("  </g>")
        return lines

    def _points_attr(self, path: PathElement) -> str:
        return " ".join(f"{x:.3f},{y:.3f}" for x, y in path.coordinates(self.samples))

    def export_piece(self, piece: Piece, path: Path) -> Path:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.render_piece(piece), encoding="utf-8")
        return path

    def export_pattern(self, pattern: Pattern, output_dir: Path, prefix: str = "") -> dict[str, Path]:
        """Write one SVG per piece and return the files keyed by piece name."""

        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)
        created: dict[str, Path] = {}
        for piece in pattern:
            created[piece.name] = self.export_piece(piece, output_dir / piece_filename(piece.name, prefix))
        return created

    def export_combined(self, pattern: Pattern, path: Path) -> Path:
        """Lay every piece out left to right in a single SVG document."""

        placements = list(self._arrange(pattern.pieces))
        width = sum(piece_width for _, _, piece_width, _ in placements) or 1.0
        height = max((piece_height for *_, piece_height in placements), default=1.0)
        lines = [
            '<?xml version="1.0" encoding="UTF-8"?>',
            f'<svg xmlns="http://www.w3.org/2000/svg" version="1.1" width="{width:.3f}cm" height="{height:.3f}cm" '
            f'viewBox="0 0 {width:.3f} {height:.3f}">',
            "  <metadata>",
            f"    <title>{_escape_svg_text(pattern.name)}</title>",
            f"    <description>Pattern: {_escape_svg_text(pattern.name)}, Pieces: {len(pattern)}</description>",
            "  </metadata>",
        ]
        for piece, offset_x, piece_width, piece_height in placements:
            min_x, min_y, _, _ = self.bounds(piece)
            group_id = _escape_svg_text("piece_" + piece.name.replace(" ", "_"))
            lines.append(f'  <g id="{group_id}">')
            body = self._piece_body(piece, offset_x - min_x, -min_y)
            lines.extend("  " + line for line in body)
            if self.include_labels:
                lines.append(
                    f'    <text x="{offset_x + piece_width / 2:.3f}" y="{piece_height - 0.5:.3f}" '
                    f'font-family="Arial, sans-serif" font-size="0.5" text-anchor="middle" fill="#000000">'
                    f"{_escape_svg_text(piece_label(piece))}</text>"
                )
            lines.append("  </g>")
        lines.append("</svg>")

        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    def _arrange(self, pieces: Sequence[Piece]) -> Iterable[tuple[Piece, float, float, float]]:
        cursor = 0.0
        for piece in pieces:
            min_x, min_y, max_x, max_y = self.bounds(piece)
            width = max_x - min_x
            height = max_y - min_y
            yield piece, cursor, width, height
            cursor += width
