"""JSON-friendly summaries of drafted patterns."""

from __future__ import annotations

import json
import warnings
from pathlib import Path
from typing import Any

from drafting.errors import OutlineWarning
from drafting.outline import derive_outline
from drafting.pattern import Pattern
from drafting.piece import Piece
from drafting.primitives import Curve, PathElement

__all__ = ["path_payload", "pattern_payload", "piece_payload", "write_pattern_payload"]


def path_payload(path: PathElement) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "name": path.name,
        "kind": "curve" if isinstance(path, Curve) else "line",
        "role": path.role.value,
        "visible": path.visible,
        "start": path.start.name,
        "end": path.end.name,
    }
    if isinstance(path, Curve):
        payload["control"] = path.control.name
    return payload


def piece_payload(piece: Piece) -> dict[str, Any]:
    """Serialisable view of a piece including its outline area.

    Outline failures are recorded under ``metadata["warnings"]`` instead of
    being raised.
    """

    metadata: dict[str, Any] = {"warnings": []}
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always", OutlineWarning)
        outline = derive_outline(piece)
    metadata["warnings"].extend(str(item.message) for item in caught if issubclass(item.category, OutlineWarning))
    if outline.polygon is not None:
        min_x, min_y, max_x, max_y = outline.polygon.bounds
        metadata["outline_area"] = round(outline.area, 4)
        metadata["outline_bounds"] = [round(min_x, 4), round(min_y, 4), round(max_x, 4), round(max_y, 4)]

    return {
        "name": piece.name,
        "quantity": piece.quantity,
        "cut_on_fold": piece.cut_on_fold,
        "seam_allowance": piece.seam_allowance,
        "grain_line": list(piece.grain_line),
        "instructions": dict(piece.instructions),
        "points": [
            {"name": point.name, "x": round(point.x, 4), "y": round(point.y, 4), "role": point.role.value}
            for point in piece.points.values()
        ],
        "paths": [path_payload(path) for path in piece.paths],
        "metadata": metadata,
    }


def pattern_payload(pattern: Pattern) -> dict[str, Any]:
    return {
        "name": pattern.name,
        "pieces": [piece_payload(piece) for piece in pattern],
    }


def write_pattern_payload(pattern: Pattern, path: Path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as stream:
        json.dump(pattern_payload(pattern), stream, indent=2)
    return path
