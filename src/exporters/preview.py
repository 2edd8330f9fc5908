"""Quick-look PNG previews of pattern pieces rendered with matplotlib."""

from __future__ import annotations

from importlib import util as importlib_util
from pathlib import Path

import numpy as np

from drafting.pattern import Pattern
from drafting.piece import Piece
from drafting.primitives import PathRole

from .svg import PATH_STYLES, POINT_COLOURS, piece_filename, piece_label

__all__ = ["plot_pattern_previews", "plot_piece_preview"]

_LINESTYLES = {
    PathRole.FOLD_LINE: "--",
    PathRole.CONSTRUCTION_LINE: ":",
    PathRole.GRAIN_LINE: "-.",
    PathRole.BUTTON_LINE: (0, (6, 3, 1, 3, 1, 3)),
}


def plot_piece_preview(
    piece: Piece,
    output_path: Path,
    *,
    show_points: bool = True,
    show_labels: bool = False,
    dpi: int = 150,
) -> Path | None:
    """Render ``piece`` to a PNG if matplotlib is available."""

    if importlib_util.find_spec("matplotlib") is None:
        return None

    import matplotlib

    matplotlib.use("Agg")
    from matplotlib import pyplot as plt

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    fig, ax = plt.subplots(figsize=(8, 10))
    for path in piece.paths:
        if not path.visible:
            continue
        coords = np.asarray(path.coordinates(), dtype=float)
        style = PATH_STYLES[path.role]
        ax.plot(
            coords[:, 0],
            coords[:, 1],
            color=style.stroke,
            linewidth=max(style.width * 5.0, 0.5),
            linestyle=_LINESTYLES.get(path.role, "-"),
        )

    if show_points:
        for point in piece.points.values():
            ax.scatter([point.x], [point.y], s=6, color=POINT_COLOURS[point.role], zorder=3)
            if show_labels:
                ax.annotate(point.name, (point.x, point.y), fontsize=5, xytext=(2, 2), textcoords="offset points")

    ax.set_title(piece_label(piece))
    ax.set_aspect("equal")
    ax.invert_yaxis()
    ax.grid(linestyle="--", alpha=0.3)
    ax.set_xlabel("cm")
    ax.set_ylabel("cm")
    fig.tight_layout()
    fig.savefig(output_path, dpi=dpi)
    plt.close(fig)
    return output_path


def plot_pattern_previews(pattern: Pattern, output_dir: Path, prefix: str = "") -> dict[str, Path]:
    """Render every piece; returns an empty mapping when matplotlib is missing."""

    created: dict[str, Path] = {}
    for piece in pattern:
        result = plot_piece_preview(piece, Path(output_dir) / piece_filename(piece.name, prefix, ".png"))
        if result is not None:
            created[piece.name] = result
    return created
