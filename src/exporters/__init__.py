"""Exporters that turn drafted patterns into files."""

from .payload import pattern_payload, piece_payload, write_pattern_payload
from .preview import plot_pattern_previews, plot_piece_preview
from .svg import PATH_STYLES, PathStyle, SvgExporter, piece_filename

__all__ = [
    "PATH_STYLES",
    "PathStyle",
    "SvgExporter",
    "pattern_payload",
    "piece_filename",
    "piece_payload",
    "plot_pattern_previews",
    "plot_piece_preview",
    "write_pattern_payload",
]
