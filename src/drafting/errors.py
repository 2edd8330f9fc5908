"""Exception and warning types raised while drafting patterns."""

from __future__ import annotations

__all__ = ["ConstructionError", "DraftingError", "OutlineWarning"]


class ConstructionError(ValueError):
    """Raised when a geometry element or piece is constructed from invalid input."""


class DraftingError(RuntimeError):
    """Raised when a drafting run is driven out of order or misses required geometry."""


class OutlineWarning(RuntimeWarning):
    """Emitted when a piece outline cannot be derived from its visible paths."""
