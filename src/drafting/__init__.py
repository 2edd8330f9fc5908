"""Parametric 2D pattern drafting primitives and pipeline."""

from __future__ import annotations

from importlib import import_module

__all__ = [
    "BodyMeasurements",
    "ConstructionError",
    "Curve",
    "DraftGeometry",
    "DraftStage",
    "DraftingError",
    "HemFeature",
    "Line",
    "OutlineResult",
    "OutlineWarning",
    "PantMeasurements",
    "PantOptions",
    "PantStyle",
    "PathRole",
    "Pattern",
    "PatternDrafter",
    "PatternFeature",
    "Piece",
    "PieceDraft",
    "PieceDrafter",
    "PieceOptions",
    "Point",
    "PointRole",
    "SleeveMeasurements",
    "TorsoMeasurements",
    "add_seam_allowance",
    "derive_outline",
]

_ATTRIBUTE_MODULES: dict[str, str] = {
    "BodyMeasurements": ".measurements",
    "ConstructionError": ".errors",
    "Curve": ".primitives",
    "DraftGeometry": ".pipeline",
    "DraftStage": ".pipeline",
    "DraftingError": ".errors",
    "HemFeature": ".features",
    "Line": ".primitives",
    "OutlineResult": ".outline",
    "OutlineWarning": ".errors",
    "PantMeasurements": ".measurements",
    "PantOptions": ".measurements",
    "PantStyle": ".measurements",
    "PathRole": ".primitives",
    "Pattern": ".pattern",
    "PatternDrafter": ".pattern",
    "PatternFeature": ".features",
    "Piece": ".piece",
    "PieceDraft": ".piece",
    "PieceDrafter": ".pipeline",
    "PieceOptions": ".measurements",
    "Point": ".primitives",
    "PointRole": ".primitives",
    "SleeveMeasurements": ".measurements",
    "TorsoMeasurements": ".measurements",
    "add_seam_allowance": ".outline",
    "derive_outline": ".outline",
}


def __getattr__(name: str):
    try:
        module_name = _ATTRIBUTE_MODULES[name]
    except KeyError as exc:
        raise AttributeError(f"module 'drafting' has no attribute {name!r}") from exc

    module = import_module(module_name, __name__)
    value = getattr(module, name)
    globals()[name] = value
    return value
