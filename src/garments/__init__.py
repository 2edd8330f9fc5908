"""Garment drafters built on the :mod:`drafting` pipeline."""

from __future__ import annotations

from importlib import import_module

__all__ = [
    "GARMENT_DRAFTERS",
    "JoggersDrafter",
    "PantDrafter",
    "ShirtDrafter",
    "SleeveDrafter",
    "TorsoDrafter",
]

_ATTRIBUTE_MODULES: dict[str, str] = {
    "JoggersDrafter": ".joggers",
    "PantDrafter": ".pant",
    "ShirtDrafter": ".shirt",
    "SleeveDrafter": ".sleeve",
    "TorsoDrafter": ".torso",
}

GARMENT_DRAFTERS: dict[str, str] = {
    "tshirt": "ShirtDrafter",
    "joggers": "JoggersDrafter",
}


def __getattr__(name: str):
    try:
        module_name = _ATTRIBUTE_MODULES[name]
    except KeyError as exc:
        raise AttributeError(f"module 'garments' has no attribute {name!r}") from exc

    module = import_module(module_name, __name__)
    value = getattr(module, name)
    globals()[name] = value
    return value
