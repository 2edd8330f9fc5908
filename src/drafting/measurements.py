"""Body measurements, style options and the per-piece views derived from them.

All lengths are centimetres. The derived views are pure functions of the
body measurements and options so a drafting run can be repeated exactly.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Mapping

from .errors import ConstructionError

__all__ = [
    "BodyMeasurements",
    "PantMeasurements",
    "PantOptions",
    "PantStyle",
    "PieceOptions",
    "SleeveMeasurements",
    "TorsoMeasurements",
]


@dataclass(frozen=True, slots=True)
class BodyMeasurements:
    """Raw body measurements taken from the wearer."""

    chest: float
    waist: float
    seat: float
    shoulder: float
    neck: float
    arm_length: float
    scye_depth: float
    wrist: float
    back_neck_to_waist: float
    half_back: float
    crotch_rise: float
    inside_leg: float
    ankle: float
    hip: float | None = None

    def __post_init__(self) -> None:
        for item in fields(self):
            value = getattr(self, item.name)
            if value is None and item.name == "hip":
                continue
            try:
                number = float(value)
            except (TypeError, ValueError) as exc:
                raise ConstructionError(f"Measurement {item.name!r} must be numeric, got {value!r}.") from exc
            if not math.isfinite(number) or number <= 0:
                raise ConstructionError(f"Measurement {item.name!r} must be a positive length, got {value!r}.")
            object.__setattr__(self, item.name, number)

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> "BodyMeasurements":
        known = {item.name for item in fields(cls)}
        missing = sorted(name for name in known - {"hip"} if name not in payload)
        if missing:
            raise ConstructionError(f"Missing body measurements: {', '.join(missing)}.")
        return cls(**{key: value for key, value in payload.items() if key in known})

    def to_dict(self) -> dict[str, float]:
        return {
            item.name: getattr(self, item.name)
            for item in fields(self)
            if getattr(self, item.name) is not None
        }

    @property
    def hip_or_seat(self) -> float:
        return self.hip if self.hip is not None else self.seat


@dataclass(frozen=True, slots=True)
class PieceOptions:
    """Style switches shared by every garment piece."""

    short: bool = False
    easy_fit: bool = False


class PantStyle(str, Enum):
    STRAIGHT = "straight"
    TAPERED = "tapered"
    WIDE = "wide"
    BOOT_CUT = "boot_cut"
    SKINNY = "skinny"


@dataclass(frozen=True, slots=True)
class PantOptions(PieceOptions):
    """Options specific to trousers."""

    style: PantStyle = PantStyle.STRAIGHT
    back_pockets: bool = True
    front_pockets: bool = True
    include_waistband: bool = True
    waistband_width: float = 4.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "style", PantStyle(self.style))
        if self.include_waistband and self.waistband_width <= 0:
            raise ConstructionError("Waistband width must be positive.")


@dataclass(frozen=True, slots=True)
class TorsoMeasurements:
    quarter_chest: float
    quarter_waist: float
    quarter_hip: float
    back_neck_to_waist: float
    neck_width: float
    scye_depth: float
    sleeve_length: float
    shoulder_width: float
    half_back: float
    wrist: float
    finished_length: float = 70.0

    @classmethod
    def from_body(cls, body: BodyMeasurements, options: PieceOptions | None = None) -> "TorsoMeasurements":
        options = options or PieceOptions()
        return cls(
            quarter_chest=body.chest / 4.0,
            quarter_waist=body.waist / 4.0,
            quarter_hip=body.hip_or_seat / 4.0,
            back_neck_to_waist=body.back_neck_to_waist,
            neck_width=body.neck / 5.0,
            scye_depth=body.scye_depth,
            sleeve_length=body.arm_length / 3.0 if options.short else body.arm_length,
            shoulder_width=body.shoulder / 2.0,
            half_back=body.half_back,
            wrist=body.wrist,
        )


@dataclass(frozen=True, slots=True)
class SleeveMeasurements:
    body: BodyMeasurements
    sleeve_length: float

    def __post_init__(self) -> None:
        if self.sleeve_length <= 0:
            raise ConstructionError("Sleeve length must be positive.")

    @property
    def half_scye_depth(self) -> float:
        return self.body.scye_depth / 2.0

    @property
    def wrist(self) -> float:
        return self.body.wrist


@dataclass(frozen=True, slots=True)
class PantMeasurements:
    body: BodyMeasurements

    @property
    def waist(self) -> float:
        return self.body.waist

    @property
    def seat(self) -> float:
        return self.body.seat

    @property
    def rise(self) -> float:
        return self.body.crotch_rise

    @property
    def inside_leg(self) -> float:
        return self.body.inside_leg

    @property
    def ankle(self) -> float:
        return self.body.ankle

    @property
    def quarter_seat(self) -> float:
        return self.body.seat / 4.0
