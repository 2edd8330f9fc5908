"""Tests for body measurements and derived piece views."""

from __future__ import annotations

import math

import pytest

from drafting.errors import ConstructionError
from drafting.measurements import (
    BodyMeasurements,
    PantMeasurements,
    PantOptions,
    PantStyle,
    PieceOptions,
    SleeveMeasurements,
    TorsoMeasurements,
)


def test_from_mapping_converts_and_ignores_unknown_keys(measurement_payload) -> None:
    payload = dict(measurement_payload, height=180)

    body = BodyMeasurements.from_mapping(payload)

    assert body.chest == 120.0
    assert body.hip == 111.0
    assert "height" not in body.to_dict()


def test_missing_and_invalid_measurements(measurement_payload) -> None:
    incomplete = {key: value for key, value in measurement_payload.items() if key != "chest"}
    with pytest.raises(ConstructionError, match="chest"):
        BodyMeasurements.from_mapping(incomplete)
    with pytest.raises(ConstructionError):
        BodyMeasurements.from_mapping(dict(measurement_payload, waist=0))
    with pytest.raises(ConstructionError):
        BodyMeasurements.from_mapping(dict(measurement_payload, neck=math.inf))
    with pytest.raises(ConstructionError):
        BodyMeasurements.from_mapping(dict(measurement_payload, seat="wide"))


def test_hip_falls_back_to_seat(measurement_payload) -> None:
    payload = {key: value for key, value in measurement_payload.items() if key != "hip"}

    body = BodyMeasurements.from_mapping(payload)

    assert body.hip is None
    assert body.hip_or_seat == body.seat
    assert "hip" not in body.to_dict()


def test_torso_view(body) -> None:
    long_sleeve = TorsoMeasurements.from_body(body)
    short_sleeve = TorsoMeasurements.from_body(body, PieceOptions(short=True))

    assert long_sleeve.quarter_chest == 30.0
    assert long_sleeve.quarter_hip == pytest.approx(27.75)
    assert long_sleeve.neck_width == pytest.approx(8.8)
    assert long_sleeve.sleeve_length == 75.0
    assert short_sleeve.sleeve_length == 25.0
    assert long_sleeve.finished_length == 70.0


def test_sleeve_and_pant_views(body) -> None:
    sleeve = SleeveMeasurements(body, 25.0)
    pant = PantMeasurements(body)

    assert sleeve.half_scye_depth == 14.0
    assert sleeve.wrist == 20.0
    assert pant.quarter_seat == 30.0
    assert pant.rise == 25.0
    with pytest.raises(ConstructionError):
        SleeveMeasurements(body, 0.0)


def test_pant_options() -> None:
    options = PantOptions(style="boot_cut")

    assert options.style is PantStyle.BOOT_CUT
    assert options.include_waistband
    with pytest.raises(ValueError):
        PantOptions(style="flared")
    with pytest.raises(ConstructionError):
        PantOptions(waistband_width=0.0)
    assert PantOptions(include_waistband=False, waistband_width=0.0).waistband_width == 0.0
