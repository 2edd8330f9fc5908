from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

if SRC.exists() and str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from drafting.measurements import BodyMeasurements  # noqa: E402

SAMPLE_MEASUREMENTS = {
    "chest": 120.0,
    "waist": 111.0,
    "seat": 120.0,
    "hip": 111.0,
    "shoulder": 45.0,
    "neck": 44.0,
    "arm_length": 75.0,
    "scye_depth": 28.0,
    "wrist": 20.0,
    "back_neck_to_waist": 52.0,
    "half_back": 23.0,
    "crotch_rise": 25.0,
    "inside_leg": 92.0,
    "ankle": 27.0,
}


@pytest.fixture()
def measurement_payload() -> dict[str, float]:
    return dict(SAMPLE_MEASUREMENTS)


@pytest.fixture()
def body() -> BodyMeasurements:
    return BodyMeasurements.from_mapping(SAMPLE_MEASUREMENTS)
