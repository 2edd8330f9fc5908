"""Tests for the trouser and joggers drafters."""

from __future__ import annotations

import pytest

from drafting.measurements import PantMeasurements, PantOptions, PantStyle
from drafting.outline import derive_outline
from drafting.primitives import PathRole
from garments.joggers import JoggersDrafter
from garments.pant import PantDrafter


def test_joggers_pattern_pieces(body) -> None:
    pattern = JoggersDrafter(body).draft_pattern()

    assert pattern.name == "Pant"
    assert [piece.name for piece in pattern] == [
        "Pants - Front",
        "Pants - Back",
        "Pants - Waistband",
        "Hem for front_bottom_line",
        "Hem for back_bottom_line",
    ]


def test_knee_points_come_from_side_seam_crossings(body) -> None:
    front, back, _ = PantDrafter(PantMeasurements(body)).draft()

    p14 = front.points["p14_front_knee_side"]
    assert p14.coords == pytest.approx((34.0 / 12.0, 73.0))
    assert front.points["p15_front_knee_inside"].x == pytest.approx(18.0 + (18.0 - 34.0 / 12.0))

    p23 = back.points["p23_back_knee_side"]
    assert p23.coords == pytest.approx((-4.0 + (73.0 / 119.0) * (32.0 / 3.0), 73.0))


def test_leg_pieces(body) -> None:
    front, back, _ = PantDrafter(PantMeasurements(body), PantOptions(style=PantStyle.BOOT_CUT)).draft()

    for piece in (front, back):
        assert piece.quantity == 2
        assert piece.seam_allowance == 1.5
        assert piece.instructions["cutting"] == "Cut 2"
        assert piece.instructions["style"] == "boot cut leg"
        assert derive_outline(piece).ok
    assert front.grain_line == ("front_grain_top", "front_grain_bottom")
    assert back.instructions["pockets"] == "Add back pocket as desired"
    assert "back_crotch_curve" not in {path.name for path in front.paths}
    assert "front_crotch_curve" not in {path.name for path in back.paths}


def test_pocket_instructions_follow_options(body) -> None:
    options = PantOptions(front_pockets=False, back_pockets=False)

    front, back, _ = PantDrafter(PantMeasurements(body), options).draft()

    assert "pockets" not in front.instructions
    assert "pockets" not in back.instructions


def test_waistband(body) -> None:
    *_, waistband = PantDrafter(PantMeasurements(body), PantOptions(waistband_width=5.0)).draft()

    assert waistband.name == "Pants - Waistband"
    assert waistband.points["waistband_bottom_right"].coords == (115.0, 13.0)
    fold = waistband.path("waistband_fold_line")
    assert fold.role is PathRole.FOLD_LINE
    assert fold.start.y == 6.5
    assert derive_outline(waistband).area == pytest.approx(115.0 * 13.0)


def test_waistband_can_be_skipped(body) -> None:
    pieces = PantDrafter(PantMeasurements(body), PantOptions(include_waistband=False)).draft()

    assert [piece.name for piece in pieces] == ["Pants - Front", "Pants - Back"]


def test_easy_fit_outlines_close(body) -> None:
    for piece in PantDrafter(PantMeasurements(body), PantOptions(easy_fit=True)).draft():
        assert derive_outline(piece).ok


def test_hem_lines(body) -> None:
    drafter = PantDrafter(PantMeasurements(body))
    drafter.draft()

    assert [path.name for path in drafter.hem_lines()] == ["front_bottom_line", "back_bottom_line"]
