"""End-to-end tests for the ``pdraft`` command line."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

import garments
from drafting.measurements import PantStyle
from drafting.pattern import PatternDrafter
from garments import GARMENT_DRAFTERS
from pdraft.__main__ import main
from pdraft.app import GARMENTS, DraftRequest, draft_garment


@pytest.fixture()
def measurements_file(tmp_path: Path, measurement_payload) -> Path:
    path = tmp_path / "body.json"
    path.write_text(json.dumps(dict(measurement_payload, units="cm")), encoding="utf-8")
    return path


def test_draft_tshirt_writes_svgs_and_summary(tmp_path: Path, measurements_file: Path, capsys) -> None:
    output = tmp_path / "out"

    exit_code = main(["draft", "tshirt", "--measurements", str(measurements_file), "--output", str(output)])

    assert exit_code == 0
    assert (output / "tshirt_basic_torso_block_front.svg").exists()
    assert (output / "tshirt_long_sleeve.svg").exists()
    assert (output / "tshirt_combined.svg").exists()
    summary = json.loads((output / "tshirt.json").read_text(encoding="utf-8"))
    assert summary["name"] == "T-Shirt"
    assert len(summary["pieces"]) == 5
    assert "Drafted T-Shirt with 5 pieces" in capsys.readouterr().out


def test_draft_joggers_with_options(tmp_path: Path, measurements_file: Path) -> None:
    output = tmp_path / "out"

    exit_code = main(
        [
            "draft",
            "joggers",
            "--measurements",
            str(measurements_file),
            "--output",
            str(output),
            "--style",
            "tapered",
            "--no-waistband",
            "--seam-allowance",
            "--cut-only",
            "--prefix",
            "laser",
        ]
    )

    assert exit_code == 0
    summary = json.loads((output / "laser.json").read_text(encoding="utf-8"))
    names = [piece["name"] for piece in summary["pieces"]]
    assert names[0] == "Pants - Front with seam allowance"
    assert "Pants - Waistband with seam allowance" not in names
    assert summary["pieces"][0]["instructions"]["style"] == "tapered leg"
    svg = (output / "laser_pants_front_with_seam_allowance.svg").read_text(encoding="utf-8")
    assert 'id="cutlines"' in svg


def test_invalid_measurements_exit_with_code_two(tmp_path: Path, measurement_payload, capsys) -> None:
    path = tmp_path / "bad.json"
    path.write_text(json.dumps(dict(measurement_payload, chest=0)), encoding="utf-8")

    exit_code = main(["draft", "tshirt", "--measurements", str(path), "--output", str(tmp_path / "out")])

    assert exit_code == 2
    assert "Invalid measurements" in capsys.readouterr().out
    assert not (tmp_path / "out").exists()


def test_hem_command(tmp_path: Path) -> None:
    exit_code = main(["hem", "--length", "40", "--width", "2.5", "--output", str(tmp_path)])

    assert exit_code == 0
    assert (tmp_path / "hem_hem_for_standaloneedge.svg").exists()
    assert (tmp_path / "hem.json").exists()


def test_hem_command_rejects_zero_length(tmp_path: Path, capsys) -> None:
    assert main(["hem", "--length", "0", "--output", str(tmp_path)]) == 1
    assert "Cannot draft hem" in capsys.readouterr().out


def test_unknown_garment_is_rejected(body, tmp_path: Path) -> None:
    request = DraftRequest(garment="cape", measurements=tmp_path / "x.json", output_dir=tmp_path)

    with pytest.raises(ValueError):
        draft_garment("cape", body, request)
    with pytest.raises(SystemExit):
        main(["draft", "cape", "--measurements", "x.json"])


def test_draft_request_defaults(tmp_path: Path) -> None:
    request = DraftRequest(garment="joggers", measurements=tmp_path / "x.json", output_dir=tmp_path)

    assert request.style is PantStyle.STRAIGHT
    assert request.include_waistband
    assert request.prefix is None


def test_cli_garments_come_from_the_drafter_table() -> None:
    assert GARMENTS == tuple(GARMENT_DRAFTERS)
    for name in GARMENT_DRAFTERS.values():
        assert issubclass(getattr(garments, name), PatternDrafter)


def test_draft_garment_fills_drafter_options(body, tmp_path: Path) -> None:
    joggers = DraftRequest(
        garment="joggers",
        measurements=tmp_path / "x.json",
        output_dir=tmp_path,
        style=PantStyle.WIDE,
        include_waistband=False,
    )
    tshirt = DraftRequest(garment="tshirt", measurements=tmp_path / "x.json", output_dir=tmp_path, easy_fit=True)

    pants = draft_garment("joggers", body, joggers)
    shirt = draft_garment("tshirt", body, tshirt)

    assert "Pants - Waistband" not in [piece.name for piece in pants]
    assert pants.piece("Pants - Front").instructions["style"] == "wide leg"
    assert shirt.pieces[0].name == "Jersey Torso Block - Front"
