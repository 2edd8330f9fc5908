"""Tests for SVG pattern export."""

from __future__ import annotations

import xml.etree.ElementTree as ET

import pytest

from drafting.features import HemFeature
from drafting.pattern import Pattern
from drafting.shapes import rectangle
from exporters.svg import SvgExporter, piece_filename, piece_label
from garments.shirt import ShirtDrafter

SVG_NS = "{http://www.w3.org/2000/svg}"


def _hem_pattern() -> Pattern:
    return Pattern("Hem", HemFeature.standalone(20.0, 3.0).draft())


def test_piece_filename() -> None:
    assert piece_filename("Pants - Front") == "pants_front.svg"
    assert piece_filename("Pants - Front", "lasercut") == "lasercut_pants_front.svg"
    assert piece_filename("Hem for wrist_line", suffix=".png") == "hem_for_wrist_line.png"
    assert piece_filename("***") == "piece.svg"


def test_piece_label() -> None:
    folded = rectangle("Collar", 10.0, 4.0, cut_on_fold=True, quantity=2).finalize()

    assert piece_label(folded) == "Collar - CUT ON FOLD (Cut 2)"
    assert piece_label(rectangle("Patch", 1.0, 1.0).finalize()) == "Patch"


def test_render_piece_in_centimetres() -> None:
    piece = rectangle("Panel <A>", 10.0, 5.0).finalize()

    root = ET.fromstring(SvgExporter(padding=1.0).render_piece(piece).split("\n", 1)[1])

    assert root.attrib["width"] == "12.000cm"
    assert root.attrib["height"] == "7.000cm"
    assert root.find(f"{SVG_NS}metadata/{SVG_NS}title").text == "Panel <A>"
    assert len(root.findall(f".//{SVG_NS}polyline")) == 4
    assert len(root.findall(f".//{SVG_NS}circle")) == 4


def test_cut_only_mode_emits_cut_lines_only() -> None:
    (piece,) = HemFeature.standalone(20.0, 3.0).draft()

    svg = SvgExporter(cut_only=True, include_labels=False).render_piece(piece)
    root = ET.fromstring(svg.split("\n", 1)[1])

    group = root.find(f"{SVG_NS}g")
    assert group.attrib["id"] == "cutlines"
    assert group.attrib["stroke"] == "#FF0000"
    assert len(group.findall(f"{SVG_NS}polyline")) == 4
    assert root.find(f"{SVG_NS}text") is None
    assert "<circle" not in svg


def test_exporter_settings_and_bounds() -> None:
    piece = rectangle("Plain", 4.0, 4.0).finalize()
    exporter = SvgExporter(samples=5)

    assert exporter.samples == 5
    assert exporter.bounds(piece) == pytest.approx((-1.0, -1.0, 5.0, 5.0))
    with pytest.raises(ValueError):
        SvgExporter(padding=-1.0)


def test_export_pattern_writes_one_file_per_piece(tmp_path, body) -> None:
    pattern = ShirtDrafter(body).draft_pattern()

    created = SvgExporter().export_pattern(pattern, tmp_path / "svg", prefix="tshirt")

    assert list(created) == [piece.name for piece in pattern]
    assert created["Basic Torso Block - Front"].name == "tshirt_basic_torso_block_front.svg"
    for path in created.values():
        assert path.exists()
        assert ET.parse(path).getroot().tag == f"{SVG_NS}svg"


def test_export_combined_places_pieces_side_by_side(tmp_path) -> None:
    pattern = Pattern(
        "Blocks",
        [rectangle("A", 10.0, 5.0).finalize(), rectangle("B", 4.0, 8.0).finalize()],
    )

    path = SvgExporter().export_combined(pattern, tmp_path / "combined.svg")

    root = ET.parse(path).getroot()
    assert root.attrib["width"] == "18.000cm"
    assert root.attrib["height"] == "10.000cm"
    groups = [group.attrib["id"] for group in root.findall(f"{SVG_NS}g")]
    assert groups == ["piece_A", "piece_B"]


def test_export_combined_handles_hem_pattern(tmp_path) -> None:
    path = SvgExporter(cut_only=True).export_combined(_hem_pattern(), tmp_path / "hem.svg")

    assert "cutlines" in path.read_text(encoding="utf-8")
