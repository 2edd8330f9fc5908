"""High-level command helpers for drafting and exporting patterns."""

from __future__ import annotations

import argparse
import warnings
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Sequence

import garments
from drafting.errors import ConstructionError, DraftingError, OutlineWarning
from drafting.features import HemFeature
from drafting.measurements import BodyMeasurements, PantStyle
from drafting.pattern import Pattern
from exporters.payload import write_pattern_payload
from exporters.preview import plot_pattern_previews
from exporters.svg import SvgExporter
from garments import GARMENT_DRAFTERS
from schemas.validators import SchemaValidationError, load_measurements

__all__ = [
    "DraftRequest",
    "build_cli",
    "draft_garment",
    "export_pattern",
    "run_draft",
    "run_hem",
]

GARMENTS = tuple(GARMENT_DRAFTERS)


@dataclass(frozen=True)
class DraftRequest:
    """Options collected from the command line for one drafting run."""

    garment: str
    measurements: Path
    output_dir: Path
    short: bool = False
    easy_fit: bool = False
    style: PantStyle = PantStyle.STRAIGHT
    include_waistband: bool = True
    waistband_width: float = 4.0
    seam_allowance: bool = False
    cut_only: bool = False
    preview: bool = False
    prefix: str | None = None


def draft_garment(garment: str, body: BodyMeasurements, request: DraftRequest) -> Pattern:
    """Draft the named garment from validated measurements.

    The drafter comes from :data:`garments.GARMENT_DRAFTERS`; its options are
    filled from the request fields that share a name with the drafter's
    ``options_class`` fields.
    """

    try:
        drafter_name = GARMENT_DRAFTERS[garment]
    except KeyError as exc:
        raise ValueError(f"Unknown garment {garment!r}; expected one of {', '.join(GARMENTS)}") from exc

    drafter_class = getattr(garments, drafter_name)
    options_class = drafter_class.options_class
    options = options_class(
        **{item.name: getattr(request, item.name) for item in fields(options_class) if hasattr(request, item.name)}
    )
    return drafter_class(body, options).draft_pattern()


def export_pattern(
    pattern: Pattern,
    output_dir: Path,
    *,
    prefix: str,
    cut_only: bool = False,
    preview: bool = False,
) -> list[Path]:
    """Write SVG files, a JSON summary and optional previews for ``pattern``."""

    written: list[Path] = []
    exporter = SvgExporter(cut_only=cut_only)
    written.extend(exporter.export_pattern(pattern, output_dir, prefix).values())
    written.append(exporter.export_combined(pattern, output_dir / f"{prefix}_combined.svg"))
    written.append(write_pattern_payload(pattern, output_dir / f"{prefix}.json"))
    if preview:
        written.extend(plot_pattern_previews(pattern, output_dir, prefix).values())
    return written


def run_draft(request: DraftRequest) -> int:
    try:
        body = load_measurements(request.measurements)
    except (SchemaValidationError, ConstructionError, TypeError, ValueError) as exc:
        print(f"Invalid measurements in {request.measurements}: {exc}")
        return 2

    try:
        pattern = draft_garment(request.garment, body, request)
    except (ConstructionError, DraftingError) as exc:
        print(f"Drafting {request.garment} failed: {exc}")
        return 1

    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always", OutlineWarning)
        if request.seam_allowance:
            pattern = pattern.with_seam_allowance()
        written = export_pattern(
            pattern,
            request.output_dir,
            prefix=request.prefix or request.garment,
            cut_only=request.cut_only,
            preview=request.preview,
        )

    print(f"Drafted {pattern.name} with {len(pattern)} pieces")
    for piece in pattern:
        print(f"  - {piece.name}: {len(piece.points)} points, {len(piece.paths)} paths, cut {piece.quantity}")
    for item in caught:
        print(f"warning: {item.message}")
    for path in written:
        print(f"wrote {path}")
    return 0


def run_hem(length: float, width: float, output_dir: Path, cut_only: bool) -> int:
    try:
        feature = HemFeature.standalone(length, width)
    except ConstructionError as exc:
        print(f"Cannot draft hem: {exc}")
        return 1
    pattern = Pattern("Hem", feature.draft())
    for path in export_pattern(pattern, output_dir, prefix="hem", cut_only=cut_only):
        print(f"wrote {path}")
    return 0


def build_cli(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Parametric garment pattern drafter")
    subparsers = parser.add_subparsers(dest="command", required=True)

    draft = subparsers.add_parser("draft", help="Draft a garment pattern from body measurements")
    draft.add_argument("garment", choices=GARMENTS, help="Garment to draft")
    draft.add_argument(
        "--measurements",
        type=Path,
        required=True,
        help="JSON or YAML file with body measurements in centimetres",
    )
    draft.add_argument(
        "--output",
        type=Path,
        default=Path("exports/patterns"),
        help="Directory where exported pattern files will be stored.",
    )
    draft.add_argument("--short", action="store_true", help="Draft short sleeves or legs")
    draft.add_argument("--easy-fit", action="store_true", help="Add extra ease for jersey and layering")
    draft.add_argument(
        "--style",
        choices=[style.value for style in PantStyle],
        default=PantStyle.STRAIGHT.value,
        help="Leg style recorded on trouser pieces",
    )
    draft.add_argument("--no-waistband", action="store_true", help="Skip the trouser waistband piece")
    draft.add_argument("--waistband-width", type=float, default=4.0, help="Finished waistband width in cm")
    draft.add_argument(
        "--seam-allowance",
        action="store_true",
        help="Grow every piece by its seam allowance before exporting",
    )
    draft.add_argument("--cut-only", action="store_true", help="Emit only cut lines (laser cutting)")
    draft.add_argument("--preview", action="store_true", help="Also render PNG previews")
    draft.add_argument("--prefix", type=str, help="File name prefix (defaults to the garment name)")

    hem = subparsers.add_parser("hem", help="Draft a standalone hem band")
    hem.add_argument("--length", type=float, required=True, help="Edge length in cm")
    hem.add_argument("--width", type=float, default=HemFeature.DEFAULT_WIDTH, help="Hem width in cm")
    hem.add_argument("--output", type=Path, default=Path("exports/patterns"))
    hem.add_argument("--cut-only", action="store_true")

    args = parser.parse_args(argv)

    if args.command == "draft":
        request = DraftRequest(
            garment=args.garment,
            measurements=args.measurements,
            output_dir=args.output,
            short=args.short,
            easy_fit=args.easy_fit,
            style=PantStyle(args.style),
            include_waistband=not args.no_waistband,
            waistband_width=args.waistband_width,
            seam_allowance=args.seam_allowance,
            cut_only=args.cut_only,
            preview=args.preview,
            prefix=args.prefix,
        )
        return run_draft(request)
    if args.command == "hem":
        return run_hem(args.length, args.width, args.output, args.cut_only)

    parser.error(f"Unknown command {args.command!r}")
    return 2
