#!/usr/bin/env python3
"""SVG-to-track pipeline CLI.

Compiles a colour-coded SVG track into world-space geometry and writes it
with a validation report.

Usage:
    python tools/svg2track.py input.svg output_dir/
    python tools/svg2track.py input.svg output_dir/ --width 1280 --height 720
    python tools/svg2track.py input.svg output_dir/ --config game.yaml
    python tools/svg2track.py input.svg output_dir/ --boundary-policy perimeter-strips
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from dataclasses import asdict
from pathlib import Path

from slingrace.config import (
    BoundaryPolicy,
    GameConfig,
    create_game_config,
    load_game_config,
)
from slingrace.constants import SCREEN_HEIGHT, SCREEN_WIDTH
from slingrace.debug import DEBUG
from slingrace.track import (
    ImportedTrack,
    TrackImportError,
    ValidationResult,
    import_track_from_file,
    validate_track_data,
)


# ---------------------------------------------------------------------------
# Output writer
# ---------------------------------------------------------------------------

def build_track_document(track: ImportedTrack, policy: BoundaryPolicy) -> dict:
    """JSON-ready description of a compiled track (shapes, not bodies)."""
    meta = track.metadata
    width, height = meta.original_svg_size
    return {
        "bounds": asdict(track.bounds),
        "walls": [{"id": w.id, "shape": asdict(w.shape)} for w in track.wall_defs],
        "obstacles": [
            {"id": o.id, "shape": asdict(o.shape)} for o in track.obstacle_defs
        ],
        "start_line": asdict(track.markers.start_line) if track.markers.start_line else None,
        "finish_line": asdict(track.markers.finish_line) if track.markers.finish_line else None,
        "start_position": asdict(track.start_position) if track.start_position else None,
        "finish_position": asdict(track.finish_position) if track.finish_position else None,
        "boundary_policy": policy.value,
        "boundary_count": len(track.boundaries),
        "metadata": {
            "original_svg_size": {"width": width, "height": height},
            "scale_factor": meta.scale_factor,
            "element_counts": asdict(meta.element_counts),
        },
        "diagnostics": [asdict(d) for d in track.diagnostics],
    }


class TrackWriter:
    """Writes pipeline output files."""

    def __init__(self, output_dir: str) -> None:
        self.output_dir = output_dir

    def write(self, document: dict, validation: ValidationResult) -> None:
        os.makedirs(self.output_dir, exist_ok=True)
        with open(os.path.join(self.output_dir, "track.json"), "w") as f:
            json.dump(document, f, indent=2)
        self._write_validation(validation)

    def _write_validation(self, validation: ValidationResult) -> None:
        with open(os.path.join(self.output_dir, "validation_report.txt"), "w") as f:
            for error in validation.errors:
                f.write(f"ERROR: {error}\n")
            for warning in validation.warnings:
                f.write(f"WARNING: {warning}\n")
            if not validation.errors and not validation.warnings:
                f.write("No issues found.\n")


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------

def _resolve_config(args: argparse.Namespace) -> GameConfig:
    if args.config:
        config = load_game_config(Path(args.config))
    else:
        config = create_game_config(args.width, args.height)
    if args.boundary_policy:
        config.boundary_policy = BoundaryPolicy(args.boundary_policy)
    return config


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Compile an SVG track into slingrace track data."
    )
    parser.add_argument("input_svg", help="Path to input SVG file")
    parser.add_argument("output_dir", help="Output directory for track data")
    parser.add_argument("--width", type=float, default=SCREEN_WIDTH, help="World width")
    parser.add_argument("--height", type=float, default=SCREEN_HEIGHT, help="World height")
    parser.add_argument("--config", help="Game config YAML (overrides --width/--height)")
    parser.add_argument(
        "--boundary-policy",
        choices=[p.value for p in BoundaryPolicy],
        help="Perimeter body policy",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if DEBUG else logging.WARNING)

    if not os.path.isfile(args.input_svg):
        print(f"Error: {args.input_svg} not found", file=sys.stderr)
        sys.exit(1)

    try:
        config = _resolve_config(args)
        track = import_track_from_file(args.input_svg, config)
    except (TrackImportError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    counts = track.metadata.element_counts
    print(
        f"Imported: {counts.track_areas} track areas, {counts.walls} walls, "
        f"{counts.obstacles} obstacles (scale {track.metadata.scale_factor:.4f})"
    )

    validation = validate_track_data(track)
    print(f"Validation: {len(validation.errors)} errors, {len(validation.warnings)} warnings")

    writer = TrackWriter(args.output_dir)
    writer.write(build_track_document(track, config.boundary_policy), validation)
    print(f"Output written to {args.output_dir}")

    if not validation.is_valid:
        sys.exit(1)


if __name__ == "__main__":
    main()
