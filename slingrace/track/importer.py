"""slingrace/track/importer.py — Track compiler, validator and world wiring.

``import_track`` runs the whole pipeline from SVG text to an ImportedTrack:

    parse -> dimensions -> world size -> scaling -> classify -> bounds
          -> walls -> obstacles -> markers -> boundaries -> metadata

Any failure aborts the import with a single TrackImportError; there is no
partial track.
"""

from __future__ import annotations

import logging
from pathlib import Path

from slingrace.config import GameConfig
from slingrace.constants import LARGE_TRACK_THRESHOLD
from slingrace.physics import Bodies
from slingrace.track.bodies import (
    BodyFactory,
    PhysicsWorld,
    add_bodies_with_physics,
    create_invisible_boundary,
    create_obstacle_bodies,
    create_wall_bodies,
    remove_bodies_from_physics,
)
from slingrace.track.errors import NoTrackAreaError, TrackImportError
from slingrace.track.svg_parser import (
    extract_track_elements,
    get_svg_dimensions,
    get_svg_world_size,
    parse_svg_text,
)
from slingrace.track.transformer import (
    calculate_finish_position,
    calculate_scaling_factor,
    calculate_start_position,
    process_obstacles,
    process_start_finish_lines,
    process_track_area,
    process_walls,
)
from slingrace.track.types import (
    BoundaryPolicy,
    Diagnostic,
    ElementCounts,
    ImportedTrack,
    TrackMetadata,
    ValidationResult,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Import
# ---------------------------------------------------------------------------

def import_track(
    svg_text: str,
    game_config: GameConfig,
    factory: BodyFactory | None = None,
    boundary_policy: BoundaryPolicy | None = None,
) -> ImportedTrack:
    """Compile SVG text into an ImportedTrack.

    Args:
        svg_text: Raw SVG document.
        game_config: Target world the track is fitted into.
        factory: Body factory for static bodies; defaults to the built-in one.
        boundary_policy: Overrides ``game_config.boundary_policy``.

    Raises:
        TrackImportError: Wrapping whichever stage failed.
    """
    if factory is None:
        factory = Bodies()
    if boundary_policy is None:
        boundary_policy = game_config.boundary_policy

    try:
        return _compile_track(svg_text, game_config, factory, boundary_policy)
    except Exception as exc:
        raise TrackImportError(f"Track import failed: {exc}", cause=exc) from exc


def _compile_track(
    svg_text: str,
    game_config: GameConfig,
    factory: BodyFactory,
    boundary_policy: BoundaryPolicy,
) -> ImportedTrack:
    diagnostics: list[Diagnostic] = []

    doc = parse_svg_text(svg_text)
    svg_size = get_svg_dimensions(doc, diagnostics)
    world_size = get_svg_world_size(doc, diagnostics)
    scaling = calculate_scaling_factor(svg_size, game_config, world_size)

    raw = extract_track_elements(doc)
    if not raw.track_areas:
        raise NoTrackAreaError("No track areas found in SVG")

    bounds = process_track_area(raw.track_areas, scaling, diagnostics)
    walls = process_walls(raw.walls, scaling, diagnostics)
    obstacles = process_obstacles(raw.obstacles, scaling, diagnostics)
    markers = process_start_finish_lines(
        raw.start_lines, raw.finish_lines, scaling, diagnostics,
    )

    wall_bodies = create_wall_bodies(factory, walls)
    obstacle_bodies = create_obstacle_bodies(factory, obstacles)
    boundary_bodies = create_invisible_boundary(factory, bounds, boundary_policy)

    metadata = TrackMetadata(
        original_svg_size=svg_size,
        scale_factor=scaling.scale_x,
        element_counts=ElementCounts(
            walls=len(walls),
            obstacles=len(obstacles),
            track_areas=len(raw.track_areas),
            start_lines=len(raw.start_lines),
            finish_lines=len(raw.finish_lines),
        ),
    )

    return ImportedTrack(
        bounds=bounds,
        walls=wall_bodies,
        obstacles=obstacle_bodies,
        boundaries=boundary_bodies,
        start_position=calculate_start_position(markers.start_line),
        finish_position=calculate_finish_position(markers.finish_line),
        metadata=metadata,
        markers=markers,
        wall_defs=walls,
        obstacle_defs=obstacles,
        diagnostics=diagnostics,
    )


# ---------------------------------------------------------------------------
# File loading
# ---------------------------------------------------------------------------

def load_track_from_file(path: str | Path) -> str:
    """Read an SVG track file as text.

    Raises:
        TrackImportError: If the file cannot be read or decoded.
    """
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise TrackImportError(f"File reading failed: {exc}", cause=exc) from exc


def import_track_from_file(
    path: str | Path,
    game_config: GameConfig,
    factory: BodyFactory | None = None,
    boundary_policy: BoundaryPolicy | None = None,
) -> ImportedTrack:
    svg_text = load_track_from_file(path)
    return import_track(svg_text, game_config, factory, boundary_policy)


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

def validate_track_data(track: ImportedTrack) -> ValidationResult:
    """Classify a compiled track as usable, usable with warnings, or invalid.

    Only invalid bounds are an error; everything else is a warning.
    """
    errors: list[str] = []
    warnings: list[str] = []

    bounds = track.bounds
    if bounds.width <= 0 or bounds.height <= 0:
        errors.append("Track bounds are invalid")

    if track.start_position is None:
        warnings.append("No start line found in track")
    if track.finish_position is None:
        warnings.append("No finish line found in track")
    if len(track.walls) == 0:
        warnings.append("No walls found in track")
    if len(track.obstacles) == 0:
        warnings.append("No obstacles found in track")

    if bounds.width > LARGE_TRACK_THRESHOLD or bounds.height > LARGE_TRACK_THRESHOLD:
        warnings.append("Track is very large and may impact performance")

    counts = track.metadata.element_counts
    if counts.start_lines > 1:
        warnings.append("Multiple start lines found; only the first is used")
    if counts.finish_lines > 1:
        warnings.append("Multiple finish lines found; only the first is used")

    return ValidationResult(is_valid=not errors, errors=errors, warnings=warnings)


# ---------------------------------------------------------------------------
# World wiring
# ---------------------------------------------------------------------------

def add_track_to_world(track: ImportedTrack, world: PhysicsWorld | None) -> None:
    """Register every static body of *track* with *world*."""
    add_bodies_with_physics(world, track.walls)
    add_bodies_with_physics(world, track.obstacles)
    add_bodies_with_physics(world, track.boundaries)
    logger.info(
        "Track added to world: %d walls, %d obstacles, %d boundaries",
        len(track.walls), len(track.obstacles), len(track.boundaries),
    )


def remove_track_from_world(track: ImportedTrack, world: PhysicsWorld | None) -> None:
    if world is None:
        return
    remove_bodies_from_physics(world, track.walls)
    remove_bodies_from_physics(world, track.obstacles)
    remove_bodies_from_physics(world, track.boundaries)
    logger.info("Track removed from world")
