"""slingrace/track/transformer.py — SVG geometry to world geometry.

Computes the uniform scaling that fits the SVG canvas into the target world
and converts classified elements into walls, obstacles, bounds and markers.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET

import numpy as np

from slingrace.config import GameConfig
from slingrace.constants import BOUNDARY_THICKNESS, SCALE_MARGIN, WORLD_BOUNDS_PADDING
from slingrace.track.errors import NoTrackAreaError
from slingrace.track.svg_parser import (
    SUPPORTED_SHAPE_TAGS,
    element_tag,
    get_circle_data,
    get_element_bounds,
)
from slingrace.track.types import (
    Diagnostic,
    GameCircle,
    GameRect,
    Obstacle,
    Point,
    ScalingFactor,
    TrackBounds,
    TrackMarkers,
    Wall,
)


# ---------------------------------------------------------------------------
# Scaling
# ---------------------------------------------------------------------------

def calculate_scaling_factor(
    svg_size: tuple[float, float],
    game_config: GameConfig,
    world_size: float | None = None,
) -> ScalingFactor:
    """Fit *svg_size* into the target world without distortion.

    With *world_size* the target is a square of that size; otherwise it is
    90% of the configured world. The scaled content is centred in the full
    world so the margin is split evenly on both sides.
    """
    svg_width, svg_height = svg_size

    if world_size:
        target_width = world_size
        target_height = world_size
    else:
        target_width = game_config.world_width * SCALE_MARGIN
        target_height = game_config.world_height * SCALE_MARGIN

    scale = min(target_width / svg_width, target_height / svg_height)

    offset_x = (game_config.world_width - svg_width * scale) / 2
    offset_y = (game_config.world_height - svg_height * scale) / 2

    return ScalingFactor(scale_x=scale, scale_y=scale, offset_x=offset_x, offset_y=offset_y)


def transform_point(x: float, y: float, scaling: ScalingFactor) -> Point:
    return Point(
        x * scaling.scale_x + scaling.offset_x,
        y * scaling.scale_y + scaling.offset_y,
    )


# ---------------------------------------------------------------------------
# Element conversion
# ---------------------------------------------------------------------------

def svg_rect_to_game_rect(
    element: ET.Element,
    scaling: ScalingFactor,
    diagnostics: list[Diagnostic] | None = None,
) -> GameRect:
    """Bounding box of any supported element, in world units."""
    bounds = get_element_bounds(element, diagnostics)
    top_left = transform_point(bounds.x, bounds.y, scaling)
    return GameRect(
        x=top_left.x,
        y=top_left.y,
        width=bounds.width * scaling.scale_x,
        height=bounds.height * scaling.scale_y,
    )


def svg_circle_to_game_circle(
    element: ET.Element,
    scaling: ScalingFactor,
    diagnostics: list[Diagnostic] | None = None,
) -> GameCircle:
    cx, cy, radius = get_circle_data(element, diagnostics)
    center = transform_point(cx, cy, scaling)
    # min() keeps the circle round even if scale_x and scale_y ever diverge
    return GameCircle(
        x=center.x,
        y=center.y,
        radius=radius * min(scaling.scale_x, scaling.scale_y),
    )


# ---------------------------------------------------------------------------
# Track parts
# ---------------------------------------------------------------------------

def process_track_area(
    elements: list[ET.Element],
    scaling: ScalingFactor,
    diagnostics: list[Diagnostic] | None = None,
) -> TrackBounds:
    """Union box of all measurable track-area elements.

    Unsupported elements (a coloured <g>, a path) are reported through
    *diagnostics* and left out of the union.

    Raises:
        NoTrackAreaError: If no element can be measured.
    """
    if not elements:
        raise NoTrackAreaError("No track area elements found")

    rects = []
    for el in elements:
        rect = svg_rect_to_game_rect(el, scaling, diagnostics)
        if element_tag(el) in SUPPORTED_SHAPE_TAGS:
            rects.append(rect)
    if not rects:
        raise NoTrackAreaError("No supported track area elements found")

    boxes = np.array(
        [(r.x, r.y, r.x + r.width, r.y + r.height) for r in rects], dtype=float
    )
    min_x, min_y = boxes[:, 0].min(), boxes[:, 1].min()
    max_x, max_y = boxes[:, 2].max(), boxes[:, 3].max()

    return TrackBounds(
        x=float(min_x),
        y=float(min_y),
        width=float(max_x - min_x),
        height=float(max_y - min_y),
    )


def process_walls(
    elements: list[ET.Element],
    scaling: ScalingFactor,
    diagnostics: list[Diagnostic] | None = None,
) -> list[Wall]:
    return [
        Wall(
            shape=svg_rect_to_game_rect(el, scaling, diagnostics),
            id=el.get("id") or f"wall-{index}",
        )
        for index, el in enumerate(elements)
    ]


def process_obstacles(
    elements: list[ET.Element],
    scaling: ScalingFactor,
    diagnostics: list[Diagnostic] | None = None,
) -> list[Obstacle]:
    """Circles stay circles; every other element becomes its bounding box."""
    obstacles = []
    for index, el in enumerate(elements):
        if element_tag(el) == "circle":
            shape = svg_circle_to_game_circle(el, scaling, diagnostics)
        else:
            shape = svg_rect_to_game_rect(el, scaling, diagnostics)
        obstacles.append(Obstacle(shape=shape, id=el.get("id") or f"obstacle-{index}"))
    return obstacles


def process_start_finish_lines(
    start_elements: list[ET.Element],
    finish_elements: list[ET.Element],
    scaling: ScalingFactor,
    diagnostics: list[Diagnostic] | None = None,
) -> TrackMarkers:
    """Only the first start and first finish element are used."""
    start_line = (
        svg_rect_to_game_rect(start_elements[0], scaling, diagnostics)
        if start_elements else None
    )
    finish_line = (
        svg_rect_to_game_rect(finish_elements[0], scaling, diagnostics)
        if finish_elements else None
    )
    return TrackMarkers(start_line=start_line, finish_line=finish_line)


def _rect_center(rect: GameRect | None) -> Point | None:
    if rect is None:
        return None
    return Point(rect.x + rect.width / 2, rect.y + rect.height / 2)


def calculate_start_position(start_line: GameRect | None) -> Point | None:
    return _rect_center(start_line)


def calculate_finish_position(finish_line: GameRect | None) -> Point | None:
    return _rect_center(finish_line)


# ---------------------------------------------------------------------------
# Perimeter and world extents
# ---------------------------------------------------------------------------

def create_boundary_walls(
    track_bounds: TrackBounds,
    thickness: float = BOUNDARY_THICKNESS,
) -> list[GameRect]:
    """Four strips just outside the track bounds: top, bottom, left, right.

    The top and bottom strips span the corners.
    """
    b = track_bounds
    return [
        GameRect(b.x - thickness, b.y - thickness, b.width + 2 * thickness, thickness),
        GameRect(b.x - thickness, b.y + b.height, b.width + 2 * thickness, thickness),
        GameRect(b.x - thickness, b.y, thickness, b.height),
        GameRect(b.x + b.width, b.y, thickness, b.height),
    ]


def calculate_world_bounds(
    track_bounds: TrackBounds,
    padding: float = WORLD_BOUNDS_PADDING,
) -> GameRect:
    """Track bounds grown by *padding* on every side."""
    return GameRect(
        x=track_bounds.x - padding,
        y=track_bounds.y - padding,
        width=track_bounds.width + 2 * padding,
        height=track_bounds.height + 2 * padding,
    )
