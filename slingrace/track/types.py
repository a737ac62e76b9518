"""slingrace/track/types.py — Data model of an imported track.

All geometry is in target-world units once it leaves the transformer.
Rectangles are positioned by their top-left corner, circles by their centre.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union
from xml.etree.ElementTree import Element

from slingrace.config import BoundaryPolicy  # noqa: F401  (re-exported)


# ---------------------------------------------------------------------------
# Geometry
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ScalingFactor:
    """Uniform scale plus centring offset; scale_x always equals scale_y."""
    scale_x: float
    scale_y: float
    offset_x: float
    offset_y: float


@dataclass
class Point:
    x: float
    y: float


@dataclass
class GameRect:
    x: float
    y: float
    width: float
    height: float


@dataclass
class GameCircle:
    x: float
    y: float
    radius: float


GameShape = Union[GameRect, GameCircle]


def is_game_circle(shape: GameShape) -> bool:
    """A shape is a circle when it carries a radius."""
    return hasattr(shape, "radius")


def is_game_rect(shape: GameShape) -> bool:
    return hasattr(shape, "width") and hasattr(shape, "height")


@dataclass
class TrackBounds:
    """Minimal box around every track-area element (the in-bounds region)."""
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height


# ---------------------------------------------------------------------------
# Track parts
# ---------------------------------------------------------------------------

@dataclass
class Wall:
    shape: GameRect
    id: str
    type: str = "wall"


@dataclass
class Obstacle:
    shape: GameShape
    id: str
    type: str = "obstacle"


@dataclass
class TrackMarkers:
    start_line: GameRect | None = None
    finish_line: GameRect | None = None


@dataclass
class RawTrackElements:
    """Classified SVG elements, document order preserved within each bucket."""
    track_areas: list[Element] = field(default_factory=list)
    walls: list[Element] = field(default_factory=list)
    obstacles: list[Element] = field(default_factory=list)
    start_lines: list[Element] = field(default_factory=list)
    finish_lines: list[Element] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Diagnostics and results
# ---------------------------------------------------------------------------

@dataclass
class Diagnostic:
    """One lenient-parse fallback or ignored element."""
    code: str
    message: str
    tag: str = ""
    attribute: str = ""
    value: str = ""


@dataclass
class ElementCounts:
    walls: int
    obstacles: int
    track_areas: int
    start_lines: int = 0
    finish_lines: int = 0


@dataclass
class TrackMetadata:
    original_svg_size: tuple[float, float]
    scale_factor: float
    element_counts: ElementCounts


@dataclass
class ImportedTrack:
    """Compiled track: bounds, static bodies, markers and metadata.

    ``walls``, ``obstacles`` and ``boundaries`` hold bodies produced by the
    injected body factory. ``wall_defs``, ``obstacle_defs`` and ``markers``
    keep the shape descriptors those bodies were built from.
    """
    bounds: TrackBounds
    walls: list[Any]
    obstacles: list[Any]
    boundaries: list[Any]
    start_position: Point | None
    finish_position: Point | None
    metadata: TrackMetadata
    markers: TrackMarkers = field(default_factory=TrackMarkers)
    wall_defs: list[Wall] = field(default_factory=list)
    obstacle_defs: list[Obstacle] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)


@dataclass
class ValidationResult:
    is_valid: bool
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
