"""slingrace/renderer.py — Pyxel drawing of an imported track.

Colours mirror the SVG convention: white track, black walls, purple
obstacles, blue start line, gold finish line, sky-blue out-of-bounds.
All positions are world units shifted by the camera offset.
"""

from __future__ import annotations

import pyxel

from slingrace.constants import (
    MARKER_LINE_WIDTH,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    WORLD_PADDING,
)
from slingrace.track.transformer import calculate_world_bounds
from slingrace.track.types import GameRect, ImportedTrack, Point, is_game_circle

# ---------------------------------------------------------------------------
# Palette
# ---------------------------------------------------------------------------

COL_OUT_OF_BOUNDS = 0
COL_TRACK = 1
COL_WALL = 2
COL_OBSTACLE = 3
COL_START = 4
COL_FINISH = 5

_TRACK_PALETTE = {
    COL_OUT_OF_BOUNDS: 0x87CEEB,  # Sky blue
    COL_TRACK: 0xFFFFFF,          # White
    COL_WALL: 0x000000,           # Black
    COL_OBSTACLE: 0x800080,       # Purple
    COL_START: 0x0000FF,          # Blue
    COL_FINISH: 0xFFD700,         # Gold
}


def init_palette() -> None:
    """Install the track colours. Call after pyxel.init()."""
    for slot, color in _TRACK_PALETTE.items():
        pyxel.colors[slot] = color


# ---------------------------------------------------------------------------
# Culling
# ---------------------------------------------------------------------------

def _visible(x: float, y: float, w: float, h: float, camera_x: float, camera_y: float) -> bool:
    if x + w < camera_x or x > camera_x + SCREEN_WIDTH:
        return False
    if y + h < camera_y or y > camera_y + SCREEN_HEIGHT:
        return False
    return True


def _fill_rect(rect: GameRect, camera_x: float, camera_y: float, col: int) -> None:
    if not _visible(rect.x, rect.y, rect.width, rect.height, camera_x, camera_y):
        return
    pyxel.rect(rect.x - camera_x, rect.y - camera_y, rect.width, rect.height, col)


# ---------------------------------------------------------------------------
# Track
# ---------------------------------------------------------------------------

def draw_track(track: ImportedTrack, camera_x: float = 0.0, camera_y: float = 0.0) -> None:
    """Draw backdrop, track area, walls, obstacles and markers, back to front."""
    backdrop = calculate_world_bounds(track.bounds, WORLD_PADDING)
    _fill_rect(backdrop, camera_x, camera_y, COL_OUT_OF_BOUNDS)

    b = track.bounds
    _fill_rect(GameRect(b.x, b.y, b.width, b.height), camera_x, camera_y, COL_TRACK)

    for wall in track.wall_defs:
        _fill_rect(wall.shape, camera_x, camera_y, COL_WALL)

    for obstacle in track.obstacle_defs:
        shape = obstacle.shape
        if is_game_circle(shape):
            r = shape.radius
            if _visible(shape.x - r, shape.y - r, 2 * r, 2 * r, camera_x, camera_y):
                pyxel.circ(shape.x - camera_x, shape.y - camera_y, r, COL_OBSTACLE)
        else:
            _fill_rect(shape, camera_x, camera_y, COL_OBSTACLE)

    if track.start_position is not None:
        _draw_marker(track, track.start_position, camera_x, camera_y, COL_START)
    if track.finish_position is not None:
        _draw_marker(track, track.finish_position, camera_x, camera_y, COL_FINISH)


def _draw_marker(
    track: ImportedTrack,
    position: Point,
    camera_x: float,
    camera_y: float,
    col: int,
) -> None:
    """Horizontal band across the full track width at the marker's y."""
    half = MARKER_LINE_WIDTH / 2
    band = GameRect(track.bounds.x, position.y - half, track.bounds.width, MARKER_LINE_WIDTH)
    _fill_rect(band, camera_x, camera_y, col)
