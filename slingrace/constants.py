"""slingrace/constants.py — Track convention colours and tuning constants.

Every number the import pipeline, the physics adapter and the renderer
depend on lives here so that game-feel tuning never touches pipeline code.
"""

# ---------------------------------------------------------------------------
# Viewport
# ---------------------------------------------------------------------------

SCREEN_WIDTH = 1024
SCREEN_HEIGHT = 768

# ---------------------------------------------------------------------------
# SVG colour convention (compared case-insensitively, exact match)
# ---------------------------------------------------------------------------

TRACK_AREA_COLOR = "#00FF00"
WALL_COLOR = "#000000"
OBSTACLE_COLOR = "#800080"
START_LINE_COLOR = "#0000FF"
FINISH_LINE_COLOR = "#FFD700"
OUT_OF_BOUNDS_COLOR = "#FF0000"

# Element bucket -> colour. Out-of-bounds elements are recognised but never compiled.
TRACK_COLORS: dict[str, str] = {
    "track_areas": TRACK_AREA_COLOR,
    "walls": WALL_COLOR,
    "obstacles": OBSTACLE_COLOR,
    "start_lines": START_LINE_COLOR,
    "finish_lines": FINISH_LINE_COLOR,
}

# Root attribute forcing a square target world
WORLD_SIZE_ATTRIBUTE = "data-size"

# ---------------------------------------------------------------------------
# Scaling
# ---------------------------------------------------------------------------

# Fraction of the viewport the scaled track may occupy (10% margin)
SCALE_MARGIN = 0.9

# Default stroke width for <line> markers without stroke-width
DEFAULT_STROKE_WIDTH = 1.0

# ---------------------------------------------------------------------------
# Boundaries and world extents
# ---------------------------------------------------------------------------

BOUNDARY_THICKNESS = 50.0
WORLD_BOUNDS_PADDING = 100.0
# Backdrop padding used by the renderer
WORLD_PADDING = 500.0

# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

LARGE_TRACK_THRESHOLD = 10000.0

# ---------------------------------------------------------------------------
# Static body tuning
# ---------------------------------------------------------------------------

WALL_RESTITUTION = 0.8
WALL_FRICTION = 0.1
WALL_FRICTION_STATIC = 0.5

OBSTACLE_RESTITUTION = 0.9
OBSTACLE_FRICTION = 0.1
OBSTACLE_FRICTION_STATIC = 0.5

BOUNDARY_RESTITUTION = 0.0
BOUNDARY_FRICTION = 1.0
BOUNDARY_FRICTION_STATIC = 1.0

# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

MARKER_LINE_WIDTH = 10
