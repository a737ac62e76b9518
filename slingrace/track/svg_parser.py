"""slingrace/track/svg_parser.py — SVG parsing, colour classification, geometry.

Turns raw SVG text into an ElementTree, buckets elements by the fixed colour
convention and reads shape attributes into axis-aligned boxes in SVG units.

Numeric attributes are parsed leniently: a value with no numeric prefix
becomes 0 and is reported as a ``malformed-number`` Diagnostic instead of
aborting the import.
"""

from __future__ import annotations

import logging
import re
import xml.etree.ElementTree as ET

from slingrace.constants import (
    DEFAULT_STROKE_WIDTH,
    FINISH_LINE_COLOR,
    OBSTACLE_COLOR,
    OUT_OF_BOUNDS_COLOR,
    START_LINE_COLOR,
    TRACK_COLORS,
    WALL_COLOR,
    WORLD_SIZE_ATTRIBUTE,
)
from slingrace.track.errors import (
    InvalidDimensionsError,
    MissingRootError,
    NotACircleError,
    ParseError,
)
from slingrace.track.types import Diagnostic, GameRect, RawTrackElements

logger = logging.getLogger(__name__)

# Leading number, as accepted by JavaScript's parseFloat ("12.5px" -> 12.5)
_NUMBER_PREFIX_RE = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

# Element kinds get_element_bounds can measure
SUPPORTED_SHAPE_TAGS = frozenset({"rect", "circle", "line"})


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _local_tag(tag: str) -> str:
    """Strip namespace from an element tag."""
    if "}" in tag:
        return tag.split("}", 1)[1]
    return tag


def element_tag(element: ET.Element) -> str:
    """Lower-case local tag name of an element."""
    return _local_tag(element.tag).lower()


def _record(diagnostics: list[Diagnostic] | None, diagnostic: Diagnostic) -> None:
    logger.warning(diagnostic.message)
    if diagnostics is not None:
        diagnostics.append(diagnostic)


def parse_number_prefix(raw: str) -> float | None:
    """Parse the leading number of *raw*, or None when there is none."""
    match = _NUMBER_PREFIX_RE.match(raw)
    if match is None:
        return None
    return float(match.group(1))


def _attr_float(
    element: ET.Element,
    name: str,
    default: float = 0.0,
    diagnostics: list[Diagnostic] | None = None,
) -> float:
    """Read a numeric attribute; missing uses *default*, garbage becomes 0."""
    raw = element.get(name)
    if raw is None or raw.strip() == "":
        return default
    value = parse_number_prefix(raw)
    if value is None:
        tag = element_tag(element)
        _record(diagnostics, Diagnostic(
            code="malformed-number",
            message=f"Malformed numeric attribute {name}={raw!r} on <{tag}>, using 0",
            tag=tag,
            attribute=name,
            value=raw,
        ))
        return 0.0
    return value


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

def parse_svg_text(svg_text: str) -> ET.ElementTree:
    """Parse SVG text into an ElementTree.

    Raises:
        ParseError: If the text is not well-formed XML.
    """
    try:
        root = ET.fromstring(svg_text)
    except ET.ParseError as exc:
        raise ParseError(f"SVG parsing failed: {exc}") from exc
    return ET.ElementTree(root)


def _find_svg_root(doc: ET.ElementTree) -> ET.Element | None:
    """First <svg> element in document order (usually the root itself)."""
    for element in doc.getroot().iter():
        if element_tag(element) == "svg":
            return element
    return None


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------

def extract_elements_by_color(doc: ET.ElementTree, color: str) -> list[ET.Element]:
    """Elements whose fill or stroke attribute equals *color*, ignoring case."""
    wanted = color.upper()
    elements = []
    for element in doc.getroot().iter():
        fill = element.get("fill")
        stroke = element.get("stroke")
        if (fill is not None and fill.upper() == wanted) or (
            stroke is not None and stroke.upper() == wanted
        ):
            elements.append(element)
    return elements


def extract_elements_by_tag(doc: ET.ElementTree, tag_name: str) -> list[ET.Element]:
    wanted = tag_name.lower()
    return [el for el in doc.getroot().iter() if element_tag(el) == wanted]


def extract_elements_by_id(doc: ET.ElementTree, id_pattern: str | re.Pattern) -> list[ET.Element]:
    """Elements with an id attribute matching *id_pattern* (re.search)."""
    pattern = re.compile(id_pattern) if isinstance(id_pattern, str) else id_pattern
    elements = []
    for element in doc.getroot().iter():
        eid = element.get("id")
        if eid and pattern.search(eid):
            elements.append(element)
    return elements


def extract_track_elements(doc: ET.ElementTree) -> RawTrackElements:
    """Bucket every element by the colour convention in TRACK_COLORS."""
    ignored = extract_elements_by_color(doc, OUT_OF_BOUNDS_COLOR)
    if ignored:
        logger.debug("Ignoring %d out-of-bounds elements", len(ignored))
    return RawTrackElements(**{
        bucket: extract_elements_by_color(doc, color)
        for bucket, color in TRACK_COLORS.items()
    })


def extract_wall_elements(doc: ET.ElementTree) -> list[ET.Element]:
    return extract_elements_by_color(doc, WALL_COLOR)


def extract_obstacle_elements(doc: ET.ElementTree) -> list[ET.Element]:
    return extract_elements_by_color(doc, OBSTACLE_COLOR)


def extract_start_finish_lines(
    doc: ET.ElementTree,
) -> tuple[list[ET.Element], list[ET.Element]]:
    """Return (start_lines, finish_lines)."""
    return (
        extract_elements_by_color(doc, START_LINE_COLOR),
        extract_elements_by_color(doc, FINISH_LINE_COLOR),
    )


# ---------------------------------------------------------------------------
# Document dimensions
# ---------------------------------------------------------------------------

def get_svg_dimensions(
    doc: ET.ElementTree,
    diagnostics: list[Diagnostic] | None = None,
) -> tuple[float, float]:
    """Declared (width, height) of the <svg> element.

    Raises:
        MissingRootError: If the document has no <svg> element.
        InvalidDimensionsError: If width or height is missing or not positive.
    """
    svg = _find_svg_root(doc)
    if svg is None:
        raise MissingRootError("No SVG root element found")

    width = _attr_float(svg, "width", 0.0, diagnostics)
    height = _attr_float(svg, "height", 0.0, diagnostics)
    if width <= 0 or height <= 0:
        raise InvalidDimensionsError("SVG dimensions are invalid or missing")
    return width, height


def get_svg_world_size(
    doc: ET.ElementTree,
    diagnostics: list[Diagnostic] | None = None,
) -> float | None:
    """Optional square world size from the root ``data-size`` attribute.

    Invalid values fall back to None; this never raises.
    """
    svg = _find_svg_root(doc)
    if svg is None:
        return None

    raw = svg.get(WORLD_SIZE_ATTRIBUTE)
    if not raw:
        return None

    world_size = parse_number_prefix(raw)
    if world_size is None or world_size <= 0:
        _record(diagnostics, Diagnostic(
            code="invalid-world-size",
            message=f"Invalid {WORLD_SIZE_ATTRIBUTE} attribute: {raw!r}",
            tag="svg",
            attribute=WORLD_SIZE_ATTRIBUTE,
            value=raw,
        ))
        return None
    return world_size


# ---------------------------------------------------------------------------
# Geometry
# ---------------------------------------------------------------------------

def get_element_bounds(
    element: ET.Element,
    diagnostics: list[Diagnostic] | None = None,
) -> GameRect:
    """Axis-aligned bounding box of a rect, circle or line in SVG units.

    Lines are widened by their stroke so a thin marker becomes a thin
    rectangle. Other element kinds yield a zero-sized box.
    """
    tag = element_tag(element)

    def num(name: str, default: float = 0.0) -> float:
        return _attr_float(element, name, default, diagnostics)

    if tag == "rect":
        return GameRect(num("x"), num("y"), num("width"), num("height"))

    if tag == "circle":
        cx, cy, r = num("cx"), num("cy"), num("r")
        return GameRect(cx - r, cy - r, r * 2, r * 2)

    if tag == "line":
        x1, y1 = num("x1"), num("y1")
        x2, y2 = num("x2"), num("y2")
        stroke_width = num("stroke-width", DEFAULT_STROKE_WIDTH)
        return GameRect(
            min(x1, x2) - stroke_width / 2,
            min(y1, y2) - stroke_width / 2,
            abs(x2 - x1) + stroke_width,
            abs(y2 - y1) + stroke_width,
        )

    _record(diagnostics, Diagnostic(
        code="unsupported-element",
        message=f"Unsupported SVG element type: {tag}",
        tag=tag,
    ))
    return GameRect(0.0, 0.0, 0.0, 0.0)


def get_circle_data(
    element: ET.Element,
    diagnostics: list[Diagnostic] | None = None,
) -> tuple[float, float, float]:
    """Return (cx, cy, radius) of a <circle>.

    Raises:
        NotACircleError: If *element* is not a circle.
    """
    if element_tag(element) != "circle":
        raise NotACircleError("Element is not a circle")
    return (
        _attr_float(element, "cx", 0.0, diagnostics),
        _attr_float(element, "cy", 0.0, diagnostics),
        _attr_float(element, "r", 0.0, diagnostics),
    )
