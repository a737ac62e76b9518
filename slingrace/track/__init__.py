"""slingrace/track — SVG track import pipeline: parse, classify, scale, compile, validate."""

from slingrace.track.errors import (
    InvalidDimensionsError,
    MissingRootError,
    NoTrackAreaError,
    NotACircleError,
    ParseError,
    PhysicsError,
    TrackError,
    TrackImportError,
)
from slingrace.track.importer import (
    add_track_to_world,
    import_track,
    import_track_from_file,
    load_track_from_file,
    remove_track_from_world,
    validate_track_data,
)
from slingrace.track.types import (
    BoundaryPolicy,
    Diagnostic,
    ImportedTrack,
    TrackBounds,
    ValidationResult,
)

__all__ = [
    "TrackError",
    "ParseError",
    "MissingRootError",
    "InvalidDimensionsError",
    "NoTrackAreaError",
    "NotACircleError",
    "PhysicsError",
    "TrackImportError",
    "import_track",
    "import_track_from_file",
    "load_track_from_file",
    "validate_track_data",
    "add_track_to_world",
    "remove_track_from_world",
    "BoundaryPolicy",
    "Diagnostic",
    "ImportedTrack",
    "TrackBounds",
    "ValidationResult",
]
