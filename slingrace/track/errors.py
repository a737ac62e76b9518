"""slingrace/track/errors.py — Error taxonomy for the track import pipeline.

Every stage raises a specific subclass of TrackError; ``import_track`` wraps
whatever escapes into a single TrackImportError so that callers only have to
handle one type.
"""

from __future__ import annotations


class TrackError(Exception):
    """Base class for all track pipeline errors."""


class ParseError(TrackError):
    """The input text is not well-formed SVG markup."""


class MissingRootError(TrackError):
    """No <svg> element exists in the document."""


class InvalidDimensionsError(TrackError):
    """The root width or height is missing, unparseable or not positive."""


class NoTrackAreaError(TrackError):
    """The document has no track-area elements, so nothing is in bounds."""


class NotACircleError(TrackError):
    """A circle-only accessor was called on another element kind."""


class PhysicsError(TrackError):
    """The physics world is unavailable."""


class TrackImportError(TrackError):
    """Wrapped failure of a whole import, carrying the original error."""

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause
