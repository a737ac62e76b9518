"""slingrace/game_logic.py — Out-of-bounds checks against compiled track bounds."""

from __future__ import annotations

from slingrace.track.types import ImportedTrack, Point, TrackBounds


def is_out_of_bounds(position: Point, track_bounds: TrackBounds) -> bool:
    """True when *position* lies strictly outside the bounds box."""
    return (
        position.x < track_bounds.x
        or position.x > track_bounds.right
        or position.y < track_bounds.y
        or position.y > track_bounds.bottom
    )


def get_default_respawn_position(track_bounds: TrackBounds) -> Point:
    return Point(
        track_bounds.x + track_bounds.width / 2,
        track_bounds.y + track_bounds.height / 2,
    )


def get_respawn_position(track: ImportedTrack) -> Point:
    """Start position if the track has one, else the centre of its bounds."""
    if track.start_position is not None:
        return Point(track.start_position.x, track.start_position.y)
    return get_default_respawn_position(track.bounds)
