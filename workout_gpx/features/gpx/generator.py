"""
GPX Generator

Serializes a Track to a GPX 1.1 document using gpxpy's object model.

Output layout:
    <gpx version="1.1" creator="...">
      <metadata><name>{label}</name><time>{start}</time></metadata>
      <trk>
        <name>{label} {start}</name>
        <type>{kind}</type>
        <trkseg> <trkpt lat lon><ele/><time/></trkpt> ... </trkseg>
        ...
      </trk>
    </gpx>

Coordinates and elevations are written positionally with the digits of
Python's shortest round-trip repr, never in scientific notation and
never rounded. All timestamps are written in UTC.
"""

import logging
from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional

import gpxpy.gpx
import gpxpy.gpxfield

from workout_gpx.config import settings

from .models import GeoPoint, Track, TrackSegment

logger = logging.getLogger(__name__)

GPX_VERSION = "1.1"


def to_utc(value: datetime) -> datetime:
    """Normalize an aware timestamp to UTC."""
    return value.astimezone(timezone.utc)


def format_float(value: float) -> str:
    """
    Positional decimal text of a float, without rounding.

    >>> format_float(-1.234567891234e-05)
    '-0.00001234567891234'
    """
    return format(Decimal(repr(float(value))), "f")


class PositionalFloatField(gpxpy.gpxfield.GPXField):
    """GPXField that writes floats with format_float instead of gpxpy's 10-decimal fallback."""

    def to_xml(self, value, *args, **kwargs):
        if isinstance(value, float):
            value = format_float(value)
        return super().to_xml(value, *args, **kwargs)


_POSITIONAL_FIELDS = {
    field.name: field for field in (
        PositionalFloatField("latitude", attribute="lat", type=gpxpy.gpxfield.FLOAT_TYPE, mandatory=True),
        PositionalFloatField("longitude", attribute="lon", type=gpxpy.gpxfield.FLOAT_TYPE, mandatory=True),
        PositionalFloatField("elevation", "ele", type=gpxpy.gpxfield.FLOAT_TYPE),
    )
}


class WorkoutTrackPoint(gpxpy.gpx.GPXTrackPoint):
    """GPXTrackPoint whose lat/lon/ele keep full precision in GPX 1.1 output."""

    gpx_11_fields = [
        _POSITIONAL_FIELDS.get(getattr(field, "name", None), field)
        for field in gpxpy.gpx.GPXTrackPoint.gpx_11_fields
    ]


def track_title(track: Track) -> str:
    """Human-readable '{activity} {start time}' title for <trk><name>."""
    return f"{track.activity_kind.label} {to_utc(track.start_time)}"


def _to_gpx_point(point: GeoPoint) -> gpxpy.gpx.GPXTrackPoint:
    return WorkoutTrackPoint(
        latitude=float(point.latitude),
        longitude=float(point.longitude),
        elevation=float(point.altitude),
        time=to_utc(point.timestamp),
    )


def _to_gpx_segment(segment: TrackSegment) -> gpxpy.gpx.GPXTrackSegment:
    gpx_segment = gpxpy.gpx.GPXTrackSegment()
    gpx_segment.points.extend(_to_gpx_point(p) for p in segment.points)
    return gpx_segment


def build_gpx(track: Track, creator: Optional[str] = None) -> gpxpy.gpx.GPX:
    """
    Map a Track onto gpxpy objects.

    Args:
        track: Track to export
        creator: Value for the creator attribute (default from settings)

    Returns:
        gpxpy GPX object with one track and one segment per TrackSegment
    """
    gpx = gpxpy.gpx.GPX()
    gpx.creator = creator or settings.gpx_creator
    gpx.name = track.activity_kind.label
    gpx.time = to_utc(track.start_time)

    gpx_track = gpxpy.gpx.GPXTrack(name=track_title(track))
    gpx_track.type = track.activity_kind.value
    gpx_track.segments.extend(_to_gpx_segment(s) for s in track.segments)
    gpx.tracks.append(gpx_track)

    return gpx


def generate_gpx(track: Track, creator: Optional[str] = None) -> str:
    """
    Generate GPX 1.1 document text for a track.

    Deterministic: the same Track always gives the same text.

    Args:
        track: Track to serialize
        creator: Value for the creator attribute (default from settings)

    Returns:
        Complete GPX document as a string
    """
    xml = build_gpx(track, creator=creator).to_xml(version=GPX_VERSION)
    logger.debug(
        f"Generated GPX: {len(track.segments)} segments, {track.point_count} points"
    )
    return xml
