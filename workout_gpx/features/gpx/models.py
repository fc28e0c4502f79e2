"""
Track domain model.

Plain immutable dataclasses shared by the parser, the generator and the
elevation analyzer. A recording pause is represented by starting a new
TrackSegment, never by a marker point.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime, timedelta
from typing import Iterator, Tuple

from workout_gpx.shared.constants import ActivityKind, infer_activity_kind

# Window used when a track has no usable time span
FALLBACK_DURATION = timedelta(hours=1)


def _require_aware(value: datetime, what: str) -> None:
    if value.tzinfo is None or value.utcoffset() is None:
        raise ValueError(f"{what} must be timezone-aware, got {value!r}")


@dataclass(frozen=True)
class GeoPoint:
    """
    A single recorded location sample.

    The timestamp must be timezone-aware so that a GPX round trip gives
    back an equal point.
    """
    latitude: float
    longitude: float
    altitude: float
    timestamp: datetime

    def __post_init__(self):
        _require_aware(self.timestamp, "GeoPoint.timestamp")


@dataclass(frozen=True)
class TrackSegment:
    """Continuous run of points in recording order. May be empty."""
    points: Tuple[GeoPoint, ...] = ()

    def __post_init__(self):
        # Accept any iterable, store a tuple
        object.__setattr__(self, "points", tuple(self.points))

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[GeoPoint]:
        return iter(self.points)

    @property
    def is_empty(self) -> bool:
        return not self.points


@dataclass(frozen=True)
class Track:
    """
    A recorded activity: name, kind, start time and ordered segments.

    A track with no non-empty segment is not exportable.
    """
    name: str
    activity_kind: ActivityKind
    start_time: datetime
    segments: Tuple[TrackSegment, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "segments", tuple(self.segments))
        _require_aware(self.start_time, "Track.start_time")

    @classmethod
    def from_gpx_fields(
        cls,
        name: str,
        type_name: str,
        start_time: datetime,
        segments
    ) -> "Track":
        """Build a track, inferring the activity kind from name/type."""
        return cls(
            name=name,
            activity_kind=infer_activity_kind(name, type_name),
            start_time=start_time,
            segments=segments,
        )

    @property
    def all_points(self) -> Tuple[GeoPoint, ...]:
        """Points of all segments, flattened in order."""
        return tuple(p for segment in self.segments for p in segment.points)

    @property
    def point_count(self) -> int:
        return sum(len(segment) for segment in self.segments)

    @property
    def is_exportable(self) -> bool:
        return any(not segment.is_empty for segment in self.segments)

    def time_bounds(self) -> Tuple[datetime, datetime]:
        """
        Start and end of the recording.

        Uses the earliest and latest point timestamps. Without points
        the window is start_time + 1h; an inverted or zero-length
        window is also replaced by start_time + 1h.
        """
        timestamps = sorted(p.timestamp for p in self.all_points)
        if not timestamps:
            return self.start_time, self.start_time + FALLBACK_DURATION

        start, end = timestamps[0], timestamps[-1]
        if end <= start:
            return self.start_time, self.start_time + FALLBACK_DURATION
        return start, end

    def with_name(self, name: str) -> "Track":
        """Copy with another name, re-inferring the activity kind."""
        kind = infer_activity_kind(name, self.activity_kind.value)
        return replace(self, name=name, activity_kind=kind)
