"""
Elevation analysis types.

This module contains only dataclasses with no analysis logic.
All types are derived views: computed on demand from a segment's
points and never persisted.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

from workout_gpx.features.gpx.errors import FailureKind, TrackError
from workout_gpx.features.gpx.models import GeoPoint
from workout_gpx.shared.gradients import GradeClass


@dataclass(frozen=True)
class GradeStats:
    """Per-point grades plus totals for one segment."""
    grades: Tuple[float, ...] = ()
    max_grade: float = 0.0
    min_grade: float = 0.0
    total_ascent: float = 0.0
    total_descent: float = 0.0

    @property
    def is_empty(self) -> bool:
        return not self.grades


@dataclass(frozen=True)
class ElevationProfile:
    """
    Smoothed elevation and grade series for one segment.

    `elevations` and `grades` have the same length as the source points
    and index i always refers to point i. A degenerate segment (fewer
    than 2 points) gives the zeroed profile from `empty()`.
    """
    elevations: Tuple[float, ...] = ()
    grades: Tuple[float, ...] = ()
    min_elevation: float = 0.0
    max_elevation: float = 0.0
    max_grade: float = 0.0
    min_grade: float = 0.0
    total_ascent: float = 0.0
    total_descent: float = 0.0
    error: Optional[TrackError] = None

    @classmethod
    def empty(cls, detail: Optional[str] = None) -> "ElevationProfile":
        return cls(error=TrackError.of(FailureKind.DEGENERATE_PROFILE, detail))

    @property
    def is_empty(self) -> bool:
        return not self.elevations


class MarkerKind(str, Enum):
    PEAK = "peak"
    VALLEY = "valley"


@dataclass(frozen=True)
class ElevationMarker:
    """A significant local extreme of the elevation series."""
    kind: MarkerKind
    index: int
    elevation: float
    deviation: float  # meters from the local window average, signed


@dataclass(frozen=True)
class ElevationMarkers:
    """Peaks and valleys, each ordered by |deviation| descending."""
    peaks: Tuple[ElevationMarker, ...] = ()
    valleys: Tuple[ElevationMarker, ...] = ()


@dataclass(frozen=True)
class ColoredInterval:
    """
    One drawable piece of route between point i and i + 1.

    `grade` is the analyzed value; `display_grade` may be nudged off
    zero for coloring and is what `grade_class` was computed from.
    """
    index: int
    start: Tuple[float, float]
    end: Tuple[float, float]
    grade: float
    display_grade: float
    grade_class: GradeClass


@dataclass(frozen=True)
class RouteRegion:
    """Map region showing a whole route: center and span in degrees."""
    center_latitude: float
    center_longitude: float
    latitude_span: float
    longitude_span: float


@dataclass(frozen=True)
class SegmentRendering:
    """Everything a map surface needs to draw one segment."""
    points: Tuple[GeoPoint, ...]
    profile: ElevationProfile
    intervals: Tuple[ColoredInterval, ...] = field(default_factory=tuple)
    markers: ElevationMarkers = field(default_factory=ElevationMarkers)
