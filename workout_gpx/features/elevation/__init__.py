"""
Elevation profile module.

Usage:
    from workout_gpx.features.elevation import build_elevation_profile
    from workout_gpx.features.elevation import TrackAnalysisService

Components:
- analyzer: smoothing + windowed grades + ascent/descent
- markers: significant peaks/valleys for map annotations
- rendering: grade colors per interval, elevation ramp, route region
- TrackAnalysisService: per-track analysis and TrackInfo summary
"""

from .models import (
    GradeStats,
    ElevationProfile,
    MarkerKind,
    ElevationMarker,
    ElevationMarkers,
    ColoredInterval,
    RouteRegion,
    SegmentRendering,
)
from .analyzer import build_elevation_profile, compute_grades, clamp_grade, grade_window
from .markers import find_elevation_markers
from .rendering import (
    colored_intervals,
    display_grade,
    elevation_color,
    route_region,
    route_endpoints,
)
from .schemas import TrackInfo
from .service import TrackAnalysisService

__all__ = [
    # Models
    "GradeStats",
    "ElevationProfile",
    "MarkerKind",
    "ElevationMarker",
    "ElevationMarkers",
    "ColoredInterval",
    "RouteRegion",
    "SegmentRendering",
    # Analyzer
    "build_elevation_profile",
    "compute_grades",
    "clamp_grade",
    "grade_window",
    # Markers
    "find_elevation_markers",
    # Rendering
    "colored_intervals",
    "display_grade",
    "elevation_color",
    "route_region",
    "route_endpoints",
    # Summary
    "TrackInfo",
    "TrackAnalysisService",
]
