"""
Rendering helpers.

Plain data for a map surface: per-interval grade colors, an elevation
color ramp, the region framing a route and its start/end positions.
No drawing happens here.
"""

from typing import List, Optional, Sequence, Tuple

from workout_gpx.features.gpx.models import GeoPoint
from workout_gpx.shared.gradients import GRADE_BAND_THRESHOLDS, GradeBand, classify_grade

from .models import ColoredInterval, ElevationProfile, RouteRegion

# Upper bound of the FLAT band on |grade|
FLAT_GRADE_LIMIT = next(
    lower for lower, band in GRADE_BAND_THRESHOLDS if band == GradeBand.MODERATE
)

# Flat-looking intervals that still change this much (meters) get nudged
DISPLAY_BOOST_MIN_DELTA_M = 0.5
DISPLAY_BOOST_GRADE = 0.01

REGION_PADDING = 1.5
MIN_REGION_SPAN_DEG = 0.01


def display_grade(grade: float, elevation_delta: float) -> float:
    """
    Grade used for coloring an interval.

    A flat-band grade over an interval whose smoothed elevation still
    moves more than 0.5 m is shown as +/-0.01 so the route doesn't look
    flat. The analyzed grade itself is never changed.
    """
    if abs(grade) < FLAT_GRADE_LIMIT and abs(elevation_delta) > DISPLAY_BOOST_MIN_DELTA_M:
        return DISPLAY_BOOST_GRADE if elevation_delta > 0 else -DISPLAY_BOOST_GRADE
    return grade


def colored_intervals(
    points: Sequence[GeoPoint],
    profile: ElevationProfile
) -> List[ColoredInterval]:
    """
    Classify every consecutive point pair for gradient coloring.

    Args:
        points: Segment points
        profile: Profile computed from the same points

    Returns:
        One ColoredInterval per pair (n - 1), empty for degenerate input
    """
    count = len(points)
    if count < 2 or len(profile.grades) != count or len(profile.elevations) != count:
        return []

    intervals = []
    for i in range(count - 1):
        grade = profile.grades[i]
        shown = display_grade(grade, profile.elevations[i + 1] - profile.elevations[i])
        a, b = points[i], points[i + 1]
        intervals.append(ColoredInterval(
            index=i,
            start=(a.latitude, a.longitude),
            end=(b.latitude, b.longitude),
            grade=grade,
            display_grade=shown,
            grade_class=classify_grade(shown),
        ))
    return intervals


def _hex(red: float, green: float, blue: float) -> str:
    return "#{:02X}{:02X}{:02X}".format(
        *(round(max(0.0, min(1.0, c)) * 255) for c in (red, green, blue))
    )


def elevation_color(elevation: float, min_elevation: float, max_elevation: float) -> str:
    """
    Color for an absolute elevation: blue (low) -> green -> red (high).

    A flat range maps everything to the middle of the ramp.
    """
    spread = max_elevation - min_elevation
    t = (elevation - min_elevation) / spread if spread > 0 else 0.5
    t = max(0.0, min(1.0, t))

    if t < 0.5:
        s = t * 2
        return _hex(0.0, 0.7 * s + 0.3, 1.0)
    s = (t - 0.5) * 2
    return _hex(0.7 * s + 0.3, 0.8 * (1 - s) + 0.2, 0.0)


def route_region(points: Sequence[GeoPoint]) -> Optional[RouteRegion]:
    """
    Region framing all points, padded x1.5, at least 0.01 deg each way.

    Returns:
        RouteRegion, or None without points
    """
    if not points:
        return None

    lats = [p.latitude for p in points]
    lons = [p.longitude for p in points]
    min_lat, max_lat = min(lats), max(lats)
    min_lon, max_lon = min(lons), max(lons)

    return RouteRegion(
        center_latitude=(min_lat + max_lat) / 2,
        center_longitude=(min_lon + max_lon) / 2,
        latitude_span=max((max_lat - min_lat) * REGION_PADDING, MIN_REGION_SPAN_DEG),
        longitude_span=max((max_lon - min_lon) * REGION_PADDING, MIN_REGION_SPAN_DEG),
    )


def route_endpoints(points: Sequence[GeoPoint]) -> Optional[Tuple[GeoPoint, GeoPoint]]:
    """Start and end points for the route's flag markers."""
    if not points:
        return None
    return points[0], points[-1]
