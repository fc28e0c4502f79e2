"""
Elevation Profile Analyzer

Turns a noisy altitude series into a smoothed elevation profile with
per-point grades and ascent/descent totals.

Pipeline for one segment:
1. smooth_elevations() - adaptive centered moving average
2. compute_grades()    - windowed rise/run over surface distance, clamped
3. ElevationProfile    - series plus min/max and totals

Everything here is pure and total: degenerate input (fewer than 2
points, mismatched lengths) yields an empty result instead of raising.
"""

from typing import Optional, Sequence

from workout_gpx.features.gpx.models import GeoPoint
from workout_gpx.shared.diagnostics import TraceSink, null_trace
from workout_gpx.shared.elevation import (
    ELEVATION_NOISE_FLOOR_M,
    calculate_elevation_changes,
    smooth_elevations,
)
from workout_gpx.shared.geo import calculate_gradient, haversine

from .models import ElevationProfile, GradeStats

# Upper bound for the grade half-window
MAX_GRADE_WINDOW = 5

# Windows shorter than this (meters) get grade 0
MIN_GRADE_RUN_M = 5.0

# Grades are clamped to +/- this value (45%)
MAX_ABS_GRADE = 0.45


def grade_window(count: int) -> int:
    """Half-window used for grades over `count` points."""
    return min(MAX_GRADE_WINDOW, count // 10 + 1)


def clamp_grade(grade: float) -> float:
    """Clamp a grade to [-MAX_ABS_GRADE, MAX_ABS_GRADE]."""
    return max(-MAX_ABS_GRADE, min(MAX_ABS_GRADE, grade))


def compute_grades(
    points: Sequence[GeoPoint],
    smoothed: Sequence[float],
    trace: Optional[TraceSink] = None
) -> GradeStats:
    """
    Compute per-point grades and ascent/descent for a segment.

    Grade i compares the points at max(0, i - w) and min(n - 1, i + w),
    w = min(5, n // 10 + 1): rise is the smoothed elevation difference,
    run the surface distance between them. Runs of 5 m or less give 0.
    Results are clamped to +/-0.45. The last grade repeats the one
    before it so the series matches the point count.

    Ascent/descent come from point-to-point smoothed deltas above the
    1 m noise floor.

    Args:
        points: Segment points in recording order
        smoothed: Smoothed elevations, one per point
        trace: Diagnostic sink

    Returns:
        GradeStats, empty if len(points) != len(smoothed) or n < 2
    """
    trace = trace or null_trace
    count = len(points)
    if count != len(smoothed) or count < 2:
        trace("elevation.grades_skipped", points=count, elevations=len(smoothed))
        return GradeStats()

    window = grade_window(count)
    grades = []
    clamped = 0

    for i in range(count - 1):
        lo = max(0, i - window)
        hi = min(count - 1, i + window)
        a, b = points[lo], points[hi]
        run = haversine(a.latitude, a.longitude, b.latitude, b.longitude)

        if run > MIN_GRADE_RUN_M:
            raw = calculate_gradient(run, smoothed[hi] - smoothed[lo])
            grade = clamp_grade(raw)
            if grade != raw:
                clamped += 1
        else:
            grade = 0.0
        grades.append(grade)

    max_grade = max(grades)
    min_grade = min(grades)
    grades.append(grades[-1])

    ascent, descent = calculate_elevation_changes(smoothed, ELEVATION_NOISE_FLOOR_M)

    trace(
        "elevation.grades_computed",
        points=count,
        window=window,
        clamped=clamped,
    )
    return GradeStats(
        grades=tuple(grades),
        max_grade=max_grade,
        min_grade=min_grade,
        total_ascent=ascent,
        total_descent=descent,
    )


def build_elevation_profile(
    points: Sequence[GeoPoint],
    trace: Optional[TraceSink] = None
) -> ElevationProfile:
    """
    Build the elevation profile for one segment's points.

    Args:
        points: Segment points in recording order
        trace: Diagnostic sink

    Returns:
        ElevationProfile, or ElevationProfile.empty() for fewer than 2 points
    """
    trace = trace or null_trace
    if len(points) < 2:
        trace("elevation.degenerate", points=len(points))
        return ElevationProfile.empty(f"{len(points)} point(s)")

    elevations = smooth_elevations([p.altitude for p in points])
    stats = compute_grades(points, elevations, trace=trace)

    return ElevationProfile(
        elevations=tuple(elevations),
        grades=stats.grades,
        min_elevation=min(elevations),
        max_elevation=max(elevations),
        max_grade=stats.max_grade,
        min_grade=stats.min_grade,
        total_ascent=stats.total_ascent,
        total_descent=stats.total_descent,
    )
