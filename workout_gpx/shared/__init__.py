"""
Shared utilities (NOT business logic).

Usage:
    from workout_gpx.shared import haversine, smooth_elevations
    from workout_gpx.shared.formatters import format_distance
"""
from .geo import (
    haversine,
    calculate_gradient,
    gradient_to_percent,
    calculate_total_distance,
    EARTH_RADIUS_M,
    METERS_PER_KM,
    METERS_PER_MILE,
)
from .elevation import (
    smooth_elevations,
    smoothing_window,
    calculate_elevation_changes,
    ELEVATION_NOISE_FLOOR_M,
)
from .formatters import (
    format_percent,
    format_elevation,
    format_elevation_summary,
    format_distance,
    format_duration,
)
from .gradients import (
    GRADE_BAND_THRESHOLDS,
    UPHILL_COLORS,
    DOWNHILL_COLORS,
    GradeBand,
    GradeDirection,
    GradeClass,
    grade_band,
    classify_grade,
)
from .constants import (
    ActivityKind,
    ACTIVITY_LABELS,
    infer_activity_kind,
)
from .diagnostics import (
    TraceSink,
    null_trace,
    logging_trace,
)

__all__ = [
    # geo
    "haversine",
    "calculate_gradient",
    "gradient_to_percent",
    "calculate_total_distance",
    "EARTH_RADIUS_M",
    "METERS_PER_KM",
    "METERS_PER_MILE",
    # elevation
    "smooth_elevations",
    "smoothing_window",
    "calculate_elevation_changes",
    "ELEVATION_NOISE_FLOOR_M",
    # formatters
    "format_percent",
    "format_elevation",
    "format_elevation_summary",
    "format_distance",
    "format_duration",
    # gradients
    "GRADE_BAND_THRESHOLDS",
    "UPHILL_COLORS",
    "DOWNHILL_COLORS",
    "GradeBand",
    "GradeDirection",
    "GradeClass",
    "grade_band",
    "classify_grade",
    # constants
    "ActivityKind",
    "ACTIVITY_LABELS",
    "infer_activity_kind",
    # diagnostics
    "TraceSink",
    "null_trace",
    "logging_trace",
]
