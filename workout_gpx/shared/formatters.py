"""
Formatting utilities for display.

Used by track summaries and the host application.
"""
from datetime import timedelta

from .geo import METERS_PER_KM, METERS_PER_MILE


def format_percent(grade: float) -> str:
    """
    Format decimal grade as percent with one decimal.

    Args:
        grade: Grade as decimal (e.g., 0.123)

    Returns:
        Formatted string (e.g., '12.3%')
    """
    return f"{grade * 100:.1f}%"


def format_elevation(meters: float) -> str:
    """
    Format elevation in meters with one decimal.

    Args:
        meters: Elevation in meters

    Returns:
        Formatted string (e.g., '850.0 m')
    """
    return f"{meters:.1f} m"


def format_elevation_summary(
    total_ascent: float,
    total_descent: float,
    max_grade: float,
    min_grade: float
) -> str:
    """
    Multi-line elevation summary.

    Formatting only: values are expected in meters and decimal grades.

    Returns:
        e.g.
            Total Ascent: 120.0 m
            Total Descent: 80.5 m
            Max Grade: 12.3%
            Min Grade: -8.0%
    """
    lines = [
        f"Total Ascent: {format_elevation(total_ascent)}",
        f"Total Descent: {format_elevation(total_descent)}",
        f"Max Grade: {format_percent(max_grade)}",
        f"Min Grade: {format_percent(min_grade)}",
    ]
    return "\n".join(lines)


def format_distance(meters: float, use_metric: bool = True) -> str:
    """
    Format distance in km or miles.

    Args:
        meters: Distance in meters
        use_metric: km if True, miles otherwise

    Returns:
        Formatted string (e.g., '12.50 km' or '7.77 mi')
    """
    if use_metric:
        return f"{meters / METERS_PER_KM:.2f} km"
    return f"{meters / METERS_PER_MILE:.2f} mi"


def format_duration(duration: timedelta) -> str:
    """
    Format duration as abbreviated hours/minutes/seconds.

    Args:
        duration: Elapsed time

    Returns:
        Formatted string (e.g., '1h 5m 3s', '45m 0s', '12s')
    """
    total = max(0, int(duration.total_seconds()))
    h, rest = divmod(total, 3600)
    m, s = divmod(rest, 60)

    if h:
        return f"{h}h {m}m {s}s"
    if m:
        return f"{m}m {s}s"
    return f"{s}s"
