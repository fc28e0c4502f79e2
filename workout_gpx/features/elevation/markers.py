"""
Elevation marker selection.

Picks the most significant local peaks and valleys of an elevation
series for map annotations. Deterministic: depends only on the series.
"""

from typing import List, Sequence

from .models import ElevationMarker, ElevationMarkers, MarkerKind

# Minimum distance from the local average (meters)
MIN_MARKER_DEVIATION_M = 10.0

# At most this many markers per kind
MAX_MARKERS = 5

# Lower bound for the local half-window
MIN_MARKER_WINDOW = 5


def marker_window(count: int) -> int:
    """Half-window around a candidate: max(5, n // 20)."""
    return max(MIN_MARKER_WINDOW, count // 20)


def _is_extreme(span: Sequence[float], offset: int, peak: bool) -> bool:
    """
    True if span[offset] is the window's max (peak) or min (valley).

    On a plateau only the first sample counts.
    """
    value = span[offset]
    target = max(span) if peak else min(span)
    return value == target and target not in span[:offset]


def _top(markers: List[ElevationMarker], limit: int) -> tuple:
    ranked = sorted(markers, key=lambda m: (-abs(m.deviation), m.index))
    return tuple(ranked[:limit])


def find_elevation_markers(
    elevations: Sequence[float],
    min_deviation: float = MIN_MARKER_DEVIATION_M,
    limit: int = MAX_MARKERS
) -> ElevationMarkers:
    """
    Find significant local maxima and minima.

    Point i is a candidate peak (valley) if it is the highest (lowest)
    value within [i - w, i + w] and lies at least `min_deviation` meters
    above (below) the average of that window.

    Args:
        elevations: Elevation series (usually smoothed)
        min_deviation: Minimum deviation from the window average, meters
        limit: Maximum markers returned per kind

    Returns:
        ElevationMarkers with peaks and valleys ranked by |deviation|
    """
    count = len(elevations)
    if count < 3:
        return ElevationMarkers()

    window = marker_window(count)
    peaks: List[ElevationMarker] = []
    valleys: List[ElevationMarker] = []

    for i, value in enumerate(elevations):
        start = max(0, i - window)
        span = elevations[start:min(count, i + window + 1)]
        deviation = value - sum(span) / len(span)

        if deviation >= min_deviation and _is_extreme(span, i - start, peak=True):
            peaks.append(ElevationMarker(MarkerKind.PEAK, i, value, deviation))
        elif -deviation >= min_deviation and _is_extreme(span, i - start, peak=False):
            valleys.append(ElevationMarker(MarkerKind.VALLEY, i, value, deviation))

    return ElevationMarkers(peaks=_top(peaks, limit), valleys=_top(valleys, limit))
