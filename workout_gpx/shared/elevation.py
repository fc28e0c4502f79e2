"""
Elevation processing utilities.

This is the SINGLE SOURCE OF TRUTH for elevation smoothing and
ascent/descent accumulation.
"""
from typing import List, Sequence, Tuple

# Upper bound for the adaptive smoothing half-window
MAX_SMOOTHING_WINDOW = 5

# Point-to-point changes at or below this are treated as sensor noise (meters)
ELEVATION_NOISE_FLOOR_M = 1.0


def smoothing_window(count: int) -> int:
    """Half-window used for a series of `count` samples."""
    return min(MAX_SMOOTHING_WINDOW, count // 20 + 2)


def smooth_elevations(elevations: Sequence[float]) -> List[float]:
    """
    Smooth elevation data using a centered moving average.

    The half-window grows with the series length
    (min(5, n // 20 + 2)); edge samples average over a truncated
    window instead of padding. Every output value is computed from the
    original series, never from already smoothed neighbours.

    Args:
        elevations: Raw elevation values in meters

    Returns:
        Smoothed elevation values, same length and order as input

    Example:
        >>> smooth_elevations([100.0, 100.0, 100.0])
        [100.0, 100.0, 100.0]
    """
    original = list(elevations)
    count = len(original)
    if count == 0:
        return []

    window = smoothing_window(count)
    smoothed = []

    for i in range(count):
        start = max(0, i - window)
        end = min(count - 1, i + window)
        span = original[start:end + 1]
        smoothed.append(sum(span) / len(span))

    return smoothed


def calculate_elevation_changes(
    elevations: Sequence[float],
    noise_floor: float = ELEVATION_NOISE_FLOOR_M
) -> Tuple[float, float]:
    """
    Calculate total elevation gain and loss.

    Only point-to-point changes larger than `noise_floor` count.

    Args:
        elevations: Elevation values (usually already smoothed)
        noise_floor: Minimum absolute change to accumulate, meters

    Returns:
        Tuple of (gain_m, loss_m), both non-negative
    """
    gain = 0.0
    loss = 0.0

    for i in range(1, len(elevations)):
        diff = elevations[i] - elevations[i - 1]
        if abs(diff) <= noise_floor:
            continue
        if diff > 0:
            gain += diff
        else:
            loss += abs(diff)

    return gain, loss
