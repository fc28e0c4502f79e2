"""
Geographic utility functions.

This is the SINGLE SOURCE OF TRUTH for geographic calculations.
DO NOT duplicate these functions elsewhere.
"""
import math
from typing import Sequence

# Earth radius in meters
EARTH_RADIUS_M = 6371000.0

# Conversion factors
METERS_PER_KM = 1000.0
METERS_PER_MILE = 1609.34


def haversine(
    lat1: float, lon1: float,
    lat2: float, lon2: float
) -> float:
    """
    Calculate great-circle (surface) distance between two points.

    Args:
        lat1, lon1: First point coordinates (degrees)
        lat2, lon2: Second point coordinates (degrees)

    Returns:
        Distance in meters
    """
    lat1_rad = math.radians(lat1)
    lat2_rad = math.radians(lat2)
    delta_lat = math.radians(lat2 - lat1)
    delta_lon = math.radians(lon2 - lon1)

    a = (
        math.sin(delta_lat / 2) ** 2 +
        math.cos(lat1_rad) * math.cos(lat2_rad) *
        math.sin(delta_lon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_M * c


def calculate_gradient(
    distance_m: float,
    elevation_diff_m: float
) -> float:
    """
    Calculate gradient as decimal.

    Args:
        distance_m: Horizontal distance in meters
        elevation_diff_m: Elevation difference in meters

    Returns:
        Gradient as decimal (0.10 = 10%)
    """
    if distance_m <= 0:
        return 0.0
    return elevation_diff_m / distance_m


def gradient_to_percent(gradient: float) -> float:
    """Convert gradient decimal to percent."""
    return gradient * 100


def calculate_total_distance(points: Sequence) -> float:
    """
    Calculate total distance for a route.

    Args:
        points: Sequence of objects with latitude/longitude attributes

    Returns:
        Total distance in meters
    """
    total = 0.0

    for i in range(1, len(points)):
        prev, cur = points[i - 1], points[i]
        total += haversine(prev.latitude, prev.longitude, cur.latitude, cur.longitude)

    return total
