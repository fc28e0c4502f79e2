"""
Tests for shared geographic functions.

Tests the haversine distance and gradient calculations.
"""

import pytest

from workout_gpx.features.gpx.models import GeoPoint
from workout_gpx.shared.geo import (
    haversine,
    calculate_gradient,
    gradient_to_percent,
    calculate_total_distance,
    EARTH_RADIUS_M,
)


# =============================================================================
# Test Haversine Distance
# =============================================================================

class TestHaversine:
    """Tests for haversine function."""

    def test_same_point(self):
        """Distance between same point should be 0."""
        dist = haversine(43.0, 76.0, 43.0, 76.0)
        assert dist == 0.0

    def test_known_distance_almaty_astana(self):
        """Test with known distance (Almaty to Astana ~974km)."""
        dist = haversine(43.238949, 76.945465, 51.169392, 71.449074)
        assert 950_000 < dist < 1_000_000

    def test_small_distance(self):
        """0.001 degree latitude ≈ 111 meters."""
        dist = haversine(37.0, -122.0, 37.001, -122.0)
        assert 110 < dist < 112

    def test_symmetry(self):
        """Distance A->B should equal B->A."""
        dist_ab = haversine(43.0, 76.0, 44.0, 77.0)
        dist_ba = haversine(44.0, 77.0, 43.0, 76.0)
        assert dist_ab == pytest.approx(dist_ba, rel=0.0001)

    def test_east_west_distance(self):
        """At equator, 1 degree longitude ≈ 111 km."""
        dist = haversine(0.0, 0.0, 0.0, 1.0)
        assert 110_000 < dist < 112_000

    def test_meridian_distance_is_linear(self):
        """Along a meridian, twice the latitude step is twice the distance."""
        one = haversine(37.0, -122.0, 37.001, -122.0)
        two = haversine(37.0, -122.0, 37.002, -122.0)
        assert two == pytest.approx(2 * one, rel=1e-9)

    def test_earth_radius_constant(self):
        """Verify Earth radius constant is correct."""
        assert EARTH_RADIUS_M == 6371000.0


# =============================================================================
# Test Calculate Gradient
# =============================================================================

class TestCalculateGradient:
    """Tests for calculate_gradient function."""

    def test_zero_distance(self):
        """Zero distance should return 0 gradient."""
        assert calculate_gradient(0.0, 100.0) == 0.0

    def test_10_percent(self):
        """100m rise over 1000m = 10% = 0.10."""
        assert calculate_gradient(1000.0, 100.0) == pytest.approx(0.10)

    def test_negative_gradient(self):
        """Negative elevation should give negative gradient."""
        assert calculate_gradient(1000.0, -100.0) == pytest.approx(-0.10)

    def test_to_percent(self):
        assert gradient_to_percent(0.123) == pytest.approx(12.3)


# =============================================================================
# Test Total Distance
# =============================================================================

class TestTotalDistance:
    """Tests for calculate_total_distance function."""

    def test_empty_and_single(self, make_points):
        assert calculate_total_distance([]) == 0.0
        assert calculate_total_distance(make_points([10])) == 0.0

    def test_sum_of_steps(self, make_points):
        """Total equals the sum of point-to-point distances."""
        points = make_points([10, 10, 10, 10])
        step = haversine(37.0, -122.0, 37.001, -122.0)
        assert calculate_total_distance(points) == pytest.approx(3 * step, rel=1e-6)

    def test_accepts_any_point_like(self, t0):
        points = [GeoPoint(0.0, 0.0, 0.0, t0), GeoPoint(0.0, 1.0, 0.0, t0)]
        assert 110_000 < calculate_total_distance(points) < 112_000
