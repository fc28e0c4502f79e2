"""
Tests for shared elevation utilities.

Smoothing window, truncated edges and the ascent/descent noise floor.
"""

import pytest

from workout_gpx.shared.elevation import (
    smooth_elevations,
    smoothing_window,
    calculate_elevation_changes,
)


# =============================================================================
# Test Smoothing
# =============================================================================

class TestSmoothingWindow:
    """Tests for the adaptive half-window."""

    @pytest.mark.parametrize("count,expected", [
        (0, 2),
        (19, 2),
        (20, 3),
        (40, 4),
        (60, 5),
        (10_000, 5),
    ])
    def test_window(self, count, expected):
        assert smoothing_window(count) == expected


class TestSmoothElevations:
    """Tests for smooth_elevations function."""

    def test_empty(self):
        assert smooth_elevations([]) == []

    def test_single_value(self):
        assert smooth_elevations([42.0]) == [42.0]

    def test_constant_series_unchanged(self):
        """All 100.0 m stays all 100.0 m."""
        assert smooth_elevations([100.0] * 250) == [100.0] * 250

    def test_linear_series_known_values(self):
        """n=5, window=2: edges use truncated windows."""
        result = smooth_elevations([0.0, 10.0, 20.0, 30.0, 40.0])
        assert result == pytest.approx([10.0, 15.0, 20.0, 25.0, 30.0])

    def test_uses_original_values(self):
        """
        Index 1 averages original values 0..3.

        If it used the already smoothed index 0 (10.0) the result
        would differ from 15.0.
        """
        result = smooth_elevations([0.0, 10.0, 20.0, 30.0, 40.0])
        assert result[1] == pytest.approx((0 + 10 + 20 + 30) / 4)

    def test_same_length(self):
        data = [float(i % 7) for i in range(123)]
        assert len(smooth_elevations(data)) == 123

    def test_input_not_modified(self):
        data = [1.0, 5.0, 2.0, 8.0]
        smooth_elevations(data)
        assert data == [1.0, 5.0, 2.0, 8.0]

    def test_spike_is_damped(self):
        data = [100.0] * 10 + [160.0] + [100.0] * 10
        result = smooth_elevations(data)
        assert result[10] < 160.0
        assert result[10] > 100.0

    def test_accepts_tuple(self):
        assert smooth_elevations((5.0, 5.0)) == [5.0, 5.0]


# =============================================================================
# Test Elevation Changes
# =============================================================================

class TestElevationChanges:
    """Tests for calculate_elevation_changes function."""

    def test_empty(self):
        assert calculate_elevation_changes([]) == (0.0, 0.0)

    def test_gain_and_loss(self):
        """Changes of 2, 2, -0.5 (ignored), -2.5."""
        gain, loss = calculate_elevation_changes([0.0, 2.0, 4.0, 3.5, 1.0])
        assert gain == pytest.approx(4.0)
        assert loss == pytest.approx(2.5)

    def test_noise_floor_is_exclusive(self):
        """A change of exactly 1.0 m is noise."""
        assert calculate_elevation_changes([0.0, 1.0, 2.0, 1.0]) == (0.0, 0.0)

    def test_strictly_increasing(self):
        """Steps above 1 m: ascent = last - first, descent = 0."""
        data = [100.0, 101.5, 103.0, 110.0, 125.25]
        gain, loss = calculate_elevation_changes(data)
        assert gain == pytest.approx(25.25)
        assert loss == 0.0

    def test_loss_is_positive(self):
        gain, loss = calculate_elevation_changes([110.0, 105.0, 100.0])
        assert gain == 0.0
        assert loss == pytest.approx(10.0)

    def test_custom_floor(self):
        gain, _ = calculate_elevation_changes([0.0, 0.5, 1.0], noise_floor=0.1)
        assert gain == pytest.approx(1.0)
