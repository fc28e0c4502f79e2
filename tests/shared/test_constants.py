"""
Tests for activity kind inference.
"""

import pytest

from workout_gpx.shared.constants import ActivityKind, infer_activity_kind


class TestInferActivityKind:
    """Name first, then explicit type, then OTHER."""

    @pytest.mark.parametrize("name,kind", [
        ("Morning Run", ActivityKind.RUNNING),
        ("RUNNING with friends", ActivityKind.RUNNING),
        ("Evening bike", ActivityKind.CYCLING),
        ("Cycling commute", ActivityKind.CYCLING),
        ("Hike to the lake", ActivityKind.HIKING),
        ("hiking", ActivityKind.HIKING),
    ])
    def test_from_name(self, name, kind):
        assert infer_activity_kind(name) == kind

    def test_name_wins_over_type(self):
        assert infer_activity_kind("Trail Run", "hiking") == ActivityKind.RUNNING

    @pytest.mark.parametrize("type_name,kind", [
        ("walking", ActivityKind.WALKING),
        ("Cycling", ActivityKind.CYCLING),
        (" hiking ", ActivityKind.HIKING),
        ("swimming", ActivityKind.OTHER),
    ])
    def test_from_type(self, type_name, kind):
        assert infer_activity_kind("Lunch", type_name) == kind

    def test_fallback_other(self):
        assert infer_activity_kind("", None) == ActivityKind.OTHER

    def test_substring_match(self):
        """Matching is by substring, as in the names the recorder produces."""
        assert infer_activity_kind("Crunch time") == ActivityKind.RUNNING


class TestLabels:
    def test_labels(self):
        assert ActivityKind.RUNNING.label == "Running"
        assert ActivityKind.WALKING.label == "Walking"
        assert ActivityKind.OTHER.label == "Workout"
