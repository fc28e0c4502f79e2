"""
Tests for TrackAnalysisService.
"""

from datetime import timedelta

import pytest

from workout_gpx.features.elevation import TrackAnalysisService, TrackInfo
from workout_gpx.features.gpx import FailureKind, Track, TrackSegment
from workout_gpx.shared.constants import ActivityKind
from workout_gpx.shared.geo import haversine


class TestAnalyzeTrack:
    """Per-segment analysis."""

    def test_one_rendering_per_segment(self, make_track):
        track = make_track([[10 * i for i in range(30)], [5], [1, 2, 3]])

        renderings = TrackAnalysisService.analyze_track(track)

        assert len(renderings) == 3
        assert len(renderings[0].intervals) == 29
        assert len(renderings[2].intervals) == 2
        assert renderings[0].points == track.segments[0].points

    def test_degenerate_segment(self, make_track):
        rendering = TrackAnalysisService.analyze_track(make_track([[5]]))[0]

        assert rendering.profile.is_empty
        assert rendering.profile.error.kind == FailureKind.DEGENERATE_PROFILE
        assert rendering.intervals == ()
        assert rendering.markers.peaks == ()

    def test_markers_from_profile(self, make_track):
        bump = [100.0 + 20 * max(0, 10 - abs(i - 20)) for i in range(41)]
        rendering = TrackAnalysisService.analyze_segment(make_track([bump]).segments[0])

        assert [m.index for m in rendering.markers.peaks] == [20]

    def test_traced(self, make_track, trace_events):
        TrackAnalysisService.analyze_track(make_track([[1, 2], [3]]), trace=trace_events)

        event, fields = trace_events.events[-1]
        assert event == "elevation.track_analyzed"
        assert fields == {"segments": 2, "degenerate": 1}


class TestSummarize:
    def test_summary_text(self, make_track):
        profile = TrackAnalysisService.analyze_track(make_track([[100] * 5]))[0].profile

        assert TrackAnalysisService.summarize(profile).splitlines() == [
            "Total Ascent: 0.0 m",
            "Total Descent: 0.0 m",
            "Max Grade: 0.0%",
            "Min Grade: 0.0%",
        ]


class TestDescribe:
    """TrackInfo summary."""

    def test_basic_fields(self, make_track, t0):
        track = make_track([[10, 20, 30], [40]])

        info = TrackAnalysisService.describe(track)

        assert isinstance(info, TrackInfo)
        assert info.name == "Morning Run"
        assert info.activity_kind == ActivityKind.RUNNING
        assert info.segments_count == 2
        assert info.points_count == 4
        assert info.start_time == t0
        assert info.end_time == t0 + timedelta(minutes=2)

    def test_distance_ignores_gaps(self, make_track):
        track = make_track([[0, 0, 0], [0, 0]])
        step = haversine(37.0, -122.0, 37.001, -122.0)

        info = TrackAnalysisService.describe(track)

        assert info.distance_km == round(3 * step / 1000, 2)

    def test_elevation_from_usable_segments(self, make_track):
        info = TrackAnalysisService.describe(make_track([[10, 20, 30], [999]]))

        assert info.max_elevation_m == pytest.approx(20.0)
        assert info.min_elevation_m == pytest.approx(20.0)

    def test_coordinates_and_loop(self, make_track):
        short = TrackAnalysisService.describe(make_track([[0, 0, 0]]))
        long = TrackAnalysisService.describe(make_track([[0] * 10]))

        assert short.start_lat == pytest.approx(37.0)
        assert short.end_lat == pytest.approx(37.002)
        assert short.is_loop
        assert not long.is_loop

    def test_empty_track(self, t0):
        info = TrackAnalysisService.describe(
            Track("Lunch", ActivityKind.OTHER, t0, [TrackSegment()])
        )

        assert info.points_count == 0
        assert info.distance_km == 0.0
        assert info.max_elevation_m is None
        assert info.start_lat is None
        assert not info.is_loop
        assert info.end_time == t0 + timedelta(hours=1)
