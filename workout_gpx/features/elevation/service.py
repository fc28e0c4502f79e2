"""
Track analysis service.

Runs the elevation analyzer over every segment of a track and packages
the results for the map surface and the summary view.
"""

import logging
from typing import List, Optional

from workout_gpx.features.gpx.models import Track, TrackSegment
from workout_gpx.shared.diagnostics import TraceSink, null_trace
from workout_gpx.shared.formatters import format_elevation_summary
from workout_gpx.shared.geo import METERS_PER_KM, calculate_total_distance, haversine

from .analyzer import build_elevation_profile
from .markers import find_elevation_markers
from .models import ElevationProfile, SegmentRendering
from .rendering import colored_intervals
from .schemas import TrackInfo

logger = logging.getLogger(__name__)

# Start and end closer than this (meters) make a loop
LOOP_DISTANCE_M = 500.0


class TrackAnalysisService:
    """Elevation analysis for whole tracks."""

    @staticmethod
    def analyze_segment(
        segment: TrackSegment,
        trace: Optional[TraceSink] = None
    ) -> SegmentRendering:
        """
        Profile, colored intervals and markers for one segment.

        Degenerate segments come back with an empty profile and no
        intervals or markers.
        """
        profile = build_elevation_profile(segment.points, trace=trace)
        if profile.is_empty:
            return SegmentRendering(points=segment.points, profile=profile)

        return SegmentRendering(
            points=segment.points,
            profile=profile,
            intervals=tuple(colored_intervals(segment.points, profile)),
            markers=find_elevation_markers(profile.elevations),
        )

    @classmethod
    def analyze_track(
        cls,
        track: Track,
        trace: Optional[TraceSink] = None
    ) -> List[SegmentRendering]:
        """Analyze every segment, in track order."""
        trace = trace or null_trace
        renderings = [cls.analyze_segment(s, trace=trace) for s in track.segments]
        trace(
            "elevation.track_analyzed",
            segments=len(renderings),
            degenerate=sum(1 for r in renderings if r.profile.is_empty),
        )
        return renderings

    @staticmethod
    def summarize(profile: ElevationProfile) -> str:
        """Multi-line ascent/descent/grade summary for a profile."""
        return format_elevation_summary(
            profile.total_ascent,
            profile.total_descent,
            profile.max_grade,
            profile.min_grade,
        )

    @classmethod
    def describe(cls, track: Track) -> TrackInfo:
        """
        Build a TrackInfo summary.

        Distance and elevation totals are summed per segment so gaps
        between segments don't count.
        """
        profiles = [build_elevation_profile(s.points) for s in track.segments]
        usable = [p for p in profiles if not p.is_empty]
        points = track.all_points
        start_time, end_time = track.time_bounds()

        distance_m = sum(calculate_total_distance(s.points) for s in track.segments)

        info = TrackInfo(
            name=track.name,
            activity_kind=track.activity_kind,
            segments_count=len(track.segments),
            points_count=len(points),
            distance_km=round(distance_m / METERS_PER_KM, 2),
            elevation_gain_m=round(sum(p.total_ascent for p in usable), 1),
            elevation_loss_m=round(sum(p.total_descent for p in usable), 1),
            max_elevation_m=max((p.max_elevation for p in usable), default=None),
            min_elevation_m=min((p.min_elevation for p in usable), default=None),
            max_grade=max((p.max_grade for p in usable), default=0.0),
            min_grade=min((p.min_grade for p in usable), default=0.0),
            start_time=start_time,
            end_time=end_time,
        )

        if points:
            first, last = points[0], points[-1]
            info.start_lat, info.start_lon = first.latitude, first.longitude
            info.end_lat, info.end_lon = last.latitude, last.longitude
            info.is_loop = len(points) > 1 and haversine(
                first.latitude, first.longitude, last.latitude, last.longitude
            ) < LOOP_DISTANCE_M

        logger.debug(f"Described track '{track.name}': {info.points_count} points")
        return info
