"""
Shared fixtures for workout_gpx tests.
"""

from datetime import datetime, timedelta, timezone

import pytest

from workout_gpx.features.gpx.models import GeoPoint, Track, TrackSegment
from workout_gpx.shared.constants import ActivityKind


T0 = datetime(2024, 5, 1, 7, 30, tzinfo=timezone.utc)

# 0.001 degree of latitude is ~111 m
LAT_STEP = 0.001


SCENARIO_GPX = b"""<?xml version="1.0" encoding="UTF-8"?>
<gpx version="1.1" creator="test" xmlns="http://www.topografix.com/GPX/1/1">
  <metadata>
    <time>2024-05-01T07:30:00Z</time>
  </metadata>
  <trk>
    <name>Morning Run</name>
    <trkseg>
      <trkpt lat="37.0" lon="-122.0"><ele>10</ele><time>2024-05-01T07:30:00Z</time></trkpt>
      <trkpt lat="37.001" lon="-122.0"><ele>15</ele><time>2024-05-01T07:31:00Z</time></trkpt>
      <trkpt lat="37.002" lon="-122.0"><ele>8</ele><time>2024-05-01T07:32:00Z</time></trkpt>
    </trkseg>
  </trk>
</gpx>
"""


@pytest.fixture
def t0():
    """Fixed UTC start time."""
    return T0


@pytest.fixture
def scenario_gpx():
    """Single segment, three points."""
    return SCENARIO_GPX


@pytest.fixture
def make_points():
    """
    Factory for points walking north along one meridian.

    make_points([10, 15, 8]) -> 3 points, LAT_STEP apart, 60 s apart.
    """
    def factory(elevations, lat_step=LAT_STEP, start=(37.0, -122.0), step_s=60):
        return [
            GeoPoint(
                latitude=start[0] + i * lat_step,
                longitude=start[1],
                altitude=float(ele),
                timestamp=T0 + timedelta(seconds=i * step_s),
            )
            for i, ele in enumerate(elevations)
        ]
    return factory


@pytest.fixture
def make_track(make_points):
    """Factory for tracks from lists of elevation lists (one per segment)."""
    def factory(segments, name="Morning Run", kind=ActivityKind.RUNNING, start_time=T0):
        built = []
        offset = 0
        for elevations in segments:
            points = make_points(elevations, start=(37.0 + offset * LAT_STEP, -122.0))
            offset += len(elevations)
            built.append(TrackSegment(points))
        return Track(name=name, activity_kind=kind, start_time=start_time, segments=built)
    return factory


@pytest.fixture
def trace_events():
    """A recording trace sink; events land in sink.events."""
    events = []

    def sink(event, **fields):
        events.append((event, fields))

    sink.events = events
    return sink
