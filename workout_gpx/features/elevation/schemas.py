"""
Track summary schemas.

Pydantic models for track overviews shown next to the map preview.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from workout_gpx.shared.constants import ActivityKind


class TrackInfo(BaseModel):
    """Track metadata and elevation summary."""

    name: str
    activity_kind: ActivityKind

    # Structure
    segments_count: int = 0
    points_count: int = 0

    # Metrics
    distance_km: float = 0.0
    elevation_gain_m: float = 0.0
    elevation_loss_m: float = 0.0
    max_elevation_m: Optional[float] = None
    min_elevation_m: Optional[float] = None
    max_grade: float = 0.0
    min_grade: float = 0.0

    # Coordinates
    start_lat: Optional[float] = None
    start_lon: Optional[float] = None
    end_lat: Optional[float] = None
    end_lon: Optional[float] = None

    # Time
    start_time: datetime
    end_time: datetime

    # Route type
    is_loop: bool = False  # True if start and end points are close (< 500m)
