"""
Unified constants for activity kinds.

This module provides a single source of truth for activity naming
across the parser, the generator and export filenames.
"""

from enum import Enum
from typing import Optional


class ActivityKind(str, Enum):
    """
    Activity kind of a recorded track.

    Used in:
    - Track model (inferred from GPX name/type)
    - GPX <trk><type> element
    - Export filenames
    """
    RUNNING = "running"
    WALKING = "walking"
    HIKING = "hiking"
    CYCLING = "cycling"
    OTHER = "other"

    @property
    def label(self) -> str:
        """Human-readable label used in track names and filenames."""
        return ACTIVITY_LABELS[self]


ACTIVITY_LABELS: dict[ActivityKind, str] = {
    ActivityKind.RUNNING: "Running",
    ActivityKind.WALKING: "Walking",
    ActivityKind.HIKING: "Hiking",
    ActivityKind.CYCLING: "Cycling",
    ActivityKind.OTHER: "Workout",
}

# Name keywords checked in order (substring, case-insensitive).
# Walking has no name keyword, it comes from <type> only.
NAME_KEYWORDS: list[tuple[tuple[str, ...], ActivityKind]] = [
    (("run", "running"), ActivityKind.RUNNING),
    (("bike", "cycling"), ActivityKind.CYCLING),
    (("hike", "hiking"), ActivityKind.HIKING),
]

# Explicit <type> values
TYPE_VALUES: dict[str, ActivityKind] = {
    "running": ActivityKind.RUNNING,
    "walking": ActivityKind.WALKING,
    "hiking": ActivityKind.HIKING,
    "cycling": ActivityKind.CYCLING,
}


def infer_activity_kind(name: str, type_name: Optional[str] = None) -> ActivityKind:
    """
    Infer activity kind from track name, then explicit type.

    Args:
        name: Track name (e.g. "Morning Run")
        type_name: Value of the GPX <type> element, if any

    Returns:
        ActivityKind, OTHER when nothing matches
    """
    lowered = (name or "").lower()
    for keywords, kind in NAME_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return kind

    if type_name:
        return TYPE_VALUES.get(type_name.strip().lower(), ActivityKind.OTHER)

    return ActivityKind.OTHER
