"""
Grade classification for route coloring.

Used by: elevation rendering helpers, summaries, tests.
Single source of truth for grade band thresholds and palettes.

Bands are defined on the absolute grade (decimal, 0.05 = 5%).
The sign of the grade only selects the palette:
  - uphill (grade >= 0): green -> orange -> red
  - downhill (grade < 0): light blue -> purple
"""

from dataclasses import dataclass
from enum import Enum, IntEnum


class GradeBand(IntEnum):
    """Steepness band, ordered by absolute grade."""
    FLAT = 0          # < 0.5%
    MODERATE = 1      # 0.5% to 3%
    STEEP = 2         # 3% to 8%
    VERY_STEEP = 3    # 8% to 15%
    EXTREME = 4       # >= 15%


class GradeDirection(str, Enum):
    """Which palette a grade is drawn with."""
    UPHILL = "uphill"
    DOWNHILL = "downhill"


# Lower bound (inclusive) of each band on |grade|
GRADE_BAND_THRESHOLDS: list[tuple[float, GradeBand]] = [
    (0.15, GradeBand.EXTREME),
    (0.08, GradeBand.VERY_STEEP),
    (0.03, GradeBand.STEEP),
    (0.005, GradeBand.MODERATE),
    (0.0, GradeBand.FLAT),
]

UPHILL_COLORS: dict[GradeBand, str] = {
    GradeBand.FLAT: "#4CAF50",        # green
    GradeBand.MODERATE: "#CDDC39",    # yellow-green
    GradeBand.STEEP: "#FFC107",       # amber
    GradeBand.VERY_STEEP: "#FF9800",  # orange
    GradeBand.EXTREME: "#F44336",     # red
}

DOWNHILL_COLORS: dict[GradeBand, str] = {
    GradeBand.FLAT: "#81D4FA",        # light blue
    GradeBand.MODERATE: "#4FC3F7",    # sky blue
    GradeBand.STEEP: "#2196F3",       # blue
    GradeBand.VERY_STEEP: "#3F51B5",  # indigo
    GradeBand.EXTREME: "#9C27B0",     # purple
}


@dataclass(frozen=True)
class GradeClass:
    """Classified grade: band, direction and fixed color."""
    band: GradeBand
    direction: GradeDirection
    color: str


def grade_band(grade: float) -> GradeBand:
    """
    Band for a grade, by absolute value.

    Args:
        grade: Grade as decimal (e.g., 0.10 for 10%)

    Returns:
        GradeBand
    """
    magnitude = abs(grade)
    for lower, band in GRADE_BAND_THRESHOLDS:
        if magnitude >= lower:
            return band
    return GradeBand.FLAT


def classify_grade(grade: float) -> GradeClass:
    """
    Classify a grade into a band and its palette color.

    Args:
        grade: Grade as decimal, positive = uphill

    Returns:
        GradeClass with band, direction and hex color
    """
    band = grade_band(grade)
    if grade < 0:
        return GradeClass(band, GradeDirection.DOWNHILL, DOWNHILL_COLORS[band])
    return GradeClass(band, GradeDirection.UPHILL, UPHILL_COLORS[band])
