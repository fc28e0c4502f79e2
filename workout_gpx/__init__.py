"""
WorkoutGPX track pipeline.

Converts recorded activity tracks to and from GPX 1.1 and analyzes
their elevation for gradient-colored map previews.

Usage:
    from workout_gpx import parse_gpx, generate_gpx, build_elevation_profile

Logging:
    Modules log through stdlib loggers named after the module and never
    configure handlers. A host application calls configure_logging() once
    at startup to send records to stdout at settings.log_level (DEBUG when
    settings.debug is set); pass logging_trace() as `trace=` to see the
    parser and analyzer diagnostics in the same log.
"""

from .config import Settings, settings, configure_logging
from .features.gpx import (
    GeoPoint,
    TrackSegment,
    Track,
    FailureKind,
    TrackError,
    ParseResult,
    ExportResult,
    parse_gpx,
    generate_gpx,
    write_gpx,
    parse_gpx_file,
    load_sample_tracks,
    export_filename,
)
from .features.elevation import (
    ElevationProfile,
    TrackAnalysisService,
    build_elevation_profile,
    compute_grades,
    find_elevation_markers,
)
from .shared import (
    ActivityKind,
    logging_trace,
    classify_grade,
    smooth_elevations,
    format_elevation_summary,
)

__version__ = "0.1.0"

__all__ = [
    "Settings",
    "settings",
    "configure_logging",
    "logging_trace",
    "GeoPoint",
    "TrackSegment",
    "Track",
    "FailureKind",
    "TrackError",
    "ParseResult",
    "ExportResult",
    "parse_gpx",
    "generate_gpx",
    "write_gpx",
    "parse_gpx_file",
    "load_sample_tracks",
    "export_filename",
    "ElevationProfile",
    "TrackAnalysisService",
    "build_elevation_profile",
    "compute_grades",
    "find_elevation_markers",
    "ActivityKind",
    "classify_grade",
    "smooth_elevations",
    "format_elevation_summary",
]
