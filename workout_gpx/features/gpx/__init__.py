"""
GPX track document module.

Usage:
    from workout_gpx.features.gpx import parse_gpx, generate_gpx, write_gpx

Components:
- GeoPoint / TrackSegment / Track: immutable track model
- GPXParserService / parse_gpx: GPX bytes -> ParseResult
- generate_gpx: Track -> GPX 1.1 text
- export: filename convention, atomic file export, sample loading
"""

from .models import GeoPoint, TrackSegment, Track
from .errors import (
    FailureKind,
    TrackError,
    GPXDocumentError,
    ParseResult,
    ExportResult,
)
from .parser import GPXParserService, ParserState, parse_gpx
from .generator import build_gpx, generate_gpx, track_title
from .export import export_filename, write_gpx, parse_gpx_file, load_sample_tracks

__all__ = [
    # Model
    "GeoPoint",
    "TrackSegment",
    "Track",
    # Results
    "FailureKind",
    "TrackError",
    "GPXDocumentError",
    "ParseResult",
    "ExportResult",
    # Parser / generator
    "GPXParserService",
    "ParserState",
    "parse_gpx",
    "build_gpx",
    "generate_gpx",
    "track_title",
    # Files
    "export_filename",
    "write_gpx",
    "parse_gpx_file",
    "load_sample_tracks",
]
