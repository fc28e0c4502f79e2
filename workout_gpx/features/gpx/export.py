"""
GPX file I/O.

The parser and generator never touch the filesystem; this module is the
calling layer that reads GPX files (including bundled samples) and writes
exported tracks atomically.
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import List, Optional, Union

from workout_gpx.config import settings
from workout_gpx.shared.diagnostics import TraceSink

from .errors import ExportResult, FailureKind, ParseResult, TrackError
from .generator import generate_gpx
from .models import Track
from .parser import parse_gpx

logger = logging.getLogger(__name__)

FILENAME_DATE_FORMAT = "%Y-%m-%d_%H-%M-%S"


def export_filename(track: Track, use_metric: Optional[bool] = None) -> str:
    """
    Build the export filename.

    Format: {Activity}_{YYYY-MM-DD_HH-MM-SS}_{km|mi}[_{N}segments].gpx
    The segment suffix is present only for multi-segment tracks.

    Args:
        track: Track being exported
        use_metric: Unit preference (default from settings)

    Returns:
        Filename, e.g. 'Running_2024-05-01_07-30-00_km.gpx'
    """
    if use_metric is None:
        use_metric = settings.use_metric_system

    unit = "km" if use_metric else "mi"
    date_part = track.start_time.strftime(FILENAME_DATE_FORMAT)
    name = f"{track.activity_kind.label}_{date_part}_{unit}"

    if len(track.segments) > 1:
        name += f"_{len(track.segments)}segments"

    return f"{name}.gpx"


def _write_atomically(path: Path, text: str) -> None:
    """Write text to a temp file in the same directory, then rename over path."""
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=".", suffix=".gpx.tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as tmp:
            tmp.write(text)
            tmp.flush()
            os.fsync(tmp.fileno())
        os.replace(tmp_name, path)
    except BaseException:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise


def write_gpx(
    track: Track,
    directory: Optional[Union[str, Path]] = None,
    use_metric: Optional[bool] = None
) -> ExportResult:
    """
    Export a track to a GPX file.

    Args:
        track: Track to export
        directory: Destination directory (default: settings.export_dir, else cwd)
        use_metric: Unit preference for the filename (default from settings)

    Returns:
        ExportResult with the written path, or an EMPTY_TRACK /
        UNWRITABLE_DESTINATION error. A failed write leaves no file behind.
    """
    if not track.is_exportable:
        logger.warning(f"Track '{track.name}' has no points, nothing to export")
        return ExportResult(error=TrackError.of(FailureKind.EMPTY_TRACK))

    text = generate_gpx(track)
    target_dir = Path(directory or settings.export_dir or Path.cwd())
    path = target_dir / export_filename(track, use_metric)

    try:
        target_dir.mkdir(parents=True, exist_ok=True)
        _write_atomically(path, text)
    except OSError as e:
        logger.error(f"Failed to save GPX file: {e}")
        return ExportResult(
            error=TrackError.of(FailureKind.UNWRITABLE_DESTINATION, str(e))
        )

    logger.info(f"Exported GPX to {path}")
    return ExportResult(path=path)


def parse_gpx_file(
    path: Union[str, Path],
    trace: Optional[TraceSink] = None
) -> ParseResult:
    """
    Parse a GPX file from disk.

    When the document has no track name, the file name without
    extension is used instead.

    Args:
        path: GPX file path
        trace: Diagnostic sink passed to the parser

    Returns:
        ParseResult (UNREADABLE_SOURCE if the file can't be read)
    """
    path = Path(path)
    try:
        content = path.read_bytes()
    except OSError as e:
        logger.error(f"Failed to read GPX file at {path}: {e}")
        return ParseResult(error=TrackError.of(FailureKind.UNREADABLE_SOURCE, str(e)))

    result = parse_gpx(content, trace=trace)
    if result.ok and not result.track.name:
        logger.info(f"Using filename as track name: {path.stem}")
        return ParseResult(track=result.track.with_name(path.stem))

    return result


def load_sample_tracks(directory: Optional[Union[str, Path]] = None) -> List[Track]:
    """
    Load every *.gpx file in a directory, sorted by filename.

    Files that fail to parse or hold no points are skipped.

    Args:
        directory: Samples directory (default: settings.samples_dir)

    Returns:
        Parsed tracks
    """
    samples_dir = Path(directory or settings.samples_dir)
    if not samples_dir.is_dir():
        logger.warning(f"Samples directory not found: {samples_dir}")
        return []

    tracks: List[Track] = []
    for path in sorted(samples_dir.glob("*.gpx")):
        logger.debug(f"Loading sample from: {path.name}")
        result = parse_gpx_file(path)
        if result.ok:
            tracks.append(result.track)
        else:
            logger.warning(f"Skipping sample {path.name}: {result.error.reason}")

    logger.info(f"Loaded {len(tracks)} sample tracks from {samples_dir}")
    return tracks
