"""
GPX Parser Service

Parses GPX 1.1 track documents into the Track model.

The document is walked as a stream of start/end element events driving
an explicit state machine:

    OUTSIDE --<trk>--> IN_TRACK --<trkseg>--> IN_SEGMENT --<trkpt>--> IN_POINT

and back on the matching end tags. Leaf text (<name>, <type>, <time>,
<ele>) is captured only for the (state, parent element) pairs listed in
CAPTURES, so a point's <time> can never overwrite the track date.
All accumulated values live in a per-call _ParseContext.
"""

import logging
import math
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Callable, Dict, List, Optional, Tuple

from workout_gpx.shared.diagnostics import TraceSink, null_trace

from .errors import FailureKind, GPXDocumentError, ParseResult
from .models import GeoPoint, Track, TrackSegment

logger = logging.getLogger(__name__)


class ParserState(str, Enum):
    """Where the parser currently is in the track hierarchy."""
    OUTSIDE = "outside"
    IN_TRACK = "in_track"
    IN_SEGMENT = "in_segment"
    IN_POINT = "in_point"


START = "start"
END = "end"


@dataclass
class _ParseContext:
    """Accumulators for a single parse call."""
    parse_instant: datetime
    trace: TraceSink
    state: ParserState = ParserState.OUTSIDE
    stack: List[str] = field(default_factory=list)

    track_name: str = ""
    track_type: str = ""
    track_date: Optional[datetime] = None
    segments: List[TrackSegment] = field(default_factory=list)

    segment_points: List[GeoPoint] = field(default_factory=list)

    point_lat: Optional[float] = None
    point_lon: Optional[float] = None
    point_ele: Optional[float] = None
    point_time: Optional[datetime] = None

    dropped_points: int = 0

    @property
    def parent(self) -> Optional[str]:
        """Tag enclosing the element that just ended."""
        return self.stack[-2] if len(self.stack) > 1 else None


# =============================================================================
# Value parsing
# =============================================================================

def _local_name(tag: str) -> str:
    """Strip the '{namespace}' prefix ElementTree puts on tags."""
    if tag.startswith("{"):
        return tag.rsplit("}", 1)[1]
    return tag


def parse_float(text: Optional[str]) -> Optional[float]:
    """Parse a finite float, None if missing or invalid."""
    if text is None:
        return None
    try:
        value = float(text.strip())
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def parse_time(text: Optional[str]) -> Optional[datetime]:
    """
    Parse an ISO-8601 timestamp.

    Naive values are taken as UTC. Returns None for anything that is
    not ISO-8601.
    """
    if not text:
        return None
    try:
        value = datetime.fromisoformat(text.strip())
    except ValueError:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value


# =============================================================================
# Transition actions
# =============================================================================

def _begin_track(ctx: _ParseContext, elem: ET.Element) -> None:
    # A later <trk> replaces what an earlier one collected
    ctx.segments = []


def _begin_segment(ctx: _ParseContext, elem: ET.Element) -> None:
    ctx.segment_points = []


def _begin_point(ctx: _ParseContext, elem: ET.Element) -> None:
    ctx.point_lat = parse_float(elem.get("lat"))
    ctx.point_lon = parse_float(elem.get("lon"))
    ctx.point_ele = None
    ctx.point_time = None


def _end_point(ctx: _ParseContext, elem: ET.Element) -> None:
    if ctx.point_lat is None or ctx.point_lon is None:
        ctx.dropped_points += 1
        ctx.trace("gpx.point_dropped", lat=elem.get("lat"), lon=elem.get("lon"))
    else:
        ctx.segment_points.append(GeoPoint(
            latitude=ctx.point_lat,
            longitude=ctx.point_lon,
            altitude=ctx.point_ele if ctx.point_ele is not None else 0.0,
            timestamp=ctx.point_time or ctx.parse_instant,
        ))
    elem.clear()


def _end_segment(ctx: _ParseContext, elem: ET.Element) -> None:
    ctx.segments.append(TrackSegment(ctx.segment_points))
    ctx.trace(
        "gpx.segment_closed",
        index=len(ctx.segments) - 1,
        points=len(ctx.segment_points),
    )
    ctx.segment_points = []
    elem.clear()


Action = Callable[[_ParseContext, ET.Element], None]

# (state, event, tag) -> (next state, action)
TRANSITIONS: Dict[Tuple[ParserState, str, str], Tuple[ParserState, Optional[Action]]] = {
    (ParserState.OUTSIDE, START, "trk"): (ParserState.IN_TRACK, _begin_track),
    (ParserState.IN_TRACK, START, "trkseg"): (ParserState.IN_SEGMENT, _begin_segment),
    (ParserState.IN_SEGMENT, START, "trkpt"): (ParserState.IN_POINT, _begin_point),
    (ParserState.IN_POINT, END, "trkpt"): (ParserState.IN_SEGMENT, _end_point),
    (ParserState.IN_SEGMENT, END, "trkseg"): (ParserState.IN_TRACK, _end_segment),
    (ParserState.IN_TRACK, END, "trk"): (ParserState.OUTSIDE, None),
}


# =============================================================================
# Leaf captures
# =============================================================================

def _set_name(ctx: _ParseContext, text: str) -> None:
    ctx.track_name = text


def _set_type(ctx: _ParseContext, text: str) -> None:
    ctx.track_type = text


def _set_track_date(ctx: _ParseContext, text: str) -> None:
    value = parse_time(text)
    if value is not None:
        ctx.track_date = value


def _set_point_ele(ctx: _ParseContext, text: str) -> None:
    ctx.point_ele = parse_float(text)


def _set_point_time(ctx: _ParseContext, text: str) -> None:
    ctx.point_time = parse_time(text)


Capture = Callable[[_ParseContext, str], None]

# (state, parent tag, tag) -> capture
CAPTURES: Dict[Tuple[ParserState, str, str], Capture] = {
    (ParserState.OUTSIDE, "metadata", "time"): _set_track_date,
    (ParserState.IN_TRACK, "trk", "name"): _set_name,
    (ParserState.IN_TRACK, "trk", "type"): _set_type,
    (ParserState.IN_TRACK, "trk", "time"): _set_track_date,
    (ParserState.IN_POINT, "trkpt", "ele"): _set_point_ele,
    (ParserState.IN_POINT, "trkpt", "time"): _set_point_time,
}


def _handle(ctx: _ParseContext, event: str, elem: ET.Element) -> None:
    tag = _local_name(elem.tag)

    if event == START:
        ctx.stack.append(tag)
    else:
        capture = CAPTURES.get((ctx.state, ctx.parent, tag))
        if capture is not None:
            text = (elem.text or "").strip()
            if text:
                capture(ctx, text)

    transition = TRANSITIONS.get((ctx.state, event, tag))
    if transition is not None:
        next_state, action = transition
        if action is not None:
            action(ctx, elem)
        ctx.state = next_state

    if event == END:
        ctx.stack.pop()


def _build_track(ctx: _ParseContext) -> Track:
    if not ctx.segments or all(segment.is_empty for segment in ctx.segments):
        raise GPXDocumentError(FailureKind.EMPTY_TRACK)

    return Track.from_gpx_fields(
        name=ctx.track_name,
        type_name=ctx.track_type,
        start_time=ctx.track_date or ctx.parse_instant,
        segments=ctx.segments,
    )


# =============================================================================
# Public API
# =============================================================================

class GPXParserService:
    """Service for parsing GPX documents."""

    @staticmethod
    def parse(
        content: bytes,
        trace: Optional[TraceSink] = None,
        now: Optional[datetime] = None
    ) -> ParseResult:
        """
        Parse GPX content into a Track.

        Args:
            content: GPX document as bytes (or str)
            trace: Diagnostic sink, no-op by default
            now: Parse instant used for missing timestamps (default: now, UTC;
                a naive value is taken as UTC)

        Returns:
            ParseResult with the track, or with a MALFORMED_DOCUMENT /
            EMPTY_TRACK error. An empty track name is left empty.
        """
        if isinstance(content, str):
            content = content.encode("utf-8")

        if now is None:
            now = datetime.now(timezone.utc)
        elif now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)

        ctx = _ParseContext(
            parse_instant=now,
            trace=trace or null_trace,
        )
        parser = ET.XMLPullParser(events=(START, END))

        try:
            try:
                parser.feed(content)
                for event, elem in parser.read_events():
                    _handle(ctx, event, elem)
                parser.close()
                for event, elem in parser.read_events():
                    _handle(ctx, event, elem)
            except ET.ParseError as e:
                logger.error(f"Failed to parse GPX: {e}")
                raise GPXDocumentError(FailureKind.MALFORMED_DOCUMENT, str(e))

            track = _build_track(ctx)
        except GPXDocumentError as e:
            ctx.trace("gpx.parse_failed", kind=e.error.kind.value)
            return ParseResult(error=e.error)

        if not track.name:
            logger.debug("No name found in GPX data")

        ctx.trace(
            "gpx.parsed",
            segments=len(track.segments),
            points=track.point_count,
            dropped=ctx.dropped_points,
        )
        return ParseResult(track=track)


def parse_gpx(
    content: bytes,
    trace: Optional[TraceSink] = None,
    now: Optional[datetime] = None
) -> ParseResult:
    """Parse GPX content. See GPXParserService.parse."""
    return GPXParserService.parse(content, trace=trace, now=now)

