"""
Failure kinds and result values.

Parsing and export never raise across the package boundary: they return
a result carrying either the payload or a TrackError with a kind and a
reason string the host can show or map to its own messages.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from .models import Track


class FailureKind(str, Enum):
    """Distinguishable failure codes."""
    MALFORMED_DOCUMENT = "malformed_document"
    EMPTY_TRACK = "empty_track"
    DEGENERATE_PROFILE = "degenerate_profile"
    UNWRITABLE_DESTINATION = "unwritable_destination"
    UNREADABLE_SOURCE = "unreadable_source"


DEFAULT_REASONS: dict[FailureKind, str] = {
    FailureKind.MALFORMED_DOCUMENT: "GPX document is not well-formed XML",
    FailureKind.EMPTY_TRACK: "No route data available",
    FailureKind.DEGENERATE_PROFILE: "Not enough points for an elevation profile",
    FailureKind.UNWRITABLE_DESTINATION: "Failed to save GPX file",
    FailureKind.UNREADABLE_SOURCE: "Failed to read GPX file",
}


@dataclass(frozen=True)
class TrackError:
    """A failure kind plus a human-readable reason."""
    kind: FailureKind
    reason: str

    @classmethod
    def of(cls, kind: FailureKind, detail: Optional[str] = None) -> "TrackError":
        reason = DEFAULT_REASONS[kind]
        if detail:
            reason = f"{reason}: {detail}"
        return cls(kind=kind, reason=reason)


class GPXDocumentError(Exception):
    """Internal error raised inside the parser, converted at the boundary."""

    def __init__(self, kind: FailureKind, detail: Optional[str] = None):
        self.error = TrackError.of(kind, detail)
        super().__init__(self.error.reason)


@dataclass(frozen=True)
class ParseResult:
    """
    Outcome of parsing a GPX document.

    Exactly one of `track` / `error` is set. An EMPTY_TRACK error means
    the document was fine but had no usable points.
    """
    track: Optional[Track] = None
    error: Optional[TrackError] = None

    @property
    def ok(self) -> bool:
        return self.track is not None

    @property
    def is_empty(self) -> bool:
        return self.error is not None and self.error.kind == FailureKind.EMPTY_TRACK


@dataclass(frozen=True)
class ExportResult:
    """Outcome of writing a GPX file."""
    path: Optional[Path] = None
    error: Optional[TrackError] = None

    @property
    def ok(self) -> bool:
        return self.path is not None
