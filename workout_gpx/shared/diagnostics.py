"""
Diagnostic trace sinks.

Parser and analyzer accept an optional `trace` callable and report
events through it. The default sink discards everything; hosts that
want the events pass `logging_trace(...)` or their own callable.

Usage:
    from workout_gpx.shared.diagnostics import logging_trace
    result = parse_gpx(data, trace=logging_trace())
"""

import logging
from typing import Any, Optional, Protocol


class TraceSink(Protocol):
    """Callable receiving a named event with keyword fields."""

    def __call__(self, event: str, **fields: Any) -> None:
        ...


def null_trace(event: str, **fields: Any) -> None:
    """Default sink: drop the event."""


def logging_trace(
    logger: Optional[logging.Logger] = None,
    level: int = logging.DEBUG
) -> TraceSink:
    """
    Build a sink that forwards events to a logger.

    Args:
        logger: Target logger (default: 'workout_gpx.trace')
        level: Log level for every event

    Returns:
        TraceSink
    """
    target = logger or logging.getLogger("workout_gpx.trace")

    def sink(event: str, **fields: Any) -> None:
        if not target.isEnabledFor(level):
            return
        details = " ".join(f"{key}={value!r}" for key, value in sorted(fields.items()))
        target.log(level, f"{event} {details}".rstrip())

    return sink
