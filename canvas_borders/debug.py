"""
Debug logging helpers for the border intersectors.

The package logs DEBUG records under the ``canvas_borders`` logger and never
installs handlers on import. Call :func:`setup_debug_logging` to see them.
"""

from __future__ import annotations

import logging
import math
from typing import IO, Any, Iterable

from canvas_borders.dataclasses import ArcBorderSpan, LineIntersection

LOGGER_NAME = "canvas_borders"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())

_debug_handler: logging.Handler | None = None


def format_angle(angle: float) -> str:
    """Format an angle in radians with its degree equivalent."""
    return f"{angle:.4f} rad ({math.degrees(angle):.2f}°)"


def format_point(point: Any) -> str:
    """Format an (x, y) point with two decimals."""
    return f"({float(point[0]):.2f}, {float(point[1]):.2f})"


def format_angles(angles: Iterable[float]) -> str:
    """Format a sequence of angles as a bracketed list."""
    return "[" + ", ".join(format_angle(a) for a in angles) + "]"


def log_line_intersection(
    log: logging.Logger,
    origin: Any,
    angle: float,
    intersection: LineIntersection,
) -> None:
    """Emit a DEBUG summary of a line/border intersection."""
    if not log.isEnabledFor(logging.DEBUG):
        return
    log.debug(
        "Line from %s at %s: front %s (dist %.4f), back %s (dist %.4f)",
        format_point(origin),
        format_angle(angle),
        format_point(intersection.front),
        intersection.front_dist,
        format_point(intersection.back),
        intersection.back_dist,
    )


def log_arc_crossings(log: logging.Logger, border: str, crossing: Any) -> None:
    """Emit a DEBUG record for one border's arc crossing (or the lack of one)."""
    if not log.isEnabledFor(logging.DEBUG):
        return
    if crossing is None:
        log.debug("Arc does not reach %s border", border)
    else:
        log.debug("Arc crosses %s border at %s", border, format_angles(crossing))


def log_arc_span(
    log: logging.Logger,
    center: Any,
    radius: float,
    start_angle: float,
    span: ArcBorderSpan,
    n_crossings: int,
) -> None:
    """Emit a DEBUG summary of an arc/border intersection."""
    if not log.isEnabledFor(logging.DEBUG):
        return
    if span.is_unbounded:
        log.debug(
            "Arc around %s with radius %.4f never leaves the canvas",
            format_point(center),
            radius,
        )
        return
    log.debug(
        "Arc around %s with radius %.4f from %s: %d crossings, limits [%s, %s]",
        format_point(center),
        radius,
        format_angle(start_angle),
        n_crossings,
        format_angle(span.counter_clockwise_limit),
        format_angle(span.clockwise_limit),
    )


def setup_debug_logging(
    level: int = logging.DEBUG,
    stream: IO[str] | None = None,
) -> logging.Logger:
    """
    Attach a stream handler to the package logger.

    Calling this more than once replaces the previous handler instead of
    stacking duplicates.

    Parameters:
        level: Logging level for the package logger
        stream: Output stream (defaults to sys.stderr)

    Returns:
        The package logger
    """
    global _debug_handler

    if _debug_handler is not None:
        logger.removeHandler(_debug_handler)

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.setLevel(level)
    logger.addHandler(handler)
    logger.setLevel(level)
    _debug_handler = handler
    return logger


def disable_debug_logging() -> None:
    """Remove the handler installed by setup_debug_logging and reset the level."""
    global _debug_handler

    if _debug_handler is not None:
        logger.removeHandler(_debug_handler)
        _debug_handler = None
    logger.setLevel(logging.NOTSET)
