"""
Intersection of circular arcs with the borders of a rectangular canvas.

An arc is a circle (center, radius) travelled from a start angle. Each
border is treated as an infinite line; the circle crosses it at two angles
symmetric around the direction from the center toward the line. Merging the
crossings of all four borders gives how far the arc can rotate in either
direction before it leaves the canvas.
"""

import logging
from typing import Any, List

import numpy as np
from numpy.typing import NDArray

from canvas_borders.dataclasses import (
    ArcBorderSpan,
    ArcCrossing,
    Rectangle,
    ValidationError,
    as_point,
    validate_finite,
)
from canvas_borders.debug import log_arc_crossings, log_arc_span
from canvas_borders.geometry import HALF_PI, TWO_PI, normalize_angle

logger = logging.getLogger(__name__)


def intersect_arc_with_line(
    dist: float,
    radius: float,
    line_angle: float,
) -> ArcCrossing:
    """
    Compute the angles at which a circle crosses an infinite line.

    Parameters:
        dist: Perpendicular distance from the circle center to the line (>= 0)
        radius: Circle radius (>= 0)
        line_angle: Direction from the center toward the foot of the
                    perpendicular on the line, in radians

    Returns:
        (line_angle + Δ, line_angle - Δ) with Δ = acos(dist / radius), or None
        if the circle does not reach the line. A tangent circle
        (radius == dist) counts as not reaching it.

    Raises:
        ValidationError: If dist or radius is negative or not finite
    """
    dist = validate_finite(dist, "dist")
    radius = validate_finite(radius, "radius")
    if dist < 0:
        raise ValidationError(f"dist must be non-negative, got {dist}")
    if radius < 0:
        raise ValidationError(f"radius must be non-negative, got {radius}")

    if radius <= dist:
        return None

    delta = float(np.arccos(np.clip(dist / radius, -1.0, 1.0)))
    return line_angle + delta, line_angle - delta


def arc_border_crossings(
    rect: Rectangle,
    center: Any,
    radius: float,
) -> NDArray[np.float64]:
    """
    Collect the absolute angles at which a circle crosses the border lines.

    Parameters:
        rect: Canvas rectangle
        center: (x, y) circle center, inside or outside the canvas
        radius: Circle radius (>= 0)

    Returns:
        Array of 0, 2, 4, 6 or 8 crossing angles in radians (not normalized),
        in top, bottom, left, right border order

    Raises:
        ValidationError: If center is malformed or radius is negative
    """
    cx, cy = as_point(center, "center")

    borders = (
        ("top", abs(cy), float(np.copysign(HALF_PI, cy))),
        ("bottom", abs(rect.height - cy), float(np.copysign(HALF_PI, cy - rect.height))),
        ("left", abs(cx), 0.0 if cx < 0 else np.pi),
        ("right", abs(rect.width - cx), 0.0 if cx < rect.width else np.pi),
    )

    angles: List[float] = []
    for border, dist, line_angle in borders:
        crossing = intersect_arc_with_line(dist, radius, line_angle)
        log_arc_crossings(logger, border, crossing)
        if crossing is not None:
            angles.extend(crossing)

    return np.array(angles, dtype=np.float64)


def intersect_arc_with_borders(
    rect: Rectangle,
    center: Any,
    radius: float,
    start_angle: float,
) -> ArcBorderSpan:
    """
    Find how far an arc can rotate from its start angle before leaving the canvas.

    Crossing angles are made relative to start_angle and wrapped into [0, 2π).
    The smallest one is the nearest crossing in the positive (clockwise)
    direction; the largest one minus 2π is the nearest crossing in the
    negative (counter-clockwise) direction.

    Parameters:
        rect: Canvas rectangle
        center: (x, y) circle center
        radius: Circle radius (>= 0)
        start_angle: Angle of the arc's starting point around the center

    Returns:
        ArcBorderSpan with clockwise_limit >= 0 >= counter_clockwise_limit,
        or ArcBorderSpan.unbounded() if the circle never crosses a border line

    Raises:
        ValidationError: If center is malformed, radius is negative or
                         start_angle is not finite
    """
    start_angle = validate_finite(start_angle, "start_angle")
    crossings = arc_border_crossings(rect, center, radius)

    if crossings.size == 0:
        span = ArcBorderSpan.unbounded()
    else:
        relative = np.sort(normalize_angle(crossings - start_angle))
        span = ArcBorderSpan(
            clockwise_limit=float(relative[0]),
            counter_clockwise_limit=float(relative[-1] - TWO_PI),
        )

    log_arc_span(logger, center, radius, start_angle, span, int(crossings.size))
    return span
