"""
Intersection of a directed line with the borders of a rectangular canvas.
"""

import logging
from typing import Any, Dict, NamedTuple, Tuple

import numpy as np

from canvas_borders.dataclasses import (
    LineIntersection,
    Point,
    Rectangle,
    as_point,
    validate_finite,
)
from canvas_borders.debug import log_line_intersection
from canvas_borders.geometry import axis_index, normalize_angle, quadrant_of

logger = logging.getLogger(__name__)

BorderPair = Tuple[str, str]

# For each quadrant: (front border pair, back border pair).
# On equal distance the second border of a pair wins.
QUADRANT_BORDERS: Dict[int, Tuple[BorderPair, BorderPair]] = {
    0: (("top", "right"), ("bottom", "left")),
    1: (("top", "left"), ("bottom", "right")),
    2: (("bottom", "left"), ("top", "right")),
    3: (("bottom", "right"), ("top", "left")),
}

# For each axis direction k·π/2: (front border, back border)
AXIS_BORDERS: Dict[int, BorderPair] = {
    0: ("right", "left"),
    1: ("top", "bottom"),
    2: ("left", "right"),
    3: ("bottom", "top"),
}


class BorderCandidate(NamedTuple):
    """Crossing of the infinite line with one border line."""

    point: Point
    dist: float


def _vertical_candidates(rect: Rectangle, x: float, y: float, tan_angle: float) -> Dict[str, BorderCandidate]:
    """Crossings with the left (x=0) and right (x=width) border lines."""
    y_right = y - (rect.width - x) * tan_angle
    y_left = y + x * tan_angle
    return {
        "right": BorderCandidate((rect.width, y_right), float(np.hypot(y - y_right, x - rect.width))),
        "left": BorderCandidate((0.0, y_left), float(np.hypot(y - y_left, x))),
    }


def _horizontal_candidates(rect: Rectangle, x: float, y: float, tan_angle: float) -> Dict[str, BorderCandidate]:
    """Crossings with the top (y=0) and bottom (y=height) border lines."""
    x_bottom = x + (y - rect.height) / tan_angle
    x_top = x + y / tan_angle
    return {
        "bottom": BorderCandidate((x_bottom, rect.height), float(np.hypot(x - x_bottom, y - rect.height))),
        "top": BorderCandidate((x_top, 0.0), float(np.hypot(x - x_top, y))),
    }


def _axis_candidates(rect: Rectangle, x: float, y: float, axis: int) -> Dict[str, BorderCandidate]:
    """Crossings for a line parallel to one of the axes."""
    if axis in (0, 2):
        return {
            "right": BorderCandidate((rect.width, y), abs(rect.width - x)),
            "left": BorderCandidate((0.0, y), abs(x)),
        }
    return {
        "top": BorderCandidate((x, 0.0), abs(y)),
        "bottom": BorderCandidate((x, rect.height), abs(y - rect.height)),
    }


def _nearest(first: BorderCandidate, second: BorderCandidate) -> BorderCandidate:
    """Pick the strictly nearer candidate; ties go to the second one."""
    return first if first.dist < second.dist else second


def intersect_line_with_borders(
    rect: Rectangle,
    origin: Any,
    angle: float,
) -> LineIntersection:
    """
    Find where a directed line through origin crosses the canvas borders.

    The angle is measured above the horizon: with y growing downward, a
    direction of π/2 heads toward the top border (y = 0). The quadrant of the
    angle decides which two borders can lie ahead of the origin and which two
    behind it; in each pair the nearer crossing is the one struck first.

    The origin does not need to lie inside the rectangle.

    Parameters:
        rect: Canvas rectangle
        origin: (x, y) point the line passes through
        angle: Direction of travel in radians

    Returns:
        LineIntersection with the front and back crossings and their distances

    Raises:
        ValidationError: If origin is malformed or angle is not finite

    Example:
        >>> hit = intersect_line_with_borders(Rectangle(100, 100), (50, 50), 0.0)
        >>> hit.front, hit.front_dist
        ((100.0, 50.0), 50.0)
    """
    x, y = as_point(origin, "origin")
    angle = normalize_angle(validate_finite(angle, "angle"))

    axis = axis_index(angle)
    if axis >= 0:
        # Parallel border lines are never reached; skip them instead of
        # dividing by a zero tangent.
        candidates = _axis_candidates(rect, x, y, axis)
        front_border, back_border = AXIS_BORDERS[axis]
        front = candidates[front_border]
        back = candidates[back_border]
    else:
        tan_angle = float(np.tan(angle))
        candidates = _vertical_candidates(rect, x, y, tan_angle)
        candidates.update(_horizontal_candidates(rect, x, y, tan_angle))
        front_pair, back_pair = QUADRANT_BORDERS[quadrant_of(angle)]
        front = _nearest(candidates[front_pair[0]], candidates[front_pair[1]])
        back = _nearest(candidates[back_pair[0]], candidates[back_pair[1]])

    result = LineIntersection(
        front=front.point,
        front_dist=front.dist,
        back=back.point,
        back_dist=back.dist,
    )
    log_line_intersection(logger, (x, y), angle, result)
    return result
