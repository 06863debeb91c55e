"""
Visualization utilities for inspecting border intersections.

Draws canvas borders, clipped lines and free arc spans on top of an image,
useful while tuning a stroke generator against a real canvas.
"""

from typing import Any

import numpy as np
from numpy.typing import NDArray

from canvas_borders.dataclasses import (
    ArcBorderSpan,
    LineIntersection,
    Rectangle,
    as_point,
)

# Try to import cv2, set flag if not available
try:
    import cv2

    HAS_CV2 = True
except ImportError:
    HAS_CV2 = False


def _ensure_cv2() -> None:
    """Raise an error if cv2 is not available."""
    if not HAS_CV2:
        raise ImportError(
            "OpenCV (cv2) is required for visualization functions. "
            "Install with: pip install opencv-python-headless"
        )


def _to_pixel(point: Any) -> tuple[int, int]:
    """Round an (x, y) point to integer pixel coordinates."""
    x, y = as_point(point)
    return int(round(x)), int(round(y))


def point_on_circle(center: Any, radius: float, angle: float) -> tuple[float, float]:
    """Return the point at angle (above the horizon) on a circle in image coordinates."""
    cx, cy = as_point(center, "center")
    return cx + radius * float(np.cos(angle)), cy - radius * float(np.sin(angle))


def draw_canvas_border(
    image: NDArray[np.uint8],
    rect: Rectangle,
    color: tuple[int, int, int] = (128, 128, 128),
    thickness: int = 1,
) -> NDArray[np.uint8]:
    """Draw the canvas rectangle outline.

    Args:
        image: Input image (H, W, 3) BGR format
        rect: Canvas rectangle
        color: BGR color tuple
        thickness: Line thickness

    Returns:
        Image with the border drawn (modified copy)
    """
    _ensure_cv2()

    output = image.copy()
    cv2.rectangle(output, (0, 0), _to_pixel((rect.width, rect.height)), color, thickness)
    return output


def draw_line_intersection(
    image: NDArray[np.uint8],
    origin: Any,
    intersection: LineIntersection,
    line_color: tuple[int, int, int] = (0, 255, 0),
    front_color: tuple[int, int, int] = (0, 0, 255),
    back_color: tuple[int, int, int] = (255, 0, 0),
    thickness: int = 2,
    marker_radius: int = 4,
) -> NDArray[np.uint8]:
    """Draw a clipped line with its origin and border crossings.

    Args:
        image: Input image (H, W, 3) BGR format
        origin: (x, y) point the line passes through
        intersection: Result of intersect_line_with_borders
        line_color: BGR color of the back-to-front segment
        front_color: BGR color of the front crossing marker
        back_color: BGR color of the back crossing marker
        thickness: Line thickness
        marker_radius: Radius of the crossing markers

    Returns:
        Image with the line overlay (modified copy)
    """
    _ensure_cv2()

    output = image.copy()
    front = _to_pixel(intersection.front)
    back = _to_pixel(intersection.back)

    cv2.line(output, back, front, line_color, thickness)
    cv2.circle(output, front, marker_radius, front_color, -1)
    cv2.circle(output, back, marker_radius, back_color, -1)
    cv2.circle(output, _to_pixel(origin), marker_radius, line_color, -1)
    return output


def draw_arc_span(
    image: NDArray[np.uint8],
    center: Any,
    radius: float,
    start_angle: float,
    span: ArcBorderSpan,
    arc_color: tuple[int, int, int] = (0, 165, 255),
    start_color: tuple[int, int, int] = (0, 0, 255),
    thickness: int = 2,
) -> NDArray[np.uint8]:
    """Draw the part of a circle an arc can sweep without leaving the canvas.

    Angles are measured above the horizon, so they are negated for OpenCV,
    whose ellipse angles turn clockwise on screen.

    Args:
        image: Input image (H, W, 3) BGR format
        center: (x, y) circle center
        radius: Circle radius
        start_angle: Angle of the arc's starting point
        span: Result of intersect_arc_with_borders
        arc_color: BGR color of the free arc
        start_color: BGR color of the start radius
        thickness: Line thickness

    Returns:
        Image with the arc overlay (modified copy)
    """
    _ensure_cv2()

    output = image.copy()
    center_px = _to_pixel(center)
    axes = (int(round(radius)), int(round(radius)))

    if span.is_unbounded:
        cv2.circle(output, center_px, axes[0], arc_color, thickness)
    else:
        first = -np.degrees(start_angle + span.clockwise_limit)
        last = -np.degrees(start_angle + span.counter_clockwise_limit)
        cv2.ellipse(output, center_px, axes, 0.0, float(first), float(last), arc_color, thickness)

    start_point = _to_pixel(point_on_circle(center, radius, start_angle))
    cv2.line(output, center_px, start_point, start_color, 1)
    return output
