"""Stroke clipping example for the canvas_borders helpers.

This script plays the part of a plotter stroke generator: starting from the
middle of the canvas, it alternates straight strokes and circular arcs with
random headings and lengths, and uses the border intersectors to keep every
stroke inside the drawable area. The pen path is rendered with OpenCV when
it is installed.

Run with::

    uv run python examples/stroke_clipping.py
"""

from __future__ import annotations

from pathlib import Path

import numpy as np
from numpy.typing import NDArray

from canvas_borders import (
    Rectangle,
    intersect_arc_with_borders,
    intersect_line_with_borders,
    setup_debug_logging,
)
from canvas_borders.visualize import HAS_CV2, draw_canvas_border, point_on_circle

EXAMPLES_DIR = Path(__file__).resolve().parent
OUTPUT_DIR = EXAMPLES_DIR / "output"
OUTPUT_PATH = OUTPUT_DIR / "stroke_clipping.png"


def line_stroke(
    canvas: Rectangle,
    position: NDArray[np.float64],
    heading: float,
    length: float,
) -> tuple[NDArray[np.float64], float]:
    """Advance along heading, stopping at the border. Returns (end, travelled)."""

    hit = intersect_line_with_borders(canvas, position, heading)
    travelled = hit.clamp_travel(length)
    direction = np.array([np.cos(heading), -np.sin(heading)])
    return position + travelled * direction, travelled


def arc_stroke(
    canvas: Rectangle,
    position: NDArray[np.float64],
    heading: float,
    radius: float,
    sweep: float,
) -> tuple[NDArray[np.float64], float, list[tuple[float, float]]]:
    """Turn along a circle tangent to heading, stopping at the border.

    Returns (end, new_heading, polyline points).
    """

    # Circle center to the left of the heading; the pen sits at heading - π/2
    center_angle = heading + np.pi / 2
    center = position + radius * np.array([np.cos(center_angle), -np.sin(center_angle)])
    start = heading - np.pi / 2

    span = intersect_arc_with_borders(canvas, center, radius, start)
    allowed = span.clamp_sweep(sweep)

    steps = np.linspace(start, start + allowed, max(2, int(abs(allowed) * radius / 4)))
    points = [point_on_circle(center, radius, a) for a in steps]
    end = np.array(points[-1])
    return end, heading + allowed, points


def main() -> None:
    """Generate a clipped random scribble and optionally render it."""

    setup_debug_logging()

    rng = np.random.default_rng(3)
    canvas = Rectangle(600.0, 400.0)
    position = np.array([canvas.width / 2, canvas.height / 2])
    heading = 0.0
    path: list[tuple[float, float]] = [tuple(position)]

    for index in range(12):
        if index % 2 == 0:
            requested = rng.uniform(100.0, 500.0)
            position, travelled = line_stroke(canvas, position, heading, requested)
            path.append(tuple(position))
            print(f"line {index:2d}: requested {requested:6.1f}, travelled {travelled:6.1f}")
        else:
            radius = rng.uniform(20.0, 150.0)
            requested = rng.uniform(-2 * np.pi, 2 * np.pi)
            position, new_heading, points = arc_stroke(canvas, position, heading, radius, requested)
            path.extend(points[1:])
            print(
                f"arc  {index:2d}: requested {np.degrees(requested):7.1f}°, "
                f"swept {np.degrees(new_heading - heading):7.1f}°"
            )
            heading = new_heading
        heading += rng.uniform(-np.pi / 2, np.pi / 2)

    if not HAS_CV2:
        print("OpenCV not installed; skipping visualization output.")
        return

    import cv2  # Imported lazily to keep dependency optional at module import time

    image = np.full((int(canvas.height) + 1, int(canvas.width) + 1, 3), 255, dtype=np.uint8)
    image = draw_canvas_border(image, canvas, color=(0, 0, 0))
    pts = np.round(np.array(path)).astype(np.int32).reshape((-1, 1, 2))
    cv2.polylines(image, [pts], isClosed=False, color=(200, 60, 0), thickness=2)

    OUTPUT_DIR.mkdir(parents=True, exist_ok=True)
    cv2.imwrite(str(OUTPUT_PATH), image)
    print(f"Saved visualization to {OUTPUT_PATH}")


if __name__ == "__main__":
    main()
