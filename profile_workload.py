#!/usr/bin/env python3
"""
Profile script for canvas_borders to identify performance bottlenecks.
"""

import cProfile
import pstats
import io
import numpy as np
import time
from canvas_borders import (
    Rectangle,
    intersect_arc_with_borders,
    intersect_line_with_borders,
)


def generate_stroke_workload(
    rng: np.random.Generator,
    n_strokes: int,
    canvas: Rectangle
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Generate random pen positions, headings and arc radii inside a canvas.
    Simulates a plotter stroke generator querying how far each stroke can go.
    """
    positions = np.column_stack([
        rng.uniform(0.0, canvas.width, n_strokes),
        rng.uniform(0.0, canvas.height, n_strokes),
    ])
    angles = rng.uniform(0.0, 2 * np.pi, n_strokes)
    radii = rng.uniform(1.0, 0.75 * max(canvas.width, canvas.height), n_strokes)
    return positions, angles, radii


def run_line_workload(n_iterations: int = 20, n_strokes: int = 500) -> None:
    """Run line/border intersections for profiling."""
    rng = np.random.default_rng(42)  # For reproducibility
    canvas = Rectangle(1200.0, 800.0)

    for _ in range(n_iterations):
        positions, angles, _ = generate_stroke_workload(rng, n_strokes, canvas)
        for position, angle in zip(positions, angles):
            intersect_line_with_borders(canvas, position, angle)


def run_arc_workload(n_iterations: int = 20, n_strokes: int = 500) -> None:
    """Run arc/border intersections for profiling."""
    rng = np.random.default_rng(42)
    canvas = Rectangle(1200.0, 800.0)

    for _ in range(n_iterations):
        positions, angles, radii = generate_stroke_workload(rng, n_strokes, canvas)
        for center, angle, radius in zip(positions, angles, radii):
            intersect_arc_with_borders(canvas, center, radius, angle)


def profile_function(func, description: str) -> None:
    """Profile a function and print statistics."""
    print(f"\n{'=' * 60}")
    print(f"Profiling: {description}")
    print('=' * 60)

    # Time the execution
    start = time.perf_counter()

    profiler = cProfile.Profile()
    profiler.enable()
    func()
    profiler.disable()

    elapsed = time.perf_counter() - start

    # Get stats
    s = io.StringIO()
    ps = pstats.Stats(profiler, stream=s).sort_stats('cumulative')
    ps.print_stats(30)
    print(s.getvalue())

    print(f"\nTotal time: {elapsed:.3f}s")


if __name__ == "__main__":
    print("Canvas Borders Performance Profiling")
    print("=" * 60)

    profile_function(
        lambda: run_line_workload(20),
        "Line/border intersections (500 strokes, 20 iterations)"
    )

    profile_function(
        lambda: run_arc_workload(20),
        "Arc/border intersections (500 strokes, 20 iterations)"
    )
