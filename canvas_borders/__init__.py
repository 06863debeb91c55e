"""
Canvas Border Intersection
==========================

Public API for finding where lines and circular arcs anchored in a
rectangular canvas exit that canvas.
"""

from canvas_borders.geometry import (
    TWO_PI,
    HALF_PI,
    normalize_angle,
    deg_to_rad,
    quadrant_of,
)
from canvas_borders.dataclasses import (
    Rectangle,
    LineIntersection,
    ArcBorderSpan,
    ValidationError,
)
from canvas_borders.line import intersect_line_with_borders
from canvas_borders.arc import (
    intersect_arc_with_line,
    intersect_arc_with_borders,
    arc_border_crossings,
)
from canvas_borders.debug import (
    format_angle,
    format_point,
    setup_debug_logging,
    disable_debug_logging,
)

__all__ = [
    # Angles
    'TWO_PI',
    'HALF_PI',
    'normalize_angle',
    'deg_to_rad',
    'quadrant_of',
    # Data structures
    'Rectangle',
    'LineIntersection',
    'ArcBorderSpan',
    'ValidationError',
    # Intersections
    'intersect_line_with_borders',
    'intersect_arc_with_line',
    'intersect_arc_with_borders',
    'arc_border_crossings',
    # Debug utilities
    'format_angle',
    'format_point',
    'setup_debug_logging',
    'disable_debug_logging',
]
__version__ = '0.1.0'
