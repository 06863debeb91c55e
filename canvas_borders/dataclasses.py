"""
Border Data Structures
======================

Value types passed to and returned from the border intersectors:
- Rectangle: Canvas dimensions with origin at (0, 0), y growing downward
- LineIntersection: Front/back border crossings of a directed line
- ArcBorderSpan: Rotational travel limits of an arc before it leaves the canvas
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from canvas_borders.geometry import TWO_PI

Point = tuple[float, float]
ArcCrossing = tuple[float, float] | None


class ValidationError(Exception):
    """Raised when input validation fails."""

    pass


def as_point(point: Any, name: str = "point") -> Point:
    """Convert a point-like value into an (x, y) tuple of finite floats.

    Args:
        point: Tuple, list or numpy array holding two coordinates
        name: Argument name used in error messages

    Raises:
        ValidationError: If the point is not of shape (2,) or not finite
    """
    array = np.asarray(point, dtype=np.float64)
    if array.shape != (2,):
        raise ValidationError(f"{name} must have shape (2,), got {array.shape}")
    if not np.all(np.isfinite(array)):
        raise ValidationError(f"{name} must have finite coordinates, got {tuple(array)}")
    return float(array[0]), float(array[1])


def validate_finite(value: float, name: str) -> float:
    """Return value as float, raising ValidationError when it is NaN or infinite."""
    value = float(value)
    if not math.isfinite(value):
        raise ValidationError(f"{name} must be finite, got {value}")
    return value


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned canvas rectangle anchored at the origin.

    Attributes:
        width: Extent along x (positive to the right)
        height: Extent along y (positive downward, image convention)

    Raises:
        ValidationError: If either dimension is not finite and strictly positive
    """

    width: float
    height: float

    def __post_init__(self) -> None:
        """Validate that the rectangle has a positive area."""
        for name in ("width", "height"):
            value = validate_finite(getattr(self, name), name)
            if value <= 0:
                raise ValidationError(f"{name} must be positive, got {value}")
            object.__setattr__(self, name, value)

    def contains(self, point: Any) -> bool:
        """Return True if the point lies inside or on the rectangle."""
        x, y = as_point(point)
        return 0.0 <= x <= self.width and 0.0 <= y <= self.height


@dataclass(frozen=True)
class LineIntersection:
    """Border crossings of a directed line through an origin point.

    Attributes:
        front: (x, y) crossing ahead of the origin along the line direction
        front_dist: Euclidean distance from the origin to ``front``
        back: (x, y) crossing behind the origin
        back_dist: Euclidean distance from the origin to ``back``
    """

    front: Point
    front_dist: float
    back: Point
    back_dist: float

    def as_array(self) -> NDArray[np.float64]:
        """Return [front_x, front_y, back_x, back_y, front_dist, back_dist]."""
        return np.array(
            [*self.front, *self.back, self.front_dist, self.back_dist],
            dtype=np.float64,
        )

    def clamp_travel(self, distance: float) -> float:
        """Clamp a signed travel distance to the border on that side.

        Positive distances travel forward and are limited by ``front_dist``;
        negative distances travel backward and are limited by ``back_dist``.
        """
        if distance >= 0:
            return min(distance, self.front_dist)
        return -min(-distance, self.back_dist)


@dataclass(frozen=True)
class ArcBorderSpan:
    """Rotational limits of an arc around a fixed center.

    Both limits are relative to the arc's start angle.

    Attributes:
        clockwise_limit: Non-negative angle that can be swept in the positive
                         direction before the arc crosses a border
        counter_clockwise_limit: Non-positive angle that can be swept in the
                                 negative direction before crossing a border
    """

    clockwise_limit: float
    counter_clockwise_limit: float

    @classmethod
    def unbounded(cls) -> ArcBorderSpan:
        """Full-circle sentinel for arcs that never cross a border."""
        return cls(clockwise_limit=TWO_PI, counter_clockwise_limit=-TWO_PI)

    @property
    def is_unbounded(self) -> bool:
        """True if this is the full-circle sentinel."""
        return self.clockwise_limit == TWO_PI and self.counter_clockwise_limit == -TWO_PI

    def as_array(self) -> NDArray[np.float64]:
        """Return [clockwise_limit, counter_clockwise_limit]."""
        return np.array([self.clockwise_limit, self.counter_clockwise_limit], dtype=np.float64)

    def clamp_sweep(self, sweep: float) -> float:
        """Clamp a signed sweep angle so the arc stays inside the canvas."""
        return max(self.counter_clockwise_limit, min(sweep, self.clockwise_limit))
