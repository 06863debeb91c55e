"""
Angle utilities shared by the line and arc border intersectors.
"""

from typing import Union
import numpy as np
from numpy.typing import NDArray

TWO_PI = 2.0 * np.pi
HALF_PI = 0.5 * np.pi

# Angles closer than this to a multiple of π/2 are treated as axis-aligned
AXIS_EPSILON = 1e-12

AngleLike = Union[float, NDArray[np.floating]]


def normalize_angle(angle: AngleLike) -> AngleLike:
    """
    Wrap angle to [0, 2π) range.

    Accepts a scalar or an array of angles. Values that round up to exactly
    2π after wrapping are folded back to 0.

    Parameters:
        angle: Angle(s) in radians

    Returns:
        Normalized angle as float, or float64 array of the input shape
    """
    if np.ndim(angle) == 0:
        value = float(angle)
        wrapped = value - TWO_PI * np.floor(value / TWO_PI)
        return 0.0 if wrapped >= TWO_PI else float(wrapped)

    angles = np.asarray(angle, dtype=np.float64)
    wrapped = angles - TWO_PI * np.floor(angles / TWO_PI)
    return np.where(wrapped >= TWO_PI, 0.0, wrapped)


def deg_to_rad(deg: float) -> float:
    """Convert degrees to radians."""
    return deg * np.pi / 180.0


def quadrant_of(angle: float) -> int:
    """
    Return the quadrant index (0..3) of an angle.

    Quadrant 0 covers [0, π/2), 1 covers [π/2, π), 2 covers [π, 3π/2)
    and 3 covers [3π/2, 2π).
    """
    return min(int(normalize_angle(angle) // HALF_PI), 3)


def axis_index(angle: float) -> int:
    """
    Return k when the normalized angle lies on k·π/2, or -1 otherwise.

    0 is the +x axis, 1 is towards the top border (y = 0), 2 is -x and
    3 is towards the bottom border.
    """
    normalized = normalize_angle(angle)
    k = int(round(normalized / HALF_PI))
    if abs(normalized - k * HALF_PI) > AXIS_EPSILON:
        return -1
    return k % 4
