"""
Tests for angle utilities.

- test_normalize_angle_*
- test_deg_to_rad_*
- test_quadrant_of_*
- test_axis_index_*
"""

import pytest
import numpy as np
from numpy.testing import assert_allclose

from canvas_borders.geometry import (
    TWO_PI,
    HALF_PI,
    normalize_angle,
    deg_to_rad,
    quadrant_of,
    axis_index,
)


class TestNormalizeAngle:
    """Tests for normalize_angle() function."""

    def test_normalize_angle_zero(self):
        """Zero stays zero."""
        assert normalize_angle(0.0) == 0.0

    def test_normalize_angle_full_turn_is_zero(self):
        """Exactly 2π maps to 0, not 2π."""
        assert normalize_angle(TWO_PI) == 0.0

    def test_normalize_angle_multiple_full_turns(self):
        """Multiples of 2π map to 0 (up to one rounding step on either side)."""
        for k in (3, -2, 10):
            result = normalize_angle(k * TWO_PI)
            assert 0.0 <= result < TWO_PI
            assert min(result, TWO_PI - result) < 1e-9

    def test_normalize_angle_tiny_negative_folds_to_zero(self):
        """A tiny negative angle would round to 2π; it must fold to 0."""
        result = normalize_angle(-1e-20)
        assert 0.0 <= result < TWO_PI

    def test_normalize_angle_negative(self):
        """-π/2 becomes 3π/2."""
        assert normalize_angle(-HALF_PI) == pytest.approx(3 * HALF_PI)

    def test_normalize_angle_large_positive(self):
        """7π becomes π."""
        assert normalize_angle(7 * np.pi) == pytest.approx(np.pi)

    def test_normalize_angle_returns_float_for_scalar(self):
        """Scalar input yields a plain float."""
        assert isinstance(normalize_angle(np.float32(1.0)), float)

    def test_normalize_angle_array(self):
        """Arrays are normalized element-wise and keep their shape."""
        angles = np.array([-np.pi, 0.0, TWO_PI, 5.0 * np.pi / 2])
        result = normalize_angle(angles)
        assert result.shape == (4,)
        assert_allclose(result, [np.pi, 0.0, 0.0, HALF_PI], atol=1e-12)

    def test_normalize_angle_range_property(self):
        """Every result lies in [0, 2π)."""
        rng = np.random.default_rng(7)
        angles = rng.uniform(-100.0, 100.0, size=500)
        result = normalize_angle(angles)
        assert np.all(result >= 0.0)
        assert np.all(result < TWO_PI)

    @pytest.mark.parametrize("k", [-3, -1, 1, 2, 5])
    def test_normalize_angle_periodic(self, k):
        """normalize(a + 2πk) == normalize(a)."""
        for a in (0.3, 1.7, 4.0, 6.0):
            assert normalize_angle(a + TWO_PI * k) == pytest.approx(normalize_angle(a), abs=1e-9)


class TestDegToRad:
    """Tests for deg_to_rad() function."""

    def test_deg_to_rad_half_turn(self):
        assert deg_to_rad(180.0) == pytest.approx(np.pi)

    def test_deg_to_rad_right_angle(self):
        assert deg_to_rad(90.0) == pytest.approx(HALF_PI)

    def test_deg_to_rad_negative(self):
        assert deg_to_rad(-45.0) == pytest.approx(-np.pi / 4)


class TestQuadrantOf:
    """Tests for quadrant_of() function."""

    @pytest.mark.parametrize("angle, expected", [
        (0.0, 0),
        (np.pi / 4, 0),
        (HALF_PI, 1),
        (3 * np.pi / 4, 1),
        (np.pi, 2),
        (5 * np.pi / 4, 2),
        (3 * HALF_PI, 3),
        (7 * np.pi / 4, 3),
        (-np.pi / 4, 3),
    ])
    def test_quadrant_of(self, angle, expected):
        assert quadrant_of(angle) == expected


class TestAxisIndex:
    """Tests for axis_index() function."""

    @pytest.mark.parametrize("angle, expected", [
        (0.0, 0),
        (HALF_PI, 1),
        (np.pi, 2),
        (3 * HALF_PI, 3),
        (TWO_PI + HALF_PI, 1),
        (-HALF_PI, 3),
    ])
    def test_axis_index_on_axis(self, angle, expected):
        assert axis_index(angle) == expected

    def test_axis_index_just_below_full_turn(self):
        """Angles a hair below 2π are the +x axis."""
        assert axis_index(TWO_PI - 1e-15) == 0

    @pytest.mark.parametrize("angle", [1e-6, np.pi / 4, 2.0, 4.0, TWO_PI - 1e-6])
    def test_axis_index_off_axis(self, angle):
        assert axis_index(angle) == -1
