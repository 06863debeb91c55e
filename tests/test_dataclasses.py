"""
Tests for border data structures and input validation.
"""

import pytest
import numpy as np

from canvas_borders.dataclasses import (
    ArcBorderSpan,
    Rectangle,
    ValidationError,
    as_point,
    validate_finite,
)
from canvas_borders.geometry import TWO_PI


class TestRectangle:
    """Tests for Rectangle validation and helpers."""

    def test_valid_rectangle(self):
        rect = Rectangle(640, 480)
        assert rect.width == 640.0
        assert rect.height == 480.0
        assert isinstance(rect.width, float)

    @pytest.mark.parametrize("width, height", [
        (0.0, 10.0),
        (10.0, 0.0),
        (-5.0, 10.0),
        (10.0, -1.0),
    ])
    def test_non_positive_dimensions(self, width, height):
        with pytest.raises(ValidationError, match="positive"):
            Rectangle(width, height)

    @pytest.mark.parametrize("width, height", [
        (float("inf"), 10.0),
        (10.0, float("nan")),
    ])
    def test_non_finite_dimensions(self, width, height):
        with pytest.raises(ValidationError, match="finite"):
            Rectangle(width, height)

    def test_rectangle_is_frozen(self):
        rect = Rectangle(10.0, 20.0)
        with pytest.raises(AttributeError):
            rect.width = 5.0  # type: ignore[misc]

    def test_contains(self):
        rect = Rectangle(100.0, 50.0)
        assert rect.contains((0.0, 0.0))
        assert rect.contains((100.0, 50.0))
        assert rect.contains(np.array([20.0, 30.0]))
        assert not rect.contains((100.1, 10.0))
        assert not rect.contains((10.0, -0.1))


class TestAsPoint:
    """Tests for as_point() helper."""

    def test_tuple(self):
        assert as_point((1, 2)) == (1.0, 2.0)

    def test_numpy_float32(self):
        point = as_point(np.array([1.5, 2.5], dtype=np.float32))
        assert point == (1.5, 2.5)
        assert all(isinstance(v, float) for v in point)

    def test_wrong_shape_names_argument(self):
        with pytest.raises(ValidationError, match="origin must have shape"):
            as_point([1.0, 2.0, 3.0], "origin")

    def test_infinite_coordinate(self):
        with pytest.raises(ValidationError, match="finite"):
            as_point((float("inf"), 0.0))


class TestValidateFinite:

    def test_returns_float(self):
        assert validate_finite(np.float32(2.0), "x") == 2.0

    def test_rejects_nan(self):
        with pytest.raises(ValidationError, match="angle must be finite"):
            validate_finite(float("nan"), "angle")


class TestArcBorderSpan:

    def test_unbounded_sentinel(self):
        span = ArcBorderSpan.unbounded()
        assert span.clockwise_limit == TWO_PI
        assert span.counter_clockwise_limit == -TWO_PI
        assert span.is_unbounded

    def test_bounded_span(self):
        span = ArcBorderSpan(clockwise_limit=1.0, counter_clockwise_limit=-2.0)
        assert not span.is_unbounded

    def test_equality(self):
        assert ArcBorderSpan(0.5, -0.5) == ArcBorderSpan(0.5, -0.5)
