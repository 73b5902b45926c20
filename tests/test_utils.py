"""Tests for utils.clamp and the Qt angle conversion."""

import math

import pytest

from pycircularprogressqt.utils import clamp, radians_to_qt_degrees


class TestClamp:
    """Tests for clamp function."""

    def test_inside_range(self):
        """Values inside the range pass through."""
        assert clamp(0.25) == 0.25
        assert clamp(5.0, 0.0, 10.0) == 5.0

    def test_outside_range(self):
        """Values outside the range are clipped."""
        assert clamp(-0.5) == 0.0
        assert clamp(1.5) == 1.0
        assert clamp(math.inf) == 1.0

    def test_swapped_bounds(self):
        """Reversed bounds are swapped."""
        assert clamp(5.0, 1.0, 0.0) == 1.0

    def test_invalid_values(self):
        """Non-numeric and NaN values fall back to the lower bound."""
        assert clamp("abc") == 0.0
        assert clamp(None) == 0.0
        assert clamp(float("nan"), 0.2, 0.8) == 0.2


class TestQtDegrees:
    """Tests for radians_to_qt_degrees."""

    def test_sign_is_flipped(self):
        """Model angles grow clockwise, Qt angles counter-clockwise."""
        assert radians_to_qt_degrees(math.pi / 2) == pytest.approx(-90.0)
        assert radians_to_qt_degrees(-math.pi) == pytest.approx(180.0)
        assert radians_to_qt_degrees(0.0) == 0.0
