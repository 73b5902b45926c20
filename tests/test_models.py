"""Tests for configuration records and layout value types."""

import math

import pytest

from pycircularprogressqt import DashPattern, Direction, Point, ProgressConfig, TouchUpdate
from pycircularprogressqt.models import is_big_dot, normalize_color_to_rgba


class TestProgressConfig:
    """Tests for ProgressConfig."""

    def test_defaults(self):
        """Defaults cover a full circle with eight dots."""
        cfg = ProgressConfig()
        assert cfg.dot_count == 8
        assert cfg.padding == 32.0
        assert cfg.start_angle == 0.0
        assert cfg.end_angle == pytest.approx(2 * math.pi)
        assert cfg.angular_span == pytest.approx(2 * math.pi)
        assert math.isinf(cfg.moving_diff)

    def test_is_frozen(self):
        """Configs cannot be mutated."""
        cfg = ProgressConfig()
        with pytest.raises(Exception):
            cfg.dot_count = 3

    def test_zero_dots_is_allowed(self):
        """Zero dots is a valid config."""
        assert ProgressConfig(dot_count=0).dot_count == 0

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"dot_count": -1},
            {"big_dot_size": -2.0},
            {"touch_padding": -1.0},
            {"moving_diff": 0.0},
            {"start_angle": 1.0, "end_angle": 1.0},
            {"start_angle": 2.0, "end_angle": 1.0},
            {"start_angle": 0.0, "end_angle": 3 * math.pi},
            {"start_angle": -math.pi / 2, "end_angle": math.pi},
            {"start_angle": math.pi, "end_angle": 3 * math.pi},
        ],
    )
    def test_invalid_values(self, kwargs):
        """Out-of-range sizes and angles raise ValueError."""
        with pytest.raises(ValueError):
            ProgressConfig(**kwargs)

    def test_range_must_lie_within_one_turn(self):
        """Start and end must both stay within [0, 2π]."""
        with pytest.raises(ValueError):
            ProgressConfig.from_degrees(-90, 270)
        cfg = ProgressConfig(start_angle=math.pi, end_angle=2 * math.pi)
        assert cfg.angular_span == pytest.approx(math.pi)
        assert ProgressConfig.from_degrees(0, 360).end_angle == pytest.approx(2 * math.pi)

    def test_dot_size_alternates(self):
        """Dot sizes alternate big and small."""
        cfg = ProgressConfig(small_dot_size=2.0, big_dot_size=8.0)
        assert [cfg.dot_size(i) for i in range(5)] == [8.0, 2.0, 8.0, 2.0, 8.0]
        assert is_big_dot(0) and not is_big_dot(1)

    def test_from_dict_ignores_unknown_keys(self):
        """Unknown keys are dropped."""
        cfg = ProgressConfig.from_dict({"dot_count": 12, "padding": 10, "unknown": True})
        assert cfg.dot_count == 12
        assert cfg.padding == 10

    def test_to_dict_round_trip(self):
        """to_dict output rebuilds an equal config."""
        cfg = ProgressConfig(dot_count=5, user_dot_color=(0, 255, 0, 255))
        assert ProgressConfig.from_dict(cfg.to_dict()) == cfg

    def test_from_degrees(self):
        """Degrees are converted to radians."""
        cfg = ProgressConfig.from_degrees(0, 180, dot_count=4)
        assert cfg.end_angle == pytest.approx(math.pi)
        assert cfg.dot_count == 4

    def test_replace(self):
        """replace returns an updated copy."""
        cfg = ProgressConfig().replace(dot_count=3)
        assert cfg.dot_count == 3


class TestColors:
    """Tests for normalize_color_to_rgba (tuple and hex inputs)."""

    def test_rgba_tuple(self):
        """RGBA tuples pass through."""
        assert normalize_color_to_rgba((1, 2, 3, 4)) == (1, 2, 3, 4)

    def test_rgb_tuple(self):
        """RGB tuples get full alpha."""
        assert normalize_color_to_rgba((1, 2, 3)) == (1, 2, 3, 255)

    def test_hex(self):
        """Hex strings parse with optional alpha."""
        assert normalize_color_to_rgba("#ff8000") == (255, 128, 0, 255)
        assert normalize_color_to_rgba("#ff800080") == (255, 128, 0, 128)

    def test_unsupported_type(self):
        """Other types raise TypeError."""
        with pytest.raises(TypeError):
            normalize_color_to_rgba(12345)


class TestDashPattern:
    """Tests for DashPattern helpers."""

    def test_empty(self):
        """An empty pattern has no pen pattern."""
        pattern = DashPattern()
        assert pattern.leading_gap == 0.0
        assert pattern.total_length == 0.0
        assert pattern.pen_pattern() == ([], 0.0)

    def test_pen_pattern_merges_end_gaps(self):
        """End gaps merge and the leading gap becomes the offset."""
        pattern = DashPattern((1.0, 2.0, 3.0, 4.0, 5.0))
        dashes, offset = pattern.pen_pattern()
        assert dashes == [2.0, 3.0, 4.0, 6.0]
        assert offset == pytest.approx(14.0)

    def test_strokes_and_reversed(self):
        """strokes() picks odd entries; reversed() flips the order."""
        pattern = DashPattern((1.0, 2.0, 3.0, 4.0, 5.0))
        assert pattern.strokes() == (2.0, 4.0)
        assert pattern.reversed().lengths == (5.0, 4.0, 3.0, 2.0, 1.0)


class TestTouchUpdate:
    """Tests for TouchUpdate."""

    def test_direction_locked(self):
        """direction_locked follows the direction."""
        update = TouchUpdate(0.0, 0.0, Point(), None, Direction.UNDETERMINED, False)
        assert not update.direction_locked
        locked = TouchUpdate(0.1, 0.5, Point(), 0, Direction.COUNTER_CLOCKWISE, False)
        assert locked.direction_locked
