"""
Tests for range limits and clamping.

Tests the Limits interval type and the clip_value function in the core module.
"""

import sys

import pytest
from animated_position.core import UNBOUNDED, Limits, clip_value


class TestLimits:
    """Test the inclusive interval type."""

    def test_default_is_unbounded(self):
        """Default limits should span the whole float range."""
        assert Limits() == UNBOUNDED
        assert UNBOUNDED.start == -sys.float_info.max
        assert UNBOUNDED.end == sys.float_info.max

    def test_reversed_limits_rejected(self):
        """Start greater than end should raise ValueError."""
        with pytest.raises(ValueError):
            Limits(10.0, 0.0)

    def test_empty_interval_allowed(self):
        """A single-point interval is valid."""
        limits = Limits(5.0, 5.0)
        assert limits.length == 0.0
        assert limits.contains(5.0)

    def test_contains_is_inclusive(self):
        """Both ends belong to the interval."""
        limits = Limits(-1.0, 1.0)
        assert limits.contains(-1.0)
        assert limits.contains(1.0)
        assert not limits.contains(1.0001)
        assert not limits.contains(-1.0001)

    def test_length(self):
        """Length is end minus start."""
        assert Limits(-2.5, 7.5).length == pytest.approx(10.0)


class TestClipValue:
    """Test clamping into limits."""

    def test_inside_unchanged(self):
        """Values inside the interval pass through unchanged."""
        assert clip_value(3.0, Limits(0.0, 10.0)) == 3.0

    def test_below_clamped_to_start(self):
        """Values below start are clamped to start."""
        assert clip_value(-4.0, Limits(0.0, 10.0)) == 0.0

    def test_above_clamped_to_end(self):
        """Values above end are clamped to end."""
        assert clip_value(12.0, Limits(0.0, 10.0)) == 10.0

    def test_boundaries_unchanged(self):
        """Values exactly on a boundary are kept."""
        limits = Limits(0.0, 10.0)
        assert clip_value(0.0, limits) == 0.0
        assert clip_value(10.0, limits) == 10.0

    def test_method_matches_function(self):
        """Limits.clip_value delegates to clip_value."""
        limits = Limits(-1.0, 1.0)
        for value in (-5.0, -1.0, 0.25, 1.0, 5.0):
            assert limits.clip_value(value) == clip_value(value, limits)

    def test_unbounded_keeps_large_values(self):
        """Unbounded limits do not alter finite values."""
        assert clip_value(1e300, UNBOUNDED) == 1e300
        assert clip_value(-1e300, UNBOUNDED) == -1e300

    def test_infinity_clamped_by_unbounded(self):
        """Infinite inputs are clamped to the largest finite float."""
        assert clip_value(float("inf"), UNBOUNDED) == sys.float_info.max
        assert clip_value(float("-inf"), UNBOUNDED) == -sys.float_info.max
