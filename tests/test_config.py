"""
Tests for AnimatedPositionConfiguration validation.
"""

import pytest
from animated_position.config import AnimatedPositionConfiguration


class TestConfiguration:
    """Test defaults and validation of timing parameters."""

    def test_defaults(self):
        """Defaults match a 60 Hz animation with a 100 ms nudge delay."""
        config = AnimatedPositionConfiguration()
        assert config.active_period == pytest.approx(1.0 / 60.0)
        assert config.nudge_period == pytest.approx(0.1)
        assert config.min_drag_interval == pytest.approx(0.005)
        assert config.velocity_noise_floor == pytest.approx(0.2)
        assert config.min_tick_elapsed == pytest.approx(0.001)
        assert config.max_tick_elapsed == pytest.approx(0.020)

    @pytest.mark.parametrize(
        "field",
        ["active_period", "nudge_period", "min_drag_interval", "min_tick_elapsed"],
    )
    def test_non_positive_rejected(self, field):
        """Periods and intervals must be strictly positive."""
        with pytest.raises(ValueError):
            AnimatedPositionConfiguration(**{field: 0.0})

    def test_negative_noise_floor_rejected(self):
        """A negative noise floor raises ValueError."""
        with pytest.raises(ValueError):
            AnimatedPositionConfiguration(velocity_noise_floor=-0.1)

    def test_zero_noise_floor_allowed(self):
        """A zero noise floor reports every non-zero speed."""
        assert AnimatedPositionConfiguration(velocity_noise_floor=0.0).velocity_noise_floor == 0.0

    def test_inverted_tick_bounds_rejected(self):
        """min_tick_elapsed above max_tick_elapsed raises ValueError."""
        with pytest.raises(ValueError):
            AnimatedPositionConfiguration(min_tick_elapsed=0.05, max_tick_elapsed=0.02)
