"""
Configuration dataclass for animated positions.
"""

from dataclasses import dataclass


@dataclass
class AnimatedPositionConfiguration:
    """
    Timing parameters for an AnimatedPosition.

    Attributes:
        active_period: Scheduler period (seconds) while the position is moving
            under its behaviour. Default: 60 Hz.
        nudge_period: Delay (seconds) before the first tick after a nudge.
            Kept longer than active_period so that a burst of wheel events
            coalesces before the behaviour takes over.
        min_drag_interval: Floor (seconds) applied to the time between two drag
            samples when estimating velocity. Prevents division by ~0 when
            samples arrive back to back.
        velocity_noise_floor: Speeds (units/s) at or below this magnitude are
            reported as 0, so jittery drags do not produce momentum.
        min_tick_elapsed: Lower bound (seconds) of the elapsed time handed to
            the behaviour on each tick.
        max_tick_elapsed: Upper bound (seconds) of the elapsed time handed to
            the behaviour on each tick. Protects against a large jump after the
            host was suspended.
    """
    active_period: float = 1.0 / 60.0
    nudge_period: float = 0.1
    min_drag_interval: float = 0.005
    velocity_noise_floor: float = 0.2
    min_tick_elapsed: float = 0.001
    max_tick_elapsed: float = 0.020

    def __post_init__(self):
        if self.active_period <= 0:
            raise ValueError("active_period must be > 0")
        if self.nudge_period <= 0:
            raise ValueError("nudge_period must be > 0")
        if self.min_drag_interval <= 0:
            raise ValueError("min_drag_interval must be > 0")
        if self.velocity_noise_floor < 0:
            raise ValueError("velocity_noise_floor must be >= 0")
        if self.min_tick_elapsed <= 0:
            raise ValueError("min_tick_elapsed must be > 0")
        if self.min_tick_elapsed > self.max_tick_elapsed:
            raise ValueError("min_tick_elapsed must be <= max_tick_elapsed")
