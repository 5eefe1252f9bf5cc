"""Pure mathematical functions for animated positions.

This module contains stateless operations for:
- Range limits and clamping
- Release velocity estimation from drag samples
- Tick elapsed-time limiting

Everything here works on plain floats, so it can be tested and reused
independently of any scheduler or event loop.
"""

import sys
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Limits:
    """Inclusive [start, end] interval used to constrain a position."""

    start: float = -sys.float_info.max
    end: float = sys.float_info.max

    def __post_init__(self):
        if self.start > self.end:
            raise ValueError(
                f"Limits start must be <= end (got start={self.start!r}, end={self.end!r})"
            )

    @property
    def length(self) -> float:
        return self.end - self.start

    def contains(self, value: float) -> bool:
        return self.start <= value <= self.end

    def clip_value(self, value: float) -> float:
        return clip_value(value, self)


UNBOUNDED = Limits()


def clip_value(value: float, limits: Limits) -> float:
    """Constrain a value into the inclusive interval of limits."""
    if value < limits.start:
        return limits.start
    if value > limits.end:
        return limits.end
    return value


def estimate_velocity(
    last_time: Optional[float],
    last_position: float,
    now: float,
    new_position: float,
    min_interval: float = 0.005,
    noise_floor: float = 0.2,
) -> float:
    """Estimate the speed between two drag samples.

    The elapsed time is floored at min_interval before dividing:

        elapsed = max(min_interval, now - last_time)
        v = (new_position - last_position) / elapsed

    Speeds with |v| <= noise_floor are reported as exactly 0.0.

    Args:
        last_time: Timestamp (seconds) of the previous sample, or None when
            there is no previous sample. An unknown previous sample is treated
            as infinitely old, which yields 0.0.
        last_position: Position at the previous sample.
        now: Timestamp (seconds) of this sample.
        new_position: Position requested by this sample.
        min_interval: Floor on the elapsed time, in seconds.
        noise_floor: Speeds at or below this magnitude map to 0.0.

    Returns:
        The estimated velocity in units per second.
    """
    if last_time is None:
        return 0.0

    elapsed = max(min_interval, now - last_time)
    v = (new_position - last_position) / elapsed
    return v if abs(v) > noise_floor else 0.0


def limit_tick_elapsed(
    last_update: Optional[float],
    now: float,
    min_elapsed: float = 0.001,
    max_elapsed: float = 0.020,
) -> float:
    """Elapsed seconds since the previous tick, clamped to [min_elapsed, max_elapsed].

    When there has been no previous tick the upper bound is returned.
    """
    if min_elapsed > max_elapsed:
        raise ValueError("min_elapsed must be <= max_elapsed")
    if last_update is None:
        return max_elapsed
    return min(max_elapsed, max(min_elapsed, now - last_update))
