"""Trajectory behaviours for AnimatedPosition.

A behaviour decides how a position keeps moving once it has been released.
Any object with the three methods of `Behaviour` can be used; the two classes
below cover the common cases:

- ContinuousWithMomentum: free-running motion that decays with friction,
  e.g. a kinetic-scrolling list.
- SnapToPageBoundaries: settles on the nearest whole-number position, biased
  in the direction of the release, e.g. a paginated view.
"""

import math
from typing import Protocol


class Behaviour(Protocol):
    """Physics of an AnimatedPosition after release."""

    def released_with_velocity(self, position: float, velocity: float) -> None:
        """Called with a freshly estimated velocity, during a drag and on release."""

    def get_next_position(self, current_position: float, elapsed_seconds: float) -> float:
        """Return the position one tick later."""

    def is_stopped(self, position: float) -> bool:
        """Return True once the trajectory has settled at position."""


class ContinuousWithMomentum:
    """
    Free movement with momentum, slowed down by friction.

    On every tick the velocity is multiplied by `damping`; once its magnitude
    drops below `minimum_velocity` it is set to zero and the motion stops.

    Usage:
        behaviour = ContinuousWithMomentum()
        behaviour.set_friction(0.05)
    """

    def __init__(self, damping: float = 0.92, minimum_velocity: float = 0.05):
        if not 0.0 <= damping <= 1.0:
            raise ValueError("damping must be in [0, 1]")
        if minimum_velocity < 0:
            raise ValueError("minimum_velocity must be >= 0")
        self.velocity = 0.0
        self.damping = damping
        self.minimum_velocity = minimum_velocity

    def set_friction(self, friction: float) -> None:
        """
        Set the friction applied on each tick.

        Args:
            friction: 0 keeps the velocity forever, 1 stops it immediately.
        """
        if not 0.0 <= friction <= 1.0:
            raise ValueError("friction must be in [0, 1]")
        self.damping = 1.0 - friction

    def set_minimum_velocity(self, minimum_velocity: float) -> None:
        """Set the speed (units/s) below which the movement stops."""
        if minimum_velocity < 0:
            raise ValueError("minimum_velocity must be >= 0")
        self.minimum_velocity = minimum_velocity

    def released_with_velocity(self, position: float, velocity: float) -> None:
        self.velocity = velocity

    def get_next_position(self, current_position: float, elapsed_seconds: float) -> float:
        self.velocity *= self.damping

        if abs(self.velocity) < self.minimum_velocity:
            self.velocity = 0.0

        return current_position + self.velocity * elapsed_seconds

    def is_stopped(self, position: float) -> bool:
        return self.velocity == 0.0


class SnapToPageBoundaries:
    """
    Snaps to the nearest whole-number position once released.

    A fast enough release (|velocity| > velocity_threshold) moves on to the next
    boundary in the direction of travel instead of falling back to the nearest
    one, so a short flick turns the page.

    Attributes:
        target_snap_position: Boundary the position is currently heading to.
        snap_speed: Proportional gain (1/s) pulling the position to the target.
        velocity_threshold: Release speed (units/s) that counts as a flick.
        tolerance: Distance from the target at which the motion is settled.
    """

    def __init__(
        self,
        snap_speed: float = 10.0,
        velocity_threshold: float = 1.0,
        tolerance: float = 0.001,
    ):
        if snap_speed <= 0:
            raise ValueError("snap_speed must be > 0")
        if velocity_threshold < 0:
            raise ValueError("velocity_threshold must be >= 0")
        if tolerance <= 0:
            raise ValueError("tolerance must be > 0")
        self.target_snap_position = 0.0
        self.snap_speed = snap_speed
        self.velocity_threshold = velocity_threshold
        self.tolerance = tolerance

    def released_with_velocity(self, position: float, velocity: float) -> None:
        self.target_snap_position = float(math.floor(position + 0.5))

        if velocity > self.velocity_threshold and self.target_snap_position < position:
            self.target_snap_position += 1
        if velocity < -self.velocity_threshold and self.target_snap_position > position:
            self.target_snap_position -= 1

    def get_next_position(self, current_position: float, elapsed_seconds: float) -> float:
        if self.is_stopped(current_position):
            return self.target_snap_position

        velocity = (self.target_snap_position - current_position) * self.snap_speed
        new_position = current_position + velocity * elapsed_seconds

        return self.target_snap_position if self.is_stopped(new_position) else new_position

    def is_stopped(self, position: float) -> bool:
        return abs(self.target_snap_position - position) < self.tolerance
