"""
Periodic tick sources for AnimatedPosition.

A scheduler behaves like a periodic timer: once started it invokes its single
callback every `period` seconds until it is stopped or re-armed with a new
period. Two implementations are provided:

- EventLoopScheduler: runs on a GrADyS-SIM NG EventLoop.
- ManualScheduler: advanced explicitly by the caller, with its own clock.
  Useful for deterministic tests and offline trajectory generation.
"""

import logging
from typing import Callable, Optional, Protocol

from gradysim.simulator.event import EventLoop


logger = logging.getLogger(__name__)


class Scheduler(Protocol):
    """Periodic timer driving an AnimatedPosition."""

    @property
    def is_running(self) -> bool:
        ...

    def set_callback(self, callback: Callable[[], None]) -> None:
        ...

    def start(self, period: float) -> None:
        """Fire every period seconds from now on, replacing any pending tick."""

    def stop(self) -> None:
        """Stop firing. Stopping a stopped scheduler does nothing."""


class EventLoopScheduler:
    """
    Periodic timer built on a GrADyS-SIM NG event loop.

    The event loop offers no way to withdraw an event, so every start/stop bumps
    a generation counter and events from an older generation fire as no-ops.

    Usage:
        scheduler = EventLoopScheduler(event_loop, label="list scroll")
        scheduler.set_callback(on_tick)
        scheduler.start(1.0 / 60.0)
    """

    def __init__(self, event_loop: EventLoop, label: str = "AnimatedPosition timer"):
        self._loop = event_loop
        self._label = label
        self._callback: Optional[Callable[[], None]] = None
        self._period: Optional[float] = None
        self._generation = 0
        self._running = False

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def period(self) -> Optional[float]:
        return self._period

    def set_callback(self, callback: Callable[[], None]) -> None:
        self._callback = callback

    def now(self) -> float:
        return self._loop.current_time

    def start(self, period: float) -> None:
        if period <= 0:
            raise ValueError("period must be > 0")

        self._generation += 1
        self._period = period
        self._running = True
        self._schedule(self._generation)

    def stop(self) -> None:
        if not self._running:
            return
        self._generation += 1
        self._running = False

    def _schedule(self, generation: int) -> None:
        self._loop.schedule_event(
            self._loop.current_time + self._period,
            lambda: self._fire(generation),
            self._label,
        )

    def _fire(self, generation: int) -> None:
        if generation != self._generation or not self._running:
            return

        # Re-arm first: the callback may stop or restart this timer, which
        # turns the event scheduled here into a no-op.
        self._schedule(generation)

        if self._callback is not None:
            self._callback()


class ManualScheduler:
    """
    Scheduler advanced explicitly, with its own clock starting at 0.

    The instance is callable and returns the current time, so it can be passed
    both as the scheduler and as the clock of an AnimatedPosition.

    Usage:
        scheduler = ManualScheduler()
        position = AnimatedPosition(behaviour, scheduler, scheduler)
        scheduler.advance(0.5)  # fires every tick due in the next 0.5 s
    """

    def __init__(self, start_time: float = 0.0):
        self._now = start_time
        self._callback: Optional[Callable[[], None]] = None
        self._period: Optional[float] = None
        self._next_tick: Optional[float] = None
        self.tick_count = 0

    def __call__(self) -> float:
        return self._now

    def now(self) -> float:
        return self._now

    @property
    def is_running(self) -> bool:
        return self._next_tick is not None

    @property
    def period(self) -> Optional[float]:
        return self._period

    @property
    def next_tick(self) -> Optional[float]:
        return self._next_tick

    def set_callback(self, callback: Callable[[], None]) -> None:
        self._callback = callback

    def start(self, period: float) -> None:
        if period <= 0:
            raise ValueError("period must be > 0")
        self._period = period
        self._next_tick = self._now + period

    def stop(self) -> None:
        self._next_tick = None

    def advance(self, seconds: float) -> int:
        """
        Move the clock forward, firing every tick that falls due on the way.

        Args:
            seconds: Amount of time to advance (>= 0).

        Returns:
            Number of ticks fired.
        """
        if seconds < 0:
            raise ValueError("seconds must be >= 0")

        target = self._now + seconds
        fired = 0

        while self._next_tick is not None and self._next_tick <= target:
            self.step()
            fired += 1

        self._now = target
        return fired

    def run_until_stopped(self, max_seconds: float = 60.0) -> int:
        """
        Fire ticks one at a time until the scheduler stops or max_seconds pass.

        Returns:
            Number of ticks fired.
        """
        deadline = self._now + max_seconds
        fired = 0

        while self._next_tick is not None and self._next_tick <= deadline:
            self.step()
            fired += 1

        if self._next_tick is not None:
            logger.debug("ManualScheduler still running after %.3f s", max_seconds)
        return fired

    def step(self) -> bool:
        """Jump the clock to the next tick and fire it. Returns False when stopped."""
        if self._next_tick is None:
            return False
        self._now = self._next_tick
        self._next_tick = self._now + self._period
        self.tick_count += 1
        if self._callback is not None:
            self._callback()
        return True
