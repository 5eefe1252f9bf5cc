"""
A 1-dimensional position that can be dragged and then keeps moving.

AnimatedPosition tracks a single float that the user grabs, drags and
releases. After release a behaviour object (see `behaviours.py`) decides the
trajectory, advanced by a periodic scheduler until the behaviour reports that
it has stopped. Listeners are called synchronously whenever the value actually
changes.
"""

import logging
from typing import Callable, Optional

from gradysim.simulator.event import EventLoop

from .behaviours import Behaviour
from .config import AnimatedPositionConfiguration
from .core import UNBOUNDED, Limits, estimate_velocity, limit_tick_elapsed
from .listeners import ListenerList, PositionListener
from .scheduler import EventLoopScheduler, ManualScheduler, Scheduler


logger = logging.getLogger(__name__)


class AnimatedPosition:
    """
    Models a 1-dimensional position driven by drags and a physics behaviour.

    Typical use from an input handler:
        position.begin_drag()
        position.drag(dx)   # for every move, dx measured from the drag start
        position.end_drag() # the behaviour takes over from here

    Mouse-wheel style input uses `nudge(delta)` instead. The value is stored as
    a float and can represent whatever units the caller needs.

    The `behaviour` attribute is public so that its parameters can be tuned.
    """

    def __init__(
        self,
        behaviour: Behaviour,
        scheduler: Scheduler,
        clock: Callable[[], float],
        config: Optional[AnimatedPositionConfiguration] = None,
    ):
        """
        Args:
            behaviour: Physics of the movement after release.
            scheduler: Periodic timer; its callback is installed here.
            clock: Returns the current monotonic time in seconds.
            config: Timing parameters (defaults if omitted).
        """
        self.behaviour = behaviour
        self._scheduler = scheduler
        self._clock = clock
        self._config = config or AnimatedPositionConfiguration()

        self._position = 0.0
        self._grabbed_position = 0.0
        self._release_velocity = 0.0
        self._limits = UNBOUNDED
        self._last_update: Optional[float] = None
        self._last_drag: Optional[float] = None
        self._listeners = ListenerList()

        self._scheduler.set_callback(self._timer_callback)

    @classmethod
    def from_event_loop(
        cls,
        event_loop: EventLoop,
        behaviour: Behaviour,
        config: Optional[AnimatedPositionConfiguration] = None,
        label: str = "AnimatedPosition timer",
    ) -> "AnimatedPosition":
        """Create a position ticking on a GrADyS-SIM NG event loop."""
        scheduler = EventLoopScheduler(event_loop, label=label)
        return cls(behaviour, scheduler, scheduler.now, config)

    @classmethod
    def manual(
        cls,
        behaviour: Behaviour,
        config: Optional[AnimatedPositionConfiguration] = None,
    ) -> "AnimatedPosition":
        """Create a position driven by a ManualScheduler, available as `.scheduler`."""
        scheduler = ManualScheduler()
        return cls(behaviour, scheduler, scheduler, config)

    @property
    def scheduler(self) -> Scheduler:
        return self._scheduler

    @property
    def config(self) -> AnimatedPositionConfiguration:
        return self._config

    @property
    def limits(self) -> Limits:
        return self._limits

    @property
    def position(self) -> float:
        return self._position

    @property
    def release_velocity(self) -> float:
        """Velocity estimated by the latest drag move or nudge (units/s)."""
        return self._release_velocity

    @property
    def is_animating(self) -> bool:
        return self._scheduler.is_running

    def set_limits(self, limits: Limits) -> None:
        """
        Set the range within which the value is constrained.

        The current value is not re-clamped here; the new limits apply from the
        next change onwards.
        """
        self._limits = limits

    def begin_drag(self) -> None:
        """
        Called when a mouse-drag or similar operation takes control.

        Follow with calls to `drag()` for every move, and always finish with
        `end_drag()` so the behaviour can continue the movement.
        """
        self._grabbed_position = self._position
        self._release_velocity = 0.0
        self._scheduler.stop()
        logger.debug("Drag started at %r", self._grabbed_position)

    def drag(self, delta_from_start_of_drag: float) -> None:
        """
        Called during a drag when the pointer has moved.

        Args:
            delta_from_start_of_drag: Offset from the position captured by
                `begin_drag()` to the required position.
        """
        self._move_to(self._grabbed_position + delta_from_start_of_drag)

    def end_drag(self) -> None:
        """Finish a drag; the behaviour moves the value from now on."""
        logger.debug("Drag ended at %r (release velocity %r)", self._position, self._release_velocity)
        self._scheduler.start(self._config.active_period)

    def nudge(self, delta_from_current_position: float) -> None:
        """
        Move by a relative amount outside of a drag, e.g. on a mouse-wheel event.
        """
        self._move_to(self._position + delta_from_current_position)
        self._scheduler.start(self._config.nudge_period)

    def get_position(self) -> float:
        return self._position

    def set_position(self, new_position: float) -> None:
        """
        Set the value directly and stop any further movement.

        Listeners are called synchronously if the value actually changes.
        """
        self._scheduler.stop()
        self._set_position_and_send_change(new_position)

    def add_listener(self, listener: PositionListener) -> None:
        """Add a listener called as `listener.position_changed(self, value)`."""
        self._listeners.add(listener)

    def remove_listener(self, listener: PositionListener) -> None:
        self._listeners.remove(listener)

    def _move_to(self, new_position: float) -> None:
        now = self._clock()
        self._release_velocity = estimate_velocity(
            self._last_drag,
            self._position,
            now,
            new_position,
            min_interval=self._config.min_drag_interval,
            noise_floor=self._config.velocity_noise_floor,
        )
        self.behaviour.released_with_velocity(new_position, self._release_velocity)
        self._last_drag = now

        self._set_position_and_send_change(new_position)

    def _set_position_and_send_change(self, new_position: float) -> None:
        new_position = self._limits.clip_value(new_position)

        if self._position != new_position:
            self._position = new_position
            self._listeners.call("position_changed", self, new_position)

    def _timer_callback(self) -> None:
        now = self._clock()
        elapsed = limit_tick_elapsed(
            self._last_update,
            now,
            min_elapsed=self._config.min_tick_elapsed,
            max_elapsed=self._config.max_tick_elapsed,
        )
        self._last_update = now

        new_position = self.behaviour.get_next_position(self._position, elapsed)

        if self.behaviour.is_stopped(new_position):
            self._scheduler.stop()
            logger.debug("Movement stopped at %r", new_position)
        else:
            self._scheduler.start(self._config.active_period)

        self._set_position_and_send_change(new_position)
