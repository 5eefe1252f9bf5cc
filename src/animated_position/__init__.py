"""Animated-position building blocks.

This package models a 1-dimensional position that can be dragged by the user
and then keeps moving under a pluggable physics behaviour until it settles.
It contains the pure math core, the behaviours, the tick schedulers, the
AnimatedPosition itself and a GrADyS-SIM NG handler. It is intended to be
imported by a larger project.
"""

from .behaviours import Behaviour, ContinuousWithMomentum, SnapToPageBoundaries
from .config import AnimatedPositionConfiguration
from .core import (
    UNBOUNDED,
    Limits,
    clip_value,
    estimate_velocity,
    limit_tick_elapsed,
)
from .handler import AnimatedPositionHandler, AnimatedPositionHandlerConfiguration
from .listeners import ListenerList, PositionListener
from .position import AnimatedPosition
from .scheduler import EventLoopScheduler, ManualScheduler, Scheduler

__version__ = "0.1.0"

__all__ = [
    "AnimatedPosition",
    "AnimatedPositionConfiguration",
    "AnimatedPositionHandler",
    "AnimatedPositionHandlerConfiguration",
    "Behaviour",
    "ContinuousWithMomentum",
    "EventLoopScheduler",
    "Limits",
    "ListenerList",
    "ManualScheduler",
    "PositionListener",
    "Scheduler",
    "SnapToPageBoundaries",
    "UNBOUNDED",
    "clip_value",
    "estimate_velocity",
    "limit_tick_elapsed",
]
