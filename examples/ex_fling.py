"""Core-only example (no GrADyS-SIM runtime required).

This script flings an AnimatedPosition with the ContinuousWithMomentum
behaviour, driving time with a ManualScheduler:

- a short, fast drag (begin_drag / drag / end_drag)
- momentum decaying with friction until the behaviour stops
- clamping at the end of the range

It intentionally does NOT build a GrADyS-SIM NG simulation. For the full
integration example (handler + protocol), use `main.py` and `protocol.py` at
the repository root.

Usage:
    python .\examples\ex_fling.py
"""

from animated_position import (
    AnimatedPosition,
    AnimatedPositionConfiguration,
    ContinuousWithMomentum,
    Limits,
)


class PrintingListener:
    """Prints every tenth change."""

    def __init__(self):
        self.count = 0

    def position_changed(self, animated_position, new_position):
        if self.count % 10 == 0:
            t = animated_position.scheduler()
            print(f"{t:>6.3f} | {new_position:>10.3f} | {animated_position.behaviour.velocity:>10.3f}")
        self.count += 1


def simulate_fling():
    """
    Fling a position and let it coast to a stop.
    """
    print("Core-only demo: drag, release, momentum with friction, range clamp")

    config = AnimatedPositionConfiguration()
    behaviour = ContinuousWithMomentum()
    behaviour.set_friction(0.05)

    position = AnimatedPosition.manual(behaviour, config)
    position.set_limits(Limits(0.0, 200.0))
    scheduler = position.scheduler

    listener = PrintingListener()
    position.add_listener(listener)

    print(f"Active period: {config.active_period * 1000:.1f} ms")
    print("-" * 34)
    print(f"{'t (s)':>6} | {'position':>10} | {'velocity':>10}")
    print("-" * 34)

    # Drag 30 units in 0.1 s, sampled every 10 ms
    position.begin_drag()
    for i in range(1, 11):
        scheduler.advance(0.01)
        position.drag(3.0 * i)
    print(f"Released at {position.get_position():.2f} with {position.release_velocity:.1f} units/s")
    position.end_drag()

    ticks = scheduler.run_until_stopped(max_seconds=10.0)

    print("-" * 34)
    print(f"Stopped after {ticks} ticks at t={scheduler():.3f} s")
    print(f"Final position: {position.get_position():.2f}")


if __name__ == "__main__":
    simulate_fling()
