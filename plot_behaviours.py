"""Plot the trajectories produced by the built-in behaviours after a fling.

For each friction value, a ContinuousWithMomentum position is flung with the
same drag and ticked with a ManualScheduler until it stops. A second panel
shows SnapToPageBoundaries releases at a few drag offsets, slow and flicked.

Run:
    python plot_behaviours.py
"""

from __future__ import annotations

import numpy as np
import matplotlib.pyplot as plt

from animated_position import AnimatedPosition, ContinuousWithMomentum, SnapToPageBoundaries


def record(position: AnimatedPosition, max_seconds: float = 5.0) -> tuple[np.ndarray, np.ndarray]:
    """Tick a released position until it stops, sampling (t, value) per tick."""
    scheduler = position.scheduler
    times = [scheduler()]
    values = [position.get_position()]

    deadline = scheduler() + max_seconds
    while position.is_animating and scheduler() < deadline:
        scheduler.step()
        times.append(scheduler())
        values.append(position.get_position())

    return np.asarray(times), np.asarray(values)


def drag(position: AnimatedPosition, offset: float, duration: float, samples: int = 10) -> None:
    scheduler = position.scheduler
    position.begin_drag()
    for i in range(1, samples + 1):
        scheduler.advance(duration / samples)
        position.drag(offset * i / samples)
    position.end_drag()


def main() -> None:
    fig, (ax_momentum, ax_snap) = plt.subplots(2, 1, figsize=(8.5, 8.0))

    for friction in (0.02, 0.05, 0.08, 0.15):
        behaviour = ContinuousWithMomentum()
        behaviour.set_friction(friction)
        position = AnimatedPosition.manual(behaviour)
        drag(position, offset=10.0, duration=0.1)
        t, x = record(position)
        ax_momentum.plot(t, x, linewidth=2, label=f"friction={friction}")

    ax_momentum.set_title("ContinuousWithMomentum after a 10-unit fling in 0.1 s")
    ax_momentum.set_ylabel("position")
    ax_momentum.grid(True, alpha=0.25)
    ax_momentum.legend(loc="best")

    for offset, duration in ((0.3, 0.1), (0.3, 2.0), (0.7, 2.0), (-0.3, 0.1)):
        position = AnimatedPosition.manual(SnapToPageBoundaries())
        drag(position, offset=offset, duration=duration)
        t, x = record(position)
        ax_snap.plot(t, x, linewidth=2, label=f"drag {offset:+.1f} in {duration:.1f} s")

    ax_snap.set_title("SnapToPageBoundaries")
    ax_snap.set_xlabel("t (s)")
    ax_snap.set_ylabel("position")
    ax_snap.grid(True, alpha=0.25)
    ax_snap.legend(loc="best")

    plt.tight_layout()

    out = "behaviours.png"
    plt.savefig(out, dpi=160)
    print(f"Saved: {out}")


if __name__ == "__main__":
    main()
