"""
Protocol replaying scripted drag gestures through AnimatedPositionHandler.

Gestures are turned into timestamped steps (begin, drag samples, release,
nudges) and replayed with timers. Every telemetry update is recorded, and
the trajectory is written to CSV when the simulation ends.
"""

import logging
import os

import pandas as pd
from gradysim.protocol.interface import IProtocol
from gradysim.protocol.messages.telemetry import Telemetry

from config_param import (
    AP_AXIS,
    GESTURE_SAMPLE_PERIOD,
    GESTURE_TIMER_STR,
    GESTURES,
    TRAJECTORY_CSV,
)


def build_gesture_steps(gestures, sample_period):
    """
    Expand gestures into (time, action, value) steps sorted by time.

    Drags become a begin step, one absolute-offset sample per period and an
    end step, so the animated position sees the same calls a pointer
    device would produce.
    """
    steps = []
    for start, kind, amount, duration in gestures:
        if kind == "drag":
            samples = max(1, int(round(duration / sample_period)))
            steps.append((start, "begin", 0.0))
            for i in range(1, samples + 1):
                steps.append((start + i * sample_period, "drag", amount * i / samples))
            steps.append((start + samples * sample_period, "end", 0.0))
        elif kind in ("nudge", "set"):
            steps.append((start, kind, amount))
        else:
            raise ValueError(f"Unknown gesture kind: {kind!r}")
    return sorted(steps, key=lambda step: step[0])


class GestureProtocol(IProtocol):
    """Protocol that drags its node through AnimatedPositionHandler."""

    def __init__(self):
        super().__init__()
        self._logger = logging.getLogger()
        self.node_id = None
        self.animated_handler = None
        self.animated_position = None
        self.df = None
        self._steps = []
        self._step_index = 0

    def initialize(self):
        """Look up the handler and schedule the first gesture step."""
        self.node_id = self.provider.get_id()

        handlers = getattr(self.provider, "handlers", {}) or {}
        self.animated_handler = handlers.get("AnimatedPositionHandler")
        if self.animated_handler is None:
            self._logger.warning("Node %s: AnimatedPositionHandler not found", self.node_id)
            return

        self.animated_position = self.animated_handler.get_animated_position(self.node_id)
        self.df = pd.DataFrame(columns=["t", "value", "release_velocity", "animating"])
        self._record()

        self._steps = build_gesture_steps(GESTURES, GESTURE_SAMPLE_PERIOD)
        self._step_index = 0
        self._schedule_next_step()

    def _schedule_next_step(self):
        if self._step_index < len(self._steps):
            t, _, _ = self._steps[self._step_index]
            self.provider.schedule_timer(GESTURE_TIMER_STR, max(t, self.provider.current_time()))

    def handle_timer(self, timer: str):
        """Apply every gesture step that is due."""
        if timer != GESTURE_TIMER_STR or self.animated_position is None:
            return

        now = self.provider.current_time()
        while self._step_index < len(self._steps) and self._steps[self._step_index][0] <= now:
            _, action, value = self._steps[self._step_index]
            self._apply_step(action, value)
            self._step_index += 1

        self._schedule_next_step()

    def _apply_step(self, action: str, value: float):
        self._logger.debug("Node %s: gesture %s %r", self.node_id, action, value)
        position = self.animated_position
        if action == "begin":
            position.begin_drag()
        elif action == "drag":
            position.drag(value)
        elif action == "end":
            position.end_drag()
        elif action == "nudge":
            position.nudge(value)
        elif action == "set":
            position.set_position(value)

    def handle_packet(self, message: str):
        """Handle incoming packets."""
        pass

    def handle_telemetry(self, telemetry: Telemetry) -> None:
        """Record every change reported by the handler."""
        self._record()

    def _record(self):
        if self.df is None or self.animated_position is None:
            return
        self.df.loc[len(self.df)] = [
            self.provider.current_time(),
            self.animated_position.get_position(),
            self.animated_position.release_velocity,
            self.animated_position.is_animating,
        ]

    def finish(self):
        """Print a summary and write the trajectory CSV."""
        if self.df is None or self.df.empty:
            return

        final_position = self.animated_handler.get_node_position(self.node_id)

        print()
        print("=" * 60)
        print("SIMULATION RESULTS")
        print("=" * 60)
        print(f"Node {self.node_id}")
        print(f"  Samples recorded:  {len(self.df)}")
        print(f"  Value range:       [{self.df['value'].min():.2f}, {self.df['value'].max():.2f}]")
        print(f"  Peak |velocity|:   {self.df['release_velocity'].abs().max():.2f} m/s")
        if final_position is not None:
            print(f"  Final coordinate:  {final_position[AP_AXIS]:.2f}")
        print("=" * 60)

        script_dir = os.path.dirname(os.path.abspath(__file__))
        csv_path = os.path.join(script_dir, TRAJECTORY_CSV)
        self.df.assign(node_id=self.node_id).to_csv(csv_path, index=False)
        print(f"Trajectory written to {csv_path}")
