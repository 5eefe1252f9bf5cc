"""
Shared fakes for the animated_position tests.

FakeEventLoop mimics the part of the GrADyS-SIM NG EventLoop the package uses
(`current_time` and `schedule_event`) and can be run up to a given time.
"""

import heapq
import itertools

import pytest

from animated_position import AnimatedPosition, ContinuousWithMomentum


class FakeEventLoop:
    def __init__(self):
        self.current_time = 0.0
        self._heap = []
        self._counter = itertools.count()
        self.scheduled = []

    def schedule_event(self, timestamp, callback, context=""):
        self.scheduled.append((timestamp, context))
        heapq.heappush(self._heap, (timestamp, next(self._counter), callback))

    def pending(self):
        return len(self._heap)

    def run_until(self, time):
        while self._heap and self._heap[0][0] <= time:
            timestamp, _, callback = heapq.heappop(self._heap)
            self.current_time = timestamp
            callback()
        self.current_time = time


class FakeProtocolEncapsulator:
    def __init__(self):
        self.telemetry = []

    def handle_telemetry(self, telemetry):
        self.telemetry.append(telemetry)


class FakeNode:
    def __init__(self, node_id, position):
        self.id = node_id
        self.position = position
        self.protocol_encapsulator = FakeProtocolEncapsulator()


class RecordingListener:
    def __init__(self):
        self.calls = []

    def position_changed(self, animated_position, new_position):
        self.calls.append((animated_position, new_position))

    @property
    def values(self):
        return [value for _, value in self.calls]


class ScriptedBehaviour:
    """Behaviour that steps by a fixed amount and stops after a number of ticks."""

    def __init__(self, step=1.0, ticks_until_stop=3):
        self.step = step
        self.ticks_until_stop = ticks_until_stop
        self.releases = []
        self.next_position_calls = []

    def released_with_velocity(self, position, velocity):
        self.releases.append((position, velocity))

    def get_next_position(self, current_position, elapsed_seconds):
        self.next_position_calls.append((current_position, elapsed_seconds))
        return current_position + self.step

    def is_stopped(self, position):
        return len(self.next_position_calls) >= self.ticks_until_stop


@pytest.fixture
def event_loop():
    return FakeEventLoop()


@pytest.fixture
def listener():
    return RecordingListener()


@pytest.fixture
def momentum_position():
    return AnimatedPosition.manual(ContinuousWithMomentum())
