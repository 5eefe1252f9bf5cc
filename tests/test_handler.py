"""
Tests for the GrADyS-SIM NG AnimatedPositionHandler.

Nodes and the event loop are replaced by the fakes in conftest.py.
"""

import pytest
from animated_position import (
    AnimatedPositionHandler,
    AnimatedPositionHandlerConfiguration,
    Limits,
    SnapToPageBoundaries,
)
from conftest import FakeNode


def make_handler(event_loop, nodes, **config):
    handler = AnimatedPositionHandler(AnimatedPositionHandlerConfiguration(**config))
    handler.inject(event_loop)
    for node in nodes:
        handler.register_node(node)
    handler.initialize()
    return handler


class TestAnimatedPositionHandler:
    """Test node registration and coordinate write-back."""

    def test_label(self):
        assert AnimatedPositionHandler().get_label() == "AnimatedPositionHandler"

    def test_invalid_axis(self):
        """Only x, y and z can be driven."""
        with pytest.raises(ValueError):
            AnimatedPositionHandlerConfiguration(axis=3)

    def test_position_seeded_from_node(self, event_loop):
        """The animated position starts at the node's coordinate."""
        node = FakeNode(1, (4.0, 5.0, 6.0))
        handler = make_handler(event_loop, [node], axis=1)
        assert handler.get_animated_position(1).get_position() == 5.0
        assert node.position == (4.0, 5.0, 6.0)

    def test_unknown_node(self, event_loop):
        """Unregistered nodes have no animated position."""
        handler = make_handler(event_loop, [])
        assert handler.get_animated_position(99) is None
        assert handler.get_node_position(99) is None

    def test_requires_event_loop(self):
        """Accessing a position before inject() is an error."""
        handler = AnimatedPositionHandler()
        handler.register_node(FakeNode(1, (0.0, 0.0, 0.0)))
        with pytest.raises(RuntimeError):
            handler.get_animated_position(1)

    def test_same_instance_returned(self, event_loop):
        """The position of a node is created once."""
        handler = make_handler(event_loop, [FakeNode(1, (0.0, 0.0, 0.0))])
        assert handler.get_animated_position(1) is handler.get_animated_position(1)

    def test_drag_moves_node(self, event_loop):
        """Dragging writes the new coordinate into the node position."""
        node = FakeNode(1, (1.0, 2.0, 3.0))
        handler = make_handler(event_loop, [node], axis=0)
        position = handler.get_animated_position(1)

        position.begin_drag()
        position.drag(4.0)

        assert node.position == (5.0, 2.0, 3.0)
        assert handler.get_node_position(1) == (5.0, 2.0, 3.0)

    def test_start_clamped_into_limits(self, event_loop):
        """A node starting outside the limits is moved onto them."""
        node = FakeNode(1, (0.0, 0.0, 80.0))
        make_handler(event_loop, [node], axis=2, limits=Limits(0.0, 50.0))
        assert node.position == (0.0, 0.0, 50.0)

    def test_telemetry_delivered(self, event_loop):
        """Each change schedules a telemetry delivery to the protocol."""
        node = FakeNode(7, (0.0, 0.0, 0.0))
        handler = make_handler(event_loop, [node])
        handler.get_animated_position(7).set_position(3.0)

        event_loop.run_until(event_loop.current_time)

        assert len(node.protocol_encapsulator.telemetry) == 1
        assert node.protocol_encapsulator.telemetry[0].current_position == (3.0, 0.0, 0.0)
        assert ("Node 7 handle_telemetry" in [context for _, context in event_loop.scheduled])

    def test_telemetry_disabled(self, event_loop):
        """send_telemetry=False suppresses deliveries."""
        node = FakeNode(7, (0.0, 0.0, 0.0))
        handler = make_handler(event_loop, [node], send_telemetry=False)
        handler.get_animated_position(7).set_position(3.0)
        event_loop.run_until(1.0)
        assert node.protocol_encapsulator.telemetry == []

    def test_snap_behaviour_settles_node(self, event_loop):
        """Released nodes keep moving on the loop until the behaviour stops."""
        node = FakeNode(1, (0.0, 0.0, 0.0))
        handler = make_handler(
            event_loop,
            [node],
            behaviour_factory=SnapToPageBoundaries,
            send_telemetry=False,
        )
        position = handler.get_animated_position(1)

        position.begin_drag()
        event_loop.run_until(0.1)
        position.drag(0.3)
        position.end_drag()
        event_loop.run_until(5.0)

        assert not position.is_animating
        assert node.position == (0.0, 0.0, 0.0)

    def test_each_node_has_own_behaviour(self, event_loop):
        """behaviour_factory is called once per node."""
        handler = make_handler(
            event_loop,
            [FakeNode(1, (0.0, 0.0, 0.0)), FakeNode(2, (0.0, 0.0, 0.0))],
            behaviour_factory=SnapToPageBoundaries,
        )
        assert handler.get_animated_position(1).behaviour is not handler.get_animated_position(2).behaviour

    def test_finalize_stops_motion(self, event_loop):
        """finalize() stops every running trajectory."""
        handler = make_handler(event_loop, [FakeNode(1, (0.0, 0.0, 0.0))])
        position = handler.get_animated_position(1)
        position.nudge(1.0)
        assert position.is_animating
        handler.finalize()
        assert not position.is_animating
