"""
Animated-position handler for GrADyS-SIM NG.

This handler gives every registered node one draggable coordinate. Protocols
drag, nudge or set that coordinate through the node's AnimatedPosition, and
the configured behaviour keeps the node moving after release. Each change is
written back to the node's position and optionally reported as telemetry.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, Optional, Tuple

from gradysim.simulator.event import EventLoop
from gradysim.simulator.node import Node
from gradysim.simulator.handler.interface import INodeHandler
from gradysim.protocol.messages.telemetry import Telemetry

from .behaviours import Behaviour, ContinuousWithMomentum
from .config import AnimatedPositionConfiguration
from .core import UNBOUNDED, Limits
from .position import AnimatedPosition


logger = logging.getLogger(__name__)


@dataclass
class AnimatedPositionHandlerConfiguration:
    """
    Configuration parameters for the AnimatedPositionHandler.

    Attributes:
        axis: Index of the node coordinate driven by the animated position
            (0 = x, 1 = y, 2 = z).
        limits: Range the coordinate is constrained to.
        behaviour_factory: Called once per node to create its behaviour.
        position_config: Timing parameters of every AnimatedPosition.
        send_telemetry: If True, deliver a Telemetry message to the node's
            protocol after every change.
    """
    axis: int = 0
    limits: Limits = UNBOUNDED
    behaviour_factory: Callable[[], Behaviour] = ContinuousWithMomentum
    position_config: AnimatedPositionConfiguration = field(default_factory=AnimatedPositionConfiguration)
    send_telemetry: bool = True

    def __post_init__(self):
        if self.axis not in (0, 1, 2):
            raise ValueError("axis must be 0, 1 or 2")


class _NodeCoordinateListener:
    """Writes AnimatedPosition changes into one coordinate of a node."""

    def __init__(self, handler: "AnimatedPositionHandler", node: Node):
        self._handler = handler
        self._node = node

    def position_changed(self, animated_position: AnimatedPosition, new_position: float) -> None:
        self._handler._apply_coordinate(self._node, new_position)


class AnimatedPositionHandler(INodeHandler):
    """
    Drag-and-release mobility handler for GrADyS-SIM NG.

    Usage:
        handler = AnimatedPositionHandler(
            AnimatedPositionHandlerConfiguration(axis=0, limits=Limits(-50.0, 50.0))
        )
        builder.add_handler(handler)

        # In your protocol:
        position = handler.get_animated_position(node_id)
        position.begin_drag()
        position.drag(10.0)
        position.end_drag()
    """

    def __init__(self, config: Optional[AnimatedPositionHandlerConfiguration] = None):
        self._config = config or AnimatedPositionHandlerConfiguration()
        self._loop: EventLoop = None
        self._nodes: Dict[int, Node] = {}
        self._positions: Dict[int, AnimatedPosition] = {}
        self._listeners: Dict[int, _NodeCoordinateListener] = {}

    def get_label(self) -> str:
        return "AnimatedPositionHandler"

    def register_node(self, node: Node):
        self._nodes[node.id] = node

    def inject(self, event_loop: EventLoop):
        self._loop = event_loop

    def initialize(self):
        for node_id in self._nodes:
            self.get_animated_position(node_id)

    def handle_timer(self, timer: str):
        pass

    def handle_packet(self, message: str):
        pass

    def finish(self):
        pass

    def finalize(self):
        for position in self._positions.values():
            position.scheduler.stop()

    def after_simulation_step(self, iteration: int, time: float):
        pass

    def get_animated_position(self, node_id: int) -> Optional[AnimatedPosition]:
        """
        Return the AnimatedPosition of a node, creating it on first access.

        Returns:
            The node's AnimatedPosition, or None if the node is not registered.
        """
        position = self._positions.get(node_id)
        if position is not None:
            return position

        node = self._nodes.get(node_id)
        if node is None:
            return None
        if self._loop is None:
            raise RuntimeError("AnimatedPositionHandler used before an event loop was injected")

        position = AnimatedPosition.from_event_loop(
            self._loop,
            self._config.behaviour_factory(),
            config=self._config.position_config,
            label=f"Node {node_id} animated position",
        )
        listener = _NodeCoordinateListener(self, node)
        position.add_listener(listener)
        self._positions[node_id] = position
        self._listeners[node_id] = listener

        # Out-of-range starting coordinates are clamped onto the node here.
        position.set_limits(self._config.limits)
        position.set_position(node.position[self._config.axis])

        logger.debug("Node %s: animated position created on axis %d", node_id, self._config.axis)
        return position

    def get_node_position(self, node_id: int) -> Tuple[float, float, float] | None:
        node = self._nodes.get(node_id)
        return node.position if node is not None else None

    def _apply_coordinate(self, node: Node, value: float) -> None:
        coordinates = list(node.position)
        coordinates[self._config.axis] = value
        node.position = tuple(coordinates)

        if self._config.send_telemetry:
            self._emit_telemetry(node)

    def _emit_telemetry(self, node: Node):
        telemetry = Telemetry(current_position=node.position)

        def send_telemetry():
            node.protocol_encapsulator.handle_telemetry(telemetry)

        self._loop.schedule_event(
            self._loop.current_time,
            send_telemetry,
            f"Node {node.id} handle_telemetry",
        )
