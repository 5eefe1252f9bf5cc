"""Drag-and-release demo running in a GrADyS-SIM NG simulation.

This script builds a simulation with a single node whose x coordinate is an
AnimatedPosition managed by AnimatedPositionHandler. GestureProtocol replays
scripted drags, wheel nudges and a direct jump (see GESTURES in
config_param.py); after each release the configured behaviour keeps the node
moving until it settles. The recorded trajectory is written to CSV and can be
plotted with plot_trajectory.py.
"""

import logging

# Suppress websockets handshake warnings
logging.getLogger('websockets').setLevel(logging.CRITICAL)

from gradysim.simulator.handler.timer import TimerHandler
from gradysim.simulator.handler.visualization import VisualizationHandler, VisualizationConfiguration
from gradysim.simulator.simulation import SimulationBuilder, SimulationConfiguration
from animated_position import (
    AnimatedPositionHandler,
    AnimatedPositionHandlerConfiguration,
    ContinuousWithMomentum,
    Limits,
    SnapToPageBoundaries,
)
from config_param import (
    AP_AXIS,
    AP_BEHAVIOUR,
    AP_FRICTION,
    AP_LIMIT_MAX,
    AP_LIMIT_MIN,
    AP_MIN_VELOCITY,
    AP_SEND_TELEMETRY,
    AP_SNAP_SPEED,
    SIM_DEBUG,
    SIM_DURATION,
    SIM_REAL_TIME,
    VIS_ENABLED,
    VIS_OPEN_BROWSER,
    VIS_UPDATE_RATE,
)
from protocol import GestureProtocol


def make_momentum() -> ContinuousWithMomentum:
    behaviour = ContinuousWithMomentum(minimum_velocity=AP_MIN_VELOCITY)
    behaviour.set_friction(AP_FRICTION)
    return behaviour


def make_snap() -> SnapToPageBoundaries:
    return SnapToPageBoundaries(snap_speed=AP_SNAP_SPEED)


BEHAVIOUR_PRESETS = {
    "momentum": make_momentum,
    "snap": make_snap,
}


def main():
    """Execute the drag-and-release simulation."""
    builder = SimulationBuilder(
        SimulationConfiguration(
            duration=SIM_DURATION,
            debug=SIM_DEBUG,
            real_time=SIM_REAL_TIME,
        )
    )

    # Add the timer handler (drives the gesture script)
    builder.add_handler(TimerHandler())

    behaviour_factory = BEHAVIOUR_PRESETS.get((AP_BEHAVIOUR or "").strip())
    if behaviour_factory is None:
        valid = ", ".join(sorted(BEHAVIOUR_PRESETS.keys()))
        raise ValueError(f"Unknown AP_BEHAVIOUR={AP_BEHAVIOUR!r}. Valid options: {valid}")

    print(
        "Animated position: "
        f"behaviour={AP_BEHAVIOUR}, axis={AP_AXIS}, "
        f"limits=[{AP_LIMIT_MIN}, {AP_LIMIT_MAX}]"
    )
    handler = AnimatedPositionHandler(
        AnimatedPositionHandlerConfiguration(
            axis=AP_AXIS,
            limits=Limits(AP_LIMIT_MIN, AP_LIMIT_MAX),
            behaviour_factory=behaviour_factory,
            send_telemetry=AP_SEND_TELEMETRY,
        )
    )
    builder.add_handler(handler)

    if VIS_ENABLED:
        vis_config = VisualizationConfiguration(
            open_browser=VIS_OPEN_BROWSER,
            update_rate=VIS_UPDATE_RATE,
        )
        builder.add_handler(VisualizationHandler(vis_config))

    builder.add_node(GestureProtocol, (0, 0, 0))

    simulation = builder.build()
    print("=" * 60)
    print("Starting drag-and-release simulation")
    print("=" * 60)
    try:
        simulation.start_simulation()
    except (BrokenPipeError, EOFError) as e:
        logging.getLogger(__name__).debug(f"Ignored visualization shutdown error: {e}")
    finally:
        print("=" * 60)
        print("Simulation completed!")
        print("=" * 60)


if __name__ == "__main__":
    main()
