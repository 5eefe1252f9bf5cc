"""Centralized parameter/config constants for the demo scripts.

This module is the single source of truth for the parameters shared by
main.py, protocol.py and the plotting scripts.
"""

# --------------------------------------------------------------------------------------
# 1) Simulation framework (timing)
# --------------------------------------------------------------------------------------

SIM_DURATION: float = 20            # Simulation duration (seconds)
SIM_REAL_TIME: bool = False         # Run in real time
SIM_DEBUG: bool = False             # Enable simulator debug mode

# Timer IDs (string keys used by the simulator)
GESTURE_TIMER_STR: str = "gesture_timer"

# --------------------------------------------------------------------------------------
# 2) Visualization
# --------------------------------------------------------------------------------------

VIS_ENABLED: bool = False           # Add the GrADyS visualization handler
VIS_OPEN_BROWSER: bool = True       # Open the visualization in a browser
VIS_UPDATE_RATE: float = 0.1        # Visualization update period (seconds)

# --------------------------------------------------------------------------------------
# 3) Animated position (AnimatedPositionHandler)
# --------------------------------------------------------------------------------------

AP_AXIS: int = 0                    # Node coordinate driven by the drag (0 = x)
AP_LIMIT_MIN: float = -100.0        # Lower limit of the coordinate (m)
AP_LIMIT_MAX: float = 100.0         # Upper limit of the coordinate (m)
AP_BEHAVIOUR: str = "momentum"      # "momentum" or "snap"
AP_FRICTION: float = 0.08           # ContinuousWithMomentum friction per tick
AP_MIN_VELOCITY: float = 0.05       # ContinuousWithMomentum stop speed (m/s)
AP_SNAP_SPEED: float = 10.0         # SnapToPageBoundaries gain (1/s)
AP_SEND_TELEMETRY: bool = True      # Report every change to the protocol

# --------------------------------------------------------------------------------------
# 4) Scripted gestures (protocol.py)
# --------------------------------------------------------------------------------------

# Drag sample period, like a 60 Hz pointer device (seconds)
GESTURE_SAMPLE_PERIOD: float = 1.0 / 60.0

# Each gesture: (start time s, kind, amount, duration s)
# - "drag": drag by `amount` over `duration`, then release
# - "nudge": a single wheel step of `amount` (duration ignored)
# - "set": jump to `amount` (duration ignored)
GESTURES: list[tuple[float, str, float, float]] = [
    (1.0, "drag", 20.0, 0.25),
    (5.0, "drag", -5.0, 2.0),
    (9.0, "nudge", 3.0, 0.0),
    (9.05, "nudge", 3.0, 0.0),
    (12.0, "drag", -60.0, 0.15),
    (17.0, "set", 0.0, 0.0),
]

# --------------------------------------------------------------------------------------
# 5) Output
# --------------------------------------------------------------------------------------

TRAJECTORY_CSV: str = "trajectory.csv"
