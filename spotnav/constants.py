from __future__ import annotations

from math import pi, radians

# Light spot
LIGHT_RADIUS_M: float = 0.2

# Track following
TRACK_LOOKAHEAD: int = 20  # samples scanned for the first one inside the spot

# Command limits (speed is normalized, turn rate in rad/s, clockwise positive)
MAX_SPEED: float = 1.0
MAX_TURN_RATE: float = pi / 2.0
PIVOT_SPEED: float = 0.0

# Point approach
CLOSING_SCALE: float = 0.95
HEADING_DEADBAND_RAD: float = radians(5.0)
SIDE_DEADBAND_RAD: float = pi / 3.0
REAR_ANGLE_RAD: float = 3.0 * pi / 4.0
REVERSE_REACH: float = 2.0  # in light radii behind the docking point
DISTANCE_GAIN: float = 0.5

# Intersection
DISCRIMINANT_TOL: float = 1e-9
