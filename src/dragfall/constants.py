# MIT License (see LICENSE)
"""
Physical and display constants used throughout the simulation.

Physical values use SI units. Display values are in screen pixels and
describe how cumulative displacement is mapped onto the rendered scene.
"""
from __future__ import annotations

# Gravitational acceleration near the Earth's surface [m/s²].
G: float = 9.8

# Air density at sea level [kg/m³].
AIR_DENSITY: float = 1.2

# Simulated time advanced by one integrator step [s].
FIXED_STEP: float = 0.05

# Wall-clock period of the continuous-play cadence [s].
TICK_INTERVAL: float = 0.05

# Linear scale from displacement [m] to screen pixels.
PX_PER_METER: float = 1.5

# Screen y-coordinate of the body centre at displacement 0 [px].
START_OFFSET_PX: float = 60.0

# Screen y-coordinate of the ground line [px].
GROUND_PX: float = 870.0

# Rendered body radius per metre of physical radius [px/m].
PIXEL_RADIUS_SCALE: float = 50.0

# Fixed length of the gravity arrow; the drag arrow is scaled against it [px].
GRAVITY_ARROW_PX: float = 60.0

# Below this speed the drag arrow is not drawn [m/s].
DRAG_ARROW_MIN_SPEED: float = 0.01
