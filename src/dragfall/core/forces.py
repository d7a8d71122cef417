# MIT License (see LICENSE)
"""
Force generators for a sphere falling through still air.

The body moves along a single vertical axis with positive values pointing
towards the ground. Two forces act on it:
    - Gravity:  F_g = m·g, always positive (downwards).
    - Drag:     F_d = ½·Cd·ρ·A·v²·sign(v), opposing the motion.

Forces are returned as signed scalars in newtons; the integrator combines
them as F_g - F_d.
"""
from __future__ import annotations
import math

import numpy as np

from ..constants import G, AIR_DENSITY
from ..types import SimulationParameters


def cross_section_area(radius: float) -> float:
    """Frontal area of a sphere, A = π·r² [m²]."""
    return math.pi * radius * radius


def gravity_force(params: SimulationParameters, g: float = G) -> float:
    """Weight of the body, F = m·g [N]."""
    return params.mass * g


def drag_force(
    params: SimulationParameters,
    velocity: float,
    rho: float = AIR_DENSITY,
) -> float:
    """
    Quadratic air drag acting on the body.

    Implements F = ½·Cd·ρ·A·v²·sign(v). The result carries the sign of the
    velocity, so subtracting it from gravity always opposes the motion.
    Exactly zero when the velocity is zero.

    Args:
        params: Body parameters (radius and drag coefficient are used).
        velocity: Signed velocity in m/s.
        rho: Air density in kg/m³.
    """
    area = cross_section_area(params.radius)
    magnitude = 0.5 * params.drag_coefficient * rho * area * velocity * velocity
    return magnitude * float(np.sign(velocity))


def net_acceleration(params: SimulationParameters, velocity: float) -> float:
    """Acceleration a = (F_g - F_d) / m [m/s²]."""
    return (gravity_force(params) - drag_force(params, velocity)) / params.mass
