# MIT License (see LICENSE)
"""
Core physics of the falling body.

This subpackage provides:
    - Force generators: gravity and quadratic air drag.
    - Integrators: initial state and the fixed-step semi-implicit Euler advance.
    - Invariants: analytic terminal velocity and kinetic energy for checks.

Typical usage:
    from dragfall.core import initialize, advance

    state = initialize(params)
    state = advance(state, params, fixed_step=0.05)
"""
from .forces import (
    cross_section_area,
    gravity_force,
    drag_force,
    net_acceleration,
)
from .integrators import initialize, advance
from .invariants import terminal_velocity, kinetic_energy

__all__ = [
    # Forces
    "cross_section_area",
    "gravity_force",
    "drag_force",
    "net_acceleration",
    # Integrators
    "initialize",
    "advance",
    # Invariants
    "terminal_velocity",
    "kinetic_energy",
]
