# MIT License (see LICENSE)
"""
Analytic reference quantities for verifying the integrator.

The stepped solution should approach terminal velocity from below and never
exceed it by more than the discretisation error of one step.
"""
from __future__ import annotations
import math

from ..constants import G, AIR_DENSITY
from ..types import SimulationParameters, SimulationState
from .forces import cross_section_area


def terminal_velocity(params: SimulationParameters) -> float:
    """
    Speed at which drag balances gravity.

    v_t = sqrt(2·m·g / (Cd·ρ·A))

    Returns:
        Terminal velocity in m/s, or math.inf when there is no drag.
    """
    k = 0.5 * params.drag_coefficient * AIR_DENSITY * cross_section_area(params.radius)
    if k <= 0:
        return math.inf
    return math.sqrt(params.mass * G / k)


def kinetic_energy(state: SimulationState, params: SimulationParameters) -> float:
    """Kinetic energy T = ½·m·v² in Joules."""
    return 0.5 * params.mass * state.velocity * state.velocity
