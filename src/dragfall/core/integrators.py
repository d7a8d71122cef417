# MIT License (see LICENSE)
"""
Fixed-step integrator for the falling body.

The equations of motion along the fall axis are:
    dv/dt = (F_g - F_d(v)) / m
    ds/dt = v

and are stepped with semi-implicit (symplectic) Euler:
    v(t+dt) = v(t) + a(v(t))·dt
    s(t+dt) = s(t) + v(t+dt)·dt

Note that the displacement update uses the already-updated velocity.
Terminal velocity is not special-cased; the scheme approaches it
asymptotically and may overshoot slightly for large dt.

Reference:
    https://en.wikipedia.org/wiki/Semi-implicit_Euler_method
"""
from __future__ import annotations

from ..types import SimulationParameters, SimulationState
from .forces import net_acceleration


def initialize(params: SimulationParameters) -> SimulationState:
    """
    Create the state of a body released from rest at t = 0.

    Parameters are trusted as supplied; the Session validates them first.
    """
    return SimulationState(velocity=0.0, displacement=0.0, elapsed_time=0.0)


def advance(
    state: SimulationState,
    params: SimulationParameters,
    fixed_step: float,
) -> SimulationState:
    """
    Advance the state by one fixed step.

    Args:
        state: Current state (not modified).
        params: Body parameters for this run.
        fixed_step: Simulated time increment in seconds.

    Returns:
        A new SimulationState one step later.
    """
    a = net_acceleration(params, state.velocity)
    velocity = state.velocity + a * fixed_step
    return SimulationState(
        velocity=velocity,
        displacement=state.displacement + velocity * fixed_step,
        elapsed_time=state.elapsed_time + fixed_step,
    )
