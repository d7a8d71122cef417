# MIT License (see LICENSE)
"""
dragfall - A falling-body simulation with quadratic air drag.

This package integrates the one-dimensional fall of a sphere under gravity
and air resistance with a fixed-step semi-implicit Euler scheme, and wraps
it in a session controller with replay history and play/pause/step control.

Main entry points:
    - Session: Controller for one run (reset, step, play, pause).
    - SimulationParameters: Mass, radius and drag coefficient of the body.
    - SessionConfig: Time step, tick interval and pixel mapping.
    - AsyncioCadence, ManualCadence: Tick sources for continuous play.

Submodules:
    - core: Forces, integrator and analytic invariants.
    - renderer: Observer adapters for drawing and charting.
    - io: JSON configuration and history export.

Example:
    from dragfall import Session, SimulationParameters

    session = Session(SimulationParameters(mass=1.0, radius=0.5, drag_coefficient=0.47))
    while session.step():
        pass
    print(session.state)
"""
from .types import (
    SimulationParameters,
    SimulationState,
    Snapshot,
    RunControlState,
    InvalidParameters,
)
from .session import Session, SessionConfig, Frame
from .history import HistoryLog
from .cadence import AsyncioCadence, ManualCadence, CadenceHandle
from .materials import Material, drag_coefficient_for

__all__ = [
    # Simulation
    "Session",
    "SessionConfig",
    "Frame",
    "HistoryLog",
    # Types
    "SimulationParameters",
    "SimulationState",
    "Snapshot",
    "RunControlState",
    "InvalidParameters",
    # Cadence
    "AsyncioCadence",
    "ManualCadence",
    "CadenceHandle",
    # Materials
    "Material",
    "drag_coefficient_for",
]

__version__ = "0.1.0"
