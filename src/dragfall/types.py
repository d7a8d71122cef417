# MIT License (see LICENSE)
"""
Core type definitions for the falling-body simulation.

Defines the fundamental data structures:
- SimulationParameters: mass, radius and drag coefficient of one run.
- SimulationState: the live kinematic state advanced by the integrator.
- Snapshot: one immutable entry of the replay history.
- RunControlState: the run-control state machine of a Session.

All records are frozen: the integrator returns a new state on every
advance, and observers can hold on to what they receive.
"""
from __future__ import annotations
import math
from dataclasses import dataclass
from enum import Enum


class InvalidParameters(ValueError):
    """Raised when simulation parameters are outside their physical range."""


# =============================================================================
# Parameters
# =============================================================================

@dataclass(frozen=True)
class SimulationParameters:
    """
    Physical parameters of the falling sphere, fixed for one run.

    Attributes:
        mass: Mass in kg. Must be > 0.
        radius: Radius in meters. Must be > 0.
        drag_coefficient: Dimensionless drag coefficient Cd. Must be >= 0;
                          0 gives free fall without air resistance.
    """
    mass: float = 1.0
    radius: float = 0.5
    drag_coefficient: float = 0.47

    def validate(self) -> None:
        """
        Check that the parameters describe a physical body.

        Raises:
            InvalidParameters: If mass or radius is not strictly positive,
                the drag coefficient is negative, or any value is not finite.
        """
        for name in ("mass", "radius", "drag_coefficient"):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise InvalidParameters(f"{name} must be finite, got {value}")
        if self.mass <= 0:
            raise InvalidParameters(f"mass must be positive, got {self.mass}")
        if self.radius <= 0:
            raise InvalidParameters(f"radius must be positive, got {self.radius}")
        if self.drag_coefficient < 0:
            raise InvalidParameters(
                f"drag_coefficient must be non-negative, got {self.drag_coefficient}"
            )


# =============================================================================
# State
# =============================================================================

@dataclass(frozen=True)
class SimulationState:
    """
    Kinematic state of the body at one instant.

    Attributes:
        velocity: Signed speed in m/s; positive points towards the ground.
        displacement: Cumulative fall distance since reset in meters.
        elapsed_time: Simulated time since reset in seconds.
    """
    velocity: float = 0.0
    displacement: float = 0.0
    elapsed_time: float = 0.0

    def snapshot(self) -> "Snapshot":
        """Return the history record for this state."""
        return Snapshot(
            velocity=self.velocity,
            displacement=self.displacement,
            elapsed_time=self.elapsed_time,
        )


@dataclass(frozen=True)
class Snapshot:
    """Recorded (velocity, displacement, elapsed_time) triple."""
    velocity: float
    displacement: float
    elapsed_time: float


class RunControlState(Enum):
    """Run-control states of a Session."""
    IDLE = "idle"
    PLAYING = "playing"
    PAUSED = "paused"
    TERMINATED = "terminated"
