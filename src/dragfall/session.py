# MIT License (see LICENSE)
"""
The simulation session and its run control.

The Session owns one simulation run and acts as its controller.
It manages:
- The body parameters and the live SimulationState.
- The HistoryLog of recorded snapshots.
- The run-control state machine (Idle, Playing, Paused, Terminated).
- The continuous-play cadence.
- Publishing a Frame to every observer after each reset and advance.

Structure:
    - User creates a Session (optionally with parameters and a cadence).
    - Observers subscribe to receive Frames.
    - UI triggers call reset(), step(), play() and pause().

The ground check compares the rendered lower edge of the body against a
pixel-space ground line, as the visualization draws it. It is evaluated
before every advance (a crossing step is withheld) and after every advance.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Callable

from .constants import (
    FIXED_STEP,
    TICK_INTERVAL,
    PX_PER_METER,
    START_OFFSET_PX,
    GROUND_PX,
    PIXEL_RADIUS_SCALE,
)
from .types import (
    SimulationParameters,
    SimulationState,
    Snapshot,
    RunControlState,
)
from .history import HistoryLog
from .cadence import Cadence, CadenceHandle, ManualCadence
from .core.forces import gravity_force, drag_force
from .core.integrators import initialize, advance

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionConfig:
    """
    Timing and display mapping of a Session.

    Attributes:
        fixed_step: Simulated seconds per advance.
        tick_interval: Wall-clock seconds between ticks while playing.
        px_per_meter: Screen pixels per meter of displacement.
        start_offset_px: Screen y of the body centre at displacement 0.
        ground_px: Screen y of the ground line.
        pixel_radius_scale: Rendered pixels per meter of body radius.
    """
    fixed_step: float = FIXED_STEP
    tick_interval: float = TICK_INTERVAL
    px_per_meter: float = PX_PER_METER
    start_offset_px: float = START_OFFSET_PX
    ground_px: float = GROUND_PX
    pixel_radius_scale: float = PIXEL_RADIUS_SCALE

    def __post_init__(self) -> None:
        if self.fixed_step <= 0:
            raise ValueError(f"fixed_step must be positive, got {self.fixed_step}")
        if self.tick_interval <= 0:
            raise ValueError(f"tick_interval must be positive, got {self.tick_interval}")

    def screen_position(self, displacement: float) -> float:
        """Screen y of the body centre for a displacement in meters."""
        return self.start_offset_px + displacement * self.px_per_meter

    def lower_edge(self, displacement: float, radius: float) -> float:
        """Screen y of the bottom of the rendered body."""
        return self.screen_position(displacement) + radius * self.pixel_radius_scale


@dataclass(frozen=True)
class Frame:
    """
    State published to observers.

    Attributes:
        velocity: Velocity in m/s.
        elapsed_time: Simulated time in s.
        displacement: Cumulative fall distance in m.
        screen_position: Screen y of the body centre in px.
        gravity_force: Weight of the body in N.
        drag_force: Drag magnitude at the current velocity in N.
        radius: Body radius in m, for drawing.
        run_state: Run-control state at publication time.
    """
    velocity: float
    elapsed_time: float
    displacement: float
    screen_position: float
    gravity_force: float
    drag_force: float
    radius: float
    run_state: RunControlState


Observer = Callable[[Frame, tuple[Snapshot, ...]], None]


class Session:
    """
    Controller for one falling-body run.

    Parameters and config are read-only; new parameters only enter through
    reset(), which validates them first.

    Args:
        params: Body parameters of the first run.
        config: Timing and display mapping.
        cadence: Tick source for play(). Defaults to a ManualCadence, which
                 only ticks when advanced; pass an AsyncioCadence to play
                 in real time.

    Raises:
        InvalidParameters: If the initial parameters are out of range.
    """

    def __init__(
        self,
        params: SimulationParameters | None = None,
        config: SessionConfig | None = None,
        cadence: Cadence | None = None,
    ) -> None:
        params = params if params is not None else SimulationParameters()
        params.validate()
        self._params = params
        self._config = config if config is not None else SessionConfig()
        self.cadence: Cadence = cadence if cadence is not None else ManualCadence()
        self._state: SimulationState = initialize(params)
        self._history = HistoryLog(self._state.snapshot())
        self._run_state = RunControlState.IDLE
        self._timer: CadenceHandle | None = None
        self._observers: list[Observer] = []

    # -------------------------------------------------------------------------
    # Read-only views
    # -------------------------------------------------------------------------

    @property
    def state(self) -> SimulationState:
        """Current simulation state (immutable)."""
        return self._state

    @property
    def run_state(self) -> RunControlState:
        return self._run_state

    @property
    def history(self) -> tuple[Snapshot, ...]:
        """All recorded snapshots, oldest first."""
        return self._history.snapshots()

    @property
    def params(self) -> SimulationParameters:
        """Body parameters of the current run."""
        return self._params

    @property
    def config(self) -> SessionConfig:
        return self._config

    @property
    def screen_position(self) -> float:
        return self.config.screen_position(self._state.displacement)

    def ground_reached(self) -> bool:
        """True once the rendered lower edge touches or passes the ground."""
        edge = self.config.lower_edge(self._state.displacement, self.params.radius)
        return edge >= self.config.ground_px

    def frame(self) -> Frame:
        """Build the Frame describing the current state."""
        return Frame(
            velocity=self._state.velocity,
            elapsed_time=self._state.elapsed_time,
            displacement=self._state.displacement,
            screen_position=self.screen_position,
            gravity_force=gravity_force(self.params),
            drag_force=abs(drag_force(self.params, self._state.velocity)),
            radius=self.params.radius,
            run_state=self._run_state,
        )

    # -------------------------------------------------------------------------
    # Observers
    # -------------------------------------------------------------------------

    def subscribe(self, observer: Observer) -> None:
        """
        Register an observer and send it the current frame.

        Args:
            observer: Callable taking (frame, history).
        """
        self._observers.append(observer)
        observer(self.frame(), self.history)

    def unsubscribe(self, observer: Observer) -> None:
        """Remove an observer. Unknown observers are ignored."""
        if observer in self._observers:
            self._observers.remove(observer)

    def _publish(self) -> None:
        frame = self.frame()
        history = self.history
        for observer in list(self._observers):
            observer(frame, history)

    # -------------------------------------------------------------------------
    # Control commands
    # -------------------------------------------------------------------------

    def reset(self, params: SimulationParameters | None = None) -> None:
        """
        Start a fresh run, optionally with new parameters.

        Validation happens before anything changes: on failure the current
        run, its history and any active cadence are left as they were.

        Args:
            params: New body parameters. Defaults to the current ones.

        Raises:
            InvalidParameters: If the parameters are out of range.
        """
        params = self.params if params is None else params
        try:
            params.validate()
        except ValueError:
            logger.warning(f"Rejected reset with {params}")
            raise

        self._cancel_timer()
        self._params = params
        self._state = initialize(params)
        self._history.reset(self._state.snapshot())
        self._run_state = RunControlState.IDLE
        logger.info(
            f"Session reset: mass={params.mass} kg, radius={params.radius} m, "
            f"Cd={params.drag_coefficient}"
        )
        self._publish()

    def step(self) -> bool:
        """Advance by a single step. Alias of advance_one() for UI triggers."""
        return self.advance_one()

    def advance_one(self) -> bool:
        """
        Advance the simulation by one fixed step if the body is still falling.

        If the body has already reached the ground the step is withheld and
        the session becomes Terminated. After a successful step the ground
        check runs again so the run terminates as soon as the body lands.

        Returns:
            True if a step was executed.
        """
        if self._run_state is RunControlState.TERMINATED:
            return False
        if self.ground_reached():
            self._terminate()
            return False

        self._state = advance(self._state, self.params, self.config.fixed_step)
        self._history.append(self._state.snapshot())
        logger.debug(
            f"t={self._state.elapsed_time:.2f} s v={self._state.velocity:.4f} m/s "
            f"s={self._state.displacement:.4f} m"
        )

        if self.ground_reached():
            self._terminate()
        else:
            self._publish()
        return True

    def play(self) -> None:
        """
        Start advancing continuously at the configured tick interval.

        No-op while already playing or after termination.
        """
        if self._run_state in (RunControlState.PLAYING, RunControlState.TERMINATED):
            return
        if self.ground_reached():
            self._terminate()
            return
        self._run_state = RunControlState.PLAYING
        self._timer = self.cadence.start(self.config.tick_interval, self._tick)
        logger.info(f"Playing at t={self._state.elapsed_time:.2f} s")

    def pause(self) -> None:
        """Stop continuous play, keeping state and history. No-op unless playing."""
        if self._run_state is not RunControlState.PLAYING:
            return
        self._cancel_timer()
        self._run_state = RunControlState.PAUSED
        logger.info(f"Paused at t={self._state.elapsed_time:.2f} s")

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _tick(self) -> None:
        self.advance_one()

    def _terminate(self) -> None:
        self._cancel_timer()
        self._run_state = RunControlState.TERMINATED
        logger.info(
            f"Ground reached at t={self._state.elapsed_time:.2f} s, "
            f"v={self._state.velocity:.3f} m/s"
        )
        self._publish()

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
