# MIT License (see LICENSE)
"""
Renderer adapters for falling-body visualization.

This module provides an abstract base class for rendering and concrete
text and buffering implementations. A renderer is a Session observer:
it is called with every published Frame and the full history.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TextIO
import sys

from ..constants import GRAVITY_ARROW_PX, DRAG_ARROW_MIN_SPEED
from ..session import Frame
from ..types import Snapshot


def force_arrow_lengths(
    frame: Frame,
    gravity_px: float = GRAVITY_ARROW_PX,
    min_speed: float = DRAG_ARROW_MIN_SPEED,
) -> tuple[float, float]:
    """
    Lengths of the force arrows drawn on the body.

    Gravity is drawn at a fixed length; drag is scaled by F_d / F_g so the
    two arrows meet at terminal velocity. The drag arrow is hidden (length 0)
    below min_speed, and also when the weight is not positive.

    Returns:
        Tuple (gravity_length_px, drag_length_px).
    """
    if abs(frame.velocity) <= min_speed or frame.gravity_force <= 0:
        return gravity_px, 0.0
    return gravity_px, gravity_px * (frame.drag_force / frame.gravity_force)


class RendererAdapter(ABC):
    """
    Abstract base class for renderer implementations.

    Subclasses should implement the drawing methods to integrate with
    various graphics backends (matplotlib, pyglet, web frontend, etc.).

    Usage:
        renderer = MyRenderer()
        session.subscribe(renderer)

    which calls, for every published frame:
        renderer.begin_frame(frame.elapsed_time)
        renderer.draw_body(frame)
        renderer.draw_history(history)
        renderer.end_frame()
    """

    @abstractmethod
    def begin_frame(self, time: float) -> None:
        """
        Begin a new frame for rendering.

        Args:
            time: Current simulation time in seconds.
        """
        ...

    @abstractmethod
    def draw_body(self, frame: Frame) -> None:
        """
        Draw the body, its force arrows and readouts.

        Args:
            frame: The published state.
        """
        ...

    def draw_history(self, history: tuple[Snapshot, ...]) -> None:
        """Draw the recorded history. Optional; does nothing by default."""

    @abstractmethod
    def end_frame(self) -> None:
        """
        Finalize the current frame.

        Called after the body and history have been drawn for this frame.
        """
        ...

    def __call__(self, frame: Frame, history: tuple[Snapshot, ...]) -> None:
        self.begin_frame(frame.elapsed_time)
        self.draw_body(frame)
        self.draw_history(history)
        self.end_frame()


class DebugRenderer(RendererAdapter):
    """
    Console/text debug renderer for development and testing.

    Outputs a human-readable readout of each frame to a stream
    (stdout by default).

    Example:
        session.subscribe(DebugRenderer())

    Output:
        === Frame t=0.1000 [playing] ===
        y=60.11 px v=0.98 m/s s=0.0734 m
        gravity=60.0 px drag=1.3 px
    """

    def __init__(self, output: TextIO | None = None, verbose: bool = True):
        """
        Initialize the debug renderer.

        Args:
            output: Output stream (defaults to sys.stdout).
            verbose: If True, include the force arrow lengths.
        """
        self.output = output or sys.stdout
        self.verbose = verbose
        self._current_time = 0.0

    def begin_frame(self, time: float) -> None:
        self._current_time = time

    def draw_body(self, frame: Frame) -> None:
        """Write the body readout for one frame."""
        self.output.write(
            f"=== Frame t={self._current_time:.4f} [{frame.run_state.value}] ===\n"
        )
        line = (
            f"y={frame.screen_position:.2f} px v={frame.velocity:.2f} m/s "
            f"s={frame.displacement:.4f} m"
        )
        self.output.write(line + "\n")

        if self.verbose:
            gravity_len, drag_len = force_arrow_lengths(frame)
            self.output.write(f"gravity={gravity_len:.1f} px drag={drag_len:.1f} px\n")

    def end_frame(self) -> None:
        self.output.write("\n")
        self.output.flush()


class NullRenderer(RendererAdapter):
    """
    No-op renderer that does nothing.

    Useful as a placeholder or for performance testing without rendering overhead.
    """

    def begin_frame(self, time: float) -> None:
        pass

    def draw_body(self, frame: Frame) -> None:
        pass

    def end_frame(self) -> None:
        pass


class BufferedRenderer(RendererAdapter):
    """
    Renderer that buffers frame data for later retrieval.

    Example:
        renderer = BufferedRenderer()
        session.subscribe(renderer)
        for _ in range(100):
            session.step()

        for frame in renderer.frames:
            print(frame.elapsed_time, frame.velocity)
    """

    def __init__(self):
        self.frames: list[Frame] = []
        self._pending: Frame | None = None

    def begin_frame(self, time: float) -> None:
        self._pending = None

    def draw_body(self, frame: Frame) -> None:
        self._pending = frame

    def end_frame(self) -> None:
        if self._pending is not None:
            self.frames.append(self._pending)
            self._pending = None

    def clear(self) -> None:
        """Clear all buffered frames."""
        self.frames.clear()
