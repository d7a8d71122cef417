# MIT License (see LICENSE)
"""
Velocity-vs-time chart mapping.

Converts the recorded history into pixel coordinates for a scatter plot
with the origin at the bottom-left corner of the plot area. The axes grow
with the data but never shrink below a minimum extent, so early frames do
not fill the whole chart.
"""
from __future__ import annotations
from dataclasses import dataclass

import numpy as np

from ..session import Frame
from ..types import Snapshot
from .adapter import RendererAdapter


@dataclass(frozen=True)
class ChartLayout:
    """
    Pixel geometry of the chart.

    Attributes:
        origin: Pixel (x, y) of the plot origin.
        width: Horizontal extent of the plot area in px.
        height: Vertical extent of the plot area in px.
        min_time: Smallest time-axis span in s.
        min_speed: Smallest speed-axis span in m/s.
    """
    origin: tuple[float, float] = (70.0, 470.0)
    width: float = 230.0
    height: float = 420.0
    min_time: float = 2.0
    min_speed: float = 1.0


def velocity_time_points(
    history: tuple[Snapshot, ...],
    layout: ChartLayout = ChartLayout(),
) -> tuple[np.ndarray, np.ndarray]:
    """
    Map history to chart pixel coordinates.

    Speed (|v|) is plotted upwards from the origin; time to the right.

    Args:
        history: Recorded snapshots.
        layout: Chart geometry.

    Returns:
        Tuple (xs, ys) of float64 arrays, one entry per snapshot.
    """
    t = np.array([s.elapsed_time for s in history], dtype=np.float64)
    speed = np.abs(np.array([s.velocity for s in history], dtype=np.float64))
    if t.size == 0:
        return t, speed

    max_t = max(float(t.max()), layout.min_time)
    max_v = max(float(speed.max()), layout.min_speed)
    x0, y0 = layout.origin
    xs = x0 + t * (layout.width / max_t)
    ys = y0 - speed * (layout.height / max_v)
    return xs, ys


class ChartRenderer(RendererAdapter):
    """
    Keeps the chart points for the latest frame.

    A plotting backend reads `xs`, `ys` and `marker` (the current point,
    drawn highlighted) after each publication. Nothing is plotted until
    the history has more than the seed entry.
    """

    def __init__(self, layout: ChartLayout | None = None):
        self.layout = layout or ChartLayout()
        self.xs = np.zeros(0, dtype=np.float64)
        self.ys = np.zeros(0, dtype=np.float64)
        self.marker: tuple[float, float] | None = None

    def begin_frame(self, time: float) -> None:
        pass

    def draw_body(self, frame: Frame) -> None:
        pass

    def draw_history(self, history: tuple[Snapshot, ...]) -> None:
        if len(history) <= 1:
            self.xs = np.zeros(0, dtype=np.float64)
            self.ys = np.zeros(0, dtype=np.float64)
            self.marker = None
            return
        self.xs, self.ys = velocity_time_points(history, self.layout)
        self.marker = (float(self.xs[-1]), float(self.ys[-1]))

    def end_frame(self) -> None:
        pass
