# MIT License (see LICENSE)
"""
Rendering adapters for visualization.

This subpackage provides the observer side of a Session:
    - RendererAdapter: Abstract base class defining the rendering interface.
    - DebugRenderer: Text readout of velocity, time and force arrows.
    - NullRenderer: No-op renderer for performance testing.
    - BufferedRenderer: Records frames for playback or export.
    - ChartRenderer: Keeps the velocity-vs-time plot in pixel space.

The simulation has no drawing dependency; these adapters compute what a
graphics backend needs and leave the drawing to it.

Typical usage:
    from dragfall.renderer import DebugRenderer

    session.subscribe(DebugRenderer())
"""
from .adapter import (
    RendererAdapter,
    DebugRenderer,
    NullRenderer,
    BufferedRenderer,
    force_arrow_lengths,
)
from .chart import ChartRenderer, ChartLayout, velocity_time_points

__all__ = [
    "RendererAdapter",
    "DebugRenderer",
    "NullRenderer",
    "BufferedRenderer",
    "ChartRenderer",
    "ChartLayout",
    "force_arrow_lengths",
    "velocity_time_points",
]
