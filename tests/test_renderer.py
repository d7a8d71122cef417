# MIT License (see LICENSE)
import io

import numpy as np
import pytest

from dragfall import Session, SessionConfig, SimulationParameters, RunControlState
from dragfall.renderer import (
    DebugRenderer,
    NullRenderer,
    BufferedRenderer,
    ChartRenderer,
    ChartLayout,
    force_arrow_lengths,
    velocity_time_points,
)
from dragfall.types import Snapshot


def test_drag_arrow_hidden_at_rest():
    frame = Session().frame()
    assert force_arrow_lengths(frame) == (60.0, 0.0)


def test_drag_arrow_scaled_by_weight():
    session = Session()
    for _ in range(400):
        session.step()
    gravity_len, drag_len = force_arrow_lengths(session.frame())
    assert gravity_len == 60.0
    # Near terminal velocity both arrows have the same length
    assert drag_len == pytest.approx(60.0, rel=1e-4)


def test_debug_renderer_writes_readout():
    out = io.StringIO()
    session = Session()
    session.subscribe(DebugRenderer(output=out))
    session.step()

    text = out.getvalue()
    assert "=== Frame t=0.0000 [idle] ===" in text
    assert "=== Frame t=0.0500 [idle] ===" in text
    assert "v=0.49 m/s" in text
    assert "gravity=60.0 px" in text


def test_debug_renderer_reports_termination():
    out = io.StringIO()
    session = Session(config=SessionConfig(ground_px=100.0))
    session.subscribe(DebugRenderer(output=out, verbose=False))
    while session.step():
        pass
    assert "[terminated]" in out.getvalue()
    assert "gravity=" not in out.getvalue()


def test_buffered_renderer_records_frames():
    renderer = BufferedRenderer()
    session = Session()
    session.subscribe(renderer)
    for _ in range(4):
        session.step()

    assert len(renderer.frames) == 5
    assert [f.elapsed_time for f in renderer.frames] == pytest.approx([0, 0.05, 0.1, 0.15, 0.2])
    renderer.clear()
    assert renderer.frames == []


def test_null_renderer_accepts_frames():
    session = Session()
    session.subscribe(NullRenderer())
    session.step()
    assert len(session.history) == 2


def test_chart_points_use_minimum_extent():
    history = (Snapshot(0.0, 0.0, 0.0), Snapshot(0.5, 0.1, 1.0))
    xs, ys = velocity_time_points(history)

    # Time axis spans at least 2 s, speed axis at least 1 m/s
    np.testing.assert_allclose(xs, [70.0, 70.0 + 1.0 * 230.0 / 2.0])
    np.testing.assert_allclose(ys, [470.0, 470.0 - 0.5 * 420.0])


def test_chart_points_scale_to_data():
    history = tuple(Snapshot(v, 0.0, t) for v, t in [(0.0, 0.0), (2.0, 2.0), (-4.0, 4.0)])
    xs, ys = velocity_time_points(history, ChartLayout(origin=(0.0, 100.0), width=100.0, height=100.0))
    np.testing.assert_allclose(xs, [0.0, 50.0, 100.0])
    np.testing.assert_allclose(ys, [100.0, 50.0, 0.0])


def test_chart_renderer_tracks_current_point():
    chart = ChartRenderer()
    session = Session()
    session.subscribe(chart)
    assert chart.marker is None
    assert chart.xs.size == 0

    for _ in range(3):
        session.step()
    assert chart.xs.size == 4
    assert chart.marker == (pytest.approx(chart.xs[-1]), pytest.approx(chart.ys[-1]))

    session.reset(SimulationParameters(mass=2.0))
    assert chart.marker is None
    assert session.run_state is RunControlState.IDLE


def test_debug_renderer_readout_values():
    out = io.StringIO()
    session = Session()
    session.step()
    session.subscribe(DebugRenderer(output=out))
    out.truncate(0)
    out.seek(0)
    session.step()

    assert out.getvalue().splitlines()[:3] == [
        "=== Frame t=0.1000 [idle] ===",
        "y=60.11 px v=0.98 m/s s=0.0734 m",
        "gravity=60.0 px drag=1.3 px",
    ]
