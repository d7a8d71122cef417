# MIT License (see LICENSE)
import math

import pytest

from dragfall.constants import G
from dragfall.core import (
    initialize,
    advance,
    drag_force,
    gravity_force,
    cross_section_area,
    terminal_velocity,
    kinetic_energy,
)
from dragfall.types import SimulationParameters, SimulationState

DT = 0.05
BALL = SimulationParameters(mass=1.0, radius=0.5, drag_coefficient=0.47)


def test_initial_state_is_at_rest():
    state = initialize(BALL)
    assert state == SimulationState(velocity=0.0, displacement=0.0, elapsed_time=0.0)


def test_first_step_has_no_drag():
    """From rest only gravity acts: a = g."""
    s1 = advance(initialize(BALL), BALL, DT)

    assert cross_section_area(BALL.radius) == pytest.approx(0.7854, abs=1e-4)
    assert drag_force(BALL, 0.0) == 0.0
    assert s1.velocity == pytest.approx(0.49)
    assert s1.displacement == pytest.approx(0.0245)
    assert s1.elapsed_time == pytest.approx(0.05)


def test_second_step_applies_drag():
    s1 = advance(initialize(BALL), BALL, DT)
    s2 = advance(s1, BALL, DT)

    fd = 0.5 * 0.47 * 1.2 * math.pi * 0.25 * 0.49 ** 2
    assert drag_force(BALL, 0.49) == pytest.approx(fd)
    assert s2.velocity == pytest.approx(0.49 + (9.8 - fd) * DT)
    assert s2.velocity == pytest.approx(0.977, abs=1e-3)
    # Displacement uses the updated velocity
    assert s2.displacement == pytest.approx(0.0245 + s2.velocity * DT)


def test_drag_opposes_motion():
    assert drag_force(BALL, 3.0) > 0
    assert drag_force(BALL, -3.0) < 0
    assert drag_force(BALL, -3.0) == pytest.approx(-drag_force(BALL, 3.0))


def test_advance_does_not_mutate_input():
    s0 = initialize(BALL)
    s1 = advance(s0, BALL, DT)
    assert s0.velocity == 0.0 and s0.elapsed_time == 0.0
    assert s1 is not s0


@pytest.mark.parametrize("n", [0, 1, 7, 100, 1000])
def test_elapsed_time_is_n_steps(n):
    state = initialize(BALL)
    for _ in range(n):
        state = advance(state, BALL, DT)
    assert state.elapsed_time == pytest.approx(n * DT, abs=1e-9)


def test_no_drag_is_semi_implicit_free_fall():
    """
    Without drag v_n = g·n·dt and s_n = g·dt²·n(n+1)/2, the exact
    semi-implicit Euler solution.
    """
    params = SimulationParameters(mass=2.0, radius=0.3, drag_coefficient=0.0)
    state = initialize(params)
    n = 40
    for _ in range(n):
        state = advance(state, params, DT)

    assert state.velocity == pytest.approx(G * n * DT)
    assert state.displacement == pytest.approx(G * DT * DT * n * (n + 1) / 2)
    assert terminal_velocity(params) == math.inf


def test_velocity_approaches_terminal_velocity():
    vt = terminal_velocity(BALL)
    assert vt == pytest.approx(math.sqrt(9.8 / (0.5 * 0.47 * 1.2 * math.pi * 0.25)))

    state = initialize(BALL)
    prev = state.velocity
    for _ in range(400):
        state = advance(state, BALL, DT)
        assert state.velocity >= prev - 1e-12
        prev = state.velocity

    assert state.velocity == pytest.approx(vt, rel=1e-6)
    # At terminal velocity drag balances weight
    assert drag_force(BALL, state.velocity) == pytest.approx(gravity_force(BALL), rel=1e-5)


def test_heavier_body_falls_faster_with_drag():
    heavy = SimulationParameters(mass=10.0, radius=0.5, drag_coefficient=0.47)
    light, dense = initialize(BALL), initialize(heavy)
    for _ in range(60):
        light = advance(light, BALL, DT)
        dense = advance(dense, heavy, DT)
    assert dense.velocity > light.velocity
    assert kinetic_energy(dense, heavy) > kinetic_energy(light, BALL)
