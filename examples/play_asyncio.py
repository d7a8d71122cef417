"""
Continuous play on an asyncio event loop, pausing halfway.
Run:
  python examples/play_asyncio.py
"""
import asyncio
import logging

from dragfall import AsyncioCadence, RunControlState, Session, SimulationParameters
from dragfall.core import terminal_velocity
from dragfall.logging_config import setup_logging
from dragfall.materials import drag_coefficient_for
from dragfall.renderer import ChartRenderer


async def main():
    params = SimulationParameters(mass=0.5, radius=0.3, drag_coefficient=drag_coefficient_for("cube"))
    session = Session(params=params, cadence=AsyncioCadence())
    chart = ChartRenderer()
    session.subscribe(chart)

    session.play()
    await asyncio.sleep(1.0)
    session.pause()
    print(f"paused at t={session.state.elapsed_time:.2f} s, {chart.xs.size} chart points")

    session.play()
    while session.run_state is RunControlState.PLAYING:
        await asyncio.sleep(0.1)

    print(f"landed at t={session.state.elapsed_time:.2f} s")
    print(f"v={session.state.velocity:.3f} m/s (terminal {terminal_velocity(params):.3f} m/s)")


if __name__ == "__main__":
    setup_logging(logging.INFO)
    asyncio.run(main())
