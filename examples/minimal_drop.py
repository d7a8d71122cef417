# examples/minimal_drop.py
from dragfall import Session, SimulationParameters
from dragfall.renderer import DebugRenderer

session = Session(SimulationParameters(mass=1.0, radius=0.5, drag_coefficient=0.47))
session.subscribe(DebugRenderer(verbose=False))

while session.step():
    pass

print("t:", session.state.elapsed_time)
print("v:", session.state.velocity)
print("steps:", len(session.history) - 1)
