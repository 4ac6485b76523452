# examples/three_body.py
# Headless version of the classic demo loop: draw every body, then step.
import logging

from gravity_sim import Simulation, default_config
from gravity_sim.renderer import DebugRenderer

logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

sim = Simulation.from_config(default_config())
renderer = DebugRenderer()

for _ in range(20):
    renderer.render(sim)
    sim.step()

print("t:", sim.time)
print("pos:", sim.positions())
