# examples/two_body_orbit.py
import json
import os
import tempfile

import numpy as np

from gravity_sim.core import linear_momentum, total_energy
from gravity_sim.io import load_simulation
from gravity_sim.renderer import BufferedRenderer

# Equal masses on a circular orbit: relative speed sqrt(G (m1 + m2) / d)
v = np.sqrt(2.0) / 2
scene = {
    "G": 1.0,
    "dt": 0.005,
    "bodies": [
        {"position": [-0.5, 0.0], "velocity": [0.0, -v], "mass": 1.0},
        {"position": [0.5, 0.0], "velocity": [0.0, v], "mass": 1.0},
    ],
}

with tempfile.TemporaryDirectory() as tmp:
    path = os.path.join(tmp, "orbit.json")
    with open(path, "w", encoding="utf-8") as f:
        json.dump(scene, f, indent=2)
    sim = load_simulation(path)

renderer = BufferedRenderer()
e0 = total_energy(sim.bodies, sim.G)
for _ in range(2000):
    sim.step()
    renderer.render(sim)

print("t:", sim.time)
print("momentum:", linear_momentum(sim.bodies))
print("relative energy drift:", abs(total_energy(sim.bodies, sim.G) - e0) / abs(e0))
print("trail samples for body 1:", len(renderer.trail(1)))
