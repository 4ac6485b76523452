# MIT License (see LICENSE)
"""
gravity_sim - A small 2D Newtonian gravity simulation.

A fixed set of point masses attract each other pairwise; each step sums the
forces, derives accelerations and advances the bodies with Euler kinematics.

Main entry points:
    - Simulation: Owns the bodies and advances them with step(dt).
    - step: The same algorithm on a bare sequence of bodies.
    - Body: A point mass with position, velocity, mass and force accumulator.
    - SimulationConfig, BodyConfig: Explicit initial conditions.

Submodules:
    - core: Force kernel, Euler integrators, conserved quantities.
    - io: JSON configuration loading.
    - renderer: Read-only renderer adapters.

Example:
    from gravity_sim import Simulation, default_config

    sim = Simulation.from_config(default_config())
    sim.step()
"""
from .config import BodyConfig, SimulationConfig, default_config
from .errors import SingularityError
from .profiler import Profiler
from .simulation import Simulation, step
from .types import Body

__all__ = [
    # Simulation
    "Simulation",
    "step",
    "Body",
    # Configuration
    "BodyConfig",
    "SimulationConfig",
    "default_config",
    # Errors
    "SingularityError",
    # Tooling
    "Profiler",
]
