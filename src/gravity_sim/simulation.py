# MIT License (see LICENSE)
"""
The simulation container and its step loop.

Simulation owns the bodies and the global parameters. Each call to step():
    1. Clears every force accumulator.
    2. Accumulates pairwise gravity (Newton's third law, each pair once).
    3. Integrates every body with the configured Euler scheme.

Structure:
    - Build a Simulation directly or with Simulation.from_config().
    - Call step() once per frame, with elapsed time or the fixed dt.
    - Renderers read positions()/velocities() or the bodies themselves.

The module-level step() runs the same algorithm on a bare body sequence.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Sequence

import logging

import numpy as np

from .config import SimulationConfig, check_dt, check_parameters
from .constants import G as DEFAULT_G, DEFAULT_DT, SEMI_IMPLICIT
from .core.forces import apply_gravity_pairwise
from .core.integrators import get_integrator
from .profiler import Profiler
from .types import Body
from .util import is_finite

logger = logging.getLogger(__name__)


def step(
    bodies: Sequence[Body],
    dt: float,
    G: float = DEFAULT_G,
    softening: float = 0.0,
    scheme: str = SEMI_IMPLICIT,
    min_separation: float | None = None,
) -> None:
    """
    Advance every body by one timestep, in place.

    Args:
        bodies: Bodies to advance. Order does not affect the result beyond
                floating-point summation order.
        dt: Timestep, positive.
        G: Gravitational constant.
        softening: Plummer softening length (0 = plain Newtonian gravity).
        scheme: "semi_implicit" or "explicit".
        min_separation: Raise SingularityError below this separation.

    Raises:
        ValueError: dt is not positive or the scheme is unknown.
    """
    check_dt(dt)
    integrate = get_integrator(scheme)
    for b in bodies:
        b.clear_forces()
    apply_gravity_pairwise(bodies, G, softening, min_separation)
    for b in bodies:
        integrate(b, dt)


@dataclass
class Simulation:
    """
    Gravity simulation world.

    Attributes:
        G: Gravitational constant (default 1.0).
        dt: Fixed timestep used when step() gets no dt (default 0.1).
        scheme: Euler convention, "semi_implicit" or "explicit".
        softening: Plummer softening length. 0 keeps the bare 1/r² law.
        min_separation: Optional close-approach guard; see SingularityError.
        profiler: Optional Profiler for "forces"/"integrate" timings.
    """
    G: float = DEFAULT_G
    dt: float = DEFAULT_DT
    scheme: str = SEMI_IMPLICIT
    softening: float = 0.0
    min_separation: float | None = None
    profiler: Profiler | None = None

    # Internal state
    bodies: list[Body] = field(default_factory=list)
    time: float = 0.0
    steps: int = 0

    def __post_init__(self) -> None:
        check_parameters(self.dt, self.scheme, self.softening, self.min_separation)
        self._next_id = 1
        self._warned_non_finite = False

    @classmethod
    def from_config(cls, config: SimulationConfig, profiler: Profiler | None = None) -> "Simulation":
        """Build a simulation and its bodies from a SimulationConfig."""
        sim = cls(
            G=config.G,
            dt=config.dt,
            scheme=config.scheme,
            softening=config.softening,
            min_separation=config.min_separation,
            profiler=profiler,
        )
        for body in config.make_bodies():
            sim.add_body(body)
        logger.debug("Simulation created with %d bodies (G=%g, dt=%g, scheme=%s)",
                     len(sim.bodies), sim.G, sim.dt, sim.scheme)
        return sim

    def add_body(self, body: Body) -> int:
        """
        Add a body and assign it a unique id.

        Bodies are meant to be added before the simulation starts running.

        Returns:
            The assigned id.
        """
        body.id = self._next_id
        self._next_id += 1
        self.bodies.append(body)
        logger.debug("Added body %d: m=%g x=%s v=%s", body.id, body.mass,
                     body.position.tolist(), body.velocity.tolist())
        return body.id

    def _apply_forces(self) -> None:
        """Reset accumulators, then sum the pairwise gravitational forces."""
        for b in self.bodies:
            b.clear_forces()
        apply_gravity_pairwise(self.bodies, self.G, self.softening, self.min_separation)

    def _integrate(self, dt: float) -> None:
        """Advance every body by dt with the configured scheme."""
        integrate = get_integrator(self.scheme)
        for b in self.bodies:
            integrate(b, dt)

    def step(self, dt: float | None = None) -> None:
        """
        Advance the simulation by one frame.

        Args:
            dt: Elapsed time for this frame. Defaults to the fixed self.dt.

        Raises:
            ValueError: dt is not positive.
            SingularityError: min_separation is set and violated.
        """
        dt = float(self.dt if dt is None else dt)
        check_dt(dt)
        prof = self.profiler

        if prof:
            with prof.section("forces"):
                self._apply_forces()
            with prof.section("integrate"):
                self._integrate(dt)
        else:
            self._apply_forces()
            self._integrate(dt)

        self.time += dt
        self.steps += 1

        if not self._warned_non_finite and not self.is_finite():
            self._warned_non_finite = True
            logger.warning("Non-finite body state at t=%g (step %d); bodies likely coincided",
                           self.time, self.steps)

    def run(self, steps: int, dt: float | None = None) -> None:
        """Call step() the given number of times."""
        for _ in range(steps):
            self.step(dt)

    def positions(self) -> np.ndarray:
        """Copy of all positions as an (N, 2) array."""
        return np.array([b.position for b in self.bodies], dtype=np.float64).reshape(-1, 2)

    def velocities(self) -> np.ndarray:
        """Copy of all velocities as an (N, 2) array."""
        return np.array([b.velocity for b in self.bodies], dtype=np.float64).reshape(-1, 2)

    def is_finite(self) -> bool:
        """False once any position or velocity has become inf or nan."""
        return all(is_finite(b.position) and is_finite(b.velocity) for b in self.bodies)
