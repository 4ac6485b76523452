# MIT License (see LICENSE)
"""
Core data model: a gravitating point mass in 2D.

Newtonian point-mass dynamics:
  - dx/dt = v
  - dv/dt = a = F/m
where F is the sum of the pairwise gravitational pulls on the body.
"""
from __future__ import annotations
from dataclasses import dataclass, field

import math

import numpy as np

from .constants import DEFAULT_MASS
from .util import f64, zeros2


@dataclass(eq=False)
class Body:
    """
    A point mass with kinematic state and a per-step force accumulator.

    Attributes:
        position: Position [x, y].
        velocity: Velocity [vx, vy].
        mass: Strictly positive and fixed for the lifetime of the body.
        acceleration: Last computed acceleration [ax, ay]; working storage
                      rewritten every step.
        force: Force accumulator [Fx, Fy]. Reset to exactly (0, 0) at the
               start of every step before pairwise contributions are summed.
        id: Identifier assigned by Simulation.add_body().

    Note:
        position, velocity, acceleration and force are float64 arrays after
        init. Reassigning mass raises AttributeError.
    """
    position: np.ndarray | tuple[float, float] = (0.0, 0.0)
    velocity: np.ndarray | tuple[float, float] = (0.0, 0.0)
    mass: float = DEFAULT_MASS

    # Runtime state (not user-specified)
    acceleration: np.ndarray = field(default_factory=zeros2)
    force: np.ndarray = field(default_factory=zeros2)
    id: int = -1

    def __post_init__(self) -> None:
        """Validate mass and convert vectors to float64 arrays."""
        mass = float(self.mass)
        if not math.isfinite(mass) or mass <= 0.0:
            raise ValueError(f"Body mass must be positive and finite, got {self.mass}")
        object.__setattr__(self, "mass", mass)

        self.position = f64(self.position)
        self.velocity = f64(self.velocity)
        self.acceleration = f64(self.acceleration)
        self.force = f64(self.force)
        for name in ("position", "velocity", "acceleration", "force"):
            if getattr(self, name).shape != (2,):
                raise ValueError(f"Body {name} must be a 2D vector, got shape {getattr(self, name).shape}")

    def __setattr__(self, name, value) -> None:
        if name == "mass" and "mass" in self.__dict__:
            raise AttributeError("Body mass is constant once the body is created")
        super().__setattr__(name, value)

    def clear_forces(self) -> None:
        """Reset the force accumulator to zero for the next step."""
        self.force[:] = 0.0

    @property
    def momentum(self) -> np.ndarray:
        return self.mass * self.velocity

    @property
    def speed(self) -> float:
        return float(np.hypot(self.velocity[0], self.velocity[1]))
