# MIT License (see LICENSE)
"""
Explicit simulation configuration.

Initial conditions and global parameters live in frozen dataclasses that are
handed to Simulation.from_config(), so nothing depends on module-level state
and tests can vary G or the initial layout freely.

Recognized options:
    per body:  initial_position (x, y), initial_velocity (x, y), mass
    global:    G, dt, scheme, softening, min_separation
"""
from __future__ import annotations
from dataclasses import dataclass, field

import math

from .constants import (
    G as DEFAULT_G,
    DEFAULT_DT,
    DEFAULT_MASS,
    DEFAULT_OFFSET,
    DEFAULT_SPACING,
    NUM_BODIES,
    SCHEMES,
    SEMI_IMPLICIT,
)
from .types import Body


@dataclass(frozen=True)
class BodyConfig:
    """
    Initial state of one body.

    Attributes:
        initial_position: Starting position (x, y).
        initial_velocity: Starting velocity (vx, vy). Default: at rest.
        mass: Strictly positive mass.
    """
    initial_position: tuple[float, float]
    initial_velocity: tuple[float, float] = (0.0, 0.0)
    mass: float = DEFAULT_MASS

    def __post_init__(self) -> None:
        object.__setattr__(self, "initial_position", _pair(self.initial_position, "initial_position"))
        object.__setattr__(self, "initial_velocity", _pair(self.initial_velocity, "initial_velocity"))
        mass = float(self.mass)
        if not math.isfinite(mass) or mass <= 0.0:
            raise ValueError(f"mass must be positive and finite, got {self.mass}")
        object.__setattr__(self, "mass", mass)

    def make_body(self) -> Body:
        """Instantiate a fresh Body in this initial state."""
        return Body(
            position=self.initial_position,
            velocity=self.initial_velocity,
            mass=self.mass,
        )


@dataclass(frozen=True)
class SimulationConfig:
    """
    Global parameters plus the initial body set.

    Attributes:
        bodies: Initial conditions, one entry per body.
        G: Gravitational constant.
        dt: Fixed timestep used when the host does not pass one.
        scheme: Euler convention, "semi_implicit" (velocity first, then
                position with the new velocity) or "explicit" (position
                with the old velocity).
        softening: Plummer softening length; 0 disables it.
        min_separation: If set, a pair closer than this raises
                        SingularityError instead of producing inf/nan.
    """
    bodies: tuple[BodyConfig, ...] = field(default_factory=tuple)
    G: float = DEFAULT_G
    dt: float = DEFAULT_DT
    scheme: str = SEMI_IMPLICIT
    softening: float = 0.0
    min_separation: float | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "bodies", tuple(self.bodies))
        for b in self.bodies:
            if not isinstance(b, BodyConfig):
                raise TypeError(f"Expected BodyConfig, got {type(b).__name__}")
        check_parameters(self.dt, self.scheme, self.softening, self.min_separation)

    def make_bodies(self) -> list[Body]:
        return [b.make_body() for b in self.bodies]


def check_dt(dt: float) -> None:
    """Raise ValueError unless dt is a positive number (NaN is rejected)."""
    if not dt > 0.0:
        raise ValueError(f"dt must be positive, got {dt}")


def check_parameters(dt: float, scheme: str, softening: float, min_separation: float | None) -> None:
    """Validate the global parameters shared by SimulationConfig and Simulation."""
    check_dt(dt)
    if scheme not in SCHEMES:
        raise ValueError(f"Unknown integration scheme: '{scheme}'")
    if not softening >= 0.0:
        raise ValueError(f"softening must be >= 0, got {softening}")
    if min_separation is not None and not min_separation > 0.0:
        raise ValueError(f"min_separation must be positive, got {min_separation}")


def default_config(n: int = NUM_BODIES) -> SimulationConfig:
    """
    The classic demo scene: n bodies of DEFAULT_MASS at rest, placed on a
    diagonal at (i * 100 + 10, i * 100 + 10).
    """
    bodies = tuple(
        BodyConfig(initial_position=(i * DEFAULT_SPACING + DEFAULT_OFFSET,
                                     i * DEFAULT_SPACING + DEFAULT_OFFSET))
        for i in range(n)
    )
    return SimulationConfig(bodies=bodies)


def _pair(v, name: str) -> tuple[float, float]:
    if len(v) != 2:
        raise ValueError(f"{name} must have exactly 2 components, got {len(v)}")
    return (float(v[0]), float(v[1]))
