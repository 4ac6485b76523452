# MIT License (see LICENSE)
"""
Conserved quantities and diagnostics.

An isolated gravitating system conserves total momentum and total energy.
The Euler schemes keep momentum exactly (up to round-off) because pairwise
forces cancel, but energy drifts with dt; these helpers make both visible.
"""
from __future__ import annotations
from typing import Sequence

import numpy as np

from ..types import Body
from ..util import norm2


def linear_momentum(bodies: Sequence[Body]) -> np.ndarray:
    """
    Total linear momentum P = Σ m v.

    Returns:
        Momentum vector [Px, Py].
    """
    p = np.zeros(2, dtype=np.float64)
    for b in bodies:
        p += b.mass * b.velocity
    return p


def net_force(bodies: Sequence[Body]) -> np.ndarray:
    """Sum of the force accumulators. Zero after a pairwise gravity pass."""
    f = np.zeros(2, dtype=np.float64)
    for b in bodies:
        f += b.force
    return f


def center_of_mass(bodies: Sequence[Body]) -> np.ndarray:
    total = sum(b.mass for b in bodies)
    c = np.zeros(2, dtype=np.float64)
    for b in bodies:
        c += b.mass * b.position
    return c / total


def kinetic_energy(bodies: Sequence[Body]) -> float:
    """T = Σ ½ m v²"""
    ke = 0.0
    for b in bodies:
        ke += 0.5 * b.mass * float(np.dot(b.velocity, b.velocity))
    return ke


def potential_energy(bodies: Sequence[Body], G: float, softening: float = 0.0) -> float:
    """
    Gravitational potential energy U = -Σ_{i<j} G m_i m_j / r_ij.

    With softening the separation is sqrt(r² + ε²), matching the force law
    used by apply_gravity_pairwise().
    """
    u = 0.0
    n = len(bodies)
    eps2 = softening * softening
    for i in range(n):
        for j in range(i + 1, n):
            d = bodies[j].position - bodies[i].position
            r = np.sqrt(norm2(d) + eps2)
            u -= G * bodies[i].mass * bodies[j].mass / r
    return float(u)


def total_energy(bodies: Sequence[Body], G: float, softening: float = 0.0) -> float:
    return kinetic_energy(bodies) + potential_energy(bodies, G, softening)
