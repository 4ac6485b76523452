# MIT License (see LICENSE)
"""
Newtonian gravity between point masses.

Forces are accumulated into body.force; callers clear the accumulators
before calling apply_gravity_pairwise() (Simulation.step does this).

For a pair (a, b) with displacement d = x_b - x_a:
    r² = |d|² + ε²
    F  = G m_a m_b / r²
    f  = F d / r          (force on a; b receives -f)

With ε = 0 (the default) coincident bodies give r = 0 and the force is
inf/nan. That state is not detected unless min_separation is given.
"""
from __future__ import annotations
from typing import Sequence

import numpy as np

from ..errors import SingularityError
from ..types import Body
from ..util import norm2


def pairwise_force(a: Body, b: Body, G: float, softening: float = 0.0) -> np.ndarray:
    """
    Gravitational force exerted on body a by body b.

    Args:
        a: Body the force acts on.
        b: Attracting body.
        G: Gravitational constant.
        softening: Plummer softening length ε added as ε² to r².

    Returns:
        Force vector [Fx, Fy], pointing from a toward b.
    """
    d = b.position - a.position
    r2 = norm2(d) + softening * softening
    with np.errstate(divide="ignore", invalid="ignore"):
        r = np.sqrt(r2)
        magnitude = G * a.mass * b.mass / r2
        return magnitude * d / r


def apply_gravity_pairwise(
    bodies: Sequence[Body],
    G: float,
    softening: float = 0.0,
    min_separation: float | None = None,
) -> None:
    """
    Accumulate gravitational forces over every unordered pair of bodies.

    Each pair is visited once and Newton's third law applied: body i gets
    +f, body j gets -f, so the forces over the whole system sum to zero.
    Complexity: O(N²).

    Args:
        bodies: Bodies whose force accumulators receive the contributions.
        G: Gravitational constant.
        softening: Plummer softening length (0 disables).
        min_separation: If given, raise SingularityError for any pair whose
                        unsoftened separation is below it. Checked for all
                        pairs before any accumulator is touched.

    Raises:
        SingularityError: Two bodies are closer than min_separation.
    """
    n = len(bodies)
    if min_separation is not None:
        limit2 = min_separation * min_separation
        for i in range(n):
            for j in range(i + 1, n):
                d2 = norm2(bodies[j].position - bodies[i].position)
                if not d2 >= limit2:
                    raise SingularityError(i, j, float(np.sqrt(d2)), min_separation)

    for i in range(n):
        bi = bodies[i]
        for j in range(i + 1, n):
            bj = bodies[j]
            f = pairwise_force(bi, bj, G, softening)

            # Newton's third law
            bi.force += f
            bj.force -= f
