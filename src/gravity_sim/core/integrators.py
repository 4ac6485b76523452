# MIT License (see LICENSE)
"""
First-order time integrators for point masses.

Both schemes first set a = F/m from the accumulated force, then advance the
body by dt. They differ only in which velocity moves the position:

- semi_implicit_euler_step (default):
      v(t+dt) = v(t) + a dt
      x(t+dt) = x(t) + v(t+dt) dt
  Uses the freshly updated velocity. Orbits stay bounded far longer because
  the energy error oscillates instead of growing steadily.

- explicit_euler_step:
      x(t+dt) = x(t) + v(t) dt
      v(t+dt) = v(t) + a dt
  Uses the pre-update velocity. Energy drifts upward monotonically in
  orbital problems.

Reference:
    https://en.wikipedia.org/wiki/Semi-implicit_Euler_method
"""
from __future__ import annotations

from ..constants import EXPLICIT, SEMI_IMPLICIT
from ..types import Body


def update_acceleration(body: Body) -> None:
    """Set body.acceleration = body.force / body.mass (component-wise)."""
    body.acceleration[:] = body.force / body.mass


def semi_implicit_euler_step(body: Body, dt: float) -> None:
    """
    Advance body by dt, moving the position with the updated velocity.

    Args:
        body: Body to integrate (modified in-place). Its force accumulator
              must hold this step's total force.
        dt: Timestep.
    """
    update_acceleration(body)
    body.velocity += body.acceleration * dt
    body.position += body.velocity * dt


def explicit_euler_step(body: Body, dt: float) -> None:
    """Advance body by dt, moving the position with the pre-update velocity."""
    update_acceleration(body)
    body.position += body.velocity * dt
    body.velocity += body.acceleration * dt


INTEGRATORS = {
    SEMI_IMPLICIT: semi_implicit_euler_step,
    EXPLICIT: explicit_euler_step,
}


def get_integrator(scheme: str):
    """Look up the step function for a scheme name."""
    try:
        return INTEGRATORS[scheme]
    except KeyError:
        raise ValueError(f"Unknown integration scheme: '{scheme}'") from None
