# MIT License (see LICENSE)
"""
Core numerics of the gravity simulation.

This subpackage provides:
    - Forces: pairwise Newtonian gravity with optional softening.
    - Integrators: semi-implicit and explicit Euler.
    - Invariants: momentum and energy diagnostics.

Typical usage:
    from gravity_sim.core import apply_gravity_pairwise, semi_implicit_euler_step

    for b in bodies:
        b.clear_forces()
    apply_gravity_pairwise(bodies, G=1.0)
    for b in bodies:
        semi_implicit_euler_step(b, dt=0.01)
"""
from .forces import apply_gravity_pairwise, pairwise_force
from .integrators import (
    explicit_euler_step,
    get_integrator,
    semi_implicit_euler_step,
    update_acceleration,
)
from .invariants import (
    center_of_mass,
    kinetic_energy,
    linear_momentum,
    net_force,
    potential_energy,
    total_energy,
)

__all__ = [
    # Forces
    "apply_gravity_pairwise",
    "pairwise_force",
    # Integrators
    "update_acceleration",
    "semi_implicit_euler_step",
    "explicit_euler_step",
    "get_integrator",
    # Invariants
    "linear_momentum",
    "net_force",
    "center_of_mass",
    "kinetic_energy",
    "potential_energy",
    "total_energy",
]
