import numpy as np
import pytest
from gravity_sim.types import Body
from gravity_sim.core.integrators import (
    explicit_euler_step,
    get_integrator,
    semi_implicit_euler_step,
    update_acceleration,
)


def test_acceleration_is_force_over_mass():
    b = Body(mass=4.0)
    b.force[:] = (2.0, -8.0)
    update_acceleration(b)

    assert np.allclose(b.acceleration, [0.5, -2.0])


def test_semi_implicit_moves_with_updated_velocity():
    """
    v' = v + a dt
    x' = x + v' dt
    """
    b = Body(position=(1.0, 2.0), velocity=(3.0, 0.0), mass=2.0)
    b.force[:] = (0.0, 4.0)
    dt = 0.5

    semi_implicit_euler_step(b, dt)

    assert np.allclose(b.velocity, [3.0, 1.0])
    assert np.allclose(b.position, [1.0 + 3.0 * dt, 2.0 + 1.0 * dt])


def test_explicit_moves_with_old_velocity():
    """
    x' = x + v dt
    v' = v + a dt
    """
    b = Body(position=(1.0, 2.0), velocity=(3.0, 0.0), mass=2.0)
    b.force[:] = (0.0, 4.0)
    dt = 0.5

    explicit_euler_step(b, dt)

    assert np.allclose(b.velocity, [3.0, 1.0])
    assert np.allclose(b.position, [1.0 + 3.0 * dt, 2.0])


def test_integrators_leave_force_accumulator_alone():
    b = Body(mass=1.0)
    b.force[:] = (1.0, 1.0)
    semi_implicit_euler_step(b, 0.1)

    assert np.array_equal(b.force, [1.0, 1.0])


def test_get_integrator():
    assert get_integrator("semi_implicit") is semi_implicit_euler_step
    assert get_integrator("explicit") is explicit_euler_step
    with pytest.raises(ValueError):
        get_integrator("rk4")
