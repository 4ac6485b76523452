import numpy as np
import pytest
from gravity_sim.types import Body


def test_vectors_are_float64_arrays():
    b = Body(position=(1, 2), velocity=[3, 4], mass=2)

    for v in (b.position, b.velocity, b.acceleration, b.force):
        assert isinstance(v, np.ndarray)
        assert v.dtype == np.float64
        assert v.shape == (2,)
    assert b.mass == 2.0
    assert b.id == -1


@pytest.mark.parametrize("mass", [0.0, -1.0, float("inf"), float("nan")])
def test_mass_must_be_positive(mass):
    with pytest.raises(ValueError):
        Body(mass=mass)


def test_mass_is_constant():
    b = Body(mass=3.0)
    with pytest.raises(AttributeError):
        b.mass = 4.0
    assert b.mass == 3.0


def test_bad_vector_shape():
    with pytest.raises(ValueError):
        Body(position=(1.0, 2.0, 3.0))


def test_clear_forces():
    b = Body()
    b.force[:] = (5.0, -2.0)
    b.clear_forces()

    assert np.array_equal(b.force, [0.0, 0.0])


def test_momentum_and_speed():
    b = Body(velocity=(3.0, 4.0), mass=2.0)

    assert np.allclose(b.momentum, [6.0, 8.0])
    assert b.speed == pytest.approx(5.0)
