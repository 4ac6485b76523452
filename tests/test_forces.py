import numpy as np
import pytest
from gravity_sim.types import Body
from gravity_sim.errors import SingularityError
from gravity_sim.core.forces import pairwise_force, apply_gravity_pairwise
from gravity_sim.core.invariants import net_force


def test_pairwise_force_is_antisymmetric():
    """Newton's third law: F(a <- b) == -F(b <- a)."""
    a = Body(position=(0.3, -1.2), mass=2.5)
    b = Body(position=(4.1, 0.7), mass=0.8)

    f_ab = pairwise_force(a, b, G=1.3)
    f_ba = pairwise_force(b, a, G=1.3)

    assert np.allclose(f_ab, -f_ba, rtol=1e-12, atol=0.0)


def test_force_points_toward_other_body():
    a = Body(position=(0.0, 0.0), mass=1.0)
    b = Body(position=(0.0, 2.0), mass=1.0)

    f = pairwise_force(a, b, G=1.0)

    assert f[0] == 0.0
    assert f[1] > 0.0


def test_force_scales_linearly_with_mass():
    """Doubling the attracting mass doubles the force, positions fixed."""
    a = Body(position=(0.0, 0.0), mass=1.0)
    b = Body(position=(3.0, 4.0), mass=1.0)
    b_heavy = Body(position=(3.0, 4.0), mass=2.0)

    f = pairwise_force(a, b, G=1.0)
    f_heavy = pairwise_force(a, b_heavy, G=1.0)

    assert np.allclose(f_heavy, 2.0 * f)


def test_inverse_square_law():
    """Doubling the separation of equal masses quarters the force."""
    a = Body(position=(0.0, 0.0), mass=5.0)
    near = Body(position=(1.5, 0.0), mass=5.0)
    far = Body(position=(3.0, 0.0), mass=5.0)

    f_near = np.linalg.norm(pairwise_force(a, near, G=1.0))
    f_far = np.linalg.norm(pairwise_force(a, far, G=1.0))

    assert f_far == pytest.approx(0.25 * f_near)


def test_unit_separation_magnitude():
    """F = G m1 m2 / r² with r = 1, along the x-axis."""
    a = Body(position=(0.0, 0.0), mass=1.0)
    b = Body(position=(1.0, 0.0), mass=1.0)

    f = pairwise_force(a, b, G=1.0)

    assert np.allclose(f, [1.0, 0.0])


def test_accumulated_forces_sum_to_zero():
    """Each pair is applied symmetrically, so the system net force vanishes."""
    bodies = [
        Body(position=(0.0, 0.0), mass=3.0),
        Body(position=(1.0, 2.0), mass=1.0),
        Body(position=(-2.0, 0.5), mass=7.0),
    ]
    apply_gravity_pairwise(bodies, G=1.0)

    assert np.allclose(net_force(bodies), 0.0, atol=1e-12)
    for b in bodies:
        assert np.linalg.norm(b.force) > 0.0


def test_single_body_feels_no_force():
    """No self-interaction: an isolated body accumulates nothing."""
    body = Body(position=(5.0, 5.0), velocity=(1.0, 0.0), mass=10.0)
    apply_gravity_pairwise([body], G=1.0)

    assert np.array_equal(body.force, [0.0, 0.0])


def test_pairwise_sum_matches_direct_sum():
    """Accumulated force equals the sum of per-pair forces on each body."""
    bodies = [
        Body(position=(0.0, 0.0), mass=1.0),
        Body(position=(2.0, 0.0), mass=2.0),
        Body(position=(0.0, 3.0), mass=4.0),
    ]
    apply_gravity_pairwise(bodies, G=0.5)

    for i, bi in enumerate(bodies):
        expected = sum(
            (pairwise_force(bi, bj, G=0.5) for j, bj in enumerate(bodies) if j != i),
            np.zeros(2),
        )
        assert np.allclose(bi.force, expected)


def test_coincident_bodies_give_non_finite_force():
    """Without softening the r -> 0 singularity is not handled."""
    a = Body(position=(1.0, 1.0), mass=1.0)
    b = Body(position=(1.0, 1.0), mass=1.0)

    f = pairwise_force(a, b, G=1.0)

    assert not np.all(np.isfinite(f))


def test_softening_keeps_coincident_bodies_finite():
    a = Body(position=(1.0, 1.0), mass=1.0)
    b = Body(position=(1.0, 1.0), mass=1.0)

    f = pairwise_force(a, b, G=1.0, softening=0.1)

    assert np.array_equal(f, [0.0, 0.0])


def test_softened_force_value():
    """r² -> r² + ε²: at r = ε = 1 the force is d / 2^(3/2)."""
    a = Body(position=(0.0, 0.0), mass=1.0)
    b = Body(position=(1.0, 0.0), mass=1.0)

    f = pairwise_force(a, b, G=1.0, softening=1.0)

    assert f[0] == pytest.approx(2.0 ** -1.5)
    assert f[1] == 0.0


def test_min_separation_raises_before_accumulating():
    bodies = [
        Body(position=(0.0, 0.0), mass=1.0),
        Body(position=(10.0, 0.0), mass=1.0),
        Body(position=(10.05, 0.0), mass=1.0),
    ]
    with pytest.raises(SingularityError) as info:
        apply_gravity_pairwise(bodies, G=1.0, min_separation=0.1)

    assert (info.value.i, info.value.j) == (1, 2)
    assert info.value.distance == pytest.approx(0.05)
    for b in bodies:
        assert np.array_equal(b.force, [0.0, 0.0])


def test_min_separation_allows_distant_pairs():
    bodies = [
        Body(position=(0.0, 0.0), mass=1.0),
        Body(position=(1.0, 0.0), mass=1.0),
    ]
    apply_gravity_pairwise(bodies, G=1.0, min_separation=0.5)

    assert np.allclose(bodies[0].force, [1.0, 0.0])
