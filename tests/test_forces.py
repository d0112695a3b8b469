import logging
import math

import numpy as np

from orbitsandbox.constants import G
from orbitsandbox.integrators import compute_forces
from orbitsandbox.physics import Body, forces


def test_two_body_forces():
    m1 = 1.0
    m2 = 2.0
    r = 10.0
    b1 = Body(m1, [0.0, 0.0, 0.0], [0.0, 0.0, 0.0], 1.0)
    b2 = Body(m2, [r, 0.0, 0.0], [0.0, 0.0, 0.0], 1.0)

    f = forces([b1, b2], g_constant=1.0)

    expected_mag = m1 * m2 / r ** 2
    assert math.isclose(f[0][0], expected_mag, rel_tol=1e-12)
    assert math.isclose(f[1][0], -expected_mag, rel_tol=1e-12)
    # y and z components should be zero
    assert np.allclose(f[0][1:], [0.0, 0.0])
    assert np.allclose(f[1][1:], [0.0, 0.0])


def test_force_uses_default_gravitational_constant():
    positions = np.array([[0.0, 0.0, 0.0], [0.0, 0.0, 2.0]])
    masses = np.array([3.0, 5.0])
    f = compute_forces(positions, masses)
    assert math.isclose(f[0][2], G * 15.0 / 4.0, rel_tol=1e-12)


def test_forces_sum_to_zero():
    positions = np.array(
        [[0.0, 0.0, 0.0], [1.0, 2.0, 0.0], [-3.0, 0.5, 4.0], [2.0, -1.0, -1.0]]
    )
    masses = np.array([1.0, 2.0, 3.0, 4.0])
    f = compute_forces(positions, masses, g_constant=1.0)
    assert np.allclose(f.sum(axis=0), 0.0, atol=1e-12)


def test_forces_match_pairwise_loop():
    rng = np.random.default_rng(3)
    positions = rng.uniform(-100, 100, size=(6, 3))
    masses = rng.uniform(1.0, 10.0, size=6)

    expected = np.zeros_like(positions)
    for i in range(6):
        for j in range(6):
            if i == j:
                continue
            d = positions[j] - positions[i]
            dist = np.linalg.norm(d)
            expected[i] += masses[i] * masses[j] / dist ** 2 * d / dist

    assert np.allclose(compute_forces(positions, masses, g_constant=1.0), expected)


def test_zero_distance_pair_contributes_nothing(caplog):
    positions = np.array([[0.0, 0.0, 0.0], [0.0, 0.0, 0.0], [2.0, 0.0, 0.0]])
    masses = np.array([1.0, 1.0, 4.0])
    with caplog.at_level(logging.DEBUG, logger="orbitsandbox.integrators"):
        f = compute_forces(positions, masses, g_constant=1.0)
    # only the third body pulls on the coincident pair
    assert np.allclose(f[0], [1.0, 0.0, 0.0])
    assert np.allclose(f[1], [1.0, 0.0, 0.0])
    assert np.all(np.isfinite(f))
    assert "coincident pair (0, 1)" in caplog.text


def test_empty_and_single_body():
    assert forces([]) == []
    assert compute_forces(np.zeros((0, 3)), np.zeros(0)).shape == (0, 3)
    lonely = Body(1.0, [1, 2, 3], [0, 0, 0], 1.0)
    assert np.allclose(forces([lonely])[0], [0.0, 0.0, 0.0])
