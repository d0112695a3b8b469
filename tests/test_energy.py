import math

import numpy as np

from orbitsandbox.analysis import center_of_mass, system_energy, total_momentum
from orbitsandbox.physics import Body
from orbitsandbox.simulation import StepConfig, step


def _pair():
    a = Body(1e20, [0.0, 0.0, 0.0], [0.0, 10.0, 0.0], 1.0)
    b = Body(3e20, [100.0, 0.0, 0.0], [0.0, -5.0, 0.0], 1.0)
    return [a, b]


def test_center_of_mass():
    com_pos, com_vel = center_of_mass(_pair())
    assert np.allclose(com_pos, [75.0, 0.0, 0.0])
    assert np.allclose(com_vel, [0.0, (1e21 - 1.5e21) / 4e20, 0.0])


def test_center_of_mass_empty():
    assert center_of_mass([]) == (None, None)


def test_system_energy_two_bodies():
    bodies = _pair()
    ke, pe, total = system_energy(bodies, g_constant=1.0)
    assert math.isclose(ke, 0.5 * 1e20 * 100 + 0.5 * 3e20 * 25)
    assert math.isclose(pe, -1e20 * 3e20 / 100.0)
    assert math.isclose(total, ke + pe)


def test_system_energy_skips_coincident():
    a = Body(1.0, [0.0, 0.0, 0.0], [0.0, 0.0, 0.0], 1.0)
    b = Body(1.0, [0.0, 0.0, 0.0], [0.0, 0.0, 0.0], 1.0)
    assert system_energy([a, b]) == (0.0, 0.0, 0.0)


def test_momentum_conserved_without_collisions():
    bodies = _pair()
    p0 = total_momentum(bodies)
    scale = sum(b.mass * np.linalg.norm(b.vel) for b in bodies)
    config = StepConfig(collisions_enabled=False)
    for _ in range(20):
        bodies = step(bodies, 60.0, config)
        scale = max(scale, sum(b.mass * np.linalg.norm(b.vel) for b in bodies))
    assert np.allclose(total_momentum(bodies), p0, atol=1e-10 * scale)
