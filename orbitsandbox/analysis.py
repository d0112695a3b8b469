"""System level diagnostics used by tests and the viewer."""
import numpy as np

from . import constants as C


def center_of_mass(bodies):
    """Return the centre of mass position and velocity, or ``(None, None)``."""
    if not bodies:
        return None, None

    masses = np.array([b.mass for b in bodies], dtype=float)
    total_mass = masses.sum()
    com_pos = np.sum([b.pos * b.mass for b in bodies], axis=0) / total_mass
    com_vel = np.sum([b.vel * b.mass for b in bodies], axis=0) / total_mass
    return com_pos, com_vel


def total_momentum(bodies):
    p = np.zeros(3, dtype=float)
    for b in bodies:
        p += b.mass * b.vel
    return p


def system_energy(bodies, g_constant=C.G):
    """Return kinetic, potential and total energy.

    Separations are measured in simulation units, matching the force law
    used by :func:`orbitsandbox.integrators.compute_forces`.
    """
    kinetic = 0.0
    potential = 0.0
    for b in bodies:
        kinetic += 0.5 * b.mass * np.dot(b.vel, b.vel)
    for i, bi in enumerate(bodies):
        for bj in bodies[i + 1:]:
            r = np.linalg.norm(bj.pos - bi.pos)
            if r == 0:
                continue
            potential -= g_constant * bi.mass * bj.mass / r
    return kinetic, potential, kinetic + potential
