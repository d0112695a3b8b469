import logging

import numpy as np

from . import constants as C

logger = logging.getLogger(__name__)


def compute_forces(
    positions: np.ndarray,
    masses: np.ndarray,
    g_constant: float = C.G,
) -> np.ndarray:
    """Return the net gravitational force acting on every body.

    Distances are taken directly in simulation units. Coincident pairs
    (zero separation) are skipped and contribute no force.

    Parameters
    ----------
    positions : ndarray, shape (n, 3)
        Body positions in simulation units.
    masses : ndarray, shape (n,)
        Body masses in kilograms.
    g_constant : float, optional
        Gravitational constant, :data:`orbitsandbox.constants.G` by default.
    """
    n = len(masses)
    if n == 0:
        return np.zeros((0, 3), dtype=np.float64)

    positions = np.asarray(positions, dtype=np.float64)
    masses = np.asarray(masses, dtype=np.float64)

    # r_vec[i, j] points from body i towards body j
    r_vec = positions[np.newaxis, :, :] - positions[:, np.newaxis, :]
    dist_sq = np.einsum("ijk,ijk->ij", r_vec, r_vec)
    np.fill_diagonal(dist_sq, np.inf)

    coincident = dist_sq == 0
    if coincident.any():
        for i, j in zip(*np.nonzero(np.triu(coincident))):
            logger.debug("skipping coincident pair (%d, %d)", i, j)
        dist_sq[coincident] = np.inf

    dist = np.sqrt(dist_sq)
    magnitude = g_constant * masses[:, np.newaxis] * masses[np.newaxis, :] / dist_sq
    # magnitude / dist turns r_vec into a unit direction scaled by the force
    factors = magnitude / dist
    return np.einsum("ij,ijk->ik", factors, r_vec)


def euler_step_arrays(
    positions,
    velocities,
    masses,
    net_forces,
    dt,
    distance_scale=C.SCALE,
) -> tuple[np.ndarray, np.ndarray]:
    """Semi-implicit (symplectic) Euler update.

    The position update uses the already updated velocity.
    """
    if len(masses) == 0:
        return np.zeros((0, 3)), np.zeros((0, 3))

    acc = net_forces / masses[:, np.newaxis]
    vel_new = velocities + acc * dt
    pos_new = positions + vel_new * dt * distance_scale
    return pos_new, vel_new
