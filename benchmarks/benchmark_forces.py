import time
import numpy as np

from orbitsandbox.integrators import compute_forces
from orbitsandbox.constants import G


def compute_forces_python(positions, masses, g_constant=G):
    n = len(masses)
    forces = np.zeros((n, 3), dtype=np.float64)
    for i in range(n):
        for j in range(i + 1, n):
            r_vec = positions[j] - positions[i]
            dist_sq = float(np.dot(r_vec, r_vec))
            if dist_sq == 0:
                continue
            f = g_constant * masses[i] * masses[j] / dist_sq * r_vec / np.sqrt(dist_sq)
            forces[i] += f
            forces[j] -= f
    return forces


if __name__ == "__main__":
    rng = np.random.default_rng(0)
    N = 300  # upper end of the interactive range
    positions = rng.uniform(-400.0, 400.0, size=(N, 3))
    masses = rng.uniform(1e23, 1e27, size=N)

    t0 = time.time()
    baseline = compute_forces_python(positions, masses)
    t1 = time.time()
    vectorised = compute_forces(positions, masses)
    t2 = time.time()

    assert np.allclose(baseline, vectorised)
    print(f"Python loop: {t1 - t0:.3f}s")
    print(f"Vectorised : {t2 - t1:.3f}s")
    if t2 - t1 > 0:
        print(f"Speedup    : {(t1 - t0) / (t2 - t1):.1f}x")
