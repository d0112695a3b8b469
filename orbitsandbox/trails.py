import numpy as np

from . import constants as C


def update_trail(body, threshold=C.TRAIL_THRESHOLD):
    """Append the body's position once it has moved far enough.

    Returns True when a point was recorded. The deque's ``maxlen`` evicts
    the oldest point once :data:`~orbitsandbox.constants.TRAIL_CAPACITY`
    is reached.
    """
    if body.trail and np.linalg.norm(body.pos - body.trail[-1]) <= threshold:
        return False
    body.trail.append(body.pos.copy())
    return True


def record_trails(bodies, threshold=C.TRAIL_THRESHOLD):
    """Update the trail of every body; returns the number of points added."""
    return sum(update_trail(b, threshold) for b in bodies)
