"""Collision detection and merging.

Overlapping bodies are merged before forces are evaluated for a step, so the
force and integration code never sees two bodies closer than the sum of
their radii.
"""
import logging
import math

import numpy as np

from .physics import InvalidBodyError

logger = logging.getLogger(__name__)


def _overlaps(body1, body2):
    distance = float(np.linalg.norm(body2.pos - body1.pos))
    return distance < body1.radius + body2.radius


def merge_bodies(survivor, removed):
    """Merge ``removed`` into ``survivor`` in place.

    Mass adds, volume adds (radius is the cube root of the summed cubes) and
    momentum is conserved. The survivor keeps its identity, position and
    trail.

    Raises :class:`~orbitsandbox.physics.InvalidBodyError` without touching
    either body when the merged mass, radius or velocity is not finite.
    """
    total_mass = survivor.mass + removed.mass
    with np.errstate(over="ignore", invalid="ignore"):
        new_vel = (
            survivor.vel * (survivor.mass / total_mass)
            + removed.vel * (removed.mass / total_mass)
        )
        new_radius = float(
            np.cbrt(np.float64(survivor.radius) ** 3 + np.float64(removed.radius) ** 3)
        )

    if not (math.isfinite(total_mass) and math.isfinite(new_radius) and np.all(np.isfinite(new_vel))):
        logger.warning("rejecting merge of %s into %s: non-finite result", removed.id, survivor.id)
        raise InvalidBodyError(
            f"merging {removed.id} into {survivor.id} gives non-finite "
            f"mass={total_mass}, radius={new_radius}"
        )

    survivor.mass = total_mass
    survivor.radius = new_radius
    survivor.vel = new_vel
    logger.debug("merged %s into %s (mass=%g)", removed.id, survivor.id, survivor.mass)
    return survivor


def find_overlaps(bodies):
    """Return index pairs ``(i, j)``, ``i < j``, of overlapping bodies."""
    pairs = []
    for i in range(len(bodies)):
        for j in range(i + 1, len(bodies)):
            if _overlaps(bodies[i], bodies[j]):
                pairs.append((i, j))
    return pairs


def _merge_pass(arena):
    alive = [True] * len(arena)
    merged = 0
    for i in range(len(arena)):
        if not alive[i]:
            continue
        for j in range(i + 1, len(arena)):
            if not alive[j]:
                continue
            if _overlaps(arena[i], arena[j]):
                merge_bodies(arena[i], arena[j])
                alive[j] = False
                merged += 1
    return [b for b, keep in zip(arena, alive) if keep], merged


def resolve_collisions(bodies):
    """Merge overlapping bodies until no overlap remains.

    Every unordered pair is examined once per pass, in registry order; the
    higher-index body of an overlapping pair is merged into the lower-index
    one and dropped from the rest of the pass. A grown survivor may overlap
    a body it was already compared with, so passes repeat until one merges
    nothing.

    Surviving bodies are updated in place; a new list is returned.
    """
    arena = list(bodies)
    while True:
        arena, merged = _merge_pass(arena)
        if not merged:
            return arena
