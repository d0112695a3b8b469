"""Body model and the force/integration helpers that operate on bodies.

Positions are stored in simulation units, velocities in metres per second.
The array kernels live in :mod:`orbitsandbox.integrators`; this module only
packs bodies into arrays and writes the results back.
"""
from collections import deque
import itertools
import math

import numpy as np

from . import constants as C
from .integrators import compute_forces, euler_step_arrays


class InvalidBodyError(ValueError):
    """Raised when a body would violate the registry invariants."""


def _as_vec3(value, label):
    v = np.asarray(value, dtype=float).reshape(-1)
    if v.size < 3:
        v = np.pad(v, (0, 3 - v.size))
    v = v[:3].copy()
    if not np.all(np.isfinite(v)):
        raise InvalidBodyError(f"{label} must be finite, got {v.tolist()}")
    return v


class Body:
    """A point mass with a collision radius and a bounded position trail."""

    _ids = itertools.count(1)

    def __init__(
        self,
        mass,
        pos,
        vel,
        radius,
        body_type=C.DEFAULT_NEW_BODY_TYPE,
        *,
        body_id=None,
        name=None,
        color=None,
        trail=(),
    ):
        """Create a body, validating mass, radius and type.

        Parameters
        ----------
        mass : float
            Mass in kilograms. Must be finite and strictly positive.
        pos : array-like
            Position in simulation units. Padded with zeros to three
            components.
        vel : array-like
            Velocity in m/s. Padded with zeros to three components.
        radius : float
            Collision radius in simulation units. Must be finite and
            strictly positive.
        body_type : str, optional
            One of ``star``, ``planet``, ``moon`` or ``asteroid``.
        body_id : str, optional
            Identifier; a fresh ``body-N`` id is generated when omitted.
        """
        mass = float(mass)
        radius = float(radius)
        if not (math.isfinite(mass) and mass > 0):
            raise InvalidBodyError(f"mass must be positive and finite, got {mass}")
        if not (math.isfinite(radius) and radius > 0):
            raise InvalidBodyError(f"radius must be positive and finite, got {radius}")
        if body_type not in C.BODY_TYPES:
            raise InvalidBodyError(f"unknown body type {body_type!r}")

        self.mass = mass
        self.radius = radius
        self.pos = _as_vec3(pos, "position")
        self.vel = _as_vec3(vel, "velocity")
        self.body_type = body_type
        self.id = str(body_id) if body_id is not None else Body.next_id()
        self.name = name if name else self.id
        self.color = color if color else C.TYPE_COLORS[body_type]
        self.trail = deque(
            (_as_vec3(p, "trail point") for p in trail),
            maxlen=C.TRAIL_CAPACITY,
        )

    @classmethod
    def next_id(cls, taken=()):
        """Return a fresh ``body-N`` id that is not in ``taken``."""
        while True:
            candidate = f"body-{next(cls._ids)}"
            if candidate not in taken:
                return candidate

    @classmethod
    def from_descriptor(cls, descriptor):
        """Build a body from a mapping such as a preset entry."""
        return cls(
            descriptor["mass"],
            descriptor.get("pos", (0.0, 0.0, 0.0)),
            descriptor.get("vel", (0.0, 0.0, 0.0)),
            descriptor.get("radius", C.DEFAULT_NEW_BODY_RADIUS),
            descriptor.get("type", C.DEFAULT_NEW_BODY_TYPE),
            body_id=descriptor.get("id"),
            name=descriptor.get("name"),
            color=descriptor.get("color"),
            trail=descriptor.get("trail", ()),
        )

    def copy(self):
        """Return an independent copy sharing no mutable state."""
        clone = Body.__new__(Body)
        clone.mass = self.mass
        clone.radius = self.radius
        clone.pos = self.pos.copy()
        clone.vel = self.vel.copy()
        clone.body_type = self.body_type
        clone.id = self.id
        clone.name = self.name
        clone.color = self.color
        clone.trail = deque((p.copy() for p in self.trail), maxlen=C.TRAIL_CAPACITY)
        return clone

    def clear_trail(self):
        self.trail.clear()

    def __repr__(self):
        return (
            f"Body(id={self.id!r}, mass={self.mass}, radius={self.radius}, "
            f"pos={self.pos.tolist()}, vel={self.vel.tolist()}, "
            f"type={self.body_type!r})"
        )

    @staticmethod
    def from_meters(mass, pos_m, vel_m_s, radius, body_type=C.DEFAULT_NEW_BODY_TYPE, **kwargs):
        """Create a :class:`Body` using metre based coordinates."""
        pos_sim = np.asarray(pos_m, dtype=float) * C.SCALE
        return Body(mass, pos_sim, vel_m_s, radius, body_type, **kwargs)


def forces(bodies, g_constant=C.G):
    """Net gravitational force on each body, in registry order."""
    if not bodies:
        return []

    positions = np.array([b.pos for b in bodies], dtype=float)
    masses = np.array([b.mass for b in bodies], dtype=float)

    force_array = compute_forces(positions, masses, g_constant)
    return [force_array[i] for i in range(len(bodies))]


def integrate(bodies, net_forces, dt):
    """Apply one semi-implicit Euler update to ``bodies`` in place."""
    if not bodies:
        return

    positions = np.array([b.pos for b in bodies], dtype=float)
    velocities = np.array([b.vel for b in bodies], dtype=float)
    masses = np.array([b.mass for b in bodies], dtype=float)

    new_pos, new_vel = euler_step_arrays(
        positions, velocities, masses, np.asarray(net_forces, dtype=float), dt
    )

    for b, p, v in zip(bodies, new_pos, new_vel):
        b.pos = p
        b.vel = v
