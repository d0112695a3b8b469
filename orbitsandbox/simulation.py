"""Step orchestration.

:func:`step` is a pure function from one registry snapshot to the next.
:class:`Simulation` keeps the state a front end needs between frames (pause
flag, time scale, toggles) and feeds it to :func:`step` explicitly.
"""
from dataclasses import dataclass
from enum import Enum
import logging

import numpy as np

from . import constants as C
from .collisions import resolve_collisions
from .physics import Body, InvalidBodyError, forces, integrate
from .presets import load_scenario, random_orbit_descriptor
from .trails import record_trails

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StepConfig:
    """Per-step switches passed into :func:`step`."""

    collisions_enabled: bool = True
    paused: bool = False


class StepperState(Enum):
    IDLE = "idle"
    STEPPING = "stepping"


def step(bodies, dt_seconds, config=StepConfig()):
    """Advance ``bodies`` by ``dt_seconds`` and return the new snapshot.

    Phases run in a fixed order, each finishing before the next starts:
    collision resolution, force accumulation, integration, trail
    recording. The input list and its bodies are never modified. When
    ``config.paused`` is set the input list is returned as is.

    Raises :class:`~orbitsandbox.physics.InvalidBodyError` when a merge
    would produce non-finite values.
    """
    if config.paused:
        return bodies

    snapshot = [b.copy() for b in bodies]
    if config.collisions_enabled:
        snapshot = resolve_collisions(snapshot)
    if not snapshot:
        return []

    net_forces = forces(snapshot)
    integrate(snapshot, net_forces, dt_seconds)
    record_trails(snapshot)
    return snapshot


def add_body(bodies, descriptor):
    """Return a new registry with one body built from ``descriptor`` appended.

    Raises :class:`~orbitsandbox.physics.InvalidBodyError` if the descriptor
    has a non-positive mass or radius, an unknown type, or an id already
    used by a live body.
    """
    taken = {b.id for b in bodies}
    if isinstance(descriptor, Body):
        body = descriptor
    else:
        if descriptor.get("id") is None:
            descriptor = dict(descriptor, id=Body.next_id(taken))
        body = Body.from_descriptor(descriptor)
    if body.id in taken:
        raise InvalidBodyError(f"a body with id {body.id!r} already exists")
    logger.info("adding %s %s (mass=%g, radius=%g)", body.body_type, body.id, body.mass, body.radius)
    return list(bodies) + [body]


def clear_trails(bodies):
    """Return copies of ``bodies`` with empty trails."""
    cleared = []
    for b in bodies:
        clone = b.copy()
        clone.clear_trail()
        cleared.append(clone)
    return cleared


def remove_all(bodies):
    """Drop every body; the registry is simply empty afterwards."""
    return []


class Simulation:
    """Stateful owner of the body registry for an interactive session."""

    def __init__(
        self,
        scenario="solar-system",
        *,
        time_scale=1.0,
        collisions_enabled=True,
        show_trails=True,
        seed=None,
    ):
        self.bodies = []
        self.scenario = scenario
        self.paused = False
        self.time_scale = 1.0
        self.set_time_scale(time_scale)
        self.collisions_enabled = collisions_enabled
        self.show_trails = show_trails
        self.simulation_time = 0.0
        self.step_count = 0
        self.rng = np.random.default_rng(seed)
        if scenario is not None:
            self.load_scenario(scenario)

    # ------------------------------------------------------------------
    @property
    def state(self):
        return StepperState.IDLE if self.paused else StepperState.STEPPING

    @property
    def config(self):
        return StepConfig(collisions_enabled=self.collisions_enabled, paused=self.paused)

    @property
    def dt(self):
        """Simulated seconds covered by one call to :meth:`advance`."""
        return C.TIME_SCALE * self.time_scale

    # ------------------------------------------------------------------
    def load_scenario(self, name):
        self.bodies = load_scenario(name)
        self.scenario = name
        self.simulation_time = 0.0
        self.step_count = 0

    def add_body(self, descriptor):
        self.bodies = add_body(self.bodies, descriptor)
        return self.bodies[-1]

    def add_random_body(
        self,
        mass=C.DEFAULT_NEW_BODY_MASS,
        radius=C.DEFAULT_NEW_BODY_RADIUS,
        body_type=C.DEFAULT_NEW_BODY_TYPE,
    ):
        """Place a new body on a circular orbit around a solar mass."""
        descriptor = random_orbit_descriptor(
            self.rng,
            mass=mass,
            radius=radius,
            body_type=body_type,
            count=len(self.bodies),
        )
        return self.add_body(descriptor)

    def clear_trails(self):
        self.bodies = clear_trails(self.bodies)

    def remove_all(self):
        self.bodies = remove_all(self.bodies)

    def toggle_pause(self):
        self.paused = not self.paused
        return self.paused

    def set_time_scale(self, value):
        self.time_scale = float(np.clip(value, C.MIN_TIME_SCALE, C.MAX_TIME_SCALE))
        return self.time_scale

    # ------------------------------------------------------------------
    def advance(self):
        """Run one frame's step; returns the current snapshot.

        A step whose merge would produce non-finite values is discarded: the
        previous snapshot is kept and the simulation pauses.
        """
        if self.state is StepperState.IDLE:
            return self.bodies
        dt = self.dt
        try:
            self.bodies = step(self.bodies, dt, self.config)
        except InvalidBodyError as exc:
            logger.error("step rejected, pausing: %s", exc)
            self.paused = True
            return self.bodies
        self.simulation_time += dt
        self.step_count += 1
        return self.bodies
