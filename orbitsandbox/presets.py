"""Named initial configurations and the random orbit generator."""
import logging
import math

from . import constants as C
from .physics import Body

logger = logging.getLogger(__name__)


PRESETS = {
    "solar-system": [
        {
            "id": "sun",
            "name": "Sun",
            "mass": 1.989e30,
            "radius": 20,
            "color": "#FDB813",
            "type": "star",
            "pos": (0, 0, 0),
            "vel": (0, 0, 0),
        },
        {
            "id": "earth",
            "name": "Earth",
            "mass": 5.972e24,
            "radius": 8,
            "color": "#4A90E2",
            "type": "planet",
            "pos": (150, 0, 0),
            "vel": (0, 0, 29.78e3),
        },
        {
            "id": "mars",
            "name": "Mars",
            "mass": 6.39e23,
            "radius": 5,
            "color": "#E27B58",
            "type": "planet",
            "pos": (228, 0, 0),
            "vel": (0, 0, 24.07e3),
        },
        {
            "id": "venus",
            "name": "Venus",
            "mass": 4.867e24,
            "radius": 7,
            "color": "#FFC649",
            "type": "planet",
            "pos": (108, 0, 0),
            "vel": (0, 0, 35.02e3),
        },
        {
            "id": "jupiter",
            "name": "Jupiter",
            "mass": 1.898e27,
            "radius": 15,
            "color": "#C88B3A",
            "type": "planet",
            "pos": (380, 0, 0),
            "vel": (0, 0, 13.07e3),
        },
    ],
    "binary-stars": [
        {
            "id": "star1",
            "name": "Star 1",
            "mass": 1.5e30,
            "radius": 18,
            "color": "#FDB813",
            "type": "star",
            "pos": (-100, 0, 0),
            "vel": (0, 0, 15e3),
        },
        {
            "id": "star2",
            "name": "Star 2",
            "mass": 1.2e30,
            "radius": 16,
            "color": "#FF6B6B",
            "type": "star",
            "pos": (100, 0, 0),
            "vel": (0, 0, -15e3),
        },
        {
            "id": "planet",
            "name": "Planet",
            "mass": 5.972e24,
            "radius": 8,
            "color": "#4A90E2",
            "type": "planet",
            "pos": (0, 150, 0),
            "vel": (25e3, 0, 0),
        },
    ],
    "three-body": [
        {
            "id": "body1",
            "name": "Body 1",
            "mass": 1e30,
            "radius": 15,
            "color": "#FDB813",
            "type": "star",
            "pos": (-100, 0, 0),
            "vel": (0, 15e3, 10e3),
        },
        {
            "id": "body2",
            "name": "Body 2",
            "mass": 1e30,
            "radius": 15,
            "color": "#4A90E2",
            "type": "star",
            "pos": (100, 0, 0),
            "vel": (0, -15e3, -5e3),
        },
        {
            "id": "body3",
            "name": "Body 3",
            "mass": 1e30,
            "radius": 15,
            "color": "#E27B58",
            "type": "star",
            "pos": (0, 150, 0),
            "vel": (-20e3, 0, -5e3),
        },
    ],
    "empty": [],
}

SCENARIOS = tuple(PRESETS)


def load_scenario(name):
    """Return a fresh list of bodies for the named scenario."""
    if name not in PRESETS:
        raise KeyError(f"Scenario '{name}' not found")
    bodies = [Body.from_descriptor(cfg) for cfg in PRESETS[name]]
    logger.info("loaded scenario %s with %d bodies", name, len(bodies))
    return bodies


def random_orbit_descriptor(
    rng,
    *,
    mass=C.DEFAULT_NEW_BODY_MASS,
    radius=C.DEFAULT_NEW_BODY_RADIUS,
    body_type=C.DEFAULT_NEW_BODY_TYPE,
    count=0,
    central_mass=C.SOLAR_MASS,
):
    """Describe a body on a circular orbit in the x/z plane.

    The body is placed at a random angle, 100 to 300 units from the origin,
    with the circular orbital speed ``sqrt(G * central_mass / r)`` where
    ``r`` is the distance converted back to metres.

    Parameters
    ----------
    rng : numpy.random.Generator
        Source of the angle and distance.
    count : int, optional
        Number of bodies already present; used for the default name.
    """
    angle = rng.uniform(0.0, 2 * math.pi)
    distance = C.NEW_BODY_MIN_DISTANCE + rng.uniform(0.0, C.NEW_BODY_DISTANCE_SPREAD)
    speed = math.sqrt(C.G * central_mass / (distance / C.SCALE))
    return {
        "name": f"{body_type} {count + 1}",
        "mass": mass,
        "radius": radius,
        "type": body_type,
        "color": C.TYPE_COLORS.get(body_type),
        "pos": (math.cos(angle) * distance, 0.0, math.sin(angle) * distance),
        "vel": (-math.sin(angle) * speed, 0.0, math.cos(angle) * speed),
    }
