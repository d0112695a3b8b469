"""Physical constants and default settings for the sandbox.

The first block is part of the stepping contract: changing any of these
values changes the trajectories produced by :func:`orbitsandbox.simulation.step`.
"""

import numpy as np

# --- Stepping contract ---
G = 6.67430e-11  # gravitational constant
SCALE = 1e-9  # metres -> simulation units
TIME_SCALE = 60 * 60 * 24  # simulated seconds per step at time-scale 1
TRAIL_THRESHOLD = 1.0  # minimum displacement before a new trail point
TRAIL_CAPACITY = 1000
MIN_TIME_SCALE = 0.1
MAX_TIME_SCALE = 5.0
TIME_SCALE_INCREMENT = 0.1

# --- Reference masses ---
SOLAR_MASS = 1.989e30
EARTH_MASS = 5.972e24

# --- Body types ---
BODY_TYPES = ("star", "planet", "moon", "asteroid")
TYPE_COLORS = {
    "star": "#FDB813",
    "planet": "#4A90E2",
    "moon": "#AAAAAA",
    "asteroid": "#8B7355",
}

# --- New body defaults ---
DEFAULT_NEW_BODY_MASS = EARTH_MASS
DEFAULT_NEW_BODY_RADIUS = 10.0
MIN_NEW_BODY_RADIUS = 1.0
MAX_NEW_BODY_RADIUS = 50.0
DEFAULT_NEW_BODY_TYPE = "planet"
NEW_BODY_MIN_DISTANCE = 100.0
NEW_BODY_DISTANCE_SPREAD = 200.0

# --- Viewer ---
WIDTH, HEIGHT = 1200, 800
FPS = 60
ZOOM_BASE = 1.2
CAMERA_SMOOTHING = 0.08
INITIAL_PAN_OFFSET = np.array([WIDTH / 2, HEIGHT / 2], dtype=float)
MIN_DRAW_RADIUS = 2
MAX_DRAW_RADIUS = 4096
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
HUD_COLOR = (200, 200, 200)
