"""Discrete-time N-body gravity sandbox."""

from importlib.metadata import PackageNotFoundError, version

from .physics import Body, InvalidBodyError, forces, integrate
from .integrators import compute_forces, euler_step_arrays
from .collisions import resolve_collisions
from .trails import record_trails
from .simulation import (
    Simulation,
    StepConfig,
    StepperState,
    add_body,
    clear_trails,
    remove_all,
    step,
)
from .presets import PRESETS, SCENARIOS, load_scenario, random_orbit_descriptor
from .constants import (
    G,
    SCALE,
    TIME_SCALE,
    TRAIL_THRESHOLD,
    TRAIL_CAPACITY,
)
try:
    __version__ = version("orbitsandbox")
except PackageNotFoundError:
    # Fallback when package metadata is unavailable (e.g. running from source)
    __version__ = "0.0.0"

__all__ = [
    "Body",
    "InvalidBodyError",
    "forces",
    "integrate",
    "compute_forces",
    "euler_step_arrays",
    "resolve_collisions",
    "record_trails",
    "Simulation",
    "StepConfig",
    "StepperState",
    "step",
    "add_body",
    "clear_trails",
    "remove_all",
    "PRESETS",
    "SCENARIOS",
    "load_scenario",
    "random_orbit_descriptor",
    "G",
    "SCALE",
    "TIME_SCALE",
    "TRAIL_THRESHOLD",
    "TRAIL_CAPACITY",
    "__version__",
]
