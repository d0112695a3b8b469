"""Formatting helpers for the viewer HUD."""

from . import constants as C


def mass_to_display(mass_kg: float) -> str:
    if mass_kg == 0:
        return "0 kg"
    if mass_kg >= 0.1 * C.SOLAR_MASS:
        return f"{mass_kg/C.SOLAR_MASS:.2f} M☉"
    if mass_kg >= 0.1 * C.EARTH_MASS:
        return f"{mass_kg/C.EARTH_MASS:.2f} M⊕"
    return f"{mass_kg:.2e} kg"


def time_to_display(seconds: float) -> str:
    if seconds < 0:
        return "N/A"
    if seconds == 0:
        return "0 days"
    years = seconds / 31536000
    if years >= 1:
        return f"{years:.1f} years"
    days = seconds / 86400
    if days >= 1:
        return f"{days:.1f} days"
    return f"{seconds / 3600:.1f} hrs"


def time_scale_to_display(time_scale: float) -> str:
    return f"{time_scale:.1f}x"


def status_to_display(paused: bool) -> str:
    return "Paused" if paused else "Running"
