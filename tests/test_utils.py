from orbitsandbox.utils import (
    mass_to_display,
    status_to_display,
    time_scale_to_display,
    time_to_display,
)
from orbitsandbox import constants as C


def test_mass_to_display_ranges():
    assert mass_to_display(0) == "0 kg"
    assert mass_to_display(C.SOLAR_MASS) == "1.00 M☉"
    assert mass_to_display(0.5 * C.EARTH_MASS) == "0.50 M⊕"
    assert mass_to_display(50) == "5.00e+01 kg"


def test_time_to_display_ranges():
    assert time_to_display(-1) == "N/A"
    assert time_to_display(0) == "0 days"
    assert time_to_display(2 * 31536000) == "2.0 years"
    assert time_to_display(2 * 86400) == "2.0 days"
    assert time_to_display(0.5 * 86400) == "12.0 hrs"


def test_time_scale_and_status():
    assert time_scale_to_display(1) == "1.0x"
    assert time_scale_to_display(0.1) == "0.1x"
    assert status_to_display(True) == "Paused"
    assert status_to_display(False) == "Running"
