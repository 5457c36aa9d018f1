"""
Closed-form main-sequence relations.

Every mass-driven function raises ``OutOfRangeError`` when the mass falls
outside the main sequence, and callers let that error propagate unchanged.
"""

import math

from starforge.errors import OutOfRangeError
from starforge.star.constants import (
    FROST_LINE_COEFFICIENT,
    HABITABLE_ZONE_INNER_FLUX,
    HABITABLE_ZONE_OUTER_FLUX,
    MAXIMUM_MASS,
    MINIMUM_MASS,
    SATELLITE_ZONE_INNER_COEFFICIENT,
    SATELLITE_ZONE_OUTER_COEFFICIENT,
    SUN_TEMPERATURE,
)
from starforge.star.spectral_class import SpectralClass


def _check_main_sequence_mass(mass: float):
    if mass < MINIMUM_MASS:
        raise OutOfRangeError(f"Stellar mass {mass} Msol is too low for the main sequence (minimum {MINIMUM_MASS})")
    if mass > MAXIMUM_MASS:
        raise OutOfRangeError(f"Stellar mass {mass} Msol is too high for the main sequence (maximum {MAXIMUM_MASS})")


def star_mass_to_luminosity(mass: float) -> float:
    _check_main_sequence_mass(mass)
    if mass < 0.43:
        return 0.23 * mass**2.3
    if mass < 2.0:
        return mass**4.0
    if mass < 55.0:
        return 1.4 * mass**3.5
    return 32_000.0 * mass


def star_mass_to_radius(mass: float) -> float:
    _check_main_sequence_mass(mass)
    if mass < 1.0:
        return mass**0.8
    return mass**0.57


def star_mass_to_temperature(mass: float) -> float:
    luminosity = star_mass_to_luminosity(mass)
    radius = star_mass_to_radius(mass)
    return SUN_TEMPERATURE * (luminosity / radius**2) ** 0.25


def star_mass_to_life_expectancy(mass: float) -> float:
    """Main-sequence lifetime in Gyr."""
    return mass / star_mass_to_luminosity(mass) * 10.0


def star_mass_to_spectral_class(mass: float) -> str:
    """Full designation such as ``G2V``; only main-sequence (class V) stars are produced."""
    temperature = star_mass_to_temperature(mass)
    spectral_class = SpectralClass.from_temperature(temperature)
    return f"{spectral_class.letter}{spectral_class.subclass(temperature)}V"


def star_mass_to_rgb(mass: float) -> tuple[int, int, int]:
    # Tanner Helland's black-body approximation
    t = star_mass_to_temperature(mass) / 100.0
    if t <= 66.0:
        red = 255.0
        green = 99.4708025861 * math.log(t) - 161.1195681661
    else:
        red = 329.698727446 * (t - 60.0) ** -0.1332047592
        green = 288.1221695283 * (t - 60.0) ** -0.0755148492
    if t >= 66.0:
        blue = 255.0
    elif t <= 19.0:
        blue = 0.0
    else:
        blue = 138.5177312231 * math.log(t - 10.0) - 305.0447927307

    return tuple(int(min(max(channel, 0.0), 255.0)) for channel in (red, green, blue))


def get_approximate_innermost_orbit(mass: float) -> float:
    _check_main_sequence_mass(mass)
    return SATELLITE_ZONE_INNER_COEFFICIENT * mass


def get_approximate_outermost_orbit(mass: float) -> float:
    _check_main_sequence_mass(mass)
    return SATELLITE_ZONE_OUTER_COEFFICIENT * mass


def satellite_zone_from_mass(mass: float) -> tuple[float, float]:
    """Satellite zone of any mass concentration, including aggregates beyond a single star."""
    return SATELLITE_ZONE_INNER_COEFFICIENT * mass, SATELLITE_ZONE_OUTER_COEFFICIENT * mass


def habitable_zone_from_luminosity(luminosity: float) -> tuple[float, float]:
    return math.sqrt(luminosity / HABITABLE_ZONE_INNER_FLUX), math.sqrt(luminosity / HABITABLE_ZONE_OUTER_FLUX)


def frost_line_from_luminosity(luminosity: float) -> float:
    return FROST_LINE_COEFFICIENT * math.sqrt(luminosity)
