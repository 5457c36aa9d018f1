from dataclasses import dataclass
from typing import Union

from starforge.errors import NotHabitableError
from starforge.planet.constants import (
    TERRESTRIAL_MAXIMUM_HABITABLE_MASS,
    TERRESTRIAL_MAXIMUM_HABITABLE_ORBITAL_ECCENTRICITY,
    TERRESTRIAL_MINIMUM_HABITABLE_MASS,
)


@dataclass(frozen=True)
class TerrestrialPlanet:
    """
    A rocky planet orbiting inside its host's frost line.

    Masses, radii, densities and surface gravity are relative to Earth; orbital
    distances in AU, period in years, escape velocity in km/s.
    """

    mass: float
    radius: float
    density: float
    surface_gravity: float
    escape_velocity: float
    semi_major_axis: float
    orbital_eccentricity: float
    perihelion: float
    aphelion: float
    orbital_period: float

    def check_habitable(self):
        if self.mass < TERRESTRIAL_MINIMUM_HABITABLE_MASS:
            raise NotHabitableError(f"Planet mass {self.mass:.3f} Mearth is too low to retain an atmosphere")
        if self.mass > TERRESTRIAL_MAXIMUM_HABITABLE_MASS:
            raise NotHabitableError(f"Planet mass {self.mass:.3f} Mearth is too high for a rocky surface")
        if self.orbital_eccentricity > TERRESTRIAL_MAXIMUM_HABITABLE_ORBITAL_ECCENTRICITY:
            raise NotHabitableError(f"Orbital eccentricity {self.orbital_eccentricity:.3f} is too high for life")

    @property
    def is_habitable(self) -> bool:
        try:
            self.check_habitable()
        except NotHabitableError:
            return False
        return True


@dataclass(frozen=True)
class GasGiantPlanet:
    """A gas giant orbiting beyond its host's frost line. Mass in Jupiter masses."""

    mass: float
    semi_major_axis: float
    orbital_eccentricity: float
    perihelion: float
    aphelion: float
    orbital_period: float

    def check_habitable(self):
        raise NotHabitableError("Gas giants cannot support conventional life")

    @property
    def is_habitable(self) -> bool:
        return False


Planet = Union[TerrestrialPlanet, GasGiantPlanet]
