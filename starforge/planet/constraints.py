import logging
import math
from typing import Optional

import pydantic

from starforge.constraints import BaseConstraints, resolve
from starforge.errors import OutOfRangeError
from starforge.host_star import HostStar
from starforge.planet.constants import (
    EARTH_ESCAPE_VELOCITY,
    GAS_GIANT_MASS_LOG_MEAN,
    GAS_GIANT_MASS_LOG_SIGMA,
    GAS_GIANT_MAXIMUM_MASS,
    GAS_GIANT_MINIMUM_MASS,
    GAS_GIANT_ORBITAL_ECCENTRICITY,
    TERRESTRIAL_MAXIMUM_HABITABLE_MASS,
    TERRESTRIAL_MAXIMUM_HABITABLE_ORBITAL_ECCENTRICITY,
    TERRESTRIAL_MAXIMUM_MASS,
    TERRESTRIAL_MAXIMUM_ORBITAL_ECCENTRICITY,
    TERRESTRIAL_MINIMUM_HABITABLE_MASS,
    TERRESTRIAL_MINIMUM_MASS,
    TERRESTRIAL_MINIMUM_ORBITAL_ECCENTRICITY,
    TERRESTRIAL_RADIUS_EXPONENT,
)
from starforge.planet.orbit import get_orbital_elements
from starforge.planet.planet import GasGiantPlanet, Planet, TerrestrialPlanet
from starforge.random_stream import RandomStream, sample_uniform

logger = logging.getLogger(__name__)


def _check_distance(distance: float):
    if distance <= 0.0:
        raise OutOfRangeError(f"Orbital distance must be positive, got {distance} AU")


class TerrestrialPlanetConstraints(BaseConstraints):
    """Constraints for creating a terrestrial planet. Masses in Earth masses."""

    bound_pairs = (
        ("minimum_mass", "maximum_mass"),
        ("minimum_orbital_eccentricity", "maximum_orbital_eccentricity"),
    )

    minimum_mass: Optional[float] = pydantic.Field(default=None, gt=0)
    maximum_mass: Optional[float] = pydantic.Field(default=None, gt=0)
    minimum_orbital_eccentricity: Optional[float] = pydantic.Field(default=None, ge=0, lt=1)
    maximum_orbital_eccentricity: Optional[float] = pydantic.Field(default=None, ge=0, lt=1)

    @classmethod
    def habitable(cls) -> "TerrestrialPlanetConstraints":
        return cls(
            minimum_mass=TERRESTRIAL_MINIMUM_HABITABLE_MASS,
            maximum_mass=TERRESTRIAL_MAXIMUM_HABITABLE_MASS,
            maximum_orbital_eccentricity=TERRESTRIAL_MAXIMUM_HABITABLE_ORBITAL_ECCENTRICITY,
        )

    def generate(self, host_star: HostStar, distance: float, rng: RandomStream) -> TerrestrialPlanet:
        _check_distance(distance)
        minimum_mass = resolve(self.minimum_mass, TERRESTRIAL_MINIMUM_MASS)
        maximum_mass = resolve(self.maximum_mass, TERRESTRIAL_MAXIMUM_MASS)
        minimum_eccentricity = resolve(self.minimum_orbital_eccentricity, TERRESTRIAL_MINIMUM_ORBITAL_ECCENTRICITY)
        maximum_eccentricity = resolve(self.maximum_orbital_eccentricity, TERRESTRIAL_MAXIMUM_ORBITAL_ECCENTRICITY)

        mass = sample_uniform(rng, minimum_mass, maximum_mass, "terrestrial planet mass")
        orbital_eccentricity = sample_uniform(rng, minimum_eccentricity, maximum_eccentricity, "orbital eccentricity")
        perihelion, aphelion, orbital_period = get_orbital_elements(distance, orbital_eccentricity, host_star.mass)

        radius = mass**TERRESTRIAL_RADIUS_EXPONENT
        planet = TerrestrialPlanet(
            mass=mass,
            radius=radius,
            density=mass / radius**3,
            surface_gravity=mass / radius**2,
            escape_velocity=math.sqrt(mass / radius) * EARTH_ESCAPE_VELOCITY,
            semi_major_axis=distance,
            orbital_eccentricity=orbital_eccentricity,
            perihelion=perihelion,
            aphelion=aphelion,
            orbital_period=orbital_period,
        )
        logger.debug(f"Generated terrestrial planet of {mass:.3f} Mearth at {distance:.3f} AU")
        return planet


class GasGiantPlanetConstraints(BaseConstraints):
    """Constraints for creating a gas giant. Masses in Jupiter masses."""

    bound_pairs = (("minimum_mass", "maximum_mass"),)

    minimum_mass: Optional[float] = pydantic.Field(default=None, gt=0)
    maximum_mass: Optional[float] = pydantic.Field(default=None, gt=0)
    orbital_eccentricity: Optional[float] = pydantic.Field(default=None, ge=0, lt=1)

    @classmethod
    def habitable(cls) -> "GasGiantPlanetConstraints":
        """Gas giants never host life themselves, so there is nothing to tighten."""
        return cls()

    def generate(self, host_star: HostStar, distance: float, rng: RandomStream) -> GasGiantPlanet:
        """
        Raises:
            OutOfRangeError: if the log-normal mass draw falls outside the resolved mass bounds.
        """
        _check_distance(distance)
        minimum_mass = resolve(self.minimum_mass, GAS_GIANT_MINIMUM_MASS)
        maximum_mass = resolve(self.maximum_mass, GAS_GIANT_MAXIMUM_MASS)

        mass = float(rng.lognormal(GAS_GIANT_MASS_LOG_MEAN, GAS_GIANT_MASS_LOG_SIGMA))
        if not minimum_mass <= mass < maximum_mass:
            raise OutOfRangeError(
                f"Gas giant mass {mass:.3f} Mjup falls outside [{minimum_mass}, {maximum_mass})"
            )

        orbital_eccentricity = resolve(self.orbital_eccentricity, GAS_GIANT_ORBITAL_ECCENTRICITY)
        perihelion, aphelion, orbital_period = get_orbital_elements(distance, orbital_eccentricity, host_star.mass)
        logger.debug(f"Generated gas giant of {mass:.3f} Mjup at {distance:.3f} AU")
        return GasGiantPlanet(
            mass=mass,
            semi_major_axis=distance,
            orbital_eccentricity=orbital_eccentricity,
            perihelion=perihelion,
            aphelion=aphelion,
            orbital_period=orbital_period,
        )


class PlanetConstraints(BaseConstraints):
    """
    Constraints for creating a planet.

    Whether the planet is a gas giant or a terrestrial planet depends on the
    orbital distance relative to the host's frost line.
    """

    gas_giant_planet_constraints: Optional[GasGiantPlanetConstraints] = None
    terrestrial_planet_constraints: Optional[TerrestrialPlanetConstraints] = None

    @classmethod
    def habitable(cls) -> "PlanetConstraints":
        return cls(terrestrial_planet_constraints=TerrestrialPlanetConstraints.habitable())

    def generate(self, host_star: HostStar, distance: float, rng: RandomStream) -> Planet:
        if distance >= host_star.frost_line:
            constraints = resolve(self.gas_giant_planet_constraints, GasGiantPlanetConstraints.default())
        else:
            constraints = resolve(self.terrestrial_planet_constraints, TerrestrialPlanetConstraints.default())
        return constraints.generate(host_star, distance, rng)
