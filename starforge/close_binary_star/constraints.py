import logging
from typing import Optional

import pydantic

from starforge.close_binary_star.close_binary_star import CloseBinaryStar, minimum_habitable_combined_mass
from starforge.close_binary_star.constants import (
    MAXIMUM_AVERAGE_SEPARATION,
    MAXIMUM_COMBINED_MASS,
    MAXIMUM_HABITABLE_COMBINED_MASS,
    MAXIMUM_HABITABLE_INDIVIDUAL_MASS,
    MAXIMUM_HABITABLE_SEPARATION,
    MAXIMUM_INDIVIDUAL_MASS,
    MAXIMUM_ORBITAL_ECCENTRICITY,
    MINIMUM_AVERAGE_SEPARATION,
    MINIMUM_COMBINED_MASS,
    MINIMUM_HABITABLE_AGE,
    MINIMUM_HABITABLE_COMBINED_MASS,
    MINIMUM_HABITABLE_INDIVIDUAL_MASS,
    MINIMUM_INDIVIDUAL_MASS,
    MINIMUM_MAIN_SEQUENCE_STAR_MASS,
    MINIMUM_ORBITAL_ECCENTRICITY,
)
from starforge.constraints import BaseConstraints, resolve
from starforge.random_stream import RandomStream, sample_uniform
from starforge.star.star import Star

logger = logging.getLogger(__name__)


class CloseBinaryStarConstraints(BaseConstraints):
    """Constraints for creating a close binary star. Masses in Msol, separations in AU, ages in Gyr."""

    bound_pairs = (
        ("minimum_combined_mass", "maximum_combined_mass"),
        ("minimum_individual_mass", "maximum_individual_mass"),
        ("minimum_average_separation", "maximum_average_separation"),
        ("minimum_orbital_eccentricity", "maximum_orbital_eccentricity"),
        ("minimum_age", "maximum_age"),
    )

    minimum_combined_mass: Optional[float] = pydantic.Field(default=None, gt=0)
    maximum_combined_mass: Optional[float] = pydantic.Field(default=None, gt=0)
    minimum_individual_mass: Optional[float] = pydantic.Field(default=None, gt=0)
    maximum_individual_mass: Optional[float] = pydantic.Field(default=None, gt=0)
    minimum_average_separation: Optional[float] = pydantic.Field(default=None, gt=0)
    maximum_average_separation: Optional[float] = pydantic.Field(default=None, gt=0)
    minimum_orbital_eccentricity: Optional[float] = pydantic.Field(default=None, ge=0, lt=1)
    maximum_orbital_eccentricity: Optional[float] = pydantic.Field(default=None, ge=0, lt=1)
    minimum_age: Optional[float] = pydantic.Field(default=None, gt=0)
    maximum_age: Optional[float] = pydantic.Field(default=None, gt=0)
    enforce_habitability: bool = False

    @classmethod
    def habitable(cls) -> "CloseBinaryStarConstraints":
        return cls(
            minimum_combined_mass=MINIMUM_HABITABLE_COMBINED_MASS,
            maximum_combined_mass=MAXIMUM_HABITABLE_COMBINED_MASS,
            minimum_individual_mass=MINIMUM_HABITABLE_INDIVIDUAL_MASS,
            maximum_individual_mass=MAXIMUM_HABITABLE_INDIVIDUAL_MASS,
            maximum_average_separation=MAXIMUM_HABITABLE_SEPARATION,
            minimum_age=MINIMUM_HABITABLE_AGE,
            enforce_habitability=True,
        )

    def generate(self, rng: RandomStream) -> CloseBinaryStar:
        habitable = self.enforce_habitability
        minimum_combined_mass = resolve(
            self.minimum_combined_mass, MINIMUM_HABITABLE_COMBINED_MASS if habitable else MINIMUM_COMBINED_MASS
        )
        maximum_combined_mass = resolve(
            self.maximum_combined_mass, MAXIMUM_HABITABLE_COMBINED_MASS if habitable else MAXIMUM_COMBINED_MASS
        )
        minimum_individual_mass = resolve(
            self.minimum_individual_mass, MINIMUM_HABITABLE_INDIVIDUAL_MASS if habitable else MINIMUM_INDIVIDUAL_MASS
        )
        maximum_individual_mass = resolve(
            self.maximum_individual_mass, MAXIMUM_HABITABLE_INDIVIDUAL_MASS if habitable else MAXIMUM_INDIVIDUAL_MASS
        )
        minimum_average_separation = resolve(self.minimum_average_separation, MINIMUM_AVERAGE_SEPARATION)
        maximum_average_separation = resolve(
            self.maximum_average_separation, MAXIMUM_HABITABLE_SEPARATION if habitable else MAXIMUM_AVERAGE_SEPARATION
        )
        minimum_orbital_eccentricity = resolve(self.minimum_orbital_eccentricity, MINIMUM_ORBITAL_ECCENTRICITY)
        maximum_orbital_eccentricity = resolve(self.maximum_orbital_eccentricity, MAXIMUM_ORBITAL_ECCENTRICITY)
        minimum_age = resolve(self.minimum_age, MINIMUM_HABITABLE_AGE if habitable else None)

        orbital_eccentricity = sample_uniform(
            rng, minimum_orbital_eccentricity, maximum_orbital_eccentricity, "orbital eccentricity"
        )
        average_separation = sample_uniform(
            rng, minimum_average_separation, maximum_average_separation, "average separation"
        )
        logger.debug(f"Drew separation {average_separation:.3f} AU and eccentricity {orbital_eccentricity:.3f}")

        if habitable:
            # The habitable zone must clear the forbidden zone even at the widest allowed separation
            minimum_combined_mass = minimum_habitable_combined_mass(maximum_average_separation, orbital_eccentricity)
            logger.debug(f"Recomputed minimum combined mass: {minimum_combined_mass:.3f} Msol")

        combined_mass = sample_uniform(rng, minimum_combined_mass, maximum_combined_mass, "combined mass")
        secondary_floor = max(minimum_individual_mass, MINIMUM_MAIN_SEQUENCE_STAR_MASS)
        primary_mass = sample_uniform(
            rng,
            max(combined_mass / 2.0, combined_mass - maximum_individual_mass, minimum_individual_mass),
            min(combined_mass - secondary_floor, maximum_individual_mass),
            "primary mass",
        )
        secondary_mass = combined_mass - primary_mass
        logger.debug(f"Split combined mass {combined_mass:.3f} into {primary_mass:.3f} + {secondary_mass:.3f} Msol")

        primary = Star.from_mass(primary_mass, rng, minimum_age=minimum_age, maximum_age=self.maximum_age)
        secondary = Star.from_mass(secondary_mass, rng, minimum_age=minimum_age, maximum_age=self.maximum_age)
        return CloseBinaryStar(
            primary=primary,
            secondary=secondary,
            average_separation=average_separation,
            orbital_eccentricity=orbital_eccentricity,
        )
