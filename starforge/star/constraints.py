import logging
from typing import Optional

import pydantic

from starforge.constraints import BaseConstraints, resolve
from starforge.random_stream import RandomStream, sample_uniform
from starforge.star.constants import (
    MAXIMUM_HABITABLE_MASS,
    MAXIMUM_MASS,
    MINIMUM_HABITABLE_AGE,
    MINIMUM_HABITABLE_MASS,
    MINIMUM_MAIN_SEQUENCE_STAR_MASS,
)
from starforge.star.spectral_class import get_random_spectral_class
from starforge.star.star import Star

logger = logging.getLogger(__name__)


class StarConstraints(BaseConstraints):
    """Constraints for creating a main-sequence star. Masses in Msol, ages in Gyr."""

    bound_pairs = (("minimum_mass", "maximum_mass"), ("minimum_age", "maximum_age"))

    minimum_mass: Optional[float] = pydantic.Field(default=None, gt=0)
    maximum_mass: Optional[float] = pydantic.Field(default=None, gt=0)
    minimum_age: Optional[float] = pydantic.Field(default=None, gt=0)
    maximum_age: Optional[float] = pydantic.Field(default=None, gt=0)
    enforce_habitability: bool = False

    @classmethod
    def habitable(cls) -> "StarConstraints":
        return cls(
            minimum_mass=MINIMUM_HABITABLE_MASS,
            maximum_mass=MAXIMUM_HABITABLE_MASS,
            minimum_age=MINIMUM_HABITABLE_AGE,
            enforce_habitability=True,
        )

    def generate(self, rng: RandomStream) -> Star:
        default_minimum_mass = MINIMUM_HABITABLE_MASS if self.enforce_habitability else MINIMUM_MAIN_SEQUENCE_STAR_MASS
        default_maximum_mass = MAXIMUM_HABITABLE_MASS if self.enforce_habitability else MAXIMUM_MASS
        minimum_mass = resolve(self.minimum_mass, default_minimum_mass)
        maximum_mass = resolve(self.maximum_mass, default_maximum_mass)
        logger.debug(f"Resolved star mass window [{minimum_mass}, {maximum_mass})")

        spectral_class = get_random_spectral_class(
            rng, minimum_mass=minimum_mass, maximum_mass=maximum_mass, habitable=self.enforce_habitability
        )
        lower_bound_mass, upper_bound_mass = spectral_class.narrowed_mass_range(minimum_mass, maximum_mass)
        mass = sample_uniform(rng, lower_bound_mass, upper_bound_mass, "stellar mass")
        logger.debug(f"Drew spectral class {spectral_class.letter} and mass {mass:.3f} Msol")

        minimum_age = self.minimum_age
        if minimum_age is None and self.enforce_habitability:
            minimum_age = MINIMUM_HABITABLE_AGE
        return Star.from_mass(mass, rng, minimum_age=minimum_age, maximum_age=self.maximum_age)
