import logging
from typing import Optional

import pydantic

from starforge.constraints import BaseConstraints, resolve
from starforge.moon.constants import (
    MAXIMUM_ALBEDO,
    MAXIMUM_HABITABLE_ALBEDO,
    MAXIMUM_HABITABLE_MASS,
    MAXIMUM_MASS,
    MINIMUM_ALBEDO,
    MINIMUM_HABITABLE_ALBEDO,
    MINIMUM_HABITABLE_MASS,
    MINIMUM_MASS,
)
from starforge.moon.moon import Moon
from starforge.random_stream import RandomStream, sample_uniform

logger = logging.getLogger(__name__)


class MoonConstraints(BaseConstraints):
    bound_pairs = (("minimum_mass", "maximum_mass"), ("minimum_albedo", "maximum_albedo"))

    minimum_mass: Optional[float] = pydantic.Field(default=None, gt=0)
    maximum_mass: Optional[float] = pydantic.Field(default=None, gt=0)
    minimum_albedo: Optional[float] = pydantic.Field(default=None, ge=0, le=1)
    maximum_albedo: Optional[float] = pydantic.Field(default=None, ge=0, le=1)

    @classmethod
    def habitable(cls) -> "MoonConstraints":
        return cls(
            minimum_mass=MINIMUM_HABITABLE_MASS,
            maximum_mass=MAXIMUM_HABITABLE_MASS,
            minimum_albedo=MINIMUM_HABITABLE_ALBEDO,
            maximum_albedo=MAXIMUM_HABITABLE_ALBEDO,
        )

    def generate(self, rng: RandomStream) -> Moon:
        mass = sample_uniform(
            rng, resolve(self.minimum_mass, MINIMUM_MASS), resolve(self.maximum_mass, MAXIMUM_MASS), "moon mass"
        )
        albedo = sample_uniform(
            rng, resolve(self.minimum_albedo, MINIMUM_ALBEDO), resolve(self.maximum_albedo, MAXIMUM_ALBEDO), "albedo"
        )
        logger.debug(f"Generated moon of {mass:.4f} Mearth with albedo {albedo:.2f}")
        return Moon(mass=mass, albedo=albedo)
