import logging
import math
from typing import Optional

import pydantic

from starforge.constraints import BaseConstraints, resolve
from starforge.random_stream import RandomStream, random_point_in_sphere
from starforge.star_system import StarSystem, StarSystemConstraints
from starforge.stellar_neighborhood.constants import RADIUS_OF_STELLAR_NEIGHBORHOOD, STELLAR_NEIGHBORHOOD_DENSITY
from starforge.stellar_neighborhood.stellar_neighbor import StellarNeighbor
from starforge.stellar_neighborhood.stellar_neighborhood import StellarNeighborhood

logger = logging.getLogger(__name__)


class StellarNeighborConstraints(BaseConstraints):
    """Constraints for placing one star system inside a neighborhood of ``radius`` light years."""

    radius: Optional[float] = pydantic.Field(default=None, gt=0)
    star_system_constraints: Optional[StarSystemConstraints] = None

    @classmethod
    def habitable(cls) -> "StellarNeighborConstraints":
        return cls(star_system_constraints=StarSystemConstraints.habitable())

    def generate(self, rng: RandomStream) -> StellarNeighbor:
        radius = resolve(self.radius, RADIUS_OF_STELLAR_NEIGHBORHOOD)
        coordinates = random_point_in_sphere(rng, radius)
        star_system_constraints = resolve(self.star_system_constraints, StarSystemConstraints.default())
        star_system = StarSystem.from_constraints(star_system_constraints, rng)
        return StellarNeighbor(coordinates=coordinates, star_system=star_system)


class StellarNeighborhoodConstraints(BaseConstraints):
    """
    Constraints for creating a stellar neighborhood.

    Attributes:
        radius: Light years.
        density: Star systems per cubic light year.
        star_system_constraints: Applied to every neighbor.
    """

    radius: Optional[float] = pydantic.Field(default=None, gt=0)
    density: Optional[float] = pydantic.Field(default=None, ge=0)
    star_system_constraints: Optional[StarSystemConstraints] = None

    @classmethod
    def habitable(cls) -> "StellarNeighborhoodConstraints":
        return cls(star_system_constraints=StarSystemConstraints.habitable())

    def get_neighbor_count(self) -> int:
        radius = resolve(self.radius, RADIUS_OF_STELLAR_NEIGHBORHOOD)
        density = resolve(self.density, STELLAR_NEIGHBORHOOD_DENSITY)
        return round(density * 4.0 / 3.0 * math.pi * radius**3)

    def generate(self, rng: RandomStream) -> StellarNeighborhood:
        radius = resolve(self.radius, RADIUS_OF_STELLAR_NEIGHBORHOOD)
        count = self.get_neighbor_count()
        neighbor_constraints = StellarNeighborConstraints(
            radius=radius, star_system_constraints=self.star_system_constraints
        )
        logger.debug(f"Generating {count} neighbors within {radius} ly")
        neighbors = tuple(neighbor_constraints.generate(rng) for _ in range(count))
        return StellarNeighborhood(radius=radius, neighbors=neighbors)
