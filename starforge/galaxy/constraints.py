import logging
from typing import Optional

from starforge.constraints import BaseConstraints, resolve
from starforge.galaxy.galaxy import Galaxy
from starforge.random_stream import RandomStream
from starforge.stellar_neighborhood import StellarNeighborhoodConstraints

logger = logging.getLogger(__name__)


class GalaxyConstraints(BaseConstraints):
    stellar_neighborhood_constraints: Optional[StellarNeighborhoodConstraints] = None

    @classmethod
    def habitable(cls) -> "GalaxyConstraints":
        return cls(stellar_neighborhood_constraints=StellarNeighborhoodConstraints.habitable())

    def generate(self, rng: RandomStream) -> Galaxy:
        constraints = resolve(self.stellar_neighborhood_constraints, StellarNeighborhoodConstraints.default())
        stellar_neighborhood = constraints.generate(rng)
        logger.debug(f"Generated galaxy with {len(stellar_neighborhood)} charted star systems")
        return Galaxy(stellar_neighborhood=stellar_neighborhood)
