from dataclasses import dataclass, field

import astropy.units as u
import numpy as np
from astropy.table import QTable

from starforge.stellar_neighborhood.stellar_neighbor import StellarNeighbor


@dataclass(frozen=True)
class StellarNeighborhood:
    """All star systems within a sphere centered on the origin."""

    # Light years
    radius: float
    neighbors: tuple[StellarNeighbor, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.neighbors)

    @property
    def habitable_neighbors(self) -> list[StellarNeighbor]:
        return [n for n in self.neighbors if n.star_system.is_habitable]

    def to_qtable(self) -> QTable:
        """
        Tabulate the neighborhood, one row per neighbor sorted by distance from the origin.

        Positions and distances are in light years, masses in solar masses and
        luminosities in solar luminosities.
        """
        neighbors = sorted(self.neighbors, key=lambda n: n.distance)
        coordinates = np.array([n.coordinates for n in neighbors], dtype=float).reshape(-1, 3)
        return QTable(
            {
                "name": [n.star_system.name for n in neighbors],
                "x": coordinates[:, 0] * u.lyr,
                "y": coordinates[:, 1] * u.lyr,
                "z": coordinates[:, 2] * u.lyr,
                "distance": np.array([n.distance for n in neighbors], dtype=float) * u.lyr,
                "stellar_count": np.array([n.star_system.stellar_count for n in neighbors], dtype=int),
                "stellar_mass": np.array([n.star_system.stellar_mass for n in neighbors], dtype=float) * u.solMass,
                "luminosity": np.array([n.star_system.luminosity for n in neighbors], dtype=float) * u.solLum,
                "is_habitable": np.array([n.star_system.is_habitable for n in neighbors], dtype=bool),
            }
        )
